import pytest

from statement_ocr.config import AppConfig
from statement_ocr.utils.file_handler import (
    INVALID_TYPE_MESSAGE,
    TOO_LARGE_MESSAGE,
    UploadValidationError,
    validate_statement_upload,
)


@pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "image/gif", "image/bmp", "image/webp", "application/pdf"])
def test_accepts_images_and_pdfs(content_type):
    validate_statement_upload("statement", content_type, 1024 * 1024)


def test_rejects_non_image_files():
    with pytest.raises(UploadValidationError) as exc_info:
        validate_statement_upload("notes.txt", "text/plain", 10)

    assert exc_info.value.message == INVALID_TYPE_MESSAGE
    assert exc_info.value.status_code == 400


def test_rejects_missing_content_type():
    with pytest.raises(UploadValidationError):
        validate_statement_upload("blob", None, 10)


def test_rejects_oversized_files():
    with pytest.raises(UploadValidationError) as exc_info:
        validate_statement_upload("big.jpg", "image/jpeg", 15 * 1024 * 1024)

    assert exc_info.value.message == TOO_LARGE_MESSAGE
    assert exc_info.value.status_code == 413


def test_size_limit_comes_from_config(monkeypatch):
    monkeypatch.setattr(AppConfig, "MAX_UPLOAD_BYTES", 100)

    with pytest.raises(UploadValidationError):
        validate_statement_upload("small.png", "image/png", 101)
    validate_statement_upload("small.png", "image/png", 100)


def test_rejection_message_names_accepted_types():
    with pytest.raises(UploadValidationError) as exc_info:
        validate_statement_upload("archive.zip", "application/zip", 10)

    assert "image" in exc_info.value.message
    assert "PDF" in exc_info.value.message
