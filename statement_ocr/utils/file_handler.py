import logging
from typing import Optional

from statement_ocr.config import AppConfig


logger = logging.getLogger(__name__)

INVALID_TYPE_MESSAGE = "Please select an image or PDF file (JPG, PNG, GIF, PDF, etc.)"
TOO_LARGE_MESSAGE = "File size must be less than 10MB"


class UploadValidationError(ValueError):
    """
    Raised when an uploaded statement file cannot be handed to OCR.
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def validate_statement_upload(filename: str, content_type: Optional[str], size: int, max_bytes: Optional[int] = None) -> None:
    """
    Check that an upload is an image (or scanned PDF) below the size limit.

    Args:
        filename (str): Original file name, used for logging only.
        content_type (str): MIME type reported by the client.
        size (int): Size of the upload in bytes.
        max_bytes (int): Size limit; defaults to AppConfig.MAX_UPLOAD_BYTES.

    Raises:
        UploadValidationError: If the type is not accepted (400) or the file is too large (413).
    """
    max_bytes = AppConfig.MAX_UPLOAD_BYTES if max_bytes is None else max_bytes
    content_type = content_type or ""

    if not (content_type.startswith("image/") or content_type == "application/pdf"):
        logger.warning(f"Rejected upload {filename}: unsupported content type '{content_type}'")
        raise UploadValidationError(INVALID_TYPE_MESSAGE, status_code=400)

    if size > max_bytes:
        logger.warning(f"Rejected upload {filename}: {size} bytes exceeds {max_bytes}")
        raise UploadValidationError(TOO_LARGE_MESSAGE, status_code=413)
