# statement_ocr/services/statement_ocr.py

import io
import logging
from typing import Optional

import pytesseract
from PIL import Image
from pdf2image import convert_from_bytes

from statement_ocr.config import AppConfig

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"

if AppConfig.TESSERACT_CMD:
    pytesseract.pytesseract.tesseract_cmd = AppConfig.TESSERACT_CMD


class StatementOCR:
    """
    Hands statement images or scanned PDFs to Tesseract and returns the recognized text.
    """

    def __init__(self, lang: Optional[str] = None, dpi: Optional[int] = None):
        """
        Initialize StatementOCR.

        Args:
            lang (str): Tesseract language code(s), e.g. "eng" or "eng+ind".
            dpi (int): Dots per inch used when converting PDF pages to images.
        """
        self.lang = lang or AppConfig.OCR_LANG
        self.dpi = dpi or AppConfig.OCR_DPI

    def extract_text_from_image_bytes(self, image_bytes: bytes) -> str:
        """
        Run OCR on a single statement image.

        Args:
            image_bytes (bytes): Raw image content (PNG, JPEG, ...).

        Returns:
            str: Recognized text.
        """
        try:
            logger.info("Running OCR on statement image...")
            with Image.open(io.BytesIO(image_bytes)) as image:
                text = pytesseract.image_to_string(image, lang=self.lang)
            logger.info(f"OCR recognized {len(text)} characters.")
            return text
        except Exception as e:
            logger.error(f"Failed to extract text from image bytes: {e}")
            raise

    def extract_text_from_pdf_bytes(self, pdf_bytes: bytes) -> str:
        """
        Run OCR on every page of a scanned statement PDF.

        Args:
            pdf_bytes (bytes): Raw PDF content.

        Returns:
            str: Recognized text of all pages, joined by newlines.
        """
        try:
            logger.info("Converting PDF bytes to images...")
            images = convert_from_bytes(pdf_bytes, dpi=self.dpi)
            pages = []
            for page_number, image in enumerate(images, start=1):
                logger.info(f"Running OCR on statement page {page_number}...")
                pages.append(pytesseract.image_to_string(image, lang=self.lang))
            logger.info("OCR extraction from PDF completed.")
            return "\n".join(pages)
        except Exception as e:
            logger.error(f"Failed to extract text from PDF bytes: {e}")
            raise

    def extract_text(self, data: bytes, content_type: str) -> str:
        if content_type == PDF_CONTENT_TYPE:
            return self.extract_text_from_pdf_bytes(data)
        return self.extract_text_from_image_bytes(data)
