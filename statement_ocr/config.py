# statement_ocr/config.py
import os
from dotenv import load_dotenv

load_dotenv()

class AppConfig:
    """
    Application configuration class for environment variables and constants.
    """
    TESSERACT_CMD: str = os.getenv("TESSERACT_CMD", "")
    OCR_LANG: str = os.getenv("OCR_LANG", "eng")
    OCR_DPI: int = int(os.getenv("OCR_DPI", "300"))
    MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
