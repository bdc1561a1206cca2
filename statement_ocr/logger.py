# statement_ocr/logger.py
import logging
import sys

from statement_ocr.config import AppConfig

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str, level: str = None) -> logging.Logger:
    """
    Configures and returns a logger with console output.

    Args:
        name (str): Name of the logger.
        level (str): Level name; defaults to AppConfig.LOG_LEVEL.

    Returns:
        logging.Logger: Configured logger instance.
    """
    level = level or AppConfig.LOG_LEVEL
    logger = logging.getLogger(name)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)

    return logger
