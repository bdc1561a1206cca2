# statement_ocr/utils/text_stats.py
from statement_ocr.models.transaction_schema import TextStats


def get_text_stats(text: str) -> TextStats:
    """
    Count characters, words and non-empty lines of recognized text.
    """
    text = text or ""
    return TextStats(
        character_count=len(text),
        word_count=len(text.split()),
        line_count=len([line for line in text.split("\n") if line.strip()]),
    )
