# statement_ocr/services/transaction_preview.py

import re
import logging
from datetime import datetime
from typing import List, Optional, Sequence

from statement_ocr.models.transaction_schema import TransactionPreview, TransactionRecord

logger = logging.getLogger(__name__)

STATEMENT_DATE_FORMAT = "%d %b %Y"


def to_iso_date(date_text: str) -> Optional[str]:
    """
    Convert a statement date such as "09 Sep 2025" into "2025-09-09".

    Returns None for anything strptime cannot read.
    """
    if not date_text:
        return None
    normalized = " ".join(date_text.split()).title()
    try:
        return datetime.strptime(normalized, STATEMENT_DATE_FORMAT).date().isoformat()
    except ValueError:
        logger.warning(f"Could not convert statement date '{date_text}' to ISO format")
        return None


def idr_to_int(amount_text: str) -> Optional[int]:
    """
    Convert "IDR 8,000.00" into 8000.

    Thousands separators are dropped and the fractional part is ignored.
    Returns None when no digits are present.
    """
    if not amount_text:
        return None
    value = re.sub(r"^\s*IDR\s*", "", amount_text, flags=re.IGNORECASE)
    value = value.replace(",", "")
    value = re.sub(r"\.00$", "", value)
    digits = re.match(r"\d+", value)
    if not digits:
        return None
    return int(digits.group(0))


def to_preview(record: TransactionRecord) -> TransactionPreview:
    return TransactionPreview(
        date=to_iso_date(record.date),
        description=record.description,
        amount=idr_to_int(record.amount),
        raw_amount=record.amount,
        type=record.type,
    )


def build_preview(records: Sequence[TransactionRecord]) -> List[TransactionPreview]:
    """
    Build the preview list shown next to the parsed transactions.

    Args:
        records (Sequence[TransactionRecord]): Output of parse_transactions.

    Returns:
        List[TransactionPreview]: One preview per record, same order.
    """
    return [to_preview(record) for record in records]
