# statement_ocr/services/transaction_parser.py

import re
import logging
from typing import List, Optional

from statement_ocr.models.transaction_schema import TransactionRecord

logger = logging.getLogger(__name__)

# Digits are ASCII only. A byte order mark counts as whitespace.
AMOUNT_PATTERN = re.compile(r"IDR[\s\ufeff]*([0-9,]+\.?[0-9]*)", re.IGNORECASE)
DATE_PATTERN = re.compile(
    r"[0-9]{1,2}[\s\ufeff]+(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[\s\ufeff]+[0-9]{4}",
    re.IGNORECASE,
)
# Alternation order is the tie-break when two phrases start at the same position.
TYPE_PATTERN = re.compile(
    r"TRSF E-BANKING CR|TRANSAKSI DEBIT|TRANSFER|CREDIT|DEBIT",
    re.IGNORECASE,
)

WHITESPACE_RUN = re.compile(r"[\s\ufeff]+")
LEADING_NUMBER = re.compile(r"^[0-9]+[\s\ufeff]+")
EDGE_WHITESPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def _trim(text: str) -> str:
    return EDGE_WHITESPACE.sub("", text)


def reconstruct_lines(text: str) -> List[str]:
    """
    Merge OCR-fragmented lines into one logical line per transaction.

    A line holding an ``IDR`` amount closes the current logical line. Fragments
    left over after the last amount line never become a logical line.

    Args:
        text (str): Raw recognized text.

    Returns:
        List[str]: Logical lines in order of appearance.
    """
    if not text:
        return []

    lines = [_trim(line) for line in text.split("\n")]
    lines = [line for line in lines if line]

    reconstructed = []
    current = ""
    for line in lines:
        logger.debug("OCR line: %s", line)
        current += " " + line
        if AMOUNT_PATTERN.search(line):
            reconstructed.append(_trim(current))
            current = ""

    if current:
        logger.debug("Discarding trailing fragment without amount: %s", _trim(current))

    return reconstructed


def _remove_first(text: str, match: Optional[re.Match]) -> str:
    if match is None:
        return text
    return _trim(text.replace(match.group(0), "", 1))


def clean_description(description: str) -> str:
    """Collapse whitespace, drop pipe artifacts and a leading reference number."""
    description = WHITESPACE_RUN.sub(" ", description)
    description = description.replace("|", "")
    description = LEADING_NUMBER.sub("", description, count=1)
    return _trim(description)


def extract_transaction(line: str) -> Optional[TransactionRecord]:
    """
    Pull date, amount and type out of a logical line and derive the description
    from what is left.

    Returns None when the line has no date or no amount.
    """
    date_match = DATE_PATTERN.search(line)
    amount_match = AMOUNT_PATTERN.search(line)
    type_match = TYPE_PATTERN.search(line)

    date = date_match.group(0) if date_match else ""
    amount = f"IDR {amount_match.group(1)}" if amount_match else ""
    txn_type = type_match.group(0) if type_match else ""

    if not date or not amount:
        logger.debug("Skipping logical line without date or amount: %s", line)
        return None

    description = line
    for match in (date_match, amount_match, type_match):
        description = _remove_first(description, match)

    return TransactionRecord(
        date=date,
        description=clean_description(description),
        amount=amount,
        type=txn_type,
    )


def parse_transactions(text: str) -> List[TransactionRecord]:
    """
    Reconstruct transactions from the OCR text of a bank statement.

    Never raises: empty or unparseable text gives an empty list.

    Args:
        text (str): Raw recognized text.

    Returns:
        List[TransactionRecord]: Records with both a date and an amount, in text order.
    """
    transactions = []
    for line in reconstruct_lines(text):
        transaction = extract_transaction(line)
        if transaction is not None:
            transactions.append(transaction)

    logger.info(f"Parsed {len(transactions)} transactions from OCR text")
    return transactions
