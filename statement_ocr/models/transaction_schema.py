# statement_ocr/models/transaction_schema.py
from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class TransactionRecord(BaseModel):
    """
    A single transaction reconstructed from the OCR text of a bank statement.

    Every field keeps the text exactly as it was matched; no numeric or date
    normalization happens here.
    """
    model_config = ConfigDict(frozen=True)

    date: str = ""
    description: str = ""
    amount: str = ""
    type: str = ""


class TransactionPreview(BaseModel):
    """
    Consumer-friendly view of a TransactionRecord with an ISO date and an integer amount.
    """
    date: Optional[str] = None
    description: str
    amount: Optional[int] = None
    raw_amount: str
    type: str


class TextStats(BaseModel):
    character_count: int
    word_count: int
    line_count: int


class ParseTextRequest(BaseModel):
    text: str


class ParseResult(BaseModel):
    """
    Transactions, previews and statistics extracted from one recognized text.
    """
    filename: Optional[str] = None
    text: str
    stats: TextStats
    transactions: List[TransactionRecord]
    previews: List[TransactionPreview]
