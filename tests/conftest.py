"""Shared fixtures for the statement OCR tests."""

import pytest
from fastapi.testclient import TestClient

from statement_ocr.main import app

# Raw Tesseract output for a photographed BCA-style mutation page. None of the
# blocks carries a complete "DD Mon YYYY" date, so no record survives.
RAW_STATEMENT_SAMPLE = """
0909/FTSCY/WS95031 8000.00 MUHAMMAD

0 G IQBAL RAM

Sep TRSFE-BANKING CR

2025 IDR 8,000.00

09 TGL: 0909 QR 912 00000.00GRAB TRANS
TRANSAKSI DEBIT

Sep

2025 |DR23,500.00
0909/FTSCY/WS9503112000.00 AFIF RULLY

0 9 SETYAWA

Sep TRSFE-BANKING CR

2025 IDR12,000.00

0) Oo TGL: 0909 QRC 014 00000.00ALFAMART R
TRANSAKSI DEBIT

Sep

2025 IDR 30,300.00
"""

FRAGMENTED_STATEMENT = """
0909/FTSCY/WS95031 8000.00 MUHAMMAD
IQBAL RAM
09 Sep
2025
TRSF E-BANKING CR
IDR 8,000.00
10 Sep 2025 TGL: 0910 QR 912
GRAB TRANS
TRANSAKSI DEBIT
IDR 23,500.00
"""


@pytest.fixture
def raw_statement_sample() -> str:
    return RAW_STATEMENT_SAMPLE


@pytest.fixture
def fragmented_statement() -> str:
    return FRAGMENTED_STATEMENT


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
