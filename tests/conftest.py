"""Pytest configuration shared by the statement parser tests.

The CLI loads ``.env`` from the working directory and reads
``STATEMENT_PARSER_LOG_LEVEL``. To keep tests hermetic, every test runs from
its own temporary directory with that variable unset.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STATEMENT_PARSER_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)


# Two pages of an ANZ-style statement as a PDF text extractor emits it: empty
# cells show up as the word "blank" and rows spill over several lines.
STATEMENT_TEXT = textwrap.dedent(
    """\
    ANZ ACCESS ADVANTAGE STATEMENT
    Account Number 012-345 678901234
    Statement Period 01 JUL 2024 TO 31 AUG 2024
    Date Transaction Details Withdrawals ($) Deposits ($) Balance ($)
    01 JUL 2024 OPENING BALANCE blank blank 1,000.00
    08 JUL 2024 VISA DEBIT PURCHASE CARD 4321
    COFFEE SHOP MELBOURNE
    EFFECTIVE DATE 06 JUL 2024 4.50 blank 995.50
    10 JUL 2024 PAY/SALARY FROM ACME PTY LTD blank 2,500.00 3,495.50
    15 JUL 2024 EFTPOS WOOLWORTHS 1234 52.30 blank 3,443.20
    TOTALS AT END OF PAGE $56.80 $2,500.00
    ----------------Page (0) Break----------------
    02 AUG 2024 ANZ M-BANKING PAYMENT 123456
    TO CITY RENTALS LANDLORD
    1,200.00 blank 2,243.20
    05 AUG 2024 TRANSFER FROM J SMITH
    EFFECTIVE DATE 04 AUG 2024 blank 150.00 2,393.20
    CLOSING BALANCE 2,393.20
    """
)


@pytest.fixture
def statement_text() -> str:
    return STATEMENT_TEXT


@pytest.fixture
def statement_file(tmp_path: Path, statement_text: str) -> Path:
    p = tmp_path / "statement.txt"
    p.write_text(statement_text, encoding="utf-8")
    return p
