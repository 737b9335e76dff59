"""Line classification for extracted statement text.

Every input line is one of three things: the start of a transaction row (it
opens with a day and month abbreviation), statement furniture that must never
become a transaction (headers, balances, totals, legal text), or a
continuation of the row above it.
"""

from __future__ import annotations

import re

from .amounts import MONEY_RE
from .dates import DATE_ANCHOR_RE

# Anchored at the start of the line, or distinctive enough to be safe inside
# a description.
_BALANCE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"^\s*TOTALS AT END OF PAGE",
        r"^\s*TOTALS\s*\$",
        r"^\s*OPENING BALANCE",
        r"^\s*CLOSING BALANCE",
        r"^\s*Total\s+(Deposits|Withdrawals)",
    )
)

_METADATA_PATTERNS: tuple[re.Pattern[str], ...] = _BALANCE_PATTERNS + tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"^\s*-{3,}",
        r"\bPage\s+\d+\s+of\s+\d+",
        r"^\s*Page\s*\(?\d*\)?\s*Break\b",
        r"^\s*Account (Number|Details|Name)",
        r"^\s*Branch Number",
        r"^\s*Statement (Number|Period)",
        r"^\s*Need to Get In Touch",
        r"^\s*ANZ (Internet|ACCESS)",
        r"^\s*Welcome\b",
        r"\bAT A GLANCE\b",
        r"^\s*Enquiries\b",
        r"Lost/Stolen",
        r"^\s*Australia and New Zealand",
        r"^\s*Transaction Details",
        r"^\s*Please retain",
        r"^\s*Date\s+Transaction Details",
        r"\bWithdrawals\b.*\bDeposits\b",
        r"^\s*blank\s*$",
    )
)

_TRANSACTION_TYPE_RE = re.compile(
    r"VISA|EFTPOS|TRANSFER|BANKING|DEBIT|PAYMENT|PURCHASE", re.IGNORECASE
)
_CURRENCY_RE = re.compile(r"\$|\bAUD\b", re.IGNORECASE)


def is_metadata_line(line: str) -> bool:
    """True for headers, balances, totals and boilerplate."""

    return any(p.search(line) for p in _METADATA_PATTERNS)


def is_balance_line(line: str) -> bool:
    """True for opening/closing balance and totals lines.

    Statements date their opening balance like a transaction row, so the
    extractor checks the text after the date against this narrower set.
    """

    return any(p.search(line) for p in _BALANCE_PATTERNS)


def is_transaction_start(line: str) -> bool:
    """True when ``line`` opens with ``<day> <MON> [<YYYY>]``."""

    return DATE_ANCHOR_RE.match(line) is not None


def looks_like_transaction(line: str) -> bool:
    """Stricter check for a single line judged on its own.

    The line must open with the date anchor and also carry either a
    transaction-type keyword or something currency-shaped.
    """

    if not is_transaction_start(line):
        return False
    if _TRANSACTION_TYPE_RE.search(line):
        return True
    return bool(_CURRENCY_RE.search(line) or MONEY_RE.search(line))


__all__ = [
    "is_balance_line",
    "is_metadata_line",
    "is_transaction_start",
    "looks_like_transaction",
]
