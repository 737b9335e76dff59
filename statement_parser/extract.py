"""Turn a block of statement lines into a :class:`Transaction`.

The first line carries the date and the start of the description; later lines
either continue the description or carry the money columns (often on an
``EFFECTIVE DATE`` annotation). Blocks that yield no usable description or no
non-zero amount are dropped.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import Decimal

from .amounts import quantize, split_columns, strip_money_tokens
from .categorize import categorize
from .dates import match_date_anchor
from .lines import is_balance_line, is_metadata_line, looks_like_transaction
from .logging_setup import get_logger
from .models import Transaction

logger = get_logger("statement_parser.extract")

_EFFECTIVE_DATE_RE = re.compile(r"^EFFECTIVE DATE", re.IGNORECASE)
_EFFECTIVE_TAIL_RE = re.compile(r"EFFECTIVE DATE.*", re.IGNORECASE)

_MIN_DESCRIPTION_LEN = 2
_ZERO = Decimal("0")


def _clean_description(parts: Sequence[str]) -> str:
    text = _EFFECTIVE_TAIL_RE.sub("", " ".join(parts))
    return " ".join(strip_money_tokens(text).split())


def extract_transaction(block: Sequence[str]) -> Transaction | None:
    """Build a transaction from ``block`` or return ``None`` to discard it.

    Amounts are read from every line with :func:`split_columns`; when several
    lines carry amounts the later line wins for the column it fills. The
    description is the first line after its date plus each continuation line
    that held no amount, skipping ``EFFECTIVE DATE`` annotations.
    """

    if not block:
        return None

    head = block[0]
    anchor = match_date_anchor(head)
    if anchor is None:
        return None

    remainder = head[anchor.end :].strip()
    if is_balance_line(remainder):
        logger.debug("Skipping dated balance line: %r", head.strip())
        return None

    parts: list[str] = [remainder]
    withdrawal = _ZERO
    deposit = _ZERO

    for pos, raw in enumerate(block):
        line = remainder if pos == 0 else raw.strip()
        if not line:
            continue

        split = split_columns(line, context=" ".join(parts))
        if split.withdrawal is not None:
            withdrawal = split.withdrawal
        if split.deposit is not None:
            deposit = split.deposit

        if pos == 0 or split.found or _EFFECTIVE_DATE_RE.match(line):
            continue
        parts.append(line)

    description = _clean_description(parts)
    if len(description) < _MIN_DESCRIPTION_LEN:
        logger.debug("Discarding block without description: %r", block)
        return None
    if withdrawal == 0 and deposit == 0:
        logger.debug("Discarding block without amount: %r", block)
        return None

    withdrawal = quantize(withdrawal)
    deposit = quantize(deposit)
    return Transaction(
        description=description,
        withdrawal=withdrawal,
        deposit=deposit,
        amount=deposit - withdrawal,
        date=anchor.text,
        category=categorize(description),
    )


def parse_transaction_line(line: str) -> Transaction | None:
    """Parse one line on its own, with the stricter single-line checks.

    The line must not be blank or metadata, and must pass
    :func:`looks_like_transaction`; it is then extracted as a one-line block.
    """

    if not line.strip() or is_metadata_line(line) or not looks_like_transaction(line):
        return None
    return extract_transaction([line])


__all__ = ["extract_transaction", "parse_transaction_line"]
