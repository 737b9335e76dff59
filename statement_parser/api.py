"""Public entry points for the ``statement_parser`` package.

:func:`parse` runs the whole pipeline over one extracted statement text:
block assembly, field extraction and categorization, then aggregation. It is
a pure function of its input and never raises for odd text; anything it
cannot read is left out of the result.
"""

from __future__ import annotations

from .aggregate import aggregate
from .blocks import assemble_blocks
from .extract import extract_transaction, parse_transaction_line
from .logging_setup import get_logger
from .models import Transaction, TransactionSet

logger = get_logger("statement_parser.api")


def parse(raw_text: str) -> TransactionSet:
    """Parse statement text into a :class:`TransactionSet`.

    Empty input, or input without any dated rows, gives an empty set with a
    zero summary.
    """

    # Only "\n" ends a line; other Unicode separators stay inside it.
    lines = [ln.rstrip("\r") for ln in raw_text.split("\n")] if raw_text else []

    transactions: list[Transaction] = []
    n_blocks = 0
    for block in assemble_blocks(lines):
        n_blocks += 1
        tx = extract_transaction(block)
        if tx is not None:
            transactions.append(tx)

    logger.debug(
        "Parsed %d lines into %d blocks, kept %d transactions",
        len(lines),
        n_blocks,
        len(transactions),
    )
    return aggregate(transactions)


def parse_line(line: str) -> Transaction | None:
    """Parse a single statement row judged in isolation (``None`` if rejected)."""

    return parse_transaction_line(line)


__all__ = ["parse", "parse_line"]
