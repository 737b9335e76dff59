"""Money tokens and withdrawal/deposit column disambiguation.

Extracted statement text loses the table geometry, so a row such as::

    VISA PURCHASE COFFEE SHOP blank 4.50 1,204.50

only tells us which amounts exist and where the extractor wrote the literal
placeholder ``blank`` for an empty cell. The columns are always ordered
withdrawal, deposit, balance. :func:`split_columns` turns one line into a
:class:`ColumnSplit` using these rules, in order:

1. Placeholders and retained amounts separated only by whitespace form a run
   of table cells. If a run holds both kinds, its cells map positionally onto
   withdrawal, deposit, balance (``blank 4.50`` is a deposit, ``52.30 blank``
   a withdrawal). A leading ``$`` belongs to its amount cell. Two placeholders
   before one amount (``blank blank 4.50``) read as a balance-only row rather
   than a deposit: the amount sits in the third column.
2. Without such a run, two or more amounts are withdrawal then deposit, and a
   third is the balance.
3. A lone amount is a deposit when the surrounding context mentions a
   transfer or deposit, otherwise a withdrawal.

Amounts of 100,000 or more are treated as account/reference numbers and never
become cells.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

PLACEHOLDER = "blank"
AMOUNT_CEILING = Decimal("100000")

# Thousands commas, then ``.`` or ``,`` before exactly two decimals.
MONEY_PATTERN = r"\d+(?:,\d{3})*[.,]\d{2}(?!\d)"
MONEY_RE = re.compile(MONEY_PATTERN)

_CELL_RE = re.compile(
    rf"(?P<placeholder>\b{PLACEHOLDER}\b)|(?P<amount>\$?{MONEY_PATTERN})", re.IGNORECASE
)
_STRIP_AMOUNT_RE = re.compile(rf"\$?{MONEY_PATTERN}")
_STRIP_PLACEHOLDER_RE = re.compile(rf"\b{PLACEHOLDER}\b", re.IGNORECASE)
_DEPOSIT_HINT_RE = re.compile(r"TRANSFER|TFER|DEPOSIT", re.IGNORECASE)

_CENT = Decimal("0.01")


def to_decimal(token: str) -> Decimal:
    """Convert a money token to ``Decimal``.

    The last separator is the decimal point whether it was written as ``.``
    or ``,``; every earlier comma is a thousands separator. A leading ``$``
    is ignored.
    """

    token = token.lstrip("$")
    whole, fraction = token[:-3], token[-2:]
    return Decimal(f"{whole.replace(',', '')}.{fraction}")


def quantize(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True, slots=True)
class Cell:
    """A table cell recovered from text: a placeholder (``value is None``) or an amount."""

    value: Decimal | None
    start: int
    end: int

    @property
    def is_placeholder(self) -> bool:
        return self.value is None


@dataclass(frozen=True, slots=True)
class ColumnSplit:
    """Result of splitting one line into its money columns.

    ``found`` records whether the line held any retained amount at all, even
    when every amount ended up in the balance column.
    """

    withdrawal: Decimal | None = None
    deposit: Decimal | None = None
    balance: Decimal | None = None
    found: bool = False


def iter_cells(line: str) -> Iterator[Cell]:
    """Yield placeholders and retained amounts in line order."""

    for m in _CELL_RE.finditer(line):
        token = m.group("amount")
        if token is None:
            yield Cell(value=None, start=m.start(), end=m.end())
            continue
        value = to_decimal(token)
        if value >= AMOUNT_CEILING:
            continue
        yield Cell(value=value, start=m.start(), end=m.end())


def _runs(line: str, cells: Sequence[Cell]) -> list[list[Cell]]:
    runs: list[list[Cell]] = []
    for cell in cells:
        if runs and not line[runs[-1][-1].end : cell.start].strip():
            runs[-1].append(cell)
        else:
            runs.append([cell])
    return runs


def _placeholder_run(line: str, cells: Sequence[Cell]) -> list[Cell] | None:
    mixed = [
        run
        for run in _runs(line, cells)
        if any(c.is_placeholder for c in run) and any(not c.is_placeholder for c in run)
    ]
    if not mixed:
        return None
    run = mixed[-1]
    # Columns are trailing; a longer run keeps its last three cells.
    return run[-3:] if len(run) > 3 else run


def split_columns(line: str, *, context: str = "") -> ColumnSplit:
    """Assign the amounts on ``line`` to withdrawal/deposit/balance.

    ``context`` is the text accumulated for the transaction so far; it only
    matters for a lone amount with no placeholder next to it.
    """

    cells = list(iter_cells(line))
    amounts = [c.value for c in cells if c.value is not None]
    if not amounts:
        return ColumnSplit()

    run = _placeholder_run(line, cells)
    if run is not None:
        columns = [c.value for c in run] + [None] * (3 - len(run))
        return ColumnSplit(
            withdrawal=columns[0], deposit=columns[1], balance=columns[2], found=True
        )

    if len(amounts) >= 2:
        return ColumnSplit(
            withdrawal=amounts[0],
            deposit=amounts[1],
            balance=amounts[2] if len(amounts) > 2 else None,
            found=True,
        )

    if _DEPOSIT_HINT_RE.search(f"{context} {line}"):
        return ColumnSplit(deposit=amounts[0], found=True)
    return ColumnSplit(withdrawal=amounts[0], found=True)


def strip_money_tokens(text: str) -> str:
    """Remove amount tokens (with an optional ``$``) and placeholder words."""

    return _STRIP_PLACEHOLDER_RE.sub(" ", _STRIP_AMOUNT_RE.sub(" ", text))


__all__ = [
    "AMOUNT_CEILING",
    "MONEY_RE",
    "PLACEHOLDER",
    "Cell",
    "ColumnSplit",
    "iter_cells",
    "quantize",
    "split_columns",
    "strip_money_tokens",
    "to_decimal",
]
