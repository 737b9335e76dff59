"""Date anchors and month keys.

Statement rows open with ``<day> <MON> [<YYYY>]`` (e.g. ``08 JUL 2024``). This
module owns the month-name table, the anchor pattern used to find row
boundaries, and the conversion of a transaction's date string into the
``"YYYY-MM"`` key used for monthly grouping.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

UNKNOWN_MONTH = "unknown"

MONTH_NUMBERS: Mapping[str, int] = MappingProxyType(
    {
        "JAN": 1,
        "FEB": 2,
        "MAR": 3,
        "APR": 4,
        "MAY": 5,
        "JUN": 6,
        "JUL": 7,
        "AUG": 8,
        "SEP": 9,
        "OCT": 10,
        "NOV": 11,
        "DEC": 12,
    }
)

_MONTH_ALT = "|".join(MONTH_NUMBERS)

# Day, month abbreviation (not the prefix of a longer word), optional year.
# A four-digit run followed by a decimal part is an amount, not a year.
DATE_ANCHOR_RE = re.compile(
    r"^\s*(?P<day>\d{1,2})\s+"
    rf"(?P<month>{_MONTH_ALT})(?![A-Za-z])"
    r"(?:\s+(?P<year>\d{4})(?!\d|[.,]\d))?",
    re.IGNORECASE,
)

_NAMED_DATE_RE = re.compile(r"(\d{1,2})\s+([A-Za-z]{3})\s+(\d{4})")
_NUMERIC_DATE_RE = re.compile(r"(\d{1,4})[/\-](\d{1,2})[/\-](\d{1,4})")


@dataclass(frozen=True, slots=True)
class DateAnchor:
    """A matched row-opening date plus where it ends in the source line."""

    day: str
    month: str
    year: str | None
    end: int

    @property
    def text(self) -> str:
        parts = [self.day, self.month]
        if self.year:
            parts.append(self.year)
        return " ".join(parts)


def match_date_anchor(line: str) -> DateAnchor | None:
    """Return the anchor at the start of ``line`` or ``None``."""

    m = DATE_ANCHOR_RE.match(line)
    if m is None:
        return None
    return DateAnchor(
        day=m.group("day"),
        month=m.group("month").upper(),
        year=m.group("year"),
        end=m.end(),
    )


def _format_key(year: int, month: int) -> str:
    if not 1 <= month <= 12:
        return UNKNOWN_MONTH
    return f"{year:04d}-{month:02d}"


def month_key(date: str | None) -> str:
    """Map a transaction date string to ``"YYYY-MM"`` or ``"unknown"``.

    Accepted shapes:
    - ``DD MON YYYY`` (month abbreviation looked up in :data:`MONTH_NUMBERS`)
    - ``DD/MM/YYYY`` and ``YYYY/MM/DD`` (``-`` separators too); the year is
      whichever end is a four-digit number above 1900.

    A year of 1900 or earlier counts as unparseable in either shape.
    A day and month without a year cannot be placed and maps to ``"unknown"``.
    """

    if not date:
        return UNKNOWN_MONTH

    named = _NAMED_DATE_RE.search(date)
    if named:
        month = MONTH_NUMBERS.get(named.group(2).upper())
        if month is None:
            return UNKNOWN_MONTH
        year = int(named.group(3))
        if year <= 1900:
            return UNKNOWN_MONTH
        return _format_key(year, month)

    numeric = _NUMERIC_DATE_RE.search(date)
    if numeric:
        first, middle, last = numeric.groups()
        if len(last) == 4 and int(last) > 1900:
            return _format_key(int(last), int(middle))
        if len(first) == 4 and int(first) > 1900:
            return _format_key(int(first), int(middle))

    return UNKNOWN_MONTH


__all__ = [
    "DATE_ANCHOR_RE",
    "MONTH_NUMBERS",
    "UNKNOWN_MONTH",
    "DateAnchor",
    "match_date_anchor",
    "month_key",
]
