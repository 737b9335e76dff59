"""Plain-text trends report: spending by category by month.

Rows are categories (in the order they were first seen), columns are month
keys in calendar order with ``unknown`` last, and each cell is the sum of
withdrawals. A ``Total`` column and row close the table and the statement
summary follows it. The report is returned as a string; printing it is the
caller's job.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from .dates import UNKNOWN_MONTH, month_key
from .models import TransactionSet

_TOTAL = "Total"


def _money(value: Decimal) -> str:
    return f"{value:,.2f}"


def _month_order(keys: Sequence[str]) -> list[str]:
    known = sorted(k for k in keys if k != UNKNOWN_MONTH)
    return known + [UNKNOWN_MONTH] if UNKNOWN_MONTH in keys else known


def report_trends(result: TransactionSet) -> str:
    months = _month_order(list(result.monthly_grouped))

    rows: list[list[str]] = []
    column_totals = {m: Decimal("0") for m in months}
    for category, items in result.categorized.items():
        cells: dict[str, Decimal] = {m: Decimal("0") for m in months}
        for tx in items:
            cells[month_key(tx.date)] += tx.withdrawal
        for m in months:
            column_totals[m] += cells[m]
        row_total = sum(cells.values(), Decimal("0"))
        rows.append([category, *(_money(cells[m]) for m in months), _money(row_total)])

    header = ["Category", *months, _TOTAL]
    footer = [
        _TOTAL,
        *(_money(column_totals[m]) for m in months),
        _money(result.summary.total_withdrawals),
    ]
    table = [header, *rows, footer]

    widths = [max(len(r[i]) for r in table) for i in range(len(header))]

    def _fmt(row: list[str]) -> str:
        first = row[0].ljust(widths[0])
        rest = (cell.rjust(w) for cell, w in zip(row[1:], widths[1:], strict=True))
        return "  ".join([first, *rest]).rstrip()

    rule = "-" * len(_fmt(header))
    lines = [_fmt(header), rule, *(_fmt(r) for r in rows), rule, _fmt(footer), ""]
    lines.append(f"Total deposits:    {_money(result.summary.total_deposits)}")
    lines.append(f"Total withdrawals: {_money(result.summary.total_withdrawals)}")
    lines.append(f"Net amount:        {_money(result.summary.net_amount)}")
    return "\n".join(lines)


__all__ = ["report_trends"]
