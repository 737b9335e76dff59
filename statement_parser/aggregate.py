"""Monthly/category partitions and summary totals."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from decimal import Decimal

from .amounts import quantize
from .categorize import MISC
from .dates import month_key
from .models import Summary, Transaction, TransactionSet


def _partition(
    transactions: Sequence[Transaction], key: Callable[[Transaction], str]
) -> dict[str, tuple[Transaction, ...]]:
    buckets: dict[str, list[Transaction]] = {}
    for tx in transactions:
        buckets.setdefault(key(tx), []).append(tx)
    return {k: tuple(v) for k, v in buckets.items()}


def group_by_month(transactions: Sequence[Transaction]) -> dict[str, tuple[Transaction, ...]]:
    """Partition by ``"YYYY-MM"`` month key (``"unknown"`` when undatable)."""

    return _partition(transactions, lambda tx: month_key(tx.date))


def group_by_category(
    transactions: Sequence[Transaction],
) -> dict[str, tuple[Transaction, ...]]:
    return _partition(transactions, lambda tx: tx.category or MISC)


def summarize(transactions: Sequence[Transaction]) -> Summary:
    """Total deposits and withdrawals; rounding happens once, after summing."""

    deposits = sum((tx.deposit for tx in transactions), Decimal("0"))
    withdrawals = sum((tx.withdrawal for tx in transactions), Decimal("0"))
    return Summary(
        total_deposits=quantize(deposits),
        total_withdrawals=quantize(withdrawals),
        net_amount=quantize(deposits - withdrawals),
    )


def aggregate(transactions: Sequence[Transaction]) -> TransactionSet:
    items = tuple(transactions)
    return TransactionSet(
        transactions=items,
        monthly_grouped=group_by_month(items),
        categorized=group_by_category(items),
        summary=summarize(items),
    )


__all__ = ["aggregate", "group_by_category", "group_by_month", "summarize"]
