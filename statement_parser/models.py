"""Data models for ``statement_parser``.

Domain values are frozen dataclasses built fresh on every parse:

- :class:`Transaction`: one dated withdrawal or deposit.
- :class:`Summary`: totals over a transaction list.
- :class:`TransactionSet`: the transactions plus their monthly and category
  partitions and the summary.

The pydantic models at the bottom are the JSON payload shape handed to a
presentation layer (camelCase keys, amounts as numbers).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

_ZERO = Decimal("0.00")

# ---------------------------------------------------------------------------
# Domain values
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single statement transaction.

    Attributes
    ----------
    description:
        Trimmed free text with internal whitespace collapsed; never empty.
    withdrawal, deposit:
        Non-negative amounts rounded to cents; zero when the column was empty.
        At least one of them is non-zero.
    amount:
        ``deposit - withdrawal``.
    date:
        The date as written on the statement (``"08 JUL 2024"``), if any.
    category:
        Keyword category or ``"misc"``.
    """

    description: str
    withdrawal: Decimal
    deposit: Decimal
    amount: Decimal
    date: str | None
    category: str


@dataclass(frozen=True, slots=True)
class Summary:
    total_deposits: Decimal = _ZERO
    total_withdrawals: Decimal = _ZERO
    net_amount: Decimal = _ZERO


@dataclass(frozen=True, slots=True)
class TransactionSet:
    """Everything derived from one statement text.

    ``monthly_grouped`` and ``categorized`` partition ``transactions``: every
    transaction sits in exactly one bucket of each, in source order. Bucket
    keys appear in the order they were first seen.
    """

    transactions: tuple[Transaction, ...] = ()
    monthly_grouped: Mapping[str, tuple[Transaction, ...]] = field(default_factory=dict)
    categorized: Mapping[str, tuple[Transaction, ...]] = field(default_factory=dict)
    summary: Summary = field(default_factory=Summary)


# ---------------------------------------------------------------------------
# JSON payload DTOs
# ---------------------------------------------------------------------------


class _Payload(BaseModel):
    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TransactionPayload(_Payload):
    description: str
    withdrawal: float
    deposit: float
    amount: float
    date: str | None = None
    category: str

    @field_validator("description")
    @classmethod
    def _description_non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("description must be non-empty")
        return v

    @classmethod
    def from_transaction(cls, tx: Transaction) -> TransactionPayload:
        return cls(
            description=tx.description,
            withdrawal=float(tx.withdrawal),
            deposit=float(tx.deposit),
            amount=float(tx.amount),
            date=tx.date,
            category=tx.category,
        )


class SummaryPayload(_Payload):
    total_deposits: float
    total_withdrawals: float
    net_amount: float


class TransactionSetPayload(_Payload):
    """Top-level JSON document for one parsed statement."""

    raw_text: str | None = None
    transactions: list[TransactionPayload]
    monthly_grouped: dict[str, list[TransactionPayload]]
    categorized: dict[str, list[TransactionPayload]]
    summary: SummaryPayload

    @classmethod
    def from_result(
        cls, result: TransactionSet, *, raw_text: str | None = None
    ) -> TransactionSetPayload:
        def _many(items: tuple[Transaction, ...]) -> list[TransactionPayload]:
            return [TransactionPayload.from_transaction(tx) for tx in items]

        return cls(
            raw_text=raw_text,
            transactions=_many(result.transactions),
            monthly_grouped={k: _many(v) for k, v in result.monthly_grouped.items()},
            categorized={k: _many(v) for k, v in result.categorized.items()},
            summary=SummaryPayload(
                total_deposits=float(result.summary.total_deposits),
                total_withdrawals=float(result.summary.total_withdrawals),
                net_amount=float(result.summary.net_amount),
            ),
        )

    def to_json(self, *, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


__all__ = [
    "Summary",
    "Transaction",
    "TransactionPayload",
    "TransactionSet",
    "TransactionSetPayload",
]
