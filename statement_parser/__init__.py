"""Public interface for the ``statement_parser`` package.

Symbol re-exports only: the parsing entry points, the report renderer and
the public models.
"""

from .api import parse, parse_line
from .categorize import CATEGORIES, categorize
from .models import (
    Summary,
    Transaction,
    TransactionPayload,
    TransactionSet,
    TransactionSetPayload,
)
from .report import report_trends

__all__ = [
    # API
    "parse",
    "parse_line",
    "categorize",
    "report_trends",
    # Models / constants
    "CATEGORIES",
    "Summary",
    "Transaction",
    "TransactionPayload",
    "TransactionSet",
    "TransactionSetPayload",
]
