"""Keyword categorization of transaction descriptions.

Categories are tried in the order of :data:`CATEGORY_KEYWORDS`; the first one
with a keyword occurring anywhere in the lower-cased description wins, so a
description mentioning both a supermarket and a cafe is ``groceries``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

MISC = "misc"

CATEGORY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "groceries": (
            "supermarket",
            "grocery",
            "tesco",
            "coles",
            "woolworths",
            "aldi",
            "fresh",
            "markets",
            "food store",
        ),
        "transport": (
            "uber",
            "lyft",
            "taxi",
            "bus",
            "train",
            "railway",
            "ptv",
            "metro",
            "parking",
            "gas station",
            "fuel",
            "petrol",
            "diesel",
        ),
        "utilities": (
            "electricity",
            "water",
            "gas",
            "internet",
            "phone",
            "mobile",
            "telecom",
            "utility",
        ),
        "rent": ("rent", "landlord", "property", "housing"),
        "education": (
            "tuition",
            "school",
            "university",
            "college",
            "course",
            "training",
            "books",
            "education",
        ),
        "shopping": (
            "mall",
            "store",
            "amazon",
            "ebay",
            "shopping",
            "boutique",
            "fashion",
            "retail",
            "target",
            "walmart",
        ),
        "food": (
            "restaurant",
            "cafe",
            "coffee",
            "pizza",
            "burger",
            "diner",
            "bistro",
            "bar",
            "pub",
            "fast food",
            "delivery",
        ),
        "entertainment": (
            "cinema",
            "movie",
            "theater",
            "concert",
            "music",
            "gaming",
            "netflix",
            "spotify",
            "game",
        ),
        "healthcare": (
            "pharmacy",
            "hospital",
            "doctor",
            "clinic",
            "medical",
            "dental",
            "health",
        ),
    }
)

CATEGORIES: tuple[str, ...] = (*CATEGORY_KEYWORDS, MISC)


def categorize(description: str) -> str:
    """Return the first matching category for ``description``, else ``"misc"``."""

    lowered = description.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return category
    return MISC


__all__ = ["CATEGORIES", "CATEGORY_KEYWORDS", "MISC", "categorize"]
