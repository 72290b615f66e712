"""Comparator functionality: models, combinator operations, and the compare factory."""

from comparekit.core.comparator.core import compare
from comparekit.core.comparator.models import Comparator, LocaleComparator
from comparekit.core.comparator.operations import (
    default_order,
    matched_first,
    matched_last,
    projected,
    reversed_order,
    tie_broken,
)

__all__ = [
    # Models
    "Comparator",
    "LocaleComparator",
    # Operations
    "default_order",
    "reversed_order",
    "projected",
    "matched_last",
    "matched_first",
    "tie_broken",
    # Core
    "compare",
]
