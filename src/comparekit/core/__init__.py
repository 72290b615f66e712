"""Core functionalities: stateless comparator primitives and combinators.

Architecture Note:
    core/ contains pure, stateless building blocks. Every combinator returns
    a new comparator; nothing here holds runtime state beyond the closures it
    creates.
"""

from comparekit.core.collation import (
    CaseFirst,
    LocaleMatcher,
    CollatorOptions,
    Sensitivity,
    Usage,
    create_collator,
    normalize_options,
    resolve_locale,
)
from comparekit.core.comparator import (
    Comparator,
    LocaleComparator,
    compare,
    default_order,
    matched_first,
    matched_last,
    projected,
    reversed_order,
    tie_broken,
)
from comparekit.core.types import BaseComparator, Predicate, Transform

__all__ = [
    # Types
    "BaseComparator",
    "Predicate",
    "Transform",
    # Comparator
    "compare",
    "Comparator",
    "LocaleComparator",
    "default_order",
    "reversed_order",
    "projected",
    "matched_last",
    "matched_first",
    "tie_broken",
    # Collation
    "CollatorOptions",
    "Sensitivity",
    "CaseFirst",
    "LocaleMatcher",
    "Usage",
    "create_collator",
    "normalize_options",
    "resolve_locale",
]
