"""Collation functionality: option models and ICU collator construction."""

from comparekit.core.collation.models import (
    CaseFirst,
    CollatorOptions,
    LocaleMatcher,
    Sensitivity,
    Usage,
)
from comparekit.core.collation.operations import (
    create_collator,
    normalize_options,
    resolve_locale,
)

__all__ = [
    # Models
    "CollatorOptions",
    "Sensitivity",
    "CaseFirst",
    "LocaleMatcher",
    "Usage",
    # Operations
    "create_collator",
    "normalize_options",
    "resolve_locale",
]
