"""comparekit: composable three-way comparators.

Usage:
    from comparekit import compare

    @dataclass
    class Person:
        name: str
        age: int

    # By name, oldest first among namesakes
    by_name_then_age = compare.on(lambda p: p.name).then(
        compare.on(lambda p: p.age).reverse()
    )
    people.sort(key=by_name_then_age.to_key())

    # Numbers first, then strings in reverse order
    mixed = compare().append(lambda x: isinstance(x, str), compare().reverse())

    # Locale-aware, case-insensitive
    names = compare.locale("en", {"sensitivity": "base"})
"""

__version__ = "0.1.0"

# Configuration
from comparekit.config import CollationSettings

# Core primitives
from comparekit.core import (
    BaseComparator,
    CaseFirst,
    LocaleMatcher,
    CollatorOptions,
    Comparator,
    LocaleComparator,
    Sensitivity,
    Usage,
    compare,
    default_order,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "compare",
    "Comparator",
    "LocaleComparator",
    "BaseComparator",
    "default_order",
    # Collation
    "CollatorOptions",
    "Sensitivity",
    "CaseFirst",
    "LocaleMatcher",
    "Usage",
    # Config
    "CollationSettings",
]
