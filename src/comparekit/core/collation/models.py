"""Collation option models.

Options mirror the familiar ``Intl.Collator`` option names so tables written
for other runtimes carry over. Mappings may use either the camelCase names
(``ignorePunctuation``) or their snake_case equivalents.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any


class Usage(Enum):
    """Whether the collator orders strings or matches them."""

    SORT = "sort"
    SEARCH = "search"


class Sensitivity(Enum):
    """Which string differences make two strings unequal."""

    BASE = "base"  # a ≠ b, a = á, a = A
    ACCENT = "accent"  # a ≠ b, a ≠ á, a = A
    CASE = "case"  # a ≠ b, a = á, a ≠ A
    VARIANT = "variant"  # a ≠ b, a ≠ á, a ≠ A


class LocaleMatcher(Enum):
    """How a list of requested locales is matched against available ones."""

    LOOKUP = "lookup"  # truncate subtags until an available locale matches
    BEST_FIT = "best fit"  # match on language alone


class CaseFirst(Enum):
    """Whether upper or lower case sorts first."""

    UPPER = "upper"
    LOWER = "lower"
    FALSE = "false"  # locale default


_ALIASES = {
    "caseFirst": "case_first",
    "ignorePunctuation": "ignore_punctuation",
    "localeMatcher": "locale_matcher",
}


@dataclass(slots=True, frozen=True)
class CollatorOptions:
    """Options forwarded to the platform collator.

    ``None`` means "not specified": the value falls back to
    ``CollationSettings`` and then to the collator's own default.

    Attributes:
        usage: Sort or search collation.
        sensitivity: Strength of comparison.
        numeric: Compare digit runs by numeric value ("2" < "10").
        case_first: Upper- or lower-case first ordering.
        ignore_punctuation: Skip whitespace and punctuation.
        collation: Locale collation variant, e.g. ``"phonebk"`` or ``"pinyin"``.
        locale_matcher: Negotiation used when several locales are requested.
    """

    usage: Usage | None = None
    sensitivity: Sensitivity | None = None
    numeric: bool | None = None
    case_first: CaseFirst | None = None
    ignore_punctuation: bool | None = None
    collation: str | None = None
    locale_matcher: LocaleMatcher | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> CollatorOptions:
        """Build options from a plain mapping.

        Raises:
            TypeError: If a key is not a known option.
            ValueError: If an enumerated option has an unknown value.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise TypeError(f"Unknown collator option: {key!r}")
            values[name] = value
        return cls(**values)

    def __post_init__(self) -> None:
        # Coerce plain strings ("base", "upper") to their enum members
        for name, enum_type in (
            ("usage", Usage),
            ("sensitivity", Sensitivity),
            ("case_first", CaseFirst),
            ("locale_matcher", LocaleMatcher),
        ):
            value = getattr(self, name)
            if value is not None and not isinstance(value, enum_type):
                object.__setattr__(self, name, enum_type(value))

    def with_defaults(self, defaults: CollatorOptions) -> CollatorOptions:
        """Fill unset options from ``defaults``; explicit values win."""
        unset = {
            f.name: getattr(defaults, f.name)
            for f in fields(self)
            if getattr(self, f.name) is None
        }
        return replace(self, **unset)
