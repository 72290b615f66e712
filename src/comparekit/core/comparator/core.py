"""The ``compare`` factory: core constructor and prefab comparators.

Usage:
    from comparekit import compare

    # Default ordering
    compare()(1, 2)  # -1

    # Wrap an existing three-way function
    by_length = compare(lambda a, b: len(a) - len(b))

    # Sort by a projected key
    case_insensitive = compare.on(str.lower)

    # Locale-aware collation (requires comparekit[icu])
    german = compare.locale("de", {"sensitivity": "base"})
    german.collator  # underlying icu.Collator
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from comparekit.config.settings import CollationSettings
from comparekit.core.collation.operations import Locales, Options, create_collator
from comparekit.core.comparator.models import Comparator, LocaleComparator
from comparekit.core.comparator.operations import default_order
from comparekit.core.types import BaseComparator


class _CompareFactory:
    """Comparator factory. Used as compare(...), compare.on(...) or compare.locale(...)."""

    def __call__[T](self, func: BaseComparator[T] | None = None) -> Comparator[T]:
        """Wrap a three-way comparison function as a ``Comparator``.

        Args:
            func: Function returning negative/zero/positive. Defaults to the
                values' own ordering (``<`` and ``>``).

        Returns:
            New comparator invoking ``func``.
        """
        return Comparator(default_order if func is None else func)

    def on[T](self, transform: Callable[[T], Any]) -> Comparator[T]:
        """Default ordering of ``transform(value)``.

        Usage:
            people.sort(key=compare.on(lambda p: p.age).to_key())
        """
        return self().from_(transform)

    def locale(
        self,
        locales: Locales = None,
        options: Options = None,
        *,
        settings: CollationSettings | None = None,
    ) -> LocaleComparator:
        """Locale-aware string comparator.

        Args:
            locales: BCP 47 tag or sequence of tags; the first is used.
            options: CollatorOptions, or a mapping such as
                ``{"sensitivity": "base", "numeric": True}``.
            settings: Defaults for unset values; read from the environment
                when omitted.

        Returns:
            Comparator over strings exposing the collator as ``.collator``.

        Raises:
            ImportError: If PyICU is not installed.
            TypeError: If options has an unsupported format or unknown key.
            ValueError: If an option value is not recognized.
        """
        settings = settings if settings is not None else CollationSettings()
        collator = create_collator(
            locales,
            options,
            defaults=settings.collator_defaults(),
            fallback_locale=settings.locale,
        )
        return LocaleComparator(collator)


compare = _CompareFactory()
