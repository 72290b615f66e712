"""Build ICU collators from locale tags and ``CollatorOptions``.

ICU is the same collation engine browsers use behind ``Intl.Collator``; this
module only maps option names onto ICU attributes; the comparison rules stay
with ICU.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence, Set
from typing import TYPE_CHECKING, Any

from comparekit.core.collation.models import (
    CaseFirst,
    CollatorOptions,
    LocaleMatcher,
    Sensitivity,
    Usage,
)

if TYPE_CHECKING:
    import icu

logger = logging.getLogger(__name__)

type Locales = str | Sequence[str] | None
type Options = CollatorOptions | Mapping[str, Any] | None


def _import_icu() -> Any:
    try:
        import icu
    except ImportError as e:
        raise ImportError(
            "PyICU is required for locale-aware comparators. "
            "Install with: pip install comparekit[icu]"
        ) from e
    return icu


def normalize_options(options: Options) -> CollatorOptions:
    """Convert the accepted option formats to ``CollatorOptions``.

    Raises:
        TypeError: If options is neither CollatorOptions nor a mapping.
    """
    if options is None:
        return CollatorOptions()
    if isinstance(options, CollatorOptions):
        return options
    if isinstance(options, Mapping):
        return CollatorOptions.from_mapping(options)
    raise TypeError(f"Invalid collator options: {options!r}")


def _is_available(tag: str, available: Set[str], matcher: LocaleMatcher) -> bool:
    # Compare ICU-style names ("sv_se") without extensions or private use
    subtags = tag.split("-u-")[0].split("-x-")[0].lower().split("-")
    if matcher is LocaleMatcher.LOOKUP:
        return any("_".join(subtags[:n]) in available for n in range(len(subtags), 0, -1))
    return subtags[0] in {name.split("_")[0] for name in available}


def resolve_locale(
    locales: Locales,
    options: CollatorOptions,
    fallback: str | None = None,
    available: Set[str] | None = None,
) -> str | None:
    """Pick the BCP 47 tag a collator is created for.

    Blank tags are ignored. Without ``available``, the first requested tag
    wins. With it, the first tag the collator supports wins, matched
    according to ``options.locale_matcher`` (best fit by default). When no
    tag is requested or none is supported, ``fallback`` is used, and ``None``
    is returned when that is unset too (ICU default locale). A collation
    variant, or search usage, is added as a ``-u-co-`` extension unless the
    tag already names one.

    Args:
        locales: Tag, sequence of tags, or None.
        options: Normalized options.
        fallback: Configured default tag.
        available: Lower-cased ICU locale names the collator supports.

    Returns:
        Language tag, or None for the ICU default locale.
    """
    requested = [locales] if isinstance(locales, str) else list(locales or ())
    candidates = [tag.strip() for tag in requested if tag.strip()]
    if available is not None:
        matcher = options.locale_matcher or LocaleMatcher.BEST_FIT
        candidates = [tag for tag in candidates if _is_available(tag, available, matcher)]
    tag = candidates[0] if candidates else (fallback or None)

    variant = options.collation
    if variant is None and options.usage is Usage.SEARCH:
        variant = "search"
    if variant is None or (tag is not None and "-co-" in tag):
        return tag

    base = tag if tag is not None else _import_icu().Locale.getDefault().toLanguageTag()
    if "-u-" in base:
        return f"{base}-co-{variant}"
    return f"{base}-u-co-{variant}"


def _apply_options(collator: icu.Collator, options: CollatorOptions) -> None:
    icu_mod = _import_icu()
    attr = icu_mod.UCollAttribute
    value = icu_mod.UCollAttributeValue

    strengths = {
        Sensitivity.BASE: value.PRIMARY,
        Sensitivity.ACCENT: value.SECONDARY,
        Sensitivity.CASE: value.PRIMARY,
        Sensitivity.VARIANT: value.TERTIARY,
    }
    if options.sensitivity is not None:
        collator.setAttribute(attr.STRENGTH, strengths[options.sensitivity])
        case_level = value.ON if options.sensitivity is Sensitivity.CASE else value.OFF
        collator.setAttribute(attr.CASE_LEVEL, case_level)

    if options.numeric is not None:
        collator.setAttribute(
            attr.NUMERIC_COLLATION, value.ON if options.numeric else value.OFF
        )

    case_first = {
        CaseFirst.UPPER: value.UPPER_FIRST,
        CaseFirst.LOWER: value.LOWER_FIRST,
        CaseFirst.FALSE: value.OFF,
    }
    if options.case_first is not None:
        collator.setAttribute(attr.CASE_FIRST, case_first[options.case_first])

    if options.ignore_punctuation is not None:
        alternate = value.SHIFTED if options.ignore_punctuation else value.NON_IGNORABLE
        collator.setAttribute(attr.ALTERNATE_HANDLING, alternate)


def create_collator(
    locales: Locales = None,
    options: Options = None,
    defaults: CollatorOptions | None = None,
    fallback_locale: str | None = None,
) -> icu.Collator:
    """Create an ICU collator configured from tags and options.

    Args:
        locales: Tag or sequence of tags; the first supported one wins.
        options: CollatorOptions or mapping of option names to values.
        defaults: Values used for options left unset.
        fallback_locale: Tag used when no requested locale is supported.

    Returns:
        Configured ``icu.Collator``.

    Raises:
        ImportError: If PyICU is not installed.
        TypeError: If options has an unsupported format or unknown key.
        ValueError: If an enumerated option has an unknown value.
        icu.ICUError: Propagated from ICU for tags it rejects.
    """
    effective = normalize_options(options)
    if defaults is not None:
        effective = effective.with_defaults(defaults)

    icu_mod = _import_icu()
    available = frozenset(str(name).lower() for name in icu_mod.Collator.getAvailableLocales())
    tag = resolve_locale(locales, effective, fallback_locale, available)
    locale = icu_mod.Locale.forLanguageTag(tag) if tag is not None else icu_mod.Locale.getDefault()
    collator = icu_mod.Collator.createInstance(locale)
    _apply_options(collator, effective)

    logger.debug("Created collator for %s with %s", tag or "default locale", effective)
    return collator
