"""Configuration settings using Pydantic Settings.

Provides environment-driven defaults for locale-aware comparators.

Usage:
    from comparekit.config import CollationSettings

    # Load from environment variables (COMPAREKIT_*)
    settings = CollationSettings()

    # Or override with explicit values
    settings = CollationSettings(locale="de-DE", numeric=True)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from comparekit.core.collation.models import CollatorOptions


class CollationSettings(BaseSettings):  # type: ignore[misc]
    """Defaults applied by ``compare.locale`` when arguments leave them unset.

    Attributes:
        locale: BCP 47 tag used when no locale is given (None: ICU default).
        sensitivity: Default comparison strength.
        numeric: Default numeric-aware ordering.
        ignore_punctuation: Default whitespace/punctuation handling.

    Environment Variables:
        COMPAREKIT_LOCALE
        COMPAREKIT_SENSITIVITY
        COMPAREKIT_NUMERIC
        COMPAREKIT_IGNORE_PUNCTUATION
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPAREKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locale: str | None = None
    sensitivity: Literal["base", "accent", "case", "variant"] | None = None
    numeric: bool | None = None
    ignore_punctuation: bool | None = None

    def collator_defaults(self) -> CollatorOptions:
        """Settings as ``CollatorOptions`` for filling unset options."""
        # Late import to avoid circular dependency
        from comparekit.core.collation.models import CollatorOptions

        return CollatorOptions(
            sensitivity=self.sensitivity,
            numeric=self.numeric,
            ignore_punctuation=self.ignore_punctuation,
        )
