"""Configuration module using Pydantic Settings.

Usage:
    from comparekit.config import CollationSettings

    settings = CollationSettings(locale="sv-SE")
"""

from comparekit.config.settings import CollationSettings

__all__ = [
    "CollationSettings",
]
