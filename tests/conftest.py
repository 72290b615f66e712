"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from comparekit.config import CollationSettings

_SETTINGS_ENV = (
    "COMPAREKIT_LOCALE",
    "COMPAREKIT_SENSITIVITY",
    "COMPAREKIT_NUMERIC",
    "COMPAREKIT_IGNORE_PUNCTUATION",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without COMPAREKIT_* overrides."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env):
    """CollationSettings with no environment or .env input."""
    return CollationSettings(_env_file=None)

