"""Tests for CollationSettings environment handling."""

import pytest
from pydantic import ValidationError

from comparekit import CollationSettings, CollatorOptions, Sensitivity


def test_defaults_are_unset(settings) -> None:
    assert settings.locale is None
    assert settings.collator_defaults() == CollatorOptions()


def test_reads_environment(clean_env) -> None:
    clean_env.setenv("COMPAREKIT_LOCALE", "sv-SE")
    clean_env.setenv("COMPAREKIT_SENSITIVITY", "accent")
    clean_env.setenv("COMPAREKIT_NUMERIC", "true")

    settings = CollationSettings(_env_file=None)

    assert settings.locale == "sv-SE"
    defaults = settings.collator_defaults()
    assert defaults.sensitivity is Sensitivity.ACCENT
    assert defaults.numeric is True
    assert defaults.ignore_punctuation is None


def test_explicit_values_override_environment(clean_env) -> None:
    clean_env.setenv("COMPAREKIT_LOCALE", "sv-SE")

    settings = CollationSettings(_env_file=None, locale="de")

    assert settings.locale == "de"


def test_rejects_unknown_sensitivity(clean_env) -> None:
    clean_env.setenv("COMPAREKIT_SENSITIVITY", "loose")

    with pytest.raises(ValidationError):
        CollationSettings(_env_file=None)
