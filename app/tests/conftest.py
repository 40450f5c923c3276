"""Shared pytest configuration for localizer tests."""

import pytest

I18N_ENVIRONMENT = (
    "I18N_REFERENCE_LANGUAGE",
    "I18N_KEY_PREFIX",
    "I18N_STRICT_KEYS",
    "I18N_LOCALES_DIR",
    "I18N_FALLBACK_LANGUAGE",
)


@pytest.fixture(autouse=True)
def isolated_i18n_environment(monkeypatch):
    """Remove I18N_* variables so settings defaults are deterministic."""
    for name in I18N_ENVIRONMENT:
        monkeypatch.delenv(name, raising=False)
