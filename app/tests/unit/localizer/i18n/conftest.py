"""Feature-level fixtures for i18n system tests."""

import pytest
import yaml

from localizer.i18n import YAMLLanguageTableLoader
from tests.factories.i18n import make_registry


@pytest.fixture
def registry():
    """Registry with the default English schema only."""
    return make_registry()


@pytest.fixture
def bilingual_registry():
    """Registry with English reference and a complete French table."""
    return make_registry(with_french=True)


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create temporary directory with sample YAML language tables.

    Returns a directory structure like:
    - en.yml (reference, nested keys)
    - fr.yml (complete)
    - de.yml (partial)
    """
    en = {
        "greeting": "Hi {name}",
        "menu": {"open": "Open", "close": "Close"},
        "inbox": "You have {count} ($count)->message",
    }
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en, f)

    fr = {
        "greeting": "Salut {name}",
        "menu": {"open": "Ouvrir", "close": "Fermer"},
        "inbox": "Vous avez {count} messages",
    }
    with open(tmp_path / "fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr, f, allow_unicode=True)

    de = {"menu": {"open": "Öffnen"}}
    with open(tmp_path / "de.yml", "w", encoding="utf-8") as f:
        yaml.dump(de, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_locales_dir):
    """Create YAMLLanguageTableLoader for the temporary locales directory."""
    return YAMLLanguageTableLoader(temp_locales_dir, use_cache=False)
