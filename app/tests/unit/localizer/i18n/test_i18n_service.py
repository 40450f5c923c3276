"""Tests for localizer.i18n.service module."""

from unittest.mock import Mock, patch

import pytest

from localizer.i18n import (
    InvalidKeyFormatError,
    LanguageNotFoundError,
    LocalizationService,
)
from tests.factories.i18n import make_registry


class TestLocalizationService:
    """Tests for LocalizationService facade."""

    @pytest.fixture
    def service(self, bilingual_registry):
        return LocalizationService(bilingual_registry, key_prefix="i18n:")

    def test_translate(self, service):
        """translate() resolves prefixed tokens."""
        assert service.translate("i18n:greeting", {"name": "Sam"}) == "Hi Sam"

    def test_translate_requires_prefix(self, service):
        """Unprefixed tokens are rejected."""
        with pytest.raises(InvalidKeyFormatError):
            service.translate("greeting")

    def test_resolve(self, service):
        """resolve() accepts bare keys."""
        assert service.resolve("title") == "Playground"

    def test_localize(self, service):
        """localize() rewrites the selected inputs."""
        result = service.localize({"text": "i18n:greeting", "name": "Ada"}, targets=["text"])
        assert result["text"] == "Hi Ada"

    def test_interpolate(self, service):
        """interpolate() uses the service's engine."""
        assert service.interpolate("($n)->cat", {"n": 2}) == "cats"

    def test_language_switching(self, service):
        """set_language() changes what translate() returns."""
        service.set_language("fr")
        assert service.get_language() == "fr"
        assert service.translate("i18n:greeting", {"name": "Sam"}) == "Salut Sam"

    def test_set_unknown_language_raises(self, service):
        """Unknown languages are rejected."""
        with pytest.raises(LanguageNotFoundError):
            service.set_language("xx")
        assert service.get_language() == "en"

    def test_get_available_languages(self, service):
        """Registered languages are listed."""
        assert service.get_available_languages() == ["en", "fr"]

    def test_registry_property(self, service, bilingual_registry):
        """The underlying registry is exposed."""
        assert service.registry is bilingual_registry

    def test_default_prefix_from_settings(self):
        """Without an explicit prefix the configured one is used."""
        service = LocalizationService(make_registry())
        assert service.key_prefix == "i18n:"

    def test_creates_registry_via_factory(self):
        """Without a registry the factory is used."""
        registry = make_registry()
        with patch(
            "localizer.i18n.service.create_registry", Mock(return_value=registry)
        ) as factory:
            service = LocalizationService()
        factory.assert_called_once_with()
        assert service.registry is registry
