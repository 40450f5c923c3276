"""Localization service for dependency injection.

Provides a class-based interface to the registry and template engine for
easier DI and testing.
"""

from typing import Any, Dict, Iterable, List, Optional

from localizer.configuration import settings
from localizer.i18n.factory import create_registry
from localizer.i18n.models import RuntimeValues
from localizer.i18n.registry import LocalizationRegistry
from localizer.i18n import resolver
from localizer.i18n.templates import TemplateEngine


class LocalizationService:
    """Class-based localization service.

    This is a thin facade - all actual work is delegated to the underlying
    registry and template engine.

    Usage:
        service = LocalizationService(LocalizationRegistry("en", {"hi": "Hi {name}"}))
        service.translate("i18n:hi", {"name": "Sam"})  # "Hi Sam"

        # Built from I18N_LOCALES_DIR via the factory
        service = LocalizationService()
    """

    def __init__(
        self,
        registry: Optional[LocalizationRegistry] = None,
        engine: Optional[TemplateEngine] = None,
        key_prefix: Optional[str] = None,
    ):
        """Initialize localization service.

        Args:
            registry: Optional pre-configured registry. If not provided,
                creates one via the factory.
            engine: Optional template engine (default: English engine).
            key_prefix: Key token prefix (default: I18N_KEY_PREFIX).
        """
        self._registry = registry or create_registry()
        self._engine = engine or TemplateEngine()
        self.key_prefix = key_prefix or settings.i18n.key_prefix

    def resolve(self, key: str, values: Optional[RuntimeValues] = None) -> str:
        """Resolve a bare key under the active language."""
        return resolver.resolve(self._registry, key, values, self._engine)

    def translate(self, token: str, values: Optional[RuntimeValues] = None) -> str:
        """Resolve a prefixed key token (e.g., "i18n:greeting").

        Raises:
            InvalidKeyFormatError: If token lacks the prefix
            KeyNotFoundError: If the key is not in the active table
        """
        return resolver.resolve_token(
            self._registry, token, values, self.key_prefix, self._engine
        )

    def localize(
        self,
        values: Dict[str, Any],
        targets: Iterable[str] = resolver.DEFAULT_TARGETS,
    ) -> Dict[str, Any]:
        """Localize the selected inputs of a mapping."""
        return resolver.localize_values(
            self._registry, values, targets, self.key_prefix, self._engine
        )

    def interpolate(self, template: str, values: Optional[RuntimeValues] = None) -> str:
        return self._engine.interpolate(template, values)

    def set_language(self, language: str) -> None:
        self._registry.set_active_language(language)

    def get_language(self) -> str:
        return self._registry.get_active_language()

    def get_available_languages(self) -> List[str]:
        return self._registry.languages

    @property
    def registry(self) -> LocalizationRegistry:
        """Access the underlying registry for bootstrap-time registration."""
        return self._registry
