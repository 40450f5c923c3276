"""Configuration module - public API.

Centralized configuration for the localizer using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Localization settings section

Example:
    ```python
    from localizer.configuration import settings

    prefix = settings.i18n.key_prefix
    ```
"""

from localizer.configuration.i18n import I18nSettings
from localizer.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
