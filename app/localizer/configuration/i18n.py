"""Localization registry settings."""

from typing import Optional

from pydantic import Field, field_validator

from localizer.configuration.base import LocalizerSettings


class I18nSettings(LocalizerSettings):
    """Configuration for the localization registry and key tokens.

    Environment Variables:
        I18N_REFERENCE_LANGUAGE: Language whose table defines the key schema (default: en)
        I18N_KEY_PREFIX: Marker that identifies localization key tokens (default: i18n:)
        I18N_STRICT_KEYS: Require table key names to match the schema, not only
            the key count (default: True)
        I18N_LOCALES_DIR: Directory of <language>.yml tables loaded by the factory
        I18N_FALLBACK_LANGUAGE: Language used to complete partial tables
            (default: the reference language)

    Example:
        ```python
        from localizer.configuration import settings

        prefix = settings.i18n.key_prefix
        if settings.i18n.locales_dir:
            registry = create_registry()
        ```
    """

    reference_language: str = Field(
        default="en",
        alias="I18N_REFERENCE_LANGUAGE",
        description="Language tag of the reference table",
    )
    key_prefix: str = Field(
        default="i18n:",
        alias="I18N_KEY_PREFIX",
        description="Marker prefix carried by localization key tokens",
    )
    strict_keys: bool = Field(
        default=True,
        alias="I18N_STRICT_KEYS",
        description="Validate key names as well as key count on registration",
    )
    locales_dir: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALES_DIR",
        description="Directory containing <language>.yml translation tables",
    )
    fallback_language: Optional[str] = Field(
        default=None,
        alias="I18N_FALLBACK_LANGUAGE",
        description="Language used to fill keys missing from loaded tables",
    )

    @field_validator("key_prefix")
    @classmethod
    def _validate_key_prefix(cls, v: str) -> str:
        if not v:
            raise ValueError("I18N_KEY_PREFIX must not be empty")
        return v
