"""Factory functions for creating localization registries.

Builds a LocalizationRegistry from a directory of YAML language tables using
the configured reference and fallback languages.
"""

from pathlib import Path
from typing import Optional

from localizer.configuration import I18nSettings, settings
from localizer.i18n.loader import YAMLLanguageTableLoader
from localizer.i18n.registry import LocalizationRegistry
from localizer.logging import get_module_logger

logger = get_module_logger()


def create_registry(
    locales_dir: Path | None = None,
    reference_language: Optional[str] = None,
    fallback_language: Optional[str] = None,
    strict_keys: Optional[bool] = None,
    i18n_settings: Optional[I18nSettings] = None,
) -> LocalizationRegistry:
    """Create a registry from ``<language>.yml`` files.

    The reference language's file defines the schema. Every other file is
    registered as a partial table completed from the fallback language, which
    is loaded right after the reference language.

    Args:
        locales_dir: Directory of YAML tables (default: I18N_LOCALES_DIR)
        reference_language: Schema language (default: I18N_REFERENCE_LANGUAGE)
        fallback_language: Language completing partial tables
            (default: I18N_FALLBACK_LANGUAGE, else the reference language)
        strict_keys: Key name validation (default: I18N_STRICT_KEYS)
        i18n_settings: Settings section to read defaults from

    Returns:
        LocalizationRegistry: Registry with the reference language active

    Raises:
        ValueError: If no locales directory is configured or it does not exist
        FileNotFoundError: If the reference language has no file
        LocaleFileError: If a file cannot be parsed
        FallbackNotFoundError: If the fallback language has no file

    Usage:
        registry = create_registry(Path("locales"), reference_language="en")
        registry.set_active_language("fr")
    """
    config = i18n_settings or settings.i18n
    directory = locales_dir or config.locales_dir
    if directory is None:
        raise ValueError("No locales directory configured (set I18N_LOCALES_DIR)")

    reference = reference_language or config.reference_language
    fallback = fallback_language or config.fallback_language or reference
    strict = config.strict_keys if strict_keys is None else strict_keys

    loader = YAMLLanguageTableLoader(Path(directory), use_cache=False)
    registry = LocalizationRegistry(reference, loader.load(reference), strict_keys=strict)

    languages = loader.available_languages()
    if fallback != reference and fallback in languages:
        registry.add_incomplete(fallback, reference, loader.load(fallback))

    for language in languages:
        if language in (reference, fallback):
            continue
        registry.add_incomplete(language, fallback, loader.load(language))

    logger.info(
        "registry_created_from_directory",
        locales_dir=str(directory),
        reference_language=reference,
        fallback_language=fallback,
        languages=registry.languages,
    )
    return registry
