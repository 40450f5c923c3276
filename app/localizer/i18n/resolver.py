"""Resolution facade: registry lookup followed by template evaluation.

Also implements the calling convention used by layers that rewrite component
inputs: inputs meant as localization references carry the ``i18n:`` prefix,
and only textual inputs can be localized.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from localizer.i18n.exceptions import (
    InvalidKeyFormatError,
    InvalidTemplateError,
    NonStringLocalizationTargetError,
)
from localizer.i18n.models import DEFAULT_KEY_PREFIX, KeyToken, RuntimeValues
from localizer.i18n.registry import LocalizationRegistry
from localizer.i18n.templates import TemplateEngine, get_default_engine
from localizer.logging import get_module_logger

logger = get_module_logger()

DEFAULT_TARGETS = ("children",)


def resolve(
    registry: LocalizationRegistry,
    key: str,
    values: Optional[RuntimeValues] = None,
    engine: Optional[TemplateEngine] = None,
) -> str:
    """Resolve key under the active language and evaluate its template.

    Args:
        registry: Registry holding the language tables.
        key: Localization key (without prefix).
        values: Runtime values for the template directives.
        engine: Template engine; defaults to the shared English engine.

    Returns:
        The localized string.

    Raises:
        LanguageNotFoundError: If the active language has no table.
        KeyNotFoundError: If key is absent from the active table.
        InvalidTemplateError: If the stored value is not a string.
    """
    raw = registry.resolve_raw(key)
    if not isinstance(raw, str):
        language = registry.get_active_language()
        logger.error(
            "invalid_template_value",
            key=key,
            language=language,
            value_type=type(raw).__name__,
        )
        raise InvalidTemplateError(key, language, type(raw).__name__)
    return (engine or get_default_engine()).interpolate(raw, values)


def parse_key_token(token: str, prefix: str = DEFAULT_KEY_PREFIX) -> str:
    """Strip the localization prefix from a key token.

    Raises:
        InvalidKeyFormatError: If token lacks the prefix or carries no key.
    """
    try:
        return KeyToken.from_string(token, prefix).key
    except ValueError as e:
        logger.warning("invalid_key_token", token=token, prefix=prefix)
        raise InvalidKeyFormatError(token, prefix) from e


def resolve_token(
    registry: LocalizationRegistry,
    token: str,
    values: Optional[RuntimeValues] = None,
    prefix: str = DEFAULT_KEY_PREFIX,
    engine: Optional[TemplateEngine] = None,
) -> str:
    """Resolve a prefixed key token (e.g., "i18n:greeting")."""
    return resolve(registry, parse_key_token(token, prefix), values, engine)


def localize_values(
    registry: LocalizationRegistry,
    values: Mapping[str, Any],
    targets: Iterable[str] = DEFAULT_TARGETS,
    prefix: str = DEFAULT_KEY_PREFIX,
    engine: Optional[TemplateEngine] = None,
) -> Dict[str, Any]:
    """Replace the selected inputs of a mapping with their localized strings.

    Each target present with a non-None value must be a prefixed key token.
    Its template is evaluated against the whole input mapping, so sibling
    inputs (counts, flags, names) feed the directives.

    Args:
        registry: Registry holding the language tables.
        values: Component inputs.
        targets: Names of the inputs to localize.
        prefix: Key token prefix.
        engine: Template engine; defaults to the shared English engine.

    Returns:
        A new dict with the targets replaced; values is not modified.

    Raises:
        NonStringLocalizationTargetError: If a target holds a non-string value.
        InvalidKeyFormatError: If a target string lacks the prefix.
        KeyNotFoundError: If a referenced key is absent.
    """
    translations = {}
    for target in targets:
        value = values.get(target)
        if value is None:
            continue
        if not isinstance(value, str):
            logger.error(
                "non_string_localization_target",
                target=target,
                value_type=type(value).__name__,
            )
            raise NonStringLocalizationTargetError(target, type(value).__name__)
        if not KeyToken.is_token(value, prefix):
            logger.error("invalid_key_token", target=target, token=value, prefix=prefix)
            raise InvalidKeyFormatError(value, prefix, target=target)
        translations[target] = resolve_token(registry, value, values, prefix, engine)

    return {**values, **translations}
