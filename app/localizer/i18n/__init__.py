"""i18n system - schema-constrained localization with a template micro-language.

Main components:
- models: Schema, LanguageTable, KeyToken
- registry: LocalizationRegistry with fallback completion and the active language
- templates: TemplateEngine and interpolate() for conditional, inflection and
  injection directives
- inflection: Inflector protocol and EnglishInflector
- resolver: resolve(), resolve_token() and localize_values()
- loader: YAMLLanguageTableLoader
- factory: create_registry()
- service: LocalizationService
"""

from localizer.i18n.exceptions import (
    FallbackNotFoundError,
    InvalidKeyFormatError,
    InvalidSchemaError,
    InvalidTemplateError,
    KeyCountMismatchError,
    KeyNotFoundError,
    LanguageNotFoundError,
    LocaleFileError,
    LocalizationError,
    NonStringLocalizationTargetError,
)
from localizer.i18n.factory import create_registry
from localizer.i18n.inflection import EnglishInflector, Inflector
from localizer.i18n.loader import LanguageTableLoader, YAMLLanguageTableLoader
from localizer.i18n.models import KeyToken, LanguageTable, Schema
from localizer.i18n.registry import LocalizationRegistry
from localizer.i18n.resolver import (
    localize_values,
    parse_key_token,
    resolve,
    resolve_token,
)
from localizer.i18n.service import LocalizationService
from localizer.i18n.templates import TemplateEngine, interpolate

__all__ = [
    "Schema",
    "LanguageTable",
    "KeyToken",
    "LocalizationRegistry",
    "TemplateEngine",
    "interpolate",
    "Inflector",
    "EnglishInflector",
    "resolve",
    "resolve_token",
    "parse_key_token",
    "localize_values",
    "LanguageTableLoader",
    "YAMLLanguageTableLoader",
    "create_registry",
    "LocalizationService",
    "LocalizationError",
    "InvalidSchemaError",
    "KeyCountMismatchError",
    "FallbackNotFoundError",
    "LanguageNotFoundError",
    "KeyNotFoundError",
    "InvalidKeyFormatError",
    "InvalidTemplateError",
    "NonStringLocalizationTargetError",
    "LocaleFileError",
]
