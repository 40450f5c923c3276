"""Custom exceptions for the localization system.

Registry and key errors indicate a configuration bug and are raised
immediately. The template engine never raises; see templates.py.
"""

from typing import Iterable, Optional


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            resolve(registry, "greeting", values)
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class InvalidSchemaError(LocalizationError):
    """Raised when a registry is created from an empty or malformed schema.

    Example:
        >>> LocalizationRegistry("en", {})
        Traceback (most recent call last):
        ...
        InvalidSchemaError: Schema for reference language 'en' must not be empty
    """

    pass


class KeyCountMismatchError(LocalizationError):
    """Raised when a language table does not match the registry schema.

    Attributes:
        language: Language tag of the rejected table
        expected: Number of keys in the schema
        actual: Number of keys in the rejected table
        missing: Schema keys absent from the table (strict key checking only)
        unexpected: Table keys absent from the schema (strict key checking only)
    """

    def __init__(
        self,
        language: str,
        expected: int,
        actual: int,
        missing: Iterable[str] = (),
        unexpected: Iterable[str] = (),
    ):
        self.language = language
        self.expected = expected
        self.actual = actual
        self.missing = tuple(sorted(missing))
        self.unexpected = tuple(sorted(unexpected))
        message = (
            f"Localization for {language} must have exactly {expected} keys "
            f"(got {actual})"
        )
        if self.missing or self.unexpected:
            message += (
                f"; missing={list(self.missing)} unexpected={list(self.unexpected)}"
            )
        super().__init__(message)


class FallbackNotFoundError(LocalizationError):
    """Raised when a partial table names a fallback language that is not registered.

    Attributes:
        language: Language being registered
        fallback_language: The missing fallback language
    """

    def __init__(self, language: str, fallback_language: str):
        self.language = language
        self.fallback_language = fallback_language
        super().__init__(
            f"Fallback language {fallback_language} not found for {language}."
        )


class LanguageNotFoundError(LocalizationError):
    """Raised when a language has no table in the registry.

    Example:
        >>> registry.set_active_language("xx")
        Traceback (most recent call last):
        ...
        LanguageNotFoundError: Language "xx" not found in localizations.
    """

    def __init__(self, language: str):
        self.language = language
        super().__init__(f'Language "{language}" not found in localizations.')


class KeyNotFoundError(LocalizationError):
    """Raised when a key is absent from the active language's table.

    Attributes:
        key: The missing localization key
        language: Language that was searched
    """

    def __init__(self, key: str, language: str):
        self.key = key
        self.language = language
        super().__init__(
            f'Localization key "{key}" not found for language "{language}".'
        )


class InvalidKeyFormatError(LocalizationError):
    """Raised when a key token lacks the localization prefix.

    Attributes:
        token: The rejected token
        prefix: The expected prefix
        target: Name of the input that carried the token, if known
    """

    def __init__(self, token: str, prefix: str, target: Optional[str] = None):
        self.token = token
        self.prefix = prefix
        self.target = target
        subject = f"Property {target}" if target else f"Token {token!r}"
        super().__init__(f'{subject} must start with "{prefix}" to localize.')


class InvalidTemplateError(LocalizationError):
    """Raised when a stored template value is not a string.

    Attributes:
        key: Localization key holding the value
        language: Language of the table
    """

    def __init__(self, key: str, language: str, value_type: str):
        self.key = key
        self.language = language
        self.value_type = value_type
        super().__init__(
            f'Localization value for "{key}" in "{language}" must be a string, '
            f"not {value_type}."
        )


class NonStringLocalizationTargetError(LocalizationError):
    """Raised when an input selected for localization is not textual.

    Attributes:
        target: Name of the offending input
        value_type: Type name of the value found
    """

    def __init__(self, target: str, value_type: str):
        self.target = target
        self.value_type = value_type
        super().__init__(
            f"Property {target} must be a string to localize (got {value_type})."
        )


class LocaleFileError(LocalizationError):
    """Raised when a locale file cannot be parsed into a language table."""

    pass
