"""Localization models.

Defines the schema, language tables and key tokens used by the registry
and the resolution facade.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Union

RuntimeValue = Union[str, int, float, bool]
RuntimeValues = Mapping[str, Optional[RuntimeValue]]

DEFAULT_KEY_PREFIX = "i18n:"


@dataclass(frozen=True)
class Schema:
    """Immutable key set fixed from the reference language table.

    Attributes:
        reference_language: Language tag whose table defined the schema.
        keys: Every key a complete language table must carry.
    """

    reference_language: str
    keys: FrozenSet[str]

    def __len__(self) -> int:
        return len(self.keys)

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    @classmethod
    def from_table(cls, reference_language: str, table: Mapping[str, str]) -> "Schema":
        """Build a schema from the reference table's keys."""
        return cls(reference_language=reference_language, keys=frozenset(table))

    def missing_keys(self, table: Mapping[str, object]) -> FrozenSet[str]:
        """Schema keys that are absent from the table."""
        return self.keys - set(table)

    def unexpected_keys(self, table: Mapping[str, object]) -> FrozenSet[str]:
        """Table keys that are not part of the schema."""
        return frozenset(table) - self.keys


@dataclass
class LanguageTable:
    """Complete key -> template table for one language.

    Attributes:
        language: Language tag (e.g., "en", "fr-CA").
        messages: Mapping of schema key to raw template string.
    """

    language: str
    messages: Dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.messages)

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a raw template by key, or None if not found."""
        return self.messages.get(key)

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def overlay(
        self,
        language: str,
        values: Mapping[str, Optional[str]],
        keys: Optional[Iterable[str]] = None,
    ) -> "LanguageTable":
        """Layer values over this table, key by key.

        A key missing from values, or mapped to None, takes this table's
        message. Keys absent from both are left out.

        Args:
            language: Language tag for the new table.
            values: Partial key -> template mapping.
            keys: Keys to produce (default: this table's keys).

        Returns:
            A new LanguageTable; this table is not modified.
        """
        messages = {}
        for key in self.messages if keys is None else keys:
            value = values.get(key)
            if value is None:
                value = self.messages.get(key)
            if value is not None:
                messages[key] = value
        return LanguageTable(language=language, messages=messages)

    def copy(self) -> "LanguageTable":
        return LanguageTable(language=self.language, messages=dict(self.messages))


@dataclass(frozen=True)
class KeyToken:
    """A localization reference carried by a component input.

    Tokens have the form "<prefix><key>" (e.g., "i18n:greeting").
    Frozen to ensure immutability and hashability.

    Attributes:
        key: Localization key without the prefix.
        prefix: Marker that identified the token.
    """

    key: str
    prefix: str = DEFAULT_KEY_PREFIX

    def __str__(self) -> str:
        return f"{self.prefix}{self.key}"

    @staticmethod
    def is_token(value: object, prefix: str = DEFAULT_KEY_PREFIX) -> bool:
        """Check whether value is a string carrying the prefix."""
        return isinstance(value, str) and value.startswith(prefix)

    @classmethod
    def from_string(cls, token: str, prefix: str = DEFAULT_KEY_PREFIX) -> "KeyToken":
        """Create a KeyToken from its string form.

        Args:
            token: Token string (e.g., "i18n:greeting").
            prefix: Expected marker prefix.

        Returns:
            KeyToken instance.

        Raises:
            ValueError: If the prefix is missing or no key follows it.
        """
        if not cls.is_token(token, prefix):
            raise ValueError(f"Key token must start with '{prefix}': {token!r}")
        key = token[len(prefix):]
        if not key:
            raise ValueError(f"Key token has no key after '{prefix}': {token!r}")
        return cls(key=key, prefix=prefix)
