"""Schema-constrained registry of language tables.

The reference table passed at construction fixes the key schema. Every other
language must either supply a complete table or be completed from an already
registered fallback language. One language is active at a time and every
resolution reads it.

Mutations validate first and store last, under a re-entrant lock, so a failed
call never leaves a partial table behind and concurrent readers always see a
consistent (language, table) pair.
"""

import threading
from typing import Dict, List, Mapping, Optional, Tuple

from localizer.i18n.exceptions import (
    FallbackNotFoundError,
    InvalidSchemaError,
    InvalidTemplateError,
    KeyCountMismatchError,
    KeyNotFoundError,
    LanguageNotFoundError,
)
from localizer.i18n.models import LanguageTable, Schema
from localizer.logging import get_module_logger

logger = get_module_logger()


class LocalizationRegistry:
    """Language tables constrained by a fixed key schema.

    Attributes:
        schema: Key set taken from the reference table.
        strict_keys: When True, key names must equal the schema's, not only
            the key count.
    """

    def __init__(
        self,
        reference_language: str,
        schema: Mapping[str, str],
        strict_keys: bool = True,
    ):
        """Create a registry from the reference language table.

        Args:
            reference_language: Language tag of the reference table.
            schema: Non-empty key -> template mapping. Becomes both the key
                schema and the reference language's table.
            strict_keys: Validate key names in addition to key count.

        Raises:
            InvalidSchemaError: If schema is empty or not a string mapping.
        """
        if not isinstance(schema, Mapping) or not schema:
            logger.error("invalid_schema", reference_language=reference_language)
            raise InvalidSchemaError(
                f"Schema for reference language '{reference_language}' must not be empty"
            )
        non_strings = [k for k, v in schema.items() if not isinstance(v, str)]
        if non_strings:
            logger.error(
                "invalid_schema",
                reference_language=reference_language,
                non_string_keys=non_strings,
            )
            raise InvalidSchemaError(
                f"Schema values must be strings; invalid keys: {sorted(non_strings)}"
            )

        self.schema = Schema.from_table(reference_language, schema)
        self.strict_keys = strict_keys
        self._lock = threading.RLock()
        self._tables: Dict[str, LanguageTable] = {
            reference_language: LanguageTable(
                language=reference_language, messages=dict(schema)
            )
        }
        self._active_language: Optional[str] = reference_language
        logger.info(
            "registry_created",
            reference_language=reference_language,
            key_count=len(self.schema),
            strict_keys=strict_keys,
        )

    @property
    def reference_language(self) -> str:
        return self.schema.reference_language

    @property
    def languages(self) -> List[str]:
        """Registered language tags, in registration order."""
        with self._lock:
            return list(self._tables)

    def has_language(self, language: str) -> bool:
        with self._lock:
            return language in self._tables

    def get_table(self, language: str) -> LanguageTable:
        """Return a copy of a registered language's table.

        Raises:
            LanguageNotFoundError: If language is not registered.
        """
        with self._lock:
            table = self._tables.get(language)
            if table is None:
                raise LanguageNotFoundError(language)
            return table.copy()

    def add_complete(self, language: str, table: Mapping[str, str]) -> "LocalizationRegistry":
        """Register a complete table for a language.

        Args:
            language: Language tag to insert or overwrite.
            table: Key -> template mapping covering the whole schema.

        Returns:
            This registry, for chaining.

        Raises:
            KeyCountMismatchError: If the table does not match the schema.
            InvalidTemplateError: If a value is not a string.
        """
        validated = self._validate(language, table)
        with self._lock:
            self._store(validated)
        return self

    def add_incomplete(
        self,
        language: str,
        fallback_language: str,
        partial_table: Mapping[str, Optional[str]],
    ) -> "LocalizationRegistry":
        """Register a partial table completed from a fallback language.

        Each schema key takes the partial table's value when present, otherwise
        the fallback language's value.

        Args:
            language: Language tag to insert or overwrite.
            fallback_language: Registered language supplying missing keys.
            partial_table: Key -> template mapping for a subset of the schema.

        Returns:
            This registry, for chaining.

        Raises:
            FallbackNotFoundError: If fallback_language is not registered.
            KeyCountMismatchError: If the completed table does not match the schema.
        """
        with self._lock:
            fallback = self._tables.get(fallback_language)
            if fallback is None:
                logger.error(
                    "fallback_language_not_found",
                    language=language,
                    fallback_language=fallback_language,
                )
                raise FallbackNotFoundError(language, fallback_language)

            ignored = sorted(self.schema.unexpected_keys(partial_table))
            if ignored:
                logger.warning(
                    "partial_table_keys_ignored",
                    language=language,
                    keys=ignored,
                )

            completed = fallback.overlay(language, partial_table, keys=self.schema.keys)
            validated = self._validate(language, completed.messages)
            self._store(validated)
            logger.info(
                "language_completed_from_fallback",
                language=language,
                fallback_language=fallback_language,
                supplied_count=sum(
                    1 for key in self.schema.keys if partial_table.get(key) is not None
                ),
            )
        return self

    def add_all(self, tables: Mapping[str, Mapping[str, str]]) -> "LocalizationRegistry":
        """Register several complete tables at once.

        Every table is validated before any is stored.

        Raises:
            KeyCountMismatchError: If any table does not match the schema.
            InvalidTemplateError: If any value is not a string.
        """
        validated = [self._validate(language, table) for language, table in tables.items()]
        with self._lock:
            for table in validated:
                self._store(table)
        return self

    def set_active_language(self, language: str) -> "LocalizationRegistry":
        """Make a registered language the active one.

        Raises:
            LanguageNotFoundError: If language is not registered. The active
                language is left unchanged.
        """
        with self._lock:
            if language not in self._tables:
                logger.warning(
                    "active_language_not_found",
                    language=language,
                    active_language=self._active_language,
                )
                raise LanguageNotFoundError(language)
            previous = self._active_language
            self._active_language = language
        logger.info("active_language_changed", previous=previous, language=language)
        return self

    def get_active_language(self) -> str:
        with self._lock:
            return self._active_language

    def snapshot(self) -> Tuple[str, LanguageTable]:
        """Return the active language and its table as one consistent pair.

        Raises:
            LanguageNotFoundError: If the active language has no table.
        """
        with self._lock:
            language = self._active_language
            table = self._tables.get(language) if language is not None else None
            if table is None:
                logger.error("active_language_missing_table", language=language)
                raise LanguageNotFoundError(str(language))
            return language, table

    def resolve_raw(self, key: str) -> str:
        """Look up the raw template for key in the active language.

        Raises:
            LanguageNotFoundError: If the active language has no table.
            KeyNotFoundError: If key is absent from the active table.
        """
        language, table = self.snapshot()
        message = table.get_message(key)
        if message is None:
            logger.warning("localization_key_not_found", key=key, language=language)
            raise KeyNotFoundError(key, language)
        return message

    def _validate(self, language: str, table: Mapping[str, str]) -> LanguageTable:
        expected = len(self.schema)
        missing = self.schema.missing_keys(table)
        unexpected = self.schema.unexpected_keys(table)
        if len(table) != expected or (self.strict_keys and (missing or unexpected)):
            logger.error(
                "language_table_rejected",
                language=language,
                expected=expected,
                actual=len(table),
                missing=sorted(missing),
                unexpected=sorted(unexpected),
            )
            if self.strict_keys:
                raise KeyCountMismatchError(
                    language, expected, len(table), missing, unexpected
                )
            raise KeyCountMismatchError(language, expected, len(table))

        for key, value in table.items():
            if not isinstance(value, str):
                logger.error(
                    "language_table_rejected",
                    language=language,
                    key=key,
                    value_type=type(value).__name__,
                )
                raise InvalidTemplateError(key, language, type(value).__name__)

        return LanguageTable(language=language, messages=dict(table))

    def _store(self, table: LanguageTable) -> None:
        replaced = table.language in self._tables
        self._tables[table.language] = table
        logger.info(
            "language_registered",
            language=table.language,
            replaced=replaced,
            key_count=len(table),
        )
