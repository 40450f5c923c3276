"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_french_table,
    make_language_table,
    make_registry,
    make_runtime_values,
    make_schema,
)

__all__ = [
    "make_schema",
    "make_french_table",
    "make_language_table",
    "make_registry",
    "make_runtime_values",
]
