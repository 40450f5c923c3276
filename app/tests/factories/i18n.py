"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- Reference schemas and language tables
- LocalizationRegistry instances
- Runtime value bags
"""

from typing import Dict, Optional

from localizer.i18n import LanguageTable, LocalizationRegistry


def make_schema(extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Create a reference (English) key -> template mapping.

    Args:
        extra: Additional keys merged into the default schema.

    Returns:
        Dict usable as a registry schema.
    """
    schema = {
        "greeting": "Hi {name}",
        "inbox.summary": "You have {count} new ($count)->message",
        "cart.status": "Your cart has {items} ($items)->item$[items>0]->''|' (empty)'",
        "title": "Playground",
    }
    if extra:
        schema.update(extra)
    return schema


def make_french_table() -> Dict[str, str]:
    """Create a complete French table for make_schema()."""
    return {
        "greeting": "Salut {name}",
        "inbox.summary": "Vous avez {count} nouveaux messages",
        "cart.status": "$[items>0]->'Votre panier contient {items} articles'|'Votre panier est vide'",
        "title": "Bac à sable",
    }


def make_language_table(
    language: str = "en", messages: Optional[Dict[str, str]] = None
) -> LanguageTable:
    """Create a LanguageTable instance."""
    return LanguageTable(
        language=language,
        messages=messages if messages is not None else make_schema(),
    )


def make_registry(
    reference_language: str = "en",
    schema: Optional[Dict[str, str]] = None,
    strict_keys: bool = True,
    with_french: bool = False,
) -> LocalizationRegistry:
    """Create a LocalizationRegistry instance.

    Args:
        reference_language: Reference language tag.
        schema: Reference table (default: make_schema()).
        strict_keys: Key name validation flag.
        with_french: Also register make_french_table() as "fr".
    """
    registry = LocalizationRegistry(
        reference_language,
        schema if schema is not None else make_schema(),
        strict_keys=strict_keys,
    )
    if with_french:
        registry.add_complete("fr", make_french_table())
    return registry


def make_runtime_values(**overrides) -> Dict[str, object]:
    """Create a runtime value bag with common names."""
    values = {"name": "Sam", "count": 3, "items": 0, "flag": False}
    values.update(overrides)
    return values
