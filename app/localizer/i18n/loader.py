"""Language table loading from YAML files.

Defines the contract for loading language tables and provides a YAML loader
for local locale directories.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import yaml

from localizer.i18n.exceptions import LocaleFileError
from localizer.logging import get_module_logger

logger = get_module_logger()


class LanguageTableLoader(ABC):
    """Abstract base for language table loaders."""

    @abstractmethod
    def available_languages(self) -> List[str]:
        """List the language tags this loader can provide."""
        pass

    @abstractmethod
    def load(self, language: str) -> Dict[str, str]:
        """Load the key -> template table for a language.

        Raises:
            FileNotFoundError: If no table exists for the language.
            LocaleFileError: If the table cannot be parsed.
        """
        pass


class YAMLLanguageTableLoader(LanguageTableLoader):
    """Loader for YAML language tables named ``<language>.yml``.

    Nested mappings are flattened into dot-separated keys::

        menu:
          open: Open
          close: Close

    becomes ``{"menu.open": "Open", "menu.close": "Close"}``.

    Attributes:
        locales_dir: Directory containing the YAML files.
        cache: Loaded tables by language (when use_cache is enabled).
    """

    def __init__(self, locales_dir: Path, use_cache: bool = True):
        self.locales_dir = Path(locales_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[str, str]] = {}

        if not self.locales_dir.is_dir():
            raise ValueError(f"Locales directory not found: {self.locales_dir}")

        logger.info(
            "initialized_yaml_loader",
            locales_dir=str(self.locales_dir),
            use_cache=use_cache,
        )

    def available_languages(self) -> List[str]:
        return sorted(path.stem for path in self.locales_dir.glob("*.yml"))

    def load(self, language: str) -> Dict[str, str]:
        if self.use_cache and language in self.cache:
            return dict(self.cache[language])

        path = self.locales_dir / f"{language}.yml"
        if not path.is_file():
            raise FileNotFoundError(
                f"No language table found for {language} in {self.locales_dir}"
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise LocaleFileError(f"Failed to parse {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.error("invalid_yaml_format", file=str(path), expected="dict")
            raise LocaleFileError(f"{path} must contain a mapping of keys to strings")

        table = flatten_table(data)
        logger.info("loaded_language_table", language=language, key_count=len(table))

        if self.use_cache:
            self.cache[language] = table
        return dict(table)

    def load_all(self) -> Dict[str, Dict[str, str]]:
        """Load every available language table."""
        return {language: self.load(language) for language in self.available_languages()}

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("cleared_language_table_cache")


def flatten_table(data: Dict[Any, Any], parent: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dot-separated keys.

    Raises:
        LocaleFileError: If a leaf value is not a string.
    """
    table: Dict[str, str] = {}
    for name, value in data.items():
        key = f"{parent}.{name}" if parent else str(name)
        if isinstance(value, dict):
            table.update(flatten_table(value, key))
        elif isinstance(value, str):
            table[key] = value
        else:
            raise LocaleFileError(
                f"Value for '{key}' must be a string, not {type(value).__name__}"
            )
    return table
