"""Word inflection for count-driven template directives.

The template engine only depends on the Inflector protocol, so rule sets for
other languages can be substituted without touching the engine.
"""

import math
from typing import Protocol, Union, runtime_checkable

import inflect

from localizer.logging import get_module_logger

logger = get_module_logger()

Count = Union[int, float]


@runtime_checkable
class Inflector(Protocol):
    """Capability that inflects a word for a count."""

    def inflect(self, word: str, count: Count) -> str:
        """Return the form of word that agrees with count."""
        ...


class EnglishInflector:
    """English singular/plural inflection backed by the inflect library.

    The singular form is used when the magnitude of the count is exactly one;
    every other count, including zero, fractions and NaN, takes the plural.
    Irregular nouns (mouse/mice, person/people, sheep/sheep) are handled by
    inflect's rule tables. Words without letters, such as ``_`` or ``0``,
    are returned unchanged.
    """

    def __init__(self, engine: inflect.engine | None = None):
        self._engine = engine or inflect.engine()

    def inflect(self, word: str, count: Count) -> str:
        if not any(char.isalpha() for char in word):
            return word
        if _is_unit_magnitude(count):
            return word
        plural = self._engine.plural_noun(word)
        if not plural:
            logger.debug("plural_form_unavailable", word=word)
            return word
        return plural


def _is_unit_magnitude(count: Count) -> bool:
    # Integers are compared exactly; they may be too large for a float.
    if isinstance(count, float) and math.isnan(count):
        return False
    return abs(count) == 1


def count_for_bool(flag: bool) -> int:
    """Map a boolean to the count it stands for: True -> 2, False -> 1."""
    return 2 if flag else 1
