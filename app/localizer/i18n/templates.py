"""Template micro-language for localized strings.

Three directive kinds are evaluated in a fixed order, one pass each:

1. Conditional: ``$[name]->'yes'|'no'`` or ``$[name OP value]->'yes'|'no'``
   with OP one of ``<  >  <=  >=  ==  ===  !=``.
2. Inflection: ``($name)->word`` inflects word for the count in ``values[name]``.
3. Injection: ``{name}`` is replaced by the string form of ``values[name]``.

Each pass parses the current string into a list of typed directives, then
evaluates them and splices the results in. Replacements are not re-scanned by
the pass that produced them, and an inflection directive inside conditional
output stays literal. Injection runs last over the whole string, so its
placeholders may come from conditional or inflection output.

The engine is total: a missing value or malformed condition degrades to the
false branch, the literal word, or the literal ``{name}`` rather than raising.
"""

import math
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from localizer.i18n.inflection import EnglishInflector, Inflector, count_for_bool
from localizer.i18n.models import RuntimeValue, RuntimeValues
from localizer.logging import get_module_logger

logger = get_module_logger()

CONDITIONAL_PATTERN = re.compile(
    r"\$\[(?P<condition>[^\]]*?)\]->'(?P<true_text>.*?)'\|'(?P<false_text>.*?)'",
    re.DOTALL,
)
CONDITION_PATTERN = re.compile(
    r"^\s*(?P<name>[^\s<>=!]+)\s*(?:(?P<operator>[<>=!]+)\s*(?P<operand>.*?))?\s*$",
    re.DOTALL,
)
INFLECTION_PATTERN = re.compile(r"\(\$(?P<name>[^()\s]+?)\)->(?P<word>\w+)")
INJECTION_PATTERN = re.compile(r"\{(?P<name>[^{}\s]+?)\}")

ORDERING_OPERATORS = ("<", ">", "<=", ">=")
EQUALITY_OPERATORS = ("==", "===", "!=")
OPERATORS = ORDERING_OPERATORS + EQUALITY_OPERATORS

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_LITERAL = re.compile(r"[+-]?Infinity")


@dataclass(frozen=True)
class ConditionalDirective:
    """A parsed ``$[...]->'...'|'...'`` occurrence.

    name is None when the condition could not be parsed; such a directive
    always selects false_text.
    """

    start: int
    end: int
    name: Optional[str]
    operator: Optional[str]
    operand: Optional[str]
    true_text: str
    false_text: str


@dataclass(frozen=True)
class InflectionDirective:
    """A parsed ``($name)->word`` occurrence."""

    start: int
    end: int
    name: str
    word: str


@dataclass(frozen=True)
class InjectionDirective:
    """A parsed ``{name}`` occurrence."""

    start: int
    end: int
    name: str
    source: str


def parse_conditionals(template: str) -> List[ConditionalDirective]:
    """Scan template for conditional directives, left to right."""
    directives = []
    for match in CONDITIONAL_PATTERN.finditer(template):
        condition = CONDITION_PATTERN.match(match.group("condition"))
        name = operator = operand = None
        if condition:
            name = condition.group("name")
            operator = condition.group("operator")
            operand = condition.group("operand")
        directives.append(
            ConditionalDirective(
                start=match.start(),
                end=match.end(),
                name=name,
                operator=operator,
                operand=operand,
                true_text=match.group("true_text"),
                false_text=match.group("false_text"),
            )
        )
    return directives


def parse_inflections(template: str) -> List[InflectionDirective]:
    """Scan template for inflection directives, left to right."""
    return [
        InflectionDirective(
            start=match.start(),
            end=match.end(),
            name=match.group("name"),
            word=match.group("word"),
        )
        for match in INFLECTION_PATTERN.finditer(template)
    ]


def parse_injections(template: str) -> List[InjectionDirective]:
    """Scan template for injection directives, left to right."""
    return [
        InjectionDirective(
            start=match.start(),
            end=match.end(),
            name=match.group("name"),
            source=match.group(0),
        )
        for match in INJECTION_PATTERN.finditer(template)
    ]


def is_truthy(value: Optional[RuntimeValue]) -> bool:
    """Truthiness for runtime values: 0, NaN, "", False and None are falsy."""
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def to_number(value: Optional[RuntimeValue]) -> float:
    """Coerce a runtime value to a number.

    Booleans become 0/1, numeric strings their value and blank strings 0.
    Anything else, including a missing value, becomes NaN.
    """
    if value is None:
        return math.nan
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return -math.inf if value < 0 else math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _DECIMAL_LITERAL.fullmatch(text):
            return float(text)
        if _INFINITY_LITERAL.fullmatch(text):
            return -math.inf if text.startswith("-") else math.inf
    return math.nan


def parse_float(literal: str) -> float:
    """Parse the leading numeric prefix of literal; NaN when there is none."""
    text = literal.lstrip()
    infinity = _INFINITY_LITERAL.match(text)
    if infinity:
        return -math.inf if text.startswith("-") else math.inf
    decimal = _DECIMAL_LITERAL.match(text)
    if decimal:
        return float(decimal.group(0))
    return math.nan


def loose_equals(value: Optional[RuntimeValue], literal: str) -> bool:
    """Coercing equality between a runtime value and a literal string.

    Strings compare as strings; numbers and booleans compare numerically with
    the literal. A missing value equals nothing.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value == literal
    if isinstance(value, (bool, int, float)):
        return to_number(value) == to_number(literal)
    return False


def strict_equals(value: Optional[RuntimeValue], literal: str) -> bool:
    """Non-coercing equality: only an identical string matches."""
    return isinstance(value, str) and value == literal


def evaluate_condition(
    directive: ConditionalDirective, values: RuntimeValues
) -> bool:
    """Evaluate the condition of a conditional directive against values."""
    if directive.name is None:
        logger.debug("conditional_unparseable", start=directive.start)
        return False

    value = values.get(directive.name)
    operator = directive.operator
    if operator is None:
        return is_truthy(value)

    operand = directive.operand or ""
    if operator in ORDERING_OPERATORS:
        left = to_number(value)
        right = parse_float(operand)
        if math.isnan(left) or math.isnan(right):
            return False
        if operator == "<":
            return left < right
        if operator == ">":
            return left > right
        if operator == "<=":
            return left <= right
        return left >= right

    if operator == "==":
        return loose_equals(value, operand)
    if operator == "!=":
        return not loose_equals(value, operand)
    if operator == "===":
        return strict_equals(value, operand)

    logger.debug("conditional_unknown_operator", operator=operator, name=directive.name)
    return False


def stringify(value: RuntimeValue) -> str:
    """String form used when injecting a runtime value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


D = TypeVar("D", ConditionalDirective, InflectionDirective, InjectionDirective)
Span = Tuple[int, int]


def _splice(
    template: str, directives: Sequence[D], render: Callable[[D], str]
) -> Tuple[str, List[Span]]:
    """Replace each directive with its rendering.

    Returns the new string and the spans the renderings occupy in it.
    """
    parts = []
    spans = []
    cursor = 0
    length = 0
    for directive in directives:
        prefix = template[cursor : directive.start]
        rendered = render(directive)
        parts.append(prefix)
        parts.append(rendered)
        length += len(prefix)
        spans.append((length, length + len(rendered)))
        length += len(rendered)
        cursor = directive.end
    parts.append(template[cursor:])
    return "".join(parts), spans


def _overlaps(start: int, end: int, spans: Sequence[Span]) -> bool:
    return any(start < span_end and span_start < end for span_start, span_end in spans)


class TemplateEngine:
    """Evaluates localized templates against runtime value bags.

    Attributes:
        inflector: Inflector used by the inflection pass.
    """

    def __init__(self, inflector: Optional[Inflector] = None):
        self.inflector = inflector or EnglishInflector()

    def interpolate(self, template: str, values: Optional[RuntimeValues] = None) -> str:
        """Run the conditional, inflection and injection passes over template.

        Inflection directives inside text chosen by a conditional stay
        literal. Injection runs over the whole string, so placeholders in
        conditional or inflection output are filled.

        Args:
            template: Raw template string.
            values: Runtime values referenced by the directives.

        Returns:
            The evaluated string. Never raises for string input.
        """
        values = values or {}
        result, chosen = _splice(
            template,
            parse_conditionals(template),
            lambda d: self._choose(d, values),
        )
        result = self.apply_inflections(result, values, skip=chosen)
        return self.apply_injections(result, values)

    def apply_conditionals(self, template: str, values: RuntimeValues) -> str:
        result, _ = _splice(
            template,
            parse_conditionals(template),
            lambda d: self._choose(d, values),
        )
        return result

    def apply_inflections(
        self,
        template: str,
        values: RuntimeValues,
        skip: Sequence[Span] = (),
    ) -> str:
        """Run the inflection pass, leaving directives that overlap skip literal."""
        directives = [
            d for d in parse_inflections(template) if not _overlaps(d.start, d.end, skip)
        ]
        result, _ = _splice(template, directives, lambda d: self._inflect(d, values))
        return result

    def apply_injections(self, template: str, values: RuntimeValues) -> str:
        result, _ = _splice(
            template,
            parse_injections(template),
            lambda d: self._inject(d, values),
        )
        return result

    def _choose(self, directive: ConditionalDirective, values: RuntimeValues) -> str:
        if evaluate_condition(directive, values):
            return directive.true_text
        return directive.false_text

    def _inflect(self, directive: InflectionDirective, values: RuntimeValues) -> str:
        value = values.get(directive.name)
        if isinstance(value, bool):
            return self.inflector.inflect(directive.word, count_for_bool(value))
        if isinstance(value, (int, float)):
            return self.inflector.inflect(directive.word, value)
        return directive.word

    def _inject(self, directive: InjectionDirective, values: RuntimeValues) -> str:
        value = values.get(directive.name)
        if value is None:
            logger.debug("injection_unresolved", name=directive.name)
            return directive.source
        return stringify(value)


_default_engine: Optional[TemplateEngine] = None


def get_default_engine() -> TemplateEngine:
    """Return the shared English TemplateEngine, creating it on first use."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine


def interpolate(template: str, values: Optional[RuntimeValues] = None) -> str:
    """Evaluate template with the default English engine.

    Example:
        >>> interpolate("$[n>3]->'big'|'small'", {"n": 5})
        'big'
        >>> interpolate("($count)->cat", {"count": 3})
        'cats'
        >>> interpolate("Hello {name}", {})
        'Hello {name}'
    """
    return get_default_engine().interpolate(template, values)
