"""URI template parser.

Splits a template into its ``{...}`` expressions. Each expression carries
its operator and the ordered variable specs it names:

    parse("/poi{?category,tag*,code:3}")
    -> [Expression(operator="?", var_specs=(category, tag*, code:3))]

Parsing is permissive: a region whose content is not a valid variable
list (empty name, stray characters, a lone operator) is not an expression
and stays in the URI as literal text. Literal spans are never modeled.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto

from tourism.uri_template.operators import Operator, is_operator_prefix, lookup

logger = logging.getLogger(__name__)

# Regions do not nest: "{" closes at the next "}"
EXPRESSION_PATTERN = re.compile(r"\{([^{}]+)\}")

_VARCHAR = r"(?:[A-Za-z0-9_]|%[0-9A-Fa-f]{2})"
VARSPEC_PATTERN = re.compile(
    rf"(?P<name>{_VARCHAR}+(?:\.{_VARCHAR}+)*)"
    r"(?:(?P<explode>\*)|:(?P<length>[1-9][0-9]{0,3}))?"
)
_VARSPEC_SPLIT = re.compile(r"\s*,\s*|\s+")


class Modifier(Enum):
    """Value modifier attached to a variable."""

    NONE = auto()
    EXPLODE = auto()  # name*
    PREFIX = auto()  # name:N


@dataclass(frozen=True)
class VarSpec:
    """One variable of an expression."""

    name: str
    modifier: Modifier = Modifier.NONE
    length: int | None = None  # set only for Modifier.PREFIX

    @property
    def explode(self) -> bool:
        return self.modifier is Modifier.EXPLODE

    def __str__(self) -> str:
        if self.modifier is Modifier.EXPLODE:
            return f"{self.name}*"
        if self.modifier is Modifier.PREFIX:
            return f"{self.name}:{self.length}"
        return self.name


@dataclass(frozen=True)
class Expression:
    """A parsed ``{...}`` region of a template."""

    operator: Operator
    var_specs: tuple[VarSpec, ...]
    raw: str  # region text including braces
    start: int
    end: int

    @property
    def names(self) -> list[str]:
        return [spec.name for spec in self.var_specs]


def parse_var_spec(text: str) -> VarSpec | None:
    """Parse a single variable spec, or None if it is malformed."""
    match = VARSPEC_PATTERN.fullmatch(text)
    if not match:
        return None
    if match.group("explode"):
        return VarSpec(match.group("name"), Modifier.EXPLODE)
    if match.group("length"):
        return VarSpec(match.group("name"), Modifier.PREFIX, int(match.group("length")))
    return VarSpec(match.group("name"))


def parse_expression(content: str, start: int = 0, end: int | None = None) -> Expression | None:
    """Parse the content between braces.

    Args:
        content: Text inside the braces (operator prefix included)
        start: Offset of "{" in the template
        end: Offset just past "}" in the template

    Returns:
        Expression, or None when the content is malformed
    """
    operator = lookup("")
    body = content
    if content and is_operator_prefix(content[0]):
        operator = lookup(content[0])
        body = content[1:]

    body = body.strip()
    if not body:
        return None

    specs = []
    for text in _VARSPEC_SPLIT.split(body):
        spec = parse_var_spec(text)
        if spec is None:
            return None
        specs.append(spec)

    raw = "{" + content + "}"
    return Expression(
        operator=operator,
        var_specs=tuple(specs),
        raw=raw,
        start=start,
        end=end if end is not None else start + len(raw),
    )


def parse(template: str) -> list[Expression]:
    """Parse all expressions of a template, left to right."""
    expressions = []
    for match in EXPRESSION_PATTERN.finditer(template):
        expression = parse_expression(match.group(1), match.start(), match.end())
        if expression is None:
            logger.debug("Leaving malformed expression as literal: %s", match.group(0))
            continue
        expressions.append(expression)
    return expressions


def parameter_names(template: str) -> list[str]:
    """Get the distinct variable names of a template in order of appearance."""
    seen: dict[str, None] = {}
    for expression in parse(template):
        for name in expression.names:
            seen.setdefault(name, None)
    return list(seen)
