"""Expression operators.

Each operator is keyed by the character that may follow the opening brace
of an expression. The table is built once at import time and never
mutated; unknown prefixes fall back to simple string expansion.
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Operator:
    """Expansion rule for one operator prefix."""

    prefix: str  # character consumed after "{", "" for simple expansion
    insertion: str  # emitted once before the expression output
    separator: str  # placed between variable contributions
    named: bool  # contributions rendered as name=value


DEFAULT_OPERATOR = Operator(prefix="", insertion="", separator=",", named=False)

OPERATORS = MappingProxyType(
    {
        "": DEFAULT_OPERATOR,
        "+": Operator(prefix="+", insertion="", separator=",", named=False),  # reserved
        "#": Operator(prefix="#", insertion="#", separator=",", named=False),  # fragment
        ".": Operator(prefix=".", insertion=".", separator=".", named=False),  # label
        "/": Operator(prefix="/", insertion="/", separator="/", named=False),  # path segment
        ";": Operator(prefix=";", insertion=";", separator=";", named=True),  # path parameter
        "?": Operator(prefix="?", insertion="?", separator="&", named=True),  # query
        "&": Operator(prefix="&", insertion="&", separator="&", named=True),  # query continuation
    }
)

# Characters that select a non-default operator
PREFIXES = frozenset(p for p in OPERATORS if p)


def lookup(prefix: str) -> Operator:
    """Get the operator for a prefix character, or the default one."""
    return OPERATORS.get(prefix, DEFAULT_OPERATOR)


def is_operator_prefix(char: str) -> bool:
    """Check if a character selects a non-default operator."""
    return char in PREFIXES
