"""Template values.

Values bound to template variables are one of three shapes:

- Scalar: a single string (ints, floats and bools are rendered as text)
- ListValue: an ordered sequence of strings
- MapValue: an ordered sequence of (key, string) pairs

Anything else is rejected at bind time with InvalidValueType.
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tourism.exceptions import InvalidValueType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scalar:
    value: str


@dataclass(frozen=True)
class ListValue:
    items: tuple[str, ...]


@dataclass(frozen=True)
class MapValue:
    pairs: tuple[tuple[str, str], ...]


Value = Scalar | ListValue | MapValue


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def _render_scalar(value: str | int | float | bool) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    # bool first: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_value(name: str, value: Any) -> Value:
    """Convert a caller value into its tagged shape.

    Raises:
        InvalidValueType: value is not a scalar, a list of scalars or a
            mapping of scalars
    """
    if isinstance(value, (Scalar, ListValue, MapValue)):
        return value
    if _is_scalar(value):
        return Scalar(_render_scalar(value))
    if isinstance(value, (list, tuple)):
        if not all(_is_scalar(item) for item in value):
            raise InvalidValueType(f"{name} list items must be primitive values")
        return ListValue(tuple(_render_scalar(item) for item in value))
    if isinstance(value, Mapping):
        if not all(_is_scalar(item) for item in value.values()):
            raise InvalidValueType(f"{name} map values must be primitive values")
        return MapValue(tuple((str(k), _render_scalar(v)) for k, v in value.items()))
    raise InvalidValueType(f"{name} should have a primitive type, a list or a map as its value")


class ValueStore:
    """Name to value bindings for one template expansion.

    A name is bound at most once: later sets of the same name are ignored.
    """

    def __init__(self) -> None:
        self._values: dict[str, Value] = {}

    def set(self, name: str, value: Any) -> None:
        converted = to_value(name, value)
        if name in self._values:
            logger.debug("Ignoring second binding of %s", name)
            return
        self._values[name] = converted

    def get(self, name: str) -> Value | None:
        return self._values.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
