"""Reusable URI template primitive."""

from typing import Any

from tourism.uri_template.expansion import expand_template
from tourism.uri_template.parser import Expression, parameter_names, parse
from tourism.uri_template.values import ValueStore


class UriTemplate:
    """A URI template with its own set of bound values.

    Usage:
        template = UriTemplate("https://x/poi{?category,tag,limit}")
        template.set("category", ["Museum", "Garden"])
        template.set("limit", 10)
        template.build()  # "https://x/poi?category=Museum,Garden&limit=10"

    Values are bound once per name (first write wins). An instance must not
    be shared between concurrent expansions.
    """

    def __init__(self, template: str):
        self._template = template
        self._values = ValueStore()

    @property
    def template(self) -> str:
        return self._template

    @property
    def expressions(self) -> list[Expression]:
        return parse(self._template)

    @property
    def parameters(self) -> list[str]:
        """Variable names declared by the template, in order."""
        return parameter_names(self._template)

    def set(self, name: str, value: Any) -> None:
        """Bind a value to a variable.

        Raises:
            InvalidValueType: value is not a scalar, a list or a map
        """
        self._values.set(name, value)

    def has_parameter(self, name: str) -> bool:
        """Check if any expression of the template names the variable."""
        return any(name in expression.names for expression in parse(self._template))

    def build(self) -> str:
        """Expand the template with the values bound so far."""
        return expand_template(self._template, self._values, parse(self._template))

    def __str__(self) -> str:
        return self._template

    def __repr__(self) -> str:
        return f"UriTemplate({self._template!r})"
