"""URI template expansion.

Implements the operator, explode and prefix-length rules of RFC 6570
templates, without per-operator percent-encoding.

Usage:
    from tourism.uri_template import UriTemplate

    template = UriTemplate("https://x/poi{?category*}")
    template.set("category", ["Museum", "Garden"])
    template.build()  # "https://x/poi?category=Museum&category=Garden"
"""

from tourism.uri_template.expansion import expand, expand_template
from tourism.uri_template.operators import DEFAULT_OPERATOR, OPERATORS, Operator, lookup
from tourism.uri_template.parser import Expression, Modifier, VarSpec, parameter_names, parse
from tourism.uri_template.template import UriTemplate
from tourism.uri_template.values import ListValue, MapValue, Scalar, Value, ValueStore

__all__ = [
    # Main API
    "UriTemplate",
    # Operators
    "DEFAULT_OPERATOR",
    "OPERATORS",
    "Operator",
    "lookup",
    # Parsing
    "Expression",
    "Modifier",
    "VarSpec",
    "parameter_names",
    "parse",
    # Values
    "ListValue",
    "MapValue",
    "Scalar",
    "Value",
    "ValueStore",
    # Expansion
    "expand",
    "expand_template",
]
