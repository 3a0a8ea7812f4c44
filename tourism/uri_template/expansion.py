"""Expression expansion.

Turns a parsed expression plus the bound values into the text that
replaces the expression in the template. Expansion never fails: unbound
variables (and empty lists or maps) contribute nothing, and an expression
with no contributions expands to an empty string.

Values are inserted as-is. The only encoding applied is the final
replacement of spaces with ``%20`` over the whole built URI, so reserved
characters such as ";" or "&" inside values are not escaped.
"""

from tourism.uri_template.operators import Operator
from tourism.uri_template.parser import Expression, Modifier, VarSpec, parse
from tourism.uri_template.values import ListValue, MapValue, Scalar, Value, ValueStore


def _named(name: str, value: str, operator: Operator) -> str:
    return f"{name}={value}" if operator.named else value


def expand_var(spec: VarSpec, value: Value, operator: Operator) -> list[str]:
    """Expand one variable into its contributions.

    Exploded lists and maps yield one contribution per item; everything
    else yields a single contribution. An empty list means "undefined".
    """
    if isinstance(value, Scalar):
        text = value.value
        if spec.modifier is Modifier.PREFIX and spec.length is not None:
            text = text[: spec.length]
        return [_named(spec.name, text, operator)]

    # Prefix modifiers do not apply to composite values
    if isinstance(value, ListValue):
        if not value.items:
            return []
        if spec.explode:
            return [_named(spec.name, item, operator) for item in value.items]
        return [_named(spec.name, ",".join(value.items), operator)]

    if isinstance(value, MapValue):
        if not value.pairs:
            return []
        if spec.explode:
            # Exploded maps always pair key with value
            return [f"{key}={item}" for key, item in value.pairs]
        flat = ",".join(f"{key},{item}" for key, item in value.pairs)
        return [_named(spec.name, flat, operator)]

    return []


def expand(expression: Expression, store: ValueStore) -> str:
    """Expand a single expression against the bound values."""
    operator = expression.operator
    parts: list[str] = []
    defined = False

    for spec in expression.var_specs:
        value = store.get(spec.name)
        if value is None:
            continue
        contributions = expand_var(spec, value, operator)
        if contributions:
            defined = True
            parts.extend(contributions)

    if not defined:
        return ""

    joined = operator.separator.join(parts)
    if joined.endswith(operator.separator):
        joined = joined[: -len(operator.separator)]
    return operator.insertion + joined


def encode_spaces(uri: str) -> str:
    return uri.replace(" ", "%20")


def expand_template(
    template: str,
    store: ValueStore,
    expressions: list[Expression] | None = None,
) -> str:
    """Substitute every expression of a template and encode spaces.

    Args:
        template: Template string
        store: Bound values
        expressions: Pre-parsed expressions of ``template`` (parsed if omitted)

    Returns:
        The built URI
    """
    if expressions is None:
        expressions = parse(template)

    pieces = []
    cursor = 0
    for expression in expressions:
        pieces.append(template[cursor : expression.start])
        pieces.append(expand(expression, store))
        cursor = expression.end
    pieces.append(template[cursor:])

    return encode_spaces("".join(pieces))
