"""Tests for URI template parsing, value binding and expansion."""

import pytest

from tourism.core.types import ListTerm
from tourism.exceptions import InvalidValueType
from tourism.uri_template import (
    ListValue,
    MapValue,
    Modifier,
    Scalar,
    UriTemplate,
    ValueStore,
    VarSpec,
    expand,
    expand_template,
    parameter_names,
    parse,
)
from tourism.uri_template.parser import parse_expression

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build(template: str, **values) -> str:
    """Bind keyword values to a template and build it."""
    uri_template = UriTemplate(template)
    for name, value in values.items():
        uri_template.set(name, value)
    return uri_template.build()


KEYS = {"semi": ";", "dot": "."}


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestParse:
    def test_query_expression(self):
        expressions = parse("https://x/poi{?category,tag,limit,offset}")
        assert len(expressions) == 1
        assert expressions[0].operator.prefix == "?"
        assert expressions[0].names == ["category", "tag", "limit", "offset"]

    def test_default_operator_when_no_prefix(self):
        (expression,) = parse("{var}")
        assert expression.operator.prefix == ""
        assert expression.var_specs == (VarSpec("var"),)

    def test_expressions_in_template_order(self):
        template = "/a/{b}/c{?d}"
        expressions = parse(template)
        assert [e.names for e in expressions] == [["b"], ["d"]]
        assert template[expressions[0].start : expressions[0].end] == "{b}"
        assert template[expressions[1].start : expressions[1].end] == "{?d}"

    def test_explode_modifier(self):
        (expression,) = parse("{?list*}")
        assert expression.var_specs[0].modifier is Modifier.EXPLODE
        assert expression.var_specs[0].explode

    def test_prefix_modifier_is_part_of_one_var_spec(self):
        """'{var:3}' is one variable with a length, not two variables."""
        (expression,) = parse("{var:3}")
        assert expression.var_specs == (VarSpec("var", Modifier.PREFIX, 3),)
        assert expression.names == ["var"]

    def test_mixed_modifiers(self):
        (expression,) = parse("{?a,b*,c:12}")
        assert [str(spec) for spec in expression.var_specs] == ["a", "b*", "c:12"]

    def test_dotted_names(self):
        (expression,) = parse("{a.b}")
        assert expression.names == ["a.b"]

    def test_whitespace_between_names_is_tolerated(self):
        (expression,) = parse("{?a, b c}")
        assert expression.names == ["a", "b", "c"]

    @pytest.mark.parametrize(
        "template",
        [
            "{}",
            "{?}",
            "{a,,b}",
            "{,a}",
            "{!x}",
            "{var:0}",
            "{var:12345}",
            "{var*:3}",
            "{unterminated",
            "x{a",
        ],
    )
    def test_malformed_regions_are_not_expressions(self, template):
        assert parse(template) == []

    def test_parse_expression_returns_none_for_empty_body(self):
        assert parse_expression("?") is None
        assert parse_expression("") is None

    def test_parameter_names_are_distinct_and_ordered(self):
        assert parameter_names("{a}{?b,a}{&c*}") == ["a", "b", "c"]


# ---------------------------------------------------------------------------
# Value store
# ---------------------------------------------------------------------------


class TestValueStore:
    def test_scalar_shapes(self):
        store = ValueStore()
        store.set("s", "text")
        store.set("i", 10)
        store.set("f", 1.5)
        store.set("b", True)
        assert store.get("s") == Scalar("text")
        assert store.get("i") == Scalar("10")
        assert store.get("f") == Scalar("1.5")
        assert store.get("b") == Scalar("true")

    def test_list_and_map_shapes(self):
        store = ValueStore()
        store.set("l", ("a", 1))
        store.set("m", {"k": "v", "n": 2})
        assert store.get("l") == ListValue(("a", "1"))
        assert store.get("m") == MapValue((("k", "v"), ("n", "2")))

    def test_enum_values_use_their_value(self):
        store = ValueStore()
        store.set("list", ListTerm.POI)
        assert store.get("list") == Scalar("poi")

    def test_first_write_wins(self):
        store = ValueStore()
        store.set("a", "first")
        store.set("a", "second")
        assert store.get("a") == Scalar("first")
        assert len(store) == 1

    @pytest.mark.parametrize("value", [None, object(), [["nested"]], {"k": [1]}, {1, 2}])
    def test_unsupported_values_rejected(self, value):
        store = ValueStore()
        with pytest.raises(InvalidValueType):
            store.set("a", value)
        assert "a" not in store


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------


class TestExpansion:
    def test_query_with_list_and_scalars(self):
        uri = _build(
            "https://x/poi{?category,tag,limit,offset}",
            category=["Museum", "Garden"],
            tag="culture",
            limit=10,
            offset=0,
        )
        assert uri == "https://x/poi?category=Museum,Garden&tag=culture&limit=10&offset=0"

    def test_query_list_explode(self):
        assert _build("{?list*}", list=["a", "b"]) == "?list=a&list=b"

    def test_query_list_no_explode(self):
        assert _build("{?list}", list=["a", "b"]) == "?list=a,b"

    def test_map_explode_is_not_percent_encoded(self):
        assert _build("{&keys*}", keys=KEYS) == "&semi=;&dot=."

    def test_map_no_explode(self):
        assert _build("{keys}", keys=KEYS) == "semi,;,dot,."
        assert _build("{?keys}", keys=KEYS) == "?keys=semi,;,dot,."

    def test_map_explode_pairs_even_when_unnamed(self):
        assert _build("{keys*}", keys=KEYS) == "semi=;,dot=."
        assert _build("{/keys*}", keys=KEYS) == "/semi=;/dot=."

    def test_prefix_length(self):
        assert _build("{var:3}", var="hello") == "hel"
        assert _build("{?var:3}", var="hello") == "?var=hel"

    def test_prefix_longer_than_value(self):
        assert _build("{var:30}", var="hello") == "hello"

    def test_prefix_is_ignored_for_lists(self):
        assert _build("{list:2}", list=["abc", "def"]) == "abc,def"

    def test_unbound_expression_expands_to_nothing(self):
        assert _build("https://x/poi{?x}") == "https://x/poi"

    def test_unbound_variables_are_skipped(self):
        assert _build("{?a,b,c}", a=1, c=3) == "?a=1&c=3"

    def test_empty_list_counts_as_unbound(self):
        assert _build("{?list,x}", list=[], x=1) == "?x=1"

    @pytest.mark.parametrize(
        "template,expected",
        [
            ("{list}", "a,b"),
            ("{list*}", "a,b"),
            ("{/list}", "/a,b"),
            ("{/list*}", "/a/b"),
            ("{.list*}", ".a.b"),
            ("{#list}", "#a,b"),
            ("{;list*}", ";list=a;list=b"),
        ],
    )
    def test_list_under_each_operator(self, template, expected):
        assert _build(template, list=["a", "b"]) == expected

    def test_path_parameters(self):
        assert _build("{;x,y}", x=1024, y=768) == ";x=1024;y=768"

    def test_reserved_and_fragment(self):
        assert _build("{+path}/here", path="/foo/bar") == "/foo/bar/here"
        assert _build("X{#var}", var="value") == "X#value"

    def test_spaces_are_encoded_everywhere(self):
        assert _build("a b/{var}", var="hello world") == "a%20b/hello%20world"

    def test_trailing_separator_is_dropped(self):
        assert _build("{var}", var="a,") == "a"

    def test_repeated_expression(self):
        assert _build("{a}/{a}", a="x") == "x/x"

    def test_malformed_regions_stay_literal(self):
        assert _build("https://x/{}/{a,,b}/{c}", c=1) == "https://x/{}/{a,,b}/1"

    def test_expand_single_expression(self):
        store = ValueStore()
        store.set("who", "fred")
        expression = parse_expression("?who")
        assert expand(expression, store) == "?who=fred"

    def test_expand_template_parses_when_not_given(self):
        store = ValueStore()
        store.set("id", 7)
        assert expand_template("/poi/{id}", store) == "/poi/7"


# ---------------------------------------------------------------------------
# UriTemplate
# ---------------------------------------------------------------------------


class TestUriTemplate:
    def test_has_parameter(self):
        template = UriTemplate("https://x/poi{?category,tag}")
        assert template.has_parameter("category")
        assert template.has_parameter("tag")
        assert not template.has_parameter("poi")
        assert not template.has_parameter("x")

    def test_has_parameter_ignores_prefix_length(self):
        template = UriTemplate("{var:3}")
        assert template.has_parameter("var")
        assert not template.has_parameter("3")

    def test_undeclared_binding_does_not_change_uri(self):
        template = UriTemplate("https://x/poi{?category}")
        template.set("category", "a")
        before = template.build()
        assert not template.has_parameter("bogus")
        template.set("bogus", "value")
        assert template.build() == before

    def test_build_is_idempotent(self):
        template = UriTemplate("https://x/poi{?category*,tag}")
        template.set("category", ["a", "b"])
        template.set("tag", "t")
        assert template.build() == template.build()

    def test_parameters_property(self):
        assert UriTemplate("{base}{id}{?relation}").parameters == ["base", "id", "relation"]

    def test_set_rejects_invalid_value(self):
        template = UriTemplate("{a}")
        with pytest.raises(InvalidValueType):
            template.set("a", None)

    def test_str_is_template(self):
        assert str(UriTemplate("{a}")) == "{a}"
