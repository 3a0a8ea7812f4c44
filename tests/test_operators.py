"""Tests for the expression operator table."""

import string

import pytest

from tourism.uri_template.operators import (
    DEFAULT_OPERATOR,
    OPERATORS,
    PREFIXES,
    is_operator_prefix,
    lookup,
)


class TestLookup:
    """lookup() is total: every character yields an operator."""

    @pytest.mark.parametrize(
        "prefix,insertion,separator,named",
        [
            ("+", "", ",", False),
            ("#", "#", ",", False),
            (".", ".", ".", False),
            ("/", "/", "/", False),
            (";", ";", ";", True),
            ("?", "?", "&", True),
            ("&", "&", "&", True),
        ],
    )
    def test_known_prefixes(self, prefix, insertion, separator, named):
        op = lookup(prefix)
        assert op.prefix == prefix
        assert op.insertion == insertion
        assert op.separator == separator
        assert op.named is named

    def test_empty_prefix_is_default(self):
        assert lookup("") is DEFAULT_OPERATOR
        assert DEFAULT_OPERATOR.separator == ","
        assert DEFAULT_OPERATOR.named is False

    def test_every_printable_character_resolves(self):
        for char in string.printable:
            op = lookup(char)
            assert op is not None
            if char not in PREFIXES:
                assert op is DEFAULT_OPERATOR, f"{char!r} should fall back to default"

    def test_reserved_rfc_prefixes_fall_back_to_default(self):
        for char in "=,!@|":
            assert lookup(char) is DEFAULT_OPERATOR


class TestOperatorTable:
    def test_eight_entries(self):
        assert len(OPERATORS) == 8

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            OPERATORS["x"] = DEFAULT_OPERATOR  # type: ignore[index]

    def test_operators_are_frozen(self):
        with pytest.raises(AttributeError):
            lookup("?").separator = ","  # type: ignore[misc]

    def test_reserved_operator_has_no_insertion(self):
        assert lookup("+").insertion == ""
        assert lookup("#").insertion == "#"

    def test_is_operator_prefix(self):
        assert is_operator_prefix("?")
        assert is_operator_prefix("+")
        assert not is_operator_prefix("")
        assert not is_operator_prefix("a")
