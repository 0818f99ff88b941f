"""Tests for the literal service functions."""

from __future__ import annotations

import pytest

from attrlit.services.literal import (
    ENCODING_ERROR,
    PARSE_ERROR,
    VALIDATION_ERROR,
    check_value,
    render_literal,
    unescape_literal,
)


class TestRenderLiteral:
    def test_success(self) -> None:
        result = render_literal("a<b")
        assert result.ok
        assert result.op == "render"
        assert result.data == {"raw": "a<b", "literal": '"a&lt;b"'}

    def test_restricted_character(self) -> None:
        result = render_literal("bell\x07")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == VALIDATION_ERROR
        assert result.error.detail == {"code_point": "#07", "range": "#00-#08"}
        assert "restricted XML range" in result.error.message

    def test_surrogate_input(self) -> None:
        result = render_literal("bad\udcff")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == ENCODING_ERROR
        assert result.error.detail == {"code_point": "#DCFF"}


class TestUnescapeLiteral:
    def test_success(self) -> None:
        result = unescape_literal('"&#65;&amp;"')
        assert result.ok
        assert result.data == {"literal": '"&#65;&amp;"', "raw": "A&"}

    def test_unknown_entity(self) -> None:
        result = unescape_literal('"&foo;"')
        assert not result.ok
        assert result.error is not None
        assert result.error.code == PARSE_ERROR
        assert result.error.detail == {"symbol": "foo"}

    def test_unterminated_entity_has_no_symbol(self) -> None:
        result = unescape_literal('"abc&amp"')
        assert result.error is not None
        assert result.error.code == PARSE_ERROR
        assert result.error.detail == {}

    def test_restricted_numeric_entity(self) -> None:
        result = unescape_literal('"&#31;"')
        assert result.error is not None
        assert result.error.code == VALIDATION_ERROR
        assert result.error.detail["code_point"] == "#1F"

    def test_surrogate_escape_is_a_parse_error(self) -> None:
        result = unescape_literal('"x&#55296;"')
        assert not result.ok
        assert result.error is not None
        assert result.error.code == PARSE_ERROR
        assert result.error.detail == {"code_point": "#D800"}
        assert result.data == {}

    def test_surrogate_in_input_literal(self) -> None:
        result = unescape_literal('"\udc80"')
        assert result.error is not None
        assert result.error.code == ENCODING_ERROR

    def test_short_literal_is_not_converted(self) -> None:
        with pytest.raises(ValueError):
            unescape_literal('"')

    def test_round_trip_through_services(self) -> None:
        rendered = render_literal("x='1' & y=\"2\"\n")
        recovered = unescape_literal(rendered.data["literal"])
        assert recovered.data["raw"] == "x='1' & y=\"2\"\n"


class TestCheckValue:
    def test_legal(self) -> None:
        result = check_value("fine\ttext")
        assert result.ok
        assert result.data == {"legal": True, "count": 0, "length": 9}

    def test_lists_all_violations(self) -> None:
        result = check_value("\x01a\x80")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == VALIDATION_ERROR
        assert result.error.detail["count"] == 2
        assert result.error.detail["violations"] == [
            {"index": 0, "code_point": "#01", "range": "#00-#08"},
            {"index": 2, "code_point": "#80", "range": "#7F-#84"},
        ]
        assert "#01" in result.error.message
