"""Tests for the ArgumentValue value object."""

from __future__ import annotations

import dataclasses

import pytest

from attrlit.domain.arg import ArgumentValue
from attrlit.domain.errors import ParseError, ValidationError


class TestConstruction:
    def test_keeps_raw_unchanged(self) -> None:
        assert ArgumentValue("a & b").raw == "a & b"

    @pytest.mark.parametrize(
        "code_point", [0x00, 0x08, 0x0B, 0x0C, 0x0E, 0x1F, 0x7F, 0x84, 0x86, 0x9F]
    )
    def test_rejects_restricted(self, code_point: int) -> None:
        with pytest.raises(ValidationError) as excinfo:
            ArgumentValue(f"x{chr(code_point)}y")
        assert excinfo.value.code_point == code_point

    @pytest.mark.parametrize("code_point", [0x09, 0x0A, 0x0D, 0x20, 0x7E, 0x85, 0xA0])
    def test_accepts_boundary_neighbours(self, code_point: int) -> None:
        assert ArgumentValue(chr(code_point)).raw == chr(code_point)

    def test_frozen(self) -> None:
        value = ArgumentValue("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.raw = "b"  # type: ignore[misc]


class TestRender:
    def test_escape_mapping(self) -> None:
        assert ArgumentValue("<a>&\"'").render() == '"&lt;a&gt;&amp;&quot;&apos;"'

    def test_str_matches_render(self) -> None:
        value = ArgumentValue("line\nbreak")
        assert str(value) == value.render() == '"line&#10;break"'


class TestEquality:
    def test_equal_values(self) -> None:
        assert ArgumentValue("same") == ArgumentValue("same")
        assert hash(ArgumentValue("same")) == hash(ArgumentValue("same"))

    def test_different_values(self) -> None:
        assert ArgumentValue("one") != ArgumentValue("two")

    def test_usable_as_set_member(self) -> None:
        assert len({ArgumentValue("x"), ArgumentValue("x"), ArgumentValue("y")}) == 2


class TestFromLiteral:
    def test_round_trip(self) -> None:
        value = ArgumentValue("Tom & 'Jerry'\t<3")
        assert ArgumentValue.from_literal(value.render()) == value

    def test_propagates_parse_errors(self) -> None:
        with pytest.raises(ParseError):
            ArgumentValue.from_literal('"&bogus;"')
