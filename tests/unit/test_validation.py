"""Tests for input validation."""

import pytest

from gridtint.core.exceptions import InvalidInputError
from gridtint.tools.validation import validate_block, validate_color, validate_coordinate


class TestValidateColor:
    """Test '#RRGGBB' validation."""

    @pytest.mark.parametrize("color", ["#ff0000", "#FF0000", "#aBc123", "#000000"])
    def test_valid(self, color):
        assert validate_color(color) == color

    @pytest.mark.parametrize(
        "color",
        [
            "red",
            "#ZZZZZZ",
            "#FFF",
            "",
            "ff0000",
            "#ff00000",
            "#ff0000\n",
            " #ff0000",
            None,
            0xFF0000,
        ],
    )
    def test_invalid(self, color):
        with pytest.raises(InvalidInputError, match="bad color format"):
            validate_color(color)


class TestValidateBlock:
    """Test rectangular block validation."""

    def test_dimensions(self):
        assert validate_block([["a", "b"], ["c", "d"], ["e", "f"]]) == (3, 2)
        assert validate_block([[None]]) == (1, 1)

    def test_tuples_accepted(self):
        assert validate_block((("a",), ("b",))) == (2, 1)

    @pytest.mark.parametrize(
        "block",
        [
            [],
            [[]],
            [[], []],
            [["a", "b"], ["c"]],
            ["ab", "cd"],
            "abcd",
            [["a"], "b"],
            None,
            42,
            {"a": 1},
        ],
    )
    def test_invalid(self, block):
        with pytest.raises(InvalidInputError, match="bad range"):
            validate_block(block)


class TestValidateCoordinate:
    """Test coordinate validation."""

    @pytest.mark.parametrize("value,expected", [(1, 1), (26, 26), (27, 27), (3.0, 3)])
    def test_valid(self, value, expected):
        assert validate_coordinate(value) == expected

    @pytest.mark.parametrize(
        "value", [0, -1, -5.0, 1.5, "1", None, True, False, float("nan"), float("inf")]
    )
    def test_invalid(self, value):
        with pytest.raises(InvalidInputError, match="bad coordinates"):
            validate_coordinate(value)

    def test_limit(self):
        assert validate_coordinate(16384, limit=16384) == 16384
        with pytest.raises(InvalidInputError):
            validate_coordinate(16385, limit=16384)
