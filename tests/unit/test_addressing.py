"""Tests for column letters and range addresses."""

import pytest

from gridtint.core.exceptions import InvalidInputError
from gridtint.models.addressing import CellCoordinate
from gridtint.tools.addressing import (
    build_range_address,
    column_index,
    column_letter,
    parse_range_address,
)


class TestColumnLetter:
    """Test bijective base-26 encoding."""

    @pytest.mark.parametrize(
        "index,letters",
        [
            (1, "A"),
            (2, "B"),
            (26, "Z"),
            (27, "AA"),
            (52, "AZ"),
            (53, "BA"),
            (702, "ZZ"),
            (703, "AAA"),
            (16384, "XFD"),
        ],
    )
    def test_encoding(self, index, letters):
        assert column_letter(index) == letters
        assert column_index(letters) == index

    @pytest.mark.parametrize("index", [0, -1, 16385, True, 1.0, "A"])
    def test_invalid_index(self, index):
        with pytest.raises(InvalidInputError, match="bad coordinates"):
            column_letter(index)

    def test_column_index_lowercase(self):
        assert column_index("xfd") == 16384

    @pytest.mark.parametrize("letters", ["", "A1", "Ä", "XFE"])
    def test_column_index_invalid(self, letters):
        with pytest.raises(InvalidInputError):
            column_index(letters)


class TestBuildRangeAddress:
    """Test range address construction."""

    def test_single_cell(self):
        address = build_range_address(CellCoordinate(column=1, row=1), 1, 1)
        assert address.address == "A1:A1"
        assert address.cell_count == 1

    def test_block_extents(self):
        address = build_range_address(CellCoordinate(column=3, row=5), 3, 2)
        assert str(address) == "C5:D7"
        assert address.end == CellCoordinate(column=4, row=7)
        assert address.row_count == 3
        assert address.column_count == 2

    def test_crosses_column_z(self):
        address = build_range_address(CellCoordinate(column=25, row=10), 2, 4)
        assert address.address == "Y10:AB11"

    def test_past_last_column(self):
        with pytest.raises(InvalidInputError, match="bad coordinates"):
            build_range_address(CellCoordinate(column=16384, row=1), 1, 2)

    def test_past_last_row(self):
        with pytest.raises(InvalidInputError, match="bad coordinates"):
            build_range_address(CellCoordinate(column=1, row=1048576), 2, 1)

    def test_empty_extent(self):
        with pytest.raises(InvalidInputError, match="bad range"):
            build_range_address(CellCoordinate(column=1, row=1), 0, 1)


class TestParseRangeAddress:
    """Test A1 address parsing."""

    def test_range(self):
        address = parse_range_address("B2:C3")
        assert address.start == CellCoordinate(column=2, row=2)
        assert address.end == CellCoordinate(column=3, row=3)
        assert address.address == "B2:C3"

    def test_single_cell_and_absolute_refs(self):
        assert parse_range_address("$AA$7").address == "AA7:AA7"

    @pytest.mark.parametrize("text", ["", "A", "1", "A0:B2", "C3:B2", "A1:B2:C3", "A1-B2"])
    def test_invalid(self, text):
        with pytest.raises(InvalidInputError):
            parse_range_address(text)
