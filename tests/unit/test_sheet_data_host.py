"""Tests for the in-memory SheetData host."""

from gridtint.hosts.memory import SheetDataHost
from gridtint.models.color import ColorDescriptor
from gridtint.models.sheet_data import CellData, SheetData


class TestSheetDataHost:
    """Test reading ranges from SheetData."""

    def test_reads_values_and_colors(self, scenario_host):
        handle = scenario_host.resolve_range_address(1, 1, 2, 2)
        assert handle.address.address == "A1:B2"
        assert handle.get_values() == [["a", "b"], ["c", "d"]]
        assert handle.get_font_colors() == [
            [ColorDescriptor.rgb("#ff0000"), ColorDescriptor.rgb("#00ff00")],
            [ColorDescriptor.named("red"), ColorDescriptor.rgb("#ff0000")],
        ]

    def test_sub_range_is_one_based(self, scenario_host):
        handle = scenario_host.resolve_range_address(2, 2, 2, 2)
        assert handle.get_values() == [["d"]]

    def test_missing_cells_are_empty_with_default_color(self):
        sheet = SheetData(name="Sparse")
        sheet.set_cell(0, 0, CellData(value="x", font_color="#123456", row=0, column=0))
        host = SheetDataHost(sheet, default_font_color="#000000")

        handle = host.resolve_range_address(1, 1, 2, 1)
        assert handle.get_values() == [["x", None]]
        assert handle.get_font_colors() == [
            [ColorDescriptor.rgb("#123456"), ColorDescriptor.rgb("#000000")]
        ]

    def test_reads_see_edits_between_calls(self, scenario_sheet):
        host = SheetDataHost(scenario_sheet)
        handle = host.resolve_range_address(1, 1, 1, 1)
        assert handle.get_values() == [["a"]]

        scenario_sheet.set_cell(0, 0, CellData(value="edited", row=0, column=0))
        assert handle.get_values() == [["edited"]]


class TestSheetData:
    """Test SheetData helpers."""

    def test_from_grid_offsets(self, offset_sheet):
        assert offset_sheet.get_cell(4, 2).value == "Product"
        assert offset_sheet.get_cell(6, 4).value is None
        assert (offset_sheet.max_row, offset_sheet.max_column) == (6, 4)
