"""In-memory host backed by SheetData."""

from typing import Any

from ..core.constants import COLORS
from ..models.addressing import CellCoordinate, RangeAddress
from ..models.color import ColorDescriptor
from ..models.sheet_data import SheetData
from ..tools.addressing import build_range_address
from .base import RangeHandle, SpreadsheetHost


class SheetDataRange(RangeHandle):
    """Range over a SheetData. Cells missing from the sheet read as empty."""

    def __init__(self, sheet: SheetData, address: RangeAddress, default_font_color: str):
        super().__init__(address)
        self.sheet = sheet
        self.default_font_color = default_font_color

    def get_font_colors(self) -> list[list[ColorDescriptor]]:
        return [
            [
                ColorDescriptor.parse(
                    cell.font_color if cell and cell.font_color else self.default_font_color
                )
                for cell in row
            ]
            for row in self._cells()
        ]

    def get_values(self) -> list[list[Any]]:
        return [[cell.value if cell else None for cell in row] for row in self._cells()]

    def _cells(self):
        # SheetData is 0-based
        return self.sheet.get_range_data(
            self.address.start.row - 1,
            self.address.start.column - 1,
            self.address.end.row - 1,
            self.address.end.column - 1,
        )


class SheetDataHost(SpreadsheetHost):
    """Host that serves ranges from an in-memory SheetData."""

    def __init__(self, sheet: SheetData, default_font_color: str = COLORS.DEFAULT_FONT_COLOR):
        self.sheet = sheet
        self.default_font_color = default_font_color

    def resolve_range_address(
        self,
        top_left_col: int,
        top_left_row: int,
        bottom_right_col: int,
        bottom_right_row: int,
    ) -> SheetDataRange:
        start = CellCoordinate(column=top_left_col, row=top_left_row)
        address = build_range_address(
            start,
            row_count=bottom_right_row - top_left_row + 1,
            column_count=bottom_right_col - top_left_col + 1,
        )
        return SheetDataRange(self.sheet, address, self.default_font_color)
