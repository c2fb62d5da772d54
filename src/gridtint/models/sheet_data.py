"""Data models for representing sheet content."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CellData(BaseModel):
    """Represents a single cell with its value and font color."""

    model_config = ConfigDict(strict=True)

    value: str | int | float | bool | datetime | date | Decimal | None = Field(
        None, description="Cell value"
    )
    font_color: str | None = Field(
        None, description="Font color ('#rrggbb' or a color keyword, optionally 'named:'-prefixed)"
    )

    # Position information
    row: int = Field(..., ge=0, description="Row index (0-based)")
    column: int = Field(..., ge=0, description="Column index (0-based)")


class SheetData(BaseModel):
    """Represents a sheet as a sparse grid of cells."""

    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Sheet name")
    cells: dict[tuple[int, int], CellData] = Field(
        default_factory=dict, description="Cells indexed by (row, column), 0-based"
    )
    max_row: int = Field(0, ge=0, description="Maximum row index with data")
    max_column: int = Field(0, ge=0, description="Maximum column index with data")

    def get_cell(self, row: int, column: int) -> CellData | None:
        """Get cell data by row and column indices."""
        return self.cells.get((row, column))

    def set_cell(self, row: int, column: int, cell_data: CellData) -> None:
        """Set cell data at specific position."""
        cell_data.row = row
        cell_data.column = column
        self.cells[(row, column)] = cell_data

        # Update max dimensions
        self.max_row = max(self.max_row, row)
        self.max_column = max(self.max_column, column)

    def get_range_data(
        self, start_row: int, start_col: int, end_row: int, end_col: int
    ) -> list[list[CellData | None]]:
        """Get cells in a specific range (0-based, inclusive)."""
        result = []
        for row in range(start_row, end_row + 1):
            row_data = []
            for col in range(start_col, end_col + 1):
                row_data.append(self.get_cell(row, col))
            result.append(row_data)
        return result

    @classmethod
    def from_grid(
        cls,
        name: str,
        values: list[list[object]],
        font_colors: list[list[str | None]] | None = None,
        start_row: int = 0,
        start_col: int = 0,
    ) -> "SheetData":
        """Build a sheet from parallel value and font-color grids."""
        sheet = cls(name=name)
        for row_idx, row in enumerate(values):
            for col_idx, value in enumerate(row):
                color = font_colors[row_idx][col_idx] if font_colors else None
                sheet.set_cell(
                    start_row + row_idx,
                    start_col + col_idx,
                    CellData(
                        value=value,
                        font_color=color,
                        row=start_row + row_idx,
                        column=start_col + col_idx,
                    ),
                )
        return sheet
