"""Models for cell coordinates and range addresses."""

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import GRID_LIMITS


class CellCoordinate(BaseModel):
    """A 1-based (column, row) position in the host grid."""

    model_config = ConfigDict(frozen=True)

    column: int = Field(..., ge=1, le=GRID_LIMITS.MAX_COLUMNS, description="Column (1-based)")
    row: int = Field(..., ge=1, le=GRID_LIMITS.MAX_ROWS, description="Row (1-based)")


class RangeAddress(BaseModel):
    """A rectangular block of cells and its A1 notation (e.g., 'A1:B2')."""

    model_config = ConfigDict(frozen=True)

    start: CellCoordinate = Field(..., description="Top-left corner")
    end: CellCoordinate = Field(..., description="Bottom-right corner")
    address: str = Field(..., description="A1-style range address")

    @property
    def row_count(self) -> int:
        return self.end.row - self.start.row + 1

    @property
    def column_count(self) -> int:
        return self.end.column - self.start.column + 1

    @property
    def cell_count(self) -> int:
        return self.row_count * self.column_count

    def __str__(self) -> str:
        return self.address
