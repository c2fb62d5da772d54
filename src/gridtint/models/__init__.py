"""Data models for GridTint."""

from .addressing import CellCoordinate, RangeAddress
from .color import ColorDescriptor, ColorKind
from .sheet_data import CellData, SheetData

__all__ = [
    "CellCoordinate",
    "RangeAddress",
    "ColorDescriptor",
    "ColorKind",
    "CellData",
    "SheetData",
]
