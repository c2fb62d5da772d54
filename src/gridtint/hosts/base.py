"""Abstract interface to a host spreadsheet."""

from abc import ABC, abstractmethod
from typing import Any

from ..models.addressing import RangeAddress
from ..models.color import ColorDescriptor


class RangeHandle(ABC):
    """
    A live rectangular range in a host spreadsheet.

    Each read goes to the host again. Two reads are not atomic with respect
    to edits made between them.
    """

    def __init__(self, address: RangeAddress):
        self.address = address

    @abstractmethod
    def get_font_colors(self) -> list[list[ColorDescriptor]]:
        """Read the font color of every cell, row-major."""
        pass

    @abstractmethod
    def get_values(self) -> list[list[Any]]:
        """Read the current value of every cell, row-major."""
        pass


class SpreadsheetHost(ABC):
    """Abstract base class for host spreadsheets."""

    @abstractmethod
    def resolve_range_address(
        self,
        top_left_col: int,
        top_left_row: int,
        bottom_right_col: int,
        bottom_right_row: int,
    ) -> RangeHandle:
        """
        Resolve 1-based corner coordinates to a range handle.

        Raises:
            HostAccessError: If the host cannot resolve the range
        """
        pass

    def resolve(self, address: RangeAddress) -> RangeHandle:
        """Resolve a RangeAddress to a range handle."""
        return self.resolve_range_address(
            address.start.column,
            address.start.row,
            address.end.column,
            address.end.row,
        )
