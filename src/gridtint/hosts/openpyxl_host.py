"""Host backed by an openpyxl worksheet."""

import logging
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.styles.colors import COLOR_INDEX
from openpyxl.worksheet.worksheet import Worksheet

from ..core.constants import COLORS
from ..core.exceptions import HostAccessError
from ..models.addressing import CellCoordinate, RangeAddress
from ..models.color import ColorDescriptor
from ..tools.addressing import build_range_address
from ..tools.colors import is_hex_color
from .base import RangeHandle, SpreadsheetHost

logger = logging.getLogger(__name__)


def font_color_descriptor(color: Any, default_font_color: str) -> ColorDescriptor:
    """
    Convert an openpyxl font Color to a ColorDescriptor.

    Args:
        color: ``cell.font.color`` (an openpyxl Color or None)
        default_font_color: '#rrggbb' used when the cell has no explicit color

    Returns:
        RGB descriptor for rgb and indexed colors, a ``theme:<n>`` named
        descriptor for theme colors
    """
    if color is None or color.type == "auto":
        return ColorDescriptor.rgb(default_font_color)

    if color.type == "rgb" and isinstance(color.rgb, str):
        return ColorDescriptor.rgb(_argb_to_hex(color.rgb))

    if color.type == "indexed":
        # Indices past the palette are the system foreground/background colors
        if 0 <= color.indexed < len(COLOR_INDEX):
            hex_string = _argb_to_hex(COLOR_INDEX[color.indexed])
            if is_hex_color(hex_string):
                return ColorDescriptor.rgb(hex_string)
        return ColorDescriptor.rgb(default_font_color)

    if color.type == "theme":
        return ColorDescriptor.named(f"{COLORS.THEME_PREFIX}{color.theme}")

    logger.debug(f"Unrecognized font color type: {color.type}")
    return ColorDescriptor.rgb(default_font_color)


def _argb_to_hex(argb: str) -> str:
    return f"#{argb[-6:].lower()}"


class OpenpyxlRange(RangeHandle):
    """Range over an openpyxl worksheet."""

    def __init__(self, worksheet: Worksheet, address: RangeAddress, default_font_color: str):
        super().__init__(address)
        self.worksheet = worksheet
        self.default_font_color = default_font_color

    def get_font_colors(self) -> list[list[ColorDescriptor]]:
        try:
            return [
                [font_color_descriptor(cell.font.color, self.default_font_color) for cell in row]
                for row in self._rows()
            ]
        except Exception as e:
            raise HostAccessError(f"Failed to read font colors for {self.address}: {e}") from e

    def get_values(self) -> list[list[Any]]:
        try:
            return [[cell.value for cell in row] for row in self._rows()]
        except Exception as e:
            raise HostAccessError(f"Failed to read values for {self.address}: {e}") from e

    def _rows(self):
        return self.worksheet.iter_rows(
            min_row=self.address.start.row,
            max_row=self.address.end.row,
            min_col=self.address.start.column,
            max_col=self.address.end.column,
        )


class OpenpyxlHost(SpreadsheetHost):
    """Host that serves ranges from an openpyxl worksheet."""

    def __init__(
        self, worksheet: Worksheet, default_font_color: str = COLORS.DEFAULT_FONT_COLOR
    ):
        self.worksheet = worksheet
        self.default_font_color = default_font_color

    @classmethod
    def from_path(
        cls,
        file_path: str | Path,
        sheet_name: str | None = None,
        default_font_color: str = COLORS.DEFAULT_FONT_COLOR,
    ) -> "OpenpyxlHost":
        """
        Open a workbook and serve ranges from one of its worksheets.

        Args:
            file_path: Path to an .xlsx file
            sheet_name: Worksheet to use; the active sheet when None
            default_font_color: '#rrggbb' for cells without an explicit color

        Raises:
            HostAccessError: If the workbook or sheet cannot be opened
        """
        file_path = Path(file_path)
        try:
            # data_only returns cached formula results rather than formula text
            workbook = load_workbook(file_path, data_only=True)
        except Exception as e:
            raise HostAccessError(f"Could not open workbook {file_path}: {e}") from e

        if sheet_name is None:
            worksheet = workbook.active
        elif sheet_name in workbook.sheetnames:
            worksheet = workbook[sheet_name]
        else:
            raise HostAccessError(f"Sheet {sheet_name!r} not found in {file_path}")

        if worksheet is None:
            raise HostAccessError(f"Workbook {file_path} has no active sheet")

        logger.info(f"Opened sheet {worksheet.title!r} from {file_path}")
        return cls(worksheet, default_font_color=default_font_color)

    def resolve_range_address(
        self,
        top_left_col: int,
        top_left_row: int,
        bottom_right_col: int,
        bottom_right_row: int,
    ) -> OpenpyxlRange:
        start = CellCoordinate(column=top_left_col, row=top_left_row)
        address = build_range_address(
            start,
            row_count=bottom_right_row - top_left_row + 1,
            column_count=bottom_right_col - top_left_col + 1,
        )
        return OpenpyxlRange(self.worksheet, address, self.default_font_color)
