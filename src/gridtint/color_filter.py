"""Filter spreadsheet cells by font color."""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .config import Config
from .core.constants import GRID_LIMITS
from .core.exceptions import HostAccessError, ProcessingError
from .hosts.base import SpreadsheetHost
from .hosts.memory import SheetDataHost
from .hosts.openpyxl_host import OpenpyxlHost
from .models.addressing import CellCoordinate, RangeAddress
from .models.sheet_data import SheetData
from .tools.addressing import build_range_address
from .tools.colors import colors_match, normalize_font_color
from .tools.validation import validate_block, validate_color, validate_coordinate
from .utils.logging_context import (
    OperationContext,
    RangeContext,
    get_contextual_logger,
    setup_logging,
)

logger = get_contextual_logger(__name__)


class ColorFilter:
    """Returns the values of cells whose font color matches a target color."""

    def __init__(self, host: SpreadsheetHost, config: Config | None = None, **kwargs):
        """Initialize ColorFilter.

        Args:
            host: Spreadsheet the ranges are read from
            config: Configuration object. If None, loads from environment.
            **kwargs: Config overrides, applied to a validated copy of config

        Raises:
            ConfigurationError: If the environment or an override is invalid
        """
        if config is None:
            config = Config.from_env()

        self.host = host
        self.config = config.with_overrides(**kwargs)
        setup_logging(self.config)

    @classmethod
    def from_workbook(
        cls,
        file_path: str | Path,
        sheet_name: str | None = None,
        config: Config | None = None,
        **kwargs,
    ) -> "ColorFilter":
        """Create a filter reading from a worksheet of an .xlsx file."""
        config = (config or Config.from_env()).with_overrides(**kwargs)
        host = OpenpyxlHost.from_path(
            file_path, sheet_name=sheet_name, default_font_color=config.default_font_color
        )
        return cls(host, config=config)

    @classmethod
    def from_sheet(cls, sheet: SheetData, config: Config | None = None, **kwargs) -> "ColorFilter":
        """Create a filter reading from an in-memory SheetData."""
        config = (config or Config.from_env()).with_overrides(**kwargs)
        host = SheetDataHost(sheet, default_font_color=config.default_font_color)
        return cls(host, config=config)

    def __call__(
        self, color: Any, block: Sequence[Sequence[Any]], start_col: Any, start_row: Any
    ) -> list[Any]:
        """
        Filter cells by font color, hiding the cause of any failure.

        This is the entry point exposed to spreadsheet formulas. Every error is
        logged with its traceback and replaced by a ProcessingError carrying
        the configured message.

        Raises:
            ProcessingError: On any failure
        """
        with OperationContext("filter_by_color"):
            try:
                return self.filter(color, block, start_col, start_row)
            except Exception:
                logger.exception(
                    f"Font color filter failed (color={color!r}, "
                    f"start_col={start_col!r}, start_row={start_row!r})"
                )
        raise ProcessingError(self.config.error_message)

    def filter(
        self, color: Any, block: Sequence[Sequence[Any]], start_col: Any, start_row: Any
    ) -> list[Any]:
        """
        Filter cells by font color.

        Args:
            color: Target color as '#RRGGBB'
            block: Cell values already fetched by the caller, used for its shape
            start_col: Column of the block's top-left cell (1-based)
            start_row: Row of the block's top-left cell (1-based)

        Returns:
            Values of matching cells in row-major order; empty if none match

        Raises:
            InvalidInputError: If any argument fails validation
            HostAccessError: If the host cannot resolve or read the range
        """
        address = self.locate(color, block, start_col, start_row)

        with RangeContext(address.address):
            logger.debug(f"Reading {address.cell_count} cells")
            handle = self.host.resolve(address)

            # Two separate reads; the host does not make them atomic
            font_colors = handle.get_font_colors()
            values = handle.get_values()
            self._check_shape(address, font_colors, "font colors")
            self._check_shape(address, values, "values")

            matches = []
            for color_row, value_row in zip(font_colors, values):
                for cell_color, value in zip(color_row, value_row):
                    normalized = normalize_font_color(cell_color)
                    if colors_match(normalized, color, self.config.case_insensitive_hex):
                        matches.append(value)

            logger.debug(f"{len(matches)} of {address.cell_count} cells match {color}")
            return matches

    def locate(
        self, color: Any, block: Sequence[Sequence[Any]], start_col: Any, start_row: Any
    ) -> RangeAddress:
        """Validate the arguments and build the range address they cover."""
        validate_color(color)
        row_count, column_count = validate_block(block)
        start = CellCoordinate(
            column=validate_coordinate(start_col, GRID_LIMITS.MAX_COLUMNS),
            row=validate_coordinate(start_row, GRID_LIMITS.MAX_ROWS),
        )
        return build_range_address(start, row_count, column_count)

    @staticmethod
    def _check_shape(address: RangeAddress, grid: list[list[Any]], what: str) -> None:
        if len(grid) != address.row_count or any(
            len(row) != address.column_count for row in grid
        ):
            raise HostAccessError(
                f"Host returned {what} that do not cover {address} "
                f"({address.row_count}x{address.column_count})"
            )


def filter_by_color(
    host: SpreadsheetHost,
    color: Any,
    block: Sequence[Sequence[Any]],
    start_col: Any,
    start_row: Any,
    config: Config | None = None,
) -> list[Any]:
    """Filter cells of ``host`` by font color.

    Convenience wrapper around ``ColorFilter(host, config)(...)``. Failures
    while building the filter, such as an invalid environment or an
    unwritable log file, go through the same boundary as filtering.

    Raises:
        ProcessingError: On any failure
    """
    with OperationContext("filter_by_color"):
        try:
            color_filter = ColorFilter(host, config=config)
        except Exception:
            logger.exception("Could not set up font color filter")
        else:
            return color_filter(color, block, start_col, start_row)
    message = config.error_message if config is not None else ProcessingError.DEFAULT_MESSAGE
    raise ProcessingError(message)
