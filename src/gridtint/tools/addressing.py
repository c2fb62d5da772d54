"""Tools for converting grid coordinates to A1 range addresses."""

import re

from ..core.constants import ERRORS, GRID_LIMITS
from ..core.exceptions import InvalidInputError
from ..models.addressing import CellCoordinate, RangeAddress

_CELL_REF = re.compile(r"\$?([A-Za-z]{1,3})\$?(\d+)")


def column_letter(index: int) -> str:
    """
    Encode a 1-based column index as spreadsheet letters.

    Uses bijective base-26, so 1 -> A, 26 -> Z, 27 -> AA, 16384 -> XFD.

    Args:
        index: Column index (1-based)

    Returns:
        Column letters

    Raises:
        InvalidInputError: If the index is outside the grid
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidInputError(ERRORS.BAD_COORDINATES)
    if not 1 <= index <= GRID_LIMITS.MAX_COLUMNS:
        raise InvalidInputError(ERRORS.BAD_COORDINATES)

    letters = ""
    while index > 0:
        index, remainder = divmod(index - 1, GRID_LIMITS.ALPHABET_SIZE)
        letters = chr(remainder + ord("A")) + letters
    return letters


def column_index(letters: str) -> int:
    """Decode spreadsheet column letters to a 1-based index."""
    if not letters or not letters.isalpha() or not letters.isascii():
        raise InvalidInputError(f"Invalid column letters: {letters!r}")

    index = 0
    for char in letters.upper():
        index = index * GRID_LIMITS.ALPHABET_SIZE + (ord(char) - ord("A") + 1)
    if index > GRID_LIMITS.MAX_COLUMNS:
        raise InvalidInputError(ERRORS.BAD_COORDINATES)
    return index


def build_range_address(start: CellCoordinate, row_count: int, column_count: int) -> RangeAddress:
    """
    Build the range address covering a block anchored at ``start``.

    Args:
        start: Top-left corner of the block
        row_count: Number of rows in the block
        column_count: Number of columns in the block

    Returns:
        RangeAddress whose bottom-right corner is
        (start.column + column_count - 1, start.row + row_count - 1)

    Raises:
        InvalidInputError: If the block extends past the grid
    """
    if row_count < 1 or column_count < 1:
        raise InvalidInputError(ERRORS.BAD_RANGE)

    end_column = start.column + column_count - 1
    end_row = start.row + row_count - 1
    if end_column > GRID_LIMITS.MAX_COLUMNS or end_row > GRID_LIMITS.MAX_ROWS:
        raise InvalidInputError(ERRORS.BAD_COORDINATES)

    end = CellCoordinate(column=end_column, row=end_row)
    address = (
        f"{column_letter(start.column)}{start.row}:{column_letter(end.column)}{end.row}"
    )
    return RangeAddress(start=start, end=end, address=address)


def parse_range_address(address: str) -> RangeAddress:
    """Parse an A1 address such as 'B2:C3' or a single cell 'B2'."""
    parts = address.strip().split(":")
    if len(parts) not in (1, 2):
        raise InvalidInputError(f"Invalid range address: {address!r}")

    corners = []
    for part in parts:
        match = _CELL_REF.fullmatch(part)
        if not match:
            raise InvalidInputError(f"Invalid range address: {address!r}")
        row = int(match.group(2))
        if not 1 <= row <= GRID_LIMITS.MAX_ROWS:
            raise InvalidInputError(ERRORS.BAD_COORDINATES)
        corners.append(CellCoordinate(column=column_index(match.group(1)), row=row))

    start, end = corners[0], corners[-1]
    if end.column < start.column or end.row < start.row:
        raise InvalidInputError(f"Range corners out of order: {address!r}")

    return build_range_address(
        start,
        row_count=end.row - start.row + 1,
        column_count=end.column - start.column + 1,
    )
