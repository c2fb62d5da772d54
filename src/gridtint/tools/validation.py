"""Precondition checks run before any host access."""

from collections.abc import Sequence
from typing import Any

from ..core.constants import ERRORS
from ..core.exceptions import InvalidInputError
from .colors import is_hex_color


def validate_color(color: Any) -> str:
    """Return color if it is a '#RRGGBB' string, else raise InvalidInputError."""
    if not is_hex_color(color):
        raise InvalidInputError(ERRORS.BAD_COLOR)
    return color


def validate_block(block: Any) -> tuple[int, int]:
    """
    Check that block is a non-empty rectangular 2D sequence.

    Args:
        block: Rows of cell values

    Returns:
        (row_count, column_count)

    Raises:
        InvalidInputError: If block is empty, ragged, or not two-dimensional
    """
    if not _is_row_sequence(block) or len(block) == 0:
        raise InvalidInputError(ERRORS.BAD_RANGE)

    rows = list(block)
    if not all(_is_row_sequence(row) for row in rows):
        raise InvalidInputError(ERRORS.BAD_RANGE)

    column_count = len(rows[0])
    if column_count == 0 or any(len(row) != column_count for row in rows):
        raise InvalidInputError(ERRORS.BAD_RANGE)

    return len(rows), column_count


def validate_coordinate(value: Any, limit: int | None = None) -> int:
    """
    Check that value is a positive integer coordinate no larger than limit.

    Spreadsheet hosts pass numbers as floats, so integral floats such as 3.0
    are accepted. Booleans are rejected.
    """
    if isinstance(value, bool):
        raise InvalidInputError(ERRORS.BAD_COORDINATES)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value < 1:
        raise InvalidInputError(ERRORS.BAD_COORDINATES)
    if limit is not None and value > limit:
        raise InvalidInputError(ERRORS.BAD_COORDINATES)
    return value


def _is_row_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
