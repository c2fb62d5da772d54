"""Centralized constants for GridTint.

Grid limits and color formats shared by validation, addressing and the
host adapters.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class GridLimits:
    """Bounds of the host spreadsheet grid (1-based, inclusive)."""

    MAX_COLUMNS: Final[int] = 16384  # XFD
    MAX_ROWS: Final[int] = 1048576
    ALPHABET_SIZE: Final[int] = 26


@dataclass(frozen=True)
class ColorConstants:
    """Constants for color parsing and normalization."""

    HEX_COLOR_PATTERN: Final[str] = r"#[0-9A-Fa-f]{6}"
    NAMED_PREFIX: Final[str] = "named:"
    THEME_PREFIX: Final[str] = "theme:"
    DEFAULT_FONT_COLOR: Final[str] = "#000000"


@dataclass(frozen=True)
class ErrorMessages:
    """Messages carried by validation errors."""

    BAD_COLOR: Final[str] = "bad color format"
    BAD_RANGE: Final[str] = "bad range"
    BAD_COORDINATES: Final[str] = "bad coordinates"
    BAD_NAME: Final[str] = "color name must be a string"


# Create singleton instances for easy access
GRID_LIMITS = GridLimits()
COLORS = ColorConstants()
ERRORS = ErrorMessages()
