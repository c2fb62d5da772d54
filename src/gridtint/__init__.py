"""GridTint - filter spreadsheet cells by font color."""

__version__ = "0.1.0"

from gridtint.color_filter import ColorFilter, filter_by_color
from gridtint.config import Config
from gridtint.core.exceptions import (
    GridTintError,
    HostAccessError,
    InvalidInputError,
    ProcessingError,
)
from gridtint.tools.colors import resolve_name

__all__ = [
    "ColorFilter",
    "filter_by_color",
    "resolve_name",
    "Config",
    "GridTintError",
    "InvalidInputError",
    "HostAccessError",
    "ProcessingError",
]
