"""Tools for addressing ranges, validating input and normalizing colors."""

from .addressing import build_range_address, column_index, column_letter, parse_range_address
from .colors import colors_match, is_hex_color, normalize_font_color, resolve_name
from .validation import validate_block, validate_color, validate_coordinate

__all__ = [
    "column_letter",
    "column_index",
    "build_range_address",
    "parse_range_address",
    "resolve_name",
    "is_hex_color",
    "normalize_font_color",
    "colors_match",
    "validate_color",
    "validate_block",
    "validate_coordinate",
]
