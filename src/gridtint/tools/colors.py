"""Tools for resolving and comparing font colors."""

import re

from ..core.color_names import COLOR_NAME_TABLE
from ..core.constants import COLORS, ERRORS
from ..core.exceptions import InvalidInputError
from ..models.color import ColorDescriptor

_HEX_COLOR = re.compile(COLORS.HEX_COLOR_PATTERN)


def resolve_name(name: str) -> str:
    """
    Resolve a CSS color keyword to its hex equivalent.

    Lookup is case-insensitive. Unknown names are returned unchanged, so they
    can never equal a ``#RRGGBB`` target.

    Args:
        name: Color keyword (e.g. 'Tomato')

    Returns:
        '#rrggbb' for known keywords, otherwise ``name`` itself

    Raises:
        InvalidInputError: If name is not a string
    """
    if not isinstance(name, str):
        raise InvalidInputError(ERRORS.BAD_NAME)
    return COLOR_NAME_TABLE.get(name.lower(), name)


def is_hex_color(value: object) -> bool:
    """Check whether value is a '#RRGGBB' string."""
    return isinstance(value, str) and _HEX_COLOR.fullmatch(value) is not None


def normalize_font_color(color: ColorDescriptor | str) -> str:
    """Reduce a host font color to the string used for comparison."""
    descriptor = ColorDescriptor.parse(color)
    if descriptor.is_rgb:
        return descriptor.value
    return resolve_name(descriptor.value)


def colors_match(cell_color: str, target: str, case_insensitive: bool = False) -> bool:
    """Compare a normalized cell color against the target color."""
    if case_insensitive:
        return cell_color.lower() == target.lower()
    return cell_color == target
