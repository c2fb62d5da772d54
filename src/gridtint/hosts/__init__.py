"""Host spreadsheet adapters.

A host resolves a range address to a handle that reads font colors and values.
"""

from .base import RangeHandle, SpreadsheetHost
from .memory import SheetDataHost
from .openpyxl_host import OpenpyxlHost

__all__ = ["SpreadsheetHost", "RangeHandle", "SheetDataHost", "OpenpyxlHost"]
