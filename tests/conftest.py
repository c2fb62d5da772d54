"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from openpyxl import Workbook
from openpyxl.styles import Font

from gridtint.config import Config
from gridtint.hosts.memory import SheetDataHost
from gridtint.models.sheet_data import SheetData


@pytest.fixture
def config() -> Config:
    """Configuration that does not depend on the environment."""
    return Config()


@pytest.fixture
def scenario_sheet() -> SheetData:
    """2x2 sheet at A1 mixing RGB and named font colors."""
    return SheetData.from_grid(
        "Scenario",
        values=[["a", "b"], ["c", "d"]],
        font_colors=[["#ff0000", "#00ff00"], ["named:red", "#ff0000"]],
    )


@pytest.fixture
def scenario_host(scenario_sheet: SheetData) -> SheetDataHost:
    return SheetDataHost(scenario_sheet)


@pytest.fixture
def offset_sheet() -> SheetData:
    """3x3 block of mixed value types anchored at C5 (0-based row 4, column 2)."""
    return SheetData.from_grid(
        "Offset",
        values=[
            ["Product", "Price", "Quantity"],
            ["Widget A", 19.99, 5],
            ["Widget B", True, None],
        ],
        font_colors=[
            ["#0000ff", "#0000ff", "tomato"],
            ["Tomato", None, "#FF6347"],
            ["notacolor", "#ff6347", "named:TOMATO"],
        ],
        start_row=4,
        start_col=2,
    )


@pytest.fixture
def colored_workbook(tmp_path: Path) -> Path:
    """Workbook with red, green, default-styled and uncolored text."""
    path = tmp_path / "colors.xlsx"
    wb = Workbook()
    ws = wb.active
    ws.title = "Colors"

    ws["A1"] = "a"
    ws["A1"].font = Font(color="FF0000")
    ws["B1"] = "b"
    ws["B1"].font = Font(color="00FF00")
    ws["A2"] = "c"
    ws["A2"].font = Font(color="FF0000")
    ws["B2"] = "d"
    # Styled font with no color of its own
    ws["C2"] = "plain"
    ws["C2"].font = Font(bold=True)

    # Second sheet past column Z
    wide = wb.create_sheet("Wide")
    wide["Z3"] = "z"
    wide["Z3"].font = Font(color="FF0000")
    wide["AA3"] = "aa"
    wide["AA3"].font = Font(color="FF0000")
    wide["AB3"] = 42
    wide["AB3"].font = Font(color="0000FF")

    wb.save(path)
    wb.close()
    return path
