"""Mirror painting across the grid's center axes."""

from enum import Enum
from typing import List, Optional

from .color import Color
from .grid import Cell, Grid


class SymmetryMode(Enum):
    NONE = "none"
    VERTICAL = "vertical"      # mirror across the vertical axis (columns)
    HORIZONTAL = "horizontal"  # mirror across the horizontal axis (rows)
    BOTH = "both"


def mirror_cells(mode: SymmetryMode, size: int, row: int, col: int) -> List[Cell]:
    """Cells that reflect (row, col) under `mode`, excluding (row, col) itself"""
    if mode is SymmetryMode.NONE:
        return []

    mirrored = []
    sym_row = size - 1 - row
    sym_col = size - 1 - col

    if mode in (SymmetryMode.VERTICAL, SymmetryMode.BOTH) and sym_col != col:
        mirrored.append((row, sym_col))
    if mode in (SymmetryMode.HORIZONTAL, SymmetryMode.BOTH) and sym_row != row:
        mirrored.append((sym_row, col))
    if mode is SymmetryMode.BOTH and (sym_row, sym_col) != (row, col):
        mirrored.append((sym_row, sym_col))
    return mirrored


def plot(grid: Grid, row: int, col: int, color: Optional[Color], mode: SymmetryMode) -> bool:
    """
    Write one cell and its reflections

    Reflected writes are not reflected again. Out-of-range cells are skipped.

    Returns:
        bool: True if the original cell was inside the grid
    """
    if not grid.paint(row, col, color):
        return False
    for mirror_row, mirror_col in mirror_cells(mode, grid.size, row, col):
        grid.paint(mirror_row, mirror_col, color)
    return True
