"""
Two-click shape tools: line, rectangle and circle

The first press stores a start cell, the second rasterizes the shape and
returns to idle. Switching tools cancels a pending start.

"""

import logging
import math
from enum import Enum
from typing import Iterable, Iterator, Optional

from ..color import Color
from ..grid import Cell, Grid
from ..symmetry import SymmetryMode, plot
from .base import BaseTool

logger = logging.getLogger(__name__)


# ==========================================
# Rasterizers
# ==========================================

def line_cells(r0: int, c0: int, r1: int, c1: int) -> Iterator[Cell]:
    """Bresenham's line, both endpoints included"""
    dx = abs(c1 - c0)
    dy = abs(r1 - r0)
    sx = 1 if c0 < c1 else -1
    sy = 1 if r0 < r1 else -1
    err = dx - dy

    while True:
        yield r0, c0
        if r0 == r1 and c0 == c1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            c0 += sx
        if e2 < dx:
            err += dx
            r0 += sy


def rectangle_cells(r0: int, c0: int, r1: int, c1: int) -> Iterator[Cell]:
    """Every cell of the filled box spanned by two corners, in any order"""
    for r in range(min(r0, r1), max(r0, r1) + 1):
        for c in range(min(c0, c1), max(c0, c1) + 1):
            yield r, c


def circle_cells(center_row: int, center_col: int, end_row: int, end_col: int) -> Iterator[Cell]:
    """
    A one-cell ring around the center

    The radius is the distance to the end cell; a cell is on the ring when
    its distance from the center is within half a cell of the radius.
    """
    radius = math.hypot(end_col - center_col, end_row - center_row)
    reach = int(math.floor(radius + 0.5))
    for y in range(-reach, reach + 1):
        for x in range(-reach, reach + 1):
            if abs(math.hypot(x, y) - radius) < 0.5:
                yield center_row + y, center_col + x


def draw_cells(grid: Grid, cells: Iterable[Cell], color: Optional[Color],
               symmetry: SymmetryMode = SymmetryMode.NONE) -> int:
    """Plot cells with symmetry; returns how many fell inside the grid"""
    return sum(1 for r, c in cells if plot(grid, r, c, color, symmetry))


# ==========================================
# Two-click state
# ==========================================

class ShapePhase(Enum):
    IDLE = "idle"
    AWAITING_END = "awaiting_end"


class ShapeState:
    """Pending start cell shared by the shape tools of one session"""

    def __init__(self):
        self.start: Optional[Cell] = None

    @property
    def phase(self) -> ShapePhase:
        return ShapePhase.IDLE if self.start is None else ShapePhase.AWAITING_END

    def begin(self, row: int, col: int):
        self.start = (row, col)

    def cancel(self):
        self.start = None

    def __repr__(self):
        return f"ShapeState({self.phase.value}, start={self.start})"


class ShapeTool(BaseTool):
    name = "shape"

    def rasterize(self, start: Cell, end: Cell) -> Iterable[Cell]:
        raise NotImplementedError

    def press(self, row, col):
        state = self.session.shape_state
        if state.start is None:
            state.begin(row, col)
            logger.debug("%s start at (%d, %d)", self.name, row, col)
            return False

        start = state.start
        state.cancel()
        written = draw_cells(self.session.active_grid, self.rasterize(start, (row, col)),
                             self.paint_color, self.session.symmetry)
        logger.debug("%s %s -> %s: %d cells", self.name, start, (row, col), written)
        self.session.record_snapshot()
        return True

    def reset(self):
        self.session.shape_state.cancel()


class LineTool(ShapeTool):
    name = "line"

    def rasterize(self, start, end):
        return line_cells(start[0], start[1], end[0], end[1])


class RectangleTool(ShapeTool):
    name = "rectangle"

    def rasterize(self, start, end):
        return rectangle_cells(start[0], start[1], end[0], end[1])


class CircleTool(ShapeTool):
    name = "circle"

    def rasterize(self, start, end):
        return circle_cells(start[0], start[1], end[0], end[1])
