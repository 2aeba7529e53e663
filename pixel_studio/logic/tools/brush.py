import logging
from typing import Iterator, Optional

from ..color import Color
from ..grid import Cell, Grid
from ..symmetry import SymmetryMode, plot
from .base import BaseTool

logger = logging.getLogger(__name__)


def brush_cells(row: int, col: int, size: int) -> Iterator[Cell]:
    """
    The window painted by one brush dab

    Reaches (size - 1) // 2 cells each side of the center, so size 2
    paints the same single cell as size 1.
    """
    reach = (size - 1) // 2
    for dr in range(-reach, reach + 1):
        for dc in range(-reach, reach + 1):
            yield row + dr, col + dc


def paint_brush(grid: Grid, row: int, col: int, size: int,
                color: Optional[Color], symmetry: SymmetryMode = SymmetryMode.NONE) -> int:
    """
    Stamp the brush at (row, col), clipping at the edges

    Returns:
        int: Number of in-bounds cells written (mirrors not counted)
    """
    written = 0
    for r, c in brush_cells(row, col, size):
        if plot(grid, r, c, color, symmetry):
            written += 1
    return written


class BrushTool(BaseTool):
    def __init__(self, session, is_eraser=False):
        super().__init__(session)
        self.is_eraser = is_eraser
        self.stroke_dirty = False

    @property
    def paint_color(self):
        return None if self.is_eraser else self.session.color

    def _dab(self, row, col) -> int:
        return paint_brush(self.session.active_grid, row, col, self.session.brush_size,
                           self.paint_color, self.session.symmetry)

    def press(self, row, col):
        # === A tap is a complete action; close any open drag first === #
        self.finish_stroke()
        written = self._dab(row, col)
        if not self.is_eraser:
            self.session.remember_color(self.session.color)
        if written:
            self.session.record_snapshot()
        logger.debug("%s tap at (%d, %d): %d cells", "Eraser" if self.is_eraser else "Brush", row, col, written)
        return written > 0

    def drag(self, row, col):
        # === Dragging paints but defers history to end_stroke() === #
        if self._dab(row, col):
            self.stroke_dirty = True
            return True
        return False

    def finish_stroke(self) -> bool:
        if not self.stroke_dirty:
            return False
        self.stroke_dirty = False
        self.session.record_snapshot()
        return True

    def reset(self):
        self.stroke_dirty = False
