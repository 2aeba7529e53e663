import logging
from collections import deque
from typing import Optional

from ..color import Color
from ..grid import Grid
from .base import BaseTool

logger = logging.getLogger(__name__)


def flood_fill(grid: Grid, row: int, col: int, fill_color: Optional[Color]) -> int:
    """
    BFS (Breadth-First Search) flood fill algorithm.
    Repaints the 4-connected region sharing the start cell's color.

    Returns:
        int: Number of cells repainted (0 if the start is outside the grid
        or already holds the fill color)
    """
    if not grid.in_bounds(row, col):
        return 0

    target_color = grid.get(row, col)

    # === If filling with the same color, do nothing === #
    if target_color == fill_color:
        return 0

    queue = deque([(row, col)])
    visited = {(row, col)}
    filled = 0

    while queue:
        r, c = queue.popleft()
        grid.set(r, c, fill_color)
        filled += 1

        for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if (nr, nc) in visited or not grid.in_bounds(nr, nc):
                continue
            if grid.get(nr, nc) != target_color:
                continue
            visited.add((nr, nc))
            queue.append((nr, nc))

    return filled


class BucketTool(BaseTool):
    def press(self, row, col):
        filled = flood_fill(self.session.active_grid, row, col, self.paint_color)
        if not filled:
            return False
        logger.debug("Flood fill at (%d, %d): %d cells", row, col, filled)
        self.session.record_snapshot()
        return True
