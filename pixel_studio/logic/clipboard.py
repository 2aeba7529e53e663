"""Single-slot clipboard holding a flattened canvas."""

import logging
from typing import Optional

from .grid import Grid

logger = logging.getLogger(__name__)


class Clipboard:
    def __init__(self):
        self.grid: Optional[Grid] = None

    @property
    def has_content(self) -> bool:
        return self.grid is not None

    def copy(self, composited: Grid):
        self.grid = composited.copy()
        logger.debug("Copied %r", self.grid)

    def paste_into(self, target: Grid) -> bool:
        """
        Overlay the stored grid onto `target`, top-left aligned

        Only the overlapping region is written (transparent cells included);
        cells of `target` outside it keep their content.

        Returns:
            bool: False if the clipboard is empty
        """
        if self.grid is None:
            return False
        span = min(self.grid.size, target.size)
        for row in range(span):
            for col in range(span):
                target.set(row, col, self.grid.get(row, col))
        return True
