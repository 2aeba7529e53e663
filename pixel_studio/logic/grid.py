"""
Grid Class for Pixel Studio

A square buffer of optional colors, addressed as (row, col).
- Explicit reads/writes outside the grid raise OutOfBoundsError
- paint() is the tool write path and silently clips instead
- copy() never shares rows with the original

"""

from typing import Iterator, List, Optional, Sequence, Tuple

from ..errors import OutOfBoundsError
from .color import Color

Cell = Tuple[int, int]


class Grid:
    """A size x size array of Color or None"""

    __slots__ = ("size", "_rows")

    def __init__(self, size: int):
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise ValueError(f"Grid size must be a positive integer, got {size!r}")
        self.size = size
        self._rows: List[List[Optional[Color]]] = [[None] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[Color]]]) -> "Grid":
        """Build a grid from a square nested sequence"""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Rows must form a square")
        grid = cls(size)
        grid._rows = [list(row) for row in rows]
        return grid

    # === Bounds === #
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(f"Cell ({row}, {col}) outside {self.size}x{self.size} grid")

    # === Explicit Access === #
    def get(self, row: int, col: int) -> Optional[Color]:
        self._check(row, col)
        return self._rows[row][col]

    def set(self, row: int, col: int, color: Optional[Color]):
        self._check(row, col)
        self._rows[row][col] = color

    def __getitem__(self, cell: Cell) -> Optional[Color]:
        return self.get(*cell)

    def __setitem__(self, cell: Cell, color: Optional[Color]):
        self.set(cell[0], cell[1], color)

    # === Tool Write Path === #
    def paint(self, row: int, col: int, color: Optional[Color]) -> bool:
        """Write a cell, ignoring coordinates outside the grid. Returns True if written."""
        if not self.in_bounds(row, col):
            return False
        self._rows[row][col] = color
        return True

    def clear(self):
        for row in self._rows:
            row[:] = [None] * self.size

    # === Value Semantics === #
    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone.size = self.size
        clone._rows = [list(row) for row in self._rows]
        return clone

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self._rows == other._rows

    __hash__ = None

    # === Queries === #
    def cells(self) -> Iterator[Tuple[int, int, Optional[Color]]]:
        for r, row in enumerate(self._rows):
            for c, color in enumerate(row):
                yield r, c, color

    def painted_count(self) -> int:
        return sum(1 for row in self._rows for color in row if color is not None)

    def is_empty(self) -> bool:
        return self.painted_count() == 0

    def __repr__(self):
        return f"Grid({self.size}x{self.size}, painted={self.painted_count()})"
