"""
Whole-grid transforms: flip, rotate and resize

Every function reads from the source grid and returns a freshly allocated
one. The source is never written.

"""

from typing import Callable

from ..grid import Grid


def _remap(source: Grid, pick: Callable[[int, int, int], tuple]) -> Grid:
    """Build a new grid where cell (r, c) takes source[pick(r, c, last)]"""
    frozen = source.copy()
    last = frozen.size - 1
    result = Grid(frozen.size)
    for r in range(frozen.size):
        for c in range(frozen.size):
            result.set(r, c, frozen.get(*pick(r, c, last)))
    return result


def flip_horizontal(grid: Grid) -> Grid:
    return _remap(grid, lambda r, c, last: (r, last - c))


def flip_vertical(grid: Grid) -> Grid:
    return _remap(grid, lambda r, c, last: (last - r, c))


def rotate_90(grid: Grid) -> Grid:
    """Clockwise quarter turn"""
    return _remap(grid, lambda r, c, last: (last - c, r))


def rotate_180(grid: Grid) -> Grid:
    return _remap(grid, lambda r, c, last: (last - r, last - c))


def rotate_270(grid: Grid) -> Grid:
    """Counter-clockwise quarter turn"""
    return _remap(grid, lambda r, c, last: (c, last - r))


_ROTATIONS = {1: rotate_90, 2: rotate_180, 3: rotate_270}


def rotate(grid: Grid, quarter_turns: int) -> Grid:
    """
    Rotate clockwise by a number of quarter turns

    Negative values turn counter-clockwise. Multiples of four return an
    unchanged copy.
    """
    turns = quarter_turns % 4
    if turns == 0:
        return grid.copy()
    return _ROTATIONS[turns](grid)


def resize_grid(grid: Grid, new_size: int) -> Grid:
    """
    Copy the top-left overlap into a blank grid of `new_size`

    Growing keeps everything; shrinking crops the right and bottom edges
    for good.
    """
    result = Grid(new_size)
    span = min(grid.size, new_size)
    for r in range(span):
        for c in range(span):
            result.set(r, c, grid.get(r, c))
    return result
