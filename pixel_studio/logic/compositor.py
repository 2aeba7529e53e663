"""Flattens a layer stack into a single grid."""

from typing import Iterable

from .color import Color
from .grid import Grid
from .layer import Layer


def composite(layers: Iterable[Layer], size: int) -> Grid:
    """
    Merge visible layers bottom to top

    The first color to land on a transparent cell is taken as-is, whatever
    its layer's opacity. Later colors are lerped over it by layer opacity.

    Args:
        layers: Layers in stack order (index 0 first)
        size: Canvas size in cells

    Returns:
        Grid: a new grid; the layers are not modified
    """
    result = Grid(size)
    for layer in layers:
        if not layer.visible:
            continue
        opacity = layer.opacity
        for row, col, color in layer.grid.cells():
            if color is None:
                continue
            existing = result.get(row, col)
            if existing is None:
                result.set(row, col, color)
            else:
                result.set(row, col, Color.lerp(existing, color, opacity))
    return result
