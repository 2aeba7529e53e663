"""
Layer Class for Pixel Studio

Represents a single drawing layer with:
- Grid buffer (the actual cell data)
- Visibility and opacity
- A stable uid so history can find the layer again after reordering

"""

import itertools

from .grid import Grid

_uid_counter = itertools.count(1)


class Layer:
    """A single drawing layer"""

    def __init__(self, name: str, size: int):
        """
        Initialize a new layer

        Args:
            name: Layer name (e.g., "Layer 1")
            size: Canvas size in cells; the grid starts fully transparent
        """
        self.uid = next(_uid_counter)
        self.name = name
        self.visible = True
        self._opacity = 1.0  # 0.0 to 1.0

        self.grid = Grid(size)

    @property
    def opacity(self) -> float:
        return self._opacity

    @opacity.setter
    def opacity(self, value: float):
        self._opacity = max(0.0, min(1.0, float(value)))

    @property
    def size(self) -> int:
        return self.grid.size

    def clear(self):
        """Wipes the layer clean."""
        self.grid.clear()

    def replace_grid(self, grid: Grid):
        """Swap in a new buffer; the old one is dropped, never mutated."""
        if grid.size != self.grid.size:
            raise ValueError(f"Grid size {grid.size} does not match layer size {self.grid.size}")
        self.grid = grid

    def __repr__(self):
        """String representation for debugging"""
        return f"Layer('{self.name}', visible={self.visible}, opacity={self.opacity:.2f})"
