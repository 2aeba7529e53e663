"""
Layer Stack for Pixel Studio

An ordered list of layers (index 0 is the bottom) plus the active index.
The stack is never empty and the active index always points at a layer.

"""

import logging
from typing import Iterator, List

from ..errors import OutOfBoundsError
from .layer import Layer

logger = logging.getLogger(__name__)


class LayerStack:
    """Owns the layers of one canvas"""

    def __init__(self, size: int):
        self._layers: List[Layer] = [Layer("Layer 1", size)]
        self._active_index = 0

    # === Read Access === #
    @property
    def size(self) -> int:
        return self._layers[0].size

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active(self) -> Layer:
        return self._layers[self._active_index]

    def __len__(self):
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __getitem__(self, index: int) -> Layer:
        self._check_index(index)
        return self._layers[index]

    def find(self, uid: int):
        """Return the layer with this uid, or None if it was deleted"""
        for layer in self._layers:
            if layer.uid == uid:
                return layer
        return None

    def index_of(self, layer: Layer) -> int:
        return self._layers.index(layer)

    def _check_index(self, index: int):
        if not 0 <= index < len(self._layers):
            raise OutOfBoundsError(f"Layer index {index} outside 0..{len(self._layers) - 1}")

    # === Mutations === #
    def add(self) -> Layer:
        """Append a blank layer on top and make it active"""
        layer = Layer(f"Layer {len(self._layers) + 1}", self.size)
        self._layers.append(layer)
        self._active_index = len(self._layers) - 1
        logger.debug("Added %r at index %d", layer, self._active_index)
        return layer

    def delete(self, index: int) -> bool:
        """
        Remove a layer

        Returns:
            bool: False if this is the last layer (nothing is removed)
        """
        self._check_index(index)
        if len(self._layers) <= 1:
            logger.warning("Cannot delete the last layer")
            return False

        was_active = index == self._active_index
        removed = self._layers.pop(index)

        if was_active:
            self._active_index = index - 1 if index > 0 else 0
        elif index < self._active_index:
            self._active_index -= 1
        self._clamp_active()

        logger.debug("Deleted %r, active index now %d", removed, self._active_index)
        return True

    def move(self, index: int, direction: int) -> bool:
        """
        Shift a layer one slot

        Args:
            index: Layer to move
            direction: -1 moves toward index 0, +1 toward the top

        Returns:
            bool: False if the move would leave the stack bounds
        """
        self._check_index(index)
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction!r}")

        new_index = index + direction
        if not 0 <= new_index < len(self._layers):
            logger.warning("Cannot move layer %d by %d: outside the stack", index, direction)
            return False

        layer = self._layers.pop(index)
        self._layers.insert(new_index, layer)

        # Active index follows the moved layer; the swap partner takes the vacated slot
        if self._active_index == index:
            self._active_index = new_index
        elif self._active_index == new_index:
            self._active_index = index
        self._clamp_active()
        return True

    def toggle_visibility(self, index: int) -> bool:
        layer = self[index]
        layer.visible = not layer.visible
        return layer.visible

    def set_active(self, index: int):
        self._check_index(index)
        self._active_index = index

    def _clamp_active(self):
        self._active_index = max(0, min(self._active_index, len(self._layers) - 1))

    def __repr__(self):
        return f"LayerStack({len(self._layers)} layers, active={self._active_index})"
