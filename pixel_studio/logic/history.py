"""
History Manager for Undo/Redo

State-snapshot history:
- record() saves a copy of the active layer's grid after each action
- The top of the undo stack is always the current state
- Both stacks are bounded; the oldest entries drop off first

Each snapshot remembers which layer it came from, so undo and redo write
back into that layer even if another layer has since become active.

"""

import logging
from collections import deque
from typing import NamedTuple, Optional

from .. import config
from .grid import Grid
from .layer_stack import LayerStack

logger = logging.getLogger(__name__)


class HistorySnapshot(NamedTuple):
    layer_uid: int
    grid: Grid


class HistoryManager:
    """Manages undo/redo history for one canvas"""

    def __init__(self, limit: int = config.MAX_HISTORY):
        """
        Initialize history manager

        Args:
            limit: Maximum number of undo states (default 50)
                Older states are automatically removed to save memory
        """
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self.undo_stack = deque(maxlen=limit)
        self.redo_stack = deque(maxlen=limit)

    def record(self, stack: LayerStack):
        """Snapshot the active layer. Any redo future is discarded."""
        layer = stack.active
        self.undo_stack.append(HistorySnapshot(layer.uid, layer.grid.copy()))
        self.redo_stack.clear()
        logger.debug("Recorded %s (undo=%d)", layer.name, len(self.undo_stack))

    def undo(self, stack: LayerStack) -> Optional[int]:
        """
        Step back one action

        The newest snapshot moves to the redo stack and its layer is restored
        to the most recent older snapshot of that same layer.

        Returns:
            int: Index of the restored layer, or None if nothing was restored
        """
        if len(self.undo_stack) <= 1:
            return None  # The last entry is the current state

        undone = self.undo_stack.pop()
        self.redo_stack.append(undone)

        previous = next((s for s in reversed(self.undo_stack) if s.layer_uid == undone.layer_uid), None)
        if previous is None:
            logger.debug("No earlier state for layer uid %d", undone.layer_uid)
            return None
        return self._restore(stack, previous)

    def redo(self, stack: LayerStack) -> Optional[int]:
        """
        Re-apply the last undone action

        Returns:
            int: Index of the restored layer, or None if nothing to redo
        """
        if not self.redo_stack:
            return None

        snapshot = self.redo_stack.pop()
        self.undo_stack.append(HistorySnapshot(snapshot.layer_uid, snapshot.grid.copy()))
        return self._restore(stack, snapshot)

    def _restore(self, stack: LayerStack, snapshot: HistorySnapshot) -> Optional[int]:
        layer = stack.find(snapshot.layer_uid)
        if layer is None:
            logger.debug("Layer uid %d no longer exists", snapshot.layer_uid)
            return None
        if layer.size != snapshot.grid.size:
            return None
        layer.replace_grid(snapshot.grid.copy())
        logger.debug("Restored %s from history", layer.name)
        return stack.index_of(layer)

    def reset(self):
        self.undo_stack.clear()
        self.redo_stack.clear()

    def can_undo(self) -> bool:
        """Check if undo is available"""
        return len(self.undo_stack) > 1

    def can_redo(self) -> bool:
        """Check if redo is available"""
        return len(self.redo_stack) > 0

    def get_stats(self) -> dict:
        """
        Get statistics about history usage

        Returns:
            dict: Undo/redo counts and whether the undo stack is full
        """
        return {
            'undo_count': len(self.undo_stack),
            'redo_count': len(self.redo_stack),
            'limit': self.limit,
            'undo_full': len(self.undo_stack) >= self.limit
        }
