"""
Logic Package for Pixel Studio

Contains data structures and drawing algorithms:
- Color, Grid: cell values and the square buffer holding them
- Layer, LayerStack: ordered layers with one active
- composite: flattening visible layers
- HistoryManager: Undo/redo system
- Clipboard: single-slot flattened copy

"""

from .color import Color
from .grid import Grid
from .layer import Layer
from .layer_stack import LayerStack
from .compositor import composite
from .history import HistoryManager, HistorySnapshot
from .clipboard import Clipboard
from .symmetry import SymmetryMode

__all__ = ['Color', 'Grid', 'Layer', 'LayerStack', 'composite',
           'HistoryManager', 'HistorySnapshot', 'Clipboard', 'SymmetryMode']
