"""
Pixel Studio

A layered pixel-art editing engine: grid, layers, drawing tools,
compositing and undo history. UI layers drive it through EditorSession.

"""

from .errors import (ConfigError, ExportError, OutOfBoundsError, PixelStudioError,
                     ReentrantMutationError)
from .logic import Color, Grid, Layer, LayerStack, SymmetryMode, composite
from .logic.tools import ToolType
from .session import EditorSession
from .config_manager import Settings, load_settings

__version__ = "0.1.0"

__all__ = [
    'EditorSession', 'Settings', 'load_settings',
    'Color', 'Grid', 'Layer', 'LayerStack', 'SymmetryMode', 'ToolType', 'composite',
    'PixelStudioError', 'OutOfBoundsError', 'ConfigError', 'ExportError', 'ReentrantMutationError',
]
