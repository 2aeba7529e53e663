"""
Editor Session for Pixel Studio

Bundles everything one canvas needs:
- LayerStack (the layers and which one is active)
- Tool state (current tool, color, brush size, symmetry, pending shape start)
- HistoryManager and Clipboard

Callers resolve pointer positions to (row, col) cells before calling in.
Every mutation runs to completion before returning, and signals fire only
after the state is consistent again.

"""

import logging
from contextlib import contextmanager
from typing import List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from . import export
from .config_manager import Settings, load_settings
from .errors import ReentrantMutationError
from .logic.clipboard import Clipboard
from .logic.color import Color, ColorLike, to_color
from .logic.compositor import composite
from .logic.grid import Grid
from .logic.history import HistoryManager
from .logic.layer import Layer
from .logic.layer_stack import LayerStack
from .logic.symmetry import SymmetryMode
from .logic.tools import SHAPE_TOOLS, ShapeState, ToolType, build_tools
from .logic.tools import transform

logger = logging.getLogger(__name__)


class EditorSession(QObject):
    canvas_changed = pyqtSignal()
    history_changed = pyqtSignal(bool, bool)  # can_undo, can_redo

    def __init__(self, size: Optional[int] = None, settings: Optional[Settings] = None, parent=None):
        super().__init__(parent)
        self.settings = settings if settings is not None else load_settings()

        size = self.settings.default_grid_size if size is None else size
        self._check_grid_size(size)

        # === Data === #
        self.layers = LayerStack(size)
        self.history = HistoryManager(self.settings.max_history)
        self.clipboard = Clipboard()

        # === Tool State === #
        self.color: Optional[Color] = self.settings.default_color
        self.brush_size = self.settings.brush_sizes[0]
        self.symmetry = SymmetryMode.NONE
        self.recent_colors: List[Color] = []
        self.shape_state = ShapeState()

        # === TOOL MANAGER === #
        self.tools = build_tools(self)
        self.tool = ToolType.BRUSH

        self._mutating = False
        self._history_dirty = False
        self.history.record(self.layers)

    # ==========================================
    # Read access
    # ==========================================
    @property
    def size(self) -> int:
        return self.layers.size

    @property
    def active_layer(self) -> Layer:
        return self.layers.active

    @property
    def active_grid(self) -> Grid:
        return self.layers.active.grid

    def composite(self) -> Grid:
        """Flatten the visible layers into a new grid"""
        return composite(self.layers, self.size)

    def _check_grid_size(self, size):
        if size not in self.settings.grid_sizes:
            raise ValueError(f"Unsupported grid size {size!r}; choose from {self.settings.grid_sizes}")

    @contextmanager
    def _mutation(self, label: str):
        if self._mutating:
            raise ReentrantMutationError(f"Cannot {label} while another edit is in progress")
        self._mutating = True
        self._history_dirty = False
        try:
            yield
        finally:
            self._mutating = False
        history_dirty, self._history_dirty = self._history_dirty, False
        self.canvas_changed.emit()
        if history_dirty:
            self._emit_history()

    def _emit_history(self):
        self.history_changed.emit(self.history.can_undo(), self.history.can_redo())

    def _commit_stroke(self):
        """Record an open brush/eraser drag before anything else touches history"""
        for tool in (ToolType.BRUSH, ToolType.ERASER):
            self.tools[tool].finish_stroke()

    # ==========================================
    # Tool settings
    # ==========================================
    def set_tool(self, tool: ToolType):
        """Switch tools; any pending shape start is dropped"""
        if not isinstance(tool, ToolType):
            raise TypeError(f"Expected ToolType, got {tool!r}")
        self._commit_stroke()
        for handler in self.tools.values():
            handler.reset()
        self.shape_state.cancel()
        self.tool = tool
        logger.debug("Tool: %s", tool.name)

    def cancel_pending(self):
        self.shape_state.cancel()

    def set_color(self, color: Optional[ColorLike]):
        """Set the paint color; None paints transparency"""
        self.color = None if color is None else to_color(color)
        if self.color is not None:
            self.remember_color(self.color)

    def pick_color(self, color: Color):
        """Adopt an eyedropper pick and go back to the brush"""
        self.set_color(color)
        self.set_tool(ToolType.BRUSH)

    def remember_color(self, color: Optional[Color]):
        """Move `color` to the front of the recent colors list"""
        if color is None or self.settings.max_recent_colors == 0:
            return
        if color in self.recent_colors:
            self.recent_colors.remove(color)
        self.recent_colors.insert(0, color)
        del self.recent_colors[self.settings.max_recent_colors:]

    def set_brush_size(self, size: int):
        if size not in self.settings.brush_sizes:
            raise ValueError(f"Unsupported brush size {size!r}; choose from {self.settings.brush_sizes}")
        self.brush_size = size

    def set_symmetry(self, mode: SymmetryMode):
        self.symmetry = SymmetryMode(mode)

    @property
    def pending_start(self):
        return self.shape_state.start

    # ==========================================
    # Tools
    # ==========================================
    def apply_tool(self, tool: ToolType, row: int, col: int):
        """
        Press `tool` on a cell

        Brush, eraser and fill act immediately. Shape tools need two presses:
        the first stores the start, the second draws. Eyedropper returns the
        composited color at the cell.
        """
        if tool != self.tool:
            self.set_tool(tool)
        handler = self.tools[tool]

        if tool is ToolType.EYEDROPPER:
            return handler.press(row, col)

        with self._mutation(f"apply {tool.name.lower()}"):
            result = handler.press(row, col)
        return result

    def drag_to(self, row: int, col: int) -> bool:
        """Continue a brush/eraser drag. History waits for end_stroke()."""
        if self.tool not in (ToolType.BRUSH, ToolType.ERASER):
            return False
        with self._mutation("drag"):
            painted = self.tools[self.tool].drag(row, col)
        return painted

    def end_stroke(self) -> bool:
        """Commit one snapshot for the whole drag, if it painted anything"""
        if self.tool not in (ToolType.BRUSH, ToolType.ERASER):
            return False
        return self.tools[self.tool].finish_stroke()

    def is_awaiting_shape_end(self) -> bool:
        return self.tool in SHAPE_TOOLS and self.shape_state.start is not None

    # ==========================================
    # History
    # ==========================================
    def record_snapshot(self):
        self.history.record(self.layers)
        if self._mutating:
            self._history_dirty = True
        else:
            self._emit_history()

    def undo(self) -> bool:
        self._commit_stroke()
        if not self.history.can_undo():
            return False
        with self._mutation("undo"):
            self.history.undo(self.layers)
            self._history_dirty = True
        return True

    def redo(self) -> bool:
        self._commit_stroke()
        if not self.history.can_redo():
            return False
        with self._mutation("redo"):
            self.history.redo(self.layers)
            self._history_dirty = True
        return True

    # ==========================================
    # Layers
    # ==========================================
    def add_layer(self) -> Layer:
        with self._mutation("add layer"):
            layer = self.layers.add()
            self.record_snapshot()
        return layer

    def delete_layer(self, index: int) -> bool:
        """Remove a layer. Returns False (and changes nothing) for the last layer."""
        with self._mutation("delete layer"):
            deleted = self.layers.delete(index)
            if deleted:
                self.record_snapshot()
        return deleted

    def move_layer(self, index: int, direction: int) -> bool:
        """Move a layer by -1 (down toward index 0) or +1. False if out of bounds."""
        with self._mutation("move layer"):
            moved = self.layers.move(index, direction)
            if moved:
                self.record_snapshot()
        return moved

    def toggle_visibility(self, index: int) -> bool:
        with self._mutation("toggle visibility"):
            visible = self.layers.toggle_visibility(index)
            self.record_snapshot()
        return visible

    def set_layer_opacity(self, index: int, opacity: float):
        with self._mutation("set opacity"):
            self.layers[index].opacity = opacity
            self.record_snapshot()

    def rename_layer(self, index: int, name: str):
        with self._mutation("rename layer"):
            self.layers[index].name = name
            self.record_snapshot()

    def set_active(self, index: int):
        """Select a layer. Not an undoable action."""
        self.layers.set_active(index)

    # ==========================================
    # Canvas
    # ==========================================
    def clear_active_layer(self):
        with self._mutation("clear layer"):
            self.active_layer.clear()
            self.record_snapshot()

    def resize(self, new_size: int) -> bool:
        """
        Change the canvas size for every layer

        Content is kept top-left aligned and cropped when shrinking. History
        restarts from the resized state.
        """
        self._check_grid_size(new_size)
        if new_size == self.size:
            return False

        with self._mutation("resize"):
            for layer in self.layers:
                layer.grid = transform.resize_grid(layer.grid, new_size)
            self.shape_state.cancel()
            self.history.reset()
            self.record_snapshot()
        logger.debug("Resized canvas to %dx%d", new_size, new_size)
        return True

    def _transform_active(self, label: str, func):
        with self._mutation(label):
            self.active_layer.replace_grid(func(self.active_grid))
            self.record_snapshot()

    def flip_h(self):
        self._transform_active("flip horizontally", transform.flip_horizontal)

    def flip_v(self):
        self._transform_active("flip vertically", transform.flip_vertical)

    def rotate(self, quarter_turns: int = 1) -> bool:
        """Rotate the active layer clockwise. Whole turns change nothing."""
        if quarter_turns % 4 == 0:
            return False
        self._transform_active("rotate", lambda grid: transform.rotate(grid, quarter_turns))
        return True

    # ==========================================
    # Clipboard
    # ==========================================
    def copy(self):
        """Copy the flattened canvas"""
        self.clipboard.copy(self.composite())

    def paste(self) -> bool:
        """Overlay the clipboard onto the active layer. False if empty."""
        if not self.clipboard.has_content:
            return False
        with self._mutation("paste"):
            self.clipboard.paste_into(self.active_grid)
            self.record_snapshot()
        return True

    # ==========================================
    # Export
    # ==========================================
    def render_image(self, resolution: Optional[int] = None):
        return export.render_image(self.composite(), resolution or self.settings.export_resolution)

    def export_image(self, path: str, resolution: Optional[int] = None, fmt: str = "PNG"):
        """Render the flattened canvas and write it. Raises ExportError on failure."""
        export.save_image(self.composite(), path, resolution or self.settings.export_resolution, fmt)

    def __repr__(self):
        return f"EditorSession({self.size}x{self.size}, {self.layers!r}, tool={self.tool.name})"
