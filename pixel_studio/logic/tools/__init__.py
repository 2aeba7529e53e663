"""
Tool Registry for Pixel Studio

Every tool is a ToolType member with exactly one handler in build_tools().
The session dispatches cell presses through that table only.

"""

from enum import Enum, auto

from .brush import BrushTool
from .bucket import BucketTool
from .eyedropper import EyedropperTool
from .shapes import CircleTool, LineTool, RectangleTool, ShapePhase, ShapeState


class ToolType(Enum):
    # --- CREATION ---
    BRUSH = auto()       # (B) Paint
    ERASER = auto()      # (E) Erase
    FILL = auto()        # (G) Bucket Fill
    EYEDROPPER = auto()  # (I) Pick color

    # --- SHAPES (two clicks) ---
    LINE = auto()        # (L)
    RECTANGLE = auto()   # (R)
    CIRCLE = auto()      # (C)


SHAPE_TOOLS = frozenset({ToolType.LINE, ToolType.RECTANGLE, ToolType.CIRCLE})


def build_tools(session) -> dict:
    """Create one handler per ToolType, bound to `session`"""
    return {
        ToolType.BRUSH: BrushTool(session, is_eraser=False),
        ToolType.ERASER: BrushTool(session, is_eraser=True),
        ToolType.FILL: BucketTool(session),
        ToolType.EYEDROPPER: EyedropperTool(session),
        ToolType.LINE: LineTool(session),
        ToolType.RECTANGLE: RectangleTool(session),
        ToolType.CIRCLE: CircleTool(session),
    }


__all__ = ['ToolType', 'SHAPE_TOOLS', 'build_tools', 'ShapePhase', 'ShapeState']
