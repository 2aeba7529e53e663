import logging

from .base import BaseTool

logger = logging.getLogger(__name__)


class EyedropperTool(BaseTool):
    """Reads the composited color under the cursor. Never touches history."""

    def press(self, row, col):
        composited = self.session.composite()
        if not composited.in_bounds(row, col):
            return None

        color = composited.get(row, col)
        if color is not None:
            logger.debug("Picked %s at (%d, %d)", color.to_hex(), row, col)
            self.session.pick_color(color)
        return color
