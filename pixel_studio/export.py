"""
Image Export for Pixel Studio

Turns a flattened grid into a QImage: an opaque white square with every
painted cell drawn as a solid block of resolution / grid size pixels.

"""

import logging

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QColor, QImage, QPainter

from . import config
from .errors import ExportError
from .logic.grid import Grid

logger = logging.getLogger(__name__)


def render_image(grid: Grid, resolution: int = config.EXPORT_RESOLUTION) -> QImage:
    """
    Rasterize a grid

    Args:
        grid: Usually the result of composite()
        resolution: Output width and height in pixels

    Returns:
        QImage: ARGB32 image, opaque everywhere
    """
    if resolution <= 0:
        raise ExportError(f"Export resolution must be positive, got {resolution}")

    # === Create a buffer for the final image === #
    result = QImage(resolution, resolution, QImage.Format.Format_ARGB32)
    if result.isNull():
        raise ExportError(f"Could not allocate a {resolution}x{resolution} image")
    result.fill(QColor(config.EXPORT_BACKGROUND))

    cell_size = resolution / grid.size
    painter = QPainter(result)
    try:
        for row, col, color in grid.cells():
            if color is None:
                continue
            painter.fillRect(QRectF(col * cell_size, row * cell_size, cell_size, cell_size), color.to_qcolor())
    finally:
        painter.end()
    return result


def save_image(grid: Grid, path: str, resolution: int = config.EXPORT_RESOLUTION, fmt: str = "PNG"):
    """
    Render a grid and write it to disk

    Raises:
        ExportError: rendering or writing failed
    """
    image = render_image(grid, resolution)
    if not image.save(path, fmt):
        logger.error("Export to %s failed", path)
        raise ExportError(f"Could not write {fmt} image to {path}")
    logger.info("Exported %dx%d image to %s", resolution, resolution, path)
