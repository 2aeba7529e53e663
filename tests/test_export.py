"""
Tests for rasterizing a flattened grid into an image.
"""
import pytest

from pixel_studio.errors import ExportError
from pixel_studio.export import render_image, save_image
from pixel_studio.logic.color import Color
from pixel_studio.logic.grid import Grid
from pixel_studio.logic.tools import ToolType

WHITE = Color(255, 255, 255)


def _pixel(image, x, y):
    return Color.from_qcolor(image.pixelColor(x, y))


def test_default_resolution(qapp):
    image = render_image(Grid(64))
    assert image.width() == 512 and image.height() == 512


def test_cells_become_blocks_on_white(qapp, red):
    grid = Grid(4)
    grid[0, 0] = red
    grid[3, 1] = red
    image = render_image(grid, 8)
    assert _pixel(image, 0, 0) == red
    assert _pixel(image, 1, 1) == red
    assert _pixel(image, 2, 0) == WHITE
    assert _pixel(image, 2, 6) == red   # x = col, y = row
    assert _pixel(image, 3, 7) == red
    assert _pixel(image, 7, 7) == WHITE


def test_empty_grid_is_all_white(qapp):
    image = render_image(Grid(16), 32)
    assert all(_pixel(image, x, y) == WHITE for x in range(0, 32, 5) for y in range(0, 32, 5))


def test_invalid_resolution(qapp):
    with pytest.raises(ExportError):
        render_image(Grid(4), 0)


def test_save_image(qapp, tmp_path, red):
    grid = Grid(4)
    grid[0, 0] = red
    target = tmp_path / "art.png"
    save_image(grid, str(target), 16)
    assert target.exists() and target.stat().st_size > 0


def test_save_failure_leaves_session_intact(qapp, session, tmp_path):
    session.apply_tool(ToolType.BRUSH, 0, 0)
    before = session.active_grid.copy()
    history = len(session.history.undo_stack)
    with pytest.raises(ExportError):
        session.export_image(str(tmp_path / "missing" / "dir" / "art.png"))
    assert session.active_grid == before
    assert len(session.history.undo_stack) == history


def test_session_render_uses_composite(qapp, session, red):
    session.apply_tool(ToolType.BRUSH, 3, 3)
    image = session.render_image(4)
    assert _pixel(image, 3, 3) == red
    assert _pixel(image, 0, 0) == WHITE
