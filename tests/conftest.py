"""
Shared fixtures for Pixel Studio tests.

Provides colors, small settings and ready-made sessions.
"""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pixel_studio.config_manager import Settings
from pixel_studio.logic.color import Color
from pixel_studio.session import EditorSession


RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


@pytest.fixture
def red():
    return RED


@pytest.fixture
def green():
    return GREEN


@pytest.fixture
def blue():
    return BLUE


@pytest.fixture
def small_settings():
    """Settings allowing tiny canvases for hand-checkable tests"""
    return Settings(grid_sizes=(4, 5, 8, 16, 32), default_grid_size=4)


@pytest.fixture
def session(small_settings):
    """Fresh 4x4 session painting red"""
    s = EditorSession(settings=small_settings)
    s.set_color(RED)
    return s


@pytest.fixture
def session32():
    """Fresh session with the stock settings at 32x32"""
    return EditorSession(size=32, settings=Settings())
