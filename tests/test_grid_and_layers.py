"""
Tests for the data model.

Covers:
- Color parsing, Qt interop and lerp
- Grid bounds handling and copy independence
- Layer defaults and opacity clamping
- LayerStack add/delete/move with active index bookkeeping
"""
import pytest
from PyQt6.QtGui import QColor

from pixel_studio.errors import OutOfBoundsError
from pixel_studio.logic.color import Color, to_color
from pixel_studio.logic.grid import Grid
from pixel_studio.logic.layer import Layer
from pixel_studio.logic.layer_stack import LayerStack


# ══════════════════════════════════════════════════════════════════════════
# Color
# ══════════════════════════════════════════════════════════════════════════

class TestColor:

    def test_from_hex_rgb(self):
        assert Color.from_hex("#FF8000") == Color(255, 128, 0, 255)

    def test_from_hex_with_alpha(self):
        assert Color.from_hex("#80FF0000") == Color(255, 0, 0, 128)

    def test_invalid_hex_raises(self):
        with pytest.raises(ValueError):
            Color.from_hex("not a color")

    def test_qcolor_round_trip(self):
        color = Color(10, 20, 30, 40)
        assert Color.from_qcolor(color.to_qcolor()) == color

    def test_to_hex(self):
        assert Color(255, 0, 0).to_hex() == "#FF0000"
        assert Color(255, 0, 0, 0x80).to_hex() == "#80FF0000"

    def test_constructor_clamps(self):
        assert tuple(Color(300, -5, 12.7, 999)) == (255, 0, 12, 255)
        assert Color(300, 0, 0).r == 255

    def test_tuple_coercion_clamps(self):
        assert to_color((256, 10, -1)) == Color(255, 10, 0, 255)

    def test_lerp_midpoint(self, red, blue):
        assert Color.lerp(red, blue, 0.5) == Color(128, 0, 128, 255)

    def test_lerp_endpoints(self, red, blue):
        assert Color.lerp(red, blue, 0.0) == red
        assert Color.lerp(red, blue, 1.0) == blue

    def test_lerp_clamps_weight(self, red, blue):
        assert Color.lerp(red, blue, 3.0) == blue

    def test_to_color_accepts_qcolor_and_str(self):
        assert to_color(QColor(0, 255, 0)) == Color(0, 255, 0)
        assert to_color("#0000FF") == Color(0, 0, 255)
        with pytest.raises(TypeError):
            to_color(42)


# ══════════════════════════════════════════════════════════════════════════
# Grid
# ══════════════════════════════════════════════════════════════════════════

class TestGrid:

    def test_new_grid_is_transparent(self):
        grid = Grid(4)
        assert all(color is None for _, _, color in grid.cells())
        assert grid.is_empty()

    @pytest.mark.parametrize("size", [0, -1, 2.5, "4"])
    def test_invalid_size_rejected(self, size):
        with pytest.raises(ValueError):
            Grid(size)

    def test_explicit_access_out_of_range_raises(self, red):
        grid = Grid(4)
        with pytest.raises(OutOfBoundsError):
            grid.get(4, 0)
        with pytest.raises(OutOfBoundsError):
            grid[0, -1] = red

    def test_out_of_bounds_error_is_index_error(self):
        with pytest.raises(IndexError):
            Grid(2).get(5, 5)

    def test_paint_clips_silently(self, red):
        grid = Grid(4)
        assert grid.paint(1, 1, red)
        assert not grid.paint(-1, 0, red)
        assert not grid.paint(0, 4, red)
        assert grid.painted_count() == 1

    def test_copy_is_independent(self, red, blue):
        grid = Grid(4)
        grid[0, 0] = red
        clone = grid.copy()
        clone[0, 0] = blue
        assert grid[0, 0] == red
        assert clone[0, 0] == blue

    def test_equality(self, red):
        a, b = Grid(4), Grid(4)
        assert a == b
        a[2, 3] = red
        assert a != b
        assert Grid(4) != Grid(8)

    def test_from_rows_requires_square(self, red):
        with pytest.raises(ValueError):
            Grid.from_rows([[red, None], [None]])
        grid = Grid.from_rows([[red, None], [None, red]])
        assert grid.painted_count() == 2

    def test_clear(self, red):
        grid = Grid(4)
        grid[1, 2] = red
        grid.clear()
        assert grid.is_empty()


# ══════════════════════════════════════════════════════════════════════════
# Layer
# ══════════════════════════════════════════════════════════════════════════

class TestLayer:

    def test_defaults(self):
        layer = Layer("Layer 1", 16)
        assert layer.visible
        assert layer.opacity == 1.0
        assert layer.size == 16
        assert layer.grid.is_empty()

    def test_uids_are_unique(self):
        assert Layer("a", 4).uid != Layer("b", 4).uid

    def test_opacity_clamped(self):
        layer = Layer("a", 4)
        layer.opacity = 1.7
        assert layer.opacity == 1.0
        layer.opacity = -0.2
        assert layer.opacity == 0.0

    def test_replace_grid_rejects_other_size(self):
        layer = Layer("a", 4)
        with pytest.raises(ValueError):
            layer.replace_grid(Grid(8))


# ══════════════════════════════════════════════════════════════════════════
# LayerStack
# ══════════════════════════════════════════════════════════════════════════

class TestLayerStack:

    @pytest.fixture
    def stack(self):
        return LayerStack(4)

    def test_starts_with_one_layer(self, stack):
        assert len(stack) == 1
        assert stack.active_index == 0
        assert stack.active.name == "Layer 1"

    def test_add_appends_and_activates(self, stack):
        layer = stack.add()
        assert len(stack) == 2
        assert stack.active is layer
        assert layer.name == "Layer 2"
        assert layer.size == 4

    def test_delete_last_layer_rejected(self, stack):
        only = stack.active
        assert stack.delete(0) is False
        assert len(stack) == 1
        assert stack.active is only

    def test_delete_active_selects_layer_below(self, stack):
        stack.add()
        stack.add()
        assert stack.active_index == 2
        assert stack.delete(2)
        assert stack.active_index == 1

    def test_delete_first_active_stays_at_zero(self, stack):
        stack.add()
        stack.set_active(0)
        assert stack.delete(0)
        assert stack.active_index == 0
        assert stack.active.name == "Layer 2"

    def test_delete_below_active_shifts_index(self, stack):
        stack.add()
        top = stack.add()
        assert stack.delete(0)
        assert stack.active is top
        assert stack.active_index == 1

    def test_delete_invalid_index_raises(self, stack):
        with pytest.raises(OutOfBoundsError):
            stack.delete(3)

    def test_move_past_bounds_rejected(self, stack):
        stack.add()
        before = list(stack)
        assert stack.move(0, -1) is False
        assert stack.move(1, 1) is False
        assert list(stack) == before

    def test_move_active_follows_layer(self, stack):
        bottom = stack[0]
        stack.add()
        stack.set_active(0)
        assert stack.move(0, 1)
        assert stack[1] is bottom
        assert stack.active is bottom

    def test_move_swap_partner_takes_vacated_slot(self, stack):
        stack.add()
        top = stack.active
        assert stack.move(0, 1)
        assert stack.active is top
        assert stack.active_index == 0

    def test_move_bad_direction_raises(self, stack):
        stack.add()
        with pytest.raises(ValueError):
            stack.move(0, 2)

    def test_toggle_visibility(self, stack):
        assert stack.toggle_visibility(0) is False
        assert stack.toggle_visibility(0) is True

    def test_find_by_uid(self, stack):
        layer = stack.add()
        assert stack.find(layer.uid) is layer
        stack.delete(1)
        assert stack.find(layer.uid) is None

    def test_index_of_follows_moves(self, stack):
        bottom = stack[0]
        stack.add()
        stack.move(0, 1)
        assert stack.index_of(bottom) == 1
