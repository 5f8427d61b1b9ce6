"""
Tests for the Viewport model and coordinate helpers.

Covers:
- screen <-> world conversion
- Cursor-anchored zoom and scale clamping
- Pan (screen-space deltas)
- Centring and reset
"""
import pytest

from constants import MIN_SCALE, MAX_SCALE
from models.viewport import Viewport
from utils.coordinate_transforms import (
    clamp_scale, screen_to_world, world_to_screen, centered_offset
)


# ══════════════════════════════════════════════════════════════════════════
# Coordinate helpers
# ══════════════════════════════════════════════════════════════════════════

class TestCoordinateTransforms:

    def test_identity_at_scale_one(self):
        assert screen_to_world(10, 20, 1.0, 0, 0) == (10, 20)

    def test_screen_to_world_inverts_world_to_screen(self):
        sx, sy = world_to_screen(7.5, 3.25, 2.5, 40, -12)
        wx, wy = screen_to_world(sx, sy, 2.5, 40, -12)
        assert wx == pytest.approx(7.5)
        assert wy == pytest.approx(3.25)

    @pytest.mark.parametrize("requested,expected", [
        (0.01, MIN_SCALE),
        (0.1, 0.1),
        (3.0, 3.0),
        (10.0, 10.0),
        (50.0, MAX_SCALE),
    ])
    def test_clamp_scale(self, requested, expected):
        assert clamp_scale(requested) == expected

    def test_centered_offset(self):
        assert centered_offset(100, 80, 300, 200, 1.0) == (100, 60)
        assert centered_offset(100, 80, 300, 200, 2.0) == (50, 20)


# ══════════════════════════════════════════════════════════════════════════
# Viewport
# ══════════════════════════════════════════════════════════════════════════

class TestViewport:

    def test_defaults(self):
        viewport = Viewport()
        assert viewport.scale == 1.0
        assert (viewport.offset_x, viewport.offset_y) == (0.0, 0.0)
        assert viewport.zoom_percent == 100

    def test_constructor_clamps_scale(self):
        assert Viewport(scale=100).scale == MAX_SCALE

    def test_to_world_uses_offset_and_scale(self):
        viewport = Viewport(scale=2.0, offset_x=10, offset_y=20)
        assert viewport.to_world(30, 40) == (10, 10)
        assert viewport.to_screen(10, 10) == (30, 40)

    def test_pan_is_not_divided_by_scale(self):
        viewport = Viewport(scale=4.0)
        viewport.pan(10, -5)
        assert (viewport.offset_x, viewport.offset_y) == (10, -5)
        assert viewport.scale == 4.0

    def test_zoom_at_keeps_point_under_cursor(self):
        viewport = Viewport(scale=1.5, offset_x=33, offset_y=-7)
        before = viewport.to_world(120, 45)
        viewport.zoom_at(120, 45, 3.7)
        after = viewport.to_world(120, 45)
        assert after[0] == pytest.approx(before[0])
        assert after[1] == pytest.approx(before[1])

    def test_zoom_at_clamps(self):
        viewport = Viewport()
        viewport.zoom_at(0, 0, 0.0001)
        assert viewport.scale == MIN_SCALE
        viewport.zoom_at(0, 0, 1000)
        assert viewport.scale == MAX_SCALE

    def test_clamped_zoom_still_anchors(self):
        viewport = Viewport(scale=9.0, offset_x=5, offset_y=5)
        before = viewport.to_world(50, 50)
        viewport.zoom_at(50, 50, 20.0)
        assert viewport.scale == MAX_SCALE
        after = viewport.to_world(50, 50)
        assert after[0] == pytest.approx(before[0])
        assert after[1] == pytest.approx(before[1])

    def test_set_scale_around_center(self):
        viewport = Viewport()
        viewport.set_scale_around_center(2.0, 100, 80)
        # World centre (50, 40) stays at screen centre
        assert viewport.to_screen(50, 40) == (50, 40)
        assert (viewport.offset_x, viewport.offset_y) == (-50, -40)

    def test_center_on(self):
        viewport = Viewport(scale=0.5)
        viewport.center_on(200, 100, 400, 300)
        assert (viewport.offset_x, viewport.offset_y) == (150, 125)

    def test_reset_restores_scale_and_centres(self):
        viewport = Viewport(scale=3.0, offset_x=-400, offset_y=90)
        viewport.reset(300, 200, 100, 80)
        assert viewport.scale == 1.0
        assert (viewport.offset_x, viewport.offset_y) == (100, 60)

    def test_state_snapshot(self):
        viewport = Viewport(scale=2.0, offset_x=1, offset_y=2)
        state = viewport.state()
        viewport.pan(10, 10)
        assert (state.scale, state.offset_x, state.offset_y) == (2.0, 1, 2)

    def test_zoom_percent_rounds(self):
        viewport = Viewport()
        viewport.zoom_at(0, 0, 1.2 * 1.2)
        assert viewport.zoom_percent == 144
