"""
Sprite Grid Editor - Viewport Model

Owns the pan/zoom state shared by the renderer and all hit-testing math.

Invariant:
    screen = world * scale + offset    (per axis)
    world  = (screen - offset) / scale

The scale is always kept within [MIN_SCALE, MAX_SCALE]. Offsets are
unconstrained: the image may be panned fully out of view.

Usage:
    viewport = Viewport()
    viewport.reset(800, 600, image_width, image_height)
    viewport.zoom_at(mouse_x, mouse_y, viewport.scale * 1.1)
    world_x, world_y = viewport.to_world(mouse_x, mouse_y)
"""

import logging
from typing import Tuple

from constants import DEFAULT_SCALE
from models.transform import ViewState
from utils.coordinate_transforms import (
    clamp_scale, screen_to_world, world_to_screen,
    anchored_offset, centered_offset
)


class Viewport:
    """Screen <-> world mapping with cursor-anchored zoom

    Properties:
        scale: Current zoom factor (clamped)
        offset_x, offset_y: Screen position of the world origin
        zoom_percent: Scale as a rounded percentage, for display
    """

    def __init__(self, scale: float = DEFAULT_SCALE, offset_x: float = 0.0, offset_y: float = 0.0):
        self._logger = logging.getLogger('Viewport')
        self._scale = clamp_scale(scale)
        self._offset_x = float(offset_x)
        self._offset_y = float(offset_y)

    # ========================================
    # Properties
    # ========================================

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def offset_x(self) -> float:
        return self._offset_x

    @property
    def offset_y(self) -> float:
        return self._offset_y

    @property
    def zoom_percent(self) -> int:
        return round(self._scale * 100)

    def state(self) -> ViewState:
        """Snapshot of the current view state"""
        return ViewState(self._scale, self._offset_x, self._offset_y)

    # ========================================
    # Conversions
    # ========================================

    def to_world(self, screen_x: float, screen_y: float) -> Tuple[float, float]:
        """Convert a screen point to world (image) coordinates"""
        return screen_to_world(screen_x, screen_y, self._scale, self._offset_x, self._offset_y)

    def to_screen(self, world_x: float, world_y: float) -> Tuple[float, float]:
        """Convert a world (image) point to screen coordinates"""
        return world_to_screen(world_x, world_y, self._scale, self._offset_x, self._offset_y)

    # ========================================
    # Mutations
    # ========================================

    def pan(self, dx: float, dy: float) -> None:
        """Move the view by a screen-space delta (not divided by scale)"""
        self._offset_x += dx
        self._offset_y += dy

    def zoom_at(self, screen_x: float, screen_y: float, new_scale: float) -> None:
        """Zoom keeping the world point under (screen_x, screen_y) fixed

        Args:
            screen_x, screen_y: Anchor in screen coordinates (usually the cursor)
            new_scale: Requested scale, clamped to [MIN_SCALE, MAX_SCALE]
        """
        new_scale = clamp_scale(new_scale)
        world_x, world_y = self.to_world(screen_x, screen_y)
        self._scale = new_scale
        self._offset_x, self._offset_y = anchored_offset(screen_x, screen_y, world_x, world_y, new_scale)
        self._logger.debug(f"zoom_at({screen_x}, {screen_y}) -> scale={new_scale:.3f}")

    def set_scale_around_center(self, new_scale: float, viewport_width: float, viewport_height: float) -> None:
        """Zoom anchored at the viewport's geometric centre (toolbar buttons)"""
        self.zoom_at(viewport_width / 2, viewport_height / 2, new_scale)

    def center_on(self, image_width: float, image_height: float,
                  viewport_width: float, viewport_height: float) -> None:
        """Centre an image of the given size at the current scale"""
        self._offset_x, self._offset_y = centered_offset(
            image_width, image_height, viewport_width, viewport_height, self._scale
        )

    def reset(self, viewport_width: float, viewport_height: float,
              image_width: float, image_height: float) -> None:
        """Scale back to 100% and centre the image"""
        self._scale = DEFAULT_SCALE
        self.center_on(image_width, image_height, viewport_width, viewport_height)
        self._logger.debug("View reset")
