"""
Sprite Grid Editor - Interaction State Machine

Turns raw pointer events (in canvas/screen pixels) into Viewport and
SpriteStore mutations. This is the single owner of all mutable canvas state
for one editor: every pan, zoom, draw and select goes through one of the
pointer_* / wheel transitions below, then a render is requested.

States:
    IDLE      no button held
    PANNING   dragging the view
    DRAWING   dragging out a new sprite rectangle (live preview)

The tool (SELECT / RECT) decides what a press starts. With SELECT, a press
on a sprite selects it; a press on the background clears the selection and
pans. In TILE mode the press always pans and idle moves report the hovered
tile instead.

No transition raises: zero-area draws and presses outside the image are
absorbed as no-ops.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional

from constants import (
    DEFAULT_TILE_WIDTH, DEFAULT_TILE_HEIGHT,
    WHEEL_ZOOM_IN_FACTOR, WHEEL_ZOOM_OUT_FACTOR,
    TOOLBAR_ZOOM_STEP, INITIAL_TILE_VIEW_SCALE, MIN_SCALE, MAX_SCALE
)
from models.grid import TileSize, TileInfo, tile_at, grid_size
from models.sprite_store import SpriteStore, normalize
from models.transform import Rect, Vec2
from models.viewport import Viewport
from services.annotation_serializer import SpriteExport, export_sprites, import_sprites


class Tool(Enum):
    SELECT = 'select'
    RECT = 'rect'


class EditorMode(Enum):
    TILE = 'tile'
    SPRITE = 'sprite'


class GestureState(Enum):
    IDLE = 'idle'
    PANNING = 'panning'
    DRAWING = 'drawing'


class InteractionStateMachine:
    """Pointer-driven controller over a Viewport and a SpriteStore

    Observers:
        add_hover_listener(cb)      cb(TileInfo | None) on every idle move (tile mode)
        add_selection_listener(cb)  cb(sprite_id | None) on selection change
        add_sprites_listener(cb)    cb() after the sprite list changes
        add_render_listener(cb)     cb() whenever the canvas should repaint
    """

    def __init__(self, mode: EditorMode = EditorMode.SPRITE,
                 viewport_width: float = 0, viewport_height: float = 0):
        self._logger = logging.getLogger('Interaction')

        self.viewport = Viewport()
        self.store = SpriteStore()

        self._mode = mode
        self._tool = Tool.SELECT
        self._state = GestureState.IDLE
        self._tile_size = TileSize(DEFAULT_TILE_WIDTH, DEFAULT_TILE_HEIGHT)
        self._show_index = True

        self._viewport_width = viewport_width
        self._viewport_height = viewport_height

        self._image = None  # Anything with width/height/name (LoadedImage)

        # Gesture bookkeeping
        self._last_pointer: Optional[Vec2] = None
        self._draw_anchor: Optional[Vec2] = None
        self._preview: Optional[Rect] = None

        self._hover_listeners: List[Callable[[Optional[TileInfo]], None]] = []
        self._render_listeners: List[Callable[[], None]] = []

    # ========================================
    # Observers
    # ========================================

    def add_hover_listener(self, callback: Callable[[Optional[TileInfo]], None]) -> None:
        self._hover_listeners.append(callback)

    def add_selection_listener(self, callback: Callable[[Optional[str]], None]) -> None:
        self.store.add_selection_listener(callback)

    def add_sprites_listener(self, callback: Callable[[], None]) -> None:
        self.store.add_listener(callback)

    def add_render_listener(self, callback: Callable[[], None]) -> None:
        self._render_listeners.append(callback)

    def _notify_hover(self, tile: Optional[TileInfo]):
        for listener in self._hover_listeners:
            listener(tile)

    def _request_render(self):
        for listener in self._render_listeners:
            listener()

    # ========================================
    # Queries
    # ========================================

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def tool(self) -> Tool:
        return self._tool

    @property
    def state(self) -> GestureState:
        return self._state

    @property
    def tile_size(self) -> TileSize:
        return self._tile_size

    @property
    def show_index(self) -> bool:
        return self._show_index

    @property
    def preview(self) -> Optional[Rect]:
        """Live preview rectangle while DRAWING, else None"""
        return self._preview

    @property
    def image(self):
        return self._image

    @property
    def scale(self) -> float:
        return self.viewport.scale

    @property
    def selected_id(self) -> Optional[str]:
        return self.store.selected_id

    @property
    def sprites(self):
        return self.store.sprites

    def image_info(self) -> Optional[dict]:
        """Image dimensions plus derived grid size, or None with no image"""
        if self._image is None:
            return None
        cols, rows = grid_size(self._tile_size.width, self._tile_size.height,
                               self._image.width, self._image.height)
        return {
            'name': self._image.name,
            'width': self._image.width,
            'height': self._image.height,
            'cols': cols,
            'rows': rows,
        }

    def cursor_hint(self) -> str:
        """'grabbing', 'crosshair' or 'default' for the widget to map to a cursor"""
        if self._state == GestureState.PANNING:
            return 'grabbing'
        if self._mode == EditorMode.SPRITE and self._tool == Tool.RECT:
            return 'crosshair'
        return 'default'

    def _inside_image(self, world_x, world_y) -> bool:
        return (self._image is not None
                and 0 <= world_x < self._image.width
                and 0 <= world_y < self._image.height)

    # ========================================
    # Configuration
    # ========================================

    def set_image(self, image, viewport_width: Optional[float] = None,
                  viewport_height: Optional[float] = None) -> None:
        """Show a newly loaded image, centred at the current scale

        Tile mode additionally zooms to INITIAL_TILE_VIEW_SCALE around the centre.
        """
        if viewport_width is not None and viewport_height is not None:
            self.resize_viewport(viewport_width, viewport_height)
        self._cancel_gesture()
        self._image = image
        self.viewport.center_on(image.width, image.height,
                                self._viewport_width, self._viewport_height)
        if self._mode == EditorMode.TILE:
            self.viewport.set_scale_around_center(INITIAL_TILE_VIEW_SCALE,
                                                  self._viewport_width, self._viewport_height)
        self._logger.debug(f"Image set: {image.name} ({image.width}x{image.height})")
        self._request_render()

    def resize_viewport(self, width: float, height: float) -> None:
        self._viewport_width = width
        self._viewport_height = height

    def set_mode(self, mode: EditorMode) -> None:
        if mode == self._mode:
            return
        self._cancel_gesture()
        self._mode = mode
        if mode == EditorMode.SPRITE:
            self._notify_hover(None)
        self._request_render()

    def set_tool(self, tool: Tool) -> None:
        self._tool = tool

    def set_tile_size(self, width: int, height: int) -> None:
        """Change the grid; non-positive values fall back to the defaults"""
        width = int(width or 0)
        height = int(height or 0)
        if width <= 0:
            width = DEFAULT_TILE_WIDTH
        if height <= 0:
            height = DEFAULT_TILE_HEIGHT
        self._tile_size = TileSize(width, height)
        self._request_render()

    def set_show_index(self, show: bool) -> None:
        self._show_index = show
        self._request_render()

    # ========================================
    # Zoom controls (toolbar)
    # ========================================

    def set_scale(self, scale: float) -> None:
        """Zoom around the viewport centre"""
        self.viewport.set_scale_around_center(scale, self._viewport_width, self._viewport_height)
        self._request_render()

    def zoom_in(self) -> None:
        self.set_scale(min(MAX_SCALE, self.viewport.scale * TOOLBAR_ZOOM_STEP))

    def zoom_out(self) -> None:
        self.set_scale(max(MIN_SCALE, self.viewport.scale / TOOLBAR_ZOOM_STEP))

    def reset_view(self) -> None:
        """Back to 100%, centred on the image"""
        if self._image is not None:
            self.viewport.reset(self._viewport_width, self._viewport_height,
                                self._image.width, self._image.height)
        else:
            self.viewport.set_scale_around_center(1.0, self._viewport_width, self._viewport_height)
        self._request_render()

    # ========================================
    # Pointer transitions
    # ========================================

    def pointer_down(self, x: float, y: float) -> None:
        """Press at screen point (x, y)"""
        if self._state != GestureState.IDLE:
            return

        if self._mode == EditorMode.SPRITE and self._tool == Tool.RECT:
            world_x, world_y = self.viewport.to_world(x, y)
            if not self._inside_image(world_x, world_y):
                return
            self._draw_anchor = Vec2(round(world_x), round(world_y))
            self._preview = Rect(self._draw_anchor.x, self._draw_anchor.y, 0, 0)
            self._state = GestureState.DRAWING
            self._request_render()
            return

        if self._mode == EditorMode.SPRITE:
            world_x, world_y = self.viewport.to_world(x, y)
            hit_id = self.store.hit_test(world_x, world_y)
            self.store.select(hit_id)
            if hit_id is not None:
                self._request_render()
                return
            # Background click cleared the selection; fall through to pan

        self._state = GestureState.PANNING
        self._last_pointer = Vec2(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        """Pointer moved to screen point (x, y)"""
        if self._state == GestureState.PANNING:
            self.viewport.pan(x - self._last_pointer.x, y - self._last_pointer.y)
            self._last_pointer = Vec2(x, y)
            self._request_render()

        elif self._state == GestureState.DRAWING:
            world_x, world_y = self.viewport.to_world(x, y)
            self._preview = normalize(self._draw_anchor.x, self._draw_anchor.y,
                                      world_x, world_y,
                                      self._image.width, self._image.height)
            self._request_render()

        elif self._mode == EditorMode.TILE:
            self._notify_hover(self._hover_tile(x, y))

    def pointer_up(self) -> None:
        """Release: commits a positive-area draw, ends any pan"""
        if self._state == GestureState.DRAWING and self._preview is not None and self._preview.has_area:
            rect = self._preview
            new_id = self.store.create(rect.x, rect.y, rect.width, rect.height)
            self.store.select(new_id)

        self._cancel_gesture()
        self._request_render()

    def pointer_leave(self) -> None:
        """Pointer left the canvas: same as release, and clears tile hover"""
        self.pointer_up()
        if self._mode == EditorMode.TILE:
            self._notify_hover(None)

    def wheel(self, x: float, y: float, delta_y: float) -> None:
        """Wheel at screen point (x, y); delta_y > 0 zooms out

        Does not change the gesture state.
        """
        factor = WHEEL_ZOOM_OUT_FACTOR if delta_y > 0 else WHEEL_ZOOM_IN_FACTOR
        self.viewport.zoom_at(x, y, self.viewport.scale * factor)
        self._request_render()

    def _cancel_gesture(self):
        self._state = GestureState.IDLE
        self._last_pointer = None
        self._draw_anchor = None
        self._preview = None

    def _hover_tile(self, x, y) -> Optional[TileInfo]:
        if self._image is None:
            return None
        world_x, world_y = self.viewport.to_world(x, y)
        return tile_at(world_x, world_y,
                       self._tile_size.width, self._tile_size.height,
                       self._image.width, self._image.height,
                       mouse_x=x, mouse_y=y)

    # ========================================
    # Sprite operations (sidebar)
    # ========================================

    def select_sprite(self, sprite_id: Optional[str]) -> None:
        self.store.select(sprite_id)
        self._request_render()

    def rename_sprite(self, sprite_id: str, name: str) -> None:
        self.store.rename(sprite_id, name)
        self._request_render()

    def set_sprite_comment(self, sprite_id: str, comment: str) -> None:
        self.store.set_comment(sprite_id, comment)

    def delete_sprite(self, sprite_id: str) -> None:
        self.store.delete(sprite_id)
        self._request_render()

    # ========================================
    # Import / export
    # ========================================

    def export_document(self) -> SpriteExport:
        image_name = self._image.name if self._image is not None else ''
        return export_sprites(self.store, image_name)

    def import_document(self, doc: SpriteExport) -> List[str]:
        """Replace all sprites with the document's; drops any in-progress draw"""
        self._cancel_gesture()
        new_ids = import_sprites(self.store, doc)
        self._request_render()
        return new_ids
