"""
Sprite Grid Editor - Sprite Store

THE MODEL for sprite mode. Owns the ordered collection of sprite rectangles
and the (single) selection.

This class handles:
- Creating sprites from drawn rectangles (zero-area rectangles are discarded)
- Topmost-wins hit testing (z-order = insertion order)
- Renaming, commenting and deleting by id
- Single selection by id
- Wholesale replacement (used by import)
- Listener notification for contents and selection changes

The store is INDEPENDENT of UI:
- No Qt imports
- No rendering logic

Unknown ids are never an error: rename/set_comment/delete silently do
nothing, because ids may have been invalidated by an import or clear issued
earlier in the same event.

Default names are `sprite_<len(store)>` at creation time, so deleting and
then drawing again can repeat a name. Names carry no uniqueness constraint.
"""

import logging
import uuid as uuid_module
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional

from constants import DEFAULT_SPRITE_NAME_PREFIX
from models.transform import Rect


@dataclass
class SpriteRect:
    """Named, commented rectangle in world (image) pixels

    `id` is assigned by the store and never changes.
    """
    id: str
    name: str
    x: int
    y: int
    width: int
    height: int
    comment: str = ''

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def contains(self, world_x: float, world_y: float) -> bool:
        return self.rect.contains(world_x, world_y)


def normalize(start_x, start_y, current_x, current_y, image_width, image_height) -> Rect:
    """Live-preview rectangle between a fixed anchor and the cursor

    The cursor is clamped into [0, image_width] x [0, image_height], all
    coordinates are rounded to whole pixels, then the rectangle is
    normalised so width/height are never negative.

    Args:
        start_x, start_y: Fixed anchor corner (world)
        current_x, current_y: Current cursor position (world)
        image_width, image_height: Image bounds used for clamping

    Returns:
        Rect with non-negative integer geometry
    """
    start_x = round(start_x)
    start_y = round(start_y)
    current_x = max(0, min(image_width, round(current_x)))
    current_y = max(0, min(image_height, round(current_y)))

    return Rect(
        x=min(start_x, current_x),
        y=min(start_y, current_y),
        width=abs(current_x - start_x),
        height=abs(current_y - start_y),
    )


class SpriteStore:
    """Ordered sprite collection with selection

    Later entries draw on top and win hit tests.
    """

    def __init__(self):
        self._logger = logging.getLogger('SpriteStore')
        self._sprites: List[SpriteRect] = []
        self._selected_id: Optional[str] = None
        self._listeners: List[Callable[[], None]] = []
        self._selection_listeners: List[Callable[[Optional[str]], None]] = []

    normalize = staticmethod(normalize)

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback: Callable[[], None]) -> None:
        """Register a callback fired after the sprite list changes"""
        self._listeners.append(callback)

    def add_selection_listener(self, callback: Callable[[Optional[str]], None]) -> None:
        """Register a callback fired with the new selection id (or None)"""
        self._selection_listeners.append(callback)

    def _notify_listeners(self):
        for listener in self._listeners:
            listener()

    def _notify_selection(self):
        for listener in self._selection_listeners:
            listener(self._selected_id)

    # ========================================
    # Queries
    # ========================================

    def __len__(self) -> int:
        return len(self._sprites)

    def __iter__(self) -> Iterator[SpriteRect]:
        return iter(list(self._sprites))

    def __contains__(self, sprite_id) -> bool:
        return self.get(sprite_id) is not None

    @property
    def sprites(self) -> List[SpriteRect]:
        """Sprites in z-order (bottom first)"""
        return list(self._sprites)

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def get(self, sprite_id: Optional[str]) -> Optional[SpriteRect]:
        for sprite in self._sprites:
            if sprite.id == sprite_id:
                return sprite
        return None

    def get_selected(self) -> Optional[SpriteRect]:
        return self.get(self._selected_id)

    def hit_test(self, world_x: float, world_y: float) -> Optional[str]:
        """Id of the topmost sprite containing the point (edges inclusive), or None"""
        for sprite in reversed(self._sprites):
            if sprite.contains(world_x, world_y):
                return sprite.id
        return None

    # ========================================
    # Mutations
    # ========================================

    def create(self, x: int, y: int, width: int, height: int) -> Optional[str]:
        """Append a new sprite with a fresh id and the default name

        Returns:
            The new id, or None when width or height is not positive
        """
        if width <= 0 or height <= 0:
            self._logger.debug(f"Discarded zero-area sprite {width}x{height} at ({x}, {y})")
            return None
        name = f"{DEFAULT_SPRITE_NAME_PREFIX}{len(self._sprites)}"
        return self._append(name, x, y, width, height, '')

    def _append(self, name, x, y, width, height, comment) -> str:
        sprite_id = uuid_module.uuid4().hex
        self._sprites.append(SpriteRect(
            id=sprite_id,
            name=name,
            x=int(x),
            y=int(y),
            width=int(width),
            height=int(height),
            comment=comment,
        ))
        self._logger.debug(f"Created sprite {name} ({sprite_id}) at ({x}, {y}) {width}x{height}")
        self._notify_listeners()
        return sprite_id

    def rename(self, sprite_id: str, name: str) -> None:
        sprite = self.get(sprite_id)
        if sprite is None:
            return
        sprite.name = name
        self._notify_listeners()

    def set_comment(self, sprite_id: str, comment: str) -> None:
        sprite = self.get(sprite_id)
        if sprite is None:
            return
        # Stored exactly as it will be written to and read back from TOML
        sprite.comment = ' '.join(comment.split())
        self._notify_listeners()

    def delete(self, sprite_id: str) -> None:
        """Remove a sprite; clears the selection if it was selected"""
        sprite = self.get(sprite_id)
        if sprite is None:
            return
        self._sprites.remove(sprite)
        self._logger.debug(f"Deleted sprite {sprite.name} ({sprite_id})")
        if self._selected_id == sprite_id:
            self._selected_id = None
            self._notify_selection()
        self._notify_listeners()

    def select(self, sprite_id: Optional[str]) -> None:
        """Select a sprite by id, or clear the selection with None

        Unknown ids clear the selection. Listeners only fire on change.
        """
        if sprite_id is not None and self.get(sprite_id) is None:
            sprite_id = None
        if sprite_id == self._selected_id:
            return
        self._selected_id = sprite_id
        self._notify_selection()

    def clear(self) -> None:
        """Remove all sprites and the selection"""
        self._sprites = []
        if self._selected_id is not None:
            self._selected_id = None
            self._notify_selection()
        self._notify_listeners()

    def replace_all(self, entries: Iterable) -> List[str]:
        """Replace the whole collection, assigning fresh ids

        Args:
            entries: Objects with name, x, y, width, height and comment
                attributes, in z-order

        Returns:
            The new ids in order
        """
        self._sprites = []
        if self._selected_id is not None:
            self._selected_id = None
            self._notify_selection()
        new_ids = []
        for entry in entries:
            sprite_id = uuid_module.uuid4().hex
            self._sprites.append(SpriteRect(
                id=sprite_id,
                name=entry.name,
                x=int(entry.x),
                y=int(entry.y),
                width=int(entry.width),
                height=int(entry.height),
                comment=entry.comment,
            ))
            new_ids.append(sprite_id)
        self._logger.debug(f"Replaced store contents with {len(new_ids)} sprites")
        self._notify_listeners()
        return new_ids
