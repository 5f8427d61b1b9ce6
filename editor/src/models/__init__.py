"""
Sprite Grid Editor - Data Models

This module contains the Qt-free data model classes:
- Viewport (pan/zoom state and screen/world mapping)
- Grid helpers (tile size, tile lookup)
- SpriteStore (ordered, selectable sprite rectangles)

This is the MODEL in MVC architecture.
"""

from .transform import Vec2, Rect, ViewState
from .viewport import Viewport
from .grid import TileSize, TileInfo, tile_at, grid_size
from .sprite_store import SpriteRect, SpriteStore, normalize

__all__ = [
    'Vec2', 'Rect', 'ViewState',
    'Viewport',
    'TileSize', 'TileInfo', 'tile_at', 'grid_size',
    'SpriteRect', 'SpriteStore', 'normalize',
]
