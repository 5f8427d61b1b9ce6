"""UI components for Sprite Grid Editor

This package contains the PyQt5 front end over the Qt-free core:
- canvas_widgets: rendering and zoom/pan mixins for the canvas

Direct imports:
"""

from .canvas_widget import SpriteCanvas
from .sprite_sidebar import SpriteSidebar
from .tile_sidebar import TileSidebar
from .zoom_toolbar import ZoomToolbar

__all__ = [
    'SpriteCanvas',
    'SpriteSidebar',
    'TileSidebar',
    'ZoomToolbar',
]
