"""Main window mixins for SpriteGridEditor"""

from .config_mixin import ConfigMixin
from .menu_mixin import MenuMixin

__all__ = ['ConfigMixin', 'MenuMixin']
