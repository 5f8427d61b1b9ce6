"""Transform data structures for coordinate and view state representation."""
from dataclasses import dataclass

from constants import DEFAULT_SCALE


@dataclass
class Vec2:
    """2D vector for coordinate pairs.
    
    Used for any x/y coordinate pair across both spaces:
    - Screen pixels (relative to the canvas widget's top-left)
    - World pixels (relative to the image's top-left)
    """
    x: float
    y: float
    
    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


@dataclass
class Rect:
    """Axis-aligned rectangle in world pixels."""
    x: int
    y: int
    width: int
    height: int
    
    @property
    def has_area(self) -> bool:
        return self.width > 0 and self.height > 0
    
    def contains(self, px: float, py: float) -> bool:
        """Inclusive on all four edges."""
        return (self.x <= px <= self.x + self.width
                and self.y <= py <= self.y + self.height)


@dataclass
class ViewState:
    """Pan/zoom state: screen = world * scale + offset."""
    scale: float = DEFAULT_SCALE
    offset_x: float = 0.0
    offset_y: float = 0.0
