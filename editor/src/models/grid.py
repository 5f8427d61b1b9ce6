"""Tile grid helpers.

The grid has no state of its own: everything is a pure function of the tile
size and the image size. The last column/row may be a partial tile when the
image dimensions are not exact multiples of the tile size.
"""
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from constants import DEFAULT_TILE_WIDTH, DEFAULT_TILE_HEIGHT


@dataclass(frozen=True)
class TileSize:
    """Tile dimensions in image pixels."""
    width: int = DEFAULT_TILE_WIDTH
    height: int = DEFAULT_TILE_HEIGHT

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Tile size must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class TileInfo:
    """Tile under the cursor.

    x/y are the world coordinates of the tile's top-left corner,
    mouse_x/mouse_y the raw screen position (for tooltip placement).
    """
    index: int
    col: int
    row: int
    x: int
    y: int
    mouse_x: float
    mouse_y: float


def grid_size(tile_width, tile_height, image_width, image_height) -> Tuple[int, int]:
    """Number of (cols, rows) needed to cover the image, partial tiles included"""
    cols = math.ceil(image_width / tile_width)
    rows = math.ceil(image_height / tile_height)
    return cols, rows


def tile_at(world_x, world_y, tile_width, tile_height, image_width, image_height,
            mouse_x=0.0, mouse_y=0.0) -> Optional[TileInfo]:
    """Find the tile containing a world point

    Args:
        world_x, world_y: Point in image pixels
        tile_width, tile_height: Tile dimensions
        image_width, image_height: Image dimensions
        mouse_x, mouse_y: Screen position to carry through for tooltips

    Returns:
        TileInfo, or None when the point lies outside [0, w) x [0, h)
    """
    if world_x < 0 or world_y < 0 or world_x >= image_width or world_y >= image_height:
        return None

    col = int(world_x // tile_width)
    row = int(world_y // tile_height)
    cols, _ = grid_size(tile_width, tile_height, image_width, image_height)

    return TileInfo(
        index=row * cols + col,
        col=col,
        row=row,
        x=col * tile_width,
        y=row * tile_height,
        mouse_x=mouse_x,
        mouse_y=mouse_y,
    )


def grid_lines(tile_width, tile_height, image_width, image_height) -> Tuple[List[int], List[int]]:
    """World positions of the vertical and horizontal grid lines

    Returns:
        (xs, ys): cols + 1 vertical line positions, rows + 1 horizontal ones.
        The closing line of a partial tile lies past the image edge.
    """
    cols, rows = grid_size(tile_width, tile_height, image_width, image_height)
    xs = [i * tile_width for i in range(cols + 1)]
    ys = [i * tile_height for i in range(rows + 1)]
    return xs, ys


def tile_labels(tile_width, tile_height, image_width, image_height) -> List[Tuple[int, int, str]]:
    """Top-left anchor and "col,row" text for every tile, row-major"""
    cols, rows = grid_size(tile_width, tile_height, image_width, image_height)
    return [
        (col * tile_width, row * tile_height, f"{col},{row}")
        for row in range(rows)
        for col in range(cols)
    ]
