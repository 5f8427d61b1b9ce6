"""
Tests for the tile grid helpers.

Covers:
- Column/row counts with partial tiles
- tile_at lookups, bounds and index numbering
- Grid line and label positions
"""
import pytest

from models.grid import TileSize, TileInfo, grid_size, tile_at, grid_lines, tile_labels


# ══════════════════════════════════════════════════════════════════════════
# Grid size
# ══════════════════════════════════════════════════════════════════════════

class TestGridSize:

    def test_partial_tiles_are_counted(self):
        assert grid_size(32, 32, 100, 80) == (4, 3)

    def test_exact_multiple(self):
        assert grid_size(16, 16, 64, 32) == (4, 2)

    def test_tile_larger_than_image(self):
        assert grid_size(256, 256, 100, 80) == (1, 1)

    def test_non_square_tiles(self):
        assert grid_size(10, 40, 100, 80) == (10, 2)


class TestTileSize:

    def test_defaults(self):
        size = TileSize()
        assert (size.width, size.height) == (32, 32)

    @pytest.mark.parametrize("width,height", [(0, 32), (32, 0), (-1, 5)])
    def test_rejects_non_positive(self, width, height):
        with pytest.raises(ValueError):
            TileSize(width, height)


# ══════════════════════════════════════════════════════════════════════════
# tile_at
# ══════════════════════════════════════════════════════════════════════════

class TestTileAt:

    def test_origin(self):
        tile = tile_at(0, 0, 32, 32, 100, 80)
        assert (tile.col, tile.row, tile.index) == (0, 0, 0)
        assert (tile.x, tile.y) == (0, 0)

    def test_partial_tile_at_bottom_right(self):
        tile = tile_at(99, 79, 32, 32, 100, 80)
        assert (tile.col, tile.row) == (3, 2)
        assert tile.index == 2 * 4 + 3
        assert (tile.x, tile.y) == (96, 64)

    def test_tile_boundary_belongs_to_next_tile(self):
        tile = tile_at(32, 31.999, 32, 32, 100, 80)
        assert (tile.col, tile.row) == (1, 0)

    @pytest.mark.parametrize("x,y", [
        (-0.5, 10),
        (10, -0.01),
        (100, 10),
        (10, 80),
        (150, 150),
    ])
    def test_outside_image_is_none(self, x, y):
        assert tile_at(x, y, 32, 32, 100, 80) is None

    def test_mouse_position_is_carried_through(self):
        tile = tile_at(40, 40, 32, 32, 100, 80, mouse_x=200, mouse_y=150)
        assert (tile.mouse_x, tile.mouse_y) == (200, 150)

    def test_info_is_immutable(self):
        tile = tile_at(0, 0, 32, 32, 100, 80)
        assert isinstance(tile, TileInfo)
        with pytest.raises(AttributeError):
            tile.col = 5

    def test_indices_are_row_major_and_unique(self):
        indices = set()
        for row in range(3):
            for col in range(4):
                tile = tile_at(col * 32 + 1, row * 32 + 1, 32, 32, 100, 80)
                assert tile.index == row * 4 + col
                indices.add(tile.index)
        assert indices == set(range(12))


# ══════════════════════════════════════════════════════════════════════════
# Lines and labels
# ══════════════════════════════════════════════════════════════════════════

class TestGridLines:

    def test_lines_cover_partial_tiles(self):
        xs, ys = grid_lines(32, 32, 100, 80)
        assert xs == [0, 32, 64, 96, 128]
        assert ys == [0, 32, 64, 96]

    def test_labels(self):
        labels = tile_labels(32, 32, 100, 80)
        assert len(labels) == 12
        assert labels[0] == (0, 0, "0,0")
        assert labels[5] == (32, 32, "1,1")
        assert labels[-1] == (96, 64, "3,2")
