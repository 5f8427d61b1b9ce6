"""
Sprite Grid Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Viewport zoom limits and step factors
- Tile grid defaults
- Sprite naming defaults
- Annotation document keys
- Rendering colours and font sizes
"""

# ======================================================================
# VIEWPORT
# ======================================================================

MIN_SCALE = 0.1
MAX_SCALE = 10.0
DEFAULT_SCALE = 1.0

# Mouse wheel: scrolling down zooms out, up zooms in
WHEEL_ZOOM_OUT_FACTOR = 0.9
WHEEL_ZOOM_IN_FACTOR = 1.1

# Toolbar zoom buttons multiply/divide by this step around the viewport centre
TOOLBAR_ZOOM_STEP = 1.2

# Tile viewer opens freshly loaded images at 200%
INITIAL_TILE_VIEW_SCALE = 2.0

# ======================================================================
# TILE GRID
# ======================================================================

DEFAULT_TILE_WIDTH = 32
DEFAULT_TILE_HEIGHT = 32
MIN_TILE_SIZE = 1
MAX_TILE_SIZE = 4096

# ======================================================================
# SPRITES
# ======================================================================

DEFAULT_SPRITE_NAME_PREFIX = 'sprite_'

# ======================================================================
# ANNOTATION DOCUMENT (TOML)
# ======================================================================

ANNOTATION_IMAGE_KEY = 'image'
ANNOTATION_SPRITES_KEY = 'sprites'
ANNOTATION_COMMENT_MARKER = '#'
ANNOTATION_FILE_FILTER = 'Sprite Annotations (*.toml);;All Files (*)'
IMAGE_FILE_FILTER = 'Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp);;All Files (*)'

# ======================================================================
# RENDERING
# ======================================================================

CANVAS_BACKGROUND = '#1a1a2e'

# Grid overlay (tile mode)
GRID_COLUMN_LINE_COLOR = (255, 100, 100, 204)
GRID_ROW_LINE_COLOR = (100, 150, 255, 204)
GRID_DASH_LENGTH = 4
RULER_COLUMN_TEXT_COLOR = '#ffcc00'
RULER_ROW_TEXT_COLOR = '#00ccff'
RULER_BACKGROUND = (0, 0, 0, 204)
TILE_LABEL_TEXT_COLOR = '#ffffff'
TILE_LABEL_BACKGROUND = (0, 0, 0, 153)
LABEL_FONT_SIZE = 9

# Sprite overlay (sprite mode)
SPRITE_COLOR = '#4caf50'
SPRITE_FILL = (76, 175, 80, 25)
SPRITE_SELECTED_COLOR = '#e94560'
SPRITE_SELECTED_FILL = (233, 69, 96, 51)
SPRITE_PREVIEW_COLOR = '#ffcc00'
SPRITE_PREVIEW_FILL = (255, 204, 0, 51)
SPRITE_LABEL_BACKGROUND = (0, 0, 0, 178)
SPRITE_LABEL_MIN_FONT_SIZE = 10
SPRITE_LABEL_FONT_SIZE = 12

# Tooltip offset from the cursor (pixels)
TOOLTIP_OFFSET = 12

# ======================================================================
# CONFIG
# ======================================================================

CONFIG_DIR_NAME = '.spritegrid'
CONFIG_FILE_NAME = 'config.json'
MAX_RECENT_FILES = 10
