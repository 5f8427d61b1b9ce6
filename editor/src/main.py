import sys
import os
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5.QtWidgets import (
    QApplication, QMainWindow, QWidget, QHBoxLayout, QSplitter, QStackedWidget, QLabel
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

# Component imports
from components.canvas_widget import SpriteCanvas
from components.sprite_sidebar import SpriteSidebar
from components.tile_sidebar import TileSidebar

# Utility imports
from utils.logger import set_main_window

# Service imports
from services.interaction import EditorMode

# Action imports
from actions.file_actions import FileActions

# Mixin imports
from main_window.config_mixin import ConfigMixin
from main_window.menu_mixin import MenuMixin

WINDOW_TITLE = "Sprite Grid Editor"


class SpriteGridEditor(MenuMixin, ConfigMixin, QMainWindow):
    """Main window: canvas in the centre, a mode-specific sidebar on the right"""

    def __init__(self, mode=EditorMode.SPRITE, config_dir=None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1280, 720)

        self._logger = logging.getLogger('SpriteGridEditor')
        self.current_image_path = None

        self._init_config(config_dir)

        # Initialize global logger with main window reference
        set_main_window(self)

        self.file_actions = FileActions(self)

        self.setup_ui(mode)
        self._apply_saved_settings()
        self.set_editor_mode(mode)

    # ============= UI Setup =============

    def setup_ui(self, mode):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QHBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        splitter = QSplitter(Qt.Horizontal)

        # Center canvas
        self.canvas = SpriteCanvas(self, mode=mode)
        splitter.addWidget(self.canvas)

        # Right sidebar - one page per mode
        self.sidebar_stack = QStackedWidget()
        self.tile_sidebar = TileSidebar()
        self.sprite_sidebar = SpriteSidebar()
        self.sidebar_stack.addWidget(self.tile_sidebar)
        self.sidebar_stack.addWidget(self.sprite_sidebar)
        splitter.addWidget(self.sidebar_stack)

        splitter.setSizes([980, 300])
        splitter.setCollapsible(0, False)
        splitter.setCollapsible(1, False)
        main_layout.addWidget(splitter)

        # Menu bar needs the canvas for zoom actions
        self._create_menu_bar()

        # Status bar with left and right sections
        self.status_left = QLabel("Open or drop an image to begin")
        self.status_right = QLabel("")
        self.statusBar().addWidget(self.status_left, 1)
        self.statusBar().addPermanentWidget(self.status_right)

        self._connect_signals()

    def _connect_signals(self):
        canvas = self.canvas
        canvas.zoom_changed.connect(self._on_zoom_changed)
        canvas.hover_changed.connect(self._on_hover_changed)
        canvas.selection_changed.connect(self._on_selection_changed)
        canvas.sprites_changed.connect(self._on_sprites_changed)
        canvas.image_dropped.connect(self.file_actions.load_image_file)

        self.tile_sidebar.tile_size_changed.connect(self._on_tile_size_changed)
        self.tile_sidebar.show_index_changed.connect(self._on_show_index_changed)

        sidebar = self.sprite_sidebar
        sidebar.tool_changed.connect(self.set_tool)
        sidebar.sprite_selected.connect(canvas.interaction.select_sprite)
        sidebar.sprite_renamed.connect(canvas.interaction.rename_sprite)
        sidebar.comment_changed.connect(canvas.interaction.set_sprite_comment)
        sidebar.delete_requested.connect(canvas.interaction.delete_sprite)

    def _apply_saved_settings(self):
        # Read everything first: applying one setting saves the config
        width = self.config['tile_width']
        height = self.config['tile_height']
        show_index = self.config['show_index']
        self.canvas.interaction.set_show_index(show_index)
        self.tile_sidebar.set_show_index(show_index)
        self.show_index_action.setChecked(show_index)
        self.tile_sidebar.set_tile_size(width, height)

    # ========================================
    # Mode and tool
    # ========================================

    def set_editor_mode(self, mode):
        """Switch between tile inspection and sprite annotation"""
        self.canvas.set_mode(mode)
        if mode == EditorMode.TILE:
            self.sidebar_stack.setCurrentWidget(self.tile_sidebar)
        else:
            self.sidebar_stack.setCurrentWidget(self.sprite_sidebar)
        self._update_menu_actions()
        self._update_status_right()

    def set_tool(self, tool):
        self.canvas.set_tool(tool)
        self.sprite_sidebar.set_tool(tool)
        self._update_menu_actions()

    # ========================================
    # Canvas callbacks
    # ========================================

    def _on_image_loaded(self, filename):
        self.current_image_path = filename
        self._add_to_recent_files(filename)
        interaction = self.canvas.interaction
        info = interaction.image_info()
        self.tile_sidebar.update_info(info)
        self.setWindowTitle(f"{WINDOW_TITLE} - {info['name']}")
        self.status_left.setText(f"{info['name']} ({info['width']} × {info['height']} px)")
        self._update_status_right()

    def _on_zoom_changed(self, percent):
        self.zoom_toolbar.set_zoom_percent(percent)
        self._update_status_right()

    def _on_hover_changed(self, tile):
        self.tile_sidebar.update_hover(tile)
        if tile is not None:
            self.status_right.setText(f"Tile ({tile.col}, {tile.row}) #{tile.index}")
        else:
            self._update_status_right()

    def _on_selection_changed(self, sprite_id):
        self.sprite_sidebar.set_selected(sprite_id)
        self._update_menu_actions()

    def _on_sprites_changed(self):
        interaction = self.canvas.interaction
        self.sprite_sidebar.refresh(interaction.sprites, interaction.selected_id)
        self._update_status_right()

    def _on_tile_size_changed(self, width, height):
        self.canvas.interaction.set_tile_size(width, height)
        self.tile_sidebar.update_info(self.canvas.interaction.image_info())
        self._remember_tile_settings(width, height, self.canvas.interaction.show_index)

    def _on_show_index_changed(self, show):
        self.canvas.interaction.set_show_index(show)
        self.show_index_action.setChecked(show)
        width, height = self.tile_sidebar.tile_size()
        self._remember_tile_settings(width, height, show)

    def _update_status_right(self):
        interaction = self.canvas.interaction
        parts = [f"{interaction.viewport.zoom_percent}%"]
        if interaction.mode == EditorMode.SPRITE:
            parts.append(f"{len(interaction.store)} sprites")
        self.status_right.setText("  |  ".join(parts))


def _dark_palette():
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(53, 53, 53))
    palette.setColor(QPalette.WindowText, Qt.white)
    palette.setColor(QPalette.Base, QColor(25, 25, 25))
    palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    palette.setColor(QPalette.ToolTipBase, Qt.white)
    palette.setColor(QPalette.ToolTipText, Qt.white)
    palette.setColor(QPalette.Text, Qt.white)
    palette.setColor(QPalette.Button, QColor(53, 53, 53))
    palette.setColor(QPalette.ButtonText, Qt.white)
    palette.setColor(QPalette.BrightText, Qt.red)
    palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    palette.setColor(QPalette.HighlightedText, Qt.black)
    return palette


def main():
    """Entry point; an image path on the command line is opened at startup"""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setPalette(_dark_palette())

    mode = EditorMode.TILE if '--tile' in sys.argv[1:] else EditorMode.SPRITE
    window = SpriteGridEditor(mode=mode)
    window.show()

    paths = [arg for arg in sys.argv[1:] if not arg.startswith('--')]
    if paths:
        window.file_actions.load_image_file(paths[0])

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
