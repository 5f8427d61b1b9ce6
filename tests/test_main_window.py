"""
Tests for the main window: mode switching, file actions and saved settings.
"""
import json
import os

import pytest
from PIL import Image

from main_window.config_mixin import read_config, write_config, default_config
from services.interaction import EditorMode, Tool


@pytest.fixture
def png_path(tmp_path):
    path = tmp_path / "sheet.png"
    Image.new("RGBA", (100, 80), (10, 20, 30, 255)).save(path)
    return str(path)


@pytest.fixture
def no_popups(monkeypatch):
    """Record warning dialogs instead of blocking on them"""
    shown = []
    monkeypatch.setattr("utils.logger.QMessageBox.warning",
                        lambda parent, title, message: shown.append((title, message)))
    return shown


@pytest.fixture
def window(qtbot, tmp_path):
    from main import SpriteGridEditor
    window = SpriteGridEditor(config_dir=str(tmp_path / "config"))
    qtbot.addWidget(window)
    return window


# ══════════════════════════════════════════════════════════════════════════
# Modes and tools
# ══════════════════════════════════════════════════════════════════════════

class TestModes:

    def test_starts_in_sprite_mode(self, window):
        assert window.canvas.interaction.mode == EditorMode.SPRITE
        assert window.sidebar_stack.currentWidget() is window.sprite_sidebar
        assert window.sprite_mode_action.isChecked()

    def test_switch_to_tile_mode(self, window):
        window.set_editor_mode(EditorMode.TILE)
        assert window.canvas.interaction.mode == EditorMode.TILE
        assert window.sidebar_stack.currentWidget() is window.tile_sidebar
        assert not window.tools_menu.isEnabled()
        assert not window.export_action.isEnabled()

    def test_tool_action_syncs_sidebar(self, window):
        window.rect_tool_action.trigger()
        assert window.canvas.get_tool() == Tool.RECT
        assert window.sprite_sidebar.rect_tool_btn.isChecked()

    def test_tile_size_reaches_state_machine(self, window):
        window.tile_sidebar.set_tile_size(16, 8)
        tile_size = window.canvas.interaction.tile_size
        assert (tile_size.width, tile_size.height) == (16, 8)

    def test_sidebar_selection_reaches_canvas(self, window):
        sprite_id = window.canvas.interaction.store.create(0, 0, 5, 5)
        window.sprite_sidebar.sprite_list.setCurrentRow(0)
        assert window.canvas.interaction.selected_id == sprite_id
        assert window.delete_sprite_action.isEnabled()

    def test_delete_action(self, window):
        store = window.canvas.interaction.store
        sprite_id = store.create(0, 0, 5, 5)
        store.select(sprite_id)
        window.delete_sprite_action.trigger()
        assert len(store) == 0
        assert window.sprite_sidebar.count_label.text() == "Sprites: 0"


# ══════════════════════════════════════════════════════════════════════════
# File actions
# ══════════════════════════════════════════════════════════════════════════

class TestFileActions:

    def test_load_image(self, window, png_path):
        assert window.file_actions.load_image_file(png_path)
        assert window.canvas.interaction.image_info()['width'] == 100
        assert window.windowTitle().endswith("sheet.png")
        assert window.recent_files[0] == png_path

    def test_load_bad_image_warns(self, window, tmp_path, no_popups):
        path = tmp_path / "broken.png"
        path.write_text("nope")
        assert not window.file_actions.load_image_file(str(path))
        assert no_popups and no_popups[0][0] == "Cannot Open Image"
        assert window.canvas.interaction.image is None

    def test_export_then_import(self, window, png_path, tmp_path):
        window.file_actions.load_image_file(png_path)
        store = window.canvas.interaction.store
        sprite_id = store.create(4, 4, 10, 12)
        store.set_comment(sprite_id, "note")
        out = str(tmp_path / "sheet.toml")

        window.file_actions.export_to_file(out)
        assert "Exported 1 sprites" in window.status_left.text()

        store.clear()
        assert window.file_actions.import_from_file(out)
        sprites = window.canvas.interaction.sprites
        assert [(s.name, s.x, s.y, s.width, s.height, s.comment) for s in sprites] == [
            ("sprite_0", 4, 4, 10, 12, "note"),
        ]
        assert window.sprite_sidebar.sprite_list.count() == 1

    def test_bad_import_leaves_sprites(self, window, tmp_path, no_popups):
        store = window.canvas.interaction.store
        store.create(0, 0, 5, 5)
        path = tmp_path / "bad.toml"
        path.write_text("[[sprites]]\nname = \"x\"\n", encoding="utf-8")
        assert not window.file_actions.import_from_file(str(path))
        assert len(store) == 1
        assert no_popups[0][0] == "Import Failed"


# ══════════════════════════════════════════════════════════════════════════
# Config
# ══════════════════════════════════════════════════════════════════════════

class TestConfig:

    def test_defaults_when_missing(self, tmp_path):
        assert read_config(str(tmp_path / "none.json")) == default_config()

    def test_corrupt_file_falls_back(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert read_config(str(path)) == default_config()

    def test_invalid_values_are_dropped(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            'recent_files': ['a.png', 3], 'tile_width': 0, 'tile_height': 16, 'show_index': 'yes',
        }))
        config = read_config(str(path))
        assert config['recent_files'] == ['a.png']
        assert (config['tile_width'], config['tile_height']) == (32, 16)
        assert config['show_index'] is True

    def test_write_creates_directory(self, tmp_path):
        path = str(tmp_path / "nested" / "config.json")
        config = dict(default_config(), tile_width=8)
        write_config(path, config)
        assert read_config(path)['tile_width'] == 8

    def test_tile_settings_persist(self, qtbot, tmp_path):
        from main import SpriteGridEditor
        config_dir = str(tmp_path / "config")
        first = SpriteGridEditor(config_dir=config_dir)
        qtbot.addWidget(first)
        first.tile_sidebar.set_tile_size(24, 12)
        first.tile_sidebar.set_show_index(False)

        second = SpriteGridEditor(config_dir=config_dir)
        qtbot.addWidget(second)
        assert second.tile_sidebar.tile_size() == (24, 12)
        assert not second.canvas.interaction.show_index
        assert not second.show_index_action.isChecked()

    def test_recent_files_skip_missing(self, qtbot, tmp_path, png_path):
        config_dir = tmp_path / "config"
        write_config(str(config_dir / "config.json"),
                     dict(default_config(), recent_files=[png_path, str(tmp_path / "gone.png")]))
        from main import SpriteGridEditor
        window = SpriteGridEditor(config_dir=str(config_dir))
        qtbot.addWidget(window)
        assert window.recent_files == [png_path]
        assert os.path.basename(png_path) in [a.text() for a in window.recent_menu.actions()]
