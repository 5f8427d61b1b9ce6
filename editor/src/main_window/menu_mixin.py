"""Menu bar creation and menu action handlers for SpriteGridEditor"""

from PyQt5.QtWidgets import QMessageBox, QActionGroup
from PyQt5.QtCore import Qt

from components.zoom_toolbar import ZoomToolbar
from services.interaction import EditorMode, Tool


class MenuMixin:
    """Menu bar and menu action handlers"""
    
    def _create_menu_bar(self):
        """Create the menu bar with File, View, Tools, Help menus"""
        menubar = self.menuBar()
        
        # Add zoom controls to the right of menu bar
        self.zoom_toolbar = ZoomToolbar(self)
        self.zoom_toolbar.zoom_in_requested.connect(self.canvas.zoom_in)
        self.zoom_toolbar.zoom_out_requested.connect(self.canvas.zoom_out)
        self.zoom_toolbar.zoom_reset_requested.connect(self.canvas.zoom_reset)
        menubar.setCornerWidget(self.zoom_toolbar, Qt.TopRightCorner)
        
        # File Menu
        file_menu = menubar.addMenu("&File")
        
        open_action = file_menu.addAction("&Open Image...")
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self.file_actions.open_image)
        
        # Recent Images submenu
        self.recent_menu = file_menu.addMenu("Recent Images")
        self._update_recent_files_menu()
        
        file_menu.addSeparator()
        
        self.export_action = file_menu.addAction("&Export Sprites...")
        self.export_action.setShortcut("Ctrl+E")
        self.export_action.triggered.connect(self.file_actions.export_annotations)
        
        self.import_action = file_menu.addAction("&Import Sprites...")
        self.import_action.setShortcut("Ctrl+I")
        self.import_action.triggered.connect(self.file_actions.import_annotations)
        
        file_menu.addSeparator()
        
        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut("Alt+F4")
        exit_action.triggered.connect(self.close)
        
        # View Menu
        view_menu = menubar.addMenu("&View")
        
        mode_group = QActionGroup(self)
        mode_group.setExclusive(True)
        
        self.tile_mode_action = view_menu.addAction("&Tile Mode")
        self.tile_mode_action.setShortcut("Ctrl+1")
        self.tile_mode_action.setCheckable(True)
        self.tile_mode_action.triggered.connect(lambda: self.set_editor_mode(EditorMode.TILE))
        mode_group.addAction(self.tile_mode_action)
        
        self.sprite_mode_action = view_menu.addAction("&Sprite Mode")
        self.sprite_mode_action.setShortcut("Ctrl+2")
        self.sprite_mode_action.setCheckable(True)
        self.sprite_mode_action.triggered.connect(lambda: self.set_editor_mode(EditorMode.SPRITE))
        mode_group.addAction(self.sprite_mode_action)
        
        view_menu.addSeparator()
        
        self.show_index_action = view_menu.addAction("Show Tile &Coordinates")
        self.show_index_action.setCheckable(True)
        self.show_index_action.setChecked(self.config['show_index'])
        self.show_index_action.toggled.connect(self._on_show_index_toggled)
        
        view_menu.addSeparator()
        
        zoom_in_action = view_menu.addAction("Zoom &In")
        zoom_in_action.setShortcut("Ctrl+=")
        zoom_in_action.triggered.connect(self.canvas.zoom_in)
        
        zoom_out_action = view_menu.addAction("Zoom &Out")
        zoom_out_action.setShortcut("Ctrl+-")
        zoom_out_action.triggered.connect(self.canvas.zoom_out)
        
        zoom_reset_action = view_menu.addAction("&Reset View")
        zoom_reset_action.setShortcut("Ctrl+0")
        zoom_reset_action.triggered.connect(self.canvas.zoom_reset)
        
        # Tools Menu (sprite mode)
        self.tools_menu = menubar.addMenu("&Tools")
        
        tool_group = QActionGroup(self)
        tool_group.setExclusive(True)
        
        self.select_tool_action = self.tools_menu.addAction("&Select")
        self.select_tool_action.setShortcut("V")
        self.select_tool_action.setCheckable(True)
        self.select_tool_action.setChecked(True)
        self.select_tool_action.triggered.connect(lambda: self.set_tool(Tool.SELECT))
        tool_group.addAction(self.select_tool_action)
        
        self.rect_tool_action = self.tools_menu.addAction("&Rectangle")
        self.rect_tool_action.setShortcut("R")
        self.rect_tool_action.setCheckable(True)
        self.rect_tool_action.triggered.connect(lambda: self.set_tool(Tool.RECT))
        tool_group.addAction(self.rect_tool_action)
        
        self.tools_menu.addSeparator()
        
        self.delete_sprite_action = self.tools_menu.addAction("&Delete Sprite")
        self.delete_sprite_action.setShortcut("Delete")
        self.delete_sprite_action.triggered.connect(self._delete_selected_sprite)
        self.delete_sprite_action.setEnabled(False)
        
        # Help Menu
        help_menu = menubar.addMenu("&Help")
        
        controls_action = help_menu.addAction("&Controls")
        controls_action.triggered.connect(self._show_controls)
        
        about_action = help_menu.addAction("&About")
        about_action.triggered.connect(self._show_about)
    
    def _update_menu_actions(self):
        """Enable/disable actions for the current mode and selection"""
        sprite_mode = self.canvas.interaction.mode == EditorMode.SPRITE
        self.tile_mode_action.setChecked(not sprite_mode)
        self.sprite_mode_action.setChecked(sprite_mode)
        self.tools_menu.setEnabled(sprite_mode)
        self.export_action.setEnabled(sprite_mode)
        self.import_action.setEnabled(sprite_mode)
        self.delete_sprite_action.setEnabled(
            sprite_mode and self.canvas.interaction.selected_id is not None
        )
        tool = self.canvas.get_tool()
        self.select_tool_action.setChecked(tool == Tool.SELECT)
        self.rect_tool_action.setChecked(tool == Tool.RECT)
    
    def _on_show_index_toggled(self, checked):
        if self.tile_sidebar.show_index_check.isChecked() != checked:
            self.tile_sidebar.set_show_index(checked)
    
    def _delete_selected_sprite(self):
        sprite_id = self.canvas.interaction.selected_id
        if sprite_id is not None:
            self.canvas.interaction.delete_sprite(sprite_id)
    
    def _show_controls(self):
        """Show the mouse and keyboard controls"""
        QMessageBox.information(
            self,
            "Controls",
            "Mouse wheel: zoom at cursor\n"
            "Drag: pan the view\n"
            "Rectangle tool (R): drag over the image to add a sprite\n"
            "Select tool (V): click a sprite to select it\n"
            "Delete: remove the selected sprite\n"
            "Drop an image file on the canvas to open it"
        )
    
    def _show_about(self):
        from version import get_version
        QMessageBox.about(
            self,
            "About Sprite Grid Editor",
            f"Sprite Grid Editor {get_version()}\n\n"
            "Inspect images on a tile grid and annotate sprite rectangles."
        )
