"""Sprite mode sidebar: tool buttons, sprite list and property editors."""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QListWidget, QListWidgetItem,
    QLineEdit, QPushButton, QToolButton, QButtonGroup, QFormLayout
)
from PyQt5.QtCore import Qt, pyqtSignal

from services.interaction import Tool


class SpriteSidebar(QWidget):
    """Lists sprites in z-order and edits the selected one

    Emits requests only; the main window forwards them to the canvas's
    interaction state machine and calls refresh() on sprites_changed.
    """

    tool_changed = pyqtSignal(object)           # Tool
    sprite_selected = pyqtSignal(object)        # sprite id or None
    sprite_renamed = pyqtSignal(str, str)       # id, name
    comment_changed = pyqtSignal(str, str)      # id, comment
    delete_requested = pyqtSignal(str)          # id

    def __init__(self, parent=None):
        super().__init__(parent)
        self._selected_id = None
        self._sprites = {}
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        # Tool buttons
        tool_row = QHBoxLayout()
        self.select_tool_btn = QToolButton()
        self.select_tool_btn.setText("Select")
        self.select_tool_btn.setToolTip("Select / pan (V)")
        self.select_tool_btn.setCheckable(True)
        self.select_tool_btn.setChecked(True)
        self.rect_tool_btn = QToolButton()
        self.rect_tool_btn.setText("Rectangle")
        self.rect_tool_btn.setToolTip("Draw sprite rectangle (R)")
        self.rect_tool_btn.setCheckable(True)

        self.tool_group = QButtonGroup(self)
        self.tool_group.setExclusive(True)
        self.tool_group.addButton(self.select_tool_btn)
        self.tool_group.addButton(self.rect_tool_btn)
        self.tool_group.buttonClicked.connect(self._on_tool_clicked)

        tool_row.addWidget(self.select_tool_btn)
        tool_row.addWidget(self.rect_tool_btn)
        tool_row.addStretch()
        layout.addLayout(tool_row)

        # Sprite list
        self.count_label = QLabel("Sprites: 0")
        layout.addWidget(self.count_label)

        self.sprite_list = QListWidget()
        self.sprite_list.currentItemChanged.connect(self._on_current_item_changed)
        layout.addWidget(self.sprite_list, stretch=1)

        # Properties of the selected sprite
        form = QFormLayout()
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("sprite name")
        self.name_edit.editingFinished.connect(self._on_name_edited)
        form.addRow("Name", self.name_edit)

        self.comment_edit = QLineEdit()
        self.comment_edit.setPlaceholderText("comment (exported as # line)")
        self.comment_edit.editingFinished.connect(self._on_comment_edited)
        form.addRow("Comment", self.comment_edit)

        self.geometry_label = QLabel("")
        form.addRow("Rect", self.geometry_label)
        layout.addLayout(form)

        self.delete_btn = QPushButton("Delete Sprite")
        self.delete_btn.clicked.connect(self._on_delete_clicked)
        layout.addWidget(self.delete_btn)

        self._set_editors_enabled(False)

    # ========================================
    # Refresh from model
    # ========================================

    def refresh(self, sprites, selected_id):
        """Rebuild the list from the store's sprites (z-order)"""
        self.sprite_list.blockSignals(True)
        self.sprite_list.clear()
        for sprite in sprites:
            item = QListWidgetItem(sprite.name)
            item.setData(Qt.UserRole, sprite.id)
            if sprite.comment:
                item.setToolTip(sprite.comment)
            self.sprite_list.addItem(item)
        self.sprite_list.blockSignals(False)

        self.count_label.setText(f"Sprites: {len(sprites)}")
        self._sprites = {sprite.id: sprite for sprite in sprites}
        self.set_selected(selected_id)

    def set_selected(self, sprite_id):
        """Reflect the canvas selection without echoing it back"""
        self._selected_id = sprite_id
        self.sprite_list.blockSignals(True)
        self.sprite_list.setCurrentRow(-1)
        for row in range(self.sprite_list.count()):
            if self.sprite_list.item(row).data(Qt.UserRole) == sprite_id:
                self.sprite_list.setCurrentRow(row)
                break
        self.sprite_list.blockSignals(False)
        self._load_editors()

    def set_tool(self, tool):
        self.select_tool_btn.setChecked(tool == Tool.SELECT)
        self.rect_tool_btn.setChecked(tool == Tool.RECT)

    def _load_editors(self):
        sprite = self._sprites.get(self._selected_id)
        self._set_editors_enabled(sprite is not None)
        if sprite is None:
            self.name_edit.clear()
            self.comment_edit.clear()
            self.geometry_label.setText("")
            return
        self.name_edit.setText(sprite.name)
        self.comment_edit.setText(sprite.comment)
        self.geometry_label.setText(f"({sprite.x}, {sprite.y}) {sprite.width} × {sprite.height}")

    def _set_editors_enabled(self, enabled):
        self.name_edit.setEnabled(enabled)
        self.comment_edit.setEnabled(enabled)
        self.delete_btn.setEnabled(enabled)

    # ========================================
    # UI callbacks
    # ========================================

    def _on_tool_clicked(self, button):
        tool = Tool.RECT if button is self.rect_tool_btn else Tool.SELECT
        self.tool_changed.emit(tool)

    def _on_current_item_changed(self, current, previous):
        sprite_id = current.data(Qt.UserRole) if current is not None else None
        self.sprite_selected.emit(sprite_id)

    def _on_name_edited(self):
        if self._selected_id is not None:
            self.sprite_renamed.emit(self._selected_id, self.name_edit.text())

    def _on_comment_edited(self):
        if self._selected_id is not None:
            self.comment_changed.emit(self._selected_id, self.comment_edit.text())

    def _on_delete_clicked(self):
        if self._selected_id is not None:
            self.delete_requested.emit(self._selected_id)
