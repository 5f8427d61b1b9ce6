"""Tile mode sidebar: tile size inputs, index toggle and image/grid info."""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QFormLayout, QSpinBox, QCheckBox, QLabel
from PyQt5.QtCore import pyqtSignal

from constants import DEFAULT_TILE_WIDTH, DEFAULT_TILE_HEIGHT, MIN_TILE_SIZE, MAX_TILE_SIZE


class TileSidebar(QWidget):
    """Tile grid controls"""

    tile_size_changed = pyqtSignal(int, int)  # width, height
    show_index_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        form = QFormLayout()
        self.tile_width_spin = self._make_spin(DEFAULT_TILE_WIDTH)
        self.tile_height_spin = self._make_spin(DEFAULT_TILE_HEIGHT)
        form.addRow("Tile width", self.tile_width_spin)
        form.addRow("Tile height", self.tile_height_spin)

        self.show_index_check = QCheckBox("Show tile coordinates")
        self.show_index_check.setChecked(True)
        self.show_index_check.toggled.connect(self.show_index_changed.emit)
        form.addRow(self.show_index_check)
        layout.addLayout(form)

        self.image_info_label = QLabel("")
        self.tile_info_label = QLabel("")
        self.hover_info_label = QLabel("")
        layout.addWidget(self.image_info_label)
        layout.addWidget(self.tile_info_label)
        layout.addWidget(self.hover_info_label)
        layout.addStretch()

    def _make_spin(self, value):
        spin = QSpinBox()
        spin.setRange(MIN_TILE_SIZE, MAX_TILE_SIZE)
        spin.setValue(value)
        spin.setSuffix(" px")
        spin.valueChanged.connect(self._on_size_changed)
        return spin

    def _on_size_changed(self, _value):
        self.tile_size_changed.emit(self.tile_width_spin.value(), self.tile_height_spin.value())

    def tile_size(self):
        return self.tile_width_spin.value(), self.tile_height_spin.value()

    def set_tile_size(self, width, height):
        """Set both spin boxes, emitting a single tile_size_changed"""
        for spin, value in ((self.tile_width_spin, width), (self.tile_height_spin, height)):
            spin.blockSignals(True)
            spin.setValue(value)
            spin.blockSignals(False)
        self._on_size_changed(None)

    def set_show_index(self, show):
        self.show_index_check.setChecked(show)

    def update_info(self, info):
        """Show image size and tile count from InteractionStateMachine.image_info()"""
        if info is None:
            self.image_info_label.setText("")
            self.tile_info_label.setText("")
            return
        self.image_info_label.setText(f"Image: {info['width']} × {info['height']} px")
        self.tile_info_label.setText(
            f"Tiles: {info['cols']} × {info['rows']} = {info['cols'] * info['rows']}"
        )

    def update_hover(self, tile):
        if tile is None:
            self.hover_info_label.setText("")
        else:
            self.hover_info_label.setText(f"Hover: ({tile.col}, {tile.row}) Index: {tile.index}")
