"""Zoom toolbar widget with zoom controls."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QLabel
from PyQt5.QtCore import pyqtSignal


class ZoomToolbar(QWidget):
	"""Toolbar with zoom out / level / zoom in / reset

	The toolbar holds no zoom state of its own: it asks for a change via
	signals and is told the resulting percentage with set_zoom_percent().
	"""

	zoom_in_requested = pyqtSignal()
	zoom_out_requested = pyqtSignal()
	zoom_reset_requested = pyqtSignal()

	def __init__(self, parent=None):
		super().__init__(parent)

		layout = QHBoxLayout()
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(4)

		# Zoom out button
		self.zoom_out_btn = QToolButton()
		self.zoom_out_btn.setText("−")
		self.zoom_out_btn.setToolTip("Zoom Out (Ctrl+-)")
		self.zoom_out_btn.clicked.connect(self.zoom_out_requested.emit)
		layout.addWidget(self.zoom_out_btn)

		# Zoom level display
		self.zoom_label = QLabel("100%")
		self.zoom_label.setMinimumWidth(50)
		layout.addWidget(self.zoom_label)

		# Zoom in button
		self.zoom_in_btn = QToolButton()
		self.zoom_in_btn.setText("+")
		self.zoom_in_btn.setToolTip("Zoom In (Ctrl++)")
		self.zoom_in_btn.clicked.connect(self.zoom_in_requested.emit)
		layout.addWidget(self.zoom_in_btn)

		# Reset button
		self.zoom_reset_btn = QToolButton()
		self.zoom_reset_btn.setText("1:1")
		self.zoom_reset_btn.setToolTip("Reset View (Ctrl+0)")
		self.zoom_reset_btn.clicked.connect(self.zoom_reset_requested.emit)
		layout.addWidget(self.zoom_reset_btn)

		self.setLayout(layout)

	def set_zoom_percent(self, percent):
		"""Update the displayed zoom level"""
		self.zoom_label.setText(f"{percent}%")

	def get_zoom_text(self):
		return self.zoom_label.text()
