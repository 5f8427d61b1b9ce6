# PyQt5 imports
from PyQt5.QtWidgets import QWidget, QSizePolicy, QToolTip
from PyQt5.QtCore import Qt, QSize, QPoint, pyqtSignal
from PyQt5.QtGui import QPainter, QImage

# Canvas mixins
from components.canvas_widgets.canvas_zoom_pan_mixin import CanvasZoomPanMixin
from components.canvas_widgets.canvas_rendering_mixin import CanvasRenderingMixin

import logging
from constants import TOOLTIP_OFFSET
from services.file_operations import is_image_file
from services.interaction import InteractionStateMachine, EditorMode


def image_to_qimage(image):
	"""Build a detached QImage from a LoadedImage's RGBA pixel array"""
	data = image.pixels.tobytes()
	qimage = QImage(data, image.width, image.height, image.width * 4, QImage.Format_RGBA8888)
	# copy() so the QImage no longer references the temporary buffer
	return qimage.copy()


class SpriteCanvas(CanvasZoomPanMixin, CanvasRenderingMixin, QWidget):
	"""Pannable/zoomable image canvas for tile and sprite modes

	Owns one InteractionStateMachine and forwards Qt input to it. Repaints
	whenever the state machine requests a render.
	"""

	hover_changed = pyqtSignal(object)      # TileInfo or None
	selection_changed = pyqtSignal(object)  # sprite id or None
	sprites_changed = pyqtSignal()
	zoom_changed = pyqtSignal(int)          # zoom percent
	image_dropped = pyqtSignal(str)         # path of a dropped image file

	def __init__(self, parent=None, mode=EditorMode.SPRITE):
		super().__init__(parent)
		self._logger = logging.getLogger('SpriteCanvas')
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setMouseTracking(True)
		self.setAcceptDrops(True)
		self.setFocusPolicy(Qt.StrongFocus)

		self.qimage = None
		self.interaction = InteractionStateMachine(mode, self.width(), self.height())

		self.interaction.add_render_listener(self.update)
		self.interaction.add_hover_listener(self._on_hover)
		self.interaction.add_selection_listener(self.selection_changed.emit)
		self.interaction.add_sprites_listener(self.sprites_changed.emit)

	def sizeHint(self):
		if self.parent():
			return self.parent().size()
		return QSize(800, 600)

	# ========================================
	# Public API
	# ========================================

	def set_image(self, image):
		"""Display a LoadedImage and centre it"""
		self.qimage = image_to_qimage(image)
		self.interaction.set_image(image, self.width(), self.height())
		self._emit_zoom()

	def set_mode(self, mode):
		self.interaction.set_mode(mode)
		self._update_cursor()

	def set_tool(self, tool):
		self.interaction.set_tool(tool)
		self._update_cursor()

	def get_tool(self):
		return self.interaction.tool

	# ========================================
	# Qt events
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		try:
			self._paint_canvas(painter)
		finally:
			painter.end()

	def resizeEvent(self, event):
		super().resizeEvent(event)
		self.interaction.resize_viewport(self.width(), self.height())

	def mousePressEvent(self, event):
		if event.button() != Qt.LeftButton:
			return
		self.interaction.pointer_down(event.pos().x(), event.pos().y())
		self._update_cursor()

	def mouseMoveEvent(self, event):
		self.interaction.pointer_move(event.pos().x(), event.pos().y())

	def mouseReleaseEvent(self, event):
		if event.button() != Qt.LeftButton:
			return
		self.interaction.pointer_up()
		self._update_cursor()

	def leaveEvent(self, event):
		self.interaction.pointer_leave()
		self._update_cursor()
		super().leaveEvent(event)

	def dragEnterEvent(self, event):
		if self._dropped_image_path(event) is not None:
			event.acceptProposedAction()
		else:
			event.ignore()

	def dropEvent(self, event):
		path = self._dropped_image_path(event)
		if path is None:
			event.ignore()
			return
		event.acceptProposedAction()
		self.image_dropped.emit(path)

	def _dropped_image_path(self, event):
		"""First local image file in a drag payload, or None"""
		mime = event.mimeData()
		if not mime.hasUrls():
			return None
		for url in mime.urls():
			path = url.toLocalFile()
			if path and is_image_file(path):
				return path
		return None

	# ========================================
	# Hover tooltip (tile mode)
	# ========================================

	def _on_hover(self, tile):
		if tile is None:
			QToolTip.hideText()
		else:
			pos = QPoint(int(tile.mouse_x) + TOOLTIP_OFFSET, int(tile.mouse_y) + TOOLTIP_OFFSET)
			QToolTip.showText(self.mapToGlobal(pos), f"X: {tile.col}, Y: {tile.row}", self)
		self.hover_changed.emit(tile)
