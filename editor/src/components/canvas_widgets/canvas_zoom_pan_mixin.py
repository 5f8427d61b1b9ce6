"""Mixin for handling zoom and pan in the sprite canvas.

Provides viewport navigation including:
- Zoom in/out/reset around the viewport centre (toolbar)
- Zoom-to-cursor on the mouse wheel
- Drag cursor feedback while panning

All state lives in the InteractionStateMachine; this mixin only adapts Qt
events and keeps the zoom display in sync.
"""

from PyQt5.QtCore import Qt


class CanvasZoomPanMixin:
	"""Mixin providing zoom and pan functionality for canvas."""

	# Expected from the main class:
	# - interaction: InteractionStateMachine
	# - zoom_changed: pyqtSignal(int)

	_CURSORS = {
		'grabbing': Qt.ClosedHandCursor,
		'crosshair': Qt.CrossCursor,
		'default': Qt.ArrowCursor,
	}

	def zoom_in(self):
		"""Zoom in one toolbar step around the centre."""
		self.interaction.zoom_in()
		self._emit_zoom()

	def zoom_out(self):
		"""Zoom out one toolbar step around the centre."""
		self.interaction.zoom_out()
		self._emit_zoom()

	def zoom_reset(self):
		"""Reset zoom to 100% and re-centre the image."""
		self.interaction.reset_view()
		self._emit_zoom()

	def set_zoom_level(self, zoom_percent):
		"""Set zoom to specific percentage (clamped by the viewport)."""
		self.interaction.set_scale(zoom_percent / 100.0)
		self._emit_zoom()

	def get_zoom_percent(self):
		"""Get current zoom percentage."""
		return self.interaction.viewport.zoom_percent

	def _emit_zoom(self):
		self.zoom_changed.emit(self.get_zoom_percent())

	def _update_cursor(self):
		"""Match the cursor to the current tool/gesture."""
		self.setCursor(self._CURSORS[self.interaction.cursor_hint()])

	# ========================================
	# Mouse Event Handlers
	# ========================================

	def wheelEvent(self, event):
		"""Handle mouse wheel for zoom-to-cursor."""
		delta = event.angleDelta().y()
		if delta == 0:
			return
		pos = event.pos()
		# Qt reports scroll-up as positive; the state machine expects
		# positive for scroll-down (zoom out)
		self.interaction.wheel(pos.x(), pos.y(), -delta)
		self._emit_zoom()
		event.accept()
