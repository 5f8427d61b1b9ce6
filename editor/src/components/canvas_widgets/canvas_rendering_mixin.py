"""Canvas rendering mixin.

Paints the image and the mode-specific overlay with QPainter. Everything
after the view transform is drawn in world (image) pixels; line pens are
cosmetic so they stay one screen pixel wide at any zoom.
"""

from PyQt5.QtCore import Qt, QRectF
from PyQt5.QtGui import QPainter, QPen, QColor, QFont, QFontMetricsF

from constants import (
	CANVAS_BACKGROUND,
	GRID_COLUMN_LINE_COLOR, GRID_ROW_LINE_COLOR, GRID_DASH_LENGTH,
	RULER_COLUMN_TEXT_COLOR, RULER_ROW_TEXT_COLOR, RULER_BACKGROUND,
	TILE_LABEL_TEXT_COLOR, TILE_LABEL_BACKGROUND, LABEL_FONT_SIZE,
	SPRITE_COLOR, SPRITE_FILL, SPRITE_SELECTED_COLOR, SPRITE_SELECTED_FILL,
	SPRITE_PREVIEW_COLOR, SPRITE_PREVIEW_FILL, SPRITE_LABEL_BACKGROUND,
	SPRITE_LABEL_MIN_FONT_SIZE, SPRITE_LABEL_FONT_SIZE
)
from models.grid import grid_size, grid_lines, tile_labels
from services.interaction import EditorMode


def _color(value):
	"""QColor from '#rrggbb' or an (r, g, b, a) tuple"""
	if isinstance(value, tuple):
		return QColor(*value)
	return QColor(value)


def _label_font(pixel_size):
	font = QFont('monospace')
	font.setStyleHint(QFont.Monospace)
	font.setPixelSize(max(1, int(round(pixel_size))))
	return font


class CanvasRenderingMixin:
	"""Mixin providing paint routines for tile and sprite modes."""

	# Expected from the main class:
	# - interaction: InteractionStateMachine
	# - qimage: QImage or None

	def _paint_canvas(self, painter):
		"""Paint the full canvas for the current state."""
		painter.fillRect(self.rect(), _color(CANVAS_BACKGROUND))

		if self.qimage is None or self.interaction.image is None:
			return

		viewport = self.interaction.viewport
		painter.save()
		painter.translate(viewport.offset_x, viewport.offset_y)
		painter.scale(viewport.scale, viewport.scale)

		# Nearest-neighbour: pixel art must stay crisp when zoomed
		painter.setRenderHint(QPainter.SmoothPixmapTransform, False)
		painter.drawImage(0, 0, self.qimage)

		if self.interaction.mode == EditorMode.TILE:
			self._paint_grid(painter)
			self._paint_rulers(painter)
			if self.interaction.show_index:
				self._paint_tile_coordinates(painter)
		else:
			self._paint_sprites(painter)
			if self.interaction.preview is not None:
				self._paint_preview(painter)

		painter.restore()

	# ========================================
	# Tile mode
	# ========================================

	def _grid_params(self):
		image = self.interaction.image
		tile_size = self.interaction.tile_size
		return tile_size.width, tile_size.height, image.width, image.height

	def _paint_grid(self, painter):
		"""Dashed column (red) and row (blue) lines."""
		tile_w, tile_h, image_w, image_h = self._grid_params()
		xs, ys = grid_lines(tile_w, tile_h, image_w, image_h)

		pen = QPen(_color(GRID_COLUMN_LINE_COLOR))
		pen.setCosmetic(True)
		pen.setDashPattern([GRID_DASH_LENGTH, GRID_DASH_LENGTH])
		painter.setPen(pen)
		for x in xs:
			painter.drawLine(x, 0, x, image_h)

		pen.setColor(_color(GRID_ROW_LINE_COLOR))
		painter.setPen(pen)
		for y in ys:
			painter.drawLine(0, y, image_w, y)

	def _paint_rulers(self, painter):
		"""Column numbers above the image, row numbers to its left."""
		tile_w, tile_h, image_w, image_h = self._grid_params()
		cols, rows = grid_size(tile_w, tile_h, image_w, image_h)

		font = _label_font(LABEL_FONT_SIZE)
		metrics = QFontMetricsF(font)
		painter.setFont(font)

		for col in range(cols):
			text = str(col)
			text_w = metrics.horizontalAdvance(text)
			center_x = col * tile_w + tile_w / 2
			box = QRectF(center_x - text_w / 2 - 2, -4 - LABEL_FONT_SIZE, text_w + 4, LABEL_FONT_SIZE + 2)
			painter.fillRect(box, _color(RULER_BACKGROUND))
			painter.setPen(_color(RULER_COLUMN_TEXT_COLOR))
			painter.drawText(box, Qt.AlignCenter, text)

		for row in range(rows):
			text = str(row)
			text_w = metrics.horizontalAdvance(text)
			center_y = row * tile_h + tile_h / 2
			box = QRectF(-4 - text_w - 2, center_y - LABEL_FONT_SIZE / 2 - 1, text_w + 4, LABEL_FONT_SIZE + 2)
			painter.fillRect(box, _color(RULER_BACKGROUND))
			painter.setPen(_color(RULER_ROW_TEXT_COLOR))
			painter.drawText(box, Qt.AlignCenter, text)

	def _paint_tile_coordinates(self, painter):
		"""'col,row' label in the top-left corner of every tile."""
		font = _label_font(LABEL_FONT_SIZE)
		metrics = QFontMetricsF(font)
		painter.setFont(font)

		for x, y, text in tile_labels(*self._grid_params()):
			text_w = metrics.horizontalAdvance(text)
			box = QRectF(x + 1, y + 1, text_w + 3, LABEL_FONT_SIZE + 2)
			painter.fillRect(box, _color(TILE_LABEL_BACKGROUND))
			painter.setPen(_color(TILE_LABEL_TEXT_COLOR))
			painter.drawText(box, Qt.AlignCenter, text)

	# ========================================
	# Sprite mode
	# ========================================

	def _paint_sprites(self, painter):
		"""Outlined, tinted rectangles with a name tag above each."""
		scale = self.interaction.viewport.scale
		selected_id = self.interaction.selected_id
		font_size = max(SPRITE_LABEL_MIN_FONT_SIZE, SPRITE_LABEL_FONT_SIZE / scale)
		font = _label_font(font_size)
		metrics = QFontMetricsF(font)
		padding = 2 / scale

		for sprite in self.interaction.sprites:
			is_selected = sprite.id == selected_id
			line_color = _color(SPRITE_SELECTED_COLOR if is_selected else SPRITE_COLOR)
			fill_color = _color(SPRITE_SELECTED_FILL if is_selected else SPRITE_FILL)
			rect = QRectF(sprite.x, sprite.y, sprite.width, sprite.height)

			pen = QPen(line_color, 2)
			pen.setCosmetic(True)
			painter.setPen(pen)
			painter.fillRect(rect, fill_color)
			painter.drawRect(rect)

			painter.setFont(font)
			text_w = metrics.horizontalAdvance(sprite.name)
			tag = QRectF(sprite.x, sprite.y - font_size - padding * 2, text_w + padding * 2, font_size + padding)
			painter.fillRect(tag, _color(SPRITE_LABEL_BACKGROUND))
			painter.setPen(line_color)
			painter.drawText(tag, Qt.AlignCenter, sprite.name)

	def _paint_preview(self, painter):
		"""Dashed yellow rectangle for the in-progress draw."""
		preview = self.interaction.preview
		rect = QRectF(preview.x, preview.y, preview.width, preview.height)

		pen = QPen(_color(SPRITE_PREVIEW_COLOR), 2)
		pen.setCosmetic(True)
		pen.setDashPattern([GRID_DASH_LENGTH, GRID_DASH_LENGTH])
		painter.setPen(pen)
		painter.fillRect(rect, _color(SPRITE_PREVIEW_FILL))
		painter.drawRect(rect)
