"""File operations for the main window - open image, export/import annotations"""
import os

from PyQt5.QtWidgets import QFileDialog

from constants import ANNOTATION_FILE_FILTER, IMAGE_FILE_FILTER
from services.annotation_serializer import AnnotationFormatError
from services.file_operations import (
	ImageLoadError, load_image, save_annotations_to_file, load_annotations_from_file
)
from utils.logger import loggerRaise, showWarning


class FileActions:
	"""Handles all file menu operations"""

	def __init__(self, main_window):
		"""Initialize with reference to main window

		Args:
			main_window: The SpriteGridEditor main window instance
		"""
		self.main_window = main_window

	@property
	def canvas(self):
		return self.main_window.canvas

	# ========================================
	# Images
	# ========================================

	def open_image(self):
		"""Ask for an image file and load it"""
		filename, _ = QFileDialog.getOpenFileName(
			self.main_window,
			"Open Image",
			"",
			IMAGE_FILE_FILTER
		)
		if filename:
			self.load_image_file(filename)

	def load_image_file(self, filename):
		"""Decode an image and show it on the canvas

		Returns:
			True if the image was loaded
		"""
		try:
			image = load_image(filename)
		except ImageLoadError as e:
			showWarning(str(e), "Cannot Open Image")
			return False

		try:
			self.canvas.set_image(image)
			self.main_window._on_image_loaded(filename)
		except Exception as e:
			loggerRaise(e, "Error displaying image")
		return True

	# ========================================
	# Annotations
	# ========================================

	def export_annotations(self):
		"""Write the sprites to a TOML file"""
		info = self.canvas.interaction.image_info()
		default_name = ''
		if info is not None:
			default_name = os.path.splitext(info['name'])[0] + '.toml'

		filename, _ = QFileDialog.getSaveFileName(
			self.main_window,
			"Export Sprites",
			default_name,
			ANNOTATION_FILE_FILTER
		)
		if not filename:
			return
		if not filename.lower().endswith('.toml'):
			filename += '.toml'
		self.export_to_file(filename)

	def export_to_file(self, filename):
		try:
			doc = self.canvas.interaction.export_document()
			save_annotations_to_file(doc, filename)
			self.main_window.status_left.setText(
				f"Exported {len(doc.sprites)} sprites to {os.path.basename(filename)}"
			)
		except Exception as e:
			loggerRaise(e, "Failed to export sprites")

	def import_annotations(self):
		"""Read sprites from a TOML file, replacing the current ones"""
		filename, _ = QFileDialog.getOpenFileName(
			self.main_window,
			"Import Sprites",
			"",
			ANNOTATION_FILE_FILTER
		)
		if filename:
			self.import_from_file(filename)

	def import_from_file(self, filename):
		"""Decode first, then replace: a bad document leaves the store untouched

		Returns:
			True if the document was imported
		"""
		try:
			doc = load_annotations_from_file(filename)
		except (AnnotationFormatError, OSError, UnicodeDecodeError) as e:
			showWarning(f"Could not import {os.path.basename(filename)}:\n{e}", "Import Failed")
			return False

		self.canvas.interaction.import_document(doc)
		self.main_window.status_left.setText(
			f"Imported {len(doc.sprites)} sprites from {os.path.basename(filename)}"
		)
		return True
