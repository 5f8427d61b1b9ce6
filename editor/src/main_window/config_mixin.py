"""Configuration management for SpriteGridEditor"""

import os
import json
import logging

from constants import (
	CONFIG_DIR_NAME, CONFIG_FILE_NAME, MAX_RECENT_FILES,
	DEFAULT_TILE_WIDTH, DEFAULT_TILE_HEIGHT
)

_logger = logging.getLogger('Config')


def default_config():
	return {
		'recent_files': [],
		'tile_width': DEFAULT_TILE_WIDTH,
		'tile_height': DEFAULT_TILE_HEIGHT,
		'show_index': True,
	}


def read_config(config_file):
	"""Read settings, falling back to defaults for missing/corrupt values

	Args:
		config_file: Path to config.json

	Returns:
		dict with recent_files, tile_width, tile_height, show_index
	"""
	config = default_config()
	if not os.path.exists(config_file):
		return config

	try:
		with open(config_file, 'r', encoding='utf-8') as f:
			stored = json.load(f)
	except (OSError, ValueError) as e:
		_logger.warning(f"Ignoring unreadable config {config_file}: {e}")
		return config

	if not isinstance(stored, dict):
		return config

	recent = stored.get('recent_files', [])
	if isinstance(recent, list):
		config['recent_files'] = [f for f in recent if isinstance(f, str)][:MAX_RECENT_FILES]
	for key in ('tile_width', 'tile_height'):
		value = stored.get(key)
		if isinstance(value, int) and not isinstance(value, bool) and value > 0:
			config[key] = value
	if isinstance(stored.get('show_index'), bool):
		config['show_index'] = stored['show_index']
	return config


def write_config(config_file, config):
	"""Write settings, creating the config directory if needed"""
	os.makedirs(os.path.dirname(config_file), exist_ok=True)
	with open(config_file, 'w', encoding='utf-8') as f:
		json.dump(config, f, indent=2)


class ConfigMixin:
	"""Configuration file operations and recent files"""

	def _init_config(self, config_dir=None):
		"""Set config paths and load settings (call before UI setup)"""
		self.config_dir = config_dir or os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
		self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
		self.config = read_config(self.config_file)
		# Filter out files that no longer exist
		self.recent_files = [f for f in self.config['recent_files'] if os.path.exists(f)]

	def _save_config(self):
		"""Save recent files and settings to config file"""
		self.config['recent_files'] = self.recent_files[:MAX_RECENT_FILES]
		try:
			write_config(self.config_file, self.config)
		except OSError as e:
			_logger.warning(f"Could not save config: {e}")

	def _add_to_recent_files(self, filepath):
		"""Add a file to the front of the recent files list"""
		if filepath in self.recent_files:
			self.recent_files.remove(filepath)
		self.recent_files.insert(0, filepath)
		self.recent_files = self.recent_files[:MAX_RECENT_FILES]

		if hasattr(self, 'recent_menu'):
			self._update_recent_files_menu()
		self._save_config()

	def _remember_tile_settings(self, width, height, show_index):
		self.config['tile_width'] = width
		self.config['tile_height'] = height
		self.config['show_index'] = show_index
		self._save_config()

	def _update_recent_files_menu(self):
		"""Update the Recent Images submenu"""
		self.recent_menu.clear()

		if not self.recent_files:
			no_recent = self.recent_menu.addAction("No recent images")
			no_recent.setEnabled(False)
			return

		for filepath in self.recent_files:
			action = self.recent_menu.addAction(os.path.basename(filepath))
			action.setToolTip(filepath)
			# Default argument captures filepath per iteration
			action.triggered.connect(lambda checked, f=filepath: self._open_recent_file(f))

		self.recent_menu.addSeparator()
		clear_action = self.recent_menu.addAction("Clear Recent Images")
		clear_action.triggered.connect(self._clear_recent_files)

	def _clear_recent_files(self):
		self.recent_files = []
		self._update_recent_files_menu()
		self._save_config()

	def _open_recent_file(self, filepath):
		"""Open an image from the recent list, dropping it if it is gone"""
		if not os.path.exists(filepath) or not self.file_actions.load_image_file(filepath):
			if filepath in self.recent_files:
				self.recent_files.remove(filepath)
			self._update_recent_files_menu()
			self._save_config()
