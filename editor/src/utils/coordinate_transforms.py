"""Coordinate transformation utilities for canvas rendering.

Provides conversion between the two coordinate systems:
- Screen space (canvas widget pixels, Y-down, origin at top-left)
- World space (image pixels, Y-down, origin at image top-left)

The mapping is screen = world * scale + offset, applied per axis.
"""

from constants import MIN_SCALE, MAX_SCALE


def clamp_scale(scale, min_scale=MIN_SCALE, max_scale=MAX_SCALE):
	"""Clamp a zoom scale into the supported range.
	
	Args:
		scale: Requested scale factor
		min_scale: Lower bound (default MIN_SCALE)
		max_scale: Upper bound (default MAX_SCALE)
		
	Returns:
		float: Scale within [min_scale, max_scale]
	"""
	return max(min_scale, min(max_scale, scale))


def screen_to_world(screen_x, screen_y, scale, offset_x, offset_y):
	"""Convert screen pixel coordinates to world (image) coordinates.
	
	Args:
		screen_x, screen_y: Position relative to the canvas top-left
		scale: Current zoom scale
		offset_x, offset_y: Screen position of the world origin
		
	Returns:
		(world_x, world_y)
	"""
	world_x = (screen_x - offset_x) / scale
	world_y = (screen_y - offset_y) / scale
	return world_x, world_y


def world_to_screen(world_x, world_y, scale, offset_x, offset_y):
	"""Convert world (image) coordinates to screen pixel coordinates.
	
	Args:
		world_x, world_y: Position in image pixels
		scale: Current zoom scale
		offset_x, offset_y: Screen position of the world origin
		
	Returns:
		(screen_x, screen_y)
	"""
	screen_x = world_x * scale + offset_x
	screen_y = world_y * scale + offset_y
	return screen_x, screen_y


def anchored_offset(anchor_x, anchor_y, world_x, world_y, new_scale):
	"""Offset that maps a world point onto a fixed screen anchor at new_scale.
	
	Used by zoom-to-cursor: the world point under the anchor before the zoom
	must still be under the anchor afterwards.
	
	Args:
		anchor_x, anchor_y: Screen point held fixed
		world_x, world_y: World point currently under the anchor
		new_scale: Scale after the zoom
		
	Returns:
		(offset_x, offset_y)
	"""
	return anchor_x - world_x * new_scale, anchor_y - world_y * new_scale


def centered_offset(content_width, content_height, viewport_width, viewport_height, scale):
	"""Offset that centres content of the given world size in the viewport.
	
	Returns:
		(offset_x, offset_y)
	"""
	offset_x = (viewport_width - content_width * scale) / 2
	offset_y = (viewport_height - content_height * scale) / 2
	return offset_x, offset_y
