"""
Sprite Grid Editor - File Operations Service

This module handles file I/O for images and annotation documents.
Separates file operations from UI logic.
"""

import logging
import os
from dataclasses import dataclass

import numpy as np
from PIL import Image, UnidentifiedImageError

from services.annotation_serializer import SpriteExport, encode, decode

logger = logging.getLogger(__name__)


class ImageLoadError(ValueError):
    """Raised when an image file cannot be opened or decoded"""


@dataclass
class LoadedImage:
    """Decoded raster image

    pixels is an (height, width, 4) uint8 RGBA array, C-contiguous.
    """
    name: str
    width: int
    height: int
    pixels: np.ndarray


def is_image_file(filename):
    """Check if a dropped/selected path looks like an image Pillow can open"""
    ext = os.path.splitext(filename)[1].lower()
    return ext in Image.registered_extensions()


def load_image(filename):
    """Open and decode an image file to RGBA

    Args:
        filename: Path to image file

    Returns:
        LoadedImage

    Raises:
        ImageLoadError: If the file is missing or not a decodable image
    """
    try:
        with Image.open(filename) as img:
            rgba = img.convert('RGBA')
    except (FileNotFoundError, UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageLoadError(f"Could not open image {filename}: {e}") from e

    pixels = np.ascontiguousarray(np.array(rgba, dtype=np.uint8))
    height, width = pixels.shape[:2]

    logger.debug(f"Loaded image {filename} ({width}x{height})")
    return LoadedImage(
        name=os.path.basename(filename),
        width=width,
        height=height,
        pixels=pixels,
    )


def save_annotations_to_file(doc: SpriteExport, filename):
    """Write an annotation document to a TOML file

    Raises:
        OSError: If file write fails
    """
    text = encode(doc)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(text)
    logger.info(f"Saved {len(doc.sprites)} sprites to {filename}")


def load_annotations_from_file(filename) -> SpriteExport:
    """Read and decode an annotation document

    Raises:
        OSError: If the file cannot be read
        AnnotationFormatError: If the contents are not a valid document
    """
    with open(filename, 'r', encoding='utf-8') as f:
        text = f.read()
    doc = decode(text)
    logger.info(f"Loaded {len(doc.sprites)} sprites from {filename}")
    return doc
