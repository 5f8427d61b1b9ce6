"""
Sprite Grid Editor - Annotation Serializer

Converts the SpriteStore to and from a TOML document:

    image = "characters.png"

    # idle pose
    [[sprites]]
    name = "hero_idle"
    x = 0
    y = 0
    width = 32
    height = 48

TOML has no per-entry comment field, so a sprite's comment is written as a
`#` line immediately before its `[[sprites]]` block. Decoding is done in two
independent passes:

1. tomllib parses the structure (image name, sprite tables)
2. a line scan recovers comments: a `#` line sets the pending comment, a
   `[[sprites]]` header consumes it (or "" when none is pending), any other
   non-blank line resets it

The Nth parsed sprite receives the Nth scanned comment.
"""

import logging
import re
import tomllib
from dataclasses import dataclass, field
from typing import List

import tomli_w

from constants import (
    ANNOTATION_IMAGE_KEY, ANNOTATION_SPRITES_KEY, ANNOTATION_COMMENT_MARKER
)

logger = logging.getLogger(__name__)

SPRITE_FIELDS = ('name', 'x', 'y', 'width', 'height')

# [[sprites]] header, tolerating the whitespace TOML allows inside the brackets
_SPRITE_HEADER = re.compile(r'^\[\[\s*' + re.escape(ANNOTATION_SPRITES_KEY) + r'\s*\]\]')


class AnnotationFormatError(ValueError):
    """Raised when an annotation document cannot be decoded"""


@dataclass
class SpriteEntry:
    """One exported sprite (no id: ids are session-local)"""
    name: str
    x: int
    y: int
    width: int
    height: int
    comment: str = ''


@dataclass
class SpriteExport:
    """Serialized document: source image name plus sprites in z-order"""
    image: str
    sprites: List[SpriteEntry] = field(default_factory=list)


# ========================================
# Store <-> document
# ========================================

def export_sprites(store, image_name: str) -> SpriteExport:
    """Snapshot a SpriteStore as a SpriteExport (store order preserved)"""
    return SpriteExport(
        image=image_name,
        sprites=[
            SpriteEntry(
                name=sprite.name,
                x=sprite.x,
                y=sprite.y,
                width=sprite.width,
                height=sprite.height,
                comment=sprite.comment,
            )
            for sprite in store.sprites
        ],
    )


def import_sprites(store, doc: SpriteExport) -> List[str]:
    """Replace the store's contents with the document's sprites

    Every sprite gets a fresh id; the previous ids and selection are dropped.

    Returns:
        New sprite ids in document order
    """
    new_ids = store.replace_all(doc.sprites)
    logger.debug(f"Imported {len(new_ids)} sprites for image '{doc.image}'")
    return new_ids


# ========================================
# Encoding
# ========================================

def _comment_line(comment: str) -> str:
    # One line only: embedded newlines would end the comment early
    text = ' '.join(comment.split())
    return f"{ANNOTATION_COMMENT_MARKER} {text}"


def encode(doc: SpriteExport) -> str:
    """Serialize a SpriteExport to TOML text

    Each non-empty comment is emitted as a single `#` line directly above
    its sprite's block.
    """
    lines = [tomli_w.dumps({ANNOTATION_IMAGE_KEY: doc.image}).rstrip('\n')]

    for entry in doc.sprites:
        lines.append('')
        if entry.comment.strip():
            lines.append(_comment_line(entry.comment))
        lines.append(f"[[{ANNOTATION_SPRITES_KEY}]]")
        body = tomli_w.dumps({
            'name': entry.name,
            'x': int(entry.x),
            'y': int(entry.y),
            'width': int(entry.width),
            'height': int(entry.height),
        })
        lines.append(body.rstrip('\n'))

    return '\n'.join(lines) + '\n'


# ========================================
# Decoding
# ========================================

def extract_comments(text: str) -> List[str]:
    """Scan raw lines for the comment attached to each sprite block

    Returns:
        One entry per `[[sprites]]` header, in order ("" when uncommented)
    """
    comments = []
    pending = ''

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith(ANNOTATION_COMMENT_MARKER):
            pending = line[len(ANNOTATION_COMMENT_MARKER):].strip()
        elif _SPRITE_HEADER.match(line):
            comments.append(pending)
            pending = ''
        else:
            pending = ''

    return comments


def _require_int(table: dict, key: str, index: int, minimum: int) -> int:
    value = table.get(key)
    # bool is an int subclass; TOML true/false is not a coordinate
    if not isinstance(value, int) or isinstance(value, bool):
        raise AnnotationFormatError(f"Sprite {index}: '{key}' must be an integer, got {value!r}")
    if value < minimum:
        raise AnnotationFormatError(f"Sprite {index}: '{key}' must be >= {minimum}, got {value}")
    return value


def _parse_entry(table, index: int) -> SpriteEntry:
    if not isinstance(table, dict):
        raise AnnotationFormatError(f"Sprite {index}: expected a table")

    missing = [key for key in SPRITE_FIELDS if key not in table]
    if missing:
        raise AnnotationFormatError(f"Sprite {index}: missing field(s) {', '.join(missing)}")

    name = table['name']
    if not isinstance(name, str):
        raise AnnotationFormatError(f"Sprite {index}: 'name' must be a string, got {name!r}")

    return SpriteEntry(
        name=name,
        x=_require_int(table, 'x', index, 0),
        y=_require_int(table, 'y', index, 0),
        width=_require_int(table, 'width', index, 1),
        height=_require_int(table, 'height', index, 1),
    )


def decode(text: str) -> SpriteExport:
    """Parse TOML text into a SpriteExport, recovering comments

    Raises:
        AnnotationFormatError: If the text is not valid TOML or a sprite
            block is missing or has invalid fields
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        logger.warning(f"Rejected annotation document: {e}")
        raise AnnotationFormatError(f"Invalid TOML: {e}") from e

    image = data.get(ANNOTATION_IMAGE_KEY, '')
    if not isinstance(image, str):
        raise AnnotationFormatError(f"'{ANNOTATION_IMAGE_KEY}' must be a string, got {image!r}")

    tables = data.get(ANNOTATION_SPRITES_KEY, [])
    if not isinstance(tables, list):
        raise AnnotationFormatError(f"'{ANNOTATION_SPRITES_KEY}' must be an array of tables")

    entries = [_parse_entry(table, index) for index, table in enumerate(tables)]

    comments = extract_comments(text)
    for index, entry in enumerate(entries):
        entry.comment = comments[index] if index < len(comments) else ''

    return SpriteExport(image=image, sprites=entries)
