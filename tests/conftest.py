"""
Shared fixtures for Sprite Grid Editor tests.

Provides an in-memory image, sample annotation documents and ready-made
stores / state machines.
"""
import sys
import os
import pytest

# Qt widgets are created without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


# ── Sample annotation documents ─────────────────────────────────────────

SAMPLE_DOCUMENT = """\
image = "characters.png"

# idle pose
[[sprites]]
name = "hero_idle"
x = 0
y = 0
width = 32
height = 48

[[sprites]]
name = "hero_walk"
x = 32
y = 0
width = 32
height = 48
"""

SAMPLE_INTERRUPTED_COMMENT = """\
image = "a.png"
# foo
[[sprites]]
name = "a"
x = 0
y = 0
width = 1
height = 1
# bar
extra = 1
[[sprites]]
name = "b"
x = 1
y = 1
width = 1
height = 1
"""


def make_image(width=100, height=80, name="sheet.png"):
    """Blank RGBA LoadedImage of the given size"""
    import numpy as np
    from services.file_operations import LoadedImage
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    return LoadedImage(name=name, width=width, height=height, pixels=pixels)


@pytest.fixture
def image():
    """100x80 blank image"""
    return make_image()


@pytest.fixture
def sample_document_text():
    return SAMPLE_DOCUMENT


@pytest.fixture
def interrupted_comment_text():
    return SAMPLE_INTERRUPTED_COMMENT


@pytest.fixture
def store():
    """Empty SpriteStore"""
    from models.sprite_store import SpriteStore
    return SpriteStore()


@pytest.fixture
def sprite_machine(image):
    """Sprite-mode state machine, 100x80 viewport showing the 100x80 image at 1:1"""
    from services.interaction import InteractionStateMachine, EditorMode
    machine = InteractionStateMachine(EditorMode.SPRITE, 100, 80)
    machine.set_image(image)
    return machine


@pytest.fixture
def tile_machine(image):
    """Tile-mode state machine; set_image zooms to 2x around the centre"""
    from services.interaction import InteractionStateMachine, EditorMode
    machine = InteractionStateMachine(EditorMode.TILE, 100, 80)
    machine.set_image(image)
    return machine
