"""
Tests for image loading and annotation file I/O.
"""
import numpy as np
import pytest
from PIL import Image

from services.annotation_serializer import AnnotationFormatError, SpriteEntry, SpriteExport
from services.file_operations import (
    ImageLoadError, is_image_file, load_image,
    save_annotations_to_file, load_annotations_from_file
)


class TestLoadImage:

    def test_png_is_decoded_to_rgba(self, tmp_path):
        path = tmp_path / "sheet.png"
        Image.new("RGB", (12, 7), (255, 0, 0)).save(path)

        image = load_image(str(path))

        assert image.name == "sheet.png"
        assert (image.width, image.height) == (12, 7)
        assert image.pixels.shape == (7, 12, 4)
        assert image.pixels.dtype == np.uint8
        assert tuple(image.pixels[0, 0]) == (255, 0, 0, 255)
        assert image.pixels.flags['C_CONTIGUOUS']

    def test_alpha_is_kept(self, tmp_path):
        path = tmp_path / "alpha.png"
        Image.new("RGBA", (2, 2), (0, 0, 255, 0)).save(path)
        image = load_image(str(path))
        assert image.pixels[1, 1, 3] == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageLoadError):
            load_image(str(tmp_path / "nope.png"))

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "fake.png"
        path.write_text("definitely not a png")
        with pytest.raises(ImageLoadError):
            load_image(str(path))

    def test_oversized_image(self, tmp_path, monkeypatch):
        path = tmp_path / "huge.png"
        Image.new("RGB", (12, 7)).save(path)
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
        with pytest.raises(ImageLoadError):
            load_image(str(path))

    @pytest.mark.parametrize("filename,expected", [
        ("a.png", True),
        ("A.PNG", True),
        ("b.jpg", True),
        ("c.gif", True),
        ("d.toml", False),
        ("noext", False),
    ])
    def test_is_image_file(self, filename, expected):
        assert is_image_file(filename) is expected


class TestAnnotationFiles:

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "sheet.toml"
        doc = SpriteExport("sheet.png", [
            SpriteEntry("hero", 0, 0, 32, 48, "idle"),
            SpriteEntry("slime", 32, 0, 16, 16),
        ])
        save_annotations_to_file(doc, str(path))
        assert path.read_text(encoding="utf-8").startswith('image = "sheet.png"')
        assert load_annotations_from_file(str(path)) == doc

    def test_load_malformed(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[[sprites]]\nname = 1\n", encoding="utf-8")
        with pytest.raises(AnnotationFormatError):
            load_annotations_from_file(str(path))

    def test_load_missing(self, tmp_path):
        with pytest.raises(OSError):
            load_annotations_from_file(str(tmp_path / "missing.toml"))
