"""
Unit tests for sketch_utils/image_processing.py upload decoding and
path-to-event conversion.
"""

import io

import pytest
import numpy as np
from PIL import Image

from sketch_core import PointerEventType
from sketch_utils.image_processing import ImageDecodeError, decode_upload, path_to_events


class TestDecodeUpload:
    def test_decode_png(self, png_bytes):
        image = decode_upload(png_bytes)
        assert (image.width, image.height) == (20, 10)
        assert image.pixels.shape == (10, 20, 4)
        assert image.pixels[0, 0].tolist() == [0, 0, 255, 255]

    def test_keeps_alpha(self):
        buf = io.BytesIO()
        Image.new("RGBA", (4, 4), (10, 20, 30, 0)).save(buf, format="PNG")
        image = decode_upload(buf.getvalue())
        assert (image.pixels[..., 3] == 0).all()

    def test_grayscale_promoted(self):
        buf = io.BytesIO()
        Image.new("L", (3, 2), 128).save(buf, format="PNG")
        image = decode_upload(buf.getvalue())
        assert image.pixels[0, 0].tolist() == [128, 128, 128, 255]

    def test_garbage_raises(self):
        with pytest.raises(ImageDecodeError, match="Could not decode"):
            decode_upload(b"definitely not an image")

    def test_empty_raises(self):
        with pytest.raises(ImageDecodeError, match="empty"):
            decode_upload(b"")

    def test_decode_error_is_value_error(self):
        assert issubclass(ImageDecodeError, ValueError)

    def test_failed_decode_leaves_holder_untouched(self, sketch, wide_background):
        sketch.set_background(wide_background)
        before = sketch.visible.pixels.copy()
        renders = sketch.render_count

        with pytest.raises(ImageDecodeError):
            sketch.set_background(decode_upload(b"\x89PNG broken"))

        assert sketch.background.get() is wide_background
        assert sketch.render_count == renders
        assert np.array_equal(sketch.visible.pixels, before)


class TestPathToEvents:
    def test_freehand_path(self):
        path = [["M", 10, 10], ["Q", 10, 10, 30.5, 30.5], ["L", 50, 50]]
        events = path_to_events(path)

        assert [e.type for e in events] == [
            PointerEventType.DOWN,
            PointerEventType.MOVE,
            PointerEventType.MOVE,
            PointerEventType.UP,
        ]
        assert (events[1].client_x, events[1].client_y) == (30.5, 30.5)
        assert (events[-1].client_x, events[-1].client_y) == (50.0, 50.0)

    def test_second_move_to_starts_new_session(self):
        events = path_to_events([["M", 0, 0], ["L", 5, 5], ["M", 20, 20], ["L", 25, 25]])
        types = [e.type for e in events]
        assert types.count(PointerEventType.DOWN) == 2
        assert types.index(PointerEventType.UP) == 2

    def test_empty_path(self):
        assert path_to_events([]) == []
        assert path_to_events(None) == []

    def test_unknown_commands_skipped(self):
        events = path_to_events([["M", 1, 1], ["Z"], ["L", 2, 2]])
        assert len(events) == 3
