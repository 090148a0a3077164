"""
Unit tests for sketch_utils/security.py form validators.
"""

import pytest

from sketch_utils.security import validate_brush_width, validate_hex_color, validate_iterations


class TestValidateHexColor:
    @pytest.mark.parametrize("color", ["#000000", "#FF0000", "#8fbc8f"])
    def test_valid(self, color):
        assert validate_hex_color(color) == (True, None)

    @pytest.mark.parametrize("color,message", [
        ("FF0000", "must start with #"),
        ("#FFF", "7 characters"),
        ("#GGGGGG", "Invalid hex color format"),
        (123456, "must be a string"),
    ])
    def test_invalid(self, color, message):
        valid, msg = validate_hex_color(color)
        assert not valid
        assert message in msg


class TestValidateBrushWidth:
    def test_valid(self):
        assert validate_brush_width(5) == (True, None)
        assert validate_brush_width(2.5) == (True, None)

    def test_invalid(self):
        assert not validate_brush_width(0)[0]
        assert not validate_brush_width(-1)[0]
        assert not validate_brush_width(1000)[0]
        assert not validate_brush_width("5")[0]
        assert not validate_brush_width(True)[0]


class TestValidateIterations:
    def test_presets_are_valid(self):
        assert validate_iterations(1) == (True, None)
        assert validate_iterations(10) == (True, None)

    def test_invalid(self):
        assert not validate_iterations(0)[0]
        assert not validate_iterations(2.0)[0]
