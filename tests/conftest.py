"""
Pytest configuration and shared fixtures for Lil Fast tests.

This module provides shared fixtures and configuration for all test modules.
"""

import io

import pytest
import numpy as np
from PIL import Image

from sketch_core import BackgroundImage, SketchCanvas, StrokeStyle


WHITE = (255, 255, 255)


@pytest.fixture
def sketch():
    """
    Fresh 512x512 canvas with a blank stroke layer and no background.
    """
    return SketchCanvas()


@pytest.fixture
def black_pen():
    """Default pen: black, medium width."""
    return StrokeStyle(color="#000000", brush_width=5)


@pytest.fixture
def wide_background():
    """
    Solid red 200x100 background (aspect ratio 2.0).
    
    Returns:
        BackgroundImage: Opaque RGBA image
    """
    img = np.zeros((100, 200, 3), dtype=np.uint8)
    img[...] = [255, 0, 0]
    return BackgroundImage(img)


@pytest.fixture
def tall_background():
    """
    Solid green 100x200 background (aspect ratio 0.5).
    """
    img = np.zeros((200, 100, 3), dtype=np.uint8)
    img[...] = [0, 255, 0]
    return BackgroundImage(img)


@pytest.fixture
def png_bytes():
    """Small encoded PNG upload (20x10, blue)."""
    buf = io.BytesIO()
    Image.new("RGB", (20, 10), (0, 0, 255)).save(buf, format="PNG")
    return buf.getvalue()


def is_backdrop_only(pixels):
    return bool((pixels == 255).all())

