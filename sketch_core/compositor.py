"""
Compositor for the visible canvas surface.

Every repaint is a full recomposition, in a fixed order:
    1. backdrop fill (white)
    2. background image, scaled to fit and centered (if present)
    3. stroke layer at native resolution, offset (0, 0)

Nothing is ever partially updated, so the visible surface always equals
render(background, strokes) and the layers cannot drift apart.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import cv2
import numpy as np

from app_config.constants import CanvasConfig
from sketch_utils.logger import log_performance
from .background import BackgroundImage
from .errors import SurfaceNotInitializedError
from .stroke_surface import StrokeSurface


class VisibleSurface:
    """On-screen RGB buffer. Only render() writes to it."""

    def __init__(self, width=CanvasConfig.WIDTH, height=CanvasConfig.HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.pixels = np.empty((height, width, 3), dtype=np.uint8)
        self.pixels[...] = CanvasConfig.BACKDROP_COLOR

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


def _round_half_up(value):
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Placement:
    """Destination rectangle of the background on the canvas (float precision)."""
    x: float
    y: float
    width: float
    height: float

    def to_pixels(self, canvas_width, canvas_height):
        """
        Snap to an integer rectangle that stays inside the canvas.

        Returns:
            tuple: (left, top, width, height), width and height at least 1
        """
        left = _round_half_up(self.x)
        top = _round_half_up(self.y)
        right = _round_half_up(self.x + self.width)
        bottom = _round_half_up(self.y + self.height)

        left = min(max(left, 0), canvas_width - 1)
        top = min(max(top, 0), canvas_height - 1)
        right = min(max(right, left + 1), canvas_width)
        bottom = min(max(bottom, top + 1), canvas_height)
        return left, top, right - left, bottom - top


def compute_placement(image_width, image_height, canvas_width, canvas_height) -> Placement:
    """
    Aspect-ratio-preserving fit of an image inside the canvas.

    The image is scaled to the largest size that fits without cropping or
    distortion and centered on the remaining axis.

    Example:
        >>> compute_placement(200, 100, 512, 512)
        Placement(x=0.0, y=128.0, width=512.0, height=256.0)
    """
    for name, value in (("image_width", image_width), ("image_height", image_height),
                        ("canvas_width", canvas_width), ("canvas_height", canvas_height)):
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")

    img_ratio = image_width / image_height
    canvas_ratio = canvas_width / canvas_height

    if img_ratio > canvas_ratio:
        # Relatively wider than the canvas: fill the width
        draw_width = float(canvas_width)
        draw_height = draw_width / img_ratio
    else:
        draw_height = float(canvas_height)
        draw_width = draw_height * img_ratio

    draw_x = (canvas_width - draw_width) / 2
    draw_y = (canvas_height - draw_height) / 2
    return Placement(draw_x, draw_y, draw_width, draw_height)


def _blend_rgba_over(dest, src, left, top):
    """Source-over blend of an RGBA patch onto an RGB buffer, in place."""
    h, w = src.shape[:2]
    region = dest[top:top + h, left:left + w]
    alpha = src[..., 3]

    if not alpha.any():
        return
    if (alpha == 255).all():
        region[...] = src[..., :3]
        return

    # Integer math keeps repeated renders byte-identical
    a = alpha[..., None].astype(np.uint16)
    blended = (src[..., :3].astype(np.uint16) * a
               + region.astype(np.uint16) * (255 - a) + 127) // 255
    region[...] = blended.astype(np.uint8)


def _scale_background(image: BackgroundImage, width, height):
    if (width, height) == (image.width, image.height):
        return image.pixels
    shrinking = width < image.width or height < image.height
    interpolation = cv2.INTER_AREA if shrinking else cv2.INTER_LINEAR
    return cv2.resize(image.pixels, (width, height), interpolation=interpolation)


@log_performance
def render(visible: VisibleSurface, background: Optional[BackgroundImage],
           strokes: Optional[StrokeSurface]) -> VisibleSurface:
    """
    Full repaint of the visible surface.

    Args:
        visible: Surface to repaint in place
        background: Current background image, or None
        strokes: Stroke layer, drawn unscaled on top. None renders the
            backdrop and background only (used for the drawing widget's
            backdrop, where the browser paints live strokes itself).

    Returns:
        VisibleSurface: The same surface, for chaining

    Raises:
        SurfaceNotInitializedError: If strokes was never initialized
        ValueError: If the stroke layer size differs from the visible surface
    """
    if strokes is not None:
        if not strokes.is_initialized:
            raise SurfaceNotInitializedError("Cannot composite an uninitialized stroke surface")
        if strokes.size != visible.size:
            raise ValueError(f"Stroke surface {strokes.size} must match visible surface {visible.size}")

    canvas_w, canvas_h = visible.size
    out = visible.pixels

    # 1. Deterministic base
    out[...] = CanvasConfig.BACKDROP_COLOR

    # 2. Background, fit and centered
    if background is not None:
        placement = compute_placement(background.width, background.height, canvas_w, canvas_h)
        left, top, draw_w, draw_h = placement.to_pixels(canvas_w, canvas_h)
        _blend_rgba_over(out, _scale_background(background, draw_w, draw_h), left, top)

    # 3. Strokes, full resolution and topmost
    if strokes is not None:
        _blend_rgba_over(out, strokes.pixels, 0, 0)

    return visible


def composite(background, strokes, size=(CanvasConfig.WIDTH, CanvasConfig.HEIGHT)) -> VisibleSurface:
    """Render into a fresh VisibleSurface of the given (width, height)."""
    return render(VisibleSurface(*size), background, strokes)
