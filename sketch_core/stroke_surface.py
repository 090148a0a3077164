"""
Off-screen stroke layer.

Holds only the user's pen strokes as an RGBA raster, independent of any
background image. Unstruck pixels stay fully transparent so lower layers
show through when composited.
"""

import logging
from typing import Optional, Tuple

import cv2
import numpy as np

from .errors import SurfaceNotInitializedError
from .style import StrokeStyle

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


# OpenCV takes int32 points; far off-surface samples are clamped and cv2 clips the rest
COORD_LIMIT = 2 ** 30


def _to_pixel(point):
    x, y = (min(max(float(v), -COORD_LIMIT), COORD_LIMIT) for v in point)
    return int(np.floor(x + 0.5)), int(np.floor(y + 0.5))


class StrokeSurface:
    def __init__(self):
        self.pixels: Optional[np.ndarray] = None
        self._head: Optional[Tuple[int, int]] = None

    @property
    def is_initialized(self) -> bool:
        return self.pixels is not None

    @property
    def is_stroking(self) -> bool:
        return self._head is not None

    @property
    def size(self) -> Tuple[int, int]:
        self._require_initialized()
        h, w = self.pixels.shape[:2]
        return w, h

    def _require_initialized(self):
        if self.pixels is None:
            raise SurfaceNotInitializedError(
                "StrokeSurface.initialize(width, height) must be called before drawing"
            )

    def initialize(self, width: int, height: int):
        """
        Allocate a blank (fully transparent) buffer.

        Args:
            width, height: Must match the visible surface; strokes are never scaled.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")

        self.pixels = np.zeros((height, width, 4), dtype=np.uint8)
        self._head = None
        logger.debug(f"Stroke surface allocated at {width}x{height}")

    def begin_stroke(self, point: Point):
        """Start a new path at a surface-local point."""
        self._require_initialized()
        self._head = _to_pixel(point)

    def extend_stroke(self, point: Point, style: StrokeStyle) -> bool:
        """
        Draw a segment from the path head to point and advance the head.

        Segments use round caps and joins so fast, angular pointer motion
        still renders as one continuous stroke. Hard-edged rasterisation keeps
        stroke colours exact.

        Returns:
            bool: False when no stroke is active (nothing drawn)
        """
        self._require_initialized()
        if self._head is None:
            return False

        end = _to_pixel(point)
        r, g, b = style.rgb
        color = (r, g, b, 255)
        thickness = style.thickness

        cv2.line(self.pixels, self._head, end, color, thickness=thickness, lineType=cv2.LINE_8)

        # Round caps at both ends double as round joins between segments
        radius = thickness // 2
        if radius > 0:
            cv2.circle(self.pixels, self._head, radius, color, thickness=-1, lineType=cv2.LINE_8)
            cv2.circle(self.pixels, end, radius, color, thickness=-1, lineType=cv2.LINE_8)

        self._head = end
        return True

    def end_stroke(self):
        self._head = None

    def clear(self):
        """Erase every pixel to fully transparent. An active path keeps its head."""
        self._require_initialized()
        self.pixels[...] = 0
