"""
Background image layer.

Holds at most one decoded raster intended as a backdrop for the drawing.
Decoding and validation belong to the upload path, not here.
"""

import numpy as np


class BackgroundImage:
    """Decoded RGBA raster with known pixel dimensions."""

    def __init__(self, pixels):
        """
        Args:
            pixels: uint8 array shaped (H, W), (H, W, 3) or (H, W, 4).
                Grayscale and RGB inputs are promoted to opaque RGBA.
        """
        pixels = np.asarray(pixels)
        if pixels.ndim == 2:
            pixels = np.stack([pixels] * 3, axis=-1)
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(f"pixels must be (H, W), (H, W, 3) or (H, W, 4), got {pixels.shape}")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError(f"pixels must not be empty, got {pixels.shape}")

        if pixels.shape[2] == 3:
            alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
            pixels = np.concatenate([pixels.astype(np.uint8), alpha], axis=-1)

        self.pixels = np.ascontiguousarray(pixels, dtype=np.uint8)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def __repr__(self):
        return f"BackgroundImage({self.width}x{self.height})"


class BackgroundImageHolder:
    def __init__(self):
        self._image = None

    def set(self, image: BackgroundImage):
        # Replacing drops the only reference to the previous image
        self._image = image

    def clear(self):
        self._image = None

    def get(self):
        return self._image

    @property
    def is_set(self) -> bool:
        return self._image is not None
