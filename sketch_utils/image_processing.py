"""
Upload decoding and freehand path conversion.
"""

import io
import logging

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from sketch_core import BackgroundImage, PointerEvent, PointerEventType

logger = logging.getLogger(__name__)


class ImageDecodeError(ValueError):
    """The uploaded bytes could not be decoded as an image."""


def decode_upload(data):
    """
    Decode uploaded file bytes into a BackgroundImage.

    EXIF orientation is applied so the backdrop matches what a browser shows.

    Raises:
        ImageDecodeError: If the bytes are empty or not a readable image
    """
    if not data:
        raise ImageDecodeError("Uploaded file is empty")

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            rgba = ImageOps.exif_transpose(img).convert("RGBA")
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageDecodeError(f"Could not decode uploaded image: {e}") from e

    pixels = np.array(rgba, dtype=np.uint8)
    logger.info(f"Decoded upload: {pixels.shape[1]}x{pixels.shape[0]}")
    return BackgroundImage(pixels)


def path_to_events(path):
    """
    Convert a freehand path from the drawing widget into pointer events.

    Handles 'M', 'L' and 'Q' commands; a quadratic segment contributes its
    end point. The sequence always starts with DOWN and ends with UP.

    Args:
        path: List of commands, e.g. [["M", 10, 10], ["Q", 10, 10, 30, 30], ["L", 50, 50]]

    Returns:
        list[PointerEvent]
    """
    events = []
    for cmd in path or []:
        if not cmd:
            continue
        c_type = cmd[0]
        if c_type == 'M':
            x, y = float(cmd[1]), float(cmd[2])
            if events:
                events.append(PointerEvent(PointerEventType.UP, x, y))
            events.append(PointerEvent(PointerEventType.DOWN, x, y))
        elif c_type == 'L':
            events.append(PointerEvent(PointerEventType.MOVE, float(cmd[1]), float(cmd[2])))
        elif c_type == 'Q':
            events.append(PointerEvent(PointerEventType.MOVE, float(cmd[3]), float(cmd[4])))
        else:
            logger.debug(f"Skipping unsupported path command: {c_type}")

    if events:
        last = events[-1]
        events.append(PointerEvent(PointerEventType.UP, last.client_x, last.client_y))
    return events
