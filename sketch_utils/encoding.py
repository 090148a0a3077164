import asyncio
import base64
from io import BytesIO

import numpy as np
import streamlit as st
from PIL import Image

from app_config.constants import PerformanceConfig


def _encode_png(pixels):
    # No ICC profile is attached, so receivers see the raw sRGB values
    buf = BytesIO()
    Image.fromarray(pixels).save(buf, format="PNG", compress_level=PerformanceConfig.PNG_COMPRESS_LEVEL)
    return buf.getvalue()


def surface_to_png(visible):
    """Encode the visible surface as PNG bytes at its native resolution."""
    return _encode_png(np.ascontiguousarray(visible.pixels))


async def export_png_async(visible):
    """
    Encode the visible surface off the event loop.

    The pixels are snapshotted before the first suspension point, so later
    input cannot leak into an export already in flight.
    """
    snapshot = visible.pixels.copy()
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _encode_png, snapshot)


@st.cache_data(show_spinner=False, max_entries=PerformanceConfig.IMAGE_ENCODING_CACHE_SIZE)
def _cached_image_to_url(_image, image_id):
    """Internal cached encoder that avoids hashing the heavy image data."""
    if isinstance(_image, np.ndarray):
        img = Image.fromarray(_image)
    else:
        img = _image

    if img.mode != "RGB":
        img = img.convert("RGB")

    buf = BytesIO()
    # PNG rather than JPEG: the backdrop must match the exported pixels exactly
    img.save(buf, format="PNG")
    return f"data:image/png;base64,{base64.b64encode(buf.getvalue()).decode()}"


def image_to_url_patch(image, image_id=""):
    """Data URL for a backdrop image, cached per image_id."""
    return _cached_image_to_url(image, image_id)
