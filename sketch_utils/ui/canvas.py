"""
Canvas wrapper module - Handles the backdrop for streamlit-drawable-canvas.

The widget paints live strokes in the browser; underneath it shows the
compositor's backdrop (white fill plus the fitted background image) as a
data URL, so what the user sees lines up with the exported surface.
"""

import streamlit as st
from streamlit_drawable_canvas import st_canvas as raw_st_canvas

from sketch_core import composite
from ..encoding import image_to_url_patch


def backdrop_image(sketch):
    """Backdrop and background only; strokes are left to the widget."""
    return composite(sketch.background.get(), None, sketch.size).pixels


def st_canvas(*args, sketch=None, **kwargs):
    """
    Wrapper for streamlit_drawable_canvas with cached backdrop handling.

    Args:
        *args: Positional arguments passed to st_canvas
        sketch: SketchCanvas whose backdrop is shown under the strokes
        **kwargs: Keyword arguments passed to st_canvas, including:
            - width / height: Canvas size in pixels
            - stroke_width / stroke_color: Current pen style
            - initial_drawing: Optional fabric.js state to restore

    Returns:
        Canvas result object with json_data and image_data

    Note:
        - The backdrop URL is cached per background key, so drawing does
          not re-encode it on every rerun
        - Existing objects are fed back through initial_drawing; the widget
          reloads its state when initial_drawing changes, and a fresh
          backdrop would otherwise wipe strokes drawn so far
    """
    kwargs["background_color"] = "rgba(0,0,0,0)"

    if sketch is not None:
        width, height = sketch.size
        kwargs.setdefault("width", width)
        kwargs.setdefault("height", height)

        bg_key = str(st.session_state.get("background_key"))
        cache_key = f"bg_url_cache_{bg_key}"
        if cache_key in st.session_state:
            url = st.session_state[cache_key]
        else:
            for k in [k for k in st.session_state.keys() if str(k).startswith("bg_url_cache_")]:
                del st.session_state[k]
            url = image_to_url_patch(backdrop_image(sketch), bg_key)
            st.session_state[cache_key] = url

        drawing = dict(kwargs.get("initial_drawing") or {"version": "4.4.0", "objects": []})
        drawing["background"] = "rgba(0,0,0,0)"
        drawing["backgroundImage"] = {
            "type": "image",
            "version": "4.4.0",
            "originX": "left",
            "originY": "top",
            "left": 0,
            "top": 0,
            "width": width,
            "height": height,
            "scaleX": 1,
            "scaleY": 1,
            "visible": True,
            "src": url
        }
        kwargs["initial_drawing"] = drawing

    return raw_st_canvas(*args, **kwargs)
