import logging

import streamlit as st

from app_config.constants import BrushConfig, InferenceConfig
from sketch_core import PointerInputStateMachine, SketchCanvas, StrokeStyle
from sketch_utils.image_processing import ImageDecodeError, decode_upload, path_to_events

logger = logging.getLogger(__name__)


def initialize_session_state():
    """Initialize all session state variables."""
    defaults = {
        "stroke_color": BrushConfig.DEFAULT_COLOR,
        "brush_label": BrushConfig.DEFAULT_SIZE_LABEL,
        "prompt": "",
        "iteration_label": next(iter(InferenceConfig.ITERATION_PRESETS)),
        "replayed_paths": 0,    # freehand paths already fed to the stroke layer
        "canvas_id": 0,         # bump to reset the drawing widget
        "uploader_id": 0,       # bump to reset the file uploader
        "background_key": None,
        "generated_image": None,
        "canvas_objects": [],   # widget objects fed back as its initial drawing
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value

    # Created once per session; every later change goes through its methods
    if "sketch" not in st.session_state:
        st.session_state["sketch"] = SketchCanvas()


def current_style():
    return StrokeStyle(
        color=st.session_state["stroke_color"],
        brush_width=BrushConfig.SIZES[st.session_state["brush_label"]],
    )


def _path_style(obj):
    try:
        return StrokeStyle(color=obj.get("stroke"), brush_width=obj.get("strokeWidth"))
    except ValueError:
        # Widget objects without a usable style fall back to the form values
        return current_style()


def replay_paths(sketch, objects, start=0):
    """
    Feed freehand path objects from the drawing widget into the stroke layer.

    Returns:
        int: Number of segments drawn
    """
    segments = 0
    for obj in objects[start:]:
        style = _path_style(obj)
        machine = PointerInputStateMachine(sketch, lambda style=style: style)
        segments += machine.feed(path_to_events(obj.get("path")))
    return segments


def sync_canvas_objects(json_data):
    """Replay paths the widget reported since the last sync."""
    if not json_data:
        return 0

    sketch = st.session_state["sketch"]
    objects = [o for o in json_data.get("objects", []) if o.get("type") == "path"]
    done = st.session_state["replayed_paths"]

    if len(objects) < done:
        # Widget lost objects (it was remounted): rebuild from what it holds now
        sketch.clear_strokes()
        done = 0

    st.session_state["canvas_objects"] = json_data.get("objects", [])
    segments = replay_paths(sketch, objects, start=done)
    st.session_state["replayed_paths"] = len(objects)
    if segments:
        logger.debug(f"Replayed {len(objects) - done} path(s), {segments} segment(s)")
    return segments


def cb_load_background(uploaded_file):
    """
    Decode an upload into the background layer.

    On decode failure the current background is left untouched and nothing
    is recomposited.

    Returns:
        bool: True if the background changed
    """
    file_key = getattr(uploaded_file, "file_id", None) or f"{uploaded_file.name}_{uploaded_file.size}"
    if st.session_state.get("background_key") == file_key:
        return False

    uploaded_file.seek(0)
    try:
        image = decode_upload(uploaded_file.read())
    except ImageDecodeError as e:
        logger.warning(f"Upload rejected ({uploaded_file.name}): {e}")
        st.toast(f"Could not read {uploaded_file.name} as an image.", icon="⚠️")
        # Remember the key so the same bad file is not retried every rerun
        st.session_state["background_key"] = file_key
        return False

    st.session_state["sketch"].set_background(image)
    st.session_state["background_key"] = file_key
    return True


def cb_clear_drawing():
    st.session_state["sketch"].clear_strokes()
    st.session_state["replayed_paths"] = 0
    st.session_state["canvas_objects"] = []
    st.session_state["canvas_id"] += 1


def cb_clear_uploaded_image():
    st.session_state["sketch"].clear_background()
    st.session_state["background_key"] = None
    st.session_state["uploader_id"] += 1
