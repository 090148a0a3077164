import logging

import streamlit as st

# 🎯 CRITICAL: Must be the VERY FIRST Streamlit command
st.set_page_config(
    page_title="Lil Fast",
    page_icon="🖌️",
    layout="centered",
)

from app_config.constants import BrushConfig, CanvasConfig, InferenceConfig
from sketch_utils.inference import GenerationClient
from sketch_utils.logger import setup_logging
from sketch_utils.security import validate_brush_width, validate_hex_color, validate_iterations
from sketch_utils.state_manager import (
    cb_clear_drawing,
    cb_clear_uploaded_image,
    cb_load_background,
    current_style,
    initialize_session_state,
    sync_canvas_objects,
)
from sketch_utils.submission import submit_drawing
from sketch_utils.ui import st_canvas

logger = setup_logging(level=logging.INFO)

# --- SESSION INITIALIZATION (VERY TOP)
initialize_session_state()


@st.cache_resource
def get_generation_client():
    """One HTTP session shared across reruns."""
    return GenerationClient()


def send_to_server(prompt, num_iterations):
    with st.spinner("Generating..."):
        result = submit_drawing(st.session_state["sketch"], get_generation_client(), prompt, num_iterations)

    if result.ok:
        st.session_state["generated_image"] = result.image
    else:
        st.error(result.notice)


def render_controls():
    uploader_key = f"uploader_{st.session_state['uploader_id']}"
    uploaded_file = st.file_uploader("Background image", type=["png", "jpg", "jpeg", "webp", "bmp", "gif"], key=uploader_key)
    if uploaded_file is not None:
        cb_load_background(uploaded_file)

    st.color_picker("Brush color", key="stroke_color")
    st.selectbox("Brush size", list(BrushConfig.SIZES.keys()), key="brush_label")
    st.text_input("Prompt", placeholder="Enter prompt", key="prompt")
    st.selectbox("Quality", list(InferenceConfig.ITERATION_PRESETS.keys()), key="iteration_label")


def main():
    st.markdown("<h1 style='text-align:center;'>Lil Fast</h1>", unsafe_allow_html=True)

    sketch = st.session_state["sketch"]

    # Controls first so the widget below sees the current style and backdrop
    render_controls()

    brush_width = BrushConfig.SIZES[st.session_state["brush_label"]]
    for valid, msg in (validate_hex_color(st.session_state["stroke_color"]), validate_brush_width(brush_width)):
        if not valid:
            st.error(msg)
            st.stop()
    style = current_style()

    canvas_result = st_canvas(
        sketch=sketch,
        stroke_width=style.brush_width,
        stroke_color=style.color,
        drawing_mode="freedraw",
        initial_drawing={"version": "4.4.0", "objects": st.session_state["canvas_objects"]},
        update_streamlit=True,
        display_toolbar=False,
        width=CanvasConfig.WIDTH,
        height=CanvasConfig.HEIGHT,
        key=f"sketch_canvas_{st.session_state['canvas_id']}",
    )
    sync_canvas_objects(canvas_result.json_data)

    c1, c2, c3 = st.columns(3)
    with c1:
        st.button("Clear Drawing", on_click=cb_clear_drawing, width="stretch")
    with c2:
        st.button("Clear Uploaded Image", on_click=cb_clear_uploaded_image, width="stretch")
    with c3:
        send = st.button("Send to Server", type="primary", width="stretch")

    if send:
        num_iterations = InferenceConfig.ITERATION_PRESETS[st.session_state["iteration_label"]]
        valid, msg = validate_iterations(num_iterations)
        if valid:
            send_to_server(st.session_state["prompt"], num_iterations)
        else:
            st.warning(msg)

    if st.session_state.get("generated_image"):
        st.subheader("Generated Image:")
        st.image(st.session_state["generated_image"], width="stretch")

    with st.expander("Submission preview"):
        st.image(sketch.visible.pixels, caption=f"{sketch.size[0]}x{sketch.size[1]} PNG", clamp=True)


if __name__ == "__main__":
    main()
