"""
Configuration constants for Lil Fast.
All tunable parameters and magic numbers are defined here with explanations.
"""

import os


class CanvasConfig:
    """Configuration for the drawing canvas and compositor."""

    # --- Dimensions ---
    # Fixed logical size of the visible surface (pixels)
    # Both the stroke layer and the background placement size against this
    WIDTH = 512
    HEIGHT = 512

    # --- Backdrop ---
    # Fill colour painted before any layer (RGB)
    BACKDROP_COLOR = (255, 255, 255)


class BrushConfig:
    """Configuration for pen strokes."""

    # Default stroke colour (hex)
    DEFAULT_COLOR = "#000000"

    # Labelled brush widths offered in the UI (pixels)
    SIZES = {
        "Small": 2,
        "Medium": 5,
        "Large": 10,
    }

    DEFAULT_SIZE_LABEL = "Medium"

    # Upper bound accepted by the style validator
    MAX_WIDTH = 100


class InferenceConfig:
    """Configuration for the remote image-generation service."""

    # Endpoint receiving the multipart form (overridable for staging)
    ENDPOINT_URL = os.environ.get(
        "LIL_FAST_INFERENCE_URL",
        "https://lightnote-ai--img-model-inference.modal.run",
    )

    # Request timeout in seconds; generation can take a while on cold starts
    TIMEOUT_SECONDS = float(os.environ.get("LIL_FAST_INFERENCE_TIMEOUT", "120"))

    # Iteration presets offered in the UI
    ITERATION_PRESETS = {
        "Rapid": 1,
        "Enhanced": 10,
    }

    # Multipart field names expected by the service
    IMAGE_FIELD = "image"
    IMAGE_FILENAME = "drawing.png"
    PROMPT_FIELD = "prompt"
    ITERATIONS_FIELD = "num_iterations"

    # Shown once when export or transmission fails
    FAILURE_NOTICE = "Failed to generate image. Please try again."


class PerformanceConfig:
    """Configuration for encoding and caching."""

    # PNG compression level (0-9); 6 is the Pillow default
    PNG_COMPRESS_LEVEL = 6

    # Maximum cache entries for backdrop data URLs
    IMAGE_ENCODING_CACHE_SIZE = 10

