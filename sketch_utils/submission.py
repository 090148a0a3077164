"""
Export-and-submit flow behind the "Send to Server" button.

Export and transmission failures are caught here and reported as a single
failed SubmissionResult. Drawing state is only read, so the user can
retry without redrawing.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from app_config.constants import InferenceConfig
from sketch_utils.encoding import export_png_async
from sketch_utils.inference import GenerationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    ok: bool
    image: Optional[bytes] = None
    notice: Optional[str] = None


def submit_drawing(sketch, client, prompt, num_iterations) -> SubmissionResult:
    """
    Encode the visible surface and send it to the generation service.

    Args:
        sketch: SketchCanvas whose visible surface is exported
        client: GenerationClient (or anything with the same generate())
        prompt: Text prompt
        num_iterations: Positive iteration count

    Returns:
        SubmissionResult: image bytes on success, otherwise the one
        user-facing failure notice
    """
    try:
        png_bytes = asyncio.run(export_png_async(sketch.visible))
    except (OSError, ValueError) as e:
        # Pillow reports encoder problems as OSError or ValueError
        logger.error(f"Export failed: {e}", exc_info=True)
        return SubmissionResult(ok=False, notice=InferenceConfig.FAILURE_NOTICE)

    try:
        image = client.generate(png_bytes, prompt, num_iterations)
    except GenerationError as e:
        logger.error(f"Submission failed: {e}")
        return SubmissionResult(ok=False, notice=InferenceConfig.FAILURE_NOTICE)

    return SubmissionResult(ok=True, image=image)
