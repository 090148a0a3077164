"""
Client for the remote image-generation service.

Sends the exported canvas PNG with the prompt and iteration count as a
multipart form and returns the generated image bytes. Failures are
reported as GenerationError and never touch drawing state.
"""

import logging

import requests

from app_config.constants import InferenceConfig
from sketch_utils.logger import log_exceptions

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Export or transmission to the generation service failed."""


class GenerationClient:
    def __init__(self, endpoint_url=None, timeout=None, session=None):
        self.endpoint_url = endpoint_url or InferenceConfig.ENDPOINT_URL
        self.timeout = timeout if timeout is not None else InferenceConfig.TIMEOUT_SECONDS
        self.session = session or requests.Session()

    @log_exceptions
    def generate(self, png_bytes, prompt, num_iterations):
        """
        Submit a drawing and return the generated image.

        Args:
            png_bytes: Encoded canvas (PNG)
            prompt: Text prompt, sent as-is (may be empty)
            num_iterations: Positive iteration count

        Returns:
            bytes: Raw body of the service response (an encoded image)

        Raises:
            GenerationError: On transport errors, non-2xx status or empty body
        """
        files = {
            InferenceConfig.IMAGE_FIELD: (InferenceConfig.IMAGE_FILENAME, png_bytes, "image/png"),
        }
        data = {
            InferenceConfig.PROMPT_FIELD: prompt,
            InferenceConfig.ITERATIONS_FIELD: str(num_iterations),
        }

        logger.info(f"Submitting drawing ({len(png_bytes)} bytes, {num_iterations} iteration(s))")
        try:
            response = self.session.post(self.endpoint_url, files=files, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            raise GenerationError(f"Request to generation service failed: {e}") from e

        if not response.ok:
            raise GenerationError(f"Server response was not ok (status {response.status_code})")

        if not response.content:
            raise GenerationError("Server returned an empty response")

        logger.info(f"Generated image received ({len(response.content)} bytes)")
        return response.content
