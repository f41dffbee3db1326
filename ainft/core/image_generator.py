"""Text-to-image via the hosted inference API."""
import base64
import logging
from typing import Optional

import httpx

from ainft.config import HTTP_TIMEOUT_SEC, HUGGING_FACE_API_KEY, INFERENCE_URL
from ainft.models.artifacts import GeneratedArtifact

logger = logging.getLogger(__name__)


class ImageGenerator:
    """One POST per description; the response body is the raw image."""

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        url: str = INFERENCE_URL,
        api_key: str = HUGGING_FACE_API_KEY,
    ) -> None:
        self._client = client or httpx.Client(timeout=HTTP_TIMEOUT_SEC)
        self._url = url
        self._api_key = api_key

    def generate(self, description: str) -> GeneratedArtifact:
        """Return the image as base64 plus its content type. Raises httpx errors."""
        response = self._client.post(
            self._url,
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Accept": "application/json",
            },
            json={"inputs": description, "options": {"wait_for_model": True}},
        )
        response.raise_for_status()
        mime_type = response.headers.get("content-type", "")
        logger.info("Generated image (%s, %d bytes)", mime_type, len(response.content))
        return GeneratedArtifact(
            image_bytes=base64.b64encode(response.content).decode("ascii"),
            mime_type=mime_type,
        )
