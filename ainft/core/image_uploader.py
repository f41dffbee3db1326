"""Upload a generated image to the public image host."""
import logging
from typing import Optional

import httpx

from ainft.config import HTTP_TIMEOUT_SEC, IMGBB_API_KEY, UPLOAD_URL
from ainft.models.artifacts import HostedAsset

logger = logging.getLogger(__name__)


class UploadResponseError(Exception):
    """Image host answered 2xx but without data.url."""


class ImageUploader:
    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        url: str = UPLOAD_URL,
        api_key: str = IMGBB_API_KEY,
    ) -> None:
        self._client = client or httpx.Client(timeout=HTTP_TIMEOUT_SEC)
        self._url = url
        self._api_key = api_key

    def upload(self, image_bytes: str, name: str) -> HostedAsset:
        """Send base64 image as multipart field 'image'; return the hosted URL."""
        response = self._client.post(
            self._url,
            params={"name": name, "key": self._api_key},
            headers={"Accept": "application/json"},
            # (None, value) makes a plain multipart form field, no filename
            files={"image": (None, image_bytes)},
        )
        response.raise_for_status()
        try:
            url = response.json()["data"]["url"]
        except (ValueError, KeyError, TypeError) as e:
            raise UploadResponseError(f"Unexpected upload response: {response.text[:200]}") from e
        logger.info("Uploaded image: %s", url)
        return HostedAsset(url=url)
