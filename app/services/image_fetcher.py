"""Download images by URL and encode them for inline comparison."""
import asyncio
import base64
from typing import Optional
from urllib.parse import unquote, urlparse

import requests

from app.core.config import settings
from app.core.exceptions import FetchError, InvalidImageReferenceError
from app.core.logging import get_logger
from app.domain.value_objects.recognition import EncodedImage

logger = get_logger(__name__)


def object_key_from_url(url: str) -> str:
    """Extract the S3 object key from a virtual-hosted style S3 URL.

    ``https://bucket.s3.amazonaws.com/people/a.jpg`` yields ``people/a.jpg``.

    Raises:
        InvalidImageReferenceError: If the URL has no object path
    """
    key = unquote(urlparse(url).path).lstrip("/")
    if not key:
        raise InvalidImageReferenceError(
            f"URL does not reference an object key: {url}", details={"url": url}
        )
    return key


class ImageFetcher:
    """Fetches images over HTTP.

    ``requests`` is blocking, so downloads run in a worker thread to keep the
    event loop free.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout or settings.IMAGE_FETCH_TIMEOUT

    def _download(self, url: str) -> bytes:
        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.content

    async def fetch(self, url: str) -> EncodedImage:
        """
        Download an image and return it as base64 text and decoded bytes.

        Args:
            url: Location of the image

        Returns:
            EncodedImage with the base64 string and the raw payload

        Raises:
            FetchError: If the download fails or returns an empty body
        """
        try:
            # Run the blocking download off the event loop
            content = await asyncio.to_thread(self._download, url)
        except requests.RequestException as e:
            logger.error("Failed to download image", url=url, error=str(e))
            raise FetchError(f"Failed to download image from {url}: {e}", details={"url": url}) from e

        if not content:
            logger.error("Downloaded image is empty", url=url)
            raise FetchError(f"Downloaded image from {url} is empty", details={"url": url})

        # Keep both forms: text for transport, bytes for inline comparison
        base64_string = base64.b64encode(content).decode("ascii")
        logger.debug("Downloaded image", url=url, size=len(content))
        return EncodedImage(base64_string=base64_string, data=base64.b64decode(base64_string))
