"""Tests for URL image download and key extraction."""
import base64
from unittest.mock import MagicMock, patch

import pytest
import requests

from app.core.exceptions import FetchError, InvalidImageReferenceError
from app.services.image_fetcher import ImageFetcher, object_key_from_url

IMAGE_BYTES = bytes([1, 2, 3, 4])


def fake_response(content: bytes = IMAGE_BYTES, status_error: Exception = None) -> MagicMock:
    response = MagicMock()
    response.content = content
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


class TestImageFetcher:

    async def test_fetch_returns_base64_and_bytes(self):
        with patch("app.services.image_fetcher.requests.get", return_value=fake_response()) as get:
            image = await ImageFetcher(timeout=3).fetch("http://example.com/image.jpg")

        get.assert_called_once_with("http://example.com/image.jpg", timeout=3)
        assert image.base64_string == base64.b64encode(IMAGE_BYTES).decode("ascii")
        assert image.data == IMAGE_BYTES

    async def test_http_error_raises_fetch_error(self):
        error = requests.HTTPError("403 Client Error: Forbidden")
        with patch("app.services.image_fetcher.requests.get", return_value=fake_response(status_error=error)):
            with pytest.raises(FetchError) as exc_info:
                await ImageFetcher().fetch("http://example.com/private.jpg")

        assert "403 Client Error" in str(exc_info.value)
        assert exc_info.value.details == {"url": "http://example.com/private.jpg"}

    async def test_connection_error_raises_fetch_error(self):
        with patch(
            "app.services.image_fetcher.requests.get",
            side_effect=requests.ConnectionError("Name or service not known"),
        ):
            with pytest.raises(FetchError):
                await ImageFetcher().fetch("http://unreachable.invalid/a.jpg")

    async def test_empty_body_raises_fetch_error(self):
        with patch("app.services.image_fetcher.requests.get", return_value=fake_response(b"")):
            with pytest.raises(FetchError, match="empty"):
                await ImageFetcher().fetch("http://example.com/empty.jpg")


class TestObjectKeyFromUrl:

    @pytest.mark.parametrize(
        "url,key",
        [
            ("https://faces-bucket.s3.amazonaws.com/people/a.jpg", "people/a.jpg"),
            ("https://faces-bucket.s3.us-east-1.amazonaws.com/a.jpg", "a.jpg"),
            ("https://faces-bucket.s3.amazonaws.com/people/john%20doe.jpg", "people/john doe.jpg"),
            ("https://faces-bucket.s3.amazonaws.com/a.jpg?versionId=3", "a.jpg"),
        ],
    )
    def test_extracts_object_key(self, url, key):
        assert object_key_from_url(url) == key

    @pytest.mark.parametrize("url", ["https://faces-bucket.s3.amazonaws.com/", "https://faces-bucket.s3.amazonaws.com"])
    def test_url_without_key_is_rejected(self, url):
        with pytest.raises(InvalidImageReferenceError):
            object_key_from_url(url)
