"""Inference and image-host requests against a mock transport."""
import base64
import json

import httpx
import pytest

from ainft.core.image_generator import ImageGenerator
from ainft.core.image_uploader import ImageUploader, UploadResponseError

PNG = b"\x89PNG\r\n\x1a\n fake image"


def _client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_generate_posts_description_and_encodes_body():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, content=PNG, headers={"content-type": "image/png"})

    gen = ImageGenerator(client=_client(handler), url="https://inference.example/models/sd", api_key="hf_test")
    artifact = gen.generate("a red fox in the snow")

    request = seen["request"]
    assert request.method == "POST"
    assert str(request.url) == "https://inference.example/models/sd"
    assert request.headers["Authorization"] == "Bearer hf_test"
    assert json.loads(request.content) == {
        "inputs": "a red fox in the snow",
        "options": {"wait_for_model": True},
    }
    assert artifact.mime_type == "image/png"
    assert artifact.image_bytes == base64.b64encode(PNG).decode("ascii")
    assert artifact.preview_data_uri.startswith("data:image/png;base64,iVBORw0KGgo")


def test_generate_raises_on_error_status():
    gen = ImageGenerator(client=_client(lambda r: httpx.Response(401, json={"error": "Invalid token"})))

    with pytest.raises(httpx.HTTPStatusError):
        gen.generate("a red fox")


def test_upload_sends_multipart_image_and_returns_url():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"data": {"url": "https://i.ibb.co/Xyz/My-Fox.png"}, "success": True})

    up = ImageUploader(client=_client(handler), url="https://host.example/1/upload", api_key="bb_test")
    asset = up.upload("QUJDRA==", "My Fox")

    request = seen["request"]
    assert request.url.params["name"] == "My Fox"
    assert request.url.params["key"] == "bb_test"
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'name="image"' in request.content
    assert b"QUJDRA==" in request.content
    assert asset.url == "https://i.ibb.co/Xyz/My-Fox.png"
    assert asset.link_label == "My-Fox.png"


def test_upload_without_url_in_response():
    up = ImageUploader(client=_client(lambda r: httpx.Response(200, json={"status": 200})))

    with pytest.raises(UploadResponseError):
        up.upload("QUJD", "Fox")


def test_upload_raises_on_error_status():
    up = ImageUploader(client=_client(lambda r: httpx.Response(400, json={"error": {"message": "Invalid API v1 key."}})))

    with pytest.raises(httpx.HTTPStatusError):
        up.upload("QUJD", "Fox")
