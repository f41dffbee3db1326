from unittest.mock import MagicMock

import pytest

from ainft.core.form_controller import FormController
from ainft.models.artifacts import GeneratedArtifact, HostedAsset

HOSTED_URL = "https://img.example/abc123"


@pytest.fixture
def generator():
    g = MagicMock()
    g.generate.return_value = GeneratedArtifact(image_bytes="QUJD", mime_type="image/jpeg")
    return g


@pytest.fixture
def uploader():
    u = MagicMock()
    u.upload.return_value = HostedAsset(url=HOSTED_URL)
    return u


@pytest.fixture
def minter():
    m = MagicMock()
    m.mint.return_value = {"status": 1, "blockNumber": 1}
    return m


@pytest.fixture
def controller(generator, uploader, minter):
    return FormController(generator, uploader, minter, background=False)
