import io
from unittest.mock import MagicMock

import pytest
from PIL import Image

from minio_upload_provider.config import ProviderConfig
from minio_upload_provider.handlers import UploadProvider
from minio_upload_provider.infrastructure import PillowTranscoder
from minio_upload_provider.infrastructure.interfaces import ObjectStore

_COLORS = {"RGBA": (10, 200, 30, 128), "RGB": (10, 200, 30)}


def make_image_bytes(fmt: str = "PNG", mode: str = "RGB", size=(8, 6)) -> bytes:
    image = Image.new(mode, size, color=_COLORS.get(mode, 0))
    output = io.BytesIO()
    image.save(output, format=fmt)
    return output.getvalue()


@pytest.fixture
def image_bytes():
    return make_image_bytes


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG")


@pytest.fixture
def config() -> ProviderConfig:
    return ProviderConfig(
        end_point="files.example.com",
        port=9000,
        use_ssl=False,
        access_key="access",
        secret_key="secret",
        bucket="media",
        folder="uploads",
    )


@pytest.fixture
def store() -> MagicMock:
    return MagicMock(spec=ObjectStore)


@pytest.fixture
def provider(config, store) -> UploadProvider:
    return UploadProvider(config, store, PillowTranscoder())
