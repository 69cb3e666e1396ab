"""Domain models for the upload provider."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ImageFormat(str, Enum):
    """Target formats images are transcoded to before upload."""

    WEBP = "webp"
    JPEG = "jpeg"
    PNG = "png"

    @property
    def extension(self) -> str:
        return ".jpg" if self is ImageFormat.JPEG else f".{self.value}"

    @property
    def mime_type(self) -> str:
        return f"image/{self.value}"

    @property
    def pillow_format(self) -> str:
        return self.value.upper()


class FileDescriptor(BaseModel):
    """
    A file handed over by the host application.

    Either ``buffer`` or ``stream`` carries the content. ``stream`` may be a
    binary file-like object or an async iterable of byte chunks. Upload
    operations set ``url`` and, for transcoded images, rewrite ``name``,
    ``ext`` and ``mime`` to describe the stored object.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = ""
    hash: str
    ext: str | None = None
    mime: str | None = None
    buffer: bytes | None = None
    stream: Any = None
    path: str | None = None
    url: str | None = None


class SignedUrl(BaseModel, frozen=True):
    """Result of a signed URL request."""

    url: str
