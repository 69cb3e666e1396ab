"""Domain layer exports."""

from .classifier import content_type_for, is_image, lookup_mime_type
from .models import FileDescriptor, ImageFormat, SignedUrl
from .paths import (
    build_public_url,
    build_storage_key,
    extract_storage_key,
    is_provider_url,
)
from .streams import is_async_stream, materialize

__all__ = [
    "FileDescriptor",
    "ImageFormat",
    "SignedUrl",
    "build_public_url",
    "build_storage_key",
    "content_type_for",
    "extract_storage_key",
    "is_async_stream",
    "is_image",
    "is_provider_url",
    "lookup_mime_type",
    "materialize",
]
