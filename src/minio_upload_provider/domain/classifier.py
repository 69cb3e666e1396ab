"""Decides whether a file is an image."""

import logging
import mimetypes
from collections.abc import Callable

from .models import FileDescriptor

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

mimetypes.add_type("image/webp", ".webp")
mimetypes.add_type("image/avif", ".avif")

DimensionSniffer = Callable[[bytes], tuple[int, int]]


def lookup_mime_type(ext: str | None) -> str | None:
    """Returns the MIME type for an extension such as ``.png`` or ``png``."""
    if not ext:
        return None
    mime_type, _ = mimetypes.guess_type(f"file.{ext.lstrip('.')}")
    return mime_type


def content_type_for(ext: str | None) -> str:
    return lookup_mime_type(ext) or DEFAULT_CONTENT_TYPE


def is_image(descriptor: FileDescriptor, sniff_dimensions: DimensionSniffer) -> bool:
    """
    Best-effort check for image content.

    The extension wins when it maps to a known MIME type. Otherwise the
    buffer's header is parsed with ``sniff_dimensions``; a parse failure
    means "not an image" and is never raised.
    """
    if not descriptor.buffer and not descriptor.ext:
        return False

    mime_type = lookup_mime_type(descriptor.ext)
    if mime_type:
        return mime_type.startswith("image/")
    if not descriptor.buffer:
        return False

    try:
        sniff_dimensions(descriptor.buffer)
    except Exception:
        logger.warning(
            "Image dimension check failed",
            exc_info=True,
            extra={"hash": descriptor.hash, "ext": descriptor.ext},
        )
        return False
    return True
