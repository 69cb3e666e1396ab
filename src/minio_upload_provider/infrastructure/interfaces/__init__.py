"""Infrastructure interface exports."""

from .image_transcoder import ImageTranscoder
from .object_store import ObjectStore

__all__ = ["ImageTranscoder", "ObjectStore"]
