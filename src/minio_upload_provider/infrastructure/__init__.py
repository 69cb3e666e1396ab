"""Infrastructure layer exports."""

from .minio_store import MinioObjectStore
from .pillow_transcoder import PillowTranscoder

__all__ = ["MinioObjectStore", "PillowTranscoder"]
