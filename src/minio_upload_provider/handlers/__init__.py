"""Handler layer exports."""

from .upload_provider import UploadProvider

__all__ = ["UploadProvider"]
