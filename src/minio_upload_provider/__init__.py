from minio_upload_provider.config import AppConfig, ProviderConfig, load_config
from minio_upload_provider.dependencies import init
from minio_upload_provider.domain import FileDescriptor, ImageFormat, SignedUrl
from minio_upload_provider.exceptions import InvalidFileError, StorageDeleteError
from minio_upload_provider.handlers import UploadProvider
from minio_upload_provider.logging import setup_logging

__all__ = [
    "init",
    "setup_logging",
    "load_config",
    "AppConfig",
    "ProviderConfig",
    "FileDescriptor",
    "ImageFormat",
    "SignedUrl",
    "UploadProvider",
    "InvalidFileError",
    "StorageDeleteError",
]
