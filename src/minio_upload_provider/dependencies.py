"""Composition root wiring the upload provider to MinIO and Pillow."""

import logging
from collections.abc import Mapping
from typing import Any

from minio import Minio

from minio_upload_provider.config import ProviderConfig, from_provider_options, load_config
from minio_upload_provider.handlers import UploadProvider
from minio_upload_provider.infrastructure import MinioObjectStore, PillowTranscoder
from minio_upload_provider.logging import setup_logging

logger = logging.getLogger(__name__)


def build_minio_client(config: ProviderConfig) -> Minio:
    """Creates a MinIO client for the configured endpoint."""
    try:
        return Minio(
            endpoint=config.endpoint_with_port,
            access_key=config.access_key,
            secret_key=config.secret_key,
            secure=config.use_ssl,
        )
    except Exception:
        logger.exception(
            "MinIO Client Initialization Failed",
            extra={"endpoint": config.endpoint_with_port, "user": config.access_key},
        )
        raise


def init(provider_options: Mapping[str, Any] | None = None) -> UploadProvider:
    """
    Builds an upload provider.

    Args:
        provider_options: Host options (``endPoint``, ``port``, ``useSSL``,
            ``accessKey``, ``secretKey``, ``bucket``, ``folder``). When omitted,
            configuration is read from environment variables and
            JSON logging is set up for a standalone process.

    Returns:
        A ready-to-use UploadProvider.
    """
    if provider_options is None:
        app_config = load_config()
        setup_logging(app_config.log_level)
        config = app_config.provider
    else:
        # The host owns logging when it passes options.
        config = from_provider_options(provider_options)

    store = MinioObjectStore(build_minio_client(config), config.bucket)
    if config.create_bucket:
        store.ensure_bucket_exists()

    logger.info(
        "Upload provider initialized",
        extra={
            "endpoint": config.endpoint_with_port,
            "bucket_name": config.bucket,
            "folder": config.folder,
            "image_format": config.image_format.value,
        },
    )
    return UploadProvider(config, store, PillowTranscoder())
