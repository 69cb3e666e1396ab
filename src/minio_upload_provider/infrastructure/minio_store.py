"""MinIO implementation of the ObjectStore interface."""

import io
import logging
from datetime import timedelta
from typing import BinaryIO

from minio import Minio
from minio.deleteobjects import DeleteObject

from minio_upload_provider.exceptions import StorageDeleteError

from .interfaces import ObjectStore

logger = logging.getLogger(__name__)

STREAM_PART_SIZE = 10 * 1024 * 1024


class MinioObjectStore(ObjectStore):
    """Handles object operations against a single MinIO bucket."""

    def __init__(self, client: Minio, bucket_name: str):
        self._client = client
        self._bucket_name = bucket_name

    def put_object(
        self,
        object_name: str,
        data: bytes | BinaryIO,
        content_type: str,
    ) -> None:
        if isinstance(data, (bytes, bytearray)):
            length, part_size = len(data), 0
            data = io.BytesIO(data)
        else:
            # Unknown length: let the client switch to multipart upload.
            length, part_size = -1, STREAM_PART_SIZE
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=data,
                length=length,
                content_type=content_type,
                part_size=part_size,
            )
            logger.info(
                "File uploaded to MinIO",
                extra={
                    "bucket_name": self._bucket_name,
                    "object_name": object_name,
                    "content_type": content_type,
                },
            )
        except Exception:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise

    def remove_objects(self, object_names: list[str]) -> None:
        try:
            errors = self._client.remove_objects(
                bucket_name=self._bucket_name,
                delete_object_list=[DeleteObject(name) for name in object_names],
            )
            # remove_objects is lazy; the request is sent while iterating.
            for error in errors:
                raise StorageDeleteError(error.name, error.message)
            logger.info(
                "Files removed from MinIO",
                extra={"bucket_name": self._bucket_name, "object_names": object_names},
            )
        except Exception:
            logger.exception(
                "MinIO removal failed",
                extra={"bucket_name": self._bucket_name, "object_names": object_names},
            )
            raise

    def presigned_get_object(self, object_name: str, expiry_seconds: int) -> str:
        kwargs = {}
        if expiry_seconds:
            kwargs["expires"] = timedelta(seconds=expiry_seconds)
        try:
            url = self._client.presigned_get_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                **kwargs,
            )
        except Exception:
            logger.exception(
                "MinIO presign failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise
        logger.info(
            "Presigned URL generated",
            extra={"bucket_name": self._bucket_name, "object_name": object_name},
        )
        return url

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(self._bucket_name):
            self._client.make_bucket(self._bucket_name)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info("Bucket already exists", extra={"bucket_name": self._bucket_name})
