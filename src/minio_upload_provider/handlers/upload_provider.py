"""Upload provider exposing the host's upload, delete and signing operations."""

import asyncio
import logging

from minio_upload_provider.config import ProviderConfig
from minio_upload_provider.domain import (
    FileDescriptor,
    SignedUrl,
    build_public_url,
    build_storage_key,
    content_type_for,
    extract_storage_key,
    is_async_stream,
    is_image,
    is_provider_url,
    lookup_mime_type,
    materialize,
)
from minio_upload_provider.exceptions import InvalidFileError
from minio_upload_provider.infrastructure.interfaces import ImageTranscoder, ObjectStore

logger = logging.getLogger(__name__)


class UploadProvider:
    """
    Orchestrates uploads to the object store.

    Every call is independent: the only state shared between calls is the
    immutable configuration and the store client.
    """

    def __init__(
        self,
        config: ProviderConfig,
        store: ObjectStore,
        transcoder: ImageTranscoder,
    ):
        self._config = config
        self._store = store
        self._transcoder = transcoder

    async def upload_stream(self, file: FileDescriptor) -> None:
        """Streams are handled by :meth:`upload`."""
        await self.upload(file)

    async def upload(self, file: FileDescriptor) -> None:
        """
        Stores a file and records its public URL on the descriptor.

        Images are transcoded to the configured format first; in that case
        ``ext``, ``mime`` and ``name`` are rewritten to describe the stored
        object. Other files, and images the codec cannot read, are stored
        as-is.

        Raises:
            InvalidFileError: If the file has no content to store.
            Exception: Codec and object store errors propagate unchanged.
        """
        has_only_stream = file.buffer is None and file.stream is not None
        if has_only_stream and not lookup_mime_type(file.ext):
            # Without a known extension the bytes are needed to classify the file.
            file.buffer = await materialize(file.stream)

        if self._should_transcode(file):
            await self._upload_image(file)
        else:
            await self._upload_as_is(file)

    def _should_transcode(self, file: FileDescriptor) -> bool:
        if not is_image(file, self._transcoder.sniff_dimensions):
            return False
        if not lookup_mime_type(file.ext):
            # Detected by sniffing the bytes, so the codec can read them.
            return True
        # Images the codec cannot read (SVG, for one) are stored untouched.
        return self._transcoder.can_decode(file.ext)

    async def _upload_as_is(self, file: FileDescriptor) -> None:
        key = build_storage_key(file, self._config)
        # The buffer wins: one read during classification has consumed the stream.
        if file.buffer is not None:
            data = file.buffer
        elif is_async_stream(file.stream):
            data = await materialize(file.stream)
        elif file.stream is not None:
            data = file.stream
        else:
            raise InvalidFileError(file.name or file.hash)

        await asyncio.to_thread(
            self._store.put_object, key, data, content_type_for(file.ext)
        )
        file.url = build_public_url(key, self._config)

    async def _upload_image(self, file: FileDescriptor) -> None:
        if file.buffer is None and file.stream is not None:
            logger.info("Converting stream to buffer", extra={"hash": file.hash})
            file.buffer = await materialize(file.stream)

        if not file.buffer:
            logger.error(
                "Invalid file buffer",
                extra={"hash": file.hash, "file_name": file.name},
            )
            raise InvalidFileError(file.name or file.hash)

        image_format = self._config.image_format
        transcoded = await asyncio.to_thread(
            self._transcoder.transcode,
            file.buffer,
            image_format,
            self._config.image_quality,
        )

        key = build_storage_key(file, self._config, ext=image_format.extension)
        await asyncio.to_thread(
            self._store.put_object, key, transcoded, image_format.mime_type
        )

        file.buffer = transcoded
        file.ext = image_format.extension
        file.mime = image_format.mime_type
        file.name = f"{file.hash}{image_format.extension}"
        file.url = build_public_url(key, self._config)

    async def delete(self, file: FileDescriptor) -> None:
        """
        Removes the object behind ``file.url``.

        Descriptors without a URL, or whose URL is not served from this
        provider's host and bucket, are skipped.
        """
        if not file.url or not is_provider_url(file.url, self._config):
            logger.warning(
                "Skipping delete of file not stored by this provider",
                extra={"url": file.url, "bucket_name": self._config.bucket},
            )
            return

        key = extract_storage_key(file.url, self._config)
        await asyncio.to_thread(self._store.remove_objects, [key])

    async def get_signed_url(self, file: FileDescriptor) -> SignedUrl:
        """
        Returns a time-limited read URL for the file.

        URLs pointing outside this provider's host and bucket are returned
        unchanged.

        Raises:
            ValueError: If the descriptor has no URL.
        """
        if not file.url:
            raise ValueError(f"File '{file.name or file.hash}' has no URL to sign")
        if not is_provider_url(file.url, self._config):
            return SignedUrl(url=file.url)

        key = extract_storage_key(file.url, self._config)
        url = await asyncio.to_thread(
            self._store.presigned_get_object, key, self._config.signed_url_expiry
        )
        return SignedUrl(url=url)
