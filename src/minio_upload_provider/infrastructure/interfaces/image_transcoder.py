"""Abstract interface for image transcoding."""

from abc import ABC, abstractmethod

from minio_upload_provider.domain.models import ImageFormat


class ImageTranscoder(ABC):
    """Abstract base class for image codec backends."""

    @abstractmethod
    def can_decode(self, ext: str) -> bool:
        """Returns whether files with extension ``ext`` can be decoded."""

    @abstractmethod
    def sniff_dimensions(self, buffer: bytes) -> tuple[int, int]:
        """
        Reads image dimensions from the header bytes.

        Returns:
            Tuple of (width, height).

        Raises:
            Exception: If the bytes are not a recognisable image.
        """

    @abstractmethod
    def transcode(self, buffer: bytes, image_format: ImageFormat, quality: int) -> bytes:
        """
        Decodes an image and re-encodes it in ``image_format``.

        Args:
            buffer: Source image bytes in any supported format.
            image_format: Target format.
            quality: Encoder quality from 1 to 100.

        Returns:
            The encoded image bytes.
        """
