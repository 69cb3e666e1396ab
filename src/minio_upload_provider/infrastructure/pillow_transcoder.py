"""Pillow implementation of the ImageTranscoder interface."""

import io
import logging

from PIL import Image

from minio_upload_provider.domain.models import ImageFormat

from .interfaces import ImageTranscoder

logger = logging.getLogger(__name__)

# Modes each target can encode directly; anything else is converted first.
_NATIVE_MODES = {
    ImageFormat.WEBP: {"RGB", "RGBA"},
    ImageFormat.JPEG: {"RGB", "L", "CMYK"},
    ImageFormat.PNG: {"RGB", "RGBA", "L", "LA", "P", "1"},
}


def _has_alpha(image: Image.Image) -> bool:
    return image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info


class PillowTranscoder(ImageTranscoder):
    """Decodes and re-encodes images using Pillow."""

    def can_decode(self, ext: str) -> bool:
        extension = f".{ext.lstrip('.').lower()}"
        format_name = Image.registered_extensions().get(extension)
        return format_name is not None and format_name in Image.OPEN

    def sniff_dimensions(self, buffer: bytes) -> tuple[int, int]:
        # Image.open only parses the header; pixel data is not decoded.
        with Image.open(io.BytesIO(buffer)) as image:
            return image.size

    def transcode(self, buffer: bytes, image_format: ImageFormat, quality: int) -> bytes:
        try:
            with Image.open(io.BytesIO(buffer)) as image:
                image = self._convert_mode(image, image_format)
                output = io.BytesIO()
                image.save(output, format=image_format.pillow_format, quality=quality)
        except Exception:
            logger.exception(
                "Image transcoding failed",
                extra={"target_format": image_format.value, "size": len(buffer)},
            )
            raise

        data = output.getvalue()
        logger.info(
            "Image transcoded",
            extra={
                "target_format": image_format.value,
                "source_size": len(buffer),
                "output_size": len(data),
            },
        )
        return data

    def _convert_mode(self, image: Image.Image, image_format: ImageFormat) -> Image.Image:
        if image.mode in _NATIVE_MODES[image_format]:
            return image
        if image_format is not ImageFormat.JPEG and _has_alpha(image):
            return image.convert("RGBA")
        return image.convert("RGB")
