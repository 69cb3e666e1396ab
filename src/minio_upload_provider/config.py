"""Provider configuration loaded from host options or environment variables."""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from minio_upload_provider.domain.models import ImageFormat

DEFAULT_PORT = 9000
MAX_SIGNED_URL_EXPIRY = 7 * 24 * 60 * 60


class ProviderConfig(BaseModel, frozen=True, populate_by_name=True):
    """MinIO connection and upload behaviour for a single provider instance."""

    end_point: str = Field(alias="endPoint")
    port: int = DEFAULT_PORT
    use_ssl: bool = Field(default=False, alias="useSSL")
    access_key: str = Field(default="", alias="accessKey")
    secret_key: str = Field(default="", alias="secretKey")
    bucket: str
    folder: str | None = None
    image_format: ImageFormat = ImageFormat.WEBP
    image_quality: int = Field(default=90, ge=1, le=100)
    signed_url_expiry: int = Field(default=0, ge=0, le=MAX_SIGNED_URL_EXPIRY)
    create_bucket: bool = Field(default=False, alias="createBucket")

    @field_validator("port", mode="before")
    @classmethod
    def _default_port(cls, value: Any) -> int:
        try:
            port = int(value)
        except (TypeError, ValueError):
            return DEFAULT_PORT
        return port or DEFAULT_PORT

    @field_validator("use_ssl", mode="before")
    @classmethod
    def _parse_use_ssl(cls, value: Any) -> bool:
        # Host options arrive as strings; only an explicit "true" enables TLS.
        return value is True or value == "true"

    @field_validator("folder", mode="before")
    @classmethod
    def _empty_folder_is_none(cls, value: Any) -> str | None:
        return value or None

    @property
    def scheme(self) -> str:
        return "https" if self.use_ssl else "http"

    @property
    def endpoint_with_port(self) -> str:
        """Endpoint in the ``host:port`` form expected by the MinIO client."""
        return f"{self.end_point}:{self.port}"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    provider: ProviderConfig
    log_level: str = "INFO"


def from_provider_options(options: Mapping[str, Any]) -> ProviderConfig:
    """
    Builds a provider configuration from the host's option mapping.

    Accepts both the host's camelCase keys (``endPoint``, ``useSSL``,
    ``accessKey``, ``secretKey``) and the snake_case field names.
    """
    return ProviderConfig.model_validate(dict(options))


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        provider=ProviderConfig(
            end_point=os.getenv("MINIO_ENDPOINT", "minio"),
            port=os.getenv("MINIO_PORT", str(DEFAULT_PORT)),
            use_ssl=os.getenv("MINIO_USE_SSL", "false").lower(),
            access_key=os.getenv("MINIO_USER", ""),
            secret_key=os.getenv("MINIO_PASSWORD", ""),
            bucket=os.getenv("MINIO_BUCKET", "uploads"),
            folder=os.getenv("MINIO_FOLDER"),
            image_format=os.getenv("UPLOAD_IMAGE_FORMAT", ImageFormat.WEBP.value),
            signed_url_expiry=int(os.getenv("SIGNED_URL_EXPIRY", "0")),
            create_bucket=os.getenv("MINIO_CREATE_BUCKET", "false").lower() == "true",
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
