import pytest
from pydantic import ValidationError

from minio_upload_provider.config import ProviderConfig, from_provider_options, load_config
from minio_upload_provider.domain import ImageFormat

HOST_OPTIONS = {
    "port": "9443",
    "useSSL": "true",
    "endPoint": "minio.internal",
    "accessKey": "key",
    "secretKey": "secret",
    "bucket": "assets",
    "folder": "cms",
}


def test_host_options_are_accepted():
    config = from_provider_options(HOST_OPTIONS)

    assert config.end_point == "minio.internal"
    assert config.port == 9443
    assert config.use_ssl is True
    assert config.access_key == "key"
    assert config.secret_key == "secret"
    assert config.bucket == "assets"
    assert config.folder == "cms"
    assert config.image_format is ImageFormat.WEBP
    assert config.image_quality == 90
    assert config.endpoint_with_port == "minio.internal:9443"


@pytest.mark.parametrize("port", [None, "", "not-a-port", 0, "0"])
def test_missing_or_invalid_port_defaults_to_9000(port):
    config = from_provider_options({**HOST_OPTIONS, "port": port})
    assert config.port == 9000


@pytest.mark.parametrize(
    "value, expected",
    [(True, True), ("true", True), ("false", False), (False, False), ("yes", False), (None, False)],
)
def test_use_ssl_requires_explicit_true(value, expected):
    assert from_provider_options({**HOST_OPTIONS, "useSSL": value}).use_ssl is expected


def test_empty_folder_means_no_prefix():
    assert from_provider_options({**HOST_OPTIONS, "folder": ""}).folder is None


def test_unknown_image_format_is_rejected():
    with pytest.raises(ValidationError):
        ProviderConfig(end_point="minio", bucket="b", image_format="bmp")


def test_expiry_beyond_seven_days_is_rejected():
    with pytest.raises(ValidationError):
        ProviderConfig(end_point="minio", bucket="b", signed_url_expiry=8 * 24 * 3600)


def test_load_config_from_environment(monkeypatch):
    monkeypatch.setenv("MINIO_ENDPOINT", "storage.local")
    monkeypatch.setenv("MINIO_PORT", "443")
    monkeypatch.setenv("MINIO_USE_SSL", "TRUE")
    monkeypatch.setenv("MINIO_USER", "user")
    monkeypatch.setenv("MINIO_PASSWORD", "pass")
    monkeypatch.setenv("MINIO_BUCKET", "files")
    monkeypatch.setenv("UPLOAD_IMAGE_FORMAT", "jpeg")
    monkeypatch.setenv("SIGNED_URL_EXPIRY", "3600")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("MINIO_FOLDER", raising=False)
    monkeypatch.delenv("MINIO_CREATE_BUCKET", raising=False)

    app_config = load_config()

    provider = app_config.provider
    assert provider.end_point == "storage.local"
    assert provider.port == 443
    assert provider.use_ssl is True
    assert provider.access_key == "user"
    assert provider.bucket == "files"
    assert provider.folder is None
    assert provider.image_format is ImageFormat.JPEG
    assert provider.signed_url_expiry == 3600
    assert provider.create_bucket is False
    assert app_config.log_level == "DEBUG"
