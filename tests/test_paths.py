import pytest

from minio_upload_provider.config import ProviderConfig
from minio_upload_provider.domain import (
    FileDescriptor,
    build_public_url,
    build_storage_key,
    extract_storage_key,
    is_provider_url,
)
from minio_upload_provider.domain.paths import build_host_part


def _config(**overrides) -> ProviderConfig:
    values = {"end_point": "files.example.com", "bucket": "media"}
    values.update(overrides)
    return ProviderConfig(**values)


class TestBuildStorageKey:
    def test_folder_and_path_are_prefixed(self):
        file = FileDescriptor(hash="abc", ext=".pdf", path="docs/2024")
        assert build_storage_key(file, _config(folder="uploads")) == "uploads/docs/2024/abc.pdf"

    def test_without_folder_or_path(self):
        file = FileDescriptor(hash="abc", ext=".pdf")
        assert build_storage_key(file, _config()) == "abc.pdf"

    def test_extension_override(self):
        file = FileDescriptor(hash="xyz", ext=".png")
        assert build_storage_key(file, _config(folder="uploads"), ext=".webp") == "uploads/xyz.webp"

    def test_missing_extension(self):
        file = FileDescriptor(hash="abc")
        assert build_storage_key(file, _config()) == "abc"


class TestBuildPublicUrl:
    @pytest.mark.parametrize(
        "use_ssl, port, expected",
        [
            (True, 443, "https://files.example.com/"),
            (False, 80, "http://files.example.com/"),
            (True, 9000, "https://files.example.com:9000/"),
            (False, 9000, "http://files.example.com:9000/"),
            (True, 80, "https://files.example.com:80/"),
            (False, 443, "http://files.example.com:443/"),
        ],
    )
    def test_port_suffix_only_for_non_default_ports(self, use_ssl, port, expected):
        assert build_host_part(_config(use_ssl=use_ssl, port=port)) == expected

    def test_url_includes_bucket_and_key(self):
        config = _config(folder="uploads")
        assert (
            build_public_url("uploads/abc.pdf", config)
            == "http://files.example.com:9000/media/uploads/abc.pdf"
        )


class TestExtractStorageKey:
    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"use_ssl": True, "port": 443},
            {"use_ssl": False, "port": 80},
            {"use_ssl": True, "port": 8443, "folder": "a/b"},
        ],
    )
    @pytest.mark.parametrize("key", ["abc.pdf", "uploads/x/y.webp", "no-extension"])
    def test_round_trip(self, overrides, key):
        config = _config(**overrides)
        assert extract_storage_key(build_public_url(key, config), config) == key

    def test_foreign_host_is_returned_unchanged(self):
        url = "https://cdn.other.net/media/abc.pdf"
        assert extract_storage_key(url, _config()) == url

    def test_foreign_bucket_is_returned_unchanged(self):
        url = "http://files.example.com:9000/other/abc.pdf"
        assert extract_storage_key(url, _config()) == url

    def test_same_bucket_through_other_port(self):
        url = "https://files.example.com/media/uploads/abc.pdf"
        assert extract_storage_key(url, _config()) == "uploads/abc.pdf"


class TestIsProviderUrl:
    def test_matches_host_and_bucket(self):
        assert is_provider_url("http://files.example.com:9000/media/a.pdf", _config())

    def test_rejects_other_host(self):
        assert not is_provider_url("http://elsewhere.com:9000/media/a.pdf", _config())

    def test_rejects_bucket_name_prefix(self):
        assert not is_provider_url("http://files.example.com:9000/media-old/a.pdf", _config())

    def test_rejects_missing_url(self):
        assert not is_provider_url(None, _config())
