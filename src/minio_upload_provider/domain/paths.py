"""Maps file descriptors to storage keys and public URLs."""

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from .models import FileDescriptor

if TYPE_CHECKING:
    from minio_upload_provider.config import ProviderConfig


_DEFAULT_PORTS = {"https": 443, "http": 80}


def build_storage_key(
    descriptor: FileDescriptor, config: "ProviderConfig", ext: str | None = None
) -> str:
    """
    Builds the object key for a descriptor.

    The key is ``[folder/][path/]<hash><ext>``. ``ext`` overrides the
    descriptor's own extension, which is how transcoded images get their
    target extension.
    """
    path_chunk = f"{descriptor.path}/" if descriptor.path else ""
    prefix = f"{config.folder}/{path_chunk}" if config.folder else path_chunk
    extension = (descriptor.ext or "") if ext is None else ext
    return f"{prefix}{descriptor.hash}{extension}"


def build_host_part(config: "ProviderConfig") -> str:
    """Returns ``scheme://host[:port]/``, omitting the scheme's default port."""
    default_port = _DEFAULT_PORTS[config.scheme]
    port_suffix = "" if config.port == default_port else f":{config.port}"
    return f"{config.scheme}://{config.end_point}{port_suffix}/"


def build_public_url(key: str, config: "ProviderConfig") -> str:
    return f"{build_host_part(config)}{config.bucket}/{key}"


def is_provider_url(url: str | None, config: "ProviderConfig") -> bool:
    """True when ``url`` points into this provider's host and bucket."""
    if not url:
        return False
    parts = urlsplit(url)
    return parts.hostname == config.end_point.lower() and parts.path.startswith(
        f"/{config.bucket}/"
    )


def extract_storage_key(url: str, config: "ProviderConfig") -> str:
    """
    Inverse of :func:`build_public_url`.

    URLs that are not served from this provider's host and bucket are
    returned unchanged.
    """
    if not is_provider_url(url, config):
        return url
    prefix = f"{build_host_part(config)}{config.bucket}/"
    if url.startswith(prefix):
        return url[len(prefix) :]
    # Same host and bucket reached through another scheme or port.
    return urlsplit(url).path[len(config.bucket) + 2 :]
