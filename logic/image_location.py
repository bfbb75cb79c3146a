"""Client-facing image URL construction."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from catalog_app.config import DEFAULT_PUBLIC_ROUTE
from models.outfit_item import OutfitItem

WILDCARD_HOST = "0.0.0.0"
LOOPBACK_HOST = "localhost"


def _client_reachable(base_url: str) -> str:
    parts = urlsplit(base_url)
    if parts.hostname != WILDCARD_HOST:
        return base_url
    userinfo, _, _ = parts.netloc.rpartition("@")
    netloc = LOOPBACK_HOST if parts.port is None else f"{LOOPBACK_HOST}:{parts.port}"
    if userinfo:
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit(parts._replace(netloc=netloc))


def public_base_url(base_url: str, public_route: str = DEFAULT_PUBLIC_ROUTE) -> str:
    """Return the absolute base under which public assets are served.

    The wildcard bind address is not reachable from a client, so a
    ``0.0.0.0`` host is swapped for ``localhost``. Other hosts are kept.
    """

    normalized = _client_reachable(base_url).rstrip("/")
    return f"{normalized}{public_route}"


def resolve_image_url(item: OutfitItem, base_url: str, public_route: str = DEFAULT_PUBLIC_ROUTE) -> str:
    """Return an absolute image URL for ``item``.

    Externally hosted images (``http://``/``https://``) are passed through
    verbatim; relative paths are appended to the public base URL.
    """

    if item.has_absolute_image:
        return item.image_path
    path = item.image_path if item.image_path.startswith("/") else f"/{item.image_path}"
    return f"{public_base_url(base_url, public_route)}{path}"


__all__ = ["public_base_url", "resolve_image_url"]
