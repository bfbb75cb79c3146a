"""Traversal-safe mapping of asset request paths onto files, and their content types."""

from __future__ import annotations

import posixpath
from pathlib import Path

DEFAULT_INDEX = "index.html"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".js": "application/javascript; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".json": "application/json; charset=utf-8",
    ".map": "application/json; charset=utf-8",
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}


class AssetNotFound(LookupError):
    """Raised for any asset that cannot be resolved or read.

    Missing files, unreadable files, directories and paths outside the asset
    root all surface as this one error.
    """


def canonical_relative_path(request_path: str, route_prefix: str) -> str:
    """Strip ``route_prefix`` and canonicalise the remainder.

    Returns the remainder without a leading slash; ``""`` means the root was
    requested. ``..`` segments cannot climb above the root and collapse away.
    """

    relative = request_path[len(route_prefix):] if request_path.startswith(route_prefix) else request_path
    relative = (relative or "/").replace("\\", "/")
    return posixpath.normpath("/" + relative).lstrip("/")


def resolve_asset_path(
    request_path: str,
    route_prefix: str,
    asset_root: str | Path,
    index_name: str = DEFAULT_INDEX,
) -> Path:
    """Map a request path to a file guaranteed to live under ``asset_root``.

    The candidate is resolved (following symlinks) and must still be inside
    the resolved root, otherwise :class:`AssetNotFound` is raised.
    """

    if "\x00" in request_path:
        raise AssetNotFound(request_path)

    safe_path = canonical_relative_path(request_path, route_prefix)
    if safe_path in ("", "."):
        safe_path = index_name

    try:
        root = Path(asset_root).resolve()
        candidate = (root / safe_path).resolve()
    except (OSError, RuntimeError, ValueError) as exc:
        raise AssetNotFound(request_path) from exc

    if candidate == root or not candidate.is_relative_to(root):
        raise AssetNotFound(request_path)
    return candidate


def content_type_for(path: str | Path) -> str:
    """Return the MIME type for ``path`` from its extension."""

    return CONTENT_TYPES.get(Path(path).suffix.lower(), DEFAULT_CONTENT_TYPE)


__all__ = [
    "AssetNotFound",
    "CONTENT_TYPES",
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_INDEX",
    "canonical_relative_path",
    "content_type_for",
    "resolve_asset_path",
]
