"""Serve built widget files and public images from disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tools.asset_paths import DEFAULT_INDEX, AssetNotFound, content_type_for, resolve_asset_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetResponse:
    body: bytes
    content_type: str


class AssetServer:
    """Answer asset requests for one route prefix from one directory.

    Files are read on every request; there is no cache.
    """

    def __init__(self, route_prefix: str, asset_root: str | Path, index_name: str = DEFAULT_INDEX) -> None:
        self.route_prefix = route_prefix.rstrip("/")
        self.asset_root = Path(asset_root)
        self.index_name = index_name

    def serve(self, request_path: str) -> AssetResponse:
        """Return the bytes and content type for ``request_path``.

        Raises:
            AssetNotFound: For any resolution or read failure.
        """

        file_path = resolve_asset_path(request_path, self.route_prefix, self.asset_root, self.index_name)
        try:
            body = file_path.read_bytes()
        except OSError as exc:
            logger.info(
                "Asset read failed",
                extra={"route": self.route_prefix, "request_path": request_path, "error": type(exc).__name__},
            )
            raise AssetNotFound(request_path) from exc

        logger.debug(
            "Served asset",
            extra={"route": self.route_prefix, "request_path": request_path, "length": len(body)},
        )
        return AssetResponse(body=body, content_type=content_type_for(file_path))


__all__ = ["AssetNotFound", "AssetResponse", "AssetServer"]
