"""Deployment diagnostics: runtime URLs, built widgets and a widget route probe."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

import requests

from catalog_app.config import AppConfig

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 200


class ProbeFailure(RuntimeError):
    """Raised when the widget route cannot be reached over the network."""


class WidgetStatusError(RuntimeError):
    """Raised when the widget build directory cannot be listed."""


def server_info(config: AppConfig) -> Dict[str, str]:
    """Return the runtime URLs the server believes it is reachable under."""

    base_url = config.base_url.rstrip("/")
    return {
        "baseUrl": base_url,
        "publicBaseUrl": f"{base_url}{config.public_route_base}",
        "widgetBaseUrl": f"{base_url}{config.widget_route_base}",
        "mcpEndpoint": f"{base_url}/mcp",
    }


def widget_status(widgets_dir: Path) -> Dict[str, object]:
    """List the widget bundles present in the build output directory.

    Raises:
        WidgetStatusError: If the directory is missing or unreadable.
    """

    try:
        widget_names: List[str] = sorted(entry.name for entry in Path(widgets_dir).iterdir() if entry.is_dir())
    except OSError as exc:
        raise WidgetStatusError(f"Failed to read widget directory: {exc}") from exc
    return {"widgetDir": str(widgets_dir), "widgetNames": widget_names}


def probe_widget_route(url: str, timeout: Optional[float] = 10.0) -> Dict[str, object]:
    """Fetch ``url`` from the server itself to check the widget route is wired.

    Any HTTP status is reported back; only network-level failures raise.

    Raises:
        ProbeFailure: For connection errors, timeouts and other request errors.
    """

    logger.info("Probing widget route", extra={"url": url})
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Widget route probe failed", extra={"url": url, "error": str(exc)})
        raise ProbeFailure(f"Probe failed: {exc}") from exc

    return {
        "url": url,
        "httpStatus": response.status_code,
        "ok": response.ok,
        "textSnippet": response.text[:SNIPPET_LENGTH],
    }


__all__ = [
    "ProbeFailure",
    "WidgetStatusError",
    "probe_widget_route",
    "server_info",
    "widget_status",
]
