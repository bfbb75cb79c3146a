"""Tool wrappers exposing the catalog, widget and diagnostics operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from catalog_app.config import AppConfig
from logic.catalog_query import CatalogQueryService, ImageMode, ItemNotFound
from logic.validation import (
    OccasionQuery,
    SelectionQuery,
    WidgetQuery,
    error_result,
    validation_failure,
)
from tools.diagnostics import (
    ProbeFailure,
    WidgetStatusError,
    probe_widget_route,
    server_info,
    widget_status,
)
from tools.observability import instrument_tool


@dataclass(frozen=True)
class ToolDefinition:
    """A named callable the transport layer can register and invoke."""

    name: str
    description: str
    func: Callable[..., Dict[str, Any]]
    input_model: Optional[type[BaseModel]] = None
    widget: Optional[str] = None


def _ok(payload: Dict[str, Any]) -> Dict[str, Any]:
    # The envelope status always wins over a payload key of the same name.
    return {**payload, "status": "ok"}


def _item_not_found(exc: ItemNotFound) -> Dict[str, Any]:
    details = [{"field": field, "id": item_id} for field, item_id in exc.missing.items()]
    return error_result("ItemNotFound", str(exc), details)


class CatalogTools:
    """Thin wrapper to expose catalog queries and diagnostics as tools.

    Every method returns a plain dict: ``status == "ok"`` on success or an
    error result for known failures.
    """

    def __init__(self, query_service: CatalogQueryService, config: AppConfig) -> None:
        self.query_service = query_service
        self.config = config

    @instrument_tool("list-outfit-options", OccasionQuery, on_validation_error=validation_failure)
    def list_outfit_options(self, occasion: Optional[str] = None) -> Dict[str, Any]:
        return _ok(self.query_service.list_outfit_options(occasion))

    @instrument_tool("get-outfit-images", SelectionQuery, on_validation_error=validation_failure)
    def get_outfit_images(self, top_id: str, bottom_id: str, shoes_id: str) -> Dict[str, Any]:
        try:
            selection = self.query_service.resolve_selection(top_id, bottom_id, shoes_id, mode=ImageMode.URL)
        except ItemNotFound as exc:
            return _item_not_found(exc)
        return _ok(selection)

    @instrument_tool("show-outfit-images", WidgetQuery, on_validation_error=validation_failure)
    def show_outfit_images(
        self,
        top_id: str,
        bottom_id: str,
        shoes_id: str,
        occasion: Optional[str] = None,
    ) -> Dict[str, Any]:
        try:
            props = self.query_service.build_widget_props(top_id, bottom_id, shoes_id, occasion=occasion)
        except ItemNotFound as exc:
            return _item_not_found(exc)
        return {
            "status": "ok",
            "widget": self.config.widget_name,
            "props": props,
            "output": "Outfit images ready",
        }

    @instrument_tool("get-server-info")
    def get_server_info(self) -> Dict[str, Any]:
        return _ok(server_info(self.config))

    @instrument_tool("get-widget-status")
    def get_widget_status(self) -> Dict[str, Any]:
        try:
            status = widget_status(self.config.widgets_dir)
        except WidgetStatusError as exc:
            return error_result("WidgetStatusError", str(exc))
        return _ok(status)

    @instrument_tool("probe-widget-route")
    def probe_widget_route(self) -> Dict[str, Any]:
        url = f"{self.config.base_url.rstrip('/')}{self.config.widget_route_base}/"
        try:
            probe = probe_widget_route(url, timeout=self.config.probe_timeout)
        except ProbeFailure as exc:
            return error_result("ProbeFailure", str(exc))
        return _ok(probe)

    def tool_defs(self) -> List[ToolDefinition]:
        """Return tool definitions for registration."""

        return [
            ToolDefinition(
                name="list-outfit-options",
                description="List tops, bottoms, and shoes tailored to a given occasion",
                func=self.list_outfit_options,
                input_model=OccasionQuery,
            ),
            ToolDefinition(
                name="get-outfit-images",
                description="Get image URLs for selected top, bottom, and shoes by id",
                func=self.get_outfit_images,
                input_model=SelectionQuery,
            ),
            ToolDefinition(
                name="show-outfit-images",
                description="Show selected outfit images in a widget for a given occasion",
                func=self.show_outfit_images,
                input_model=WidgetQuery,
                widget=self.config.widget_name,
            ),
            ToolDefinition(
                name="get-server-info",
                description="Return runtime URLs for debugging deployment issues",
                func=self.get_server_info,
            ),
            ToolDefinition(
                name="get-widget-status",
                description="List built widget files on the server for debugging",
                func=self.get_widget_status,
            ),
            ToolDefinition(
                name="probe-widget-route",
                description="Probe the widget URL from the server to verify routing",
                func=self.probe_widget_route,
            ),
        ]


__all__ = ["CatalogTools", "ToolDefinition"]
