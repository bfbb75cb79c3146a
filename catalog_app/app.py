"""Catalog app bootstrap."""

from __future__ import annotations

import logging
from typing import Dict

from catalog_app.config import AppConfig
from catalog_app.logging_config import configure_logging, get_logger, log_event
from logic.catalog_query import CatalogQueryService
from tools.asset_server import AssetServer
from tools.catalog_store import CatalogStore, build_default_store
from tools.catalog_tools import CatalogTools, ToolDefinition

LOGGER = get_logger(__name__)


class OutfitCatalogApp:
    """Wires the catalog store, query service, asset servers and tools together.

    The store is built once here and handed to every component that reads it;
    pass ``store`` to run against an alternate catalog.
    """

    def __init__(self, config: AppConfig | None = None, store: CatalogStore | None = None) -> None:
        self.config = config or AppConfig.from_env()
        configure_logging()

        self.store = store or build_default_store()
        self.query_service = CatalogQueryService(
            self.store,
            base_url=self.config.base_url,
            public_route=self.config.public_route_base,
        )
        self.widget_assets = AssetServer(self.config.widget_route_base, self.config.widget_dist_dir)
        self.public_assets = AssetServer(self.config.public_route_base, self.config.public_dir)
        self.catalog_tools = CatalogTools(self.query_service, self.config)
        self.tools: Dict[str, ToolDefinition] = {tool.name: tool for tool in self.catalog_tools.tool_defs()}

        log_event(
            LOGGER,
            logging.INFO,
            "app_initialised",
            base_url=self.config.base_url,
            widget_dir=str(self.config.widget_dist_dir),
            public_dir=str(self.config.public_dir),
            tool_count=len(self.tools),
        )

    def get_tool(self, name: str) -> ToolDefinition | None:
        return self.tools.get(name)


__all__ = ["OutfitCatalogApp"]
