"""FastAPI server exposing widget assets and catalog tools."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from catalog_app.app import OutfitCatalogApp
from catalog_app.logging_config import correlation_context
from tools.asset_server import AssetNotFound, AssetServer

CORRELATION_HEADER = "x-correlation-id"

ERROR_STATUS_CODES = {
    "ItemNotFound": 404,
    "ValidationError": 422,
    "WidgetStatusError": 500,
    "ProbeFailure": 502,
}


def _asset_response(server: AssetServer, request_path: str) -> Response:
    try:
        asset = server.serve(request_path)
    except AssetNotFound:
        return PlainTextResponse("Not Found", status_code=404)
    return Response(content=asset.body, status_code=200, media_type=asset.content_type)


def create_app(catalog_app: OutfitCatalogApp | None = None) -> FastAPI:
    """Build the ASGI app around an :class:`OutfitCatalogApp`."""

    catalog_app = catalog_app or OutfitCatalogApp()
    config = catalog_app.config
    api = FastAPI(
        title="Outfit Catalog",
        description="Outfit suggestion server with an embeddable image widget",
        version="1.0.0",
    )
    api.state.catalog_app = catalog_app

    @api.middleware("http")
    async def correlation_middleware(request: Request, call_next):
        with correlation_context(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response

    @api.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return {
            "status": "ok",
            "service": "outfit-catalog",
            "environment": config.environment or "local",
            "items": len(catalog_app.store.all_items()),
        }

    widget_prefix = config.widget_route_base
    public_prefix = config.public_route_base.rstrip("/")

    @api.get(widget_prefix)
    def widget_index() -> Response:
        return _asset_response(catalog_app.widget_assets, widget_prefix)

    @api.get(widget_prefix + "/{asset_path:path}")
    def widget_asset(asset_path: str) -> Response:
        return _asset_response(catalog_app.widget_assets, f"{widget_prefix}/{asset_path}")

    @api.get(public_prefix + "/{asset_path:path}")
    def public_asset(asset_path: str) -> Response:
        return _asset_response(catalog_app.public_assets, f"{public_prefix}/{asset_path}")

    @api.get("/tools")
    async def list_tools() -> dict:
        """Describe the registered tools and their input schemas."""

        return {
            "tools": [
                {
                    "name": tool.name,
                    "description": tool.description,
                    "widget": tool.widget,
                    "inputSchema": tool.input_model.model_json_schema(by_alias=True) if tool.input_model else {},
                }
                for tool in catalog_app.tools.values()
            ]
        }

    @api.post("/tools/{tool_name}")
    def call_tool(tool_name: str, payload: Optional[Dict[str, Any]] = Body(None)) -> JSONResponse:
        """Invoke a tool with a JSON object of arguments."""

        tool = catalog_app.get_tool(tool_name)
        if tool is None:
            raise HTTPException(status_code=404, detail=f"Unknown tool '{tool_name}'")

        result = tool.func(**(payload or {})) if tool.input_model else tool.func()
        if result.get("status") == "error":
            return JSONResponse(status_code=ERROR_STATUS_CODES.get(result.get("error"), 400), content=result)
        return JSONResponse(content=result)

    return api


app = create_app()


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=app.state.catalog_app.config.port, reload=False)
