"""Tool wrappers: structured results, validation and diagnostics."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

from catalog_app.app import OutfitCatalogApp
from catalog_app.config import AppConfig
from tools import catalog_tools as catalog_tools_module
from tools import diagnostics


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        base_url="http://0.0.0.0:3000",
        widgets_dir=tmp_path / "widgets",
        public_dir=tmp_path / "public",
        probe_timeout=1.5,
    )


@pytest.fixture()
def catalog_app(config: AppConfig) -> OutfitCatalogApp:
    return OutfitCatalogApp(config=config)


def test_tool_registry_names(catalog_app: OutfitCatalogApp) -> None:
    assert set(catalog_app.tools) == {
        "list-outfit-options",
        "get-outfit-images",
        "show-outfit-images",
        "get-server-info",
        "get-widget-status",
        "probe-widget-route",
    }
    assert catalog_app.get_tool("show-outfit-images").widget == "outfit-images"


def test_tool_registry_holds_bound_methods(catalog_app: OutfitCatalogApp) -> None:
    tools = catalog_app.catalog_tools

    assert catalog_app.get_tool("get-server-info").func == tools.get_server_info
    assert catalog_app.get_tool("list-outfit-options").func == tools.list_outfit_options


def test_list_outfit_options_tool(catalog_app: OutfitCatalogApp) -> None:
    result = catalog_app.catalog_tools.list_outfit_options(occasion="business")

    assert result["status"] == "ok"
    assert [item["id"] for item in result["shoes"]] == ["shoes-oxfords"]


def test_tool_arguments_may_be_positional(catalog_app: OutfitCatalogApp) -> None:
    tools = catalog_app.catalog_tools

    assert tools.list_outfit_options("business") == tools.list_outfit_options(occasion="business")
    result = tools.get_outfit_images("top-tshirt", "bottom-jeans", shoes_id="shoes-sneakers")
    assert result["status"] == "ok"
    assert result["shoes"]["id"] == "shoes-sneakers"


def test_tool_argument_given_twice_is_rejected(catalog_app: OutfitCatalogApp) -> None:
    with pytest.raises(TypeError, match="multiple values"):
        catalog_app.catalog_tools.list_outfit_options("gala", occasion="gala")


def test_get_outfit_images_accepts_wire_names(catalog_app: OutfitCatalogApp) -> None:
    result = catalog_app.get_tool("get-outfit-images").func(
        topId="top-tshirt", bottomId="bottom-jeans", shoesId="shoes-sneakers"
    )

    assert result["status"] == "ok"
    assert result["bottom"]["imageUrl"] == "http://localhost:3000/mcp-use/public/bottom-jeans.jpg"


def test_get_outfit_images_reports_missing_ids(catalog_app: OutfitCatalogApp) -> None:
    result = catalog_app.catalog_tools.get_outfit_images(
        top_id="top-tshirt", bottom_id="bottom-jeans", shoes_id="shoes-slippers"
    )

    assert result["status"] == "error"
    assert result["error"] == "ItemNotFound"
    assert result["details"] == [{"field": "shoes_id", "id": "shoes-slippers"}]
    assert "top" not in result


def test_invalid_input_becomes_validation_error(catalog_app: OutfitCatalogApp) -> None:
    result = catalog_app.catalog_tools.get_outfit_images(top_id="top-tshirt", bottom_id="")

    assert result["status"] == "error"
    assert result["error"] == "ValidationError"
    assert {tuple(detail["loc"]) for detail in result["details"]} >= {("shoesId",)}


def test_show_outfit_images_returns_widget_props(catalog_app: OutfitCatalogApp) -> None:
    result = catalog_app.catalog_tools.show_outfit_images(
        top_id="top-shirt", bottom_id="bottom-chinos", shoes_id="shoes-loafers", occasion="date"
    )

    assert result["status"] == "ok"
    assert result["widget"] == "outfit-images"
    assert result["props"]["selected"]["topId"] == "top-shirt"
    assert [item["id"] for item in result["props"]["bottoms"]] == ["bottom-chinos", "bottom-pencil-skirt"]


def test_server_info_uses_configured_base(catalog_app: OutfitCatalogApp) -> None:
    result = catalog_app.catalog_tools.get_server_info()

    assert result == {
        "status": "ok",
        "baseUrl": "http://0.0.0.0:3000",
        "publicBaseUrl": "http://0.0.0.0:3000/mcp-use/public",
        "widgetBaseUrl": "http://0.0.0.0:3000/mcp-use/widgets/outfit-images",
        "mcpEndpoint": "http://0.0.0.0:3000/mcp",
    }


def test_success_envelope_status_is_not_overridden(
    catalog_app: OutfitCatalogApp, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(catalog_tools_module, "server_info", lambda config: {"status": 503, "baseUrl": "x"})

    result = catalog_app.catalog_tools.get_server_info()

    assert result == {"status": "ok", "baseUrl": "x"}


def test_widget_status_lists_built_widgets(catalog_app: OutfitCatalogApp, config: AppConfig) -> None:
    (config.widgets_dir / "outfit-images").mkdir(parents=True)
    (config.widgets_dir / "other-widget").mkdir()
    (config.widgets_dir / "manifest.json").write_text("{}")

    result = catalog_app.catalog_tools.get_widget_status()

    assert result["status"] == "ok"
    assert result["widgetNames"] == ["other-widget", "outfit-images"]


def test_widget_status_reports_missing_build(catalog_app: OutfitCatalogApp) -> None:
    result = catalog_app.catalog_tools.get_widget_status()

    assert result["status"] == "error"
    assert result["error"] == "WidgetStatusError"
    assert result["message"].startswith("Failed to read widget directory")


class _FakeResponse:
    status_code = 200
    ok = True
    text = "<html>" + "x" * 500


def test_widget_route_check_reports_http_status(catalog_app: OutfitCatalogApp, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = {}

    def fake_get(url, timeout=None):
        calls["url"] = url
        calls["timeout"] = timeout
        return _FakeResponse()

    monkeypatch.setattr(diagnostics.requests, "get", fake_get)

    result = catalog_app.catalog_tools.probe_widget_route()

    assert calls == {"url": "http://0.0.0.0:3000/mcp-use/widgets/outfit-images/", "timeout": 1.5}
    assert result["status"] == "ok"
    assert result["httpStatus"] == 200
    assert result["ok"] is True
    assert len(result["textSnippet"]) == 200


def test_widget_route_check_network_failure(catalog_app: OutfitCatalogApp, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_get(url, timeout=None):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(diagnostics.requests, "get", fake_get)

    result = catalog_app.catalog_tools.probe_widget_route()

    assert result["status"] == "error"
    assert result["error"] == "ProbeFailure"
    assert "connection refused" in result["message"]
