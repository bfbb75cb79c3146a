"""HTTP surface: asset routes, tool calls and health."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from catalog_app.app import OutfitCatalogApp
from catalog_app.config import AppConfig
from server.api import create_app

WIDGET = "/mcp-use/widgets/outfit-images"


@pytest.fixture()
def client(tmp_path: Path) -> TestClient:
    widgets_dir = tmp_path / "dist" / "resources" / "widgets"
    widget_dir = widgets_dir / "outfit-images"
    (widget_dir / "assets").mkdir(parents=True)
    (widget_dir / "index.html").write_text("<html>outfit widget</html>")
    (widget_dir / "assets" / "widget.css").write_text("body{}")
    public_dir = tmp_path / "public"
    public_dir.mkdir()
    (public_dir / "top-tshirt.jpg").write_bytes(b"\xff\xd8jpeg")
    (tmp_path / "dist" / "secret.txt").write_text("secret")

    config = AppConfig(base_url="http://localhost:3000", widgets_dir=widgets_dir, public_dir=public_dir)
    return TestClient(create_app(OutfitCatalogApp(config=config)))


def test_health_returns_ok(client: TestClient) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["items"] == 15


@pytest.mark.parametrize("path", [WIDGET, f"{WIDGET}/"])
def test_widget_root_serves_index(client: TestClient, path: str) -> None:
    response = client.get(path)

    assert response.status_code == 200
    assert response.text == "<html>outfit widget</html>"
    assert response.headers["content-type"] == "text/html; charset=utf-8"


def test_widget_asset_has_content_type(client: TestClient) -> None:
    response = client.get(f"{WIDGET}/assets/widget.css")

    assert response.status_code == 200
    assert response.headers["content-type"] == "text/css; charset=utf-8"


@pytest.mark.parametrize(
    "path",
    [
        f"{WIDGET}/missing.js",
        f"{WIDGET}/assets",
        f"{WIDGET}/%2e%2e/%2e%2e/%2e%2e/secret.txt",
        f"{WIDGET}/..%2f..%2f..%2fsecret.txt",
    ],
)
def test_widget_failures_are_plain_not_found(client: TestClient, path: str) -> None:
    response = client.get(path)

    assert response.status_code == 404
    assert "secret" not in response.text


def test_public_images_are_served(client: TestClient) -> None:
    response = client.get("/mcp-use/public/top-tshirt.jpg")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/jpeg"
    assert response.content == b"\xff\xd8jpeg"
    assert client.get("/mcp-use/public/").status_code == 404


def test_list_tools_describes_inputs(client: TestClient) -> None:
    tools = {tool["name"]: tool for tool in client.get("/tools").json()["tools"]}

    assert "topId" in tools["get-outfit-images"]["inputSchema"]["properties"]
    assert tools["get-server-info"]["inputSchema"] == {}


def test_call_list_outfit_options(client: TestClient) -> None:
    response = client.post("/tools/list-outfit-options", json={"occasion": "CASUAL"})

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body["tops"]] == ["top-tshirt"]
    assert body["occasion_matched"]["shoes"] is True


def test_call_get_outfit_images(client: TestClient) -> None:
    response = client.post(
        "/tools/get-outfit-images",
        json={"topId": "top-tshirt", "bottomId": "bottom-jeans", "shoesId": "shoes-sneakers"},
    )

    assert response.status_code == 200
    assert response.json()["top"]["imageUrl"] == "http://localhost:3000/mcp-use/public/top-tshirt.jpg"


def test_call_with_unknown_id_is_not_found(client: TestClient) -> None:
    response = client.post(
        "/tools/get-outfit-images",
        json={"topId": "top-tshirt", "bottomId": "nope", "shoesId": "shoes-sneakers"},
    )

    assert response.status_code == 404
    assert response.json()["error"] == "ItemNotFound"
    assert "top" not in response.json()


def test_call_with_invalid_payload_is_unprocessable(client: TestClient) -> None:
    response = client.post("/tools/show-outfit-images", json={"topId": "top-tshirt"})

    assert response.status_code == 422
    assert response.json()["error"] == "ValidationError"


def test_call_without_body_uses_defaults(client: TestClient) -> None:
    response = client.post("/tools/get-server-info")

    assert response.status_code == 200
    assert response.json()["widgetBaseUrl"] == f"http://localhost:3000{WIDGET}"


def test_unknown_tool_is_404(client: TestClient) -> None:
    assert client.post("/tools/delete-everything", json={}).status_code == 404


def test_correlation_id_is_echoed(client: TestClient) -> None:
    response = client.get("/healthz", headers={"x-correlation-id": "abc123"})

    assert response.headers["x-correlation-id"] == "abc123"
