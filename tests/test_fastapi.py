"""Tests for the FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from swagger_ui_redist.config.schema import ApiDoc, SwaggerUiSettings
from swagger_ui_redist.integrations.fastapi import create_router, mount_swagger_ui
from swagger_ui_redist.resolver import SwaggerUi


def _create_app(assets, mount_path: str = "/swagger-ui") -> FastAPI:
    """Create a test FastAPI app with the Swagger UI mounted."""
    settings = SwaggerUiSettings(
        mount_path=mount_path,
        docs=[ApiDoc(name="Pets", url="/openapi.json", body={"openapi": "3.1.0"})],
    )
    app = FastAPI()
    mount_swagger_ui(app, SwaggerUi(settings, assets=assets))

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


class TestSwaggerUiRoutes:
    def test_index(self, assets):
        client = TestClient(_create_app(assets))
        resp = client.get("/swagger-ui/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "/swagger-ui/openapi.json" in resp.text

    def test_bare_mount(self, assets):
        client = TestClient(_create_app(assets))
        resp = client.get("/swagger-ui")
        assert resp.status_code == 200
        assert "SwaggerUIBundle" in resp.text

    def test_static_asset(self, assets):
        client = TestClient(_create_app(assets))
        resp = client.get("/swagger-ui/swagger-ui-bundle.js")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/javascript")
        assert resp.content == assets["swagger-ui-bundle.js"].body

    def test_document(self, assets):
        client = TestClient(_create_app(assets))
        resp = client.get("/swagger-ui/openapi.json")
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/json"
        assert resp.json() == {"openapi": "3.1.0"}

    def test_not_found(self, assets):
        client = TestClient(_create_app(assets))
        resp = client.get("/swagger-ui/does-not-exist")
        assert resp.status_code == 404

    def test_other_routes_untouched(self, assets):
        client = TestClient(_create_app(assets))
        assert client.get("/health").json() == {"status": "ok"}

    def test_root_mount(self, assets):
        client = TestClient(_create_app(assets, mount_path="/"))
        assert client.get("/").status_code == 200
        assert client.get("/index.css").status_code == 200

    def test_routes_hidden_from_schema(self, assets):
        router = create_router(SwaggerUi(SwaggerUiSettings(), assets=assets))
        assert router.routes
        assert all(not route.include_in_schema for route in router.routes)

    def test_head_index(self, assets):
        client = TestClient(_create_app(assets))
        resp = client.head("/swagger-ui/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")

    def test_head_asset(self, assets):
        client = TestClient(_create_app(assets))
        resp = client.head("/swagger-ui/swagger-ui.css")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/css")

    def test_head_not_found(self, assets):
        client = TestClient(_create_app(assets))
        assert client.head("/swagger-ui/does-not-exist").status_code == 404
