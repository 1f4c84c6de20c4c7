"""Serve a :class:`~swagger_ui_redist.resolver.SwaggerUi` from a FastAPI app.

    from swagger_ui_redist.integrations.fastapi import mount_swagger_ui
    mount_swagger_ui(app, SwaggerUi(settings))   # after app = FastAPI(...)
"""

from __future__ import annotations

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.responses import Response

from swagger_ui_redist.resolver import ResolvedResponse, SwaggerUi


def _to_response(resolved: ResolvedResponse | None) -> Response:
    if resolved is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return Response(content=resolved.body, media_type=resolved.content_type)


def create_router(ui: SwaggerUi) -> APIRouter:
    """Return a router answering ``GET`` and ``HEAD`` under the UI's mount path."""
    router = APIRouter()
    mount = ui.mount_path

    async def swagger_ui_index() -> Response:
        return _to_response(ui.resolve(f"{mount}/"))

    async def swagger_ui_file(path: str) -> Response:
        return _to_response(ui.resolve(f"{mount}/{path}"))

    methods = ["GET", "HEAD"]
    router.add_api_route(mount or "/", swagger_ui_index, methods=methods, include_in_schema=False)
    router.add_api_route(
        f"{mount}/{{path:path}}", swagger_ui_file, methods=methods, include_in_schema=False
    )
    return router


def mount_swagger_ui(app: FastAPI, ui: SwaggerUi) -> None:
    """Add the Swagger UI routes to ``app``."""
    app.include_router(create_router(ui))
