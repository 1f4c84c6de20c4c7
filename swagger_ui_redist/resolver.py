"""Request path resolution for a mounted Swagger UI.

A :class:`SwaggerUi` turns settings and an asset table into a fixed route
table when it is built.  Resolving a path afterwards is a dictionary lookup,
so one instance can be shared by any number of request handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping
from urllib.parse import urlsplit

from loguru import logger

from swagger_ui_redist.assets import AssetTable
from swagger_ui_redist.config.schema import SwaggerUiSettings
from swagger_ui_redist.exceptions import ConfigError
from swagger_ui_redist.index import render_index

HTML_CONTENT_TYPE = "text/html; charset=utf-8"

# Route table key of the index page.
_INDEX = ""


@dataclass(frozen=True)
class ResolvedResponse:
    """Bytes to send back and their content type."""

    content_type: str
    body: bytes


class SwaggerUi:
    """Swagger UI mounted at ``settings.mount_path``.

    Args:
        settings: Mount path, documents and UI options.
        assets: Static files to serve.  Defaults to the bundled release.
    """

    def __init__(self, settings: SwaggerUiSettings | None = None, assets: AssetTable | None = None):
        self._settings = settings if settings is not None else SwaggerUiSettings()
        self._assets = assets if assets is not None else AssetTable.bundled()
        self._index_html = render_index(self._settings)
        self._routes: Mapping[str, ResolvedResponse] = MappingProxyType(self._build_routes())
        logger.debug(
            f"Swagger UI mounted at '{self.mount_path or '/'}' "
            f"with {len(self._settings.docs)} document(s), {len(self._routes)} route(s)"
        )

    def _build_routes(self) -> dict[str, ResolvedResponse]:
        routes: dict[str, ResolvedResponse] = {
            _INDEX: ResolvedResponse(HTML_CONTENT_TYPE, self._index_html.encode("utf-8")),
        }
        for path, asset in self._assets.items():
            routes[path] = ResolvedResponse(asset.content_type, asset.body)

        for doc in self._settings.docs:
            if not doc.is_served:
                continue
            path = self._settings.doc_route(doc)
            if not path:
                raise ConfigError(f"API document URL {doc.url!r} has no path to serve it at")
            if path in self._assets:
                raise ConfigError(f"API document URL {doc.url!r} shadows a Swagger UI asset")
            if path in routes:
                raise ConfigError(f"Two API documents are served at {doc.url!r}")
            routes[path] = ResolvedResponse(doc.content_type, doc.render())
        return routes

    @property
    def settings(self) -> SwaggerUiSettings:
        return self._settings

    @property
    def assets(self) -> AssetTable:
        return self._assets

    @property
    def mount_path(self) -> str:
        return self._settings.mount_path

    @property
    def routes(self) -> Mapping[str, ResolvedResponse]:
        """Route table keyed by path relative to the mount (index is ``""``)."""
        return self._routes

    def serve(self) -> str:
        """HTML of the index page."""
        return self._index_html

    def resolve(self, request_path: str) -> ResolvedResponse | None:
        """Resolve ``request_path``; ``None`` means not found."""
        path = urlsplit(request_path).path
        mount = self.mount_path

        if path != mount and not path.startswith(mount + "/"):
            logger.debug(f"Swagger UI: {request_path!r} is outside mount '{mount or '/'}'")
            return None

        relative = path[len(mount):]
        if relative in ("", "/"):
            return self._routes[_INDEX]

        response = self._routes.get(relative[1:])
        if response is None:
            logger.debug(f"Swagger UI: no route for {request_path!r}")
        return response

    def __repr__(self) -> str:
        return f"SwaggerUi(mount_path={self.mount_path!r}, docs={len(self._settings.docs)})"


def resolve(ui: SwaggerUi, request_path: str) -> ResolvedResponse | None:
    """Resolve ``request_path`` against ``ui``; ``None`` means not found."""
    return ui.resolve(request_path)
