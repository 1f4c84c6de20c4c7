"""Swagger UI packaged for any Python web server.

The Swagger UI release is vendored in ``res/`` so nothing is downloaded at
runtime.  Build a :class:`SwaggerUi` from :class:`SwaggerUiSettings` and hand
request paths to :meth:`SwaggerUi.resolve`; wiring the result into a web
framework is left to the host (see :mod:`swagger_ui_redist.integrations.fastapi`).

Swagger UI itself is licensed under Apache 2.0.
"""

from swagger_ui_redist.assets import AssetTable, StaticAsset, StaticFile, bundled_version
from swagger_ui_redist.config.schema import (
    ApiDoc,
    BasicAuth,
    DocFormat,
    OAuthConfig,
    SwaggerUiSettings,
    SyntaxHighlight,
    UiConfig,
    Url,
)
from swagger_ui_redist.exceptions import AssetBundleError, ConfigError, SwaggerUiError
from swagger_ui_redist.resolver import ResolvedResponse, SwaggerUi, resolve

__version__ = "0.1.0"

__all__ = [
    "ApiDoc",
    "AssetBundleError",
    "AssetTable",
    "BasicAuth",
    "ConfigError",
    "DocFormat",
    "OAuthConfig",
    "ResolvedResponse",
    "StaticAsset",
    "StaticFile",
    "SwaggerUi",
    "SwaggerUiError",
    "SwaggerUiSettings",
    "SyntaxHighlight",
    "UiConfig",
    "Url",
    "bundled_version",
    "resolve",
]
