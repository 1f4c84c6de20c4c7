"""Exceptions raised by swagger-ui-redist."""

from __future__ import annotations


class SwaggerUiError(Exception):
    """Base class for all swagger-ui-redist errors."""


class AssetBundleError(SwaggerUiError):
    """The vendored Swagger UI release is incomplete or unreadable."""

    def __init__(self, directory, missing: list[str]):
        self.directory = directory
        self.missing = missing
        super().__init__(
            f"Swagger UI assets missing from {directory}: {', '.join(missing)}. "
            "Run scripts/update_swagger_ui.py <version> to fetch them."
        )


class ConfigError(SwaggerUiError):
    """Settings that cannot be turned into a route table."""
