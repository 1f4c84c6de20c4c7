"""Configuration schema for swagger-ui-redist."""
from __future__ import annotations

import json
import os
import re
from enum import Enum
from pathlib import Path
from typing import Any, Iterable
from urllib.parse import urlsplit

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from swagger_ui_redist.assets import StaticFile
from swagger_ui_redist.exceptions import ConfigError

SWAGGER_STANDALONE_LAYOUT = "StandaloneLayout"
SWAGGER_BASE_LAYOUT = "BaseLayout"

DEFAULT_CONFIG_PATH = Path.home() / ".swagger-ui-redist" / "config.yaml"


def _resolve_env_vars(value: Any) -> Any:
    """Resolve ${ENV_VAR} patterns in string values."""
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}")

        def replacer(match):
            env_var = match.group(1)
            return os.environ.get(env_var, match.group(0))

        return pattern.sub(replacer, value)
    elif isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_resolve_env_vars(v) for v in value]
    return value


class _Model(BaseModel):
    # Settings are shared across requests, so nothing may change after validation.
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ---------------------------------------------------------------------------
# Swagger UI options
# ---------------------------------------------------------------------------

class Url(_Model):
    """Entry of Swagger UI's ``urls`` list.

    ``name`` is shown in the document selector.  ``primary`` marks the
    entry displayed first; it only feeds ``urls.primaryName`` and is not
    serialised itself.
    """

    name: str = ""
    url: str
    primary: bool = False


class BasicAuth(_Model):
    username: str
    password: str


class SyntaxHighlight(_Model):
    activated: bool = True
    theme: str | None = None


class OAuthConfig(_Model):
    """Arguments for Swagger UI's ``initOAuth`` call."""

    client_id: str | None = None
    client_secret: str | None = None
    realm: str | None = None
    app_name: str | None = None
    scope_separator: str | None = None
    scopes: tuple[str, ...] | None = None
    additional_query_string_params: dict[str, str] | None = None
    use_basic_authentication_with_access_code_grant: bool | None = None
    use_pkce_with_authorization_code_grant: bool | None = None

    def to_init_oauth(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class UiConfig(_Model):
    """Swagger UI configuration object.

    Field order is the order keys appear in the rendered page.  Unset
    options are left out so Swagger UI falls back to its own defaults.
    """

    config_url: str | None = None
    dom_id: str | None = Field(default="#swagger-ui", alias="dom_id")
    url: str | None = None
    urls_primary_name: str | None = Field(default=None, alias="urls.primaryName")
    urls: tuple[Url, ...] = ()
    query_config_enabled: bool | None = None
    deep_linking: bool | None = True
    display_operation_id: bool | None = None
    default_models_expand_depth: int | None = None
    default_model_expand_depth: int | None = None
    default_model_rendering: str | None = None
    display_request_duration: bool | None = None
    doc_expansion: str | None = None
    filter: bool | None = None
    max_displayed_tags: int | None = Field(default=None, ge=0)
    show_extensions: bool | None = None
    show_common_extensions: bool | None = None
    try_it_out_enabled: bool | None = None
    request_snippets_enabled: bool | None = None
    oauth2_redirect_url: str | None = None
    show_mutated_request: bool | None = None
    supported_submit_methods: tuple[str, ...] | None = None
    validator_url: str | None = None
    with_credentials: bool | None = None
    persist_authorization: bool | None = None
    oauth: OAuthConfig | None = None
    syntax_highlight: SyntaxHighlight | None = None
    layout: str = SWAGGER_STANDALONE_LAYOUT
    basic_auth: BasicAuth | None = None

    @field_validator("urls", mode="before")
    @classmethod
    def _coerce_urls(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [{"url": v} if isinstance(v, str) else v for v in value]
        return value

    @field_validator("syntax_highlight", mode="before")
    @classmethod
    def _coerce_syntax_highlight(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return {"activated": value}
        return value

    def with_urls(self, urls: Iterable[Url | str]) -> "UiConfig":
        """Return a copy serving ``urls``.

        A single unnamed URL becomes the plain ``url`` option.  Otherwise
        every entry goes to ``urls``, with unnamed entries named after
        their URL.
        """
        entries = [u if isinstance(u, Url) else Url(url=u) for u in urls]
        primary_name = next((u.name for u in entries if u.primary), None)

        if len(entries) == 1:
            only = entries[0]
            if not only.name:
                return self.model_copy(
                    update={"url": only.url, "urls": (), "urls_primary_name": primary_name}
                )
            return self.model_copy(
                update={"url": None, "urls": (only,), "urls_primary_name": primary_name}
            )

        named = tuple(u if u.name else u.model_copy(update={"name": u.url}) for u in entries)
        return self.model_copy(update={"urls": named, "urls_primary_name": primary_name})

    def use_base_layout(self) -> "UiConfig":
        return self.model_copy(update={"layout": SWAGGER_BASE_LAYOUT})

    def to_bundle_config(self) -> dict[str, Any]:
        """Keys and values passed to ``SwaggerUIBundle``."""
        data = self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude={"oauth": True, "urls": {"__all__": {"primary"}}},
        )
        if not data.get("urls"):
            data.pop("urls", None)
        return data


# ---------------------------------------------------------------------------
# API documents
# ---------------------------------------------------------------------------

class DocFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"

    @property
    def content_type(self) -> str:
        return "application/json" if self is DocFormat.JSON else "application/yaml"


class ApiDoc(_Model):
    """An API description shown by the UI.

    A document with a ``body`` (or a ``file`` to read it from) is served
    under the mount path.  One without is only referenced: its URL goes
    into the page as-is and the host is expected to serve it.
    """

    url: str
    name: str = ""
    body: Any = None
    file: Path | None = None
    format: DocFormat | None = None
    primary: bool = False

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("document url must not be empty")
        return value

    @property
    def is_served(self) -> bool:
        return self.body is not None or self.file is not None

    @property
    def served_path(self) -> str:
        """Path relative to the mount where a served document lives."""
        path = urlsplit(self.url).path
        while path.startswith("./"):
            path = path[2:]
        return path.lstrip("/")

    @property
    def doc_format(self) -> DocFormat:
        if self.format is not None:
            return self.format
        suffix = Path(urlsplit(self.url).path).suffix.lower()
        if not suffix and self.file is not None:
            suffix = self.file.suffix.lower()
        return DocFormat.YAML if suffix in (".yaml", ".yml") else DocFormat.JSON

    @property
    def content_type(self) -> str:
        return self.doc_format.content_type

    def render(self) -> bytes:
        """Bytes served for this document.

        Raw ``bytes``/``str`` bodies pass through unchanged; structured
        bodies are dumped in the document's format.
        """
        if self.body is None and self.file is not None:
            try:
                return self.file.read_bytes()
            except OSError as e:
                raise ConfigError(f"Cannot read API document {self.file}: {e}") from e

        body = self.body
        if isinstance(body, bytes):
            return body
        if isinstance(body, str):
            return body.encode("utf-8")
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        if self.doc_format is DocFormat.YAML:
            return yaml.safe_dump(body, sort_keys=False, allow_unicode=True).encode("utf-8")
        return json.dumps(body, ensure_ascii=False).encode("utf-8")


# ---------------------------------------------------------------------------
# Root configuration
# ---------------------------------------------------------------------------

class SwaggerUiSettings(_Model):
    mount_path: str = "/swagger-ui"
    title: str = "Swagger UI"
    docs: tuple[ApiDoc, ...] = ()
    ui: UiConfig = Field(default_factory=UiConfig)
    file_paths: dict[StaticFile, str] = Field(default_factory=dict)

    @field_validator("mount_path")
    @classmethod
    def _normalize_mount_path(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith("/"):
            raise ValueError(f"mount path must start with '/': {value!r}")
        # "/" mounts at the root and becomes the empty prefix.
        return value.rstrip("/")

    @model_validator(mode="after")
    def _warn_unnamed_docs(self) -> "SwaggerUiSettings":
        if len(self.docs) > 1 and any(not d.name for d in self.docs):
            logger.warning(
                "Several API documents configured but some have no name; "
                "their URL will be shown in the selector"
            )
        return self

    def asset_href(self, static_file: StaticFile) -> str:
        """Link used in the page for ``static_file``."""
        override = self.file_paths.get(static_file)
        if override:
            return override
        return f"{self.mount_path}/{static_file.file_name}"

    def doc_route(self, doc: ApiDoc) -> str:
        """Path of a served ``doc`` relative to the mount.

        An absolute URL that already starts with the mount path is taken
        as-is, so ``/swagger-ui/api.json`` and ``/api.json`` both end up
        at ``api.json`` under a ``/swagger-ui`` mount.
        """
        path = urlsplit(doc.url).path
        if self.mount_path and path.startswith(self.mount_path + "/"):
            return path[len(self.mount_path) + 1:].lstrip("/")
        return doc.served_path

    def doc_href(self, doc: ApiDoc) -> str:
        """URL the browser fetches ``doc`` from."""
        if doc.is_served:
            return f"{self.mount_path}/{self.doc_route(doc)}"
        return doc.url

    def effective_ui_config(self) -> UiConfig:
        """UI options with the configured documents applied."""
        if not self.docs:
            return self.ui
        return self.ui.with_urls(
            Url(url=self.doc_href(d), name=d.name, primary=d.primary) for d in self.docs
        )

    @classmethod
    def load(cls, path: Path | None = None) -> "SwaggerUiSettings":
        """Load settings from a YAML file with env var resolution."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        if not path.exists():
            return cls()

        with open(path) as f:
            raw = yaml.safe_load(f) or {}

        resolved = _resolve_env_vars(raw)
        # Anything but a mapping is left for model_validate to reject.
        docs = resolved.get("docs") if isinstance(resolved, dict) else None
        if isinstance(docs, list):
            for doc in docs:
                if isinstance(doc, dict) and doc.get("file"):
                    doc["file"] = str((path.parent / doc["file"]).resolve())
        return cls.model_validate(resolved)

    def save(self, path: Path | None = None) -> None:
        """Save settings to a YAML file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(
                self.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
