"""Rendering of the Swagger UI index page."""

from __future__ import annotations

import html
import json
from typing import Any

from swagger_ui_redist.assets import StaticFile
from swagger_ui_redist.config.schema import SwaggerUiSettings, UiConfig

DEFAULT_CONFIG = """
window.ui = SwaggerUIBundle({
  {{config}},
  presets: [
    SwaggerUIBundle.presets.apis,
    SwaggerUIStandalonePreset
  ],
  plugins: [
    SwaggerUIBundle.plugins.DownloadUrl
  ],
});"""

INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <link rel="stylesheet" type="text/css" href="{css_path}" />
    <link rel="stylesheet" type="text/css" href="{index_css_path}" />
    <link rel="icon" type="image/png" href="{favicon_32_path}" sizes="32x32" />
    <link rel="icon" type="image/png" href="{favicon_16_path}" sizes="16x16" />
</head>
<body>
<div id="swagger-ui"></div>
<script src="{js_path}" charset="UTF-8"></script>
<script src="{standalone_preset_js_path}" charset="UTF-8"></script>
<script>
    window.onload = () => {{
        {config}
    }};
</script>
</body>
</html>
"""


def _script_json(value: Any) -> str:
    # Escaping "<" keeps "</script>" and "<!--" out of the <script> element.
    # U+2028/U+2029 are line terminators in older JavaScript engines.
    return (
        json.dumps(value, indent=2, ensure_ascii=False)
        .replace("<", "\\u003c")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def format_config(config: UiConfig, template: str = DEFAULT_CONFIG) -> str:
    """Substitute ``config`` for ``{{config}}`` in ``template``.

    The pretty-printed JSON object is inserted without its outer braces so
    the template can append its own presets and plugins.
    """
    config_json = _script_json(config.to_bundle_config())
    script = template.replace("{{config}}", config_json[2:-2])
    if config.oauth is not None:
        script += f"\nwindow.ui.initOAuth({_script_json(config.oauth.to_init_oauth())});"
    return script


def render_index(settings: SwaggerUiSettings) -> str:
    """Return the HTML page that boots Swagger UI for ``settings``."""
    return INDEX_TEMPLATE.format(
        title=html.escape(settings.title),
        css_path=html.escape(settings.asset_href(StaticFile.CSS)),
        index_css_path=html.escape(settings.asset_href(StaticFile.INDEX_CSS)),
        favicon_32_path=html.escape(settings.asset_href(StaticFile.FAVICON_32)),
        favicon_16_path=html.escape(settings.asset_href(StaticFile.FAVICON_16)),
        js_path=html.escape(settings.asset_href(StaticFile.JS)),
        standalone_preset_js_path=html.escape(settings.asset_href(StaticFile.STANDALONE_PRESET_JS)),
        config=format_config(settings.effective_ui_config()),
    )
