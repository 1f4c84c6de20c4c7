"""CLI commands for swagger-ui-redist."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="swagger-ui-redist",
    help="Inspect and preview a bundled Swagger UI.",
)
console = Console()


def _get_config_path(config: str | None) -> Path:
    from swagger_ui_redist.config.schema import DEFAULT_CONFIG_PATH

    return Path(config) if config else DEFAULT_CONFIG_PATH


def _load_ui(config: str | None):
    """Build a SwaggerUi from the config file, exiting on errors."""
    from pydantic import ValidationError

    from swagger_ui_redist.config.schema import SwaggerUiSettings
    from swagger_ui_redist.exceptions import SwaggerUiError
    from swagger_ui_redist.resolver import SwaggerUi

    try:
        settings = SwaggerUiSettings.load(_get_config_path(config))
        return SwaggerUi(settings)
    except (ValidationError, SwaggerUiError) as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def init(
    config: str = typer.Option(None, "-c", "--config", help="Path to config file."),
):
    """Write a default configuration file."""
    from swagger_ui_redist.config.schema import ApiDoc, SwaggerUiSettings

    config_path = _get_config_path(config)

    if config_path.exists():
        console.print(f"[yellow]Config already exists at {config_path}[/]")
        overwrite = typer.confirm("Overwrite?", default=False)
        if not overwrite:
            console.print("[dim]Keeping existing config.[/]")
            return

    settings = SwaggerUiSettings(
        docs=(ApiDoc(name="Petstore", url="https://petstore3.swagger.io/api/v3/openapi.json"),),
    )
    settings.save(config_path)

    console.print(f"[green]Created config at {config_path}[/]")
    console.print("\n[bold]Next steps:[/]")
    console.print(f"  1. Edit {config_path} to point at your API documents")
    console.print("  2. Run [bold]swagger-ui-redist serve[/] to preview the UI")


@app.command()
def files():
    """List the bundled Swagger UI files."""
    from swagger_ui_redist.assets import RES_DIR, StaticFile, bundled_version

    version = bundled_version()
    console.print(f"[bold]Swagger UI {version or '(version unknown)'}[/]  {RES_DIR}\n")

    table = Table()
    table.add_column("File")
    table.add_column("Content type")
    table.add_column("Size", justify="right")

    missing = 0
    for static_file in StaticFile:
        path = RES_DIR / static_file.file_name
        if path.is_file():
            size = f"{path.stat().st_size:,}"
        else:
            size = "[red]missing[/]"
            missing += 1
        table.add_row(static_file.file_name, static_file.content_type, size)

    console.print(table)
    if missing:
        console.print("\n[red]Run scripts/update_swagger_ui.py <version> to fetch missing files.[/]")
        raise typer.Exit(1)


@app.command()
def render(
    config: str = typer.Option(None, "-c", "--config", help="Path to config file."),
    output: str = typer.Option(None, "-o", "--output", help="Write the page to this file."),
):
    """Render the Swagger UI index page."""
    from pydantic import ValidationError

    from swagger_ui_redist.config.schema import SwaggerUiSettings
    from swagger_ui_redist.index import render_index

    try:
        settings = SwaggerUiSettings.load(_get_config_path(config))
    except ValidationError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)

    page = render_index(settings)
    if output:
        Path(output).write_text(page, encoding="utf-8")
        console.print(f"[green]Wrote {output}[/]")
    else:
        typer.echo(page, nl=False)


@app.command()
def resolve(
    path: str = typer.Argument(help="Request path, e.g. /swagger-ui/index.css"),
    config: str = typer.Option(None, "-c", "--config", help="Path to config file."),
):
    """Show what a request path resolves to."""
    ui = _load_ui(config)
    resolved = ui.resolve(path)

    if resolved is None:
        console.print(f"[red]{path}: not found[/]")
        raise typer.Exit(1)

    console.print(f"[green]{path}[/]  {resolved.content_type}  {len(resolved.body):,} bytes")


@app.command()
def serve(
    config: str = typer.Option(None, "-c", "--config", help="Path to config file."),
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address."),
    port: int = typer.Option(8080, "-p", "--port", help="Port."),
):
    """Preview the Swagger UI in a local FastAPI app."""
    ui = _load_ui(config)
    asyncio.run(_run_server(ui, host, port))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


async def _run_server(ui, host: str, port: int):
    """Run a FastAPI app that only serves the Swagger UI."""
    import uvicorn
    from fastapi import FastAPI
    from fastapi.responses import RedirectResponse
    from loguru import logger

    from swagger_ui_redist.integrations.fastapi import mount_swagger_ui

    api = FastAPI(title="swagger-ui-redist", docs_url=None, redoc_url=None, openapi_url=None)
    mount_swagger_ui(api, ui)

    if ui.mount_path:
        @api.get("/", include_in_schema=False)
        async def root():
            return RedirectResponse(f"{ui.mount_path}/")

    config = uvicorn.Config(api, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    logger.info(f"Serving Swagger UI on http://{host}:{port}{ui.mount_path}/")
    console.print(f"[bold green]swagger-ui-redist[/] starting on port {port}")
    console.print(f"  UI: http://{host}:{port}{ui.mount_path}/")
    for doc in ui.settings.docs:
        console.print(f"  Doc: {doc.name or doc.url} -> {ui.settings.doc_href(doc)}")

    await server.serve()


if __name__ == "__main__":
    app()
