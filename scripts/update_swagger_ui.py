"""Fetch a Swagger UI release into swagger_ui_redist/res.

Usage: python scripts/update_swagger_ui.py v5.20.8
"""

from __future__ import annotations

import re
from pathlib import Path

import httpx
import typer
from rich.console import Console

ROOT = Path(__file__).resolve().parent.parent
RES_DIR = ROOT / "swagger_ui_redist" / "res"
README = ROOT / "README.md"

RAW_URL = "https://raw.githubusercontent.com/swagger-api/swagger-ui/refs/tags/{version}/{path}"

# Destination file name -> path inside the upstream repository.
RELEASE_FILES: dict[str, str] = {
    "LICENSE": "LICENSE",
    "swagger-ui.css": "dist/swagger-ui.css",
    "index.css": "dist/index.css",
    "swagger-ui-bundle.js": "dist/swagger-ui-bundle.js",
    "swagger-ui-standalone-preset.js": "dist/swagger-ui-standalone-preset.js",
    "favicon-16x16.png": "dist/favicon-16x16.png",
    "favicon-32x32.png": "dist/favicon-32x32.png",
}

console = Console()


def main(version: str = typer.Argument(help="Upstream release tag, e.g. v5.20.8")):
    """Download the release files and record the version."""
    RES_DIR.mkdir(parents=True, exist_ok=True)

    with httpx.Client(timeout=60, follow_redirects=True) as client:
        for name, upstream_path in RELEASE_FILES.items():
            url = RAW_URL.format(version=version, path=upstream_path)
            resp = client.get(url)
            if resp.status_code != 200:
                console.print(f"[red]Failed to fetch {url}: HTTP {resp.status_code}[/]")
                raise typer.Exit(1)
            (RES_DIR / name).write_bytes(resp.content)
            console.print(f"  {name}  {len(resp.content):,} bytes")

    (RES_DIR / "VERSION").write_text(f"{version}\n")

    if README.exists():
        text = README.read_text()
        text = re.sub(
            r"<!-- version -->.*$",
            f"<!-- version -->The version of Swagger UI included in this package is {version}.",
            text,
            flags=re.MULTILINE,
        )
        README.write_text(text)

    console.print(f"[green]Swagger UI {version} written to {RES_DIR}[/]")


if __name__ == "__main__":
    typer.run(main)
