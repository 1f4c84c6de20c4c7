"""Static files of the vendored Swagger UI release.

The release lives in ``res/`` next to this module and is read once into an
immutable :class:`AssetTable`.  Nothing here knows about mount paths or
HTTP; see :mod:`swagger_ui_redist.resolver` for that.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from loguru import logger

from swagger_ui_redist.exceptions import AssetBundleError

RES_DIR = Path(__file__).parent / "res"


class StaticFile(str, Enum):
    """Files required by the Swagger UI front end."""

    CSS = "swagger-ui.css"
    INDEX_CSS = "index.css"
    JS = "swagger-ui-bundle.js"
    STANDALONE_PRESET_JS = "swagger-ui-standalone-preset.js"
    FAVICON_16 = "favicon-16x16.png"
    FAVICON_32 = "favicon-32x32.png"

    @property
    def file_name(self) -> str:
        return self.value

    @property
    def content_type(self) -> str:
        return _CONTENT_TYPES[Path(self.value).suffix]


_CONTENT_TYPES: dict[str, str] = {
    ".css": "text/css",
    ".js": "application/javascript",
    ".png": "image/png",
}


@dataclass(frozen=True)
class StaticAsset:
    """A single bundled file."""

    path: str
    content_type: str
    body: bytes

    @classmethod
    def for_file(cls, static_file: StaticFile, body: bytes) -> "StaticAsset":
        return cls(
            path=static_file.file_name,
            content_type=static_file.content_type,
            body=bytes(body),
        )


class AssetTable(Mapping[str, StaticAsset]):
    """Read-only mapping of relative path → :class:`StaticAsset`.

    Every :class:`StaticFile` is present exactly once.
    """

    def __init__(self, assets: Mapping[StaticFile, bytes]):
        missing = [f.file_name for f in StaticFile if f not in assets]
        if missing:
            raise AssetBundleError("<in-memory>", missing)
        self._assets: Mapping[str, StaticAsset] = MappingProxyType(
            {
                f.file_name: StaticAsset.for_file(f, assets[f])
                for f in StaticFile
            }
        )

    @classmethod
    def from_directory(cls, directory: Path) -> "AssetTable":
        """Read every :class:`StaticFile` from ``directory``."""
        directory = Path(directory)
        missing = [f.file_name for f in StaticFile if not (directory / f.file_name).is_file()]
        if missing:
            raise AssetBundleError(directory, missing)

        table = cls({f: (directory / f.file_name).read_bytes() for f in StaticFile})
        logger.debug(f"Loaded {len(table)} Swagger UI assets from {directory}")
        return table

    @classmethod
    def bundled(cls) -> "AssetTable":
        """Return the table for the release shipped with this package."""
        return _load_bundled()

    def get_file(self, static_file: StaticFile) -> StaticAsset:
        return self._assets[static_file.file_name]

    def __getitem__(self, path: str) -> StaticAsset:
        return self._assets[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._assets)

    def __len__(self) -> int:
        return len(self._assets)

    def __repr__(self) -> str:
        return f"AssetTable({list(self._assets)})"


@lru_cache(maxsize=1)
def _load_bundled() -> AssetTable:
    table = AssetTable.from_directory(RES_DIR)
    logger.info(f"Swagger UI {bundled_version() or '(unknown version)'} assets loaded")
    return table


def bundled_version() -> str | None:
    """Version tag of the vendored release, as written by the update script."""
    version_file = RES_DIR / "VERSION"
    if not version_file.is_file():
        return None
    return version_file.read_text().strip() or None
