"""Shared fixtures."""

from __future__ import annotations

import pytest

from swagger_ui_redist.assets import AssetTable, StaticFile


def fake_asset_bytes(static_file: StaticFile) -> bytes:
    return f"/* fake {static_file.file_name} */".encode()


@pytest.fixture
def assets() -> AssetTable:
    """Asset table with small stand-ins for the vendored release."""
    return AssetTable({f: fake_asset_bytes(f) for f in StaticFile})


@pytest.fixture
def res_dir(tmp_path, monkeypatch):
    """Point the bundled asset directory at a populated temp dir."""
    from swagger_ui_redist import assets as assets_module

    for f in StaticFile:
        (tmp_path / f.file_name).write_bytes(fake_asset_bytes(f))
    monkeypatch.setattr(assets_module, "RES_DIR", tmp_path)
    assets_module._load_bundled.cache_clear()
    yield tmp_path
    assets_module._load_bundled.cache_clear()
