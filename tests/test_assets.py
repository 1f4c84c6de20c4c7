"""Tests for the bundled asset table."""

from __future__ import annotations

import pytest

from swagger_ui_redist.assets import AssetTable, StaticAsset, StaticFile, bundled_version
from swagger_ui_redist.exceptions import AssetBundleError, SwaggerUiError


class TestStaticFile:
    def test_file_names(self):
        assert StaticFile.CSS.file_name == "swagger-ui.css"
        assert StaticFile.INDEX_CSS.file_name == "index.css"
        assert StaticFile.JS.file_name == "swagger-ui-bundle.js"
        assert StaticFile.STANDALONE_PRESET_JS.file_name == "swagger-ui-standalone-preset.js"
        assert StaticFile.FAVICON_16.file_name == "favicon-16x16.png"
        assert StaticFile.FAVICON_32.file_name == "favicon-32x32.png"

    def test_content_types(self):
        assert StaticFile.CSS.content_type == "text/css"
        assert StaticFile.INDEX_CSS.content_type == "text/css"
        assert StaticFile.JS.content_type == "application/javascript"
        assert StaticFile.STANDALONE_PRESET_JS.content_type == "application/javascript"
        assert StaticFile.FAVICON_16.content_type == "image/png"

    def test_six_files(self):
        assert len(list(StaticFile)) == 6


class TestAssetTable:
    def test_maps_every_file(self, assets):
        assert len(assets) == 6
        assert set(assets) == {f.file_name for f in StaticFile}

    def test_asset_fields(self, assets):
        asset = assets["swagger-ui.css"]
        assert isinstance(asset, StaticAsset)
        assert asset.path == "swagger-ui.css"
        assert asset.content_type == "text/css"
        assert asset.body == b"/* fake swagger-ui.css */"

    def test_get_file(self, assets):
        assert assets.get_file(StaticFile.JS) is assets["swagger-ui-bundle.js"]

    def test_read_only(self, assets):
        with pytest.raises(TypeError):
            assets["evil.js"] = StaticAsset("evil.js", "application/javascript", b"")

    def test_asset_is_frozen(self, assets):
        with pytest.raises(AttributeError):
            assets["index.css"].body = b"changed"

    def test_unknown_path(self, assets):
        assert assets.get("nope.css") is None
        assert "nope.css" not in assets

    def test_incomplete_mapping(self):
        with pytest.raises(AssetBundleError) as exc_info:
            AssetTable({StaticFile.CSS: b""})
        assert "index.css" in exc_info.value.missing
        assert "swagger-ui.css" not in exc_info.value.missing


class TestFromDirectory:
    def test_reads_files(self, tmp_path):
        for f in StaticFile:
            (tmp_path / f.file_name).write_bytes(f.file_name.encode() * 2)

        table = AssetTable.from_directory(tmp_path)
        assert table["favicon-32x32.png"].body == b"favicon-32x32.pngfavicon-32x32.png"

    def test_missing_files(self, tmp_path):
        (tmp_path / "swagger-ui.css").write_text("body {}")

        with pytest.raises(AssetBundleError) as exc_info:
            AssetTable.from_directory(tmp_path)

        err = exc_info.value
        assert isinstance(err, SwaggerUiError)
        assert err.directory == tmp_path
        assert len(err.missing) == 5
        assert "update_swagger_ui.py" in str(err)


class TestBundled:
    def test_loads_from_res_dir(self, res_dir):
        table = AssetTable.bundled()
        assert table["index.css"].body == b"/* fake index.css */"

    def test_cached(self, res_dir):
        assert AssetTable.bundled() is AssetTable.bundled()

    def test_version_unknown(self, res_dir):
        assert bundled_version() is None

    def test_version_file(self, res_dir):
        (res_dir / "VERSION").write_text("v5.20.8\n")
        assert bundled_version() == "v5.20.8"


class TestShippedRelease:
    """The files vendored in the package itself."""

    @pytest.fixture(autouse=True)
    def _fresh_cache(self):
        from swagger_ui_redist import assets as assets_module

        assets_module._load_bundled.cache_clear()
        yield
        assets_module._load_bundled.cache_clear()

    def test_shipped_release_complete(self):
        from swagger_ui_redist.assets import RES_DIR

        table = AssetTable.bundled()
        for static_file in StaticFile:
            assert table.get_file(static_file).body
        assert (RES_DIR / "LICENSE").is_file()

    def test_shipped_version_recorded(self):
        assert bundled_version().startswith("v5.")

    def test_favicons_are_png(self):
        table = AssetTable.bundled()
        for static_file in (StaticFile.FAVICON_16, StaticFile.FAVICON_32):
            assert table.get_file(static_file).body.startswith(b"\x89PNG")
