"""Tests for static asset copying."""

from pathlib import Path

import pytest

from folio.config import DEFAULT_ASSETS_DIR
from folio.exceptions import ConfigurationError
from folio.pipeline.site_builder.assets import copy_static_assets


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_copies_styles_recursively_and_scripts(tmp_path: Path):
    assets = tmp_path / "assets"
    _write(assets / "styles" / "main.css", "body {}")
    _write(assets / "styles" / "components" / "cards.css", ".card {}")
    _write(assets / "styles" / "notes.md", "ignored")
    _write(assets / "js" / "main.js", "console.log(1);")
    _write(assets / "js" / "nested" / "skip.js", "ignored")
    out = tmp_path / "public"

    copied = copy_static_assets(assets, out)

    assert (out / "styles" / "main.css").read_text(encoding="utf-8") == "body {}"
    assert (out / "styles" / "components" / "cards.css").exists()
    assert (out / "js" / "main.js").exists()
    assert not (out / "styles" / "notes.md").exists()
    assert not (out / "js" / "nested").exists()
    assert len(copied) == 3


def test_missing_scripts_directory_is_optional(tmp_path: Path):
    assets = tmp_path / "assets"
    _write(assets / "styles" / "main.css", "body {}")
    copied = copy_static_assets(assets, tmp_path / "public")
    assert copied == [tmp_path / "public" / "styles" / "main.css"]


def test_missing_styles_directory_is_fatal(tmp_path: Path):
    (tmp_path / "assets" / "js").mkdir(parents=True)
    with pytest.raises(ConfigurationError):
        copy_static_assets(tmp_path / "assets", tmp_path / "public")


def test_copy_failure_is_configuration_error(monkeypatch, tmp_path: Path):
    def boom(src, dst):
        raise OSError("read-only")

    monkeypatch.setattr("shutil.copyfile", boom)
    with pytest.raises(ConfigurationError):
        copy_static_assets(DEFAULT_ASSETS_DIR, tmp_path / "public")


def test_shipped_assets_copy(tmp_path: Path):
    copy_static_assets(DEFAULT_ASSETS_DIR, tmp_path)
    assert (tmp_path / "styles" / "main.css").exists()
    assert (tmp_path / "js" / "main.js").exists()
