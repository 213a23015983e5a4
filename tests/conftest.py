"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Isolates every test from ``FOLIO_*`` environment variables and the
  project ``.env`` file.
- Provides helpers for building content trees under ``tmp_path``.
"""

import json
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from folio.config import DEFAULT_ASSETS_DIR, DEFAULT_TEMPLATES_DIR  # noqa: E402
from folio.pipeline.site_builder.config import SiteConfig  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path_factory):
    """Clear FOLIO_* variables and point the .env lookup at a missing file."""
    for name in list(os.environ):
        if name.startswith("FOLIO_"):
            monkeypatch.delenv(name, raising=False)
    missing_env = tmp_path_factory.mktemp("env") / ".env"
    monkeypatch.setattr("folio.config.ENV_FILE", missing_env)


def write_item(
    content_dir: Path,
    item_id: str,
    metadata: dict | str | None,
    body: str | None = "# Body\n\nSome text.",
) -> Path:
    """Create ``content_dir/item_id`` with metadata.json and content.md.

    ``metadata`` may be a dict (JSON-encoded), a raw string (written as-is,
    for malformed input) or ``None`` (file omitted). ``body=None`` omits
    the markdown file.
    """
    item_dir = content_dir / item_id
    item_dir.mkdir(parents=True, exist_ok=True)
    if metadata is not None:
        text = metadata if isinstance(metadata, str) else json.dumps(metadata)
        (item_dir / "metadata.json").write_text(text, encoding="utf-8")
    if body is not None:
        (item_dir / "content.md").write_text(body, encoding="utf-8")
    return item_dir


def published(title: str, date: str, /, **extra) -> dict:
    """Return a minimal published metadata record."""
    record = {
        "title": title,
        "description": f"About {title}",
        "date": date,
        "tags": ["python"],
        "status": "published",
    }
    record.update(extra)
    return record


@pytest.fixture
def make_item():
    return write_item


@pytest.fixture
def make_published():
    return published


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    path = tmp_path / "content"
    path.mkdir()
    return path


@pytest.fixture
def site_config(tmp_path: Path, content_dir: Path) -> SiteConfig:
    """Config wired to the shipped templates and assets with a fixed year."""
    return SiteConfig(
        content_dir=content_dir,
        output_dir=tmp_path / "public",
        templates_dir=DEFAULT_TEMPLATES_DIR,
        assets_dir=DEFAULT_ASSETS_DIR,
        current_year=2025,
    )
