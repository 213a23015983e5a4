"""Tests for the build_site command-line entry point.

Covers argument parsing, exit codes and logging setup.
"""

import logging
from pathlib import Path

import pytest

import folio.build_site as cli
from folio.config import DEFAULT_TEMPLATES_DIR


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def quiet_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda *a, **k: calls.append((a, k)))
    return calls


@pytest.fixture(autouse=True)
def locale_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.locale, "setlocale", lambda *a: calls.append(a))
    return calls


def test_setup_logging_filehandler_error(monkeypatch, restore_root_logging):
    class BadFH:
        def __init__(self, *a, **k):
            raise OSError("fh error")

    monkeypatch.setattr(cli.logging, "FileHandler", BadFH)
    cli.setup_logging("DEBUG", enable_file=True)
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_console_only(restore_root_logging):
    cli.setup_logging("warning", enable_file=False)
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.content is None
    assert args.ratings is None
    assert args.no_resort is False
    assert args.no_assets is False
    assert args.log_level == "INFO"


def test_parse_args_flags():
    args = cli.parse_args(
        ["--content", "c", "--category", "review", "--ratings", "--no-resort", "--visible-count", "4"]
    )
    assert args.content == Path("c")
    assert args.category == "review"
    assert args.ratings is True
    assert args.no_resort is True
    assert args.visible_count == 4


def test_main_builds_site(tmp_path: Path, quiet_logging, make_item, make_published):
    content = tmp_path / "content"
    make_item(content, "a", make_published("A", "2024-01-01"))
    out = tmp_path / "public"
    code = cli.main(
        [
            "--content", str(content),
            "--output", str(out),
            "--templates", str(DEFAULT_TEMPLATES_DIR),
            "--no-assets",
            "--category", "review",
            "--ratings",
            "--year", "2030",
        ]
    )
    assert code == 0
    assert (out / "review" / "a.html").exists()
    assert "&copy; 2030" in (out / "index.html").read_text(encoding="utf-8")
    assert quiet_logging


def test_main_invalid_configuration(quiet_logging, caplog):
    assert cli.main(["--category", "../etc"]) == 1
    assert "Invalid configuration" in caplog.text


def test_main_run_level_failure(tmp_path: Path, quiet_logging):
    code = cli.main(
        ["--content", str(tmp_path / "missing"), "--output", str(tmp_path / "out"), "--no-assets"]
    )
    assert code == 1


def test_main_passes_resort_flag(monkeypatch, quiet_logging):
    seen = {}

    def fake_run(config):
        seen["config"] = config
        return True

    monkeypatch.setattr(cli, "run_from_config", fake_run)
    assert cli.main(["--no-resort", "--visible-count", "2"]) == 0
    assert seen["config"].supports_interactive_resort is False
    assert seen["config"].visible_count == 2


def test_main_applies_user_time_locale(monkeypatch, quiet_logging, locale_calls):
    monkeypatch.setattr(cli, "run_from_config", lambda config: True)
    assert cli.main([]) == 0
    assert locale_calls == [(cli.locale.LC_TIME, "")]


def test_main_tolerates_unknown_locale(monkeypatch, quiet_logging, caplog):
    def bad_setlocale(*args):
        raise cli.locale.Error("unsupported locale setting")

    monkeypatch.setattr(cli.locale, "setlocale", bad_setlocale)
    monkeypatch.setattr(cli, "run_from_config", lambda config: True)
    assert cli.main([]) == 0
    assert "Could not apply the user locale" in caplog.text
