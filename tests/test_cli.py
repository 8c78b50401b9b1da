"""Tests for the almanac command line interface."""

import json
import logging

import pytest
from typer.testing import CliRunner

from cli.parser import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(monkeypatch, tmp_path, data_dir):
    """Point the CLI at test data and restore logging afterwards."""
    monkeypatch.setenv("ALMANAC_DATA_DIR", str(data_dir))
    monkeypatch.setenv("ALMANAC_EXPORT_DIR", str(tmp_path / "exports"))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def bundle_file(tmp_path, bundle_data):
    path = tmp_path / "bundle.json"
    path.write_text(json.dumps(bundle_data), encoding="utf-8")
    return path


def test_relative_command():
    result = runner.invoke(app, ["relative", "2025-03-09", "--ref", "2025-03-20"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "1 week and 4 days ago"


def test_relative_command_locale():
    result = runner.invoke(
        app, ["relative", "2025-03-09", "--ref", "2025-03-20", "--locale", "de"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "vor 1 Woche und 4 Tagen"


def test_relative_command_default_locale_from_env(monkeypatch):
    monkeypatch.setenv("ALMANAC_LOCALE", "nl")
    result = runner.invoke(app, ["relative", "2025-03-20", "--ref", "2025-03-20"])
    assert result.stdout.strip() == "vandaag"


def test_relative_command_bad_date():
    result = runner.invoke(app, ["relative", "09-03-2025"])
    assert result.exit_code == 2


def test_relative_command_unknown_locale():
    result = runner.invoke(app, ["relative", "2025-03-09", "--locale", "fr"])
    assert result.exit_code == 1


def test_week_command():
    result = runner.invoke(app, ["week", "2024-12-31"])
    assert result.exit_code == 0
    assert "Week 1 of 2025" in result.stdout
    assert "belongs to ISO year 2025" in result.stdout


def test_day_command():
    result = runner.invoke(app, ["day", "2025-12-25"])
    assert result.exit_code == 0
    assert "Thursday 25 December 2025" in result.stdout
    assert "Christmas" in result.stdout
    assert "Utrecht" in result.stdout


def test_day_command_without_data():
    result = runner.invoke(app, ["day", "2031-05-01"])
    assert result.exit_code == 0
    assert "No data for this day" in result.stdout


def test_moon_command():
    result = runner.invoke(app, ["moon", "--from", "2025-12-10", "--limit", "2"])
    assert result.exit_code == 0
    assert "New moon" in result.stdout
    assert "First quarter" in result.stdout
    assert "Full moon" not in result.stdout


def test_month_command():
    result = runner.invoke(app, ["month", "2025", "12"])
    assert result.exit_code == 0
    assert "December 2025" in result.stdout
    assert "Christmas" in result.stdout


def test_month_command_needs_both_arguments():
    result = runner.invoke(app, ["month", "2025"])
    assert result.exit_code == 2


def test_export_command(tmp_path, bundle_file):
    out = tmp_path / "out"
    result = runner.invoke(
        app, ["export", str(bundle_file), "--school", "--region", "north", "-o", str(out)]
    )
    assert result.exit_code == 0
    assert "Exported ICS" in result.stdout

    content = (out / "calendar.ics").read_text(encoding="utf-8")
    assert "UID:20251225-christmas@calendar.local" in content
    assert "Kerstvakantie (Noord)" in content
    assert "Voorjaarsvakantie" not in content


def test_export_command_uses_configured_directory(tmp_path, bundle_file):
    result = runner.invoke(app, ["export", str(bundle_file)])
    assert result.exit_code == 0
    assert (tmp_path / "exports" / "calendar.ics").exists()


def test_export_command_nothing_selected(tmp_path, bundle_file):
    result = runner.invoke(app, ["export", str(bundle_file), "--no-public"])
    assert result.exit_code == 0
    assert "Nothing to export" in result.stdout
    assert not (tmp_path / "exports").exists()


def test_export_command_missing_file(tmp_path):
    result = runner.invoke(app, ["export", str(tmp_path / "missing.json")])
    assert result.exit_code == 1


def test_export_command_invalid_bundle(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"holidays": "Christmas"}), encoding="utf-8")
    result = runner.invoke(app, ["export", str(path)])
    assert result.exit_code == 1


def test_config_command():
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "Almanac configuration" in result.stdout
    assert "data_dir" in result.stdout
    assert "moon_default_limit" in result.stdout


def test_logging_goes_to_log_file(tmp_path):
    runner.invoke(app, ["day", "2031-05-01"])
    log_file = tmp_path / "logs" / "almanac.log"
    assert log_file.exists()
    assert "No day data for 2031" in log_file.read_text(encoding="utf-8")
