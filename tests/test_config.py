"""Tests for configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from almanac.config import CalendarConfig


def test_calendar_config_defaults():
    """Test CalendarConfig default values."""
    config = CalendarConfig()
    assert config.data_dir == Path("data")
    assert config.data_base_url is None
    assert config.fetch_timeout is None
    assert config.export_dir == Path("exports")
    assert config.default_domain == "calendar.local"
    assert config.default_calendar_name == "Calendar"
    assert config.log_filename == "almanac.log"
    assert config.default_locale == "en"
    assert config.moon_default_limit == 4


def test_calendar_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("ALMANAC_DATA_DIR", "/srv/almanac/data")
    monkeypatch.setenv("ALMANAC_DATA_URL", "https://example.com")
    monkeypatch.setenv("ALMANAC_FETCH_TIMEOUT", "2.5")
    monkeypatch.setenv("ALMANAC_EXPORT_DIR", "/tmp/exports")
    monkeypatch.setenv("ALMANAC_DOMAIN", "example.com")
    monkeypatch.setenv("ALMANAC_CALENDAR_NAME", "Feestdagen")
    monkeypatch.setenv("LOG_DIR", "/var/log/almanac")
    monkeypatch.setenv("LOG_FILENAME", "cli.log")
    monkeypatch.setenv("ALMANAC_LOCALE", "nl")
    monkeypatch.setenv("MOON_DEFAULT_LIMIT", "8")

    config = CalendarConfig.from_env()
    assert config.data_dir == Path("/srv/almanac/data")
    assert config.data_base_url == "https://example.com"
    assert config.fetch_timeout == 2.5
    assert config.export_dir == Path("/tmp/exports")
    assert config.default_domain == "example.com"
    assert config.default_calendar_name == "Feestdagen"
    assert config.log_dir == Path("/var/log/almanac")
    assert config.log_filename == "cli.log"
    assert config.default_locale == "nl"
    assert config.moon_default_limit == 8


def test_calendar_config_empty_data_url_is_ignored(monkeypatch):
    monkeypatch.setenv("ALMANAC_DATA_URL", "")
    assert CalendarConfig.from_env().data_base_url is None


@pytest.mark.parametrize("value", ["invalid", "0", "-3"])
def test_calendar_config_invalid_moon_limit(monkeypatch, value):
    """Invalid MOON_DEFAULT_LIMIT falls back to the default."""
    monkeypatch.setenv("MOON_DEFAULT_LIMIT", value)
    assert CalendarConfig.from_env().moon_default_limit == 4


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_calendar_config_invalid_fetch_timeout(monkeypatch, value):
    monkeypatch.setenv("ALMANAC_FETCH_TIMEOUT", value)
    assert CalendarConfig.from_env().fetch_timeout is None


def test_calendar_config_validates_fields():
    with pytest.raises(ValidationError):
        CalendarConfig(moon_default_limit=0)
    with pytest.raises(ValidationError):
        CalendarConfig(fetch_timeout=-1)
