"""Configuration for the almanac."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class CalendarConfig(BaseModel):
    """Almanac configuration with Pydantic validation."""

    # Day data
    data_dir: Path = Field(default=Path("data"))
    data_base_url: str | None = None
    fetch_timeout: float | None = Field(default=None, gt=0)

    # Export
    export_dir: Path = Field(default=Path("exports"))
    default_domain: str = Field(default="calendar.local")
    default_calendar_name: str = Field(default="Calendar")

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="almanac.log")

    # Display
    default_locale: str = Field(default="en")
    moon_default_limit: int = Field(default=4, ge=1)

    @classmethod
    def from_env(cls) -> "CalendarConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Day data
        if "ALMANAC_DATA_DIR" in os.environ:
            config_dict["data_dir"] = Path(os.environ["ALMANAC_DATA_DIR"])
        if os.environ.get("ALMANAC_DATA_URL"):
            config_dict["data_base_url"] = os.environ["ALMANAC_DATA_URL"]
        if "ALMANAC_FETCH_TIMEOUT" in os.environ:
            try:
                timeout = float(os.environ["ALMANAC_FETCH_TIMEOUT"])
                if timeout > 0:
                    config_dict["fetch_timeout"] = timeout
            except ValueError:
                pass  # Keep default if invalid

        # Export
        if "ALMANAC_EXPORT_DIR" in os.environ:
            config_dict["export_dir"] = Path(os.environ["ALMANAC_EXPORT_DIR"])
        if "ALMANAC_DOMAIN" in os.environ:
            config_dict["default_domain"] = os.environ["ALMANAC_DOMAIN"]
        if "ALMANAC_CALENDAR_NAME" in os.environ:
            config_dict["default_calendar_name"] = os.environ["ALMANAC_CALENDAR_NAME"]

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Display
        if "ALMANAC_LOCALE" in os.environ:
            config_dict["default_locale"] = os.environ["ALMANAC_LOCALE"]
        if "MOON_DEFAULT_LIMIT" in os.environ:
            try:
                limit = int(os.environ["MOON_DEFAULT_LIMIT"])
                if limit >= 1:
                    config_dict["moon_default_limit"] = limit
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)
