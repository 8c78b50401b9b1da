"""The config command."""

import os
from pathlib import Path

from rich.table import Table

from almanac.config import CalendarConfig
from cli.display import console

# (section, field, environment variable)
SETTINGS = [
    ("Day Data", "data_dir", "ALMANAC_DATA_DIR"),
    ("Day Data", "data_base_url", "ALMANAC_DATA_URL"),
    ("Day Data", "fetch_timeout", "ALMANAC_FETCH_TIMEOUT"),
    ("Export", "export_dir", "ALMANAC_EXPORT_DIR"),
    ("Export", "default_calendar_name", "ALMANAC_CALENDAR_NAME"),
    ("Export", "default_domain", "ALMANAC_DOMAIN"),
    ("Logging", "log_dir", "LOG_DIR"),
    ("Logging", "log_filename", "LOG_FILENAME"),
    ("Display", "default_locale", "ALMANAC_LOCALE"),
    ("Display", "moon_default_limit", "MOON_DEFAULT_LIMIT"),
]


def _dotenv_path() -> Path | None:
    """Nearest .env in the working directory or its parents."""
    for directory in [Path.cwd(), *Path.cwd().parents]:
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return None


def _display_value(value) -> str:
    if value is None:
        return "[dim]None[/dim]"
    if isinstance(value, Path):
        return str(value.resolve())
    return str(value)


def config_command() -> None:
    """Show the effective configuration and where each value comes from."""
    cfg = CalendarConfig.from_env()
    defaults = CalendarConfig()
    env_file = _dotenv_path()

    console.print()
    console.print("[bold]Almanac configuration[/bold]")
    if env_file:
        console.print(f"[dim].env:[/dim] [cyan]{env_file}[/cyan]")
    else:
        console.print("[dim].env: not found (defaults and environment only)[/dim]")

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SECTION", style="bold")
    table.add_column("SETTING", style="cyan", no_wrap=True)
    table.add_column("SOURCE", style="dim", no_wrap=True)
    table.add_column("VALUE")

    previous_section = None
    for section, field, env_key in SETTINGS:
        value = getattr(cfg, field)
        changed = env_key in os.environ or value != getattr(defaults, field)
        table.add_row(
            section if section != previous_section else "",
            field,
            env_key if changed else "default",
            _display_value(value),
        )
        previous_section = section

    console.print()
    console.print(table)
    console.print()
