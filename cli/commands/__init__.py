"""CLI commands package."""

from cli.commands.config import config_command
from cli.commands.day import day_command
from cli.commands.export import export_command
from cli.commands.month import month_command
from cli.commands.moon import moon_command
from cli.commands.relative import relative_command
from cli.commands.week import week_command

__all__ = [
    "config_command",
    "day_command",
    "export_command",
    "month_command",
    "moon_command",
    "relative_command",
    "week_command",
]
