"""Display module for rendering almanac output.

This module provides:
- console: Shared Rich console instance
- DayRenderer: Day details, upcoming moon phases and month grids
- Formatting functions for dates, ISO weeks and moon symbols
"""

from cli.display.console import console
from cli.display.day_renderer import DayRenderer
from cli.display.formatters import (
    format_iso_week,
    format_long_date,
    format_moon,
    format_regions,
)

__all__ = [
    # Console
    "console",
    # Renderers
    "DayRenderer",
    # Formatters
    "format_iso_week",
    "format_long_date",
    "format_moon",
    "format_regions",
]
