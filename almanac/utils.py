"""Utility functions for the almanac."""

import re
from datetime import date

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """
    Lowercase slug for use in event UIDs.

    Runs of characters outside [a-z0-9] collapse to one hyphen and
    leading/trailing hyphens are trimmed:

        slugify("Kerstvakantie (Noord)")  # "kerstvakantie-noord"

    Args:
        text: Free text such as a holiday name

    Returns:
        Slug string (may be empty)
    """
    return _NON_SLUG.sub("-", text.lower()).strip("-")


def compact_date(d: date) -> str:
    """Format a date as YYYYMMDD."""
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"
