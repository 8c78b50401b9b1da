"""Base classes for calendar writers."""

from typing import Protocol

from almanac.models.event import CalendarEvent


class CalendarWriter(Protocol):
    """Protocol for calendar writers."""

    def serialize(
        self, events: list[CalendarEvent], calendar_name: str, domain: str
    ) -> str:
        """Render events as a calendar document."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'ics')."""
        ...
