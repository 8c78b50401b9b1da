"""ICS file writer for exported calendars."""

from icalendar import Parameters, vDate, vText
from icalendar.parser import Contentline

from almanac.models.event import CalendarEvent

CRLF = "\r\n"
MAX_LINE_OCTETS = 75
MEDIA_TYPE = "text/calendar;charset=utf-8"


def fold_line(line: str, limit: int = MAX_LINE_OCTETS) -> str:
    """Fold a content line to at most ``limit`` octets per physical line.

    The first physical line carries up to ``limit`` octets; each
    continuation is a single space followed by up to ``limit - 1`` octets.
    UTF-8 characters are never split.
    """
    if len(line.encode("utf-8")) <= limit:
        return line

    parts = []
    current: list[str] = []
    size = 0
    budget = limit
    for char in line:
        width = len(char.encode("utf-8"))
        if size + width > budget:
            parts.append("".join(current))
            current = []
            size = 0
            budget = limit - 1
        current.append(char)
        size += width
    parts.append("".join(current))
    return (CRLF + " ").join(parts)


def unfold_lines(text: str) -> list[str]:
    """Split a document into logical content lines, undoing folding."""
    return text.replace(CRLF + " ", "").split(CRLF)


def _text_line(name: str, value: str) -> str:
    return Contentline.from_parts(name, Parameters(), vText(value))


def _date_line(name: str, value) -> str:
    return Contentline.from_parts(name, Parameters({"VALUE": "DATE"}), vDate(value))


class ICSWriter:
    """Writer for RFC 5545 calendar documents of all-day events."""

    def serialize(
        self,
        events: list[CalendarEvent],
        calendar_name: str,
        domain: str,
    ) -> str:
        """Render events as an ICS document.

        Args:
            events: Events to include, in output order.
            calendar_name: Value of X-WR-CALNAME.
            domain: Domain used in PRODID and as the UID suffix.

        Returns:
            ICS text with CRLF-terminated, folded content lines.
        """
        lines = [
            "BEGIN:VCALENDAR",
            _text_line("VERSION", "2.0"),
            _text_line("PRODID", f"-//{domain}//Calendar//EN"),
            _text_line("CALSCALE", "GREGORIAN"),
            _text_line("METHOD", "PUBLISH"),
            _text_line("X-WR-CALNAME", calendar_name),
        ]

        for event in events:
            lines.extend(
                [
                    "BEGIN:VEVENT",
                    _text_line("UID", f"{event.uid}@{domain}"),
                    _date_line("DTSTART", event.dtstart),
                    _date_line("DTEND", event.dtend),
                    _text_line("SUMMARY", event.summary),
                    _text_line("CATEGORIES", event.category.value),
                    _text_line("TRANSP", "TRANSPARENT"),
                    "END:VEVENT",
                ]
            )

        lines.append("END:VCALENDAR")
        return "".join(fold_line(line) + CRLF for line in lines)

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"
