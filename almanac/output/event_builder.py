"""Turn an export bundle and filter selection into calendar events."""

import logging

from almanac.models.day import HolidayType
from almanac.models.event import CalendarEvent, EventCategory
from almanac.models.export import ExportBundle, ExportSchoolHoliday, ExportSelection
from almanac.utils import compact_date, slugify

logger = logging.getLogger(__name__)


class ICSEventBuilder:
    """Builds the normalized, deduplicated event list for export.

    Events come out in category order (public holidays, observances,
    school holidays), each category in bundle order. A UID seen twice keeps
    its first event.
    """

    def build(
        self, bundle: ExportBundle, selection: ExportSelection
    ) -> list[CalendarEvent]:
        """Build events for the selected categories.

        Args:
            bundle: Holidays, school holidays and region catalog.
            selection: Categories and regions to include.

        Returns:
            Events to export; empty if nothing is selected or matched.
        """
        if not selection.any_selected:
            logger.debug("No export category selected")
            return []

        events: list[CalendarEvent] = []
        if selection.include_public:
            events.extend(self._holiday_events(bundle, HolidayType.PUBLIC))
        if selection.include_observances:
            events.extend(self._holiday_events(bundle, HolidayType.OBSERVANCE))
        if selection.include_school:
            events.extend(self._school_events(bundle, selection))

        return self._deduplicate(events)

    def _holiday_events(
        self, bundle: ExportBundle, holiday_type: HolidayType
    ) -> list[CalendarEvent]:
        category = (
            EventCategory.HOLIDAY
            if holiday_type == HolidayType.PUBLIC
            else EventCategory.OBSERVANCE
        )
        events = []
        for holiday in bundle.holidays:
            if holiday.type != holiday_type.value:
                continue
            events.append(
                CalendarEvent.all_day(
                    uid=f"{compact_date(holiday.date)}-{slugify(holiday.name)}",
                    first_day=holiday.date,
                    last_day=holiday.date,
                    summary=holiday.name,
                    category=category,
                )
            )
        return events

    def _school_events(
        self, bundle: ExportBundle, selection: ExportSelection
    ) -> list[CalendarEvent]:
        selected = selection.regions
        if selected is None:
            selected = bundle.referenced_regions()

        names = bundle.region_names()
        events = []
        for span in bundle.school_holidays:
            matched = matched_regions(span, selected)
            if not matched:
                continue

            label = ", ".join(names.get(rid, rid) for rid in matched)
            uid = "-".join(
                [
                    compact_date(span.start),
                    slugify(span.name),
                    slugify("-".join(matched)),
                ]
            )
            events.append(
                CalendarEvent.all_day(
                    uid=uid,
                    first_day=span.start,
                    last_day=span.end,
                    summary=f"{span.name} ({label})",
                    category=EventCategory.SCHOOL_HOLIDAY,
                )
            )
        return events

    @staticmethod
    def _deduplicate(events: list[CalendarEvent]) -> list[CalendarEvent]:
        seen: set[str] = set()
        unique = []
        for event in events:
            if event.uid in seen:
                logger.debug(f"Dropping duplicate event {event.uid}")
                continue
            seen.add(event.uid)
            unique.append(event)
        return unique


def matched_regions(span: ExportSchoolHoliday, selected: set[str]) -> list[str]:
    """Regions of a span that are selected, in the span's own order."""
    return [rid for rid in span.regions if rid in selected]
