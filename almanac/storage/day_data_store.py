"""Per-year day data cache and lookup."""

import logging
from datetime import date
from enum import Enum
from typing import Any

from pydantic import ValidationError

from almanac.calendar_math import parse_iso_date
from almanac.exceptions import DayDataError
from almanac.models.day import DayRecord
from almanac.storage.fetchers import YearFetcher

logger = logging.getLogger(__name__)


class YearStatus(str, Enum):
    """Cache state of one year."""

    NOT_FETCHED = "not_fetched"
    EMPTY = "empty"
    LOADED = "loaded"


class YearCache:
    """In-memory map of year to its day records.

    Entries are never evicted. An empty mapping means the year was fetched
    and had no data (or failed), which is distinct from never fetched.
    """

    def __init__(self):
        self._years: dict[int, dict[str, DayRecord]] = {}

    def status(self, year: int) -> YearStatus:
        if year not in self._years:
            return YearStatus.NOT_FETCHED
        if not self._years[year]:
            return YearStatus.EMPTY
        return YearStatus.LOADED

    def get(self, year: int) -> dict[str, DayRecord] | None:
        """Records for a year, or None if it was never fetched."""
        return self._years.get(year)

    def put(self, year: int, records: dict[str, DayRecord]) -> None:
        self._years[year] = records

    def years(self) -> list[int]:
        return sorted(self._years)

    def __contains__(self, year: int) -> bool:
        return year in self._years


def decode_year(payload: Any) -> dict[str, DayRecord]:
    """Validate a raw year document into day records.

    Raises:
        DayDataError: If the document is not an object of day records.
    """
    if not isinstance(payload, dict):
        raise DayDataError(f"Expected an object keyed by date, got {type(payload).__name__}")
    try:
        return {key: DayRecord.model_validate(value) for key, value in payload.items()}
    except ValidationError as e:
        raise DayDataError(f"Invalid day record: {e}") from e


class DayDataStore:
    """Lazily fetches and memoizes per-year day data.

    A failed or malformed fetch is cached as an empty year and not retried.
    Concurrent loads of the same year are not coalesced; the last one to
    finish owns the cache slot.
    """

    def __init__(self, fetcher: YearFetcher, cache: YearCache | None = None):
        self.fetcher = fetcher
        self.cache = cache if cache is not None else YearCache()

    async def load_year(self, year: int) -> dict[str, DayRecord]:
        """Records for a year, fetching on first use."""
        cached = self.cache.get(year)
        if cached is not None:
            return cached

        try:
            records = decode_year(await self.fetcher.fetch(year))
            logger.debug(f"Loaded {len(records)} day records for {year}")
        except DayDataError as e:
            logger.warning(f"No day data for {year}: {e}")
            records = {}

        self.cache.put(year, records)
        return records

    async def get_day(self, day: date | str) -> DayRecord | None:
        """Record for a date or ISO date string, None if there is none.

        Raises:
            DateParseError: If a string is not a valid YYYY-MM-DD date.
        """
        if isinstance(day, str):
            day = parse_iso_date(day).unwrap()
        records = await self.load_year(day.year)
        return records.get(day.isoformat())

    def cached_day(self, day: date) -> DayRecord | None:
        """Record from the cache only; None if absent or not fetched."""
        records = self.cache.get(day.year)
        if records is None:
            return None
        return records.get(day.isoformat())
