"""Storage layer for day data."""

from almanac.storage.day_data_store import DayDataStore, YearCache, YearStatus
from almanac.storage.fetchers import FileYearFetcher, HttpYearFetcher, YearFetcher

__all__ = [
    "DayDataStore",
    "FileYearFetcher",
    "HttpYearFetcher",
    "YearCache",
    "YearFetcher",
    "YearStatus",
]
