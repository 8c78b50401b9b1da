"""Shared CLI context with lazy-initialized dependencies."""

from almanac.calendar_query import DayQuery
from almanac.config import CalendarConfig
from almanac.locales import get_locale
from almanac.output.download import ExportTrigger
from almanac.relative import RelativeTextFormatter
from almanac.storage.day_data_store import DayDataStore
from almanac.storage.fetchers import FileYearFetcher, HttpYearFetcher, YearFetcher


class CLIContext:
    """Config, day data store and export trigger shared by one CLI run.

    Everything is built on first access, so commands that only do date
    arithmetic never touch the data directory or the network:

        ctx = CLIContext()
        record = asyncio.run(ctx.store.get_day("2025-12-25"))
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.verbose = verbose
        self.quiet = quiet

        self._config: CalendarConfig | None = None
        self._store: DayDataStore | None = None
        self._query: DayQuery | None = None
        self._export_trigger: ExportTrigger | None = None

    @property
    def config(self) -> CalendarConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = CalendarConfig.from_env()
        return self._config

    @property
    def fetcher(self) -> YearFetcher:
        """HTTP fetcher when a data URL is configured, file fetcher otherwise."""
        if self.config.data_base_url:
            return HttpYearFetcher(self.config.data_base_url, timeout=self.config.fetch_timeout)
        return FileYearFetcher(self.config.data_dir)

    @property
    def store(self) -> DayDataStore:
        """Get day data store (lazy-loaded)."""
        if self._store is None:
            self._store = DayDataStore(self.fetcher)
        return self._store

    @property
    def query(self) -> DayQuery:
        """Get day query helper (lazy-loaded)."""
        if self._query is None:
            self._query = DayQuery(self.store)
        return self._query

    @property
    def export_trigger(self) -> ExportTrigger:
        """Get export trigger (lazy-loaded)."""
        if self._export_trigger is None:
            self._export_trigger = ExportTrigger()
        return self._export_trigger

    def formatter(self, locale: str | None = None) -> RelativeTextFormatter:
        """Relative text formatter for a locale (config default if omitted).

        Raises:
            UnsupportedLocaleError: If the locale has no pattern table.
        """
        return RelativeTextFormatter(get_locale(locale or self.config.default_locale))


_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Context installed by the app callback.

    Raises:
        RuntimeError: If called before the callback ran.
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    global _ctx
    _ctx = ctx
