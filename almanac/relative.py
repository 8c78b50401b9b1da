"""Relative date phrases ("3 days ago", "in 2 months and 1 week")."""

import logging
from datetime import date

from almanac.calendar_math import day_count, field_difference
from almanac.exceptions import MissingLocaleKeyError
from almanac.models.dates import DateDifference, Direction, RelativeLabel
from almanac.models.locale import (
    COUNT_PLACEHOLDER,
    Affix,
    AffixPosition,
    LocalePatterns,
)

logger = logging.getLogger(__name__)

# Up to this many days the phrase is a flat day count
FLAT_DAY_LIMIT = 10

ENGLISH_PAST_AFFIX = Affix(text="ago", position=AffixPosition.SUFFIX)
ENGLISH_FUTURE_AFFIX = Affix(text="in", position=AffixPosition.PREFIX)

# Markers stripped from unit fragments when the locale's own affix is absent
KNOWN_AFFIXES = (
    Affix(text="over", position=AffixPosition.PREFIX),
    Affix(text="in", position=AffixPosition.PREFIX),
    Affix(text="vor", position=AffixPosition.PREFIX),
    Affix(text="geleden", position=AffixPosition.SUFFIX),
    Affix(text="ago", position=AffixPosition.SUFFIX),
)


def infer_affix(template: str | None) -> Affix | None:
    """Guess the direction marker from a template's shape.

    Text before ``{count}`` is a prefix ("vor {count} Tagen"). Otherwise
    whatever follows the unit word after ``{count}`` is a suffix
    ("{count} dagen geleden").
    """
    if not template or COUNT_PLACEHOLDER not in template:
        return None

    before, _, after = template.partition(COUNT_PLACEHOLDER)
    before = before.strip()
    if before:
        return Affix(text=before, position=AffixPosition.PREFIX)

    words = after.split()
    if len(words) >= 2:
        return Affix(text=" ".join(words[1:]), position=AffixPosition.SUFFIX)
    return None


def resolve_affixes(patterns: LocalePatterns) -> tuple[Affix, Affix]:
    """Past and future affixes for a locale.

    Explicit affixes win. Missing ones are inferred from the ``days_ago`` /
    ``days_from_now`` templates and default to English.
    """
    past = patterns.past_affix
    future = patterns.future_affix
    if past is None:
        past = infer_affix(patterns.templates.get("days_ago")) or ENGLISH_PAST_AFFIX
        logger.debug(f"Inferred past affix {past.text!r} for locale {patterns.code}")
    if future is None:
        future = infer_affix(patterns.templates.get("days_from_now")) or ENGLISH_FUTURE_AFFIX
        logger.debug(f"Inferred future affix {future.text!r} for locale {patterns.code}")
    return past, future


def unit_key(unit: str, count: int, past: bool) -> str:
    """Template key for a unit, e.g. ``weeks_ago`` or ``day_from_now``."""
    name = unit if count == 1 else unit + "s"
    return f"{name}_ago" if past else f"{name}_from_now"


def join_parts(parts: list[str], conjunction: str) -> str:
    """Join phrases as "a", "a and b" or "a, b and c"."""
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return f"{parts[0]} {conjunction} {parts[1]}"
    return f"{', '.join(parts[:-1])} {conjunction} {parts[-1]}"


class RelativeTextFormatter:
    """Render a date relative to a reference date in one locale.

    Usage:
        formatter = RelativeTextFormatter(get_locale("en"))
        formatter.format(date(2025, 3, 9), date(2025, 3, 20)).text
        # "1 week and 4 days ago"
    """

    def __init__(self, patterns: LocalePatterns):
        self.patterns = patterns
        self.past_affix, self.future_affix = resolve_affixes(patterns)

    def format(self, target: date, reference: date | None = None) -> RelativeLabel:
        """Relative label for ``target`` as seen from ``reference`` (default today)."""
        reference = reference or date.today()
        count = day_count(reference, target)

        if count == 0:
            return RelativeLabel(text=self.patterns.today, direction=Direction.SAME_DAY, days=0)

        direction = Direction.PAST if count < 0 else Direction.FUTURE
        if count == -1:
            text = self.patterns.yesterday
        elif count == 1:
            text = self.patterns.tomorrow
        elif abs(count) <= FLAT_DAY_LIMIT:
            text = self.format_days(count)
        else:
            text = self._format_chunked(target, reference, count)

        return RelativeLabel(text=text, direction=direction, days=count)

    def text(self, target: date, reference: date | None = None) -> str:
        """Shorthand for ``format(...).text``."""
        return self.format(target, reference).text

    def format_days(self, count: int) -> str:
        """Flat day-count phrase, e.g. "in 4 days".

        Raises:
            MissingLocaleKeyError: If the day template is missing.
        """
        absolute = abs(count)
        return self.patterns.render(unit_key("day", absolute, count < 0), absolute)

    def _format_chunked(self, target: date, reference: date, count: int) -> str:
        """Multi-unit phrase for distances beyond the flat day limit."""
        past = count < 0
        if past:
            diff = field_difference(target, reference)
        else:
            diff = field_difference(reference, target)

        if diff.is_zero:
            return self.format_days(count)

        try:
            parts = self._unit_fragments(diff, past)
        except MissingLocaleKeyError as e:
            logger.warning(f"{e}; falling back to day count")
            return self.format_days(count)

        affix = self.past_affix if past else self.future_affix
        return affix.apply(join_parts(parts, self.patterns.conjunction))

    def _unit_fragments(self, diff: DateDifference, past: bool) -> list[str]:
        """Bare "N unit" fragments for every non-zero unit."""
        affix = self.past_affix if past else self.future_affix
        fragments = []
        for unit, value in diff.units():
            rendered = self.patterns.render(unit_key(unit, value, past), value)
            fragments.append(self._strip_affix(rendered, affix))
        return fragments

    @staticmethod
    def _strip_affix(text: str, affix: Affix) -> str:
        stripped = affix.strip(text)
        if stripped != text:
            return stripped
        for known in KNOWN_AFFIXES:
            stripped = known.strip(text)
            if stripped != text:
                return stripped
        return text


def format_relative(
    target: date, patterns: LocalePatterns, reference: date | None = None
) -> str:
    """Relative phrase for ``target`` in the given locale."""
    return RelativeTextFormatter(patterns).text(target, reference)
