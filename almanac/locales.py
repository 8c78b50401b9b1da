"""Built-in relative-time pattern tables."""

from almanac.exceptions import UnsupportedLocaleError
from almanac.models.locale import Affix, AffixPosition, LocalePatterns

ENGLISH = LocalePatterns(
    code="en",
    today="today",
    yesterday="yesterday",
    tomorrow="tomorrow",
    conjunction="and",
    templates={
        "day_ago": "{count} day ago",
        "days_ago": "{count} days ago",
        "day_from_now": "in {count} day",
        "days_from_now": "in {count} days",
        "week_ago": "{count} week ago",
        "weeks_ago": "{count} weeks ago",
        "week_from_now": "in {count} week",
        "weeks_from_now": "in {count} weeks",
        "month_ago": "{count} month ago",
        "months_ago": "{count} months ago",
        "month_from_now": "in {count} month",
        "months_from_now": "in {count} months",
        "year_ago": "{count} year ago",
        "years_ago": "{count} years ago",
        "year_from_now": "in {count} year",
        "years_from_now": "in {count} years",
    },
    past_affix=Affix(text="ago", position=AffixPosition.SUFFIX),
    future_affix=Affix(text="in", position=AffixPosition.PREFIX),
)

DUTCH = LocalePatterns(
    code="nl",
    today="vandaag",
    yesterday="gisteren",
    tomorrow="morgen",
    conjunction="en",
    templates={
        "day_ago": "{count} dag geleden",
        "days_ago": "{count} dagen geleden",
        "day_from_now": "over {count} dag",
        "days_from_now": "over {count} dagen",
        "week_ago": "{count} week geleden",
        "weeks_ago": "{count} weken geleden",
        "week_from_now": "over {count} week",
        "weeks_from_now": "over {count} weken",
        "month_ago": "{count} maand geleden",
        "months_ago": "{count} maanden geleden",
        "month_from_now": "over {count} maand",
        "months_from_now": "over {count} maanden",
        "year_ago": "{count} jaar geleden",
        "years_ago": "{count} jaar geleden",
        "year_from_now": "over {count} jaar",
        "years_from_now": "over {count} jaar",
    },
    past_affix=Affix(text="geleden", position=AffixPosition.SUFFIX),
    future_affix=Affix(text="over", position=AffixPosition.PREFIX),
)

GERMAN = LocalePatterns(
    code="de",
    today="heute",
    yesterday="gestern",
    tomorrow="morgen",
    conjunction="und",
    templates={
        "day_ago": "vor {count} Tag",
        "days_ago": "vor {count} Tagen",
        "day_from_now": "in {count} Tag",
        "days_from_now": "in {count} Tagen",
        "week_ago": "vor {count} Woche",
        "weeks_ago": "vor {count} Wochen",
        "week_from_now": "in {count} Woche",
        "weeks_from_now": "in {count} Wochen",
        "month_ago": "vor {count} Monat",
        "months_ago": "vor {count} Monaten",
        "month_from_now": "in {count} Monat",
        "months_from_now": "in {count} Monaten",
        "year_ago": "vor {count} Jahr",
        "years_ago": "vor {count} Jahren",
        "year_from_now": "in {count} Jahr",
        "years_from_now": "in {count} Jahren",
    },
    past_affix=Affix(text="vor", position=AffixPosition.PREFIX),
    future_affix=Affix(text="in", position=AffixPosition.PREFIX),
)

BUILTIN_LOCALES: dict[str, LocalePatterns] = {
    locale.code: locale for locale in (ENGLISH, DUTCH, GERMAN)
}


def get_locale(code: str) -> LocalePatterns:
    """Get a built-in pattern table by language code.

    Region suffixes are ignored, so "nl-BE" resolves to Dutch.

    Raises:
        UnsupportedLocaleError: If no table exists for the language.
    """
    language = code.replace("_", "-").split("-")[0].lower()
    try:
        return BUILTIN_LOCALES[language]
    except KeyError:
        available = ", ".join(sorted(BUILTIN_LOCALES))
        raise UnsupportedLocaleError(
            f"Unsupported locale '{code}'. Available locales: {available}"
        ) from None
