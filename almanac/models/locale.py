"""Locale pattern tables for relative date phrases."""

from enum import Enum

from pydantic import BaseModel, Field

from almanac.exceptions import MissingLocaleKeyError

COUNT_PLACEHOLDER = "{count}"
UNITS = ("day", "week", "month", "year")


class AffixPosition(str, Enum):
    """Where a direction marker sits relative to the quantity."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


class Affix(BaseModel):
    """Direction marker such as "ago" (suffix) or "vor" (prefix)."""

    text: str
    position: AffixPosition

    def apply(self, phrase: str) -> str:
        """Attach the marker to a bare "N unit" phrase."""
        if self.position == AffixPosition.PREFIX:
            return f"{self.text} {phrase}"
        return f"{phrase} {self.text}"

    def strip(self, phrase: str) -> str:
        """Remove the marker from a phrase if present (case-insensitive)."""
        if self.position == AffixPosition.PREFIX:
            head = self.text + " "
            if phrase.lower().startswith(head.lower()):
                return phrase[len(head):].lstrip()
        else:
            tail = " " + self.text
            if phrase.lower().endswith(tail.lower()):
                return phrase[: -len(tail)].rstrip()
        return phrase


class LocalePatterns(BaseModel):
    """Relative-time phrases for one language.

    ``templates`` holds the per-unit templates keyed ``{unit}_ago``,
    ``{unit}s_ago``, ``{unit}_from_now`` and ``{unit}s_from_now``, each
    containing a ``{count}`` placeholder. The affixes state where the
    language puts its direction marker; tables that omit them fall back to
    inference from the day templates.
    """

    code: str
    today: str
    yesterday: str
    tomorrow: str
    conjunction: str = "and"
    templates: dict[str, str] = Field(default_factory=dict)
    past_affix: Affix | None = None
    future_affix: Affix | None = None

    @classmethod
    def from_table(cls, code: str, table: dict) -> "LocalePatterns":
        """Build patterns from a flat translation table.

        The table uses the keys of the page translations: ``today``,
        ``yesterday``, ``tomorrow``, ``and`` plus the unit templates.
        Optional ``past_affix`` / ``future_affix`` entries are passed through.
        """
        reserved = {"today", "yesterday", "tomorrow", "and", "past_affix", "future_affix"}
        missing = [key for key in ("today", "yesterday", "tomorrow") if key not in table]
        if missing:
            raise MissingLocaleKeyError(missing[0], code)

        return cls(
            code=code,
            today=table["today"],
            yesterday=table["yesterday"],
            tomorrow=table["tomorrow"],
            conjunction=table.get("and", "and"),
            templates={k: v for k, v in table.items() if k not in reserved},
            past_affix=table.get("past_affix"),
            future_affix=table.get("future_affix"),
        )

    def template(self, key: str) -> str:
        """Look up a unit template.

        Raises:
            MissingLocaleKeyError: If the table has no such template.
        """
        try:
            return self.templates[key]
        except KeyError:
            raise MissingLocaleKeyError(key, self.code) from None

    def render(self, key: str, count: int) -> str:
        """Render a unit template with its count substituted."""
        return self.template(key).replace(COUNT_PLACEHOLDER, str(count))
