"""Core data models for status badge requests."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Type, TypeVar

_E = TypeVar("_E", bound=Enum)


def _parse_choice(
    enum_cls: Type[_E],
    value: Optional[str],
    *,
    default: Optional[_E] = None,
    fold: Optional[Callable[[str], str]] = None,
) -> Optional[_E]:
    """Map a raw string onto ``enum_cls`` or return ``None`` when it does not fit.

    Whitespace is trimmed. An empty value resolves to ``default`` (which may be
    ``None`` for choices without one). When ``fold`` is given both sides are
    folded before comparing, otherwise the match is exact.
    """

    candidate = (value or "").strip()
    if not candidate:
        return default
    if fold is None:
        return next((member for member in enum_cls if member.value == candidate), None)
    folded = fold(candidate)
    return next((member for member in enum_cls if fold(member.value) == folded), None)


class BadgeType(str, Enum):
    """Supported badge types; each drives its own field rules and color."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    PASSING = "PASSING"
    FAILING = "FAILING"
    DATESTAMP = "DATESTAMP"
    INFORMATION = "INFORMATION"
    WARNING = "WARNING"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["BadgeType"]:
        # No default: an empty badge type is never valid.
        return _parse_choice(cls, value, fold=str.upper)


class BadgeStyle(str, Enum):
    PLASTIC = "plastic"
    FLAT = "flat"
    FLAT_SQUARE = "flat-square"
    FOR_THE_BADGE = "for-the-badge"
    SOCIAL = "social"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["BadgeStyle"]:
        return _parse_choice(cls, value, default=cls.FOR_THE_BADGE, fold=str.lower)


class DatestampFormat(str, Enum):
    """Locales accepted for datestamp badges. Matching is case-sensitive."""

    ENGLISH_UNITED_STATES = "en-US"
    ENGLISH_UNITED_KINGDOM = "en-GB"
    GERMAN_GERMANY = "de-DE"
    FRENCH_FRANCE = "fr-FR"
    SPANISH_SPAIN = "es-ES"
    JAPANESE_JAPAN = "ja-JP"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["DatestampFormat"]:
        return _parse_choice(cls, value, default=cls.ENGLISH_UNITED_STATES)

    @property
    def babel_identifier(self) -> str:
        return self.value.replace("-", "_")


class DatestampTimezone(str, Enum):
    """Timezones accepted for datestamp badges. Matching ignores case."""

    UTC = "UTC"
    US_ALASKA = "US/Alaska"
    US_ALEUTIAN = "US/Aleutian"
    US_ARIZONA = "US/Arizona"
    US_CENTRAL = "US/Central"
    US_EAST_INDIANA = "US/East_Indiana"
    US_EASTERN = "US/Eastern"
    US_HAWAII = "US/Hawaii"
    US_INDIANA_STARKE = "US/Indiana_Starke"
    US_MICHIGAN = "US/Michigan"
    US_MOUNTAIN = "US/Mountain"
    US_PACIFIC = "US/Pacific"
    US_PACIFIC_NEW = "US/Pacific_New"
    US_SAMOA = "US/Samoa"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["DatestampTimezone"]:
        return _parse_choice(cls, value, default=cls.UTC, fold=str.casefold)

    @property
    def zone_key(self) -> str:
        """Key to load from the tz database."""

        return _ZONE_KEYS.get(self, self.value)


# tzdata spells these links with hyphens. US/Pacific_New was dropped in 2020b
# and always aliased US/Pacific.
_ZONE_KEYS = {
    DatestampTimezone.US_EAST_INDIANA: "US/East-Indiana",
    DatestampTimezone.US_INDIANA_STARKE: "US/Indiana-Starke",
    DatestampTimezone.US_PACIFIC_NEW: "US/Pacific",
}


class DatestampDateStyle(str, Enum):
    MEDIUM = "medium"
    FULL = "full"
    LONG = "long"
    SHORT = "short"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["DatestampDateStyle"]:
        return _parse_choice(cls, value, default=cls.MEDIUM, fold=str.lower)


class DatestampTimeStyle(str, Enum):
    MEDIUM = "medium"
    FULL = "full"
    LONG = "long"
    SHORT = "short"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["DatestampTimeStyle"]:
        return _parse_choice(cls, value, default=cls.LONG, fold=str.lower)


@dataclass(frozen=True)
class BadgeRequest:
    """Raw, unvalidated inputs for a single badge."""

    badge_type: Optional[str] = None
    label: Optional[str] = None
    message: Optional[str] = None
    badge_style: Optional[str] = None
    datestamp_format: Optional[str] = None
    datestamp_timezone: Optional[str] = None
    datestamp_datestyle: Optional[str] = None
    datestamp_timestyle: Optional[str] = None


@dataclass(frozen=True)
class DatestampOptions:
    locale: DatestampFormat = DatestampFormat.ENGLISH_UNITED_STATES
    timezone: DatestampTimezone = DatestampTimezone.UTC
    date_style: DatestampDateStyle = DatestampDateStyle.MEDIUM
    time_style: DatestampTimeStyle = DatestampTimeStyle.LONG


@dataclass(frozen=True)
class BadgeFormat:
    """Fully resolved badge, ready for a renderer."""

    label: str
    message: str
    color: str
    style: BadgeStyle


__all__ = [
    "BadgeFormat",
    "BadgeRequest",
    "BadgeStyle",
    "BadgeType",
    "DatestampDateStyle",
    "DatestampFormat",
    "DatestampOptions",
    "DatestampTimeStyle",
    "DatestampTimezone",
]
