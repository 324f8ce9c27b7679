"""Locale-aware timestamp formatting for datestamp badges."""
from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from babel import Locale
from babel.dates import format_date, format_time, get_datetime_format

from .models import DatestampOptions


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_datestamp(instant: datetime, options: DatestampOptions) -> str:
    """Render ``instant`` as a human-readable timestamp.

    The date and time parts are formatted independently with their own CLDR
    styles and then joined using the locale's date-time pattern for the date
    style. The connector comes from the installed CLDR data, e.g. recent
    releases give ``"Wednesday, January 1, 2025, 12:00:00 AM UTC"`` for
    ``en-US`` full/long. Naive instants are treated as UTC.
    """

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    zone = ZoneInfo(options.timezone.zone_key)
    local = instant.astimezone(zone)
    locale = Locale.parse(options.locale.babel_identifier)

    date_text = format_date(local.date(), format=options.date_style.value, locale=locale)
    time_text = format_time(local, format=options.time_style.value, tzinfo=zone, locale=locale)
    pattern = get_datetime_format(options.date_style.value, locale=locale)
    return pattern.replace("'", "").replace("{0}", time_text).replace("{1}", date_text).strip()


__all__ = ["format_datestamp", "utc_now"]
