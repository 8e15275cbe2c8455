"""Bounded grammar for textual dates.

Two families of input are recognised:

* ISO 8601: ``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD`` and date-times with an
  optional fraction and an optional ``Z`` / ``±HH:MM`` / ``±HHMM`` / ``±HH`` offset.
* Human-readable: ``[Weekday,] D Month YYYY`` or ``Month D[,] YYYY`` with an
  optional time, ``am``/``pm`` and a zone (abbreviation or numeric offset).

Missing time-of-day is midnight, a missing month or day is the first, and a
missing zone is the local zone. A stated zone is reported as-is.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
import re

from datefmt.errors import InvalidDateError
from datefmt.normalize.zones import localize

ISO_PATTERN = re.compile(
    r"""^(?P<year>\d{4})
    (?:-(?P<month>\d{2})
      (?:-(?P<day>\d{2})
        (?:[T\s](?P<hour>\d{2}):(?P<minute>\d{2})
          (?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?
          \s*(?P<offset>Z|[+-]\d{2}(?::?\d{2})?)?
        )?
      )?
    )?$""",
    re.VERBOSE | re.IGNORECASE,
)

HUMAN_PATTERN = re.compile(
    r"""^(?:[a-z]+\.?,?\s+)??
    (?:
      (?P<day_first>\d{1,2})\s+(?P<month_second>[a-z]+)\.?,?\s+(?P<year_a>\d{4})
      |
      (?P<month_first>[a-z]+)\.?\s+(?P<day_second>\d{1,2})(?:st|nd|rd|th)?,?\s+(?P<year_b>\d{4})
    )
    (?:,?\s+(?P<hour>\d{1,2}):(?P<minute>\d{2})
      (?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?
      (?:\s*(?P<meridiem>am|pm))?
    )?
    (?:\s+(?P<zone>(?:GMT|UTC)?[+-]\d{2}(?::?\d{2})?|[a-z]{1,4}))?$""",
    re.VERBOSE | re.IGNORECASE,
)

MONTHS = {
    name: number
    for number, full in enumerate(
        ["january", "february", "march", "april", "may", "june", "july",
         "august", "september", "october", "november", "december"],
        start=1,
    )
    for name in (full, full[:3])
}
MONTHS["sept"] = 9

WEEKDAYS = {"sun", "mon", "tue", "tues", "wed", "thu", "thur", "thurs", "fri", "sat",
            "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"}

# Zone abbreviation → offset in minutes
ZONE_ABBREVIATIONS = {
    "UTC": 0, "GMT": 0, "UT": 0, "Z": 0,
    "EST": -300, "EDT": -240,
    "CST": -360, "CDT": -300,
    "MST": -420, "MDT": -360,
    "PST": -480, "PDT": -420,
    "CET": 60, "CEST": 120,
    "EET": 120, "EEST": 180,
    "MSK": 180,
}

_NUMERIC_OFFSET = re.compile(r'^(?:GMT|UTC)?(?P<sign>[+-])(?P<hours>\d{2})(?::?(?P<minutes>\d{2}))?$', re.IGNORECASE)


def parse_offset(raw: str) -> int:
    """Parse ``Z``, a zone abbreviation or a numeric offset into minutes east of UTC."""
    key = raw.upper()
    if key in ZONE_ABBREVIATIONS:
        return ZONE_ABBREVIATIONS[key]
    match = _NUMERIC_OFFSET.match(raw)
    if not match:
        raise InvalidDateError(f"Unknown time zone: {raw}", text=raw)
    hours, minutes = int(match.group("hours")), int(match.group("minutes") or 0)
    if minutes > 59:
        raise InvalidDateError(f"Invalid UTC offset: {raw}", text=raw)
    total = hours * 60 + minutes
    return -total if match.group("sign") == "-" else total


def _microseconds(fraction: str | None) -> int:
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def _assemble(text: str, fields: dict, offset_minutes: int | None, local_zone: tzinfo | None) -> datetime:
    try:
        naive = datetime(
            fields["year"], fields["month"], fields["day"],
            fields["hour"], fields["minute"], fields["second"], fields["microsecond"],
        )
        if offset_minutes is None:
            return localize(naive, local_zone)
        return naive.replace(tzinfo=timezone(timedelta(minutes=offset_minutes)))
    except (ValueError, OverflowError, OSError) as exc:
        raise InvalidDateError(f"Invalid calendar date: {text}", text=text) from exc


def _parse_iso(text: str, match: re.Match, local_zone: tzinfo | None) -> datetime:
    fields = {
        "year": int(match["year"]),
        "month": int(match["month"] or 1),
        "day": int(match["day"] or 1),
        "hour": int(match["hour"] or 0),
        "minute": int(match["minute"] or 0),
        "second": int(match["second"] or 0),
        "microsecond": _microseconds(match["fraction"]),
    }
    offset = parse_offset(match["offset"]) if match["offset"] else None
    return _assemble(text, fields, offset, local_zone)


def _parse_human(text: str, match: re.Match, local_zone: tzinfo | None) -> datetime:
    month_name = (match["month_second"] or match["month_first"]).lower()
    if month_name not in MONTHS:
        raise InvalidDateError(f"Unknown month name in date: {text}", text=text)

    hour = int(match["hour"] or 0)
    meridiem = (match["meridiem"] or "").lower()
    if meridiem:
        if not 1 <= hour <= 12:
            raise InvalidDateError(f"Invalid 12-hour time in date: {text}", text=text)
        hour = hour % 12 + (12 if meridiem == "pm" else 0)

    fields = {
        "year": int(match["year_a"] or match["year_b"]),
        "month": MONTHS[month_name],
        "day": int(match["day_first"] or match["day_second"]),
        "hour": hour,
        "minute": int(match["minute"] or 0),
        "second": int(match["second"] or 0),
        "microsecond": _microseconds(match["fraction"]),
    }
    offset = parse_offset(match["zone"]) if match["zone"] else None
    return _assemble(text, fields, offset, local_zone)


def _leading_word(text: str) -> str | None:
    word = re.match(r'^([a-z]+)\.?,?\s', text, re.IGNORECASE)
    return word.group(1).lower() if word else None


def parse_date_text(raw_string: str, local_zone: tzinfo | None = None) -> datetime:
    """Parse date text into an aware ``datetime``.

    Raises:
        InvalidDateError: the text matches neither grammar or names an
            impossible calendar point.
    """
    s = raw_string.strip()

    iso_match = ISO_PATTERN.match(s)
    if iso_match:
        return _parse_iso(raw_string, iso_match, local_zone)

    human_match = HUMAN_PATTERN.match(s)
    if human_match:
        # A leading word is only allowed when it is a weekday name.
        leading = _leading_word(s)
        if leading is not None and leading not in MONTHS and leading not in WEEKDAYS:
            raise InvalidDateError(f"Cannot parse date: {raw_string}", text=raw_string)
        return _parse_human(raw_string, human_match, local_zone)

    raise InvalidDateError(f"Cannot parse date: {raw_string}", text=raw_string)
