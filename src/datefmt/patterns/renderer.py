"""Token rendering against a calendar breakdown and a locale table."""
from __future__ import annotations

from collections.abc import Callable

from datefmt.models.calendar import CalendarBreakdown
from datefmt.models.locale import LocaleTable
from datefmt.patterns.compiler import DAY_OF_MONTH, CompiledPattern, Directive, Literal


def _hour12(hour: int) -> int:
    return hour % 12 or 12


def format_offset(offset_minutes: int, *, separator: str = ":") -> str:
    """Render a UTC offset as ``±HH:MM`` (or ``±HHMM`` with an empty separator)."""
    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


_NUMERIC: dict[Directive, Callable[[CalendarBreakdown], str]] = {
    Directive.YEAR_FULL: lambda c: f"{c.year:04d}",
    Directive.YEAR_SHORT: lambda c: f"{c.year % 100:02d}",
    Directive.MONTH_PADDED: lambda c: f"{c.month:02d}",
    Directive.MONTH: lambda c: str(c.month),
    Directive.DAY_PADDED: lambda c: f"{c.day:02d}",
    Directive.DAY: lambda c: str(c.day),
    Directive.HOUR24_PADDED: lambda c: f"{c.hour:02d}",
    Directive.HOUR24: lambda c: str(c.hour),
    Directive.HOUR12_PADDED: lambda c: f"{_hour12(c.hour):02d}",
    Directive.HOUR12: lambda c: str(_hour12(c.hour)),
    Directive.MINUTE_PADDED: lambda c: f"{c.minute:02d}",
    Directive.MINUTE: lambda c: str(c.minute),
    Directive.SECOND_PADDED: lambda c: f"{c.second:02d}",
    Directive.SECOND: lambda c: str(c.second),
    Directive.MILLISECOND: lambda c: f"{c.millisecond:03d}",
    Directive.DECISECOND: lambda c: str(c.millisecond // 100),
    Directive.OFFSET: lambda c: format_offset(c.utc_offset_minutes),
    Directive.OFFSET_COMPACT: lambda c: format_offset(c.utc_offset_minutes, separator=""),
}


def _follows_day_of_month(tokens: CompiledPattern, index: int) -> bool:
    """True when tokens[index] is preceded by ``<day-of-month><whitespace>``."""
    if index < 2:
        return False
    gap, day = tokens[index - 1], tokens[index - 2]
    return (
        isinstance(gap, Literal)
        and gap.text != ""
        and gap.text.isspace()
        and day in DAY_OF_MONTH
    )


def _month_name(tokens: CompiledPattern, index: int, calendar: CalendarBreakdown,
                table: LocaleTable) -> str:
    names = table.month_names_full
    if table.month_names_genitive is not None and _follows_day_of_month(tokens, index):
        names = table.month_names_genitive
    return names[calendar.month - 1]


def render_tokens(tokens: CompiledPattern, calendar: CalendarBreakdown, table: LocaleTable) -> str:
    """Render a compiled pattern.

    When a day-period directive renders empty, one space directly before it
    (from unquoted literal text) is dropped so the output carries no stray
    whitespace for languages without that marker.
    """
    parts: list[str] = []
    for index, token in enumerate(tokens):
        if isinstance(token, Literal):
            parts.append(token.text)
            continue

        if token in _NUMERIC:
            parts.append(_NUMERIC[token](calendar))
        elif token is Directive.MONTH_NAME:
            parts.append(_month_name(tokens, index, calendar, table))
        elif token is Directive.MONTH_NAME_SHORT:
            parts.append(table.month_names_short[calendar.month - 1])
        elif token is Directive.WEEKDAY_NAME:
            parts.append(table.weekday_names_full[calendar.weekday])
        elif token is Directive.WEEKDAY_ABBREV:
            parts.append(table.weekday_names_abbrev[calendar.weekday])
        elif token is Directive.WEEKDAY_MINIMAL:
            parts.append(table.weekday_names_minimal[calendar.weekday])
        elif token in (Directive.DAY_PERIOD_LOWER, Directive.DAY_PERIOD_UPPER):
            marker = table.day_period.marker(
                calendar.hour, upper=token is Directive.DAY_PERIOD_UPPER
            )
            if not marker:
                previous = tokens[index - 1] if index else None
                if (isinstance(previous, Literal) and not previous.quoted
                        and parts and parts[-1].endswith(" ")):
                    parts[-1] = parts[-1][:-1]
            parts.append(marker)
        else:
            raise ValueError(f"Unhandled directive: {token!r}")
    return "".join(parts)
