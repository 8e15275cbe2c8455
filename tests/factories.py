"""Test data factories for building test objects."""
from datefmt.models.calendar import CalendarBreakdown
from datefmt.models.locale import DayPeriod, LocaleTable


def make_breakdown(**overrides) -> CalendarBreakdown:
    """Saturday 2022-12-31 23:59:59 UTC unless overridden."""
    fields = {
        "year": 2022,
        "month": 12,
        "day": 31,
        "weekday": 6,
        "hour": 23,
        "minute": 59,
        "second": 59,
        "millisecond": 0,
        "utc_offset_minutes": 0,
    }
    fields.update(overrides)
    return CalendarBreakdown(**fields)


def make_locale_table(code: str = "xx", am: str = "AM", pm: str = "PM",
                      genitive: bool = False) -> LocaleTable:
    months = tuple(f"month{n}" for n in range(1, 13))
    return LocaleTable(
        code=code,
        month_names_full=months,
        month_names_short=tuple(f"m{n}" for n in range(1, 13)),
        weekday_names_full=tuple(f"weekday{n}" for n in range(7)),
        weekday_names_abbrev=tuple(f"wd{n}" for n in range(7)),
        weekday_names_minimal=tuple(f"w{n}" for n in range(7)),
        day_period=DayPeriod(am=am, pm=pm),
        month_names_genitive=tuple(f"of-month{n}" for n in range(1, 13)) if genitive else None,
    )
