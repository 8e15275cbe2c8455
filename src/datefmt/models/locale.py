"""Locale data types for month/weekday names and day-period markers.

A ``LocaleTable`` is registered once at start-up and never mutated; the
renderer only ever reads from it.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

MonthNames = Annotated[tuple[str, ...], Field(min_length=12, max_length=12)]
WeekdayNames = Annotated[tuple[str, ...], Field(min_length=7, max_length=7)]


class DayPeriod(BaseModel):
    """Markers for the two halves of the day.

    Either marker may be empty for languages that leave that half unmarked.
    The ``*_upper`` overrides exist for languages whose marker has no distinct
    uppercase spelling; when unset, the uppercase form is ``str.upper()``.
    """

    model_config = ConfigDict(frozen=True)

    am: str = ""
    pm: str = ""
    am_upper: str | None = None
    pm_upper: str | None = None

    def marker(self, hour: int, *, upper: bool = False) -> str:
        if hour < 12:
            text, override = self.am, self.am_upper
        else:
            text, override = self.pm, self.pm_upper
        if not upper:
            return text
        return override if override is not None else text.upper()


class LocaleTable(BaseModel):
    """Month and weekday names for one language.

    Weekday lists start on Sunday. ``month_names_genitive`` holds the
    declined forms used after a day-of-month (Slavic languages); ``None``
    means the language does not decline month names.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    month_names_full: MonthNames
    month_names_short: MonthNames
    weekday_names_full: WeekdayNames
    weekday_names_abbrev: WeekdayNames
    weekday_names_minimal: WeekdayNames
    day_period: DayPeriod = Field(default_factory=DayPeriod)
    month_names_genitive: MonthNames | None = None
