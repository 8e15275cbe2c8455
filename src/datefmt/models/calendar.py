"""Calendar breakdown of a single point in time."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CalendarBreakdown(BaseModel):
    """Decomposed calendar fields plus the UTC offset they were read in.

    ``weekday`` counts from Sunday (0) to Saturday (6). The offset is reported
    exactly as it accompanied the input; nothing is converted between zones.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    weekday: int = Field(ge=0, le=6)
    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(ge=0, le=59)
    millisecond: int = Field(default=0, ge=0, le=999)
    utc_offset_minutes: int = 0

    @classmethod
    def from_datetime(cls, moment: datetime) -> CalendarBreakdown:
        """Read the fields of an aware ``datetime`` using its own offset."""
        offset = moment.utcoffset()
        offset_minutes = int(offset.total_seconds() // 60) if offset is not None else 0
        return cls(
            year=moment.year,
            month=moment.month,
            day=moment.day,
            weekday=(moment.weekday() + 1) % 7,
            hour=moment.hour,
            minute=moment.minute,
            second=moment.second,
            millisecond=moment.microsecond // 1000,
            utc_offset_minutes=offset_minutes,
        )
