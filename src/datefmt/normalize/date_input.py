"""Date argument discrimination and normalization to a ``CalendarBreakdown``.

The public entry point accepts an absent date, a ``datetime``/``date``, an
epoch-millisecond number or date text. ``classify_date`` turns the raw
argument into one of the tagged variants below exactly once; everything
downstream dispatches on the variant type instead of inspecting the value.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
import math

from datefmt.errors import ArgumentTypeError, InvalidDateError
from datefmt.models.calendar import CalendarBreakdown
from datefmt.normalize.text_parsing import parse_date_text
from datefmt.normalize.zones import localize, now_in, to_local
from datefmt.utils.logging import get_logger

logger = get_logger(__name__)

DATE_TYPE_MESSAGE = "date must be an instant, epoch-millisecond number, or date text"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class _AbsentType:
    """Sentinel for an omitted date argument (distinct from ``None``)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _AbsentType()


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class Instant:
    value: datetime | date


@dataclass(frozen=True)
class EpochMillis:
    value: int | float


@dataclass(frozen=True)
class Text:
    value: str


DateInput = Absent | Instant | EpochMillis | Text


def classify_date(value: object) -> DateInput:
    """Discriminate a raw date argument into its tagged variant.

    Raises:
        ArgumentTypeError: *value* is none of the accepted shapes. ``None``
            and ``bool`` are rejected explicitly.
    """
    if value is ABSENT:
        return Absent()
    if isinstance(value, (datetime, date)):
        return Instant(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return EpochMillis(value)
    if isinstance(value, str):
        return Text(value)
    raise ArgumentTypeError(DATE_TYPE_MESSAGE)


class DateNormalizer:
    """Turns a ``DateInput`` into a ``CalendarBreakdown``.

    ``local_zone`` is the zone used for absent dates, epoch numbers and
    offset-less inputs; ``None`` selects the host's local zone. ``clock``
    supplies "now" and defaults to the wall clock in the local zone.
    """

    def __init__(self, local_zone: tzinfo | None = None,
                 clock: Callable[[], datetime] | None = None):
        self._zone = local_zone
        self._clock = clock or (lambda: now_in(self._zone))

    def normalize(self, date_input: DateInput) -> CalendarBreakdown:
        if isinstance(date_input, Absent):
            moment = self._clock()
            if moment.tzinfo is None:
                moment = localize(moment, self._zone)
        elif isinstance(date_input, Instant):
            moment = self._from_instant(date_input.value)
        elif isinstance(date_input, EpochMillis):
            moment = self._from_epoch_millis(date_input.value)
        elif isinstance(date_input, Text):
            moment = self._from_text(date_input.value)
        else:
            raise ArgumentTypeError(DATE_TYPE_MESSAGE)
        return CalendarBreakdown.from_datetime(moment)

    def _from_instant(self, value: datetime | date) -> datetime:
        if not isinstance(value, datetime):
            value = datetime(value.year, value.month, value.day)
        if value.tzinfo is not None and value.utcoffset() is not None:
            return value
        try:
            return localize(value.replace(tzinfo=None), self._zone)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidDateError(f"Instant outside the supported range: {value!r}") from exc

    def _from_epoch_millis(self, value: int | float) -> datetime:
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidDateError(f"Epoch milliseconds must be finite, got {value!r}")
        millis = int(value)  # truncates toward zero
        try:
            return to_local(EPOCH + timedelta(milliseconds=millis), self._zone)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidDateError(f"Epoch milliseconds out of range: {value!r}") from exc

    def _from_text(self, value: str) -> datetime:
        try:
            return parse_date_text(value, self._zone)
        except InvalidDateError:
            logger.debug("date_text_rejected", text=value)
            raise
