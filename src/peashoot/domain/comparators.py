"""Comparison contracts and concrete comparators.

A :class:`Comparator` answers equality; a :class:`ScalarComparator` adds
strict ordering.  Comparators are plain stateless objects so a single
module-level instance can be shared by every caller.

Temperature equality is tolerant: two temperatures are equal when their
Celsius values differ by less than :data:`TEMPERATURE_TOLERANCE_C`.
Ordering is exact.  Near the tolerance boundary ``is_equal`` and
``is_less_than`` (or ``is_greater_than``) can therefore both be true for
the same pair; only ``is_less_than`` and ``is_greater_than`` are
mutually exclusive.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from pydantic import Field, StrictFloat

from peashoot.domain.base import DomainModel
from peashoot.domain.values import TemperatureLike, TemperatureRange, to_celsius

TEMPERATURE_TOLERANCE_C = 0.01


class Comparator[T](Protocol):
    def is_equal(self, a: T, b: T) -> bool: ...


class ScalarComparator[T](Comparator[T], Protocol):
    def is_less_than(self, a: T, b: T) -> bool: ...

    def is_greater_than(self, a: T, b: T) -> bool: ...


# ---------------------------------------------------------------------------
# Temperature
# ---------------------------------------------------------------------------


class TemperatureComparator:
    """Unit-normalizing comparator over temperatures."""

    def is_equal(self, a: TemperatureLike, b: TemperatureLike) -> bool:
        return abs(to_celsius(a) - to_celsius(b)) < TEMPERATURE_TOLERANCE_C

    def is_less_than(self, a: TemperatureLike, b: TemperatureLike) -> bool:
        return to_celsius(a) < to_celsius(b)

    def is_greater_than(self, a: TemperatureLike, b: TemperatureLike) -> bool:
        return to_celsius(a) > to_celsius(b)


temperature_comparator: ScalarComparator[TemperatureLike] = TemperatureComparator()


def temperature_in_range(temperature: TemperatureLike, temperature_range: TemperatureRange) -> bool:
    """Inclusive range membership, tolerant at both bounds."""
    cmp = temperature_comparator
    above_min = cmp.is_greater_than(temperature, temperature_range.min) or cmp.is_equal(
        temperature, temperature_range.min
    )
    below_max = cmp.is_less_than(temperature, temperature_range.max) or cmp.is_equal(
        temperature, temperature_range.max
    )
    return above_min and below_max


# ---------------------------------------------------------------------------
# Time, duration, interval
# ---------------------------------------------------------------------------

_SECOND_MS = 1000
_MINUTE_MS = 60 * _SECOND_MS
_HOUR_MS = 60 * _MINUTE_MS
_DAY_MS = 24 * _HOUR_MS


class TimeComparator:
    def is_equal(self, a: datetime, b: datetime) -> bool:
        return a == b

    def is_less_than(self, a: datetime, b: datetime) -> bool:
        return a < b

    def is_greater_than(self, a: datetime, b: datetime) -> bool:
        return a > b


time_comparator: ScalarComparator[datetime] = TimeComparator()


class Duration(DomainModel):
    """Calendar-style duration; every component is optional."""

    years: StrictFloat = Field(default=0, ge=0)
    months: StrictFloat = Field(default=0, ge=0)
    weeks: StrictFloat = Field(default=0, ge=0)
    days: StrictFloat = Field(default=0, ge=0)
    hours: StrictFloat = Field(default=0, ge=0)
    minutes: StrictFloat = Field(default=0, ge=0)
    seconds: StrictFloat = Field(default=0, ge=0)


def duration_to_milliseconds(duration: Duration) -> float:
    """Flatten *duration* to milliseconds (year = 365 days, month = 30 days)."""
    return (
        duration.years * 365 * _DAY_MS
        + duration.months * 30 * _DAY_MS
        + duration.weeks * 7 * _DAY_MS
        + duration.days * _DAY_MS
        + duration.hours * _HOUR_MS
        + duration.minutes * _MINUTE_MS
        + duration.seconds * _SECOND_MS
    )


class DurationComparator:
    def is_equal(self, a: Duration, b: Duration) -> bool:
        return duration_to_milliseconds(a) == duration_to_milliseconds(b)

    def is_less_than(self, a: Duration, b: Duration) -> bool:
        return duration_to_milliseconds(a) < duration_to_milliseconds(b)

    def is_greater_than(self, a: Duration, b: Duration) -> bool:
        return duration_to_milliseconds(a) > duration_to_milliseconds(b)


duration_comparator: ScalarComparator[Duration] = DurationComparator()


class Interval(DomainModel):
    start: datetime
    end: datetime


class IntervalComparator:
    def is_equal(self, a: Interval, b: Interval) -> bool:
        return time_comparator.is_equal(a.start, b.start) and time_comparator.is_equal(
            a.end, b.end
        )


interval_comparator: Comparator[Interval] = IntervalComparator()
