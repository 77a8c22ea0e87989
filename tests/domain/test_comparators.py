"""Tests for temperature, time, duration and interval comparators."""

from datetime import datetime, timedelta

import pytest

from peashoot.domain.comparators import (
    TEMPERATURE_TOLERANCE_C,
    Duration,
    Interval,
    duration_comparator,
    duration_to_milliseconds,
    interval_comparator,
    temperature_comparator,
    temperature_in_range,
    time_comparator,
)
from peashoot.domain.values import Temperature, TemperatureRange, TemperatureUnit


def _c(value: float) -> Temperature:
    return Temperature(value=value, unit=TemperatureUnit.CELSIUS)


def _f(value: float) -> Temperature:
    return Temperature(value=value, unit=TemperatureUnit.FAHRENHEIT)


class TestTemperatureComparator:
    def test_equal_across_units(self) -> None:
        assert temperature_comparator.is_equal(_f(50), _c(10))
        assert temperature_comparator.is_equal(_f(32), _c(0))

    def test_equality_is_tolerant(self) -> None:
        assert temperature_comparator.is_equal(_c(10), _c(10.005))
        assert not temperature_comparator.is_equal(_c(10), _c(10.02))

    def test_ordering_is_exact(self) -> None:
        assert temperature_comparator.is_less_than(_c(10), _c(10.005))
        assert temperature_comparator.is_greater_than(_c(10.005), _c(10))

    def test_equal_and_less_than_can_both_hold(self) -> None:
        a, b = _c(10), _c(10 + TEMPERATURE_TOLERANCE_C / 2)
        assert temperature_comparator.is_equal(a, b)
        assert temperature_comparator.is_less_than(a, b)

    @pytest.mark.parametrize(("a", "b"), [(0, 1), (1, 0), (5, 5), (-3.2, -3.21)])
    def test_less_and_greater_are_exclusive(self, a: float, b: float) -> None:
        lt = temperature_comparator.is_less_than(_c(a), _c(b))
        gt = temperature_comparator.is_greater_than(_c(a), _c(b))
        assert not (lt and gt)

    def test_accepts_mappings_and_pairs(self) -> None:
        assert temperature_comparator.is_equal({"value": 50, "unit": "F"}, (10, "C"))


class TestTemperatureInRange:
    RANGE = TemperatureRange(min=_c(4), max=_c(15))

    def test_inside(self) -> None:
        assert temperature_in_range(_f(50), self.RANGE)

    def test_bounds_inclusive(self) -> None:
        assert temperature_in_range(_c(4), self.RANGE)
        assert temperature_in_range(_c(15), self.RANGE)

    def test_bounds_tolerant(self) -> None:
        assert temperature_in_range(_c(15.005), self.RANGE)
        assert temperature_in_range(_c(3.995), self.RANGE)

    def test_outside(self) -> None:
        assert not temperature_in_range(_c(15.5), self.RANGE)
        assert not temperature_in_range(_f(32), self.RANGE)


class TestTimeComparator:
    def test_ordering(self) -> None:
        now = datetime(2025, 4, 1, 12, 0)
        later = now + timedelta(seconds=1)
        assert time_comparator.is_less_than(now, later)
        assert time_comparator.is_greater_than(later, now)
        assert time_comparator.is_equal(now, datetime(2025, 4, 1, 12, 0))


class TestDuration:
    def test_flattening(self) -> None:
        assert duration_to_milliseconds(Duration(seconds=1)) == 1000
        assert duration_to_milliseconds(Duration(days=1)) == 86_400_000

    def test_year_and_month_lengths(self) -> None:
        assert duration_comparator.is_equal(Duration(years=1), Duration(days=365))
        assert duration_comparator.is_equal(Duration(months=1), Duration(days=30))

    def test_mixed_components(self) -> None:
        assert duration_comparator.is_equal(Duration(weeks=1), Duration(days=6, hours=24))
        assert duration_comparator.is_less_than(Duration(minutes=59), Duration(hours=1))
        assert duration_comparator.is_greater_than(Duration(hours=25), Duration(days=1))

    def test_negative_component_rejected(self) -> None:
        with pytest.raises(Exception):
            Duration(days=-1)


class TestIntervalComparator:
    def test_equal_needs_both_ends(self) -> None:
        start = datetime(2025, 3, 1)
        end = datetime(2025, 4, 1)
        assert interval_comparator.is_equal(
            Interval(start=start, end=end), Interval(start=start, end=end)
        )
        assert not interval_comparator.is_equal(
            Interval(start=start, end=end), Interval(start=start, end=end + timedelta(days=1))
        )
