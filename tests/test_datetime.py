"""Tests for DateTime construction, accessors and factories."""

from __future__ import annotations

from datetime import date

import pytest

from kindtime.core.date import Date
from kindtime.core.datetime import DateTime
from kindtime.core.duration import Duration
from kindtime.core.time import Time
from kindtime.errors import (
    InvalidCalendarDateError,
    TicksOutOfRangeError,
    UnsupportedKindTagError,
)
from kindtime.units.kind import DateTimeKind


class TestDateTimeConstruction:
    """Test DateTime construction."""

    def test_basic_construction(self) -> None:
        dt = DateTime(2024, 1, 15, 14, 30, 45)
        assert dt.year == 2024
        assert dt.month == 1
        assert dt.day == 15
        assert dt.hour == 14
        assert dt.minute == 30
        assert dt.second == 45
        assert dt.millisecond == 0
        assert dt.kind is DateTimeKind.UNSPECIFIED

    def test_construction_with_defaults(self) -> None:
        dt = DateTime(2024, 1, 15)
        assert (dt.hour, dt.minute, dt.second, dt.nanosecond) == (0, 0, 0, 0)

    def test_sub_second_fields(self) -> None:
        dt = DateTime(2024, 3, 5, 10, 15, 30, 250, 500)
        assert dt.millisecond == 250
        assert dt.microsecond == 250_500
        assert dt.nanosecond == 250_500_000

    @pytest.mark.parametrize("kind", [DateTimeKind.UTC, 1])
    def test_kind_argument(self, kind: int) -> None:
        assert DateTime(2024, 1, 1, kind=kind).kind is DateTimeKind.UTC

    def test_bad_kind(self) -> None:
        with pytest.raises(UnsupportedKindTagError):
            DateTime(2024, 1, 1, kind=5)

    def test_leap_day(self) -> None:
        assert DateTime(2024, 2, 29).day == 29

    @pytest.mark.parametrize(
        "fields",
        [
            (2023, 2, 29),
            (2024, 13, 1),
            (2024, 1, 32),
            (0, 1, 1),
            (10000, 1, 1),
            (2024, 1, 1, 24),
            (2024, 1, 1, 0, 60),
            (2024, 1, 1, 0, 0, 60),
            (2024, 1, 1, 0, 0, 0, 1000),
            (2024, 1, 1, 0, 0, 0, 0, 1000),
        ],
    )
    def test_invalid_fields(self, fields: tuple[int, ...]) -> None:
        with pytest.raises(InvalidCalendarDateError):
            DateTime(*fields)


class TestDateTimeFactories:
    """Test class-level factories and constants."""

    def test_from_ticks(self) -> None:
        dt = DateTime.from_ticks(0)
        assert (dt.year, dt.month, dt.day) == (1, 1, 1)
        assert dt.kind is DateTimeKind.UNSPECIFIED

    def test_from_ticks_with_kind(self) -> None:
        assert DateTime.from_ticks(0, DateTimeKind.LOCAL).kind is DateTimeKind.LOCAL

    @pytest.mark.parametrize("ticks", [-1, 3_155_378_976_000_000_000])
    def test_from_ticks_out_of_range(self, ticks: int) -> None:
        with pytest.raises(TicksOutOfRangeError):
            DateTime.from_ticks(ticks)

    def test_min_value(self) -> None:
        dt = DateTime.min_value()
        assert dt.ticks == 0
        assert dt.kind is DateTimeKind.UTC

    def test_max_value(self) -> None:
        dt = DateTime.max_value()
        assert dt.ticks == 3_155_378_975_999_999_999
        assert (dt.year, dt.month, dt.day) == (9999, 12, 31)
        assert (dt.hour, dt.minute, dt.second) == (23, 59, 59)
        assert dt.nanosecond == 999_999_900

    def test_max_value_plus_one_tick(self) -> None:
        with pytest.raises(TicksOutOfRangeError):
            DateTime.max_value().add(Duration.from_ticks(1))

    def test_unix_epoch(self) -> None:
        dt = DateTime.unix_epoch()
        assert dt.ticks == 621_355_968_000_000_000
        assert (dt.year, dt.month, dt.day) == (1970, 1, 1)
        assert dt.kind is DateTimeKind.UTC

    def test_unix_milliseconds(self) -> None:
        assert DateTime.from_unix_milliseconds(0) == DateTime.unix_epoch()
        dt = DateTime.from_unix_milliseconds(1_709_633_730_250)
        assert dt == DateTime(2024, 3, 5, 10, 15, 30, 250, kind=DateTimeKind.UTC)
        assert dt.to_unix_milliseconds() == 1_709_633_730_250
        assert DateTime(1969, 12, 31, 23, 59, 59, 999).to_unix_milliseconds() == -1

    def test_combine(self) -> None:
        dt = DateTime.combine(Date(2024, 1, 15), Time(14, 30, 45), DateTimeKind.UTC)
        assert dt == DateTime(2024, 1, 15, 14, 30, 45)
        assert dt.kind is DateTimeKind.UTC

    def test_now(self, plus_two_clock) -> None:
        dt = DateTime.now()
        assert dt.kind is DateTimeKind.LOCAL
        assert (dt.hour, dt.minute, dt.second, dt.millisecond) == (12, 15, 30, 250)

    def test_utc_now(self, plus_two_clock) -> None:
        dt = DateTime.utc_now()
        assert dt.kind is DateTimeKind.UTC
        assert (dt.year, dt.month, dt.day, dt.hour) == (2024, 3, 5, 10)

    def test_now_and_utc_now_are_the_same_instant(self, plus_two_clock) -> None:
        assert DateTime.now() == DateTime.utc_now()

    def test_today(self, plus_two_clock) -> None:
        dt = DateTime.today()
        assert dt.kind is DateTimeKind.LOCAL
        assert (dt.year, dt.month, dt.day) == (2024, 3, 5)
        assert dt.time_of_day == Duration.zero()

    def test_frozen_clock_advances(self, utc_clock) -> None:
        utc_clock.advance(days=1)
        assert DateTime.utc_now().day == 6


class TestDateTimeAccessors:
    """Test derived calendar accessors."""

    def test_day_number(self) -> None:
        assert DateTime(1, 1, 1).day_number == 1
        assert DateTime(2024, 3, 5, 23).day_number == date(2024, 3, 5).toordinal()

    def test_day_of_week(self) -> None:
        assert DateTime(2024, 3, 3).day_of_week == 0
        assert DateTime(2024, 3, 5).day_of_week == 2
        assert DateTime(2024, 3, 9).day_of_week == 6

    def test_day_of_year(self) -> None:
        assert DateTime(2024, 1, 1).day_of_year == 1
        assert DateTime(2024, 12, 31).day_of_year == 366
        assert DateTime(2023, 12, 31).day_of_year == 365

    def test_time_of_day(self) -> None:
        dt = DateTime(2024, 3, 5, 10, 15, 30, 250)
        assert dt.time_of_day == Duration(hours=10, minutes=15, seconds=30, milliseconds=250)

    def test_date_keeps_kind(self) -> None:
        dt = DateTime(2024, 3, 5, 10, 15, 30, kind=DateTimeKind.LOCAL).date
        assert (dt.year, dt.month, dt.day, dt.hour) == (2024, 3, 5, 0)
        assert dt.kind is DateTimeKind.LOCAL

    def test_to_date_and_to_time(self) -> None:
        dt = DateTime(2024, 3, 5, 10, 15, 30, 250)
        assert dt.to_date() == Date(2024, 3, 5)
        assert dt.to_time() == Time(10, 15, 30, 250)

    def test_days_in_month(self) -> None:
        assert DateTime.days_in_month(2024, 2) == 29
        assert DateTime.days_in_month(2023, 2) == 28
        assert DateTime.days_in_month(2023, 12) == 31

    def test_days_in_month_invalid(self) -> None:
        with pytest.raises(InvalidCalendarDateError):
            DateTime.days_in_month(2024, 13)
        with pytest.raises(InvalidCalendarDateError):
            DateTime.days_in_month(0, 1)

    def test_is_leap_year(self) -> None:
        assert DateTime.is_leap_year(2024)
        assert not DateTime.is_leap_year(2023)
        assert DateTime.is_leap_year(2000)
        assert not DateTime.is_leap_year(1900)

    def test_is_leap_year_invalid(self) -> None:
        with pytest.raises(InvalidCalendarDateError):
            DateTime.is_leap_year(10000)


class TestDateTimeText:
    """Test str and repr."""

    def test_str(self) -> None:
        assert str(DateTime(2024, 3, 5, 10, 15, 30)) == "2024-03-05 10:15:30"

    def test_str_trims_fraction(self) -> None:
        assert str(DateTime(2024, 3, 5, 10, 15, 30, 500)) == "2024-03-05 10:15:30.5"
        assert str(DateTime.max_value()) == "9999-12-31 23:59:59.9999999"

    def test_str_pads_year(self) -> None:
        assert str(DateTime(5, 1, 2)) == "0005-01-02 00:00:00"

    def test_repr(self) -> None:
        dt = DateTime(2024, 3, 5, 10, 15, 30, kind=DateTimeKind.UTC)
        assert repr(dt) == "DateTime(2024, 3, 5, 10, 15, 30, nanosecond=0, kind=UTC)"

    def test_always_truthy(self) -> None:
        assert DateTime.min_value()
