"""Tests for the Duration class."""

from __future__ import annotations

import pytest

from kindtime.core.duration import Duration


class TestDurationConstruction:
    """Test Duration construction."""

    def test_components_are_summed(self) -> None:
        d = Duration(days=1, hours=2, minutes=3, seconds=4, milliseconds=5, microseconds=6, ticks=7)
        assert d.ticks == (
            864_000_000_000 + 72_000_000_000 + 1_800_000_000 + 40_000_000 + 50_000 + 60 + 7
        )

    def test_zero(self) -> None:
        assert Duration.zero().ticks == 0
        assert Duration.zero().is_zero
        assert not Duration.zero()

    def test_from_ticks(self) -> None:
        assert Duration.from_ticks(-15).ticks == -15

    def test_from_components(self) -> None:
        d = Duration.from_components(days=1, hours=-1, microseconds=5)
        assert d.ticks == 864_000_000_000 - 36_000_000_000 + 50
        assert d == Duration(days=1, hours=-1, microseconds=5)

    def test_from_components_defaults_to_zero(self) -> None:
        assert Duration.from_components() == Duration.zero()

    def test_fractional_units_round_half_away_from_zero(self) -> None:
        assert Duration.from_days(0.5).ticks == 432_000_000_000
        assert Duration.from_milliseconds(1.5).ticks == 15_000
        assert Duration.from_microseconds(0.05).ticks == 1
        assert Duration.from_microseconds(-0.05).ticks == -1
        assert Duration.from_microseconds(0.04).ticks == 0

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValueError):
            Duration.from_seconds(float("nan"))
        with pytest.raises(ValueError):
            Duration.from_hours(float("inf"))


class TestDurationComponents:
    """Test sign-following component accessors."""

    def test_positive(self) -> None:
        d = Duration(days=2, hours=3, minutes=4, seconds=5, milliseconds=6)
        assert (d.days, d.hours, d.minutes, d.seconds, d.milliseconds) == (2, 3, 4, 5, 6)

    def test_negative_components_follow_sign(self) -> None:
        d = Duration.from_hours(-1.5)
        assert d.hours == -1
        assert d.minutes == -30
        assert d.is_negative

    def test_totals(self) -> None:
        d = Duration(hours=36)
        assert d.total_days == 1.5
        assert d.total_hours == 36.0
        assert d.total_minutes == 2160.0
        assert Duration(milliseconds=1500).total_seconds == 1.5
        assert Duration(seconds=2).total_milliseconds == 2000.0


class TestDurationArithmetic:
    """Test Duration arithmetic."""

    def test_add_and_subtract(self) -> None:
        a = Duration(seconds=30)
        b = Duration(seconds=45)
        assert (a + b).total_seconds == 75.0
        assert a.add(b) == a + b
        assert (a - b) == Duration(seconds=-15)
        assert a.subtract(b) == a - b

    def test_negate_and_abs(self) -> None:
        d = Duration(minutes=5)
        assert -d == Duration(minutes=-5)
        assert d.negate() == -d
        assert abs(-d) == d
        assert +d == d

    def test_multiply(self) -> None:
        assert Duration(seconds=30) * 3 == Duration(seconds=90)
        assert 2 * Duration(seconds=30) == Duration(minutes=1)

    def test_sum(self) -> None:
        assert sum([Duration(seconds=1), Duration(seconds=2)]) == Duration(seconds=3)

    def test_unsupported_operands(self) -> None:
        with pytest.raises(TypeError):
            Duration(seconds=1) + 1  # type: ignore[operator]
        with pytest.raises(TypeError):
            Duration(seconds=1) * 1.5  # type: ignore[operator]


class TestDurationComparison:
    """Test ordering and hashing."""

    def test_ordering(self) -> None:
        assert Duration(seconds=1) < Duration(seconds=2)
        assert Duration(seconds=2) >= Duration(seconds=2)
        assert Duration(seconds=-1) < Duration.zero()

    def test_equality_and_hash(self) -> None:
        assert Duration(minutes=1) == Duration(seconds=60)
        assert hash(Duration(minutes=1)) == hash(Duration(seconds=60))
        assert Duration(minutes=1) != "1 minute"


class TestDurationStr:
    """Test string representations."""

    def test_str(self) -> None:
        assert str(Duration(days=1, hours=2, minutes=30)) == "1.02:30:00"
        assert str(Duration(seconds=5)) == "00:00:05"
        assert str(Duration(ticks=-15)) == "-00:00:00.0000015"

    def test_repr(self) -> None:
        assert repr(Duration(hours=25)) == "Duration(ticks=900000000000)"
