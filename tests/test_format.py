"""Tests for pattern formatting."""

from __future__ import annotations

import pytest

from kindtime.core.datetime import DateTime
from kindtime.format.pattern import format_pattern, pattern_to_directives, strftime


class TestPatternToDirectives:
    """Test the token table rewrite."""

    def test_full_pattern(self) -> None:
        assert (
            pattern_to_directives("yyyy-MM-dd hh:mm:ss.ffffff")
            == "%Y-%m-%d %H:%M:%S.%6f"
        )

    def test_milliseconds(self) -> None:
        assert pattern_to_directives("ss.fff") == "%S.%3f"

    def test_unknown_text_passes_through(self) -> None:
        assert pattern_to_directives("Q1 yyyy") == "Q1 %Y"


class TestToString:
    """Test DateTime.to_string."""

    @pytest.fixture
    def dt(self) -> DateTime:
        return DateTime(2024, 3, 5, 22, 15, 30, 250, 500)

    def test_date_pattern(self, dt: DateTime) -> None:
        assert dt.to_string("yyyy-MM-dd") == "2024-03-05"
        assert dt.to_string("dd/MM/yyyy") == "05/03/2024"

    def test_hours_use_24_hour_clock(self, dt: DateTime) -> None:
        assert dt.to_string("hh:mm:ss") == "22:15:30"

    def test_fractions(self, dt: DateTime) -> None:
        assert dt.to_string("ss.fff") == "30.250"
        assert dt.to_string("ss.ffffff") == "30.250500"

    def test_year_is_padded(self) -> None:
        assert DateTime(5, 1, 1).to_string("yyyy") == "0005"

    def test_default_is_str(self, dt: DateTime) -> None:
        assert dt.to_string() == str(dt) == "2024-03-05 22:15:30.2505"

    def test_literal_percent(self, dt: DateTime) -> None:
        assert dt.to_string("yyyy %%") == "2024 %"

    def test_unsupported_directive(self, dt: DateTime) -> None:
        with pytest.raises(ValueError, match="unsupported format directive"):
            dt.to_string("%j")


class TestStrftime:
    """Test the directive formatter directly."""

    def test_seven_digit_fraction(self) -> None:
        dt = DateTime(2024, 3, 5).add_ticks(1_234_567)
        assert strftime(dt, "%7f") == "1234567"
        assert strftime(dt, "%f") == "123456"
        assert strftime(dt, "%3f") == "123"

    def test_format_pattern(self) -> None:
        dt = DateTime(2024, 3, 5, 10, 15, 30)
        assert format_pattern(dt, "yyyy-MM-ddThh:mm:ss") == "2024-03-05T10:15:30"
