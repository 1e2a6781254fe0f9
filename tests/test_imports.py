"""Tests for the public package surface."""

from __future__ import annotations

import kindtime


class TestPublicApi:
    """Test that the public names are importable from the package root."""

    def test_version(self) -> None:
        assert kindtime.__version__ == "0.1.0"

    def test_all_names_resolve(self) -> None:
        for name in kindtime.__all__:
            assert hasattr(kindtime, name), name

    def test_core_types(self) -> None:
        from kindtime import Date, DateTime, Duration, Time

        assert DateTime.__module__ == "kindtime.core.datetime"
        assert Date.__module__ == "kindtime.core.date"
        assert Duration.__module__ == "kindtime.core.duration"
        assert Time.__module__ == "kindtime.core.time"

    def test_errors_share_base(self) -> None:
        from kindtime import (
            InvalidCalendarDateError,
            InvalidFormatError,
            KindtimeError,
            TicksOutOfRangeError,
            UnsupportedKindTagError,
        )

        for error in (
            InvalidCalendarDateError,
            InvalidFormatError,
            TicksOutOfRangeError,
            UnsupportedKindTagError,
        ):
            assert issubclass(error, KindtimeError)

    def test_subpackages(self) -> None:
        from kindtime.format import parse_rfc2822, parse_rfc3339, pattern_to_directives
        from kindtime.units import DateTimeKind

        assert callable(parse_rfc2822)
        assert callable(parse_rfc3339)
        assert callable(pattern_to_directives)
        assert DateTimeKind.UTC == 1
