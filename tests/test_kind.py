"""Tests for DateTimeKind."""

from __future__ import annotations

import pytest

from kindtime.errors import UnsupportedKindTagError
from kindtime.units.kind import DateTimeKind


class TestDateTimeKind:
    """Test the kind tag enumeration."""

    def test_values(self) -> None:
        assert DateTimeKind.UNSPECIFIED == 0
        assert DateTimeKind.UTC == 1
        assert DateTimeKind.LOCAL == 2

    def test_is_local(self) -> None:
        assert DateTimeKind.LOCAL.is_local
        assert not DateTimeKind.UTC.is_local

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, DateTimeKind.UNSPECIFIED),
            (1, DateTimeKind.UTC),
            (2, DateTimeKind.LOCAL),
            (DateTimeKind.LOCAL, DateTimeKind.LOCAL),
        ],
    )
    def test_coerce(self, value: int, expected: DateTimeKind) -> None:
        assert DateTimeKind.coerce(value) is expected

    @pytest.mark.parametrize("value", [3, -1, True, "Utc", None])
    def test_coerce_rejects(self, value: object) -> None:
        with pytest.raises(UnsupportedKindTagError, match="0 - Unspecified, 1 - Utc, 2 - Local"):
            DateTimeKind.coerce(value)  # type: ignore[arg-type]
