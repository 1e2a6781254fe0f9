"""Internal utilities for kindtime.

This module contains private implementation details:
    - Calendar arithmetic on ordinal day numbers
    - Validation decorators and helpers
    - Constants for ticks and range limits

Note: This module is not part of the public API.
"""

from __future__ import annotations

from kindtime._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_ticks,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_ticks",
    "validate_year",
]
