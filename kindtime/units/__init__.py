"""Temporal units and enumerations.

This module provides:
    - DateTimeKind: Unspecified/Utc/Local tag for naive instants
"""

from __future__ import annotations

from kindtime.units.kind import DateTimeKind

__all__: list[str] = [
    "DateTimeKind",
]
