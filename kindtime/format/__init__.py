"""Formatting and parsing for DateTime.

This module provides:
    - Calendar pattern formatting (``yyyy-MM-dd hh:mm:ss``)
    - RFC 3339 parsing
    - RFC 2822 parsing

Functions:
    format_pattern: Render a DateTime with a calendar pattern.
    pattern_to_directives: Rewrite pattern tokens into %-directives.
    strftime: Render a DateTime with %-directives.
    parse_rfc3339: Parse an RFC 3339 date-time string.
    parse_rfc2822: Parse an RFC 2822 date-time string.
"""

from __future__ import annotations

from kindtime.format.pattern import format_pattern, pattern_to_directives, strftime
from kindtime.format.rfc2822 import parse_rfc2822
from kindtime.format.rfc3339 import parse_rfc3339

__all__: list[str] = [
    # Patterns
    "format_pattern",
    "pattern_to_directives",
    "strftime",
    # Parsers
    "parse_rfc3339",
    "parse_rfc2822",
]
