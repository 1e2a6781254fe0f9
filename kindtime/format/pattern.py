"""Pattern formatting for DateTime.

DateTime.to_string accepts a calendar pattern such as ``yyyy-MM-dd``. The
pattern is first rewritten with a fixed token table into a string of
%-directives, which is then rendered by ``strftime``. Tokens are replaced
as literal substrings, in table order; anything not in the table passes
through unchanged. There is no locale support.

Token table:
    yyyy   -> %Y   4-digit year
    MM     -> %m   2-digit month
    dd     -> %d   2-digit day
    hh     -> %H   2-digit hour, 24-hour clock
    mm     -> %M   2-digit minute
    ss     -> %S   2-digit second
    ffffff -> %6f  microseconds, 6 digits
    fff    -> %3f  milliseconds, 3 digits

Supported Directives:
    %Y, %m, %d, %H, %M, %S
    %3f - Milliseconds (000-999)
    %6f - Microseconds (000000-999999)
    %7f - Ticks within the second (0000000-9999999)
    %f  - Microseconds, same as %6f
    %%  - Literal %

Examples:
    >>> from kindtime import DateTime
    >>> dt = DateTime(2024, 3, 5, 10, 15, 30, 250)
    >>> pattern_to_directives("yyyy-MM-dd hh:mm:ss.fff")
    '%Y-%m-%d %H:%M:%S.%3f'
    >>> strftime(dt, "%Y-%m-%d %H:%M:%S.%3f")
    '2024-03-05 10:15:30.250'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kindtime._internal.constants import TICKS_PER_SECOND

if TYPE_CHECKING:
    from kindtime.core.datetime import DateTime


# Order matters: "ffffff" must be consumed before "fff".
PATTERN_TOKENS: tuple[tuple[str, str], ...] = (
    ("yyyy", "%Y"),
    ("MM", "%m"),
    ("dd", "%d"),
    ("hh", "%H"),
    ("mm", "%M"),
    ("ss", "%S"),
    ("ffffff", "%6f"),
    ("fff", "%3f"),
)

_SUPPORTED = "%Y, %m, %d, %H, %M, %S, %3f, %6f, %7f, %f, %%"


def pattern_to_directives(pattern: str) -> str:
    """Rewrite calendar pattern tokens into %-directives.

    Args:
        pattern: A pattern like ``yyyy-MM-dd``.

    Returns:
        The pattern with every table token replaced.

    Examples:
        >>> pattern_to_directives("dd/MM/yyyy")
        '%d/%m/%Y'
        >>> pattern_to_directives("Q1 yyyy")  # unknown text passes through
        'Q1 %Y'
    """
    result = pattern
    for token, directive in PATTERN_TOKENS:
        result = result.replace(token, directive)
    return result


def strftime(value: DateTime, fmt: str) -> str:
    """Format a DateTime using a %-directive string.

    Args:
        value: The DateTime to render.
        fmt: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        ValueError: If fmt contains an unsupported directive.
    """
    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            if fmt[i + 1] in "367" and i + 2 < len(fmt) and fmt[i + 2] == "f":
                directive = fmt[i : i + 3]
            else:
                directive = fmt[i : i + 2]
            result.append(_format_directive(value, directive))
            i += len(directive)
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(value: DateTime, directive: str) -> str:
    """Format a single directive.

    Raises:
        ValueError: If the directive is unsupported.
    """
    fraction = value.time_of_day.ticks % TICKS_PER_SECOND

    if directive == "%%":
        return "%"
    elif directive == "%Y":
        return f"{value.year:04d}"
    elif directive == "%m":
        return f"{value.month:02d}"
    elif directive == "%d":
        return f"{value.day:02d}"
    elif directive == "%H":
        return f"{value.hour:02d}"
    elif directive == "%M":
        return f"{value.minute:02d}"
    elif directive == "%S":
        return f"{value.second:02d}"
    elif directive == "%3f":
        return f"{fraction // 10_000:03d}"
    elif directive in ("%6f", "%f"):
        return f"{fraction // 10:06d}"
    elif directive == "%7f":
        return f"{fraction:07d}"
    else:
        raise ValueError(
            f"unsupported format directive: {directive}. Supported: {_SUPPORTED}"
        )


def format_pattern(value: DateTime, pattern: str) -> str:
    """Render a DateTime with a calendar pattern.

    Examples:
        >>> from kindtime import DateTime
        >>> format_pattern(DateTime(2024, 3, 5, 10, 15, 30), "yyyy-MM-ddThh:mm:ss")
        '2024-03-05T10:15:30'
    """
    return strftime(value, pattern_to_directives(pattern))


__all__ = ["PATTERN_TOKENS", "pattern_to_directives", "strftime", "format_pattern"]
