"""DateTimeKind enumeration.

This module provides the DateTimeKind enum that tags a naive calendar
instant with how it should be interpreted when an absolute instant is
needed.
"""

from __future__ import annotations

from enum import IntEnum

from kindtime.errors import UnsupportedKindTagError


class DateTimeKind(IntEnum):
    """How a DateTime's naive instant is interpreted.

    UNSPECIFIED and UTC resolve identically for comparison and
    subtraction; the tag is still preserved through construction and
    kind-changing operations. LOCAL resolves through the host's local
    offset.

    The integer values match the discriminators accepted by the
    kind-taking constructors.

    Examples:
        >>> DateTimeKind(1)
        <DateTimeKind.UTC: 1>
        >>> DateTimeKind.LOCAL.is_local
        True
    """

    UNSPECIFIED = 0
    UTC = 1
    LOCAL = 2

    @property
    def is_local(self) -> bool:
        """Return True if this kind resolves through the host local offset."""
        return self is DateTimeKind.LOCAL

    @classmethod
    def coerce(cls, value: DateTimeKind | int) -> DateTimeKind:
        """Return the DateTimeKind for an enum member or integer tag.

        Args:
            value: A DateTimeKind or one of the integers 0, 1, 2.

        Returns:
            The matching DateTimeKind.

        Raises:
            UnsupportedKindTagError: If value is not a valid kind tag.

        Examples:
            >>> DateTimeKind.coerce(2)
            <DateTimeKind.LOCAL: 2>
            >>> DateTimeKind.coerce(3)
            Traceback (most recent call last):
            ...
            UnsupportedKindTagError: Unsupported date kind 3. ...
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass but never a meaningful tag
        if isinstance(value, int) and not isinstance(value, bool):
            for member in cls:
                if member.value == value:
                    return member
        raise UnsupportedKindTagError(
            f"Unsupported date kind {value!r}. Only valid values are: "
            "0 - Unspecified, 1 - Utc, 2 - Local"
        )


__all__ = ["DateTimeKind"]
