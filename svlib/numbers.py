"""Reading and comparing the numeric fields of a version."""

from __future__ import annotations

WILDCARD = -1
"""Value of a field written as ``x``, ``X`` or ``*``."""

DIGITS = frozenset("0123456789")
_OCTAL_DIGITS = frozenset("01234567")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ParseError(ValueError):
    """Raised when text is not a valid version, identifier, comparator or range.

    ``position`` is the offset at which reading stopped, and ``partial`` holds
    whatever was read successfully before the failure.
    """

    def __init__(self, message, position=None, partial=()):
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)
        self.position = position
        self.partial = partial


def _span(text, pos, allowed):
    """Return the offset of the first character at or after pos not in allowed."""
    end = len(text)
    while pos < end and text[pos] in allowed:
        pos += 1
    return pos


def _scan_integer(text, pos):
    """Read an integer starting at a digit, choosing the base from its prefix.

    A leading ``0x`` selects hexadecimal, any other leading ``0`` selects
    octal, and anything else is decimal.
    """
    if text[pos] == "0":
        if (
            pos + 2 < len(text)
            and text[pos + 1] in "xX"
            and text[pos + 2] in _HEX_DIGITS
        ):
            stop = _span(text, pos + 2, _HEX_DIGITS)
            return int(text[pos + 2:stop], 16), stop
        stop = _span(text, pos, _OCTAL_DIGITS)
        return int(text[pos:stop], 8), stop
    stop = _span(text, pos, DIGITS)
    return int(text[pos:stop]), stop


def read_number(text, pos):
    """Read one numeric field of a version starting at ``pos``.

    Returns ``(value, new_pos)``. A wildcard (``x``, ``X`` or ``*``) reads as
    :data:`WILDCARD`. Raises :class:`ParseError` when no number starts at ``pos``.
    """
    if pos >= len(text):
        raise ParseError("expected a number, found end of text", pos)
    char = text[pos]
    if char in "xX*":
        return WILDCARD, pos + 1
    if char == "0":
        pos += 1
        if pos < len(text) and text[pos] in DIGITS:
            return _scan_integer(text, pos)
        return 0, pos
    if char in DIGITS:
        return _scan_integer(text, pos)
    raise ParseError(f"expected a number, found {char!r}", pos)


def compare_numbers(left, right):
    """Return -1, 0 or 1 as ``left`` is less than, equal to or greater than ``right``."""
    return (left > right) - (left < right)