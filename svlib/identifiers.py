"""Pre-release and build identifiers: dot-separated alphanumeric words."""

from __future__ import annotations

from dataclasses import dataclass

from .numbers import DIGITS, ParseError, compare_numbers


def _is_identifier_char(char):
    return char == "-" or (char.isascii() and char.isalnum())


@dataclass(frozen=True)
class Identifier:
    """One dot-separated word of a pre-release or build suffix."""

    text: str
    numeric: bool
    number: int = 0

    def __str__(self):
        return self.text


def _scan(text, pos, *, prerelease):
    """Read dot-separated identifiers, returning ``(identifiers, pos, error)``.

    ``error`` is None on success, or a message when reading stopped early; the
    identifiers read before the failure are returned either way.
    """
    identifiers = []
    end = len(text)
    while True:
        start = pos
        numeric = True
        while pos < end and _is_identifier_char(text[pos]):
            char = text[pos]
            if char not in DIGITS:
                numeric = False
            elif pos == start + 1 and text[start] == "0":
                if prerelease:
                    return identifiers, pos, "numeric identifier has a leading zero"
                numeric = False
            pos += 1
        if pos == start:
            return identifiers, pos, "expected an identifier"
        word = text[start:pos]
        identifiers.append(Identifier(word, numeric, int(word) if numeric else 0))
        if pos < end and text[pos] == ".":
            pos += 1
            continue
        return identifiers, pos, None


def _read(text, pos, *, prerelease):
    identifiers, pos, error = _scan(text, pos, prerelease=prerelease)
    if error is not None:
        raise ParseError(error, pos, tuple(identifiers))
    return tuple(identifiers), pos


def read_prerelease(text, pos):
    """Read pre-release identifiers starting at ``pos``.

    Returns ``(identifiers, new_pos)``. Numeric identifiers may not have a
    leading zero. Raises :class:`ParseError` on an empty identifier or a
    leading zero; the error's ``partial`` holds the identifiers read before it.
    """
    return _read(text, pos, prerelease=True)


def read_build(text, pos):
    """Read build identifiers starting at ``pos``.

    Returns ``(identifiers, new_pos)``. A digit string with a leading zero is
    accepted but is not numeric. Raises :class:`ParseError` on an empty
    identifier.
    """
    return _read(text, pos, prerelease=False)


def compare_identifiers(left, right):
    """Order two identifier sequences, returning -1, 0 or 1.

    An empty sequence sorts after a non-empty one, so a release sorts after its
    pre-releases. Numeric identifiers compare by value, others by text; when
    one sequence is a prefix of the other the shorter sorts first.
    """
    left = tuple(left)
    right = tuple(right)
    if left and not right:
        return -1
    if right and not left:
        return 1
    for mine, theirs in zip(left, right):
        if mine.numeric and theirs.numeric:
            result = compare_numbers(mine.number, theirs.number)
        else:
            result = (mine.text > theirs.text) - (mine.text < theirs.text)
        if result:
            return result
    return compare_numbers(len(left), len(right))


def format_identifiers(identifiers):
    """Join identifiers back into their dotted form."""
    return ".".join(identifier.text for identifier in identifiers)