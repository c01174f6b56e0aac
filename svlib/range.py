"""Ranges: comparator sets joined by ``||``, any one of which may be satisfied."""

from __future__ import annotations

from dataclasses import dataclass

from .comparator import ComparatorSet
from .numbers import ParseError

MAX_LENGTH = 512
"""Longest text accepted by :meth:`Range.parse`."""


def _skip_spaces(text, pos):
    while pos < len(text) and text[pos] == " ":
        pos += 1
    return pos


@dataclass(frozen=True)
class Range:
    """Alternative comparator sets; a version matches if it satisfies any of them."""

    sets: tuple

    def __post_init__(self):
        object.__setattr__(self, "sets", tuple(self.sets))

    @classmethod
    def parse(cls, text):
        """Parse a whole range, raising :class:`ParseError` if it is malformed."""
        if len(text) > MAX_LENGTH:
            raise ParseError(f"range longer than {MAX_LENGTH} characters")
        result, pos = cls.read(text, 0)
        if pos < len(text):
            raise ParseError("unexpected text after range", pos)
        return result

    @classmethod
    def read(cls, text, pos=0):
        """Read a range at ``pos``; return ``(range, new_pos)``."""
        sets = []
        while True:
            comparators, pos = ComparatorSet.read(text, pos)
            sets.append(comparators)
            pos = _skip_spaces(text, pos)
            if text.startswith("||", pos):
                pos = _skip_spaces(text, pos + 2)
                continue
            return cls(sets), pos

    def or_(self, text):
        """Return a new range that also accepts the range parsed from ``text``."""
        if not text:
            raise ParseError("empty range")
        return Range(self.sets + Range.parse(text).sets)

    def matches(self, version):
        """Tell whether ``version`` satisfies any comparator set of the range."""
        return any(comparators.matches(version) for comparators in self.sets)

    def write_to(self, stream):
        """Write the range to a text stream; return the characters written."""
        text = str(self)
        stream.write(text)
        return len(text)

    def __iter__(self):
        return iter(self.sets)

    def __len__(self):
        return len(self.sets)

    def __str__(self):
        return " || ".join(str(comparators) for comparators in self.sets)


def match_range(version, text):
    """Tell whether ``version`` satisfies the range in ``text``.

    Text that is not a valid range matches nothing.
    """
    try:
        parsed = Range.parse(text)
    except ParseError:
        return False
    return parsed.matches(version)