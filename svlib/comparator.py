"""Comparators: sets of operator/version pairs that a version must all satisfy."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .identifiers import read_build, read_prerelease
from .numbers import WILDCARD, ParseError, read_number
from .operators import Operator
from .version import Version

MAX_LENGTH = 512
"""Longest text accepted by :meth:`ComparatorSet.parse`."""

_PREFIX_OPERATORS = {">": (Operator.GT, Operator.GE), "<": (Operator.LT, Operator.LE)}


@dataclass(frozen=True)
class Comparator:
    """A single operator applied to a version, such as ``>=1.2.0``."""

    op: Operator
    version: Version

    def matches(self, version):
        """Tell whether ``version`` satisfies this comparator."""
        return self.op.accepts(version.compare(self.version))

    def __str__(self):
        return f"{self.op.symbol}{self.version}"


def _read_partial(text, pos):
    """Read a version whose missing or wildcard fields are WILDCARD."""
    end = len(text)
    start = pos
    if pos >= end:
        return Version(WILDCARD, WILDCARD, WILDCARD), pos
    try:
        major, pos = read_number(text, pos)
    except ParseError:
        return Version(0, WILDCARD, WILDCARD, raw=text[start:pos]), pos
    if pos >= end or text[pos] != ".":
        return Version(major, WILDCARD, WILDCARD, raw=text[start:pos]), pos
    minor, pos = read_number(text, pos + 1)
    if pos >= end or text[pos] != ".":
        return Version(major, minor, WILDCARD, raw=text[start:pos]), pos
    patch, pos = read_number(text, pos + 1)
    prerelease = build = ()
    if pos < end and text[pos] == "-":
        prerelease, pos = read_prerelease(text, pos + 1)
    if pos < end and text[pos] == "+":
        build, pos = read_build(text, pos + 1)
    return Version(major, minor, patch, prerelease, build, text[start:pos]), pos


def _fill_wildcards(version):
    """Replace the first wildcard field and everything after it with zero."""
    if version.major == WILDCARD:
        return replace(version, major=0, minor=0, patch=0)
    if version.minor == WILDCARD:
        return replace(version, minor=0, patch=0)
    if version.patch == WILDCARD:
        return replace(version, patch=0)
    return version


def _x_range(version):
    low = _fill_wildcards(version)
    if version.major == WILDCARD:
        return [Comparator(Operator.GE, low)]
    if version.minor == WILDCARD:
        high = replace(low, major=low.major + 1)
        return [Comparator(Operator.GE, low), Comparator(Operator.LT, high)]
    if version.patch == WILDCARD:
        high = replace(low, minor=low.minor + 1)
        return [Comparator(Operator.GE, low), Comparator(Operator.LT, high)]
    return [Comparator(Operator.EQ, version)]


def _hyphen(lower, text, pos):
    upper, pos = _read_partial(text, pos)
    if upper.minor == WILDCARD:
        bound = Comparator(Operator.LT, Version(upper.major + 1))
    elif upper.patch == WILDCARD:
        bound = Comparator(Operator.LT, Version(upper.major, upper.minor + 1))
    else:
        bound = Comparator(Operator.LE, upper)
    return [Comparator(Operator.GE, _fill_wildcards(lower)), bound], pos


def _caret(text, pos):
    partial, pos = _read_partial(text, pos)
    low = _fill_wildcards(partial)
    if low.major:
        high = replace(low, major=low.major + 1, minor=0, patch=0)
    elif low.minor:
        high = replace(low, minor=low.minor + 1, patch=0)
    else:
        high = replace(low, patch=low.patch + 1)
    return [Comparator(Operator.GE, low), Comparator(Operator.LT, high)], pos


def _tilde(text, pos):
    partial, pos = _read_partial(text, pos)
    low = _fill_wildcards(partial)
    if low.minor or low.patch:
        high = replace(low, minor=low.minor + 1, patch=0)
    else:
        high = replace(low, major=low.major + 1, minor=0, patch=0)
    return [Comparator(Operator.GE, low), Comparator(Operator.LT, high)], pos


def _read_term(text, pos):
    """Read one space-free term, which may expand into several comparators."""
    char = text[pos] if pos < len(text) else ""
    if char == "^":
        return _caret(text, pos + 1)
    if char == "~":
        return _tilde(text, pos + 1)
    if char in _PREFIX_OPERATORS:
        strict, loose = _PREFIX_OPERATORS[char]
        pos += 1
        op = strict
        if pos < len(text) and text[pos] == "=":
            op = loose
            pos += 1
        partial, pos = _read_partial(text, pos)
        return [Comparator(op, _fill_wildcards(partial))], pos
    if char == "=":
        partial, pos = _read_partial(text, pos + 1)
        return [Comparator(Operator.EQ, _fill_wildcards(partial))], pos
    partial, pos = _read_partial(text, pos)
    if text[pos:pos + 3] == " - ":
        return _hyphen(partial, text, pos + 3)
    return _x_range(partial), pos


@dataclass(frozen=True)
class ComparatorSet:
    """Comparators separated by single spaces; a version must satisfy all of them."""

    comparators: tuple

    def __post_init__(self):
        object.__setattr__(self, "comparators", tuple(self.comparators))

    @classmethod
    def parse(cls, text):
        """Parse a whole comparator set, raising :class:`ParseError` if it is malformed."""
        if len(text) > MAX_LENGTH:
            raise ParseError(f"comparator longer than {MAX_LENGTH} characters")
        result, pos = cls.read(text, 0)
        if pos < len(text):
            raise ParseError("unexpected text after comparator", pos)
        return result

    @classmethod
    def read(cls, text, pos=0):
        """Read a comparator set at ``pos``; return ``(comparator_set, new_pos)``."""
        comparators = []
        end = len(text)
        while True:
            terms, pos = _read_term(text, pos)
            comparators.extend(terms)
            if pos + 1 < end and text[pos] == " " and text[pos + 1] not in " |":
                pos += 1
                continue
            return cls(comparators), pos

    def and_(self, text):
        """Return a new set that also requires the comparators parsed from ``text``."""
        if not text:
            raise ParseError("empty comparator")
        return ComparatorSet(self.comparators + ComparatorSet.parse(text).comparators)

    def matches(self, version):
        """Tell whether ``version`` satisfies every comparator in the set."""
        return all(comparator.matches(version) for comparator in self.comparators)

    def write_to(self, stream):
        """Write the set to a text stream; return the characters written."""
        text = str(self)
        stream.write(text)
        return len(text)

    def __iter__(self):
        return iter(self.comparators)

    def __len__(self):
        return len(self.comparators)

    def __str__(self):
        return " ".join(str(comparator) for comparator in self.comparators)


def match_comparator(version, text):
    """Tell whether ``version`` satisfies the comparator set in ``text``.

    Text that is not a valid comparator set matches nothing.
    """
    try:
        comparators = ComparatorSet.parse(text)
    except ParseError:
        return False
    return comparators.matches(version)