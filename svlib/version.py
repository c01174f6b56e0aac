"""Semantic version numbers: parsing, ordering and formatting."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from .identifiers import compare_identifiers, format_identifiers, read_build, read_prerelease
from .numbers import WILDCARD, ParseError, compare_numbers, read_number

MAX_LENGTH = 256
"""Longest text accepted by :meth:`Version.parse` and :meth:`Version.parse_loose`."""


def _read_field(text, pos):
    value, end = read_number(text, pos)
    if value == WILDCARD:
        raise ParseError("wildcard not allowed in a version", pos)
    return value, end


def _expect_dot(text, pos):
    if pos >= len(text) or text[pos] != ".":
        raise ParseError("expected '.'", pos)
    return pos + 1


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A version ``major.minor.patch[-prerelease][+build]``.

    ``raw`` is the text the version was read from. Ordering ignores the build.
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: tuple = ()
    build: tuple = ()
    raw: str = ""

    def __post_init__(self):
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))

    @classmethod
    def _parse_whole(cls, text, reader):
        if len(text) > MAX_LENGTH:
            raise ParseError(f"version longer than {MAX_LENGTH} characters")
        version, pos = reader(text, 0)
        if pos < len(text):
            raise ParseError("unexpected text after version", pos)
        return version

    @classmethod
    def parse(cls, text):
        """Parse a complete, strictly formed version; an optional leading ``v`` is allowed."""
        return cls._parse_whole(text, cls.read)

    @classmethod
    def parse_loose(cls, text):
        """Parse a complete version, allowing missing fields and separators."""
        return cls._parse_whole(text, cls.read_loose)

    @classmethod
    def read(cls, text, pos=0):
        """Read a strictly formed version at ``pos``; return ``(version, new_pos)``."""
        if pos >= len(text):
            raise ParseError("expected a version", pos)
        start = pos
        if text[pos] == "v":
            pos += 1
        major, pos = _read_field(text, pos)
        minor, pos = _read_field(text, _expect_dot(text, pos))
        patch, pos = _read_field(text, _expect_dot(text, pos))
        prerelease = build = ()
        if pos < len(text) and text[pos] == "-":
            prerelease, pos = read_prerelease(text, pos + 1)
        if pos < len(text) and text[pos] == "+":
            build, pos = read_build(text, pos + 1)
        return cls(major, minor, patch, prerelease, build, text[start:pos]), pos

    @classmethod
    def read_loose(cls, text, pos=0):
        """Read a version at ``pos`` leniently; return ``(version, new_pos)``.

        Minor and patch default to zero, the ``-`` and ``+`` separators are
        optional and a malformed suffix is read as far as it goes.
        """
        if pos >= len(text):
            raise ParseError("expected a version", pos)
        start = pos
        if text[pos] == "v":
            pos += 1
        major, pos = _read_field(text, pos)
        minor = patch = 0
        if pos < len(text) and text[pos] == ".":
            minor, pos = _read_field(text, pos + 1)
        if pos < len(text) and text[pos] == ".":
            patch, pos = _read_field(text, pos + 1)
        if pos < len(text) and text[pos] == "-":
            pos += 1
        try:
            prerelease, pos = read_prerelease(text, pos)
        except ParseError as exc:
            prerelease, pos = exc.partial, exc.position
        if pos < len(text) and text[pos] == "+":
            pos += 1
        try:
            build, pos = read_build(text, pos)
        except ParseError as exc:
            build, pos = exc.partial, exc.position
        return cls(major, minor, patch, prerelease, build, text[start:pos]), pos

    def compare(self, other):
        """Return -1, 0 or 1 comparing precedence with ``other``; build is ignored."""
        return (
            compare_numbers(self.major, other.major)
            or compare_numbers(self.minor, other.minor)
            or compare_numbers(self.patch, other.patch)
            or compare_identifiers(self.prerelease, other.prerelease)
        )

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self):
        return hash(
            (self.major, self.minor, self.patch, tuple(i.text for i in self.prerelease))
        )

    def __str__(self):
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + format_identifiers(self.prerelease)
        if self.build:
            text += "+" + format_identifiers(self.build)
        return text

    def write_to(self, stream):
        """Write the canonical form to a text stream; return the characters written."""
        text = str(self)
        stream.write(text)
        return len(text)


def parse_version(text):
    """Parse a strictly formed version, raising :class:`ParseError` if it is not one."""
    return Version.parse(text)


def try_parse_version(text):
    """Parse a version leniently, raising :class:`ParseError` if nothing usable is found."""
    return Version.parse_loose(text)