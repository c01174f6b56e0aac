# svlib

Semantic versioning for Python: parse versions, comparator sets and ranges,
test whether a version satisfies them, and keep sortable lists of versions.
The package is a library only; it has no command-line tool.

## Installing

```
pip install svlib
```

## Versions

```python
from svlib.version import Version, parse_version, try_parse_version

v = Version.parse("v1.2.3-alpha.1+x86-64")
print(v.major, v.minor, v.patch)   # 1 2 3
print(str(v))                      # 1.2.3-alpha.1+x86-64

loose = Version.parse_loose("v1.2alpha")
print(str(loose))                  # 1.2.0-alpha
```

`Version.parse` demands a complete `MAJOR.MINOR.PATCH` with optional
`-prerelease` and `+build` parts and an optional leading `v`. Numeric
pre-release identifiers may not have a leading zero, and wildcards are not
allowed in a version. `Version.parse_loose` also accepts missing minor or
patch numbers (they become zero) and a pre-release or build written without
its separator. Text longer than 256 characters is refused.

`parse_version` and `try_parse_version` are the function forms of the two.
`Version.read` and `Version.read_loose` read a version starting at a given
offset and return `(version, new_offset)` without requiring the text to end
there.

All parsing errors raise `svlib.numbers.ParseError`, a `ValueError` whose
`position` attribute holds the offset where reading stopped.

Versions are ordered by major, minor, patch and then pre-release identifiers;
the build part is ignored. A release sorts after its pre-releases, numeric
identifiers compare by value and others by text. `Version.compare(other)`
returns -1, 0 or 1, and the usual comparison operators work as well.
`str(version)` gives the canonical form, without the leading `v`.

## Comparator sets

A comparator set is a space-separated list of conditions that must all hold.
X-ranges (`1.x`, `1.2`, `*`, or an empty string), hyphen ranges
(`1.2.3 - 2.3.4`), tilde (`~1.2.3`) and caret (`^1.2.3`) forms are expanded
into primitive bounds using the operators `<`, `<=`, `>`, `>=` and `=`:

```python
from svlib.version import Version
from svlib.comparator import ComparatorSet, match_comparator

comps = ComparatorSet.parse("^1.2.3")
print(str(comps))                              # >=1.2.3 <2.0.0

narrower = comps.and_("<1.5")                  # returns a new set
print(str(narrower))                           # >=1.2.3 <2.0.0 <1.5.0
print(narrower.matches(Version.parse("1.4.0")))   # True

print(match_comparator(Version.parse("1.2.3"), "1.2.x"))   # True
```

A `ComparatorSet` holds a tuple of `Comparator` objects, each an
`svlib.operators.Operator` and a `Version`; it can be iterated and has a
length. `and_` raises `ParseError` on empty or malformed text. Comparator
text longer than 512 characters is refused. `match_comparator` returns
`False` for text that does not parse.

## Ranges

A range joins comparator sets with `||`; it matches when any set matches:

```python
from svlib.version import Version
from svlib.range import Range, match_range

r = Range.parse("1.2.1 || >=1.2.3-alpha <1.2.5")
print(r.matches(Version.parse("v1.2.3-alpha.1")))   # True

wider = r.or_("^3.0.0")                             # returns a new range
print(str(wider))   # 1.2.1 || >=1.2.3-alpha <1.2.5 || >=3.0.0 <4.0.0

print(match_range(Version.parse("1.2.3"), "9.x || 1.2.x"))   # True
```

Range text longer than 512 characters is refused; `match_range` returns
`False` for text that does not parse.

Versions, comparator sets and ranges can be written to any text stream with
`write_to(stream)`, which returns the number of characters written.

## Lists of versions

```python
from svlib.version import Version
from svlib.collection import VersionList

versions = VersionList()
versions.push(Version.parse("2.0.3"))
versions.unshift(Version.parse("2.0.2"))
versions.sort()
newest = versions.pop()
oldest = versions.shift()
```

`VersionList` offers `push`, `unshift`, `pop`, `shift`, `erase`, `sort`,
`rsort` and `clear`, supports `len`, iteration and indexing, and raises
`IndexError` when removing from an empty list. Its `capacity` starts at 4 and
doubles as the list grows; `clear` keeps it.