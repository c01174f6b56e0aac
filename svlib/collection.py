"""A growable list of versions that can be sorted by precedence."""

from __future__ import annotations

MIN_CAPACITY = 4
"""Capacity given to a list on its first growth unless more is needed."""


def _is_power_of_two(n):
    return n & -n == n


class VersionList:
    """An ordered list of versions with push, pop, shift and unshift at either end.

    ``capacity`` follows a doubling growth policy: it starts at
    :data:`MIN_CAPACITY` and doubles whenever more room is needed.
    """

    def __init__(self):
        self._items = []
        self._capacity = 0

    @property
    def capacity(self):
        """Number of versions the list has room for before growing again."""
        return self._capacity

    def grow(self, minimum):
        """Make room for at least ``minimum`` versions; return ``minimum``, or 0 if not positive."""
        if minimum <= 0:
            return 0
        if self._capacity:
            if self._capacity < minimum:
                if _is_power_of_two(minimum):
                    self._capacity = minimum
                else:
                    while self._capacity < minimum:
                        self._capacity *= 2
        elif minimum == MIN_CAPACITY or (
            minimum > MIN_CAPACITY and _is_power_of_two(minimum)
        ):
            self._capacity = minimum
        else:
            self._capacity = MIN_CAPACITY
            while self._capacity < minimum:
                self._capacity *= 2
        return minimum

    def push(self, version):
        """Append ``version`` at the end."""
        self.grow(len(self._items) + 1)
        self._items.append(version)

    def unshift(self, version):
        """Insert ``version`` at the front."""
        self.grow(len(self._items) + 1)
        self._items.insert(0, version)

    def pop(self):
        """Remove and return the last version; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty version list")
        return self._items.pop()

    def shift(self):
        """Remove and return the first version; raise IndexError when empty."""
        return self.erase(0)

    def erase(self, index):
        """Remove and return the version at ``index``; raise IndexError when out of range."""
        if not self._items:
            raise IndexError("erase from an empty version list")
        return self._items.pop(index)

    def sort(self):
        """Sort by ascending precedence."""
        self._items.sort()

    def rsort(self):
        """Sort by descending precedence."""
        self._items.sort(reverse=True)

    def clear(self):
        """Remove every version, keeping the capacity."""
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self):
        return f"VersionList({[str(version) for version in self._items]!r})"