import pytest

from svlib.collection import VersionList
from svlib.range import match_range
from svlib.version import try_parse_version

SOURCES = [
    "2.0.0",
    "2.0.1",
    "2.0.2",
    "v2.0.0",
    "v2.0.1",
    "v2.0.2",
    "v2.0.3",
    "v2.1.0-beta1",
    "v2.1.0-beta2",
    "v2.0",
    "v2.1",
]


def _filled_list():
    versions = [try_parse_version(text) for text in SOURCES]
    collected = VersionList()
    for _ in range(3):
        for index, version in enumerate(versions):
            if match_range(version, ">2.0.1"):
                if index % 2 == 0:
                    collected.push(version)
                else:
                    collected.unshift(version)
    return collected


def test_length_and_capacity():
    collected = _filled_list()
    assert len(collected) == 18
    assert collected.capacity == 32


def test_sort_pop_shift_rsort():
    collected = _filled_list()
    collected.sort()
    texts = [str(version) for version in collected]
    assert texts == (
        ["2.0.2"] * 6
        + ["2.0.3"] * 3
        + ["2.1.0-beta1"] * 3
        + ["2.1.0-beta2"] * 3
        + ["2.1.0"] * 3
    )
    last = collected.pop()
    first = collected.shift()
    assert last.raw == "v2.1"
    assert first.raw in ("v2.0.2", "2.0.2")
    assert len(collected) == 16
    collected.rsort()
    texts = [str(version) for version in collected]
    assert texts == (
        ["2.1.0"] * 2
        + ["2.1.0-beta2"] * 3
        + ["2.1.0-beta1"] * 3
        + ["2.0.3"] * 3
        + ["2.0.2"] * 5
    )


@pytest.mark.parametrize(
    "minimum, capacity",
    [(1, 4), (3, 4), (4, 4), (5, 8), (8, 8), (16, 16), (17, 32)],
)
def test_first_growth(minimum, capacity):
    collected = VersionList()
    assert collected.grow(minimum) == minimum
    assert collected.capacity == capacity


def test_grow_non_positive_does_nothing():
    collected = VersionList()
    assert collected.grow(0) == 0
    assert collected.grow(-3) == 0
    assert collected.capacity == 0


def test_later_growth_doubles_or_jumps_to_power_of_two():
    collected = VersionList()
    collected.grow(4)
    collected.grow(6)
    assert collected.capacity == 8
    collected.grow(64)
    assert collected.capacity == 64
    collected.grow(10)
    assert collected.capacity == 64


def test_push_unshift_order():
    collected = VersionList()
    collected.push(try_parse_version("1.0.0"))
    collected.unshift(try_parse_version("0.1.0"))
    collected.push(try_parse_version("2.0.0"))
    assert [str(version) for version in collected] == ["0.1.0", "1.0.0", "2.0.0"]
    assert str(collected[1]) == "1.0.0"


def test_erase_returns_removed():
    collected = VersionList()
    for text in ("1.0.0", "2.0.0", "3.0.0"):
        collected.push(try_parse_version(text))
    removed = collected.erase(1)
    assert str(removed) == "2.0.0"
    assert [str(version) for version in collected] == ["1.0.0", "3.0.0"]


def test_pop_and_shift_empty_raise():
    collected = VersionList()
    with pytest.raises(IndexError):
        collected.pop()
    with pytest.raises(IndexError):
        collected.shift()


def test_clear_keeps_capacity():
    collected = VersionList()
    for text in ("1.0.0", "2.0.0", "3.0.0", "4.0.0", "5.0.0"):
        collected.push(try_parse_version(text))
    collected.clear()
    assert len(collected) == 0
    assert collected.capacity == 8