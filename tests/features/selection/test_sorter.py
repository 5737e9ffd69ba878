"""
Summary: Tests for stable batch ordering by name, size and timestamps.
Why: Ties and missing metadata must order predictably in both directions.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from showfiles.features.selection import Entry, SortDirection, SortKey, SortSpec, Sorter


def _at(day: int) -> datetime:
    return datetime(2024, 1, day, tzinfo=UTC)


@pytest.fixture
def entries() -> list[Entry]:
    """Entries in enumeration order with a mix of sizes and timestamps."""

    return [
        Entry("dir/b.txt", size=30, modified=_at(3)),
        Entry("dir/a.md", size=10, modified=None),
        Entry("dir/c", size=20, modified=_at(1)),
        Entry("dir/d.bin", size=10, modified=_at(2)),
        Entry("dir/e", size=5, modified=None),
    ]


def _paths(entries: list[Entry]) -> list[str]:
    return [entry.path for entry in entries]


def test_no_key_preserves_enumeration_order(entries: list[Entry]) -> None:
    """Without a key the order is kept in both directions."""

    for direction in SortDirection:
        result = Sorter(SortSpec(SortKey.NONE, direction)).sort(entries)
        assert result == entries


def test_name_sorts_by_stem(entries: list[Entry]) -> None:
    result = Sorter(SortSpec(SortKey.NAME)).sort(entries)
    assert _paths(result) == ["dir/a.md", "dir/b.txt", "dir/c", "dir/d.bin", "dir/e"]


def test_name_descending(entries: list[Entry]) -> None:
    result = Sorter(SortSpec(SortKey.NAME, SortDirection.DESCENDING)).sort(entries)
    assert _paths(result) == ["dir/e", "dir/d.bin", "dir/c", "dir/b.txt", "dir/a.md"]


def test_name_ignores_extension() -> None:
    """``b.aaa`` and ``b.zzz`` share the stem and keep enumeration order."""

    batch = [Entry("b.zzz"), Entry("a.zzz"), Entry("b.aaa")]
    result = Sorter(SortSpec(SortKey.NAME)).sort(batch)
    assert _paths(result) == ["a.zzz", "b.zzz", "b.aaa"]


def test_size_ascending_is_stable(entries: list[Entry]) -> None:
    result = Sorter(SortSpec(SortKey.SIZE)).sort(entries)

    sizes = [entry.size for entry in result]
    assert all(left <= right for left, right in zip(sizes, sizes[1:]))
    # Equal sizes keep enumeration order.
    assert _paths(result)[1:3] == ["dir/a.md", "dir/d.bin"]


def test_size_descending_keeps_ties_in_enumeration_order(entries: list[Entry]) -> None:
    result = Sorter(SortSpec(SortKey.SIZE, SortDirection.DESCENDING)).sort(entries)
    assert _paths(result) == ["dir/b.txt", "dir/c", "dir/a.md", "dir/d.bin", "dir/e"]


def test_missing_timestamps_sort_first(entries: list[Entry]) -> None:
    """Entries without the timestamp precede every entry that has one."""

    result = Sorter(SortSpec(SortKey.MODIFIED)).sort(entries)
    assert _paths(result) == ["dir/a.md", "dir/e", "dir/c", "dir/d.bin", "dir/b.txt"]


def test_missing_timestamps_sort_last_when_descending(entries: list[Entry]) -> None:
    result = Sorter(SortSpec(SortKey.MODIFIED, SortDirection.DESCENDING)).sort(entries)
    assert _paths(result) == ["dir/b.txt", "dir/d.bin", "dir/c", "dir/a.md", "dir/e"]


@pytest.mark.parametrize("key", [SortKey.CREATED, SortKey.ACCESSED])
def test_all_missing_timestamps_keep_order(entries: list[Entry], key: SortKey) -> None:
    assert Sorter(SortSpec(key)).sort(entries) == entries


@pytest.mark.parametrize("key", list(SortKey))
@pytest.mark.parametrize("direction", list(SortDirection))
def test_sorting_is_idempotent(
    entries: list[Entry], key: SortKey, direction: SortDirection
) -> None:
    sorter = Sorter(SortSpec(key, direction))
    once = sorter.sort(entries)
    assert sorter.sort(once) == once


def test_sort_does_not_mutate_input(entries: list[Entry]) -> None:
    original = list(entries)
    _ = Sorter(SortSpec(SortKey.SIZE)).sort(entries)
    assert entries == original
