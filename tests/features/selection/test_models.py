"""Tests for selection value objects."""

from __future__ import annotations

import os
import stat
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any, cast

import pytest

from showfiles.features.selection import (
    Entry,
    SelectionCriteria,
    SortDirection,
    SortKey,
    SortSpec,
    TypeFilter,
    VisibilityFilter,
    needs_metadata,
)


def _stat(mode: int, **extra: Any) -> os.stat_result:
    values: dict[str, Any] = {
        "st_mode": mode,
        "st_size": 10,
        "st_mtime": 1_700_000_000.0,
        "st_atime": 1_700_000_100.0,
    }
    values.update(extra)
    return cast(os.stat_result, SimpleNamespace(**values))


@pytest.mark.parametrize(
    ("name", "any_", "hidden", "visible"),
    [
        (".bashrc", True, True, False),
        ("notes.txt", True, False, True),
        ("..", True, True, False),
    ],
)
def test_visibility_filter(name: str, any_: bool, hidden: bool, visible: bool) -> None:
    """A name is hidden iff it starts with a dot."""

    assert VisibilityFilter.ANY.is_match(name) is any_
    assert VisibilityFilter.HIDDEN_ONLY.is_match(name) is hidden
    assert VisibilityFilter.VISIBLE_ONLY.is_match(name) is visible


def test_type_filter_matches_stat_mode() -> None:
    regular = _stat(stat.S_IFREG | 0o644)
    directory = _stat(stat.S_IFDIR | 0o755)

    assert TypeFilter.FILE_ONLY.is_match(regular)
    assert not TypeFilter.FILE_ONLY.is_match(directory)
    assert TypeFilter.DIRECTORY_ONLY.is_match(directory)
    assert not TypeFilter.DIRECTORY_ONLY.is_match(regular)
    assert TypeFilter.ANY.is_match(regular) and TypeFilter.ANY.is_match(directory)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("size", SortKey.SIZE),
        ("NAME", SortKey.NAME),
        (" none ", SortKey.NONE),
        ("date-created", SortKey.CREATED),
        ("last-modified", SortKey.MODIFIED),
        ("Last-Accessed", SortKey.ACCESSED),
    ],
)
def test_sort_key_from_user_input(value: str, expected: SortKey) -> None:
    assert SortKey.from_user_input(value) is expected


def test_sort_key_rejects_unknown_values() -> None:
    with pytest.raises(ValueError, match="Unsupported sort key"):
        _ = SortKey.from_user_input("colour")


@pytest.mark.parametrize(
    ("type_filter", "key", "expected"),
    [
        (TypeFilter.ANY, SortKey.NONE, False),
        (TypeFilter.ANY, SortKey.NAME, False),
        (TypeFilter.ANY, SortKey.SIZE, True),
        (TypeFilter.ANY, SortKey.MODIFIED, True),
        (TypeFilter.FILE_ONLY, SortKey.NONE, True),
        (TypeFilter.DIRECTORY_ONLY, SortKey.NAME, True),
    ],
)
def test_needs_metadata(type_filter: TypeFilter, key: SortKey, expected: bool) -> None:
    """Metadata is needed only for a type filter or a metadata sort key."""

    criteria = SelectionCriteria(
        type_filter=type_filter,
        sort=SortSpec(key, SortDirection.DESCENDING),
    )
    assert needs_metadata(criteria) is expected


def test_entry_bare_carries_no_metadata() -> None:
    entry = Entry.bare("a.txt")
    assert entry.size == 0
    assert entry.created is None and entry.modified is None and entry.accessed is None


def test_entry_from_stat_without_birth_time() -> None:
    entry = Entry.from_stat("a.txt", _stat(stat.S_IFREG))

    assert entry.size == 10
    assert entry.created is None
    assert entry.modified == datetime.fromtimestamp(1_700_000_000.0, tz=UTC)
    assert entry.accessed == datetime.fromtimestamp(1_700_000_100.0, tz=UTC)


def test_entry_from_stat_with_birth_time() -> None:
    entry = Entry.from_stat("a.txt", _stat(stat.S_IFREG, st_birthtime=1_600_000_000.0))
    assert entry.created == datetime.fromtimestamp(1_600_000_000.0, tz=UTC)


def test_default_criteria_hide_dot_files_without_sorting() -> None:
    criteria = SelectionCriteria()
    assert criteria.type_filter is TypeFilter.ANY
    assert criteria.visibility is VisibilityFilter.VISIBLE_ONLY
    assert criteria.sort == SortSpec(SortKey.NONE, SortDirection.ASCENDING)
