"""Value objects describing what to list and how to order it.

Where: features/selection/domain/models.py
What: Entry records, filter enums, sort specification and the selection criteria bundle.
Why: Give the selector, sorter and CLI one shared vocabulary free of I/O.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Final

from showfiles.features.layout.domain.models import LayoutConfig

HIDDEN_PREFIX: Final[str] = "."


class TypeFilter(str, Enum):
    """Restrict a listing to one kind of filesystem entry."""

    ANY = "any"
    FILE_ONLY = "file"
    DIRECTORY_ONLY = "directory"

    def is_match(self, st: os.stat_result) -> bool:
        """Return whether ``st`` describes an entry this filter keeps."""

        if self is TypeFilter.FILE_ONLY:
            return stat.S_ISREG(st.st_mode)
        if self is TypeFilter.DIRECTORY_ONLY:
            return stat.S_ISDIR(st.st_mode)
        return True


class VisibilityFilter(str, Enum):
    """Decide whether dot-prefixed names are listed."""

    ANY = "any"
    HIDDEN_ONLY = "hidden"
    VISIBLE_ONLY = "visible"

    def is_match(self, name: str) -> bool:
        """Return whether the entry called ``name`` passes this filter."""

        if self is VisibilityFilter.HIDDEN_ONLY:
            return name.startswith(HIDDEN_PREFIX)
        if self is VisibilityFilter.VISIBLE_ONLY:
            return not name.startswith(HIDDEN_PREFIX)
        return True


class SortKey(str, Enum):
    """Attribute used to order a batch of entries."""

    NONE = "none"
    NAME = "name"
    SIZE = "size"
    CREATED = "created"
    MODIFIED = "modified"
    ACCESSED = "accessed"

    @staticmethod
    def from_user_input(value: str) -> "SortKey":
        """Translate raw CLI input (case-insensitive, legacy aliases allowed)."""

        normalized = value.strip().lower()
        normalized = _SORT_KEY_ALIASES.get(normalized, normalized)
        for key in SortKey:
            if key.value == normalized:
                return key
        valid: Final[str] = ", ".join(k.value for k in SortKey)
        msg = f"Unsupported sort key '{value}'. Valid options: {valid}"
        raise ValueError(msg)

    @property
    def needs_metadata(self) -> bool:
        """Whether ordering by this key requires a stat call per entry."""

        return self not in (SortKey.NONE, SortKey.NAME)


_SORT_KEY_ALIASES: Final[dict[str, str]] = {
    "date-created": "created",
    "last-modified": "modified",
    "last-accessed": "accessed",
}


class SortDirection(str, Enum):
    """Ascending or descending order."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(slots=True, frozen=True)
class SortSpec:
    """Sort key plus direction."""

    key: SortKey = SortKey.NONE
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESCENDING


@dataclass(slots=True, frozen=True)
class SelectionCriteria:
    """Immutable listing configuration produced by the CLI layer."""

    type_filter: TypeFilter = TypeFilter.ANY
    visibility: VisibilityFilter = VisibilityFilter.VISIBLE_ONLY
    sort: SortSpec = field(default_factory=SortSpec)
    layout: LayoutConfig = field(default_factory=LayoutConfig)


def needs_metadata(criteria: SelectionCriteria) -> bool:
    """Return whether entries must carry stat metadata for ``criteria``.

    Only a type filter or a metadata-based sort key require it; plain
    listings and name sorts never stat their entries.
    """

    return criteria.type_filter is not TypeFilter.ANY or criteria.sort.key.needs_metadata


@dataclass(slots=True, frozen=True)
class Entry:
    """A listed path plus whatever metadata filtering or sorting needed."""

    path: str
    size: int = 0
    created: datetime | None = None
    modified: datetime | None = None
    accessed: datetime | None = None

    @classmethod
    def bare(cls, path: str) -> "Entry":
        """Build an entry that carries no metadata."""

        return cls(path=path)

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> "Entry":
        """Build an entry populated from an already fetched stat result.

        ``created`` stays ``None`` on platforms that do not report a birth
        time.
        """

        birthtime: float | None = getattr(st, "st_birthtime", None)
        return cls(
            path=path,
            size=st.st_size,
            created=_to_datetime(birthtime),
            modified=_to_datetime(st.st_mtime),
            accessed=_to_datetime(st.st_atime),
        )


def _to_datetime(timestamp: float | None) -> datetime | None:
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=UTC)


__all__ = [
    "Entry",
    "HIDDEN_PREFIX",
    "SelectionCriteria",
    "SortDirection",
    "SortKey",
    "SortSpec",
    "TypeFilter",
    "VisibilityFilter",
    "needs_metadata",
]
