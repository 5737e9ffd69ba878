"""
Summary: Stable ordering of one argument's batch of entries.
Why: Sort keys read only the metadata the selector fetched, with missing values ordered first.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any, final

from showfiles.features.selection.domain.models import Entry, SortKey, SortSpec

SortValue = tuple[bool, Any]


def _optional(value: Any) -> SortValue:
    # Missing values compare below every present value.
    return (value is not None, value if value is not None else 0)


def _stem(entry: Entry) -> str | None:
    name = os.path.basename(os.path.normpath(entry.path))
    if name in ("", os.curdir, os.pardir):
        return None
    return os.path.splitext(name)[0]


def _timestamp(attribute: str) -> Callable[[Entry], SortValue]:
    def key(entry: Entry) -> SortValue:
        value: datetime | None = getattr(entry, attribute)
        return _optional(value)

    return key


_KEY_FUNCTIONS: dict[SortKey, Callable[[Entry], Any]] = {
    SortKey.NAME: lambda entry: _optional(_stem(entry)),
    SortKey.SIZE: lambda entry: entry.size,
    SortKey.CREATED: _timestamp("created"),
    SortKey.MODIFIED: _timestamp("modified"),
    SortKey.ACCESSED: _timestamp("accessed"),
}


@final
class Sorter:
    """Order entries per a :class:`SortSpec`."""

    spec: SortSpec

    def __init__(self, spec: SortSpec) -> None:
        self.spec = spec

    def sort(self, entries: Sequence[Entry]) -> list[Entry]:
        """Return ``entries`` in sorted order.

        Equal keys keep their enumeration order in both directions. With no
        sort key the enumeration order is returned unchanged whatever the
        direction.
        """
        if self.spec.key is SortKey.NONE:
            return list(entries)
        key_function = _KEY_FUNCTIONS[self.spec.key]
        return sorted(entries, key=key_function, reverse=self.spec.descending)


__all__ = ["Sorter"]
