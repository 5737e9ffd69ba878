"""Column-fit layout for packing names into a bounded terminal width.

Where: features/layout/usecases/engine.py
What: Column-count search, row packing and the lazy row iterator.
Why: Fill the terminal width with as few rows as practical without wrapping names.

Widths are measured in terminal cells (``rich.cells.cell_len``), so wide
characters take the room they actually occupy on screen.
"""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator, Sequence
from typing import final

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.cells import cell_len

from showfiles.features.layout.domain.models import LayoutConfig


def is_dense_enough(columns: int, item_count: int, total_width: int, width: int) -> bool:
    """Early-accept heuristic for the column search.

    A candidate is good enough once it uses at least half as many columns as
    there are items and at least half of the available width. Stopping here
    avoids layouts that are technically wider but needlessly sparse.

    Args:
        columns: Candidate column count.
        item_count: Number of items being laid out.
        total_width: Width the candidate needs, spacing included.
        width: Available width.

    Returns:
        bool: True when the search should accept the candidate.
    """
    return columns * 2 >= item_count and total_width * 2 >= width


def column_widths(item_widths: Sequence[int], columns: int) -> list[int]:
    """Return per-column maxima when items are chunked row-major into ``columns``."""

    widths = [0] * columns
    for index, item_width in enumerate(item_widths):
        position = index % columns
        if item_width > widths[position]:
            widths[position] = item_width
    return widths


def choose_column_widths(items: Sequence[str], width: int, min_spacing: int) -> list[int]:
    """Search for the column count that best fits ``items`` into ``width``.

    Candidates are tried from one column upward. The first exact fit, or the
    first fit accepted by :func:`is_dense_enough`, wins. As soon as a
    candidate overflows, the last candidate that fitted is used; if even a
    single column overflows the result is one zero-width column.

    Returns:
        list[int]: Width of every column of the chosen layout.
    """
    item_widths = [cell_len(item) for item in items]
    previous = [0]
    columns = 1
    while columns <= len(item_widths):
        widths = column_widths(item_widths, columns)
        total = sum(widths) + min_spacing * (columns - 1)
        if total == width or (
            total <= width and is_dense_enough(columns, len(item_widths), total, width)
        ):
            return widths
        if total > width:
            break
        previous = widths
        columns += 1
    return previous


def column_offsets(widths: Sequence[int], spacing: int) -> list[int]:
    """Return the starting cell of each column."""

    offsets: list[int] = []
    position = 0
    for column_width in widths:
        offsets.append(position)
        position += column_width + spacing
    return offsets


@final
class RowPacker:
    """Accumulate items into rows aligned on precomputed column offsets."""

    _offsets: list[int]
    _index: int
    _buffer: str
    _length: int

    def __init__(self, offsets: Sequence[int]) -> None:
        if not offsets:
            raise ValueError("a row needs at least one column")
        self._offsets = list(offsets)
        self._index = 0
        self._buffer = ""
        self._length = 0

    @classmethod
    def for_items(cls, items: Sequence[str], width: int, min_spacing: int) -> "RowPacker":
        """Build a packer whose columns were chosen for ``items``."""

        widths = choose_column_widths(items, width, min_spacing)
        return cls(column_offsets(widths, min_spacing))

    @property
    def offsets(self) -> list[int]:
        return list(self._offsets)

    @property
    def is_empty(self) -> bool:
        return not self._buffer

    def push(self, item: str) -> str | None:
        """Append ``item``; return the previous row when ``item`` starts a new one."""

        if self._index >= len(self._offsets):
            row = self._buffer
            self._buffer = item
            self._length = cell_len(item)
            self._index = 1
            return row

        if self._index > 0:
            # Overflowing items push later columns right instead of truncating.
            padding = self._offsets[self._index] - self._length
            if padding > 0:
                self._buffer += " " * padding
                self._length += padding
        self._buffer += item
        self._length += cell_len(item)
        self._index += 1
        return None

    def flush(self) -> str:
        """Return the pending partial row and reset the packer."""

        row = self._buffer
        self._buffer = ""
        self._length = 0
        self._index = 0
        return row


@final
class Rows(Iterator[str]):
    """Single-pass iterator over the grid rows of a batch of names.

    The names are copied into a private queue that each row drains, so the
    iterator cannot be restarted while the caller's sequence stays intact.
    """

    _packer: RowPacker
    _pending: deque[str]

    def __init__(self, items: Sequence[str], width: int, min_spacing: int) -> None:
        self._packer = RowPacker.for_items(items, width, min_spacing)
        self._pending = deque(items)

    @override
    def __next__(self) -> str:
        while self._pending:
            row = self._packer.push(self._pending.popleft())
            if row is not None:
                return row
        if self._packer.is_empty:
            raise StopIteration
        return self._packer.flush()


def layout_rows(items: Sequence[str], config: LayoutConfig) -> Iterator[str]:
    """Return the rows to print for ``items`` under ``config``."""

    if config.one_per_line:
        return iter(list(items))
    return Rows(items, config.terminal_width, config.min_column_spacing)


__all__ = [
    "RowPacker",
    "Rows",
    "choose_column_widths",
    "column_offsets",
    "column_widths",
    "is_dense_enough",
    "layout_rows",
]
