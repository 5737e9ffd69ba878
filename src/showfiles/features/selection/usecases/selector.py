"""Resolve listing arguments into entries.

Where: features/selection/usecases/selector.py
What: Classify each argument as literal file, directory or glob and build its batch.
Why: Keep filesystem access in one place so metadata is fetched at most once per entry, and only when needed.

Resolution runs in two stages. Stage one enumerates bare candidate paths
(directory children already filtered by visibility, or glob matches). Stage
two attaches stat metadata when :func:`needs_metadata` says the type filter
or the sort key requires it, dropping entries that fail the type filter.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import final

from showfiles.features.selection.domain.errors import (
    InvalidGlobSyntaxError,
    OtherIOFailureError,
    PermissionDeniedError,
    UserNotFoundError,
)
from showfiles.features.selection.domain.models import (
    Entry,
    SelectionCriteria,
    VisibilityFilter,
    needs_metadata,
)
from showfiles.features.selection.usecases.globbing import (
    GlobExpander,
    GlobOptions,
    GlobSyntaxError,
    ScandirFunction,
    is_glob,
)
from showfiles.platform.logging import logger

StatFunction = Callable[[str], os.stat_result]
Candidate = tuple[str, Callable[[], os.stat_result]]


class SelectionKind(str, Enum):
    """How an argument was resolved."""

    LITERAL_FILE = "file"
    DIRECTORY = "directory"
    GLOB = "glob"


@dataclass(slots=True, frozen=True)
class Selection:
    """Result of resolving one argument."""

    argument: str
    kind: SelectionKind
    entries: tuple[Entry, ...] = ()

    @property
    def is_batch(self) -> bool:
        """Whether the selection goes through sorting and layout."""

        return self.kind is not SelectionKind.LITERAL_FILE


@final
class Selector:
    """Resolve arguments per a fixed :class:`SelectionCriteria`."""

    criteria: SelectionCriteria
    _stat: StatFunction
    _scandir: ScandirFunction
    _glob: GlobExpander
    _needs_metadata: bool

    def __init__(
        self,
        criteria: SelectionCriteria,
        *,
        stat_func: StatFunction = os.stat,
        scandir: ScandirFunction = os.scandir,
    ) -> None:
        """Initialize the selector.

        Args:
            criteria: Filters and sort specification for this run.
            stat_func: Metadata provider, following symlinks.
            scandir: Directory enumeration provider.
        """
        self.criteria = criteria
        self._stat = stat_func
        self._scandir = scandir
        self._needs_metadata = needs_metadata(criteria)
        self._glob = GlobExpander(
            GlobOptions(
                case_sensitive=False,
                require_literal_leading_dot=criteria.visibility is VisibilityFilter.VISIBLE_ONLY,
            ),
            scandir=scandir,
        )

    def select(self, argument: str) -> Selection:
        """Resolve ``argument`` into a selection.

        Raises:
            UserNotFoundError: If the argument does not exist and is no glob.
            InvalidGlobSyntaxError: If the glob pattern is malformed.
            PermissionDeniedError: If stat or directory read is refused.
            OtherIOFailureError: For any other I/O failure.
        """
        try:
            st = self._stat(argument)
        except FileNotFoundError:
            if is_glob(argument):
                return self._select_glob(argument)
            raise UserNotFoundError(argument) from None
        except PermissionError:
            raise PermissionDeniedError(argument) from None
        except OSError as exc:
            # Some platforms reject wildcard characters with other errors.
            if is_glob(argument):
                return self._select_glob(argument)
            raise OtherIOFailureError(argument, exc) from exc

        if stat.S_ISDIR(st.st_mode):
            entries = self._attach_metadata(self._list_directory(argument))
            return Selection(argument, SelectionKind.DIRECTORY, tuple(entries))
        return Selection(argument, SelectionKind.LITERAL_FILE)

    def _list_directory(self, directory: str) -> list[Candidate]:
        visibility = self.criteria.visibility
        try:
            with self._scandir(directory) as iterator:
                return [
                    (child.path, child.stat)
                    for child in iterator
                    if visibility.is_match(child.name) and _is_displayable(child.path)
                ]
        except PermissionError:
            raise PermissionDeniedError(directory) from None
        except OSError as exc:
            raise OtherIOFailureError(directory, exc) from exc

    def _select_glob(self, pattern: str) -> Selection:
        try:
            paths = list(self._glob.expand(pattern))
        except GlobSyntaxError as exc:
            raise InvalidGlobSyntaxError(pattern, str(exc)) from exc
        except MemoryError as exc:
            raise OtherIOFailureError(pattern, exc) from exc

        candidates: list[Candidate] = [
            (path, self._stat_later(path)) for path in paths if _is_displayable(path)
        ]
        entries = self._attach_metadata(candidates)
        logger.debug("Pattern %s matched %d entries", pattern, len(entries))
        return Selection(pattern, SelectionKind.GLOB, tuple(entries))

    def _stat_later(self, path: str) -> Callable[[], os.stat_result]:
        return lambda: self._stat(path)

    def _attach_metadata(self, candidates: Iterable[Candidate]) -> list[Entry]:
        if not self._needs_metadata:
            return [Entry.bare(path) for path, _ in candidates]

        type_filter = self.criteria.type_filter
        entries: list[Entry] = []
        for path, fetch in candidates:
            try:
                st = fetch()
            except OSError as exc:
                logger.debug("Dropping %s, metadata unavailable: %s", path, exc)
                continue
            if type_filter.is_match(st):
                entries.append(Entry.from_stat(path, st))
        return entries


def _is_displayable(path: str) -> bool:
    """Return whether ``path`` survives being written as UTF-8.

    Names that are not valid UTF-8 on disk arrive surrogate-escaped and are
    dropped from listings.
    """
    try:
        _ = path.encode("utf-8")
    except UnicodeEncodeError:
        logger.debug("Dropping %r, name is not valid UTF-8", path)
        return False
    return True


__all__ = ["Selection", "SelectionKind", "Selector"]
