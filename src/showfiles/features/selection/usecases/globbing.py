"""Glob expansion with configurable case and hidden-name handling.

Where: features/selection/usecases/globbing.py
What: Split a pattern into path components and expand it one directory level per component.
Why: The standard ``glob`` module cannot match case-insensitively on every
platform nor keep wildcards off leading dots on demand.

Separators are always literal: a wildcard never matches across a ``/`` (or
``\\`` on Windows). Results come back in sorted order per directory level.
"""

from __future__ import annotations

import fnmatch
import os
import re
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Final, final

from showfiles.platform.logging import logger

GLOB_METACHARACTERS: Final[frozenset[str]] = frozenset("*?[")
RECURSIVE_WILDCARD: Final[str] = "**"

ScandirFunction = Callable[[str], AbstractContextManager[Iterator[os.DirEntry[str]]]]


def is_glob(pattern: str) -> bool:
    """Return whether ``pattern`` contains a glob metacharacter."""

    return any(char in GLOB_METACHARACTERS for char in pattern)


class GlobSyntaxError(ValueError):
    """Pattern cannot be expanded."""


@dataclass(slots=True, frozen=True)
class GlobOptions:
    """Matching options for :class:`GlobExpander`."""

    case_sensitive: bool = False
    require_literal_leading_dot: bool = True


@dataclass(slots=True, frozen=True)
class _Component:
    text: str
    matcher: re.Pattern[str] | None
    directories_only: bool = False


def _separators() -> str:
    return os.sep + (os.altsep or "")


def _validate_brackets(component: str) -> None:
    index = 0
    while index < len(component):
        if component[index] != "[":
            index += 1
            continue
        # ``[]]`` and ``[!]]`` treat the first ``]`` as a member.
        close = index + 1
        if close < len(component) and component[close] == "!":
            close += 1
        if close < len(component) and component[close] == "]":
            close += 1
        close = component.find("]", close)
        if close == -1:
            raise GlobSyntaxError(f"unclosed character class in '{component}'")
        index = close + 1


@final
class GlobExpander:
    """Expand glob patterns against the local filesystem."""

    options: GlobOptions
    _scandir: ScandirFunction

    def __init__(
        self,
        options: GlobOptions | None = None,
        *,
        scandir: ScandirFunction = os.scandir,
    ) -> None:
        self.options = options or GlobOptions()
        self._scandir = scandir

    def compile(self, pattern: str) -> tuple[str, list[_Component]]:
        """Split ``pattern`` into an anchor and compiled components.

        Raises:
            GlobSyntaxError: If the pattern is empty, uses recursive wildcards
                or leaves a character class open.
        """
        if not pattern:
            raise GlobSyntaxError("empty pattern")

        drive, remainder = os.path.splitdrive(pattern)
        separators = _separators()
        anchor = drive
        if remainder[:1] and remainder[0] in separators:
            anchor += os.sep

        flags = 0 if self.options.case_sensitive else re.IGNORECASE
        components: list[_Component] = []
        for part in re.split("[" + re.escape(separators) + "]", remainder):
            if not part:
                continue
            if RECURSIVE_WILDCARD in part:
                raise GlobSyntaxError("recursive wildcards are not supported")
            if not is_glob(part):
                components.append(_Component(part, None))
                continue
            _validate_brackets(part)
            components.append(_Component(part, re.compile(fnmatch.translate(part), flags)))

        if not components:
            raise GlobSyntaxError("pattern has no components")
        # A trailing separator restricts the final matches to directories.
        if remainder[-1] in separators:
            last = components[-1]
            components[-1] = _Component(last.text, last.matcher, directories_only=True)
        return anchor, components

    def expand(self, pattern: str) -> Iterator[str]:
        """Yield paths matching ``pattern``.

        Syntax errors are raised before the first path is produced.
        Directories that cannot be read are skipped.
        """
        anchor, components = self.compile(pattern)
        return self._walk(anchor, components)

    def _walk(self, anchor: str, components: list[_Component]) -> Iterator[str]:
        candidates = [anchor]
        last = len(components) - 1
        for depth, component in enumerate(components):
            is_last = depth == last
            next_candidates: list[str] = []
            for base in candidates:
                next_candidates.extend(self._match_component(base, component, is_last))
            candidates = next_candidates
            if not candidates:
                return
        yield from candidates

    def _match_component(self, base: str, component: _Component, is_last: bool) -> list[str]:
        directories_only = component.directories_only or not is_last
        matcher = component.matcher
        if matcher is None:
            path = _join(base, component.text)
            exists = os.path.isdir(path) if directories_only else os.path.lexists(path)
            return [path] if exists else []

        try:
            with self._scandir(base or os.curdir) as iterator:
                children = sorted(
                    (entry for entry in iterator if not directories_only or _is_dir(entry)),
                    key=lambda entry: entry.name,
                )
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", base or os.curdir, exc)
            return []

        matches: list[str] = []
        for child in children:
            if not self._name_matches(child.name, component.text, matcher):
                continue
            matches.append(_join(base, child.name))
        return matches

    def _name_matches(self, name: str, text: str, matcher: re.Pattern[str]) -> bool:
        if (
            self.options.require_literal_leading_dot
            and name.startswith(".")
            and not text.startswith(".")
        ):
            return False
        return matcher.match(name) is not None


def _join(base: str, name: str) -> str:
    return os.path.join(base, name) if base else name


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


__all__ = [
    "GLOB_METACHARACTERS",
    "GlobExpander",
    "GlobOptions",
    "GlobSyntaxError",
    "is_glob",
]
