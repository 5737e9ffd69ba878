"""
Summary: Platform-aware trimming of a directory prefix from child paths.
Why: Case sensitivity of path comparison is chosen once at startup instead of at every call site.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import final


@final
@dataclass(slots=True, frozen=True)
class PathPrefixTrimmer:
    """Strip a folder prefix (and the separator after it) from a path."""

    case_sensitive: bool = True
    separators: str = "/"

    @classmethod
    def for_platform(cls, platform: str | None = None) -> "PathPrefixTrimmer":
        """Return the trimmer matching ``platform`` (defaults to ``sys.platform``)."""

        target = platform if platform is not None else sys.platform
        if target.startswith("win"):
            return cls(case_sensitive=False, separators="\\/")
        return cls(case_sensitive=True, separators="/")

    def trim(self, folder: str, path: str) -> str:
        """Return ``path`` relative to ``folder``.

        Paths that do not start with ``folder`` are returned unchanged.
        """
        if not folder or not self._starts_with(path, folder):
            return path
        return path[len(folder):].lstrip(self.separators)

    def _starts_with(self, path: str, folder: str) -> bool:
        if len(folder) > len(path):
            return False
        head = path[: len(folder)]
        if self.case_sensitive:
            return head == folder
        return head.casefold() == folder.casefold()


__all__ = ["PathPrefixTrimmer"]
