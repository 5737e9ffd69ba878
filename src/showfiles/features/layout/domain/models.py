"""
Summary: Layout configuration and space-display styles for rendered names.
Why: Keep the knobs of the column layout separate from the packing algorithm.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

DEFAULT_MIN_COLUMN_SPACING: Final[int] = 4
DEFAULT_TERMINAL_WIDTH: Final[int] = 128


class SpaceStyle(str, Enum):
    """How names that contain a space are displayed."""

    BARE = "bare"
    QUOTED = "quoted"
    ESCAPED = "escaped"

    def format(self, name: str) -> str:
        """Render ``name`` in this style; names without spaces pass through."""

        if " " not in name:
            return name
        if self is SpaceStyle.QUOTED:
            return "'" + name.replace("'", "\\'") + "'"
        if self is SpaceStyle.ESCAPED:
            return name.replace(" ", "\\ ")
        return name


@dataclass(slots=True, frozen=True)
class LayoutConfig:
    """Display options for one invocation."""

    one_per_line: bool = False
    space_style: SpaceStyle = SpaceStyle.BARE
    terminal_width: int = DEFAULT_TERMINAL_WIDTH
    min_column_spacing: int = DEFAULT_MIN_COLUMN_SPACING


__all__ = [
    "DEFAULT_MIN_COLUMN_SPACING",
    "DEFAULT_TERMINAL_WIDTH",
    "LayoutConfig",
    "SpaceStyle",
]
