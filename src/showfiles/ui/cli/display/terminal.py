"""src/showfiles/ui/cli/display/terminal.py
What: Probe the attached terminal once per invocation.
Why: Width and interactivity decide between grid and one-per-line output.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable

from rich.console import Console

from showfiles.config import WIDTH_RATIO_DEFAULT
from showfiles.features.layout import DEFAULT_TERMINAL_WIDTH

TerminalSizeQuery = Callable[[tuple[int, int]], os.terminal_size]


def detect_terminal_width(
    ratio: float = WIDTH_RATIO_DEFAULT,
    fallback: int = DEFAULT_TERMINAL_WIDTH,
    *,
    get_terminal_size: TerminalSizeQuery = shutil.get_terminal_size,
) -> int:
    """Return the share of the terminal width used for listings.

    Args:
        ratio: Fraction of the terminal columns to fill.
        fallback: Width used when no terminal size is available.
        get_terminal_size: Size query, injectable for tests.

    Returns:
        int: Target layout width in cells.
    """
    columns = get_terminal_size((0, 0)).columns
    if columns <= 0:
        return fallback
    return max(1, int(columns * ratio))


def stdout_is_terminal(console: Console | None = None) -> bool:
    """Return whether standard output is an interactive terminal."""

    return (console or Console()).is_terminal


__all__ = ["detect_terminal_width", "stdout_is_terminal"]
