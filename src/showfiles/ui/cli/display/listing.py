"""src/showfiles/ui/cli/display/listing.py
What: Write listing rows, headers and literal paths to standard output.
Why: Keep console formatting in one place; names are printed verbatim.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console

from showfiles.features.layout import LayoutConfig, layout_rows


@final
class ListingDisplay:
    """Handles listing output in CLI."""

    console: Console
    layout: LayoutConfig

    def __init__(self, layout: LayoutConfig, console: Console | None = None) -> None:
        """Initialize listing display.

        Args:
            layout: Display options for this run.
            console: Output console; stdout when omitted.
        """
        self.layout = layout
        self.console = console or Console(
            soft_wrap=True, markup=False, highlight=False, emoji=False
        )

    def show_literal(self, path: str) -> None:
        """Print a literal file argument on its own line."""

        self._write(self.layout.space_style.format(path))

    def show_header(self, argument: str) -> None:
        """Print the header that precedes one argument's batch."""

        self._write(f"# {argument}:")

    def show_batch(self, names: Sequence[str]) -> None:
        """Format ``names`` and print them one per line or as a grid."""

        formatted = [self.layout.space_style.format(name) for name in names]
        for row in layout_rows(formatted, self.layout):
            self._write(row)

    def _write(self, line: str) -> None:
        self.console.print(
            line, markup=False, highlight=False, emoji=False, soft_wrap=True
        )


__all__ = ["ListingDisplay"]
