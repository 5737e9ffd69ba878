"""src/showfiles/ui/cli/commands/listing.py
What: Run the per-argument selection, sort and display pipeline.
Why: Each argument is an independent batch whose error class feeds the composite exit status.
"""

from __future__ import annotations

from typing import final

from showfiles.features.selection import (
    Entry,
    ExitStatus,
    Selection,
    SelectionError,
    SelectionKind,
    Selector,
    Sorter,
    fold_statuses,
)
from showfiles.platform.filesystem import PathPrefixTrimmer
from showfiles.platform.logging import logger
from showfiles.ui.cli.args.options import ListArgs
from showfiles.ui.cli.display.listing import ListingDisplay


@final
class ListingCommand:
    """Command for listing one or more patterns."""

    args: ListArgs
    selector: Selector
    sorter: Sorter
    display: ListingDisplay
    trimmer: PathPrefixTrimmer

    def __init__(
        self,
        args: ListArgs,
        *,
        selector: Selector | None = None,
        display: ListingDisplay | None = None,
        trimmer: PathPrefixTrimmer | None = None,
    ) -> None:
        """Initialize listing command.

        Args:
            args: Command line arguments.
            selector: Argument resolver; built from ``args`` when omitted.
            display: Output writer; stdout when omitted.
            trimmer: Folder prefix trimmer; chosen for the running platform when omitted.
        """
        self.args = args
        self.selector = selector or Selector(args.criteria)
        self.sorter = Sorter(args.criteria.sort)
        self.display = display or ListingDisplay(args.criteria.layout)
        self.trimmer = trimmer or PathPrefixTrimmer.for_platform()

    def execute(self) -> ExitStatus:
        """Execute the listing.

        Returns:
            ExitStatus: Merged error classes of all arguments.
        """
        show_headers = len(self.args.patterns) > 1
        return fold_statuses(
            self._list_argument(argument, show_headers) for argument in self.args.patterns
        )

    def _list_argument(self, argument: str, show_headers: bool) -> ExitStatus:
        try:
            selection = self.selector.select(argument)
        except SelectionError as exc:
            logger.error("%s", exc)
            return exc.status

        if not selection.is_batch:
            self.display.show_literal(argument)
            return ExitStatus.OK

        entries = self.sorter.sort(selection.entries)
        names = [self._display_name(selection, entry) for entry in entries]
        if show_headers:
            self.display.show_header(argument)
        self.display.show_batch(names)
        return ExitStatus.OK

    def _display_name(self, selection: Selection, entry: Entry) -> str:
        if selection.kind is SelectionKind.DIRECTORY:
            return self.trimmer.trim(selection.argument, entry.path)
        return entry.path


__all__ = ["ListingCommand"]
