"""Display helpers for the CLI."""

from showfiles.ui.cli.display.listing import ListingDisplay
from showfiles.ui.cli.display.terminal import detect_terminal_width, stdout_is_terminal

__all__ = ["ListingDisplay", "detect_terminal_width", "stdout_is_terminal"]
