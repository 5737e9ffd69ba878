"""Command execution package for CLI."""

from showfiles.ui.cli.commands.listing import ListingCommand

__all__ = ["ListingCommand"]
