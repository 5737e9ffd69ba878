"""Command line interface package."""

from showfiles.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
