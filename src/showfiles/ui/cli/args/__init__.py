"""Command line argument handling package."""

from showfiles.ui.cli.args.parser import ArgumentParser
from showfiles.ui.cli.args.options import ListArgs

__all__ = ["ArgumentParser", "ListArgs"]
