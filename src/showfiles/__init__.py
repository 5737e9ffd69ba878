"""showfiles: list files and directories in terminal-width-aware columns."""

__version__ = "0.1.0"
