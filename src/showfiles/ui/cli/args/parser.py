"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import Final, final

from showfiles import __version__
from showfiles.config import Config
from showfiles.features.layout import LayoutConfig, SpaceStyle
from showfiles.features.selection import (
    SelectionCriteria,
    SortDirection,
    SortKey,
    SortSpec,
    TypeFilter,
    VisibilityFilter,
)
from showfiles.platform.logging import setup_logger
from showfiles.ui.cli.args.options import ListArgs
from showfiles.ui.cli.display.terminal import detect_terminal_width, stdout_is_terminal

CURRENT_DIRECTORY: Final[str] = "."
SORT_CHOICES: Final[str] = ", ".join(key.value for key in SortKey)


def _sort_key(value: str) -> SortKey:
    """argparse type for sort keys."""
    try:
        return SortKey.from_user_input(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="sf",
            description="List files and directories.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        _ = parser.add_argument(
            "-1",
            "--1aline",
            dest="one_per_line",
            action="store_true",
            help="Show each entry in a new line",
        )

        type_group = parser.add_mutually_exclusive_group()
        _ = type_group.add_argument(
            "-f",
            "--file",
            dest="files_only",
            action="store_true",
            help="Only display regular files",
        )
        _ = type_group.add_argument(
            "-d",
            "--dir",
            dest="directories_only",
            action="store_true",
            help="Only display directories",
        )

        hidden_group = parser.add_mutually_exclusive_group()
        _ = hidden_group.add_argument(
            "-a",
            "--all",
            dest="show_all",
            action="store_true",
            help="Do not ignore hidden files",
        )
        _ = hidden_group.add_argument(
            "-A",
            "--hidden",
            dest="hidden_only",
            action="store_true",
            help="Only show hidden files",
        )

        sort_group = parser.add_mutually_exclusive_group()
        _ = sort_group.add_argument(
            "-s",
            "--ascending",
            nargs="?",
            const=SortKey.NAME,
            type=_sort_key,
            metavar="BY",
            help=f"Sort entries ascending ({SORT_CHOICES}; default: name)",
        )
        _ = sort_group.add_argument(
            "-S",
            "--descending",
            nargs="?",
            const=SortKey.NAME,
            type=_sort_key,
            metavar="BY",
            help=f"Sort entries descending ({SORT_CHOICES}; default: name)",
        )

        space_group = parser.add_mutually_exclusive_group()
        _ = space_group.add_argument(
            "-q",
            "--quote",
            action="store_true",
            help="Quote names that contain spaces",
        )
        _ = space_group.add_argument(
            "-e",
            "--escape",
            action="store_true",
            help="Escape spaces in names with a backslash",
        )

        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug information on stderr",
        )
        _ = parser.add_argument(
            "patterns",
            nargs="*",
            metavar="PATTERN",
            help="Filename, directory or glob pattern (default: current directory)",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ListArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ListArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors (exit status 2).
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        log_level = logging.DEBUG if parsed_args.verbose else logging.INFO
        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        return ListArgs(
            patterns=list(parsed_args.patterns) or [CURRENT_DIRECTORY],
            criteria=SelectionCriteria(
                type_filter=ArgumentParser._type_filter(parsed_args),
                visibility=ArgumentParser._visibility(parsed_args),
                sort=ArgumentParser._sort_spec(parsed_args),
                layout=ArgumentParser._layout(parsed_args, configuration),
            ),
            verbose=parsed_args.verbose,
        )

    @staticmethod
    def _type_filter(parsed_args: argparse.Namespace) -> TypeFilter:
        if parsed_args.files_only:
            return TypeFilter.FILE_ONLY
        if parsed_args.directories_only:
            return TypeFilter.DIRECTORY_ONLY
        return TypeFilter.ANY

    @staticmethod
    def _visibility(parsed_args: argparse.Namespace) -> VisibilityFilter:
        if parsed_args.show_all:
            return VisibilityFilter.ANY
        if parsed_args.hidden_only:
            return VisibilityFilter.HIDDEN_ONLY
        return VisibilityFilter.VISIBLE_ONLY

    @staticmethod
    def _sort_spec(parsed_args: argparse.Namespace) -> SortSpec:
        if parsed_args.ascending is not None:
            return SortSpec(parsed_args.ascending, SortDirection.ASCENDING)
        if parsed_args.descending is not None:
            return SortSpec(parsed_args.descending, SortDirection.DESCENDING)
        return SortSpec()

    @staticmethod
    def _layout(parsed_args: argparse.Namespace, configuration: Config) -> LayoutConfig:
        if parsed_args.quote:
            space_style = SpaceStyle.QUOTED
        elif parsed_args.escape:
            space_style = SpaceStyle.ESCAPED
        else:
            space_style = SpaceStyle.BARE

        return LayoutConfig(
            # Redirected output is always one entry per line.
            one_per_line=parsed_args.one_per_line or not stdout_is_terminal(),
            space_style=space_style,
            terminal_width=detect_terminal_width(
                configuration.width_ratio, configuration.fallback_width
            ),
            min_column_spacing=configuration.min_column_spacing,
        )


__all__ = ["ArgumentParser"]
