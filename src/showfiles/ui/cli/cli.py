"""Command line interface for showfiles."""

from collections.abc import Sequence
from typing import final

from showfiles.platform.logging import logger
from showfiles.ui.cli.args import ArgumentParser
from showfiles.ui.cli.commands import ListingCommand

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code; 0 success, 1 system error, 2 user error, 3 both.
        """
        try:
            args = ArgumentParser.process_args(args_list)
            return int(ListingCommand(args).execute())
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return EXIT_FAILURE


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code. Usage errors exit with status 2 from argparse
        before this returns.
    """
    return CommandProcessor.process_command()
