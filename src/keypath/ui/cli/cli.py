"""Command line interface for keypath."""

import sys
from typing import final

from keypath.config.config import ConfigError
from keypath.platform.logging import logger
from keypath.ui.cli.args import ArgumentParser
from keypath.ui.cli.args.options import BuildArgs, CheckArgs, CLIArgs
from keypath.ui.cli.commands import BuildCommand, CheckCommand, CommandExecutor, ParseCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Select the executor for the parsed subcommand."""

        if isinstance(args, CheckArgs):
            return CheckCommand(args)
        if isinstance(args, BuildArgs):
            return BuildCommand(args)
        return ParseCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor.build_command(args).execute()
            if exit_code != 0:
                sys.exit(exit_code)
            return

        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(1)
        except OSError as e:
            logger.error("Cannot open log file: %s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
