"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from keypath.config.config import Config
from keypath.platform.logging import logger, setup_logger
from keypath.ui.cli.args.options import BuildArgs, CheckArgs, CLIArgs, ParseArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        common = argparse.ArgumentParser(add_help=False)
        _ = common.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed validation information",
        )
        _ = common.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors and results",
        )
        _ = common.add_argument(
            "--config",
            type=str,
            help="Configuration file (defaults to $KEYPATH_CONFIG or config/keypath.toml)",
            metavar="CONFIG_PATH",
        )
        _ = common.add_argument(
            "--log-file",
            type=str,
            help="Write a debug log to this file",
            metavar="LOG_FILE",
        )

        parser = argparse.ArgumentParser(
            prog="keypath",
            description="keypath - Validate and build object-storage keys from safe components.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        check_parser = subparsers.add_parser(
            "check",
            parents=[common],
            help="Validate each argument as a single key component",
        )
        _ = check_parser.add_argument(
            "components",
            nargs="+",
            help="Components to validate",
            metavar="COMPONENT",
        )

        build_parser = subparsers.add_parser(
            "build",
            parents=[common],
            help="Build a key from components and print it",
        )
        _ = build_parser.add_argument(
            "components",
            nargs="*",
            help="Components in key order",
            metavar="COMPONENT",
        )
        _ = build_parser.add_argument(
            "--prefix",
            type=str,
            help="Delimited key prefix (overrides the configured prefix)",
            metavar="PREFIX",
        )

        parse_parser = subparsers.add_parser(
            "parse",
            parents=[common],
            help="Split a delimited key and validate its components",
        )
        _ = parse_parser.add_argument(
            "key",
            type=str,
            help="Slash-delimited key",
            metavar="KEY",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            ConfigError: If the configuration file cannot be loaded.
            OSError: If the requested log file cannot be opened.
            SystemExit: If argument parsing fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load(parsed_args.config)
        # No file handler unless a log file is requested or configured
        log_file_path = Path(parsed_args.log_file) if parsed_args.log_file else configuration.log_file
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "check":
            return CheckArgs(
                command="check",
                components=list(parsed_args.components),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "build":
            return BuildArgs(
                command="build",
                components=list(parsed_args.components),
                prefix=parsed_args.prefix if parsed_args.prefix is not None else configuration.prefix,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "parse":
            return ParseArgs(
                command="parse",
                key=parsed_args.key,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
