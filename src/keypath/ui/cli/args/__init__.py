"""Command line argument handling package."""

from keypath.ui.cli.args.parser import ArgumentParser
from keypath.ui.cli.args.options import BuildArgs, CheckArgs, CLIArgs, ParseArgs

__all__ = ["ArgumentParser", "BuildArgs", "CLIArgs", "CheckArgs", "ParseArgs"]
