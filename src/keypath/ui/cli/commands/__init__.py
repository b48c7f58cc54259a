"""Command execution package for CLI."""

from keypath.ui.cli.commands.executor import CommandExecutor
from keypath.ui.cli.commands.build import BuildCommand
from keypath.ui.cli.commands.check import CheckCommand
from keypath.ui.cli.commands.parse import ParseCommand

__all__ = [
    "BuildCommand",
    "CheckCommand",
    "CommandExecutor",
    "ParseCommand",
]
