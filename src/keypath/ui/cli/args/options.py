"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class CheckArgs:
    """Command line arguments for the ``check`` subcommand."""

    command: Literal["check"]
    components: list[str]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class BuildArgs:
    """Command line arguments for the ``build`` subcommand."""

    command: Literal["build"]
    components: list[str]
    prefix: str | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ParseArgs:
    """Command line arguments for the ``parse`` subcommand."""

    command: Literal["parse"]
    key: str
    verbose: bool
    quiet: bool


CLIArgs = CheckArgs | BuildArgs | ParseArgs

__all__ = ["BuildArgs", "CLIArgs", "CheckArgs", "ParseArgs"]
