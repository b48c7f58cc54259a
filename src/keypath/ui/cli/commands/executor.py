"""src/keypath/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse rejection reporting and display helpers across commands.
"""

from abc import ABC, abstractmethod

from keypath.features.path import InvalidCharacterError, KeyPathError
from keypath.platform.logging import logger
from keypath.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    result_display: ResultDisplay

    def __init__(self) -> None:
        self.result_display = ResultDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass

    @staticmethod
    def report_rejection(error: KeyPathError) -> None:
        """Log a rejected component as a ``key.invalid`` event."""

        index = error.index if isinstance(error, InvalidCharacterError) else None
        logger.error(
            "%s",
            error,
            extra={
                "key_event": "key.invalid",
                "key": error.component,
                "character_index": index,
                "position": error.position,
                "reason": error.reason,
            },
        )
