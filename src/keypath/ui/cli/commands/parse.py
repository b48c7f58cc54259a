"""Parse command implementation for the CLI."""

from __future__ import annotations

from typing import final, override

from keypath.features.path import KeyPath, KeyPathError
from keypath.platform.logging import logger
from keypath.ui.cli.args.options import ParseArgs
from keypath.ui.cli.commands.executor import CommandExecutor


@final
class ParseCommand(CommandExecutor):
    """Split a delimited key and list its components."""

    def __init__(self, args: ParseArgs) -> None:
        super().__init__()
        self.args = args

    @override
    def execute(self) -> int:
        try:
            path = KeyPath.from_delimited_text(self.args.key)
        except KeyPathError as e:
            self.report_rejection(e)
            return 1

        logger.debug(
            "Parsed key %s",
            path,
            extra={"key_event": "key.parsed", "key": path.render(), "component_count": len(path)},
        )
        self.result_display.show_components(path, quiet=self.args.quiet)
        return 0
