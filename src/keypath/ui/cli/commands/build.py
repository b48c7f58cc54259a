"""Build command implementation for the CLI."""

from __future__ import annotations

from typing import final, override

from keypath.features.path import KeyPath, KeyPathError
from keypath.platform.logging import logger
from keypath.ui.cli.args.options import BuildArgs
from keypath.ui.cli.commands.executor import CommandExecutor


@final
class BuildCommand(CommandExecutor):
    """Build a key from the prefix and components, then print it."""

    def __init__(self, args: BuildArgs) -> None:
        super().__init__()
        self.args = args

    def build(self) -> KeyPath:
        """Assemble the key path.

        Raises:
            KeyPathError: If the prefix or any component is rejected.
        """
        if self.args.prefix:
            path = KeyPath.from_delimited_text(self.args.prefix)
            for component in self.args.components:
                _ = path.join(component)
            return path
        return KeyPath(self.args.components)

    @override
    def execute(self) -> int:
        try:
            path = self.build()
        except KeyPathError as e:
            self.report_rejection(e)
            return 1

        logger.debug(
            "Built key %s",
            path,
            extra={"key_event": "key.built", "key": path.render(), "component_count": len(path)},
        )
        self.result_display.show_key(path)
        return 0
