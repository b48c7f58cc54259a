"""Check command implementation for the CLI."""

from __future__ import annotations

from typing import final, override

from keypath.features.path import KeyPathError, validate_component
from keypath.platform.logging import logger
from keypath.ui.cli.args.options import CheckArgs
from keypath.ui.cli.commands.executor import CommandExecutor
from keypath.ui.cli.models import CheckResult


@final
class CheckCommand(CommandExecutor):
    """Validate every argument independently and report each verdict."""

    def __init__(self, args: CheckArgs) -> None:
        super().__init__()
        self.args = args

    def run(self) -> list[CheckResult]:
        results: list[CheckResult] = []
        for position, component in enumerate(self.args.components):
            try:
                _ = validate_component(component, position)
            except KeyPathError as e:
                self.report_rejection(e)
                results.append(CheckResult(component, e))
                continue
            logger.debug(
                "Valid component %s",
                component,
                extra={"key_event": "key.valid", "key": component, "position": position},
            )
            results.append(CheckResult(component))
        return results

    @override
    def execute(self) -> int:
        results = self.run()
        self.result_display.show_check_results(results, quiet=self.args.quiet)
        return 0 if all(r.ok for r in results) else 1
