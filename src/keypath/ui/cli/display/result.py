"""src/keypath/ui/cli/display/result.py
What: Render command results on stdout.
Why: Keep machine-usable output separate from log output on stderr.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from keypath.features.path import KeyPath, KeyPathError
from keypath.ui.cli.models import CheckResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize result display."""
        self.console = Console()

    def show_key(self, path: KeyPath) -> None:
        """Print the rendered key on its own line, without markup."""

        self.console.print(path.render(), markup=False, highlight=False, soft_wrap=True)

    def show_components(self, path: KeyPath, quiet: bool = False) -> None:
        """Display the components of ``path``, one per line when quiet."""

        if quiet:
            for component in path:
                self.console.print(component, markup=False, highlight=False)
            return

        table = Table(title="Key Components")
        table.add_column("#", justify="right")
        table.add_column("Component", style="white")
        for index, component in enumerate(path):
            table.add_row(str(index), escape(component))
        self.console.print(table)

    def show_check_results(self, results: list[CheckResult], quiet: bool = False) -> None:
        """Display a validation verdict per component.

        Args:
            results: Checked components in argument order.
            quiet: Print one tab-separated "component verdict" line per result instead of the table.
        """
        if quiet:
            for result in results:
                verdict = "ok" if result.error is None else result.error.kind.value
                self.console.print(f"{result.component}\t{verdict}", markup=False, highlight=False, soft_wrap=True)
            return

        table = Table(title="Component Check")
        table.add_column("Component")
        table.add_column("Verdict")
        for result in results:
            verdict = "[green]ok[/green]" if result.ok else f"[red]{escape(self._describe(result.error))}[/red]"
            table.add_row(escape(result.component), verdict)
        self.console.print(table)

        failed = sum(1 for r in results if not r.ok)
        self.console.print(f"Checked: {len(results)}  Rejected: {failed}")

    @staticmethod
    def _describe(error: KeyPathError | None) -> str:
        if error is None:
            return "rejected"
        return f"{error.kind.value}: {error.reason}"
