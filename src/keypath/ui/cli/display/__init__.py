"""Display package for CLI output."""

from keypath.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
