"""src/keypath/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass

from keypath.features.path import KeyPathError


@dataclass(slots=True, frozen=True)
class CheckResult:
    """Validation verdict for one command line component."""

    component: str
    error: KeyPathError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = ["CheckResult"]
