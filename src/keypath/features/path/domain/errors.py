"""
Summary: Validation errors raised for rejected key path components.
Why: Give callers the offending component, its position and a machine-readable kind.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, final


class ValidationErrorKind(str, Enum):
    """Reasons a component can be rejected."""

    EMPTY_COMPONENT = "empty_component"
    INVALID_CHARACTER = "invalid_character"
    TRAVERSAL_SEGMENT = "traversal_segment"


class KeyPathError(ValueError):
    """Base class for rejected key path components."""

    kind: ClassVar[ValidationErrorKind]

    def __init__(self, component: str, reason: str, position: int | None = None) -> None:
        message = f"Invalid key path component '{component}': {reason}"
        if position is not None:
            message += f" (at position {position})"
        super().__init__(message)
        self.component: str = component
        self.reason: str = reason
        self.position: int | None = position


@final
class EmptyComponentError(KeyPathError):
    """Raised for a zero-length component."""

    kind = ValidationErrorKind.EMPTY_COMPONENT

    def __init__(self, position: int | None = None) -> None:
        super().__init__("", "Empty component is not allowed", position)


@final
class InvalidCharacterError(KeyPathError):
    """Raised when a component holds a character outside the whitelist."""

    kind = ValidationErrorKind.INVALID_CHARACTER

    def __init__(
        self,
        component: str,
        character: str,
        index: int,
        position: int | None = None,
    ) -> None:
        super().__init__(
            component,
            f"Character {character!r} at index {index} is not allowed",
            position,
        )
        self.character: str = character
        self.index: int = index


@final
class TraversalSegmentError(KeyPathError):
    """Raised for the relative segments ``.`` and ``..``."""

    kind = ValidationErrorKind.TRAVERSAL_SEGMENT

    def __init__(self, component: str, position: int | None = None) -> None:
        super().__init__(component, "Relative path segment is not allowed", position)


__all__ = [
    "EmptyComponentError",
    "InvalidCharacterError",
    "KeyPathError",
    "TraversalSegmentError",
    "ValidationErrorKind",
]
