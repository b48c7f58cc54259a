"""
Summary: Whitelist and traversal checks for a single key path component.
Why: Keep the only admission rule for components in one pure function.
"""

import re
from typing import ClassVar, Final, final

from .errors import (
    EmptyComponentError,
    InvalidCharacterError,
    KeyPathError,
    TraversalSegmentError,
)


@final
class ComponentValidator:
    """Validate key path components."""

    # Any character outside ASCII letters, digits, '.', '_' and '-'
    DISALLOWED_CHARACTER: ClassVar[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9._-]")

    TRAVERSAL_SEGMENTS: ClassVar[frozenset[str]] = frozenset({".", ".."})

    @classmethod
    def validate(cls, candidate: str, position: int | None = None) -> str:
        """Validate a single component.

        Args:
            candidate: Component text to check.
            position: Index of the component in its list, reported on errors.

        Returns:
            str: ``candidate`` unchanged.

        Raises:
            EmptyComponentError: If ``candidate`` is empty.
            TraversalSegmentError: If ``candidate`` is exactly ``.`` or ``..``.
            InvalidCharacterError: If ``candidate`` holds a character outside the whitelist.
        """
        if not isinstance(candidate, str):
            raise TypeError(f"Key path components must be str, not {type(candidate).__name__}")

        if not candidate:
            raise EmptyComponentError(position)

        if candidate in cls.TRAVERSAL_SEGMENTS:
            raise TraversalSegmentError(candidate, position)

        match = cls.DISALLOWED_CHARACTER.search(candidate)
        if match is not None:
            raise InvalidCharacterError(candidate, match.group(), match.start(), position)

        return candidate

    @classmethod
    def is_valid(cls, candidate: str) -> bool:
        """Return whether ``candidate`` would be admitted as a component."""

        try:
            _ = cls.validate(candidate)
        except KeyPathError:
            return False
        return True


validate_component: Final = ComponentValidator.validate


__all__ = ["ComponentValidator", "validate_component"]
