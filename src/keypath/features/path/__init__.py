"""
Summary: Export key path domain symbols.
Why: Provide a stable import surface for the CLI and tests.
"""

from .domain.errors import (
    EmptyComponentError,
    InvalidCharacterError,
    KeyPathError,
    TraversalSegmentError,
    ValidationErrorKind,
)
from .domain.key_path import SEPARATOR, KeyPath, KeyPathView, key_path
from .domain.validator import ComponentValidator, validate_component

__all__ = [
    "SEPARATOR",
    "ComponentValidator",
    "EmptyComponentError",
    "InvalidCharacterError",
    "KeyPath",
    "KeyPathError",
    "KeyPathView",
    "TraversalSegmentError",
    "ValidationErrorKind",
    "key_path",
    "validate_component",
]
