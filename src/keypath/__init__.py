"""Validated object-storage key paths.

Build keys only from components made of ASCII letters, digits, ``.``, ``_``
and ``-``, never ``.`` or ``..``::

    >>> from keypath import KeyPath
    >>> path = KeyPath(["tenants", "acme"])
    >>> path.join("report.csv").render()
    'tenants/acme/report.csv'
"""

from keypath.features.path import (
    SEPARATOR,
    ComponentValidator,
    EmptyComponentError,
    InvalidCharacterError,
    KeyPath,
    KeyPathError,
    KeyPathView,
    TraversalSegmentError,
    ValidationErrorKind,
    key_path,
    validate_component,
)

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
