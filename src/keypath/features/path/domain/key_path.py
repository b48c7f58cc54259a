"""
Summary: Owning and borrowing key path values built from validated components.
Why: Guarantee every rendered key is made only of admitted components.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import PurePosixPath
from typing import Final, Self, final, overload, override

from .validator import validate_component

SEPARATOR: Final[str] = "/"


def _validate_all(components: Iterable[str]) -> list[str]:
    """Validate ``components`` in order, stopping at the first rejection."""

    if isinstance(components, str):
        raise TypeError(
            "Expected a sequence of components, got a str; "
            "use from_delimited_text() to split a delimited key"
        )
    return [validate_component(component, position) for position, component in enumerate(components)]


def _split(text: str) -> list[str]:
    if not isinstance(text, str):
        raise TypeError(f"Delimited key must be str, not {type(text).__name__}")
    return text.split(SEPARATOR)


class _KeyPathBase:
    """Read-only behaviour shared by both key path variants."""

    __slots__ = ("_components",)

    _components: Sequence[str]

    @property
    def components(self) -> tuple[str, ...]:
        """Snapshot of the current components in order."""
        return tuple(self._components)

    def render(self) -> str:
        """Join the components with ``/``.

        Returns:
            str: Rendered key without leading or trailing separators;
            an empty path renders as an empty string.
        """
        return SEPARATOR.join(self._components)

    def to_pure_path(self) -> PurePosixPath:
        """Return the components as a POSIX path (``.`` for an empty path)."""
        return PurePosixPath(*self._components)

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    def __getitem__(self, index: int | slice) -> str | tuple[str, ...]:
        # Slices are detached tuples
        if isinstance(index, slice):
            return tuple(self._components[index])
        return self._components[index]

    @override
    def __str__(self) -> str:
        return self.render()

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _KeyPathBase):
            return NotImplemented
        return tuple(self._components) == tuple(other._components)


@final
class KeyPath(_KeyPathBase):
    """Key path that owns its list of components."""

    __slots__ = ()

    _components: list[str]

    def __init__(self, components: Iterable[str] = ()) -> None:
        """Build a key path from already separated components.

        Args:
            components: Components in key order. Each one is validated as-is,
                so a component containing ``/`` is rejected, not split.

        Raises:
            KeyPathError: For the first rejected component.
            TypeError: If ``components`` is a plain string or holds non-str items.
        """
        self._components = _validate_all(components)

    @classmethod
    def from_delimited_text(cls, text: str) -> KeyPath:
        """Split ``text`` on ``/`` and build a key path from the pieces.

        Empty pieces (from an empty string or from leading, trailing or
        doubled separators) are rejected rather than skipped.
        """
        return cls(_split(text))

    @classmethod
    def _from_validated(cls, components: list[str]) -> KeyPath:
        path = cls.__new__(cls)
        path._components = components
        return path

    def join(self, candidate: str) -> Self:
        """Append ``candidate`` in place.

        Args:
            candidate: Component to append.

        Returns:
            KeyPath: This instance, to allow chaining.

        Raises:
            KeyPathError: If ``candidate`` is rejected; the path is left unchanged.
        """
        self._components.append(validate_component(candidate, len(self._components)))
        return self

    def copy(self) -> KeyPath:
        return KeyPath._from_validated(list(self._components))

    def as_view(self) -> KeyPathView:
        """Borrow this path's components without copying them.

        The view shares storage with this path and reflects later joins.
        """
        return KeyPathView._borrow(self._components)

    def __truediv__(self, candidate: str) -> KeyPath:
        if not isinstance(candidate, str):
            return NotImplemented
        return self.copy().join(candidate)


@final
class KeyPathView(_KeyPathBase):
    """Key path that references a component sequence owned by the caller.

    The sequence is validated once and then held by reference. Callers must
    not mutate it while the view is in use.
    """

    __slots__ = ()

    def __init__(self, components: Sequence[str] = ()) -> None:
        """Validate and borrow ``components``.

        Raises:
            KeyPathError: For the first rejected component.
            TypeError: If ``components`` is not a sequence, is a plain string,
                or holds non-str items.
        """
        if not isinstance(components, Sequence):
            raise TypeError(f"KeyPathView borrows a sequence, not {type(components).__name__}")
        _ = _validate_all(components)
        self._components = components

    @classmethod
    def from_delimited_text(cls, text: str) -> KeyPathView:
        """Split ``text`` on ``/`` and view the resulting pieces."""
        return cls(_split(text))

    @classmethod
    def _borrow(cls, components: Sequence[str]) -> KeyPathView:
        # Components come from a KeyPath and are already validated.
        view = cls.__new__(cls)
        view._components = components
        return view

    def to_owned(self) -> KeyPath:
        """Copy the borrowed components into a new :class:`KeyPath`."""
        return KeyPath._from_validated(list(self._components))


def key_path(*components: str) -> KeyPath:
    """Build a :class:`KeyPath` from positional components.

    ``key_path("a", "b")`` is equivalent to ``KeyPath(["a", "b"])``.
    """
    return KeyPath(components)


__all__ = ["SEPARATOR", "KeyPath", "KeyPathView", "key_path"]
