"""Relative paths that are guaranteed not to climb out of their parent via ``..``.

The guarantee is purely lexical: symlinks are not taken into account.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from functools import total_ordering
from pathlib import Path
from typing import Union

SEPARATOR = "/"
CURRENT_DIR = "."
PARENT_DIR = ".."


class SafePathError(ValueError):
    """Base class for safe-path validation errors."""


class PathGoesOutsideParent(SafePathError):
    """The relative path uses ``..`` traversal."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"The specified relative path {path!r} goes outside of the parent directory"
        )


class NotASinglePathComponent(SafePathError):
    """The value holds zero or several path components."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"{value!r} is not a single path component")


def _as_text(path: Union[str, os.PathLike]) -> str:
    text = os.fspath(path)
    if not isinstance(text, str):
        raise TypeError(f"expected a text path, got {type(text).__name__}")
    return text


def _split(text: str) -> Iterator[str]:
    """Yield the components of a relative path; empty segments are skipped."""
    return (part for part in text.split(SEPARATOR) if part)


def _join(base: str, other: str) -> str:
    if other.startswith(SEPARATOR):
        other = other[1:]
    if base and not base.endswith(SEPARATOR):
        base += SEPARATOR
    return base + other


def is_safe_relative_path(path: Union[str, os.PathLike]) -> bool:
    """Return True when no component of ``path`` is ``..``."""
    return all(part != PARENT_DIR for part in _split(_as_text(path)))


@total_ordering
class SafeRelativePath:
    """A relative path with no ``..`` components."""

    __slots__ = ("_path",)

    def __init__(self, path: Union[str, os.PathLike] = "") -> None:
        text = _as_text(path)
        if not is_safe_relative_path(text):
            raise PathGoesOutsideParent(text)
        self._path = text

    @classmethod
    def from_relative_path(cls, path: Union[str, os.PathLike]) -> SafeRelativePath:
        """Validate ``path`` and wrap it, raising PathGoesOutsideParent on traversal."""
        if isinstance(path, SafeRelativePath):
            return path
        return cls(path)

    def components(self) -> Iterator[str]:
        """Yield each path component, including ``.`` segments."""
        return _split(self._path)

    def try_join(self, path: Union[str, os.PathLike]) -> SafeRelativePath:
        """Join an unchecked path, raising PathGoesOutsideParent if it traverses."""
        return self.safe_join(SafeRelativePath.from_relative_path(path))

    def safe_join(self, path: Union[SafeRelativePath, SinglePathComponent]) -> SafeRelativePath:
        """Join a path that is already known to be safe."""
        if isinstance(path, SinglePathComponent):
            path = path.as_safe_relative_path()
        if not isinstance(path, SafeRelativePath):
            raise TypeError(
                f"safe_join needs a safe path, got {type(path).__name__}; use try_join"
            )
        return SafeRelativePath(_join(self._path, path._path))

    def to_full_path(self, base: Union[str, os.PathLike]) -> Path:
        """Resolve this path logically beneath ``base``."""
        return Path(base).joinpath(*(c for c in self.components() if c != CURRENT_DIR))

    def safe_parent(self) -> SafeRelativePath | None:
        """Return the path without its last component, or None for the empty path."""
        if not self._path:
            return None
        trimmed = self._path.rstrip(SEPARATOR)
        cut = trimmed.rfind(SEPARATOR)
        parent = "" if cut < 0 else trimmed[:cut].rstrip(SEPARATOR)
        return SafeRelativePath(parent)

    def normalize_safe(self) -> SafeRelativePath:
        """Drop ``.`` and empty segments."""
        return SafeRelativePath(
            SEPARATOR.join(c for c in self.components() if c != CURRENT_DIR)
        )

    def __truediv__(self, other: Union[str, os.PathLike]) -> SafeRelativePath:
        return self.try_join(other)

    def __fspath__(self) -> str:
        return self._path

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"SafeRelativePath({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SafeRelativePath):
            return NotImplemented
        return tuple(self.components()) == tuple(other.components())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SafeRelativePath):
            return NotImplemented
        return tuple(self.components()) < tuple(other.components())

    def __hash__(self) -> int:
        return hash(tuple(self.components()))


def srpath(path: str) -> SafeRelativePath:
    """Build a SafeRelativePath from a literal, raising on traversal."""
    return SafeRelativePath.from_relative_path(path)


@total_ordering
class SinglePathComponent:
    """Exactly one path component: no separators and no ``..``."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")
        path = SafeRelativePath.from_relative_path(value)
        if next(path.components(), None) != value:
            raise NotASinglePathComponent(value)
        self._value = value

    @classmethod
    def try_new(cls, value: str) -> SinglePathComponent:
        """Validate ``value`` as a single component."""
        return cls(value)

    def as_safe_relative_path(self) -> SafeRelativePath:
        """View this component as a SafeRelativePath."""
        return SafeRelativePath(self._value)

    def __fspath__(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"SinglePathComponent({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SinglePathComponent):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SinglePathComponent):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)