"""Resolution of ``${name}`` placeholders to values.

A lookup is either a mapping from names to values, or any object with a
``write_value(name, out)`` method. ``out`` is a text sink with a ``write``
method, such as :class:`io.StringIO`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class _TextSink(Protocol):
    def write(self, text: str, /) -> Any: ...


class LookupUnresolved(LookupError):
    """The name is not known to the lookup."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Failed to resolve `${{{name}}}`")


def write_value(lookup: Any, name: str, out: _TextSink) -> None:
    """Write the value of ``name`` from ``lookup`` into ``out``.

    Raises LookupUnresolved without writing anything when the name is unknown.
    Errors raised by the sink propagate unchanged.
    """
    method = getattr(lookup, "write_value", None)
    if callable(method):
        method(name, out)
        return
    if isinstance(lookup, Mapping):
        try:
            value = lookup[name]
        except KeyError:
            raise LookupUnresolved(name) from None
        out.write(str(value))
        return
    raise TypeError(f"{type(lookup).__name__} cannot be used as a lookup")


class ChainLookup:
    """Tries each lookup in order and uses the first one that knows the name."""

    __slots__ = ("lookups",)

    def __init__(self, *lookups: Any) -> None:
        self.lookups = lookups

    def write_value(self, name: str, out: _TextSink) -> None:
        """Write the first hit into ``out``, or raise LookupUnresolved."""
        for lookup in self.lookups:
            try:
                write_value(lookup, name, out)
            except LookupUnresolved:
                continue
            return
        raise LookupUnresolved(name)

    def __repr__(self) -> str:
        return f"ChainLookup{self.lookups!r}"