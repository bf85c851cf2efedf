"""Template strings carrying ``${name}`` placeholders.

``${name}`` is the only placeholder syntax; there is no escape sequence.
An :class:`ExpandStr` has no plain string form on purpose: it must be
expanded with a lookup before use.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any

from zenops.expand_lookup import LookupUnresolved, _TextSink, write_value

_OPEN = "${"
_CLOSE = "}"


class ExpandError(ValueError):
    """Base class for template expansion errors."""


class UnresolvedPlaceholder(ExpandError):
    """A ``${name}`` placeholder was not resolved by the lookup."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unresolved placeholder `${{{name}}}`")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnresolvedPlaceholder):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(("unresolved", self.name))


class UnterminatedPlaceholder(ExpandError):
    """A ``${`` sequence was never closed by ``}``."""

    def __init__(self) -> None:
        super().__init__("unterminated `${` in template")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnterminatedPlaceholder):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash("unterminated")


@dataclass(frozen=True)
class ExpandStr:
    """A template string containing ``${name}`` placeholders."""

    template: str

    def expand_to_string(self, lookup: Any) -> str:
        """Expand the template into a new string."""
        out = io.StringIO()
        self.write_expanded(lookup, out)
        return out.getvalue()

    def write_expanded(self, lookup: Any, out: _TextSink) -> None:
        """Expand the template into ``out``.

        On error ``out`` may already have been written to partially.
        """
        rest = self.template
        while (start := rest.find(_OPEN)) >= 0:
            out.write(rest[:start])
            after_open = rest[start + len(_OPEN):]
            end = after_open.find(_CLOSE)
            if end < 0:
                raise UnterminatedPlaceholder()
            name = after_open[:end]
            try:
                write_value(lookup, name, out)
            except LookupUnresolved as exc:
                raise UnresolvedPlaceholder(exc.name) from exc
            rest = after_open[end + len(_CLOSE):]
        out.write(rest)

    def __repr__(self) -> str:
        return f"ExpandStr({self.template!r})"