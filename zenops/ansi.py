"""ANSI colour helpers for human-facing output.

When styling is off every method returns the empty string, so callers can
interpolate the styles into their format strings unconditionally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Styler:
    """Hands out ANSI escape codes, or empty strings when ``on`` is false."""

    on: bool

    BOLD: ClassVar[str] = "\x1b[1m"
    DIM: ClassVar[str] = "\x1b[2m"
    # Faint modifier stacked on light grey: reads as "less white" than DIM.
    EXTRA_DIM: ClassVar[str] = "\x1b[2;38;5;248m"
    RED: ClassVar[str] = "\x1b[31m"
    GREEN: ClassVar[str] = "\x1b[32m"
    YELLOW: ClassVar[str] = "\x1b[33m"
    MAGENTA: ClassVar[str] = "\x1b[35m"
    CYAN: ClassVar[str] = "\x1b[36m"
    BOLD_YELLOW: ClassVar[str] = "\x1b[1;33m"
    RESET: ClassVar[str] = "\x1b[0m"

    def _code(self, code: str) -> str:
        return code if self.on else ""

    def bold(self) -> str:
        return self._code(self.BOLD)

    def dim(self) -> str:
        return self._code(self.DIM)

    def extra_dim(self) -> str:
        return self._code(self.EXTRA_DIM)

    def red(self) -> str:
        return self._code(self.RED)

    def green(self) -> str:
        return self._code(self.GREEN)

    def yellow(self) -> str:
        return self._code(self.YELLOW)

    def magenta(self) -> str:
        return self._code(self.MAGENTA)

    def cyan(self) -> str:
        return self._code(self.CYAN)

    def bold_yellow(self) -> str:
        return self._code(self.BOLD_YELLOW)

    def reset(self) -> str:
        return self._code(self.RESET)