"""Helpers for assembling the zenops configuration.

The configuration is built by layering TOML documents on top of each other
with :func:`deep_merge`. A small map of system inputs (``brew_prefix``,
``os``, ``user.name``, ``user.email``) is used to expand ``${...}``
placeholders inside generated config bodies.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, MutableMapping
from pathlib import Path
from typing import Any

BREW_PREFIX_CANDIDATES: tuple[str, ...] = (
    "/opt/homebrew",
    "/usr/local",
    "/home/linuxbrew/.linuxbrew",
)

_PLATFORM_NAMES: dict[str, str] = {
    "darwin": "macos",
    "win32": "windows",
    "cygwin": "windows",
}

_FENCE = "```"
_TOML_FENCE = "```toml"


def deep_merge(base: Any, overlay: Any) -> Any:
    """Merge ``overlay`` into ``base`` and return the result.

    When both values are tables (mappings) the merge recurses key by key and
    ``base`` is updated in place. In every other case ``overlay`` replaces
    ``base``.
    """
    if isinstance(base, MutableMapping) and isinstance(overlay, MutableMapping):
        for key, value in overlay.items():
            base[key] = deep_merge(base.get(key, {}), value)
        return base
    return overlay


def detect_brew_prefix(
    candidates: Iterable[str | os.PathLike[str]] = BREW_PREFIX_CANDIDATES,
) -> Path | None:
    """Return the first candidate prefix holding ``bin/brew``, or None."""
    for candidate in candidates:
        prefix = Path(candidate)
        if (prefix / "bin" / "brew").exists():
            return prefix
    return None


def _current_os() -> str:
    platform = sys.platform
    if platform.startswith("linux"):
        return "linux"
    if platform.startswith("freebsd"):
        return "freebsd"
    return _PLATFORM_NAMES.get(platform, platform)


def build_system_inputs(
    brew_prefix: str | os.PathLike[str] | None,
    user_name: str | None,
    user_email: str | None,
) -> dict[str, str]:
    """Build the ordered map of values available to ``${...}`` placeholders."""
    inputs: dict[str, str] = {}
    if brew_prefix is not None:
        inputs["brew_prefix"] = os.fspath(brew_prefix)
    inputs["os"] = _current_os()
    if user_name is not None:
        inputs["user.name"] = user_name
    if user_email is not None:
        inputs["user.email"] = user_email
    return inputs


def extract_toml_blocks(body: str) -> list[str]:
    """Return the bodies of every fenced ```toml block in a Markdown text.

    Each block keeps its lines verbatim, each terminated by a newline. A
    block that is never closed is dropped.
    """
    blocks: list[str] = []
    current: list[str] | None = None
    for line in body.splitlines():
        stripped = line.lstrip()
        if current is not None:
            if stripped.startswith(_FENCE):
                blocks.append("".join(current))
                current = None
            else:
                current.append(line + "\n")
        elif stripped.startswith(_TOML_FENCE):
            current = []
    return blocks