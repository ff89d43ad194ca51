"""Exceptions raised while building an enum registry tree.

Both errors are fatal to the current ``build()`` call: the processor never
catches, wraps or retries them, so no partial tree is ever returned.  Each
carries the key path from the root to the offending entry so callers can
locate the bad definition.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = [
    "ROOT_MARKER",
    "DepthExceededError",
    "EnumTreeError",
    "InvalidValueError",
    "join_path",
]

ROOT_MARKER = "<root>"

_EXPECTED_SHAPES = (
    "str, int or float; a (value, metadata) pair; or a nested mapping"
)


def join_path(path: Sequence[Any]) -> str:
    """Render a key path as a dotted string, or ``<root>`` when empty."""
    if not path:
        return ROOT_MARKER
    return ".".join(str(key) for key in path)


class EnumTreeError(Exception):
    """Base class for every error raised by enum_tree."""


class InvalidValueError(EnumTreeError, ValueError):
    """An entry is neither a leaf, a (value, metadata) pair, nor a mapping.

    Attributes:
        value: The offending raw value, exactly as found in the input.
        path:  Keys leading from the root to the offending entry.
    """

    def __init__(self, value: Any, path: Sequence[Any] = ()) -> None:
        self.value = value
        self.path = tuple(path)
        msg = (
            f"Invalid enum value format: {value!r} at {self.dotted_path}. "
            f"Expected one of: {_EXPECTED_SHAPES}."
        )
        super().__init__(msg)

    @property
    def dotted_path(self) -> str:
        return join_path(self.path)


class DepthExceededError(EnumTreeError, ValueError):
    """The input nests more levels than the configured ``max_depth`` allows.

    Attributes:
        depth:     Depth of the level that could not be entered (root is 0).
        max_depth: The configured limit.
        path:      Keys leading from the root to the excessive level.
    """

    def __init__(self, depth: int, max_depth: int, path: Sequence[Any] = ()) -> None:
        self.depth = depth
        self.max_depth = max_depth
        self.path = tuple(path)
        msg = (
            f"Maximum nesting depth ({max_depth}) exceeded at level {depth}\n"
            f"Path: {self.dotted_path}\n"
            "\nSuggestions\n"
            "- Use a flat mapping instead of nested dictionaries.\n"
            "- Split the definitions into several smaller registries.\n"
        )
        super().__init__(msg)

    @property
    def dotted_path(self) -> str:
        return join_path(self.path)
