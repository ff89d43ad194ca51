"""Public API function for enum-tree.

``build`` creates a fresh TreeProcessor per call, so separate builds share
no state and may run in parallel.
"""

from __future__ import annotations

from enum import Enum

from enum_tree.config import BuildOptions
from enum_tree.tree.classifier import EnumSpec
from enum_tree.tree.nodes import RegistryNode
from enum_tree.tree.processor import TreeProcessor

__all__ = ["build"]


def build(spec: EnumSpec | type[Enum], options: BuildOptions | None = None) -> RegistryNode:
    """Build a read-only registry tree from a mapping of enum definitions.

    Args:
        spec:    Mapping of keys to leaves (str, int, float), (value, metadata)
                 pairs, or nested mappings of the same shape.  An Enum class
                 (StrEnum, IntEnum, ...) is accepted and read through its
                 members.
        options: Build options.  Defaults to ``BuildOptions()`` when None.

    Returns:
        The root RegistryNode.

    Raises:
        InvalidValueError:  If ``spec`` or any entry has an unsupported shape.
        DepthExceededError: If ``spec`` nests more than ``max_depth`` levels.

    Example::
        Status = build({"ACTIVE": "active", "INACTIVE": "inactive"})
        Status.values                 # ("active", "inactive")
        Status.ACTIVE.equals("active")   # True
    """
    options = options or BuildOptions()
    return TreeProcessor(max_depth=options.max_depth).process(spec)
