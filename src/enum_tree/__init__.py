"""enum-tree - read-only registries of nested enum constants."""

from __future__ import annotations

from enum_tree.api import build
from enum_tree.config import DEFAULT_MAX_DEPTH, BuildOptions
from enum_tree.errors import DepthExceededError, EnumTreeError, InvalidValueError
from enum_tree.tree.features import LoopItem, ObjectFeature, ValueFeature
from enum_tree.tree.nodes import RegistryNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "DEFAULT_MAX_DEPTH",
    "BuildOptions",
    "DepthExceededError",
    "EnumTreeError",
    "InvalidValueError",
    "LoopItem",
    "ObjectFeature",
    "RegistryNode",
    "ValueFeature",
    "build",
]
