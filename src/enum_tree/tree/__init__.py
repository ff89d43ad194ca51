"""Tree subpackage for enum-definition-to-registry conversion primitives.

Re-exports the public API for the tree module:
- NodeKind / classify: shape classification of input entries
- same_value: the strict equality used by every membership check
- ValueFeature / ObjectFeature / LoopItem: decorations attached to the tree
- RegistryNode: one read-only level of the built tree
- TreeProcessor: converts an input mapping into a RegistryNode tree
"""

from enum_tree.tree.classifier import NodeKind, classify
from enum_tree.tree.equality import same_value
from enum_tree.tree.features import (
    LoopItem,
    ObjectFeature,
    ValueFeature,
    build_object,
    build_value,
)
from enum_tree.tree.nodes import RegistryNode
from enum_tree.tree.processor import TreeProcessor

__all__ = [
    "LoopItem",
    "NodeKind",
    "ObjectFeature",
    "RegistryNode",
    "TreeProcessor",
    "ValueFeature",
    "build_object",
    "build_value",
    "classify",
    "same_value",
]
