"""RegistryNode: one read-only level of a built enum registry.

Children live in their own namespace and are always reachable by
subscription (``node["KEY"]``).  Attribute access (``node.KEY``) falls back
to the children, but only after the node's own attributes and the
ObjectFeature fields (``values``, ``contains``, ...) have been tried, so a
child named ``values`` never hides the feature and is still available as
``node["values"]``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from enum_tree.errors import join_path
from enum_tree.tree.features import OBJECT_FEATURE_FIELDS, ObjectFeature, ValueFeature

__all__ = ["NODE_ATTRIBUTES", "RESERVED_ATTRIBUTES", "RegistryNode"]

_MISSING = object()


class RegistryNode:
    """A level of the registry tree.

    Attributes:
        path:     Keys from the root to this level; the root's path is ().
        depth:    Nesting depth of this level; the root is 0.
        feature:  The ObjectFeature for this level's direct leaves, or None
                  when the level only holds nested children.

    Nodes are immutable once built: setting or deleting attributes raises
    AttributeError and item assignment raises TypeError.
    """

    __slots__ = ("_children", "depth", "feature", "path")

    def __init__(
        self,
        children: Mapping[Any, ValueFeature | RegistryNode],
        path: tuple[Any, ...] = (),
        depth: int = 0,
        feature: ObjectFeature | None = None,
    ) -> None:
        object.__setattr__(self, "_children", MappingProxyType(dict(children)))
        object.__setattr__(self, "path", path)
        object.__setattr__(self, "depth", depth)
        object.__setattr__(self, "feature", feature)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"RegistryNode is read-only; cannot set {name!r}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"RegistryNode is read-only; cannot delete {name!r}"
        raise AttributeError(msg)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name.startswith("__"):
            raise AttributeError(name)
        feature = object.__getattribute__(self, "feature")
        if feature is not None and name in OBJECT_FEATURE_FIELDS:
            return getattr(feature, name)
        child = object.__getattribute__(self, "_children").get(name, _MISSING)
        if child is not _MISSING:
            return child
        if name in OBJECT_FEATURE_FIELDS:
            msg = f"level {join_path(self.path)} has no direct leaves, so no {name!r}"
            raise AttributeError(msg)
        msg = f"level {join_path(self.path)} has no key {name!r}"
        raise AttributeError(msg)

    # ------------------------------------------------------------------
    # Read-only container protocol over the children
    # ------------------------------------------------------------------

    def __getitem__(self, key: Any) -> ValueFeature | RegistryNode:
        return self._children[key]

    def __contains__(self, key: object) -> bool:
        return key in self._children

    def __iter__(self) -> Iterator[Any]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"RegistryNode(path={join_path(self.path)!r}, keys={list(self._children)!r})"

    def keys(self) -> Any:
        return self._children.keys()

    def items(self) -> Any:
        return self._children.items()

    def get(self, key: Any, default: Any = None) -> Any:
        return self._children.get(key, default)

    @property
    def children(self) -> Mapping[Any, ValueFeature | RegistryNode]:
        """Read-only mapping of every child, leaves and nested levels alike."""
        return self._children

    @property
    def has_values(self) -> bool:
        """True when this level has at least one direct leaf."""
        return self.feature is not None


# Child keys with these names are only reachable through ``node[key]``.
# Feature fields shadow children only on levels that carry an ObjectFeature.
NODE_ATTRIBUTES = frozenset(
    name for name in dir(RegistryNode) if not name.startswith("_")
)
RESERVED_ATTRIBUTES = OBJECT_FEATURE_FIELDS | NODE_ATTRIBUTES
