"""ValueFeature and ObjectFeature: the decorations attached to a registry tree.

A ValueFeature wraps one leaf.  An ObjectFeature is attached to every level
that has at least one direct leaf and answers questions about that level's
leaves: the ordered values, a plain key -> value view, and membership tests.

Derived views (``as_type`` and ``loop_items``) are computed lazily, at most
once per ObjectFeature.  Each instance keeps its own ``cachetools.Cache`` and
lock, so there is no class-level shared state and two trees never interfere.

Example::

    feature = build_object({"ACTIVE": "active", "OFF": ("off", {"icon": "x"})},
                           ["active", "off"], [None, {"icon": "x"}])
    feature.values                    # ("active", "off")
    feature.as_type["OFF"]            # "off"
    feature.contains_one_of("off", "active", "off")   # True
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from operator import attrgetter
from types import MappingProxyType
from typing import Any

from cachetools import Cache, cachedmethod
from cachetools.keys import hashkey

from enum_tree.errors import InvalidValueError
from enum_tree.tree.classifier import Leaf, NodeKind, classify
from enum_tree.tree.equality import contains_same_value, same_value

__all__ = [
    "OBJECT_FEATURE_FIELDS",
    "LoopItem",
    "ObjectFeature",
    "ValueFeature",
    "build_object",
    "build_value",
]

# Names an ObjectFeature exposes on the RegistryNode it is attached to.
OBJECT_FEATURE_FIELDS = frozenset(
    {
        "values",
        "as_type",
        "contains",
        "contains_one_of",
        "loop_items",
        "map",
        "for_each",
    }
)

_CANDIDATE_COLLECTIONS = (list, tuple, set, frozenset)


@dataclass(frozen=True, slots=True, eq=False)
class ValueFeature:
    """A decorated enum leaf.

    Attributes:
        value: The raw leaf (str, int or float).
        meta:  The metadata record paired with the leaf, or None when the leaf
               was declared bare.

    eq=False keeps identity hashing; metadata dicts are unhashable and
    value comparison goes through ``equals`` instead.
    """

    value: Leaf
    meta: Any = None

    def equals(self, candidate: Any) -> bool:
        """Return True if ``candidate`` is the same value as this leaf."""
        return same_value(candidate, self.value)


@dataclass(frozen=True, slots=True)
class LoopItem:
    """One direct leaf of a level, as handed to ``map`` and ``for_each``.

    Only ``value`` takes part in hashing, so items whose metadata is a dict
    can still be put in sets; equality compares both fields.
    """

    value: Leaf
    meta: Any = field(default=None, hash=False)


def _as_type_key(_self: Any) -> tuple[Any, ...]:
    return hashkey("as_type")


def _loop_items_key(_self: Any) -> tuple[Any, ...]:
    return hashkey("loop_items")


class ObjectFeature:
    """Membership tests and plain views over one level's direct leaves.

    Args:
        level: The input mapping for this level.  A shallow snapshot of its
            items is taken immediately; the mapping itself is never mutated.
        direct_values: Raw leaf values of the direct leaf children, in
            declaration order.  Pairs must already be unwrapped by the caller.
        direct_metas: Metadata for each entry of ``direct_values`` (None for
            bare leaves).  Omitted means no leaf carries metadata.

    Raises:
        ValueError: If ``direct_metas`` and ``direct_values`` differ in length.
    """

    def __init__(
        self,
        level: Mapping[Any, Any],
        direct_values: Iterable[Leaf],
        direct_metas: Iterable[Any] | None = None,
    ) -> None:
        self._entries: tuple[tuple[Any, Any], ...] = tuple(level.items())
        self._values: tuple[Leaf, ...] = tuple(direct_values)
        if direct_metas is None:
            self._metas: tuple[Any, ...] = (None,) * len(self._values)
        else:
            self._metas = tuple(direct_metas)
        if len(self._metas) != len(self._values):
            msg = (
                f"got {len(self._metas)} metadata entries "
                f"for {len(self._values)} direct values"
            )
            raise ValueError(msg)
        self._views: Cache[Any, Any] = Cache(maxsize=2)
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"ObjectFeature(values={self._values!r})"

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def values(self) -> tuple[Leaf, ...]:
        """Direct leaf values in declaration order."""
        return self._values

    @property
    def as_type(self) -> Mapping[Any, Leaf]:
        """Read-only key -> raw leaf view of the direct leaves.

        Metadata is stripped and nested children are left out.  The same
        mapping object is returned on every access.
        """
        return self._compute_as_type()

    @property
    def loop_items(self) -> tuple[LoopItem, ...]:
        """Direct leaves as ``LoopItem(value, meta)``, computed once."""
        return self._compute_loop_items()

    @cachedmethod(attrgetter("_views"), key=_as_type_key, lock=attrgetter("_lock"))
    def _compute_as_type(self) -> Mapping[Any, Leaf]:
        plain: dict[Any, Leaf] = {}
        for key, node in self._entries:
            match classify(node):
                case NodeKind.LEAF:
                    plain[key] = node
                case NodeKind.LEAF_WITH_META:
                    plain[key] = node[0]
        return MappingProxyType(plain)

    @cachedmethod(attrgetter("_views"), key=_loop_items_key, lock=attrgetter("_lock"))
    def _compute_loop_items(self) -> tuple[LoopItem, ...]:
        return tuple(
            LoopItem(value=value, meta=meta)
            for value, meta in zip(self._values, self._metas, strict=True)
        )

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def contains(self, candidate: Any) -> bool:
        """Return True if ``candidate`` is one of this level's direct values."""
        return contains_same_value(candidate, self._values)

    def contains_one_of(self, candidate: Any, *within: Any) -> bool:
        """Return True if ``candidate`` is one of the values in ``within``.

        ``within`` takes three shapes::

            feature.contains_one_of(x, ["a", "b"])                     # one collection
            feature.contains_one_of(x, lambda t: [t["A"], t["B"]])     # selector
            feature.contains_one_of(x, "a", "b")                       # varargs

        A selector is called with ``as_type``; it may return a collection or a
        single value.  With no ``within`` arguments the answer is False.
        """
        if not within:
            return False

        first = within[0]
        if isinstance(first, _CANDIDATE_COLLECTIONS):
            return contains_same_value(candidate, first)

        if callable(first):
            selected = first(self.as_type)
            if isinstance(selected, _CANDIDATE_COLLECTIONS):
                return contains_same_value(candidate, selected)
            return same_value(candidate, selected)

        return contains_same_value(candidate, within)

    # ------------------------------------------------------------------
    # Iteration helpers
    # ------------------------------------------------------------------

    def map(self, callback: Callable[[LoopItem], Any]) -> list[Any]:
        """Return ``[callback(item) for item in loop_items]``.

        The callback receives the LoopItem only, with no index or item list.
        When the position is needed, iterate directly::

            [f(i, item) for i, item in enumerate(feature.loop_items)]
        """
        return [callback(item) for item in self.loop_items]

    def for_each(self, callback: Callable[[LoopItem], Any]) -> None:
        """Call ``callback(item)`` for every item in ``loop_items``.

        Like ``map``, the callback gets a single LoopItem argument; use
        ``enumerate(feature.loop_items)`` for positions.
        """
        for item in self.loop_items:
            callback(item)


def build_value(node: Any, path: Iterable[Any] = ()) -> ValueFeature:
    """Wrap a leaf or a (value, metadata) pair in a ValueFeature.

    Raises:
        InvalidValueError: If ``node`` is neither shape.
    """
    match classify(node):
        case NodeKind.LEAF:
            return ValueFeature(value=node)
        case NodeKind.LEAF_WITH_META:
            value, meta = node
            return ValueFeature(value=value, meta=meta)
        case _:
            raise InvalidValueError(node, tuple(path))


def build_object(
    level: Mapping[Any, Any],
    direct_values: Iterable[Leaf],
    direct_metas: Iterable[Any] | None = None,
) -> ObjectFeature:
    """Build the ObjectFeature for one level from its direct leaf values.

    ``loop_items`` pairs ``direct_values`` with ``direct_metas`` position by
    position; the level mapping only feeds ``as_type``.
    """
    return ObjectFeature(level, direct_values, direct_metas)
