"""NodeKind StrEnum and the shape classifier for enum definition entries.

Every entry of an input mapping is one of four kinds:

- LEAF            -> "leaf"            : a str, int or float value
- LEAF_WITH_META  -> "leaf_with_meta"  : a 2-element (value, metadata) pair
- NESTED          -> "nested"          : another mapping of definitions
- INVALID         -> "invalid"         : anything else

The three valid shapes look alike structurally (a pair is a sequence, a
mapping may hold numeric-looking keys), so the checks are evaluated in a
fixed order.  ``classify`` is pure and total: it never raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, StrEnum, auto
from typing import Any, TypeAlias

__all__ = [
    "EnumSpec",
    "Leaf",
    "LeafWithMeta",
    "Metadata",
    "NodeKind",
    "classify",
    "enum_members",
    "is_enum_type",
    "is_leaf",
    "is_leaf_with_meta",
    "is_metadata",
    "is_nested",
]

Leaf: TypeAlias = str | int | float
Metadata: TypeAlias = Mapping[str, Any] | object
LeafWithMeta: TypeAlias = tuple[Leaf, Metadata] | list[Any]
EnumSpec: TypeAlias = Mapping[Any, Any]

# Values that can never serve as a metadata record.  Sequences and sets are
# excluded so that a pair never nests another pair as its metadata.
_NON_RECORD_TYPES = (
    str,
    bytes,
    bytearray,
    int,
    float,
    complex,
    list,
    tuple,
    set,
    frozenset,
    type,
)


class NodeKind(StrEnum):
    """The four shapes an input entry can take."""

    LEAF = auto()
    LEAF_WITH_META = auto()
    NESTED = auto()
    INVALID = auto()


def is_leaf(node: Any) -> bool:
    """Return True for str, int and float values.

    bool is rejected explicitly: it subclasses int in Python, but ``True`` is
    not an enumerable constant.
    """
    if isinstance(node, bool):
        return False
    return isinstance(node, (str, int, float))


def is_metadata(node: Any) -> bool:
    """Return True when ``node`` can act as a metadata record.

    Duck-typed: any Mapping qualifies, and so does any attribute-carrying
    object instance (dataclass instances, SimpleNamespace, ...).  None,
    scalars, sequences, sets, classes and callables do not.
    """
    if node is None or isinstance(node, bool):
        return False
    if isinstance(node, Mapping):
        return True
    if isinstance(node, _NON_RECORD_TYPES):
        return False
    return not callable(node)


def is_leaf_with_meta(node: Any) -> bool:
    """Return True for a list or tuple shaped exactly ``(leaf, metadata)``."""
    return (
        isinstance(node, (list, tuple))
        and len(node) == 2
        and is_leaf(node[0])
        and is_metadata(node[1])
    )


def is_nested(node: Any) -> bool:
    """Return True for a mapping that is not already a leaf or a pair."""
    return isinstance(node, Mapping)


def classify(node: Any) -> NodeKind:
    """Label ``node`` with its NodeKind.

    The order matters: a leaf is checked first, then the (value, metadata)
    pair, then the nested mapping.  Whatever is left, including lists of any
    other length or content, is INVALID.
    """
    if is_leaf(node):
        return NodeKind.LEAF
    if is_leaf_with_meta(node):
        return NodeKind.LEAF_WITH_META
    if is_nested(node):
        return NodeKind.NESTED
    return NodeKind.INVALID


def is_enum_type(node: Any) -> bool:
    """Return True for an Enum class (not an Enum member)."""
    return isinstance(node, type) and issubclass(node, Enum)


def enum_members(enum_type: type[Enum]) -> dict[str, Any]:
    """Map each member name of ``enum_type`` to its raw value.

    Aliases are kept under their own names, in definition order.  The values
    are classified like any other entry, so a member whose value is not a
    leaf or a (value, metadata) pair is rejected by the processor.
    """
    return {name: member.value for name, member in enum_type.__members__.items()}
