"""TreeProcessor: converts an enum definition mapping into a RegistryNode tree.

Traversal is top-down and assembly is bottom-up: each level classifies its
entries, recurses into nested mappings, and is decorated with an
ObjectFeature only after all of its children are built.

Paths are tuples of keys built during traversal:
- Root is () (rendered "<root>" in diagnostics)
- Each nested level appends its key
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from enum_tree.config import DEFAULT_MAX_DEPTH
from enum_tree.errors import DepthExceededError, InvalidValueError, join_path
from enum_tree.tree.classifier import (
    EnumSpec,
    Leaf,
    NodeKind,
    classify,
    enum_members,
    is_enum_type,
)
from enum_tree.tree.features import ValueFeature, build_object, build_value
from enum_tree.tree.nodes import NODE_ATTRIBUTES, RESERVED_ATTRIBUTES, RegistryNode

logger = logging.getLogger("enum_tree.tree.processor")


@dataclass(frozen=True, slots=True)
class TreeProcessor:
    """Walks an enum definition mapping and builds the registry tree.

    The depth check runs as soon as a level is entered, before any of its
    entries are looked at, so ``max_depth`` bounds the number of mapping
    levels (an empty nested mapping still counts as one).

    Construction is all-or-nothing: the first invalid entry or excessive
    level raises, and the error propagates unchanged to the caller.

    Example::
        processor = TreeProcessor(max_depth=3)
        root = processor.process({"API": {"V1": {"USERS": "/v1/users"}}})
        root["API"]["V1"]["USERS"].value   # "/v1/users"
        root["API"]["V1"].contains("/v1/users")   # True
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def process(
        self,
        spec: EnumSpec,
        current_depth: int = 0,
        path_stack: tuple[Any, ...] = (),
    ) -> RegistryNode:
        """Build the RegistryNode for ``spec`` and everything below it.

        Args:
            spec:          The mapping for this level, or an Enum class whose
                           members become its entries.
            current_depth: Depth of this level.  Defaults to 0 (root).
            path_stack:    Keys leading to this level.  Defaults to () (root).

        Returns:
            The fully assembled RegistryNode for this level.

        Raises:
            DepthExceededError: If ``current_depth >= max_depth``.
            InvalidValueError:  If ``spec`` or any entry below it has an
                unsupported shape.
        """
        if current_depth >= self.max_depth:
            raise DepthExceededError(current_depth, self.max_depth, path_stack)

        if is_enum_type(spec):
            spec = enum_members(spec)

        if classify(spec) is not NodeKind.NESTED:
            raise InvalidValueError(spec, path_stack)

        children: dict[Any, ValueFeature | RegistryNode] = {}
        direct_values: list[Leaf] = []
        direct_metas: list[Any] = []

        for key, node in spec.items():
            key_path = (*path_stack, key)
            if is_enum_type(node):
                node = enum_members(node)
            match classify(node):
                case NodeKind.LEAF | NodeKind.LEAF_WITH_META:
                    feature = build_value(node, key_path)
                    direct_values.append(feature.value)
                    direct_metas.append(feature.meta)
                    children[key] = feature
                case NodeKind.NESTED:
                    children[key] = self.process(node, current_depth + 1, key_path)
                case NodeKind.INVALID:
                    raise InvalidValueError(node, key_path)

        # Feature fields only hide children on levels that carry a feature.
        reserved = RESERVED_ATTRIBUTES if direct_values else NODE_ATTRIBUTES
        shadowed = [key for key in children if key in reserved]
        if shadowed:
            logger.warning(
                "Keys %s at %s shadow registry attributes; use subscription to reach them",
                shadowed,
                join_path(path_stack),
            )

        object_feature = (
            build_object(spec, direct_values, direct_metas) if direct_values else None
        )
        logger.debug(
            "Built level %s: %d entries, %d direct leaves",
            join_path(path_stack),
            len(children),
            len(direct_values),
        )
        return RegistryNode(
            children,
            path=path_stack,
            depth=current_depth,
            feature=object_feature,
        )
