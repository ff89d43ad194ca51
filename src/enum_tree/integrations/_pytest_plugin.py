"""pytest plugin for enum-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from enum_tree import BuildOptions, RegistryNode, build


@pytest.fixture(scope="session")
def enum_registry() -> Any:
    """Fixture that returns a registry factory.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to build() which creates a fresh TreeProcessor per call).

    Usage in tests::

        def test_status(enum_registry):
            Status = enum_registry({"ACTIVE": "active"})
            assert Status.contains("active")

        def test_shallow(enum_registry):
            with pytest.raises(DepthExceededError):
                enum_registry({"A": {"B": "b"}}, max_depth=1)

    Returns:
        A callable ``_build(spec, max_depth=None) -> RegistryNode``.
    """

    def _build(spec: Any, max_depth: int | None = None) -> RegistryNode:
        options = BuildOptions() if max_depth is None else BuildOptions(max_depth=max_depth)
        return build(spec, options)

    return _build
