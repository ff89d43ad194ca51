"""BuildOptions for registry construction.

BuildOptions is a frozen (immutable) dataclass validated on construction,
so an invalid limit fails loudly before any input is walked.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_MAX_DEPTH", "BuildOptions"]

DEFAULT_MAX_DEPTH = 10


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Immutable options for ``build()``.

    Attributes:
        max_depth: Number of mapping levels that may be entered.  The input's
            own top level is depth 0, so ``max_depth=1`` permits only flat
            inputs.  Must be a positive int.  Default 10.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        # bool subclasses int; True must not pass as a depth of 1
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            msg = f"max_depth must be an int, got {type(self.max_depth).__name__}"
            raise TypeError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
