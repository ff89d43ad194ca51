"""Same-value equality for enum leaves.

Stricter than ``==`` in three ways:

- NaN equals NaN (``==`` says it does not);
- ``0.0`` and ``-0.0`` are distinct (``==`` says they are equal);
- a bool never equals a number and a str never equals a number
  (``True == 1`` in Python).

Numbers otherwise compare numerically, so ``1`` and ``1.0`` are the same value.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

__all__ = ["contains_same_value", "same_value"]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def same_value(left: Any, right: Any) -> bool:
    """Return True if ``left`` and ``right`` are the same enum value."""
    if _is_number(left) and _is_number(right):
        left_nan = isinstance(left, float) and math.isnan(left)
        right_nan = isinstance(right, float) and math.isnan(right)
        if left_nan or right_nan:
            return left_nan and right_nan
        if left == 0 and right == 0:
            return math.copysign(1.0, left) == math.copysign(1.0, right)
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    return left is right


def contains_same_value(candidate: Any, pool: Iterable[Any]) -> bool:
    """Return True if any element of ``pool`` is the same value as ``candidate``."""
    return any(same_value(candidate, item) for item in pool)
