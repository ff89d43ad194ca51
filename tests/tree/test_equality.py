"""Tests for same_value(): the strict equality behind equals() and contains()."""

from __future__ import annotations

import math

import pytest

from enum_tree.tree.equality import contains_same_value, same_value


class TestSameValueNumbers:
    def test_equal_ints(self) -> None:
        assert same_value(1, 1)

    def test_int_and_float_with_same_value(self) -> None:
        assert same_value(1, 1.0)

    def test_nan_equals_nan(self) -> None:
        assert same_value(math.nan, float("nan"))

    def test_nan_does_not_equal_number(self) -> None:
        assert not same_value(math.nan, 0)
        assert not same_value(0.0, math.nan)

    def test_positive_and_negative_zero_are_distinct(self) -> None:
        assert not same_value(0.0, -0.0)
        assert not same_value(-0.0, 0)

    def test_negative_zero_equals_itself(self) -> None:
        assert same_value(-0.0, -0.0)

    def test_int_zero_equals_positive_float_zero(self) -> None:
        assert same_value(0, 0.0)

    def test_infinities(self) -> None:
        assert same_value(math.inf, math.inf)
        assert not same_value(math.inf, -math.inf)


class TestSameValueMixedTypes:
    @pytest.mark.parametrize(
        ("left", "right"),
        [(0, False), (1, True), (0, ""), (0, None), ("1", 1), ("", None), ("a", ["a"])],
    )
    def test_different_kinds_never_match(self, left: object, right: object) -> None:
        assert not same_value(left, right)
        assert not same_value(right, left)

    def test_equal_strings(self) -> None:
        assert same_value("active", "active")

    def test_unicode_strings(self) -> None:
        assert same_value("你好", "你好")


class TestContainsSameValue:
    def test_found(self) -> None:
        assert contains_same_value("b", ["a", "b"])

    def test_not_found(self) -> None:
        assert not contains_same_value("c", ("a", "b"))

    def test_nan_found(self) -> None:
        assert contains_same_value(math.nan, [1, math.nan])

    def test_negative_zero_not_found_among_positive(self) -> None:
        assert not contains_same_value(-0.0, [0, 0.0])

    def test_empty_pool(self) -> None:
        assert not contains_same_value("a", [])
