"""Builders for common segment trees: minimum, maximum and sum."""

from __future__ import annotations

import math
import operator
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from rangekit.segment_tree import SegmentTree, segment_tree_new

T = TypeVar("T")

OrdFn = Callable[[Any, Any], int]


def _partial_ord(builder_name: str) -> OrdFn:
    def ord_fn(a: Any, b: Any) -> int:
        if a < b:
            return -1
        if a > b:
            return 1
        if a == b:
            return 0
        raise ValueError(f"{builder_name}: ordering should be total")

    return ord_fn


def _type_hook(values: Sequence[Any], name: str) -> Optional[Callable[[], Any]]:
    if values:
        hook = getattr(type(values[0]), name, None)
        if callable(hook):
            return hook
    return None


def _build_extremum(
    name: str,
    values: list,
    ord_fn: Optional[OrdFn],
    bound: Optional[Callable[[], Any]],
    keep_left: Callable[[int], bool],
) -> SegmentTree:
    if bound is None:
        raise ValueError(f"{name}: identity bound is not set")
    if ord_fn is None:
        raise ValueError(f"{name}: ordering is not set")

    def op(a: Any, b: Any) -> Any:
        return a if keep_left(ord_fn(a, b)) else b

    return segment_tree_new(values, op, bound)


class SegmentTreeMinBuilder(Generic[T]):
    """Builds a segment tree folding to the leftmost minimum."""

    _name = "SegmentTreeMinBuilder"

    def __init__(self, values: Sequence[T]) -> None:
        self._values = list(values)
        self._ord: Optional[OrdFn] = None
        self._bound: Optional[Callable[[], T]] = None

    def set_ord(self, ord_fn: OrdFn) -> "SegmentTreeMinBuilder[T]":
        """Order values by ``ord_fn(a, b)``: negative, zero or positive."""
        self._ord = ord_fn
        return self

    def set_ord_auto(self) -> "SegmentTreeMinBuilder[T]":
        """Order values by their own comparison operators."""
        return self.set_ord(_partial_ord(self._name))

    def set_max_exists(self, max_fn: Callable[[], T]) -> "SegmentTreeMinBuilder[T]":
        """Use ``max_fn()`` as the identity: a value no less than any other."""
        self._bound = max_fn
        return self

    def set_max_exists_auto(self) -> "SegmentTreeMinBuilder[T]":
        """Use the values' own ``max_exists``, or positive infinity."""
        hook = _type_hook(self._values, "max_exists")
        return self.set_max_exists(hook if hook is not None else lambda: math.inf)

    def build(self) -> SegmentTree[T]:
        return _build_extremum(
            self._name, self._values, self._ord, self._bound, lambda sign: sign <= 0
        )


class SegmentTreeMaxBuilder(Generic[T]):
    """Builds a segment tree folding to the leftmost maximum."""

    _name = "SegmentTreeMaxBuilder"

    def __init__(self, values: Sequence[T]) -> None:
        self._values = list(values)
        self._ord: Optional[OrdFn] = None
        self._bound: Optional[Callable[[], T]] = None

    def set_ord(self, ord_fn: OrdFn) -> "SegmentTreeMaxBuilder[T]":
        """Order values by ``ord_fn(a, b)``: negative, zero or positive."""
        self._ord = ord_fn
        return self

    def set_ord_auto(self) -> "SegmentTreeMaxBuilder[T]":
        """Order values by their own comparison operators."""
        return self.set_ord(_partial_ord(self._name))

    def set_min_exists(self, min_fn: Callable[[], T]) -> "SegmentTreeMaxBuilder[T]":
        """Use ``min_fn()`` as the identity: a value no greater than any other."""
        self._bound = min_fn
        return self

    def set_min_exists_auto(self) -> "SegmentTreeMaxBuilder[T]":
        """Use the values' own ``min_exists``, or negative infinity."""
        hook = _type_hook(self._values, "min_exists")
        return self.set_min_exists(hook if hook is not None else lambda: -math.inf)

    def build(self) -> SegmentTree[T]:
        return _build_extremum(
            self._name, self._values, self._ord, self._bound, lambda sign: sign >= 0
        )


class SegmentTreeSumBuilder(Generic[T]):
    """Builds a segment tree folding with an addition and its zero."""

    def __init__(self, values: Sequence[T]) -> None:
        self._values = list(values)
        self._add: Optional[Callable[[T, T], T]] = None
        self._zero: Optional[Callable[[], T]] = None

    def set_add(self, add_fn: Callable[[T, T], T]) -> "SegmentTreeSumBuilder[T]":
        self._add = add_fn
        return self

    def set_add_by_add(self) -> "SegmentTreeSumBuilder[T]":
        """Use the ``+`` operator."""
        return self.set_add(operator.add)

    def set_add_zero_by_mul(self) -> "SegmentTreeSumBuilder[T]":
        """Use ``*`` as the operation and ``1`` as its identity."""
        return self.set_add(operator.mul).set_zero(lambda: 1)

    def set_zero(self, zero_fn: Callable[[], T]) -> "SegmentTreeSumBuilder[T]":
        self._zero = zero_fn
        return self

    def set_zero_by_default(self) -> "SegmentTreeSumBuilder[T]":
        """Use the default value of the values' type, or ``0``."""
        if self._values:
            kind = type(self._values[0])
            return self.set_zero(kind)
        return self.set_zero(lambda: 0)

    def build(self) -> SegmentTree[T]:
        if self._add is None:
            raise ValueError("SegmentTreeSumBuilder: add is not set")
        if self._zero is None:
            raise ValueError("SegmentTreeSumBuilder: zero is not set")
        return segment_tree_new(self._values, self._add, self._zero)


def segment_tree_builder_min(values: Sequence[T]) -> SegmentTreeMinBuilder[T]:
    return SegmentTreeMinBuilder(values)


def segment_tree_builder_max(values: Sequence[T]) -> SegmentTreeMaxBuilder[T]:
    return SegmentTreeMaxBuilder(values)


def segment_tree_builder_sum(values: Sequence[T]) -> SegmentTreeSumBuilder[T]:
    return SegmentTreeSumBuilder(values)


def segment_tree_new_min(values: Sequence[T]) -> SegmentTree[T]:
    """A range-minimum segment tree using the values' natural order."""
    return segment_tree_builder_min(values).set_ord_auto().set_max_exists_auto().build()


def segment_tree_new_max(values: Sequence[T]) -> SegmentTree[T]:
    """A range-maximum segment tree using the values' natural order."""
    return segment_tree_builder_max(values).set_ord_auto().set_min_exists_auto().build()


def segment_tree_new_sum(values: Sequence[T]) -> SegmentTree[T]:
    """A range-sum segment tree using ``+`` and the type's default zero."""
    return segment_tree_builder_sum(values).set_add_by_add().set_zero_by_default().build()