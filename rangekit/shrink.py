"""Coordinate compression that keeps chosen boundaries as cell boundaries."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Optional, Sequence, Union


class BoundaryNotShrinkableError(ValueError):
    """A boundary does not stay a boundary after compression."""


@dataclass(frozen=True)
class Interval:
    """An inclusive interval ``start..=end``; a missing bound is unbounded."""

    start: Optional[int] = None
    end: Optional[int] = None


ShrinkKey = Union[int, slice, Interval]


@dataclass(frozen=True)
class Unshrinked:
    """The original coordinates behind one compressed index.

    A regular cell covers ``start..=end``. The sentinel after the last cell
    has ``end`` set to None and covers everything greater than ``start``.
    """

    start: int
    end: Optional[int]

    @property
    def is_end_bound(self) -> bool:
        return self.end is None

    def is_min(self, x: int) -> bool:
        """True when ``x`` is the first coordinate of this cell."""
        if self.end is None:
            return self.start + 1 == x
        return self.start == x

    def is_max(self, x: int) -> bool:
        """True when ``x`` is the last coordinate of this cell."""
        return self.end is not None and self.end == x

    def range_inclusive(self) -> range:
        """The coordinates of this cell; the sentinel has none to give."""
        if self.end is None:
            raise ValueError(
                f"range_inclusive() is undefined for the end bound after {self.start}"
            )
        return range(self.start, self.end + 1)

    def count(self) -> int:
        """Number of coordinates in this cell."""
        if self.end is None:
            raise ValueError(f"count() is undefined for the end bound after {self.start}")
        return self.end - self.start + 1

    def __contains__(self, x: int) -> bool:
        if self.end is None:
            return x > self.start
        return self.start <= x <= self.end


class Shrink:
    """Maps integer coordinates onto compressed indices.

    Point ``0`` is a single coordinate; every other point ``i`` stands for
    ``points[i-1]+1 ..= points[i]``. Index ``shrinked_len()`` is a sentinel
    for everything past the largest point.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Sequence[int] = ()) -> None:
        self._points = list(points)

    def try_shrink(self, key: ShrinkKey) -> Optional[Union[int, slice, Interval]]:
        """Compress an index, a half-open slice or an :class:`Interval`.

        Returns None when a boundary of ``key`` falls inside a cell.
        """
        if isinstance(key, bool):
            raise TypeError("key must be an int, slice or Interval")
        if isinstance(key, int):
            i = self.shrink_index(key)
            u = self.unshrink(i)
            return i if u.is_min(key) and u.is_max(key) else None
        if isinstance(key, slice):
            if key.step is not None:
                raise ValueError("slice step is not supported")
            start_idx = end_idx = None
            if key.start is not None:
                start_idx = self.shrink_index(key.start)
            if key.stop is not None:
                end_idx = self.shrink_index(key.stop)
            if start_idx is not None and not self.unshrink(start_idx).is_min(key.start):
                return None
            if end_idx is not None:
                end_cell = self.unshrink(end_idx)
                ok = (
                    end_cell.is_max(key.stop)
                    if key.start is not None
                    else end_cell.is_min(key.stop)
                )
                if not ok:
                    return None
            return slice(start_idx, end_idx)
        if isinstance(key, Interval):
            start_idx = end_idx = None
            if key.start is not None:
                start_idx = self.shrink_index(key.start)
            if key.end is not None:
                end_idx = self.shrink_index(key.end)
            if start_idx is not None and not self.unshrink(start_idx).is_min(key.start):
                return None
            if end_idx is not None and not self.unshrink(end_idx).is_max(key.end):
                return None
            return Interval(start_idx, end_idx)
        raise TypeError("key must be an int, slice or Interval")

    def shrink(self, key: ShrinkKey) -> Union[int, slice, Interval]:
        """Like :meth:`try_shrink`, raising when a boundary is not kept."""
        result = self.try_shrink(key)
        if result is None:
            raise BoundaryNotShrinkableError(f"boundary of {key!r} is not shrinkable")
        return result

    def shrink_index(self, i: int) -> int:
        """The compressed index whose cell holds ``i``, from 0 to ``shrinked_len()``."""
        if i < self.shrinkable_min():
            raise ValueError(f"{i} is below the smallest point {self.shrinkable_min()}")
        return bisect_left(self._points, i)

    def unshrink(self, i: int) -> Unshrinked:
        """The coordinates behind compressed index ``i``."""
        n = len(self._points)
        if not 0 <= i <= n:
            raise IndexError(f"compressed index out of range: {i}")
        if i == n:
            return Unshrinked(self.shrinkable_max(), None)
        if i == 0:
            return Unshrinked(self._points[0], self._points[0])
        return Unshrinked(self._points[i - 1] + 1, self._points[i])

    def size_of_shrinked(self, i: int) -> int:
        """Number of coordinates in cell ``i``."""
        if i == 0:
            return 1
        if not 0 < i < len(self._points):
            raise IndexError(f"compressed index out of range: {i}")
        return self._points[i] - self._points[i - 1]

    def shrinkable_min(self) -> int:
        if not self._points:
            raise ValueError("compression of no values is empty")
        return self._points[0]

    def shrinkable_max(self) -> int:
        if not self._points:
            raise ValueError("compression of no values is empty")
        return self._points[-1]

    def shrinked_len(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"Shrink({self._points!r})"


class NoShrink:
    """A trivial compression where every cell holds one coordinate."""

    def size_of_shrinked(self, index: int) -> int:
        """Number of coordinates in cell ``index``: always one."""
        if index < 0:
            raise IndexError(f"compressed index out of range: {index}")
        return 1


def shrink(values: Iterable[int]) -> Shrink:
    """Compress ``values`` so that each of them is a cell of its own."""
    uniq = sorted(set(values))
    if not uniq:
        return Shrink()
    points = [uniq[0]]
    for a, b in pairwise(uniq):
        if b - 1 != a:
            points.append(b - 1)
        points.append(b)
    return Shrink(points)