"""Area of the union of axis-aligned integer rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from rangekit.chunk_by import chunk_by
from rangekit.shrink import shrink


@dataclass(frozen=True)
class Rect:
    """The rectangle ``[x1, x2) x [y1, y2)``."""

    x1: int
    y1: int
    x2: int
    y2: int

    def __post_init__(self) -> None:
        if self.x1 > self.x2:
            raise ValueError(f"x1={self.x1} > x2={self.x2}")
        if self.y1 > self.y2:
            raise ValueError(f"y1={self.y1} > y2={self.y2}")


class _CoverTree:
    """Range add over weighted cells, reporting the minimum and its weight."""

    def __init__(self, weights: Sequence[int]) -> None:
        self._n = len(weights)
        size = max(1, 4 * self._n)
        self._min = [0] * size
        self._count = [0] * size
        self._lazy = [0] * size
        if self._n:
            self._build(1, 0, self._n, weights)

    def _build(self, node: int, lo: int, hi: int, weights: Sequence[int]) -> None:
        if hi - lo == 1:
            self._count[node] = weights[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, weights)
        self._build(2 * node + 1, mid, hi, weights)
        self._pull(node)

    def _pull(self, node: int) -> None:
        left, right = 2 * node, 2 * node + 1
        low = min(self._min[left], self._min[right])
        self._min[node] = low + self._lazy[node]
        self._count[node] = (self._count[left] if self._min[left] == low else 0) + (
            self._count[right] if self._min[right] == low else 0
        )

    def add(self, l: int, r: int, d: int) -> None:
        if self._n and l < r:
            self._add(1, 0, self._n, l, r, d)

    def _add(self, node: int, lo: int, hi: int, l: int, r: int, d: int) -> None:
        if r <= lo or hi <= l:
            return
        if l <= lo and hi <= r:
            self._min[node] += d
            self._lazy[node] += d
            return
        mid = (lo + hi) // 2
        self._add(2 * node, lo, mid, l, r, d)
        self._add(2 * node + 1, mid, hi, l, r, d)
        self._pull(node)

    def min_count(self) -> tuple[float, int]:
        if not self._n:
            return math.inf, 0
        return self._min[1], self._count[1]


def paint_rect_calc_area(rects: Iterable[Rect]) -> int:
    """The number of integer cells covered by at least one rectangle."""
    rects = list(rects)
    if not rects:
        return 0
    xs = shrink([r.x1 for r in rects] + [r.x2 for r in rects])
    entire_len = xs.shrinkable_max() - xs.shrinkable_min()
    tree = _CoverTree([xs.size_of_shrinked(j) for j in range(xs.shrinked_len() - 1)])

    events = []
    for r in rects:
        if r.y1 != r.y2:
            events.append((r.y1, 1, r.x1, r.x2))
            events.append((r.y2, -1, r.x1, r.x2))
    events.sort(key=lambda e: e[0])

    area = 0
    last_y = None
    for chunk in chunk_by(events, lambda a, b: a[0] == b[0]):
        y = chunk[0][0]
        if last_y is not None:
            low, count = tree.min_count()
            covered = entire_len - count if low == 0 else entire_len
            area += covered * (y - last_y)
        for _y, d, x1, x2 in chunk:
            tree.add(xs.shrink_index(x1), xs.shrink_index(x2), d)
        last_y = y
    return area


class PaintRectCalcAreaBuilder:
    """Collects rectangles and measures the area of their union."""

    def __init__(self) -> None:
        self._rects: list[Rect] = []

    def add(self, x1: int, y1: int, x2: int, y2: int) -> "PaintRectCalcAreaBuilder":
        """Add ``[x1, x2) x [y1, y2)``."""
        self._rects.append(Rect(x1, y1, x2, y2))
        return self

    def add_inclusive(
        self, x1: int, y1: int, x2: int, y2: int
    ) -> "PaintRectCalcAreaBuilder":
        """Add ``[x1, x2] x [y1, y2]``."""
        self._rects.append(Rect(x1, y1, x2 + 1, y2 + 1))
        return self

    def calc_area(self) -> int:
        return paint_rect_calc_area(self._rects)


def paint_rect() -> PaintRectCalcAreaBuilder:
    """Start collecting rectangles."""
    return PaintRectCalcAreaBuilder()