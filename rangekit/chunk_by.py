"""Split a sequence into runs of neighbours that satisfy a predicate."""

from __future__ import annotations

from itertools import pairwise
from typing import Callable, Iterator, Sequence, TypeVar

T = TypeVar("T")
S = TypeVar("S", bound=Sequence)


def chunk_by(seq: S, pred: Callable[[T, T], bool]) -> Iterator[S]:
    """Yield maximal runs, front to back, in which ``pred(a, b)`` holds for
    every pair of consecutive elements. Each run is a slice of ``seq``."""
    start = 0
    for i, (left, right) in enumerate(pairwise(seq), 1):
        if not pred(left, right):
            yield seq[start:i]
            start = i
    if len(seq):
        yield seq[start:]


def chunk_by_reversed(seq: S, pred: Callable[[T, T], bool]) -> Iterator[S]:
    """Yield the same runs as :func:`chunk_by`, back to front."""
    end = len(seq)
    for i in range(len(seq) - 1, 0, -1):
        if not pred(seq[i - 1], seq[i]):
            yield seq[i:end]
            end = i
    if end:
        yield seq[:end]