"""Zero-based permutations, viewed as elements of the symmetric group."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence


def is_permutation0(values: Sequence[int]) -> bool:
    """True when ``values`` holds each of ``0..len(values)`` exactly once."""
    n = len(values)
    used = [False] * n
    for x in values:
        if not isinstance(x, int) or not 0 <= x < n or used[x]:
            return False
        used[x] = True
    return True


class Permutation:
    """A permutation of ``0..n``.

    Permutations of the same size form a monoid under :meth:`compose`.
    """

    __slots__ = ("_p",)

    def __init__(self, values: Iterable[int]) -> None:
        p = list(values)
        if not is_permutation0(p):
            raise ValueError("not a permutation")
        self._p = p

    @classmethod
    def _unchecked(cls, p: list[int]) -> "Permutation":
        obj = cls.__new__(cls)
        obj._p = p
        return obj

    def to_list(self) -> list[int]:
        return list(self._p)

    def size(self) -> int:
        return len(self._p)

    def __len__(self) -> int:
        return len(self._p)

    def __iter__(self) -> Iterator[int]:
        return iter(self._p)

    def inverse(self) -> "Permutation":
        """The permutation Q with ``Q[P[i]] == i`` for every i."""
        q = [0] * len(self._p)
        for i, r in enumerate(self._p):
            q[r] = i
        return Permutation._unchecked(q)

    def compose(self, other: "Permutation") -> "Permutation":
        """The permutation R with ``R[i] == other[self[i]]``."""
        if len(self) != len(other):
            raise ValueError(f"different length: {len(self)} != {len(other)}")
        return Permutation._unchecked([other._p[r] for r in self._p])

    def loops(self) -> list[list[int]]:
        """All cycles, each starting at its smallest element, in order."""
        used = [False] * len(self._p)
        result = []
        for i in range(len(self._p)):
            if used[i]:
                continue
            cycle = self.loop_of(i)
            for j in cycle:
                used[j] = True
            result.append(cycle)
        return result

    def loop_of(self, i: int) -> list[int]:
        """The cycle through ``i``: ``[i, P[i], P[P[i]], ...]``."""
        if not 0 <= i < len(self._p):
            raise IndexError(f"i={i} >= size={len(self._p)}")
        cycle = [i]
        j = self._p[i]
        while j != i:
            cycle.append(j)
            j = self._p[j]
        return cycle

    @classmethod
    def swap(cls, size: int, i: int, j: int) -> "Permutation":
        """The transposition of ``i`` and ``j``."""
        if not 0 <= i < size:
            raise IndexError(f"i={i} >= size={size}")
        if not 0 <= j < size:
            raise IndexError(f"j={j} >= size={size}")
        p = list(range(size))
        p[i], p[j] = j, i
        return cls._unchecked(p)

    @classmethod
    def from_loop(cls, size: int, cycle: Sequence[int]) -> "Permutation":
        """The permutation with ``P[c[0]] == c[1], ..., P[c[-1]] == c[0]``."""
        if not cycle:
            raise ValueError("cycle is empty")
        used = [False] * size
        for i in cycle:
            if not 0 <= i < size:
                raise ValueError(f"i={i} >= size={size}")
            if used[i]:
                raise ValueError(f"i={i} is duplicated")
            used[i] = True
        p = list(range(size))
        for src, dst in zip(cycle, [*cycle[1:], cycle[0]]):
            p[src] = dst
        return cls._unchecked(p)

    @classmethod
    def identity(cls, size: int) -> "Permutation":
        return cls._unchecked(list(range(size)))

    def __mul__(self, other: "Permutation") -> "Permutation":
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.compose(other)

    def __getitem__(self, index: int) -> int:
        return self._p[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._p[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._p == other._p

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Permutation({self._p!r})"