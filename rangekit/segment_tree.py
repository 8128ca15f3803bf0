"""Segment tree over an arbitrary monoid with point updates and range folds."""

from __future__ import annotations

import copy
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar, Union

T = TypeVar("T")

RangeKey = Union[int, slice, range]


class SegmentTree(Generic[T]):
    """A segment tree over values combined by an associative ``op``.

    ``identity`` is a callable returning the identity element of ``op``.
    Folded results, read values and written values can be adapted with
    :meth:`with_folded`, :meth:`with_getter` and :meth:`with_setter`.
    """

    __slots__ = (
        "_op",
        "_identity",
        "_tree",
        "_size",
        "_size_pow2",
        "_into_folded",
        "_into_getter",
        "_from_setter",
    )

    def __init__(
        self,
        values: Iterable[T],
        op: Callable[[T, T], T],
        identity: Callable[[], T],
    ) -> None:
        values = list(values)
        self._op = op
        self._identity = identity
        self._into_folded: Optional[Callable[[T], Any]] = None
        self._into_getter: Optional[Callable[[T, int], Any]] = None
        self._from_setter: Optional[Callable[[Any, int], T]] = None
        n = len(values)
        self._size = n
        if n == 0:
            self._size_pow2 = 0
            self._tree: list[T] = []
            return
        pow2 = 1 << (n - 1).bit_length()
        self._size_pow2 = pow2
        tree = [identity() for _ in range(pow2)]
        tree.extend(values)
        tree.extend(identity() for _ in range(pow2 - n))
        for i in range(pow2 - 1, 0, -1):
            tree[i] = op(tree[2 * i], tree[2 * i + 1])
        self._tree = tree

    def _replaced(self, **changes: Any) -> "SegmentTree[Any]":
        new = copy.copy(self)
        new._tree = list(self._tree)
        for name, value in changes.items():
            setattr(new, name, value)
        return new

    def with_folded(self, into_folded: Callable[[T], Any]) -> "SegmentTree[T]":
        """A copy whose :meth:`fold` results pass through ``into_folded``."""
        return self._replaced(_into_folded=into_folded)

    def with_getter(self, into_getter: Callable[[T, int], Any]) -> "SegmentTree[T]":
        """A copy whose :meth:`get` results are ``into_getter(value, index)``."""
        return self._replaced(_into_getter=into_getter)

    def with_setter(self, from_setter: Callable[[Any, int], T]) -> "SegmentTree[T]":
        """A copy that stores ``from_setter(value, index)`` on :meth:`set`."""
        return self._replaced(_from_setter=from_setter)

    def _folded(self, value: T) -> Any:
        return value if self._into_folded is None else self._into_folded(value)

    def _got(self, value: T, index: int) -> Any:
        return value if self._into_getter is None else self._into_getter(value, index)

    def _stored(self, value: Any, index: int) -> T:
        return value if self._from_setter is None else self._from_setter(value, index)

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def _resolve(self, key: RangeKey) -> tuple[int, int]:
        if isinstance(key, bool):
            raise TypeError("range key must be an int, slice or range")
        if isinstance(key, int):
            if not 0 <= key < self._size:
                raise IndexError(f"index out of range: {key}")
            return key, key + 1
        if isinstance(key, (slice, range)):
            if key.step not in (None, 1):
                raise ValueError("range step must be 1")
            start = 0 if key.start is None else key.start
            stop = self._size if key.stop is None else key.stop
            if not 0 <= start <= self._size:
                raise IndexError(f"range start out of range: {start}")
            if not 0 <= stop <= self._size:
                raise IndexError(f"range end out of range: {stop}")
            return start, stop
        raise TypeError("range key must be an int, slice or range")

    def fold(self, key: RangeKey = slice(None)) -> Any:
        """Combine ``v[l], v[l+1], ..., v[r-1]`` in order.

        ``key`` is a half-open slice or range, or a single index.
        """
        return self._folded(self._fold(key))

    def _fold(self, key: RangeKey) -> T:
        if self._size == 0:
            return self._identity()
        start, stop = self._resolve(key)
        if start >= stop:
            return self._identity()
        op, tree = self._op, self._tree
        l = start + self._size_pow2
        r = stop + self._size_pow2
        left = self._identity()
        right = self._identity()
        while l < r:
            if l % 2 == 1:
                left = op(left, tree[l])
                l += 1
            if r % 2 == 1:
                r -= 1
                right = op(tree[r], right)
            l //= 2
            r //= 2
        return op(left, right)

    def get(self, index: int) -> Any:
        """The value at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index out of range: {index}")
        return self._got(self._tree[index + self._size_pow2], index)

    def set(self, index: int, value: Any) -> None:
        """Replace the value at ``index``."""
        self.update(index, lambda _old: value)

    def update(self, index: int, update_fn: Callable[[Any], Any]) -> None:
        """Replace the value at ``index`` with ``update_fn(current)``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index out of range: {index}")
        tree, op = self._tree, self._op
        node = index + self._size_pow2
        current = self._got(tree[node], index)
        tree[node] = self._stored(update_fn(current), index)
        while node > 1:
            node //= 2
            tree[node] = op(tree[2 * node], tree[2 * node + 1])

    def find_index_to_start(self, r: int, cond_fn: Callable[[Any, int], bool]) -> int:
        """Smallest ``l < r`` with ``cond_fn(fold(l..r), l)``, or ``r`` if none.

        ``cond_fn(fold(x..r), x)`` must turn from true to false as ``x``
        decreases.
        """
        if not 0 <= r <= self._size:
            raise IndexError(f"r out of range: r={r}, len={self._size}")
        if r == 0:
            return 0
        tree, op, folded = self._tree, self._op, self._folded
        done = self._identity()
        done_l = r
        cur = r - 1 + self._size_pow2
        cur_len = 1

        def cond() -> bool:
            return cond_fn(folded(op(tree[cur], done)), done_l - cur_len)

        while True:
            while cur != 1 and cur % 2 == 1:
                cur //= 2
                cur_len *= 2
            if not cond():
                while cur < self._size_pow2:
                    cur = 2 * cur + 1
                    cur_len //= 2
                    if cond():
                        done = op(tree[cur], done)
                        done_l -= cur_len
                        cur -= 1
                return cur - self._size_pow2 + 1
            if cur & -cur == cur:
                return 0
            done = op(tree[cur], done)
            done_l -= cur_len
            cur -= 1
            cur //= 2
            cur_len *= 2

    def find_index_to_end(self, l: int, cond_fn: Callable[[Any, int], bool]) -> int:
        """Largest ``r > l`` with ``cond_fn(fold(l..r), r)``, or ``l`` if none.

        ``cond_fn(fold(l..x), x)`` must turn from true to false as ``x``
        increases.
        """
        if not 0 <= l < self._size:
            raise IndexError(f"l out of range: l={l}, len={self._size}")
        tree, op, folded = self._tree, self._op, self._folded
        size = self._size
        done = self._identity()
        done_r = l
        cur = l + self._size_pow2
        cur_len = 1

        def cond() -> bool:
            return done_r + cur_len <= size and cond_fn(
                folded(op(done, tree[cur])), done_r + cur_len
            )

        while True:
            while cur % 2 == 0:
                cur //= 2
                cur_len *= 2
            if not cond():
                while cur < self._size_pow2:
                    cur = 2 * cur
                    cur_len //= 2
                    if cond():
                        done = op(done, tree[cur])
                        done_r += cur_len
                        cur += 1
                return cur - self._size_pow2
            done = op(done, tree[cur])
            done_r += cur_len
            cur += 1
            if cur & -cur == cur:
                return size
            cur //= 2
            cur_len *= 2

    def __repr__(self) -> str:
        leaves = self._tree[self._size_pow2 : self._size_pow2 + self._size]
        return f"SegmentTree({leaves!r})"


def segment_tree_new(
    values: Iterable[T], op: Callable[[T, T], T], identity: Callable[[], T]
) -> SegmentTree[T]:
    """Build a segment tree from values, an operator and an identity factory."""
    return SegmentTree(values, op, identity)