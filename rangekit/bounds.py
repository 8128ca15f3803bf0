"""Values extended with a sentinel that stands for "maximum" or "minimum"."""

from __future__ import annotations

import functools
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@functools.total_ordering
class _Extended(Generic[T]):
    """A plain value, or a sentinel that sorts after every plain value."""

    __slots__ = ("_value", "_sentinel")
    _sentinel_name = "sentinel"

    def __init__(self, value: T) -> None:
        self._value = value
        self._sentinel = False

    @classmethod
    def _make_sentinel(cls):
        obj = cls.__new__(cls)
        obj._value = None
        obj._sentinel = True
        return obj

    @property
    def value(self) -> Optional[T]:
        """The wrapped value, or None for the sentinel."""
        return None if self._sentinel else self._value

    def _unwrap(self) -> T:
        if self._sentinel:
            raise ValueError(
                f"called unwrap() on {type(self).__name__}.{self._sentinel_name}"
            )
        return self._value

    def _key(self) -> tuple[bool, Any]:
        return (self._sentinel, None if self._sentinel else self._value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def __repr__(self) -> str:
        if self._sentinel:
            return f"{type(self).__name__}.{self._sentinel_name}"
        return f"{type(self).__name__}({self._value!r})"


class WithMax(_Extended[T]):
    """A value, or a maximum that compares greater than every value."""

    __slots__ = ()
    _sentinel_name = "max"

    def into_value(self) -> Optional[T]:
        """Return the wrapped value, or None for the maximum."""
        return None if self._sentinel else self._value

    def unwrap(self) -> T:
        """Return the wrapped value; raise ValueError for the maximum."""
        return self._unwrap()

    def is_max(self) -> bool:
        return self._sentinel

    @classmethod
    def max_exists(cls) -> "WithMax[Any]":
        """The maximum element."""
        return cls._make_sentinel()


class WithMin(_Extended[T]):
    """A value, or a distinguished minimum marker.

    Ordering follows declaration order of the two cases: plain values come
    first, the marker after them.
    """

    __slots__ = ()
    _sentinel_name = "min"

    def into_value(self) -> Optional[T]:
        """Return the wrapped value, or None for the minimum marker."""
        return None if self._sentinel else self._value

    def unwrap(self) -> T:
        """Return the wrapped value; raise ValueError for the minimum marker."""
        return self._unwrap()

    def is_min(self) -> bool:
        return self._sentinel

    @classmethod
    def min_exists(cls) -> "WithMin[Any]":
        """The minimum marker."""
        return cls._make_sentinel()