"""A value paired with the size of the range it summarises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class WithSize(Generic[T]):
    value: T
    size: int = 0

    @classmethod
    def zero(cls, value: T) -> "WithSize[T]":
        """A value covering an empty range."""
        return cls(value, 0)

    def merge(self, other: "WithSize[T]", op: Callable[[T, T], T]) -> "WithSize[T]":
        """Combine values with ``op`` and add up the sizes."""
        return WithSize(op(self.value, other.value), self.size + other.size)