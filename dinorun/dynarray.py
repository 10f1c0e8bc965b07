"""Growable array with block-wise capacity and simple in-place sorts."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

BLOCK_SIZE = 16


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


_SHRINK = _as_float32(1.3)


class DynArray(Generic[T]):
    """An array that grows its capacity in blocks of BLOCK_SIZE."""

    def __init__(self, capacity: int = BLOCK_SIZE) -> None:
        self._items: list[T] = []
        self._capacity = capacity

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError("DynArray index out of range")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynArray({self._items!r})"

    def push_back(self, element: T) -> None:
        """Append an element, growing by one block when full."""
        if len(self._items) >= self._capacity:
            self._capacity += BLOCK_SIZE
        self._items.append(element)

    def pop(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty DynArray")
        return self._items.pop()

    def clear(self) -> None:
        """Drop all elements; capacity is kept."""
        self._items.clear()

    def insert(self, element: T, position: int) -> None:
        """Insert one element before ``position`` (which may equal the length)."""
        if not 0 <= position <= len(self._items):
            raise IndexError("insert position out of range")
        if position == len(self._items):
            self.push_back(element)
            return
        if len(self._items) + 1 > self._capacity:
            self._capacity += BLOCK_SIZE
        self._items.insert(position, element)

    def insert_all(self, items: Iterable[T], position: int) -> None:
        """Insert every element of ``items`` before ``position``."""
        if not 0 <= position <= len(self._items):
            raise IndexError("insert position out of range")
        new_items = list(items)
        needed = len(self._items) + len(new_items)
        if needed > self._capacity:
            self._capacity = needed + 1
        self._items[position:position] = new_items

    def extend(self, other: Iterable[T]) -> DynArray[T]:
        """Append every element of ``other``; grows to the exact size needed."""
        new_items = list(other)
        needed = len(self._items) + len(new_items)
        if needed > self._capacity:
            self._capacity = needed
        self._items.extend(new_items)
        return self

    __iadd__ = extend

    def at(self, index: int) -> T | None:
        """The element at ``index``, or None when out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def capacity(self) -> int:
        """Number of elements that fit before the array grows."""
        return self._capacity

    def bubble_sort(self) -> int:
        """Bubble sort; returns the number of comparisons made.

        Each pass compares adjacent pairs up to the second-to-last element,
        so the final element is never moved.
        """
        items = self._items
        span = max(len(items) - 2, 0)
        comparisons = 0
        swapped = True
        while swapped:
            swapped = False
            for i in range(span):
                comparisons += 1
                if items[i] > items[i + 1]:
                    items[i], items[i + 1] = items[i + 1], items[i]
                    swapped = True
        return comparisons

    def bubble_sort_optimized(self) -> int:
        """Bubble sort that shrinks each pass to the last swap position."""
        items = self._items
        comparisons = 0
        last = max(len(items) - 2, 0)
        while last > 0:
            count, last = last, 0
            for i in range(count):
                comparisons += 1
                if items[i] > items[i + 1]:
                    items[i], items[i + 1] = items[i + 1], items[i]
                    last = i
        return comparisons

    def comb_sort(self) -> int:
        """Comb sort with a shrink factor of 1.3; returns comparisons made."""
        items = self._items
        n = len(items)
        if n == 0:
            return 0
        comparisons = 0
        gap = n - 1
        swapped = True
        while swapped or gap > 1:
            gap = int(max(1.0, _as_float32(gap / _SHRINK)))
            swapped = False
            for i in range(max(n - 1 - gap, 0)):
                comparisons += 1
                if items[i] > items[i + gap]:
                    items[i], items[i + gap] = items[i + gap], items[i]
                    swapped = True
        return comparisons

    def flip(self) -> None:
        """Reverse the elements in place."""
        self._items.reverse()