"""Doubly linked list with node handles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class ListNode(Generic[T]):
    """One link of a LinkedList."""

    data: T
    next: Optional[ListNode[T]] = field(default=None, repr=False)
    prev: Optional[ListNode[T]] = field(default=None, repr=False)


class LinkedList(Generic[T]):
    """A doubly linked list exposing its start and end nodes."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.start: ListNode[T] | None = None
        self.end: ListNode[T] | None = None
        self._size = 0
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[ListNode[T]]:
        node = self.start
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data

    def __getitem__(self, index: int) -> T:
        node = self.at(index)
        if node is None:
            raise IndexError("LinkedList index out of range")
        return node.data

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add(self, item: T) -> ListNode[T]:
        """Append an item and return its node."""
        node = ListNode(item)
        if self.start is None:
            self.start = self.end = node
        else:
            node.prev = self.end
            self.end.next = node
            self.end = node
        self._size += 1
        return node

    def remove(self, node: ListNode[T]) -> None:
        """Unlink a node that belongs to this list."""
        if node is None:
            raise ValueError("cannot remove a missing node")
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.start = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.end = node.prev
        node.next = node.prev = None
        self._size -= 1

    def clear(self) -> None:
        """Remove every node."""
        self.start = self.end = None
        self._size = 0

    def extend(self, other: Iterable[T]) -> LinkedList[T]:
        """Append every item of ``other``."""
        for item in list(other):
            self.add(item)
        return self

    __iadd__ = extend

    def at(self, index: int) -> ListNode[T] | None:
        """The node at ``index``, or None when out of range."""
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        return None

    def bubble_sort(self) -> int:
        """Sort the data in place; returns the number of comparisons."""
        comparisons = 0
        swapped = True
        while swapped:
            swapped = False
            node = self.start
            while node is not None and node.next is not None:
                comparisons += 1
                if node.data > node.next.data:
                    node.data, node.next.data = node.next.data, node.data
                    swapped = True
                node = node.next
        return comparisons

    def find(self, item: T) -> int:
        """Index of the first equal item, or -1."""
        for index, data in enumerate(self):
            if data == item:
                return index
        return -1

    def insert_after(self, position: int, items: Iterable[T]) -> None:
        """Insert copies of ``items`` after the node at ``position``.

        When no node is at ``position`` the items go to the front.
        """
        anchor = self.at(position)
        for value in list(items):
            node = ListNode(value)
            node.next = anchor.next if anchor is not None else self.start
            if node.next is not None:
                node.next.prev = node
            else:
                self.end = node
            node.prev = anchor
            if anchor is not None:
                anchor.next = node
            else:
                self.start = node
            anchor = node
            self._size += 1