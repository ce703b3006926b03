"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list that always holds at least one value."""

    def __init__(self, first: Any) -> None:
        self._head = _Node(first)
        self._tail = self._head
        self._size = 1

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the current head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        node = _Node(value)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_after(self, value: Any, position: int) -> None:
        """Insert ``value`` after the node at index ``position``."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} out of range")
        node = self._head
        for _ in range(position):
            node = node.next
        node.next = _Node(value, node.next)
        if node is self._tail:
            self._tail = node.next
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node: Optional[_Node] = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"