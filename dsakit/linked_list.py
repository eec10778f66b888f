"""A singly linked list with head and tail pointers and a tracked size."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedList:
    """Singly linked list supporting insertion and removal at any position."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add *value* after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add *value* before the first element."""
        node = _Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert *value* so that it ends up at position *index* (0..len)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"invalid index {index}")
        if index == 0:
            self.prepend(value)
        elif index == self._size:
            self.append(value)
        else:
            prev = self._node_at(index - 1)
            node = _Node(value)
            node.next = prev.next
            prev.next = node
            self._size += 1

    def __getitem__(self, index: int) -> Any:
        if not isinstance(index, int):
            raise TypeError("list indices must be integers")
        self._check_index(index)
        if index == self._size - 1:
            return self._tail.value
        return self._node_at(index).value

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("list is empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        if self._head is None:
            self._tail = None
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("list is empty")
        value = self._tail.value
        if self._size == 1:
            self._head = self._tail = None
        else:
            prev = self._node_at(self._size - 2)
            prev.next = None
            self._tail = prev
        self._size -= 1
        return value

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at *index*."""
        self._check_index(index)
        if index == 0:
            return self.pop_front()
        if index == self._size - 1:
            return self.pop_back()
        prev = self._node_at(index - 1)
        node = prev.next
        prev.next = node.next
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"invalid index {index}")

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node