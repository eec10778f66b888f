"""A minimal singly linked list and the interactive menu that drives it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Any, TextIO


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node | None = None


class SinglyLinkedList:
    """Singly linked list that keeps only a pointer to its first node."""

    def __init__(self) -> None:
        self._first: _Node | None = None

    def insert_front(self, value: Any) -> None:
        """Put *value* at the front."""
        node = _Node(value)
        node.next = self._first
        self._first = node

    def insert_end(self, value: Any) -> None:
        """Put *value* at the end."""
        node = _Node(value)
        if self._first is None:
            self._first = node
            return
        trav = self._first
        while trav.next is not None:
            trav = trav.next
        trav.next = node

    def insert_after(self, info: Any, value: Any) -> bool:
        """Insert *value* after the first node holding *info*; report success."""
        trav = self._first
        while trav is not None and trav.data != info:
            trav = trav.next
        if trav is None:
            return False
        node = _Node(value)
        node.next = trav.next
        trav.next = node
        return True

    def delete_front(self) -> Any:
        """Remove and return the first value."""
        if self._first is None:
            raise IndexError("List is empty")
        node = self._first
        self._first = node.next
        return node.data

    def delete_end(self) -> Any:
        """Remove and return the last value."""
        if self._first is None:
            raise IndexError("List is empty")
        if self._first.next is None:
            value = self._first.data
            self._first = None
            return value
        trav = self._first
        while trav.next.next is not None:
            trav = trav.next
        value = trav.next.data
        trav.next = None
        return value

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def display(self) -> str:
        """Return the list as the menu shows it."""
        if self._first is None:
            return "List is empty"
        return "".join(f"{value} " for value in self)


def _integers(lines: Iterable[str]) -> Iterator[int]:
    """Yield whitespace-separated integers, stopping at the first non-integer."""
    for line in lines:
        for word in line.split():
            try:
                yield int(word)
            except ValueError:
                return


def run_menu(lines: Iterable[str], out: TextIO) -> SinglyLinkedList:
    """Run the numbered menu over *lines*, writing prompts to *out*.

    Choices: 1 insert front, 2 insert end, 3 insert after, 4 delete front,
    5 delete end, 6 display, 0 quit. Input that ends or is not a number
    also quits. Returns the list as it stands at the end.
    """
    numbers = _integers(lines)
    items = SinglyLinkedList()

    def read() -> int | None:
        return next(numbers, None)

    while True:
        out.write("Enter your choice: ")
        choice = read()
        if choice is None or choice == 0:
            break
        if choice in (1, 2):
            out.write("Enter the value to insert:")
            value = read()
            if value is None:
                break
            if choice == 1:
                items.insert_front(value)
            else:
                items.insert_end(value)
        elif choice == 3:
            out.write("Enter the info and val:")
            info, value = read(), read()
            if info is None or value is None:
                break
            items.insert_after(info, value)
        elif choice in (4, 5):
            try:
                if choice == 4:
                    items.delete_front()
                else:
                    items.delete_end()
            except IndexError as exc:
                out.write(str(exc))
        elif choice == 6:
            out.write(items.display())
    return items


def main(argv: list[str] | None = None) -> int:
    """Run the list menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dsakit-list",
        description="Interactive singly linked list menu read from standard input.",
    )
    parser.parse_args(argv)
    run_menu(sys.stdin, sys.stdout)
    return 0