"""A doubly linked list of short strings usable as a stack."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

__all__ = ["MAX_DATA_LENGTH", "DoublyLinkedList", "main"]

MAX_DATA_LENGTH = 99
"""Longest string a node can hold."""


@dataclass(slots=True, eq=False)
class _Node:
    data: str
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """Strings linked both ways; new items are pushed at the head.

    Building a list from ``items`` pushes each one in turn, so iteration
    yields them most recently pushed first.
    """

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, data: str) -> None:
        """Put ``data`` at the head.

        Raises ValueError if it is longer than MAX_DATA_LENGTH.
        """
        if len(data) > MAX_DATA_LENGTH:
            raise ValueError(
                f"data of length {len(data)} exceeds {MAX_DATA_LENGTH} characters"
            )
        node = _Node(data, next=self._head)
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def pop(self) -> str:
        """Remove the head and return its data; IndexError if empty."""
        node = self._head
        if node is None:
            raise IndexError("pop from empty list")
        self._unlink(node)
        return node.data

    def remove(self, data: str) -> int:
        """Unlink every node holding ``data`` and return how many went."""
        removed = 0
        node = self._head
        while node is not None:
            following = node.next
            if node.data == data:
                self._unlink(node)
                removed += 1
            node = following
        return removed

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def __iter__(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[str]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def main(argv: Sequence[str] | None = None) -> int:
    """Push a few strings, pop one, then print the list both ways."""
    parser = argparse.ArgumentParser(description="Doubly linked list demo.")
    parser.add_argument(
        "items",
        nargs="*",
        default=["hello", "small", "human"],
        help="strings to push, in order",
    )
    args = parser.parse_args(argv)

    items = DoublyLinkedList(args.items)
    if items:
        print(f"popped: {items.pop()}")
    for value in items:
        print(value)
    print("attempting to print backward")
    for value in reversed(items):
        print(value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())