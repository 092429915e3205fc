"""A singly linked list of short strings that grows at its head."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

__all__ = ["MAX_DATA_LENGTH", "SinglyLinkedList", "main"]

MAX_DATA_LENGTH = 99
"""Longest string a node keeps; longer data is cut to this length."""


@dataclass(slots=True)
class _Node:
    data: str
    next: _Node | None = None


class SinglyLinkedList:
    """Strings linked head to tail; new items are pushed at the head.

    Building a list from ``items`` pushes each one in turn, so iteration
    yields them most recently pushed first.
    """

    def __init__(self, items: Iterable[str | None] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, data: str | None) -> None:
        """Put ``data`` at the head; None becomes an empty string."""
        text = "" if data is None else data[:MAX_DATA_LENGTH]
        self._head = _Node(text, self._head)
        self._size += 1

    def remove(self, data: str) -> int:
        """Unlink nodes holding ``data`` and return how many went.

        A match at the head removes only the head; otherwise every
        matching node further down is removed.
        """
        head = self._head
        if head is None:
            return 0
        if head.data == data:
            self._head = head.next
            self._size -= 1
            return 1
        removed = 0
        prev = head
        while prev.next is not None:
            if prev.next.data == data:
                prev.next = prev.next.next
                removed += 1
            else:
                prev = prev.next
        self._size -= removed
        return removed

    def reverse(self) -> None:
        """Reverse the order of the nodes."""
        reversed_head: _Node | None = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = reversed_head
            reversed_head = node
            node = following
        self._head = reversed_head

    def sort(self) -> None:
        """Order the strings from smallest to largest."""
        for node, value in zip(self._nodes(), sorted(self)):
            node.data = value

    def clear(self) -> None:
        """Drop every node."""
        self._head = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[str]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def _print_list(items: SinglyLinkedList) -> None:
    for value in items:
        print(f"data = {value}")


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small list, print it, delete one entry and print it again."""
    parser = argparse.ArgumentParser(description="Singly linked list demo.")
    parser.add_argument(
        "items",
        nargs="*",
        default=["hello", "worlddd", "megateacup"],
        help="strings to push, in order",
    )
    parser.add_argument("--delete", default="hello", help="string to delete")
    args = parser.parse_args(argv)

    items = SinglyLinkedList(args.items)
    _print_list(items)
    print(f"deleting node: {args.delete}")
    items.remove(args.delete)
    _print_list(items)
    items.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())