"""Simple quadratic in-place sorts."""

from __future__ import annotations

import argparse
from collections.abc import MutableSequence, Sequence
from typing import Any

__all__ = ["bubble_sort", "insertion_sort", "selection_sort", "main"]


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place, stopping early once a pass makes no swap."""
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by inserting each element into the sorted prefix."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly selecting the smallest remainder."""
    size = len(items)
    for i in range(size):
        smallest = min(range(i, size), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]


_DEMOS = {
    "bubble": (bubble_sort, [64, 34, 25, 12, 22, 11, 90], " "),
    "insertion": (insertion_sort, [12, 11, 13, 5, 6], "\t"),
    "selection": (selection_sort, [64, 25, 12, 22, 11], "\t"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Sort an integer array with one or all of the sorts and print it."""
    parser = argparse.ArgumentParser(description="Sort an integer array.")
    parser.add_argument(
        "algorithm",
        nargs="?",
        default="all",
        choices=[*_DEMOS, "all"],
        help="sort to run (default: all)",
    )
    parser.add_argument("--items", type=int, nargs="+", help="array to sort")
    args = parser.parse_args(argv)

    algorithms = list(_DEMOS) if args.algorithm == "all" else [args.algorithm]
    for algorithm in algorithms:
        sort, demo_items, separator = _DEMOS[algorithm]
        items = list(args.items if args.items is not None else demo_items)
        sort(items)
        print("".join(f"{value}{separator}" for value in items))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())