"""Searching sorted and unsorted integer sequences."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from typing import Any

__all__ = [
    "binary_search",
    "binary_search_recursive",
    "jump_search",
    "sentinel_search",
    "main",
]


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of ``key`` in the sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == key:
            return mid
        if value < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(
    items: Sequence[Any], key: Any, low: int = 0, high: int | None = None
) -> int | None:
    """Recursively search ``items[low:high + 1]`` (sorted) for ``key``."""
    if high is None:
        high = len(items) - 1
    if high < low:
        return None
    mid = low + (high - low) // 2
    value = items[mid]
    if value == key:
        return mid
    if value < key:
        return binary_search_recursive(items, key, mid + 1, high)
    return binary_search_recursive(items, key, low, mid - 1)


def jump_search(items: Sequence[Any], key: Any) -> int | None:
    """Search the sorted ``items`` in blocks of about sqrt(n), then linearly."""
    size = len(items)
    if size == 0:
        return None
    stride = math.sqrt(size)
    step = int(stride)
    prev = 0
    while items[min(step, size) - 1] < key:
        prev = step
        step = int(step + stride)
        if prev >= size:
            return None
    while items[prev] < key:
        prev += 1
        if prev == min(step, size):
            return None
    return prev if items[prev] == key else None


def sentinel_search(items: Sequence[Any], key: Any) -> int | None:
    """Linear search using the key as a sentinel in the last slot.

    The input is left untouched; the index of the first match is returned,
    or None if ``key`` does not occur.
    """
    if not items:
        return None
    probe = list(items)
    last = probe[-1]
    probe[-1] = key
    index = probe.index(key)
    if index < len(probe) - 1 or last == key:
        return index
    return None


_DEMOS = {
    "binary": ([1, 3, 5, 7, 9, 11], 7),
    "recursive": ([1, 3, 5, 7, 9, 11], 7),
    "jump": ([1, 2, 3, 4, 5, 6, 7], 6),
    "sentinel": ([2, 4, 6, 8, 10], 6),
}


def _report(algorithm: str, items: list[int], key: int) -> str:
    if algorithm == "binary":
        result = binary_search(items, key)
        if result is None:
            return "Element does not exist in array."
        return f"Element exists at index {result}."
    if algorithm == "recursive":
        result = binary_search_recursive(items, key)
        if result is None:
            return "Element does not exist in array."
        return f"Element exists in array index={result}"
    if algorithm == "jump":
        result = jump_search(items, key)
        if result is None:
            return "Number does not exist in array"
        return f"Number is at {result} index"
    result = sentinel_search(items, key)
    if result is None:
        return "key not found."
    return f"key found at index:{result}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run one or all of the searches and print what they found."""
    parser = argparse.ArgumentParser(description="Search an integer array.")
    parser.add_argument(
        "algorithm",
        nargs="?",
        default="all",
        choices=[*_DEMOS, "all"],
        help="search to run (default: all)",
    )
    parser.add_argument("--key", type=int, help="value to look for")
    parser.add_argument("--items", type=int, nargs="+", help="array to search")
    args = parser.parse_args(argv)

    algorithms = list(_DEMOS) if args.algorithm == "all" else [args.algorithm]
    for algorithm in algorithms:
        demo_items, demo_key = _DEMOS[algorithm]
        items = args.items if args.items is not None else demo_items
        key = args.key if args.key is not None else demo_key
        print(_report(algorithm, items, key))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())