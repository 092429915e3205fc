# algonotes

Compact, readable implementations of a handful of classic algorithms and
data structures. Standard library only; Python 3.10 or later.

## Modules

### `algonotes.search`

All searches return the index of the key, or `None` when it is absent.

- `binary_search(items, key)` – iterative binary search over a sorted sequence.
- `binary_search_recursive(items, key, low=0, high=None)` – recursive binary
  search over `items[low:high + 1]`.
- `jump_search(items, key)` – jumps through a sorted sequence in blocks of
  about √n, then scans linearly.
- `sentinel_search(items, key)` – linear search using the key as a sentinel
  in the last slot; works on a copy, so the input is not changed.

### `algonotes.sorting`

Each sort works in place and returns `None`.

- `bubble_sort(items)` – stops early once a pass makes no swap.
- `insertion_sort(items)`
- `selection_sort(items)`

### `algonotes.singly_linked_list`

`SinglyLinkedList(items=())` holds strings and pushes new ones at the head,
so iteration yields the most recently pushed first.

- `push(data)` – strings longer than `MAX_DATA_LENGTH` (99) are cut to that
  length; `None` is stored as `""`.
- `remove(data)` – returns how many nodes were removed. A match at the head
  removes only the head; otherwise every matching node is removed.
- `reverse()`, `sort()` (smallest to largest), `clear()`, `len()` and
  iteration.

### `algonotes.doubly_linked_list`

`DoublyLinkedList(items=())` holds strings, pushes at the head and can be
used as a stack.

- `push(data)` – raises `ValueError` for strings longer than
  `MAX_DATA_LENGTH` (99).
- `pop()` – removes and returns the head; raises `IndexError` when empty.
- `remove(data)` – removes every matching node, returns how many.
- `len()`, iteration from head to tail, and `reversed()` from tail to head.

## Usage

```python
from algonotes.search import binary_search, jump_search
from algonotes.sorting import insertion_sort
from algonotes.singly_linked_list import SinglyLinkedList
from algonotes.doubly_linked_list import DoublyLinkedList

binary_search([1, 3, 5, 7, 9, 11], 7)    # 3
jump_search([1, 2, 3, 4, 5, 6, 7], 8)    # None

numbers = [12, 11, 13, 5, 6]
insertion_sort(numbers)                  # numbers is now [5, 6, 11, 12, 13]

words = SinglyLinkedList(["hello", "worlddd", "megateacup"])
words.remove("hello")
list(words)                              # ['megateacup', 'worlddd']

stack = DoublyLinkedList(["hello", "small", "human"])
stack.pop()                              # 'human'
list(reversed(stack))                    # ['hello', 'small']
```

## Command-line demos

Each module has a short demonstration:

```
algonotes-search [binary|recursive|jump|sentinel|all] [--key N] [--items N ...]
algonotes-sort [bubble|insertion|selection|all] [--items N ...]
algonotes-singly-linked-list [ITEM ...] [--delete TEXT]
algonotes-doubly-linked-list [ITEM ...]
```

Without arguments each runs on a small built-in example. The search demo
prints where the key was found; the sort demo prints the sorted array; the
singly linked list demo prints the list, deletes one entry and prints it
again; the doubly linked list demo pops the head and prints the rest forward
and backward.

## Running the tests

```
pip install ".[test]"
pytest
```