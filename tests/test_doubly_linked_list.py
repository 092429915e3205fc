import pytest

from algonotes.doubly_linked_list import MAX_DATA_LENGTH, DoublyLinkedList, main

WORDS = ["hello", "small", "human"]


@pytest.fixture
def words():
    return DoublyLinkedList(WORDS)


def test_push_places_items_at_head(words):
    assert list(words) == list(reversed(WORDS))
    assert len(words) == len(WORDS)


def test_reversed_walks_from_tail(words):
    assert list(reversed(words)) == WORDS


def test_pop_returns_head(words):
    assert words.pop() == "human"
    assert list(words) == ["small", "hello"]
    assert list(reversed(words)) == ["hello", "small"]


def test_pop_until_empty(words):
    popped = [words.pop() for _ in range(len(WORDS))]
    assert popped == list(reversed(WORDS))
    assert len(words) == 0
    assert list(reversed(words)) == []


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().pop()


def test_push_too_long_raises():
    items = DoublyLinkedList()
    with pytest.raises(ValueError):
        items.push("x" * (MAX_DATA_LENGTH + 1))
    assert len(items) == 0


def test_push_at_limit_is_kept():
    items = DoublyLinkedList()
    items.push("x" * MAX_DATA_LENGTH)
    assert list(items) == ["x" * MAX_DATA_LENGTH]


def test_remove_middle(words):
    assert words.remove("small") == 1
    assert list(words) == ["human", "hello"]
    assert list(reversed(words)) == ["hello", "human"]


def test_remove_tail_updates_backward_walk(words):
    assert words.remove("hello") == 1
    assert list(reversed(words)) == ["small", "human"]


def test_remove_every_match():
    items = DoublyLinkedList(["a", "b", "a", "c", "a"])
    assert items.remove("a") == 3
    assert list(items) == ["c", "b"]
    assert list(reversed(items)) == ["b", "c"]
    assert len(items) == 2


def test_remove_missing(words):
    assert words.remove("absent") == 0
    assert list(words) == list(reversed(WORDS))


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "popped: human",
        "small",
        "hello",
        "attempting to print backward",
        "hello",
        "small",
    ]