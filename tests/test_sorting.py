import random

import pytest

from algonotes.sorting import bubble_sort, insertion_sort, main, selection_sort

CASES = [
    [],
    [1],
    [2, 1],
    [64, 34, 25, 12, 22, 11, 90],
    [12, 11, 13, 5, 6],
    [64, 25, 12, 22, 11],
    [3, 3, 1, 1, 2, 2],
    [-5, 0, 5, -10, 10],
    list(range(10)),
    list(range(10, 0, -1)),
    ["pear", "apple", "fig"],
]


@pytest.mark.parametrize("items", CASES)
def test_sorts_match_builtin(items):
    expected = sorted(items)

    data = list(items)
    assert bubble_sort(data) is None
    assert data == expected

    data = list(items)
    assert insertion_sort(data) is None
    assert data == expected

    data = list(items)
    assert selection_sort(data) is None
    assert data == expected


def test_sorts_random_lists():
    rng = random.Random(1234)
    for _ in range(50):
        items = [rng.randint(-100, 100) for _ in range(rng.randint(0, 30))]
        expected = sorted(items)

        data = list(items)
        bubble_sort(data)
        assert data == expected

        data = list(items)
        insertion_sort(data)
        assert data == expected

        data = list(items)
        selection_sort(data)
        assert data == expected


def test_sort_is_idempotent():
    original = [5, 2, 9, 1, 5, 6]

    data = list(original)
    bubble_sort(data)
    once = list(data)
    bubble_sort(data)
    assert data == once == [1, 2, 5, 5, 6, 9]

    data = list(original)
    insertion_sort(data)
    once = list(data)
    insertion_sort(data)
    assert data == once == [1, 2, 5, 5, 6, 9]

    data = list(original)
    selection_sort(data)
    once = list(data)
    selection_sort(data)
    assert data == once == [1, 2, 5, 5, 6, 9]


def test_source_example_selection():
    data = [64, 25, 12, 22, 11]
    selection_sort(data)
    assert data == [11, 12, 22, 25, 64]


def test_main_prints_sorted_demos(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == [str(v) for v in sorted([64, 34, 25, 12, 22, 11, 90])]
    assert lines[1].split("\t")[:-1] == [str(v) for v in sorted([12, 11, 13, 5, 6])]
    assert lines[2].split("\t")[:-1] == [str(v) for v in sorted([64, 25, 12, 22, 11])]


def test_main_with_custom_items(capsys):
    assert main(["bubble", "--items", "3", "1", "2"]) == 0
    assert capsys.readouterr().out.split() == ["1", "2", "3"]


def test_main_rejects_unknown_algorithm():
    with pytest.raises(SystemExit):
        main(["quick"])