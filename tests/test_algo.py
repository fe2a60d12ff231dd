import operator

import pytest

from dequeemu.algo import case_insensitive_less, merge, merge_sort


def test_merge_two_sorted_runs():
    assert merge([1, 4, 7], [2, 3, 8], operator.lt) == sorted([1, 4, 7, 2, 3, 8])


def test_merge_takes_second_on_tie():
    first = [(1, "first")]
    second = [(1, "second")]
    result = merge(first, second, lambda a, b: a[0] < b[0])
    assert result == [(1, "second"), (1, "first")]


def test_merge_with_empty_side():
    assert merge([], [5, 6], operator.lt) == [5, 6]
    assert merge([5, 6], [], operator.lt) == [5, 6]


@pytest.mark.parametrize(
    "items",
    [[], ["z"], ["b", "a"], ["pear", "apple", "fig", "apple", "kiwi"], [5, 3, 9, 1, 1, 0]],
)
def test_merge_sort_matches_sorted(items):
    assert merge_sort(items, operator.lt) == sorted(items)


def test_merge_sort_does_not_modify_input():
    items = ["c", "a", "b"]
    merge_sort(items, operator.lt)
    assert items == ["c", "a", "b"]


def test_merge_sort_accepts_iterables():
    assert merge_sort(iter([3, 1, 2]), operator.lt) == [1, 2, 3]


def test_merge_sort_descending_predicate():
    assert merge_sort([1, 3, 2], operator.gt) == [3, 2, 1]


def test_case_insensitive_less():
    assert case_insensitive_less("a", "B")
    assert not case_insensitive_less("B", "a")
    assert not case_insensitive_less("A", "a")
    assert not case_insensitive_less("a", "A")
    assert case_insensitive_less("ab", "ABC")


def test_merge_sort_ignoring_case_is_ordered():
    items = ["banana", "Apple", "cherry", "apple", "Banana"]
    result = merge_sort(items, case_insensitive_less)
    assert sorted(result) == sorted(items)
    assert all(not case_insensitive_less(b, a) for a, b in zip(result, result[1:]))