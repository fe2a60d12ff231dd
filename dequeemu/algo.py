"""Merge sort driven by a strict "less than" predicate."""

from __future__ import annotations

import string
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

_END = object()
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def merge(first: Iterable[T], second: Iterable[T], less: Callable[[T, T], bool]) -> list[T]:
    """Merge two ordered runs.

    An element of ``first`` is taken only when it is strictly less than the
    head of ``second``; on ties the element of ``second`` goes first.
    """
    result: list[T] = []
    left = iter(first)
    right = iter(second)
    x = next(left, _END)
    y = next(right, _END)
    while x is not _END and y is not _END:
        if less(x, y):
            result.append(x)
            x = next(left, _END)
        else:
            result.append(y)
            y = next(right, _END)
    if x is not _END:
        result.append(x)
        result.extend(left)
    if y is not _END:
        result.append(y)
        result.extend(right)
    return result


def merge_sort(items: Iterable[T], less: Callable[[T, T], bool]) -> list[T]:
    """Return a new list holding ``items`` ordered by ``less``."""
    seq: Sequence[T] = items if isinstance(items, Sequence) else list(items)
    if len(seq) <= 1:
        return list(seq)
    mid = len(seq) // 2
    return merge(merge_sort(seq[:mid], less), merge_sort(seq[mid:], less), less)


def case_insensitive_less(a: str, b: str) -> bool:
    """Lexicographic comparison that folds ASCII letters to lower case."""
    return a.translate(_ASCII_LOWER) < b.translate(_ASCII_LOWER)