"""Sorted copies of a stack and the pivots picked from them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(values)


def mid_val(values: Sequence[int]) -> int:
    """The value at the middle index of a sorted sequence."""
    return values[len(values) // 2]


def quart_val(values: Sequence[int]) -> int:
    """The value about a quarter of the way into a sorted sequence."""
    size = len(values)
    if size >= 4:
        index = size // 4
    elif size == 3:
        index = 1
    elif size == 2:
        index = 1
    else:
        index = 0
    return values[index]