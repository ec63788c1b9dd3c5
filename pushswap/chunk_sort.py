"""Medium-sized stacks: split ``a`` into ``b`` by pivots, then merge back."""

from __future__ import annotations

from pushswap.arrays import mid_val, quart_val, selection_sort
from pushswap.small_sort import sort_5
from pushswap.stacks import Stacks, ordered

_QUARTER_PASSES = 6


def _push_below_quarters(stacks: Stacks) -> None:
    """Six passes, each moving the values under the lower quarter onto ``b``."""
    for _ in range(_QUARTER_PASSES):
        pivot = quart_val(selection_sort(stacks.a))
        for _ in range(len(stacks.a)):
            if stacks.a[0] < pivot:
                stacks.pb()
            else:
                stacks.ra()


def _still_splitting(stacks: Stacks) -> bool:
    return len(stacks.a) != 5 and not ordered(stacks.a)


def to_b(stacks: Stacks) -> None:
    """Move values from ``a`` to ``b`` until ``a`` is sorted.

    Quarter pivots are used first, then median pivots until ``a`` holds
    five values or is in order; five remaining values are sorted in place.
    """
    if not stacks.a:
        return
    _push_below_quarters(stacks)
    while _still_splitting(stacks):
        pivot = mid_val(selection_sort(stacks.a))
        for _ in range(len(stacks.a)):
            if not _still_splitting(stacks):
                continue
            if stacks.a[0] < pivot:
                stacks.pb()
            else:
                stacks.ra()
    sort_5(stacks)


def _fits_between_second_of_b(stacks: Stacks) -> bool:
    a, b = stacks.a, stacks.b
    return len(b) >= 2 and b[0] < b[1] < a[0] and b[1] > a[-1]


def _check_second(stacks: Stacks) -> None:
    if _fits_between_second_of_b(stacks):
        stacks.sb()
        stacks.pa()


def _check_second_back(stacks: Stacks) -> None:
    if _fits_between_second_of_b(stacks):
        stacks.sb()
        stacks.pa()
        stacks.ra()


def _push_if_above_bottom(stacks: Stacks) -> bool:
    if stacks.b[0] > stacks.a[-1]:
        stacks.pa()
        stacks.ra()
        return True
    return False


def _push_while_fitting(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    if not b:
        return
    top = b[0]
    while a[-1] < top < a[0]:
        stacks.pa()
        if b:
            top = b[0]


def _push_rotate_while_fitting(stacks: Stacks) -> int:
    a, b = stacks.a, stacks.b
    pushed = 0
    if b:
        top = b[0]
        while a[-1] < top < a[0]:
            stacks.pa()
            if b:
                top = b[0]
            pushed += 1
            stacks.ra()
    if len(b) >= 2 and b[0] < b[1]:
        stacks.sb()
        stacks.pa()
        stacks.ra()
    return pushed


def _insert_from_top(stacks: Stacks, count: int) -> None:
    _check_second(stacks)
    turns = 0
    while turns <= count:
        stacks.ra()
        _check_second(stacks)
        turns += 1
    stacks.pa()
    while turns > 0:
        _push_while_fitting(stacks)
        stacks.rra()
        _check_second(stacks)
        turns -= 1


def _insert_from_bottom(stacks: Stacks, count: int) -> None:
    turns = 0
    while turns < count - 1:
        stacks.rra()
        turns += 1
    stacks.pa()
    while turns >= 0:
        turns -= _push_rotate_while_fitting(stacks)
        _check_second_back(stacks)
        stacks.ra()
        turns -= 1


def _back_a(stacks: Stacks, count: int) -> None:
    size = len(stacks.a)
    if count < size // 2:
        _insert_from_top(stacks, count)
    else:
        _insert_from_bottom(stacks, size - count)


def put_back(stacks: Stacks) -> None:
    """Move every value of ``b`` back onto ``a`` near its sorted place.

    Raises ValueError when ``a`` is empty while ``b`` is not, or when a
    value of ``b`` has no place between two neighbours of ``a``.
    """
    a, b = stacks.a, stacks.b
    if b and not a:
        raise ValueError("stack a is empty")
    count = 0
    cursor = 0
    restarted = False
    while b:
        if _push_if_above_bottom(stacks):
            restarted = False
        if not b:
            break
        if b[0] < a[0]:
            stacks.pa()
            cursor = 0
            restarted = False
        elif cursor + 1 < len(a):
            if a[cursor] < b[0] < a[cursor + 1]:
                _back_a(stacks, count)
                count = 0
                cursor = 0
                restarted = False
            else:
                cursor += 1
                count += 1
        else:
            if restarted:
                raise ValueError(f"no place on stack a for {b[0]}")
            cursor = 0
            count = 0
            restarted = True