"""Fixed move sequences for stacks of two to five values."""

from __future__ import annotations

from pushswap.stacks import Stacks, ordered


def sort_2(stacks: Stacks) -> None:
    """Sort two values on ``a``."""
    a = stacks.a
    if a[0] > a[1]:
        stacks.sa()


def sort_3(stacks: Stacks) -> None:
    """Sort three values on ``a``."""
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second > third:
        stacks.ra()
        stacks.sa()
    elif first < second < third:
        return
    elif first > second and second < third and first < third:
        stacks.sa()
    elif first < third and first < second and second > third:
        stacks.rra()
        stacks.sa()
    elif first < second and first > third and second > third:
        stacks.rra()
    elif first > second and first > third and second < third:
        stacks.ra()


def sort_4(stacks: Stacks) -> None:
    """Sort four values on ``a``, using ``b`` for one of them."""
    first, second, third, fourth = (stacks.a[i] for i in range(4))
    if fourth > third > second > first:
        return
    if second < first and second < third and second < fourth:
        stacks.ra()
    elif third < first and third < second and third < fourth:
        stacks.ra()
        stacks.ra()
    elif fourth < first and fourth < second and fourth < third:
        stacks.rra()
    stacks.pb()
    sort_3(stacks)
    stacks.pa()


def _bring_smallest_up(stacks: Stacks, third: int, fourth: int, fifth: int) -> None:
    a = stacks.a
    if fifth > fourth > third > a[1] > a[0]:
        return
    if a[1] < a[0] and a[1] < third and a[1] < fourth and a[1] < fifth:
        stacks.ra()
    if third < a[0] and third < a[1] and third < fourth and third < fifth:
        stacks.ra()
        stacks.ra()
    if fourth < a[0] and fourth < a[1] and fourth < third and fourth < fifth:
        stacks.rra()
        stacks.rra()
    elif fifth < a[0] and fifth < a[1] and fifth < third and fifth < fourth:
        stacks.rra()


def sort_5(stacks: Stacks) -> None:
    """Sort exactly five values on ``a``; other sizes are left alone."""
    if len(stacks.a) != 5 or ordered(stacks.a):
        return
    _bring_smallest_up(stacks, stacks.a[2], stacks.a[3], stacks.a[4])
    stacks.pb()
    sort_4(stacks)
    stacks.pa()


def small_stack(stacks: Stacks) -> None:
    """Sort ``a`` when it holds at most five values."""
    size = len(stacks.a)
    if size == 2:
        sort_2(stacks)
    elif size == 3:
        sort_3(stacks)
    elif size == 4:
        sort_4(stacks)
    elif size == 5:
        sort_5(stacks)