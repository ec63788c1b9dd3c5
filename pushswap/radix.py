"""Binary radix sort for large stacks of values 0..n-1."""

from __future__ import annotations

from pushswap.stacks import Stacks


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` bit by bit, pushing values whose bit is clear onto ``b``.

    The values are used as they are, so the result is sorted only when
    they are the integers from 0 to the stack size minus one.
    """
    size = len(stacks.a)
    max_bits = (size - 1).bit_length() if size else 0
    for bit in range(max_bits):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()