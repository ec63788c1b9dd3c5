"""Command-line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.chunk_sort import put_back, to_b
from pushswap.parsing import InputError, parse_arguments
from pushswap.radix import radix_sort
from pushswap.small_sort import small_stack
from pushswap.stacks import Stacks, ordered


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy by the size of ``a``: fixed moves, chunks or radix.

    A stack of exactly 152 values is left as it is.
    """
    size = len(stacks.a)
    if size < 6:
        small_stack(stacks)
    elif size <= 151:
        to_b(stacks)
        put_back(stacks)
    elif size > 152:
        radix_sort(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """The operations chosen for the given initial stack ``a``."""
    stacks = Stacks(values)
    if not ordered(stacks.a):
        sort_stacks(stacks)
    return stacks.operations


def _write_line(text: str) -> None:
    sys.stdout.write(text + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line, or ``Error`` for invalid input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        _write_line("Error")
        return 0
    stacks = Stacks(values, sink=_write_line)
    if not ordered(stacks.a):
        sort_stacks(stacks)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())