"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Optional

Sink = Callable[[str], None]


class Stacks:
    """Stacks ``a`` and ``b``, top of each stack at index 0.

    Every operation that takes effect is appended to ``operations`` and
    passed to ``sink`` when one is given.
    """

    def __init__(self, values: Iterable[int] = (), sink: Optional[Sink] = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[str] = []
        self._sink = sink

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        if self._sink is not None:
            self._sink(name)

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack.rotate(1)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the two top elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens when ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens when ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._emit("rrr")


def ordered(values: Iterable[int]) -> bool:
    """True when every value is strictly smaller than the one after it."""
    items = list(values)
    return all(x < y for x, y in zip(items, items[1:]))


def reversed_order(values: Iterable[int]) -> bool:
    """True when every value is strictly greater than the one after it."""
    items = list(values)
    return all(x > y for x, y in zip(items, items[1:]))


def find_big(values: Iterable[int]) -> int:
    """The largest value; raises ValueError when there is none."""
    return max(values)


def find_small(values: Iterable[int]) -> int:
    """The smallest value; raises ValueError when there is none."""
    return min(values)