"""Replayable model of the two stacks, stepping forwards and backwards."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Command(Enum):
    """The operations a solver may print."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


_INVERSE = {
    Command.SA: Command.SA,
    Command.SB: Command.SB,
    Command.SS: Command.SS,
    Command.PA: Command.PB,
    Command.PB: Command.PA,
    Command.RA: Command.RRA,
    Command.RB: Command.RRB,
    Command.RR: Command.RRR,
    Command.RRA: Command.RA,
    Command.RRB: Command.RB,
    Command.RRR: Command.RR,
}


def _parse(name: str) -> Command | None:
    try:
        return Command(name)
    except ValueError:
        return None


def _normalize(numbers: Iterable[int]) -> list[int]:
    """Replace each number by its rank among the numbers."""
    items = list(numbers)
    ranks: dict[int, int] = {}
    for index, value in enumerate(sorted(items)):
        ranks.setdefault(value, index)
    return [ranks[value] for value in items]


class Queues:
    """Stacks ``queue_a`` and ``queue_b`` (top at index 0) with a command tape.

    ``commands`` holds what is still to run; ``executed_commands`` holds
    what has run, the most recent first. Unknown commands move between
    the two lists without changing the stacks.
    """

    def __init__(self) -> None:
        self.commands: deque[str] = deque()
        self.executed_commands: deque[str] = deque()
        self.queue_a: deque[int] = deque()
        self.queue_b: deque[int] = deque()

    def start(self, values: Iterable[int]) -> None:
        """Load ``a`` with the ranks of ``values`` and empty ``b``."""
        self.queue_a = deque(_normalize(values))
        self.queue_b = deque()

    def step(self) -> None:
        """Run the next pending command, if any."""
        if not self.commands:
            return
        name = self.commands.popleft()
        command = _parse(name)
        if command is not None:
            self._apply(command)
        self.executed_commands.appendleft(name)

    def step_back(self) -> None:
        """Undo the most recently run command, if any."""
        if not self.executed_commands:
            return
        name = self.executed_commands.popleft()
        command = _parse(name)
        if command is not None:
            self._apply(_INVERSE[command])
        self.commands.appendleft(name)

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> None:
        if source:
            target.appendleft(source.popleft())

    @staticmethod
    def _rotate(stack: deque[int], steps: int) -> None:
        if len(stack) >= 2:
            stack.rotate(steps)

    def _apply(self, command: Command) -> None:
        a, b = self.queue_a, self.queue_b
        if command in (Command.SA, Command.SS):
            self._swap(a)
        if command in (Command.SB, Command.SS):
            self._swap(b)
        if command is Command.PA:
            self._push(b, a)
        if command is Command.PB:
            self._push(a, b)
        if command in (Command.RA, Command.RR):
            self._rotate(a, -1)
        if command in (Command.RB, Command.RR):
            self._rotate(b, -1)
        if command in (Command.RRA, Command.RRR):
            self._rotate(a, 1)
        if command in (Command.RRB, Command.RRR):
            self._rotate(b, 1)