"""Running a solver program and collecting the operations it prints."""

from __future__ import annotations

import subprocess

from pushswap.textsplit import split_to_strings


class PushSwap:
    """A solver program found at ``path`` and the commands of its last run."""

    def __init__(self, path: str = "./push_swap") -> None:
        self.path = path
        self.commands: list[str] = []

    def run(self, numbers: str) -> None:
        """Run ``path numbers`` through the shell and keep its output lines.

        Raises RuntimeError when the shell cannot be started.
        """
        self.commands = []
        command = f"{self.path} {numbers}"
        try:
            completed = subprocess.run(
                command,
                shell=True,
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise RuntimeError("could not start the solver") from exc
        self.commands = split_to_strings(completed.stdout, "\n")