"""Reading the stack's values from command-line arguments."""

from __future__ import annotations

import re
from collections.abc import Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _wrap32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def _leading_number(text: str) -> int:
    match = _NUMBER.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def atoi(text: str) -> int:
    """Leading integer of ``text``, wrapped to a 32-bit signed int."""
    return _wrap32(_leading_number(text))


def atoi_checked(text: str) -> int:
    """Leading integer of ``text``, or -1 when it lies outside the 32-bit range."""
    value = _leading_number(text)
    if value > _INT_MAX or value < _INT_MIN:
        return -1
    return value


def split_words(text: str, sep: str) -> list[str]:
    """The non-empty pieces of ``text`` between occurrences of ``sep``."""
    return [word for word in text.split(sep) if word]


def _check_digits(args: Sequence[str]) -> None:
    for arg in args:
        body = arg[1:] if arg[:1] in ("+", "-") else arg
        if any(char not in _DIGITS for char in body):
            raise InputError()


def _check_range(args: Sequence[str]) -> None:
    for arg in args:
        if atoi(arg) == -1:
            break
        if atoi_checked(arg) == -1:
            raise InputError()


def _check_duplicates(args: Sequence[str]) -> None:
    seen: set[int] = set()
    for arg in args:
        value = atoi(arg)
        if value in seen:
            raise InputError()
        seen.add(value)


def check_input(args: Sequence[str]) -> None:
    """Reject non-numeric, out-of-range or repeated arguments with InputError."""
    _check_digits(args)
    _check_range(args)
    _check_duplicates(args)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program's arguments into the initial contents of stack ``a``.

    A single argument is split on spaces and taken as is; several
    arguments are validated first.
    """
    if not args:
        return []
    if len(args) == 1:
        words = split_words(args[0], " ")
        if not words:
            raise InputError()
        return [atoi(word) for word in words]
    check_input(args)
    return [atoi(arg) for arg in args]