"""Splitting text on a single delimiter character, line-reader style."""

from __future__ import annotations

import re

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def split_to_strings(text: str, delimiter: str) -> list[str]:
    """The pieces of ``text`` between delimiters.

    Empty pieces inside the text are kept; a delimiter at the very end
    does not start a new, empty piece, and empty text gives no pieces.
    """
    pieces = text.split(delimiter)
    if pieces and pieces[-1] == "":
        pieces.pop()
    return pieces


def _to_int(item: str) -> int:
    match = _LEADING_INT.match(item)
    if match is None:
        raise ValueError(f"not an integer: {item!r}")
    value = int(match.group(1))
    if value < _INT_MIN or value > _INT_MAX:
        raise ValueError(f"integer out of range: {item!r}")
    return value


def split_to_ints(text: str, delimiter: str) -> list[int]:
    """The pieces of ``text`` read as 32-bit integers.

    Each piece may start with whitespace and may carry trailing text after
    its digits. A piece without leading digits, or whose value does not
    fit in 32 bits, raises ValueError.
    """
    return [_to_int(item) for item in split_to_strings(text, delimiter)]