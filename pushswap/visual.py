"""Helpers for drawing the stacks: random inputs and bar colours."""

from __future__ import annotations

import random

Color = tuple[int, int, int, int]


def generate_values(size: int, rng: random.Random | None = None) -> list[int]:
    """The integers 1..size in random order."""
    values = list(range(1, size + 1))
    (rng if rng is not None else random.Random()).shuffle(values)
    return values


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def bar_color(ratio: float) -> Color:
    """RGBA colour on a blue-cyan-green-yellow-red ramp for ``ratio`` in [0, 1).

    Ratios that fall outside the four ramp segments give opaque black.
    """
    normalized = int(ratio * 256 * 4)
    region, x = _trunc_divmod(normalized, 256)
    if region == 0:
        red, green, blue = 0, x, 255
    elif region == 1:
        red, green, blue = 0, 255, 255 - x
    elif region == 2:
        red, green, blue = x, 255, 0
    elif region == 3:
        red, green, blue = 255, 255 - x, 0
    else:
        red, green, blue = 0, 0, 0
    return (red & 0xFF, green & 0xFF, blue & 0xFF, 255)