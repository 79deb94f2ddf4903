"""Decimal-place rounding helpers for comparing computed coordinates."""

import math


def round_to(value: float, places: int) -> float:
    """Round ``value`` to ``places`` decimal places, halves away from zero.

    Unlike the built-in :func:`round`, ties do not go to the even neighbour:
    ``round_to(2.5, 0)`` is ``3.0`` and ``round_to(-2.5, 0)`` is ``-3.0``.
    The tie is decided on the exact scaled value, so ``0.49999999999999994``
    still rounds down.
    """
    divisor = math.pow(10.0, places)
    scaled = abs(value * divisor)
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value) / divisor


def compare(value: float, other: float, decimal_places: int) -> bool:
    """Return ``True`` if both values agree once rounded to ``decimal_places``."""
    return round_to(value, decimal_places) == round_to(other, decimal_places)
