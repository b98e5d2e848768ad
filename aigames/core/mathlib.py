"""Small numeric helpers shared by the games."""

import math


def normalize(value: float, start: float, end: float) -> float:
    """Wrap ``value`` into the range ``[start, end)``.

    The range is treated as circular: going below ``start`` re-enters from
    ``end`` and going above ``end`` re-enters from ``start``.
    """
    width = end - start
    offset = value - start
    return (offset - math.floor(offset / width) * width) + start