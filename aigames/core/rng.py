"""Uniform random numbers over inclusive ranges."""

import random

_generator = random.SystemRandom()


def range_float(start: float, end: float) -> float:
    """Return a uniformly distributed float between ``start`` and ``end``."""
    if start == end:
        return start
    return _generator.uniform(start, end)


def range_int(start: int, end: int) -> int:
    """Return a uniformly distributed integer in ``[start, end]``, both inclusive."""
    if start == end:
        return start
    return _generator.randint(start, end)