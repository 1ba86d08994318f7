"""Rounding helpers shared by the analytics and the simulator."""

import math


def round_half_up(value: float, decimals: int = 0):
    """Round with ties going up (``18.5`` -> ``19``, ``-2.5`` -> ``-2``).

    Returns an ``int`` when ``decimals`` is 0. Raises OverflowError on
    infinities, like the built-in ``round``.
    """
    if decimals == 0:
        return math.floor(value + 0.5)
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor
