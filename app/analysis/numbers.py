"""Rounding and clamping shared by the scorers and analytics."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (12.5 → 13, -2.5 → -2).

    Python's ``round`` uses banker's rounding; stored scores were produced
    with half-up rounding, so every score path goes through here.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return min(high, max(low, value))
