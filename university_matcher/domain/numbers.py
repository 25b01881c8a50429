"""Numeric helpers shared by the converter and the match engine."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up."""
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    """Constrain value to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))
