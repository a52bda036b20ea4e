"""Percentage scoring helpers shared by role matching and job comparison."""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 always rounding up.

    Python's round() uses banker's rounding (round(12.5) == 12); scores use
    the conventional rule instead (12.5 -> 13).
    """
    return math.floor(value + 0.5)


def percentage(count: int, total: int) -> int:
    """
    Integer percentage of count over total, rounded half up.

    Args:
        count: Numerator
        total: Denominator

    Returns:
        Percentage in [0, 100] for 0 <= count <= total; 0 when total is 0
    """
    if total <= 0:
        return 0
    return round_half_up(count / total * 100)
