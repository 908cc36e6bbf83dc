"""Floating point helpers that follow IEEE semantics instead of raising."""

import math


def divide(numerator: float, denominator: float) -> float:
    """Divide, returning ±inf for x/0 and nan for 0/0.

    Examples:
        >>> divide(1.0, 4.0)
        0.25

        >>> divide(1.0, 0.0)
        inf
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def sqrt(value: float) -> float:
    """Square root, nan for negative values."""
    if value < 0:
        return math.nan
    return math.sqrt(value)
