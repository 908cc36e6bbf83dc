"""Data series for the load-deflection and price-quantity charts."""

from typing import Iterable, List, Tuple

import numpy as np

from spring_calculator.pricing import price_sensitivity


def load_deflection_curve(
    rate: float, free_length: float, steps: int = 10
) -> List[Tuple[float, float]]:
    """
    Linear load-deflection points from zero to the full free length.

    Args:
        rate: Spring rate in N/mm
        free_length: Free length in mm, the largest deflection plotted
        steps: Number of equal intervals (returns steps + 1 points)

    Returns:
        List of (deflection in mm, load in N) pairs

    Examples:
        >>> load_deflection_curve(2.0, 10.0, steps=2)
        [(0.0, 0.0), (5.0, 10.0), (10.0, 20.0)]
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    deflections = np.linspace(0.0, free_length, steps + 1)
    loads = rate * deflections
    return [(float(d), float(f)) for d, f in zip(deflections, loads)]


def price_curve(
    price_per_unit: float, setup_cost: float, quantity_points: Iterable[int]
) -> List[Tuple[int, float]]:
    """Amortized unit price at each quantity, sorted by quantity."""
    return price_sensitivity(price_per_unit, setup_cost, sorted(quantity_points))
