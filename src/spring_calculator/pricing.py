"""Spring pricing: unit price, setup cost amortization and quantity breaks."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from spring_calculator.numeric import divide

GRAMS_PER_KILOGRAM = 1000.0


def raw_material_cost(spring_weight: float, cost_per_kg: float) -> float:
    """Wire cost of one spring.

    Args:
        spring_weight: Spring weight in grams
        cost_per_kg: Wire cost per kilogram

    Returns:
        Cost of the wire in one spring
    """
    return (spring_weight / GRAMS_PER_KILOGRAM) * cost_per_kg


def unit_price(
    raw_cost: float, margin_ratio: float, price_override: Optional[float] = None
) -> float:
    """
    Selling price of one spring.

    The raw material cost is divided by the margin ratio, so a smaller ratio
    gives a higher price. A price override replaces the result outright.

    Args:
        raw_cost: Raw material cost of one spring
        margin_ratio: Fraction of the price that the raw cost represents
        price_override: Manual price, used as is when given

    Returns:
        Price per spring. Infinite if margin_ratio is 0 and no override is set.

    Examples:
        >>> unit_price(4.0, 0.4)
        10.0

        >>> unit_price(4.0, 0.4, price_override=12.5)
        12.5
    """
    if price_override is not None:
        return price_override
    return divide(raw_cost, margin_ratio)


def amortized_unit_price(price_per_unit: float, setup_cost: float, quantity: int) -> float:
    """
    Price per spring with the setup cost spread across the production run.

    Examples:
        >>> amortized_unit_price(2.0, 5000.0, 1000)
        7.0
    """
    return divide(setup_cost + price_per_unit * quantity, quantity)


def wire_weight_for_run(spring_weight: float, quantity: int) -> float:
    """Total wire weight in kg for ``quantity`` springs of ``spring_weight`` grams."""
    return spring_weight * quantity / GRAMS_PER_KILOGRAM


def price_sensitivity(
    price_per_unit: float, setup_cost: float, quantity_points: Iterable[int]
) -> List[Tuple[int, float]]:
    """
    Amortized unit price at each production quantity.

    For a positive setup cost the price falls monotonically with quantity and
    approaches ``price_per_unit`` for very large runs.

    Args:
        price_per_unit: Selling price of one spring
        setup_cost: One-time setup cost
        quantity_points: Quantities to evaluate

    Returns:
        List of (quantity, amortized unit price) pairs in input order
    """
    return [
        (quantity, amortized_unit_price(price_per_unit, setup_cost, quantity))
        for quantity in quantity_points
    ]


@dataclass(frozen=True)
class PriceBreak:
    """One row of a quotation price table.

    Attributes:
        quantity: Number of springs ordered
        unit_price: Price per spring including its share of the setup cost
        total_price: Setup cost plus the price of all springs
    """

    quantity: int
    unit_price: float
    total_price: float


def price_breaks(
    price_per_unit: float, setup_cost: float, quantities: Iterable[int]
) -> List[PriceBreak]:
    """Quotation rows for each requested quantity."""
    breaks = []
    for quantity in quantities:
        total = setup_cost + price_per_unit * quantity
        breaks.append(
            PriceBreak(
                quantity=quantity,
                unit_price=divide(total, quantity),
                total_price=total,
            )
        )
    return breaks
