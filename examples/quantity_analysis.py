"""Visualize how production quantity drives the price of a spring.

This shows:
- Setup cost spread over increasing batch sizes
- Quotation rows for common order quantities
- Price sensitivity around the planned run
"""

import matplotlib.pyplot as plt

from spring_calculator import SpringEngine, SpringInputs
from spring_calculator.config import DEFAULT_QUANTITY_POINTS
from spring_calculator.pricing import price_breaks, price_sensitivity
from spring_calculator.visualize import plot_price_curve


def main():
    """Print a quotation table and plot the quantity analysis."""
    inputs = SpringInputs(setup_cost=8000, quantity=2000)
    outcome = SpringEngine().recompute(inputs)
    results = outcome.results

    print("=" * 60)
    print("QUANTITY ANALYSIS")
    print("=" * 60)
    print(f"Setup cost: {inputs.setup_cost:g}")
    print(f"Price per spring (no setup): {results.price_per_unit:.2f}\n")

    print(f"{'Quantity':>10} {'Unit price':>12} {'Total':>14}")
    for row in price_breaks(results.price_per_unit, inputs.setup_cost, DEFAULT_QUANTITY_POINTS):
        print(f"{row.quantity:>10} {row.unit_price:>12.2f} {row.total_price:>14.2f}")

    print("\nAround the planned run:")
    nearby = [inputs.quantity // 4, inputs.quantity // 2, inputs.quantity, inputs.quantity * 2]
    for quantity, price in price_sensitivity(results.price_per_unit, inputs.setup_cost, nearby):
        marker = " <" if quantity == inputs.quantity else ""
        print(f"  {quantity:>8} -> {price:.2f}{marker}")

    fig = plot_price_curve(outcome.price_curve, results.price_per_unit, show=False)
    fig.savefig("quantity_analysis.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\nPlot saved: quantity_analysis.png")


if __name__ == "__main__":
    main()
