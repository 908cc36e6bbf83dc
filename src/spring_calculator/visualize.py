"""Visualization utilities for spring calculation results.

This module provides functions to plot the load-deflection characteristic and
the effect of production quantity on unit price.
"""

from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from spring_calculator.models import SpringInputs, SpringResults


def _unzip(points: List[Tuple[float, float]]) -> Tuple[np.ndarray, np.ndarray]:
    """Split (x, y) pairs into two arrays."""
    data = np.array(points, dtype=float)
    return data[:, 0], data[:, 1]


def _draw_load_deflection(
    ax: plt.Axes,
    load_curve: List[Tuple[float, float]],
    inputs: SpringInputs,
    results: SpringResults,
) -> None:
    deflections, loads = _unzip(load_curve)
    ax.plot(deflections, loads, linewidth=2, label=f"k = {results.spring_rate:.2f} N/mm")
    ax.plot(
        results.deflection_at_load_height,
        results.load_at_load_height,
        "o",
        color="red",
        label=f"Load height {inputs.load_height:g} mm ({results.load_at_load_height:.1f} N)",
    )
    solid_deflection = inputs.free_length - results.solid_length
    if 0 < solid_deflection < deflections[-1]:
        ax.axvline(
            solid_deflection,
            color="orange",
            linestyle="--",
            alpha=0.7,
            label=f"Solid ({results.solid_length:.1f} mm)",
        )
    ax.set_xlabel("Deflection (mm)")
    ax.set_ylabel("Load (N)")
    ax.set_title("Load vs Deflection")
    ax.legend()
    ax.grid(True, alpha=0.3)


def _draw_price_curve(
    ax: plt.Axes, price_points: List[Tuple[int, float]], price_per_unit: float
) -> None:
    quantities, prices = _unzip(price_points)
    ax.plot(quantities, prices, marker="o", linewidth=2, label="Price per Spring")
    ax.axhline(
        price_per_unit,
        color="red",
        linestyle="--",
        linewidth=2,
        label=f"Without setup cost ({price_per_unit:.2f})",
    )
    ax.set_xscale("log")
    ax.set_xlabel("Quantity")
    ax.set_ylabel("Price per Spring")
    ax.set_title("Price vs Quantity")
    ax.legend()
    ax.grid(True, alpha=0.3)


def _finish(fig: plt.Figure, show: bool, save_path: Optional[str]) -> plt.Figure:
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def plot_load_deflection(
    load_curve: List[Tuple[float, float]],
    inputs: SpringInputs,
    results: SpringResults,
    title: str = "Load-Deflection Characteristic",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot the load-deflection line with the working point marked (single panel).

    Args:
        load_curve: (deflection, load) pairs from the engine
        inputs: Spring inputs the curve was computed from
        results: Spring results the curve was computed from
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    if not load_curve:
        raise ValueError("Cannot plot empty load curve")

    fig, ax = plt.subplots(figsize=(10, 5))
    _draw_load_deflection(ax, load_curve, inputs, results)
    fig.suptitle(title, fontsize=14, fontweight="bold")
    return _finish(fig, show, save_path)


def plot_price_curve(
    price_points: List[Tuple[int, float]],
    price_per_unit: float,
    title: str = "Quantity Analysis",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot amortized unit price against production quantity (single panel).

    Args:
        price_points: (quantity, unit price) pairs from the engine
        price_per_unit: Price per spring without setup cost, drawn as asymptote
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    if not price_points:
        raise ValueError("Cannot plot empty price curve")

    fig, ax = plt.subplots(figsize=(10, 5))
    _draw_price_curve(ax, price_points, price_per_unit)
    fig.suptitle(title, fontsize=14, fontweight="bold")
    return _finish(fig, show, save_path)


def plot_summary(
    load_curve: List[Tuple[float, float]],
    price_points: List[Tuple[int, float]],
    inputs: SpringInputs,
    results: SpringResults,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot load-deflection and price-quantity side by side.

    Args:
        load_curve: (deflection, load) pairs from the engine
        price_points: (quantity, unit price) pairs from the engine
        inputs: Spring inputs
        results: Spring results
        title: Optional custom title (default: auto-generated)
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Example:
        >>> outcome = SpringEngine().recompute(inputs)
        >>> plot_summary(outcome.load_curve, outcome.price_curve, inputs, outcome.results)
    """
    if not load_curve or not price_points:
        raise ValueError("Cannot plot empty curves")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 5))

    if title is None:
        title = (
            f"Spring Analysis\n"
            f"d = {inputs.wire_diameter:g} mm, D = {results.mean_diameter:.2f} mm, "
            f"n = {inputs.active_coils:g} | Material: {inputs.material_name}"
        )
    fig.suptitle(title, fontsize=14, fontweight="bold")

    _draw_load_deflection(ax1, load_curve, inputs, results)
    _draw_price_curve(ax2, price_points, results.price_per_unit)

    return _finish(fig, show, save_path)
