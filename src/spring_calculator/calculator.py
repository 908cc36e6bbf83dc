"""Helical compression spring property calculation.

Every physical step is a small function so it can be checked on its own.
``calculate_spring`` chains them in dependency order:

1. Diameters and spring index from the raw diameter
2. Wire length, volume, weight and raw material cost
3. Spring rate (computed or overridden), load and shear stress
4. Solid length, pitch and stress at solid length
5. Frequency, stored energy, buckling and relaxation estimates
6. Unit price and production run figures

All lengths are in mm, forces in N and stresses in MPa.
"""

import logging
import math

from spring_calculator.config import DEFAULT_CRITICAL_SLENDERNESS, DEFAULT_RESONANCE_RATIO
from spring_calculator.models.inputs import DiameterType, SpringInputs
from spring_calculator.models.material import estimate_relaxation
from spring_calculator.models.results import SpringResults
from spring_calculator.numeric import divide, sqrt
from spring_calculator.pricing import (
    GRAMS_PER_KILOGRAM,
    amortized_unit_price,
    raw_material_cost,
    unit_price,
    wire_weight_for_run,
)

logger = logging.getLogger(__name__)

# mm³ · g/cm³ → g
MM3_PER_CM3 = 1000.0

# N/mm → N/m
MM_PER_M = 1000.0


def mean_diameter(wire_diameter: float, diameter: float, diameter_type: DiameterType) -> float:
    """
    Convert a measured coil diameter to the mean coil diameter.

    Examples:
        >>> mean_diameter(2.0, 10.0, DiameterType.OUTER)
        8.0

        >>> mean_diameter(2.0, 6.0, DiameterType.INNER)
        8.0
    """
    if diameter_type == DiameterType.OUTER:
        return diameter - wire_diameter
    elif diameter_type == DiameterType.INNER:
        return diameter + wire_diameter
    elif diameter_type == DiameterType.MEAN:
        return diameter
    else:
        raise ValueError(f"Unknown diameter type: {diameter_type}")


def wahl_factor(spring_index: float) -> float:
    """
    Wahl stress correction factor for round wire.

    Accounts for direct shear and the curvature of the wire:
    K = (4C - 1) / (4C - 4) + 0.615 / C

    Examples:
        >>> round(wahl_factor(4.0), 5)
        1.40375
    """
    return (4 * spring_index - 1) / (4 * spring_index - 4) + 0.615 / spring_index


def spring_rate(
    shear_modulus: float, wire_diameter: float, mean_diameter: float, active_coils: float
) -> float:
    """
    Spring rate in N/mm: k = G·d⁴ / (8·D³·n).

    Examples:
        >>> round(spring_rate(79300, 2.0, 8.0, 8), 4)
        38.7207
    """
    return shear_modulus * wire_diameter**4 / (8 * mean_diameter**3 * active_coils)


def shear_stress(load: float, mean_diameter: float, wire_diameter: float, wahl: float) -> float:
    """Corrected shear stress in MPa: τ = 8·F·D·K / (π·d³)."""
    return 8 * load * mean_diameter * wahl / (math.pi * wire_diameter**3)


def coil_pitch(free_length: float, wire_diameter: float, total_coils: float) -> float:
    """Coil pitch, infinite for a single coil."""
    return divide(free_length - wire_diameter, total_coils - 1)


def natural_frequency(rate: float, spring_weight: float) -> float:
    """
    Natural frequency in Hz of the spring mass on its own rate.

    Args:
        rate: Spring rate in N/mm
        spring_weight: Spring weight in grams

    Returns:
        f = (1 / 2π) · sqrt(k / m) with k in N/m and m in kg
    """
    rate_n_per_m = rate * MM_PER_M
    mass_kg = spring_weight / GRAMS_PER_KILOGRAM
    return sqrt(divide(rate_n_per_m, mass_kg)) / (2 * math.pi)


def buckling_risk_ratio(
    free_length: float,
    mean_diameter: float,
    critical_slenderness: float = DEFAULT_CRITICAL_SLENDERNESS,
) -> float:
    """
    Slenderness ratio relative to its critical value.

    Values above 1 indicate the spring is likely to buckle sideways under load.

    Examples:
        >>> buckling_risk_ratio(52.0, 8.0)
        2.5
    """
    return (free_length / mean_diameter) / critical_slenderness


def calculate_spring(
    inputs: SpringInputs,
    critical_slenderness: float = DEFAULT_CRITICAL_SLENDERNESS,
    resonance_ratio: float = DEFAULT_RESONANCE_RATIO,
) -> SpringResults:
    """Derive all spring properties and prices from validated inputs.

    The inputs must pass ``validation.validate`` first. Singular inputs that
    validation does not catch (a single coil, a zero margin ratio) yield
    inf/nan fields rather than an exception.

    Args:
        inputs: Spring parameters
        critical_slenderness: Critical free length / mean diameter ratio
        resonance_ratio: Resonant frequency as a fraction of natural frequency

    Returns:
        Complete SpringResults. Identical inputs always give identical results.
    """
    wire_d = inputs.wire_diameter

    mean_d = mean_diameter(wire_d, inputs.diameter, inputs.diameter_type)
    outer_d = mean_d + wire_d
    inner_d = mean_d - wire_d
    index = mean_d / wire_d
    wahl = wahl_factor(index)

    solid_length = inputs.total_coils * wire_d
    pitch = coil_pitch(inputs.free_length, wire_d, inputs.total_coils)

    wire_length = math.pi * mean_d * inputs.total_coils
    wire_volume = math.pi * (wire_d / 2) ** 2 * wire_length
    weight = wire_volume * inputs.density / MM3_PER_CM3
    material_cost = raw_material_cost(weight, inputs.material_cost_per_kg)

    # Override replaces the computed rate, it is never blended
    if inputs.rate_override is not None:
        rate = inputs.rate_override
    else:
        rate = spring_rate(inputs.shear_modulus, wire_d, mean_d, inputs.active_coils)

    deflection = inputs.free_length - inputs.load_height
    load = rate * deflection
    stress = shear_stress(load, mean_d, wire_d, wahl)

    solid_deflection = inputs.free_length - solid_length
    solid_stress = shear_stress(rate * solid_deflection, mean_d, wire_d, wahl)
    if inputs.ultimate_tensile_strength is None:
        stress_ratio = None
    else:
        stress_ratio = divide(solid_stress, inputs.ultimate_tensile_strength)

    price = unit_price(material_cost, inputs.margin_ratio, inputs.price_override)

    max_deflection = divide(load, rate)
    frequency = natural_frequency(rate, weight)
    buckling_ratio = buckling_risk_ratio(inputs.free_length, mean_d, critical_slenderness)

    results = SpringResults(
        mean_diameter=mean_d,
        outer_diameter=outer_d,
        inner_diameter=inner_d,
        spring_index=index,
        wahl_factor=wahl,
        wire_length=wire_length,
        wire_volume=wire_volume,
        spring_weight=weight,
        raw_material_cost=material_cost,
        spring_rate=rate,
        deflection_at_load_height=deflection,
        load_at_load_height=load,
        shear_stress=stress,
        solid_length=solid_length,
        pitch=pitch,
        stress_at_solid_length=solid_stress,
        stress_ratio=stress_ratio,
        max_deflection=max_deflection,
        natural_frequency=frequency,
        resonant_frequency=resonance_ratio * frequency,
        energy_stored=0.5 * rate * max_deflection**2,
        buckling_risk_ratio=buckling_ratio,
        buckling_risk=buckling_ratio > 1,
        relaxation_percent=estimate_relaxation(inputs.material_category),
        price_per_unit=price,
        overall_unit_price=amortized_unit_price(price, inputs.setup_cost, inputs.quantity),
        total_wire_weight=wire_weight_for_run(weight, inputs.quantity),
    )

    logger.debug(
        "Spring D=%.3f mm, k=%.3f N/mm, F=%.2f N, price=%.2f",
        mean_d,
        rate,
        load,
        price,
    )
    return results
