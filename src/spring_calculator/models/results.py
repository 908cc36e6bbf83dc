"""Derived result model for spring calculation."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Optional

# Spring index bounds (advisory only)
OPTIMAL_INDEX_RANGE = (6.0, 12.0)
PRACTICAL_INDEX_RANGE = (4.0, 20.0)


class SpringIndexRating(Enum):
    """Manufacturability of a spring index."""

    OPTIMAL = "optimal"  # 6 to 12
    ACCEPTABLE = "acceptable"  # 4 to 20
    OUT_OF_RANGE = "out_of_range"  # Hard to coil or prone to tangling


def classify_spring_index(spring_index: float) -> SpringIndexRating:
    """Classify a spring index against the usual manufacturing ranges.

    Examples:
        >>> classify_spring_index(8.0)
        <SpringIndexRating.OPTIMAL: 'optimal'>

        >>> classify_spring_index(4.0)
        <SpringIndexRating.ACCEPTABLE: 'acceptable'>
    """
    low, high = OPTIMAL_INDEX_RANGE
    if low <= spring_index <= high:
        return SpringIndexRating.OPTIMAL
    low, high = PRACTICAL_INDEX_RANGE
    if low <= spring_index <= high:
        return SpringIndexRating.ACCEPTABLE
    return SpringIndexRating.OUT_OF_RANGE


@dataclass(frozen=True)
class SpringResults:
    """Every quantity derived from a SpringInputs.

    Lengths are in mm, forces in N, stresses in MPa, weights in g unless
    noted, prices in the currency of the material cost.

    Attributes:
        mean_diameter: Mean coil diameter
        outer_diameter: Outer coil diameter
        inner_diameter: Inner coil diameter
        spring_index: Mean diameter over wire diameter
        wahl_factor: Shear stress correction factor
        wire_length: Developed wire length
        wire_volume: Wire volume in mm³
        spring_weight: Weight of one spring in g
        raw_material_cost: Wire cost of one spring
        spring_rate: Rate in N/mm (computed or overridden)
        deflection_at_load_height: Free length minus load height
        load_at_load_height: Force at load height
        shear_stress: Corrected shear stress at load height
        solid_length: Length with all coils touching
        pitch: Coil pitch
        stress_at_solid_length: Corrected shear stress when compressed solid
        stress_ratio: Solid stress over UTS, None without a UTS
        max_deflection: Load over rate, equal to deflection_at_load_height
        natural_frequency: Natural frequency in Hz
        resonant_frequency: Frequency to avoid in operation, in Hz
        energy_stored: Energy at max deflection in N·mm
        buckling_risk_ratio: Slenderness over its critical value
        buckling_risk: True when the ratio exceeds 1
        relaxation_percent: Estimated stress relaxation in percent
        price_per_unit: Selling price of one spring (computed or overridden)
        overall_unit_price: Price per spring with setup cost spread over the run
        total_wire_weight: Wire needed for the run in kg
    """

    mean_diameter: float
    outer_diameter: float
    inner_diameter: float
    spring_index: float
    wahl_factor: float
    wire_length: float
    wire_volume: float
    spring_weight: float
    raw_material_cost: float
    spring_rate: float
    deflection_at_load_height: float
    load_at_load_height: float
    shear_stress: float
    solid_length: float
    pitch: float
    stress_at_solid_length: float
    stress_ratio: Optional[float]
    max_deflection: float
    natural_frequency: float
    resonant_frequency: float
    energy_stored: float
    buckling_risk_ratio: float
    buckling_risk: bool
    relaxation_percent: float
    price_per_unit: float
    overall_unit_price: float
    total_wire_weight: float

    @property
    def spring_index_rating(self) -> SpringIndexRating:
        """Advisory rating of the spring index."""
        return classify_spring_index(self.spring_index)

    def as_dict(self) -> Dict[str, object]:
        """Plain field mapping, for binding to display collaborators."""
        return asdict(self)
