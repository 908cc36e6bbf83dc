"""Input parameter model for helical compression spring calculation."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from spring_calculator.models.material import MaterialCategory, MaterialConfig


class DiameterType(Enum):
    """How the raw ``diameter`` input is measured."""

    OUTER = "outer"
    INNER = "inner"
    MEAN = "mean"


@dataclass(frozen=True)
class SpringInputs:
    """Geometric, material and commercial parameters of a compression spring.

    Geometry is deliberately not checked here: the validator reports every
    problem at once so the form can show them all.

    Note:
        Defaults reproduce a 2 mm music wire spring, 10 mm outer diameter,
        10 total / 8 active coils, 50 mm free length compressed to 40 mm.

    Attributes:
        wire_diameter: Wire diameter in mm
        diameter: Raw coil diameter in mm, interpreted per diameter_type
        diameter_type: Whether diameter is the outer, inner or mean diameter
        total_coils: Total number of coils including inactive end coils
        active_coils: Number of active (deflecting) coils
        free_length: Uncompressed length in mm
        load_height: Compressed working length in mm
        density: Wire density in g/cm³
        shear_modulus: Shear modulus G in MPa
        elastic_modulus: Young's modulus E in MPa, carried into documents
        ultimate_tensile_strength: UTS in MPa, enables the stress ratio
        material_cost_per_kg: Wire cost per kilogram
        margin_ratio: Raw material cost is divided by this to get the price
        price_override: Replaces the computed price per spring when set
        rate_override: Replaces the computed spring rate (N/mm) when set
        setup_cost: One-time production setup cost
        quantity: Production run size
        material_category: Material family used for the relaxation estimate
    """

    wire_diameter: float = 2.0
    diameter: float = 10.0
    diameter_type: DiameterType = DiameterType.OUTER
    total_coils: float = 10.0
    active_coils: float = 8.0
    free_length: float = 50.0
    load_height: float = 40.0
    density: float = 7.85
    shear_modulus: float = 79300.0
    elastic_modulus: Optional[float] = None
    ultimate_tensile_strength: Optional[float] = None
    material_cost_per_kg: float = 350.0
    margin_ratio: float = 0.4
    price_override: Optional[float] = None
    rate_override: Optional[float] = None
    setup_cost: float = 5000.0
    quantity: int = 1000
    material_category: MaterialCategory = MaterialCategory.CARBON_STEEL

    # Pass-through fields, no effect on the calculation
    material_name: str = "Steel ASTM A228"
    finish: str = ""
    ends: str = ""
    coil_direction: str = ""
    notes: str = ""
    wire_diameter_tolerance: float = 0.02
    outer_diameter_tolerance: float = 0.5
    free_length_tolerance: float = 1.0

    def with_material(self, material: MaterialConfig) -> "SpringInputs":
        """Return a copy with all material properties taken from ``material``."""
        return replace(
            self,
            material_name=material.name,
            density=material.density,
            shear_modulus=material.shear_modulus,
            elastic_modulus=material.elastic_modulus,
            ultimate_tensile_strength=material.ultimate_tensile_strength,
            material_cost_per_kg=material.cost_per_kg,
            material_category=material.category,
        )
