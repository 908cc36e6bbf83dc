"""Material configuration model and relaxation estimate for spring calculation."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MaterialCategory(Enum):
    """Broad wire material family, used for categorical estimates."""

    CARBON_STEEL = "carbon_steel"  # Music wire, hard drawn
    STAINLESS = "stainless"  # 302/304/316 stainless
    OTHER = "other"  # Alloy steels, bronzes, nickel alloys, custom


# Stress relaxation in percent, keyed on material family
RELAXATION_PERCENT = {
    MaterialCategory.CARBON_STEEL: 1.0,
    MaterialCategory.STAINLESS: 2.0,
    MaterialCategory.OTHER: 3.0,
}


def estimate_relaxation(category: MaterialCategory) -> float:
    """Estimate load loss from stress relaxation for a material family.

    This is a coarse categorical heuristic, not a physical derivation. It is
    meant for advisory display next to the computed results.

    Args:
        category: Material family of the spring wire

    Returns:
        Expected relaxation in percent
            - CARBON_STEEL → 1.0
            - STAINLESS → 2.0
            - OTHER → 3.0

    Raises:
        ValueError: If category is not a MaterialCategory
    """
    try:
        return RELAXATION_PERCENT[category]
    except KeyError:
        raise ValueError(f"Unknown material category: {category}") from None


@dataclass(frozen=True)
class MaterialConfig:
    """Spring wire material properties.

    A "Custom" material is just another instance of this record with
    user-supplied values.

    Attributes:
        name: Material identifier (e.g., "Steel ASTM A228")
        density: Density in g/cm³
        shear_modulus: Shear modulus G in MPa
        cost_per_kg: Wire cost per kilogram
        category: Material family, resolved once at lookup time
        elastic_modulus: Young's modulus E in MPa, if known
        ultimate_tensile_strength: Ultimate tensile strength in MPa, if known
        grade: Standard or trade designation
        notes: Free-form remarks carried into documents
    """

    name: str
    density: float
    shear_modulus: float
    cost_per_kg: float
    category: MaterialCategory = MaterialCategory.OTHER
    elastic_modulus: Optional[float] = None
    ultimate_tensile_strength: Optional[float] = None
    grade: str = ""
    notes: str = ""

    def __post_init__(self) -> None:
        """Validate physical properties."""
        if self.density <= 0:
            raise ValueError(f"density must be positive, got {self.density}")
        if self.shear_modulus <= 0:
            raise ValueError(f"shear_modulus must be positive, got {self.shear_modulus}")
        if self.cost_per_kg < 0:
            raise ValueError(f"cost_per_kg must be non-negative, got {self.cost_per_kg}")

    @property
    def relaxation_percent(self) -> float:
        """Estimated stress relaxation in percent."""
        return estimate_relaxation(self.category)
