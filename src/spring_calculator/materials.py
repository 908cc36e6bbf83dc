"""Spring wire material presets."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from spring_calculator.models.material import MaterialCategory, MaterialConfig


class MaterialType(Enum):
    """Common spring wire materials."""

    STEEL_ASTM_A228 = "Steel ASTM A228"  # Music wire
    STAINLESS_STEEL_302 = "Stainless Steel 302"
    CHROME_SILICON = "Chrome Silicon"
    PHOSPHOR_BRONZE = "Phosphor Bronze"
    INCONEL_X750 = "Inconel X750"
    CUSTOM = "Custom"  # Starting point for user-supplied values


MATERIALS: Mapping[MaterialType, MaterialConfig] = MappingProxyType(
    {
        MaterialType.STEEL_ASTM_A228: MaterialConfig(
            name="Steel ASTM A228",
            density=7.85,
            shear_modulus=79300,
            cost_per_kg=350,
            category=MaterialCategory.CARBON_STEEL,
            elastic_modulus=207000,
            ultimate_tensile_strength=2000,
            grade="ASTM A228",
            notes="High carbon music wire, best fatigue life below 120 °C",
        ),
        MaterialType.STAINLESS_STEEL_302: MaterialConfig(
            name="Stainless Steel 302",
            density=7.92,
            shear_modulus=69000,
            cost_per_kg=550,
            category=MaterialCategory.STAINLESS,
            elastic_modulus=193000,
            ultimate_tensile_strength=1700,
            grade="AISI 302 / ASTM A313",
            notes="Corrosion resistant, up to 260 °C",
        ),
        MaterialType.CHROME_SILICON: MaterialConfig(
            name="Chrome Silicon",
            density=7.85,
            shear_modulus=77200,
            cost_per_kg=400,
            category=MaterialCategory.OTHER,
            elastic_modulus=203000,
            ultimate_tensile_strength=1900,
            grade="ASTM A401",
            notes="Shock loads and elevated temperature, up to 245 °C",
        ),
        MaterialType.PHOSPHOR_BRONZE: MaterialConfig(
            name="Phosphor Bronze",
            density=8.8,
            shear_modulus=41400,
            cost_per_kg=600,
            category=MaterialCategory.OTHER,
            elastic_modulus=103000,
            ultimate_tensile_strength=900,
            grade="ASTM B159",
            notes="Non-magnetic, good electrical conductivity",
        ),
        MaterialType.INCONEL_X750: MaterialConfig(
            name="Inconel X750",
            density=8.28,
            shear_modulus=79300,
            cost_per_kg=950,
            category=MaterialCategory.OTHER,
            elastic_modulus=214000,
            ultimate_tensile_strength=1300,
            grade="AMS 5698",
            notes="High temperature service, up to 650 °C",
        ),
        MaterialType.CUSTOM: MaterialConfig(
            name="Custom",
            density=7.85,
            shear_modulus=79300,
            cost_per_kg=300,
        ),
    }
)


def create_material_config(material_type: MaterialType) -> MaterialConfig:
    """
    Look up the MaterialConfig for a predefined material type.

    Args:
        material_type: Material type to use

    Returns:
        MaterialConfig with the tabulated properties of the material

    Examples:
        >>> steel = create_material_config(MaterialType.STEEL_ASTM_A228)
        >>> print(f"{steel.name}: G = {steel.shear_modulus} MPa")
        Steel ASTM A228: G = 79300 MPa
    """
    try:
        return MATERIALS[material_type]
    except KeyError:
        raise ValueError(f"Unknown material type: {material_type}") from None


def create_custom_material(
    name: str,
    density: float,
    shear_modulus: float,
    cost_per_kg: float,
    category: MaterialCategory = MaterialCategory.OTHER,
    elastic_modulus: Optional[float] = None,
    ultimate_tensile_strength: Optional[float] = None,
    notes: str = "",
) -> MaterialConfig:
    """
    Create a user-defined material record.

    An empty name falls back to "Custom Material", the label used on
    specification sheets.

    Examples:
        >>> brass = create_custom_material("", density=8.5, shear_modulus=35000, cost_per_kg=700)
        >>> brass.name
        'Custom Material'
    """
    return MaterialConfig(
        name=name or "Custom Material",
        density=density,
        shear_modulus=shear_modulus,
        cost_per_kg=cost_per_kg,
        category=category,
        elastic_modulus=elastic_modulus,
        ultimate_tensile_strength=ultimate_tensile_strength,
        grade="Custom",
        notes=notes,
    )


def find_material(name: str) -> MaterialConfig:
    """Look up a predefined material by its display name."""
    try:
        return create_material_config(MaterialType(name))
    except ValueError:
        raise ValueError(f"Unknown material: {name!r}") from None
