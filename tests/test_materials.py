"""Tests for material presets."""

import pytest

from spring_calculator.materials import (
    MATERIALS,
    MaterialType,
    create_custom_material,
    create_material_config,
    find_material,
)
from spring_calculator.models.material import MaterialCategory, MaterialConfig


class TestMaterialType:
    """Tests for MaterialType enum and create_material_config lookup."""

    def test_music_wire(self):
        """Test Steel ASTM A228 properties."""
        steel = create_material_config(MaterialType.STEEL_ASTM_A228)

        assert isinstance(steel, MaterialConfig)
        assert steel.density == 7.85
        assert steel.shear_modulus == 79300
        assert steel.cost_per_kg == 350
        assert steel.category == MaterialCategory.CARBON_STEEL

    def test_stainless_302(self):
        """Test Stainless Steel 302 properties."""
        stainless = create_material_config(MaterialType.STAINLESS_STEEL_302)

        assert stainless.density == 7.92
        assert stainless.shear_modulus == 69000
        assert stainless.cost_per_kg == 550
        assert stainless.category == MaterialCategory.STAINLESS

    def test_phosphor_bronze(self):
        """Test Phosphor Bronze properties."""
        bronze = create_material_config(MaterialType.PHOSPHOR_BRONZE)

        assert bronze.density == 8.8
        assert bronze.shear_modulus == 41400
        assert bronze.cost_per_kg == 600
        assert bronze.relaxation_percent == 3.0

    def test_custom_preset(self):
        """Test the Custom starting point."""
        custom = create_material_config(MaterialType.CUSTOM)

        assert custom.name == "Custom"
        assert custom.cost_per_kg == 300
        assert custom.category == MaterialCategory.OTHER

    def test_every_type_has_a_record(self):
        """Test the table covers every material type."""
        assert set(MATERIALS) == set(MaterialType)

    def test_names_match_enum_values(self):
        """Test each record is named after its enum value."""
        for material_type, material in MATERIALS.items():
            assert material.name == material_type.value

    def test_table_is_read_only(self):
        """Test that the material table cannot be modified."""
        with pytest.raises(TypeError):
            MATERIALS[MaterialType.CUSTOM] = None

    def test_invalid_type_raises_error(self):
        """Test that an invalid material type raises ValueError."""
        with pytest.raises(ValueError, match="Unknown material type"):
            create_material_config("invalid_material")


class TestCustomMaterial:
    """Tests for create_custom_material."""

    def test_custom_material(self):
        """Test a user-defined material record."""
        brass = create_custom_material(
            "Brass CZ108", density=8.5, shear_modulus=35000, cost_per_kg=700
        )

        assert brass.name == "Brass CZ108"
        assert brass.grade == "Custom"
        assert brass.category == MaterialCategory.OTHER

    def test_empty_name_falls_back(self):
        """Test that an empty name gets the generic label."""
        material = create_custom_material("", density=8.5, shear_modulus=35000, cost_per_kg=700)
        assert material.name == "Custom Material"

    def test_custom_material_is_validated(self):
        """Test that custom records are validated like presets."""
        with pytest.raises(ValueError, match="density must be positive"):
            create_custom_material("Bad", density=0, shear_modulus=35000, cost_per_kg=700)


class TestFindMaterial:
    """Tests for find_material by display name."""

    def test_find_by_name(self):
        """Test lookup by display name."""
        assert find_material("Chrome Silicon").shear_modulus == 77200

    def test_unknown_name_raises_error(self):
        """Test that an unknown name raises ValueError."""
        with pytest.raises(ValueError, match="Unknown material"):
            find_material("Unobtainium")
