"""Tests for MaterialConfig model and relaxation estimate."""

import pytest

from spring_calculator.models.material import (
    RELAXATION_PERCENT,
    MaterialCategory,
    MaterialConfig,
    estimate_relaxation,
)


class TestMaterialConfig:
    """Tests for the MaterialConfig model."""

    def test_valid_material_creation(self):
        """Test creating a valid material configuration."""
        material = MaterialConfig(
            name="Steel ASTM A228", density=7.85, shear_modulus=79300, cost_per_kg=350
        )
        assert material.name == "Steel ASTM A228"
        assert material.density == 7.85
        assert material.shear_modulus == 79300
        assert material.cost_per_kg == 350

    def test_defaults(self):
        """Test optional fields default to an uncategorized record."""
        material = MaterialConfig(name="Custom", density=7.85, shear_modulus=79300, cost_per_kg=300)
        assert material.category == MaterialCategory.OTHER
        assert material.elastic_modulus is None
        assert material.ultimate_tensile_strength is None
        assert material.grade == ""
        assert material.notes == ""

    def test_zero_density_raises_error(self):
        """Test that non-positive density raises ValueError."""
        with pytest.raises(ValueError, match="density must be positive"):
            MaterialConfig(name="Invalid", density=0, shear_modulus=79300, cost_per_kg=350)

    def test_negative_shear_modulus_raises_error(self):
        """Test that non-positive shear modulus raises ValueError."""
        with pytest.raises(ValueError, match="shear_modulus must be positive"):
            MaterialConfig(name="Invalid", density=7.85, shear_modulus=-1, cost_per_kg=350)

    def test_negative_cost_raises_error(self):
        """Test that negative cost raises ValueError."""
        with pytest.raises(ValueError, match="cost_per_kg must be non-negative"):
            MaterialConfig(name="Invalid", density=7.85, shear_modulus=79300, cost_per_kg=-5)

    def test_zero_cost_allowed(self):
        """Test that free material is accepted."""
        material = MaterialConfig(name="Scrap", density=7.85, shear_modulus=79300, cost_per_kg=0)
        assert material.cost_per_kg == 0

    def test_material_immutability(self):
        """Test that MaterialConfig is immutable (frozen dataclass)."""
        material = MaterialConfig(name="Steel", density=7.85, shear_modulus=79300, cost_per_kg=350)
        with pytest.raises(Exception):  # FrozenInstanceError in Python 3.11+
            material.density = 8.0

    def test_relaxation_follows_category(self):
        """Test that relaxation comes from the category, not the name."""
        # Name mentions stainless but the record is categorized as carbon steel
        material = MaterialConfig(
            name="Not Stainless",
            density=7.85,
            shear_modulus=79300,
            cost_per_kg=350,
            category=MaterialCategory.CARBON_STEEL,
        )
        assert material.relaxation_percent == 1.0


class TestEstimateRelaxation:
    """Tests for estimate_relaxation lookup."""

    def test_carbon_steel(self):
        """Test music wire family relaxes least."""
        assert estimate_relaxation(MaterialCategory.CARBON_STEEL) == 1.0

    def test_stainless(self):
        """Test stainless relaxation."""
        assert estimate_relaxation(MaterialCategory.STAINLESS) == 2.0

    def test_other(self):
        """Test fallback relaxation for other materials."""
        assert estimate_relaxation(MaterialCategory.OTHER) == 3.0

    def test_every_category_has_an_estimate(self):
        """Test the lookup table covers every category."""
        assert set(RELAXATION_PERCENT) == set(MaterialCategory)

    def test_unknown_category_raises_error(self):
        """Test that a non-category key raises ValueError."""
        with pytest.raises(ValueError, match="Unknown material category"):
            estimate_relaxation("stainless")
