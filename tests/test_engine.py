"""Tests for the end-to-end spring engine."""

import logging
import math
from datetime import date

import pytest

from spring_calculator import (
    CalculationOutcome,
    DegenerateInputError,
    EngineConfig,
    FeatureSet,
    QuotationDetails,
    SpringEngine,
    SpringInputs,
    SpringResults,
    ValidationFailed,
)
from spring_calculator.materials import MaterialType, create_material_config


class TestSpringEngineInit:
    """Test SpringEngine initialization."""

    def test_default_initialization(self):
        """Test engine with default configuration."""
        engine = SpringEngine()
        assert engine.config == EngineConfig()

    def test_custom_config(self):
        """Test engine with custom configuration."""
        config = EngineConfig(critical_slenderness=5.26, reject_degenerate=False)
        engine = SpringEngine(config)
        assert engine.config is config

    def test_repr(self):
        """Test string representation."""
        engine = SpringEngine(EngineConfig(critical_slenderness=3.7))
        assert "SpringEngine" in repr(engine)
        assert "critical_slenderness=3.7" in repr(engine)


class TestSpringEngineCompute:
    """Test SpringEngine.validate() and compute()."""

    @pytest.fixture
    def engine(self):
        """Engine with default configuration."""
        return SpringEngine()

    def test_reference_spring(self, engine):
        """Test the reference scenario: 2 mm wire, 10 mm OD, steel."""
        results = engine.compute(SpringInputs())

        assert isinstance(results, SpringResults)
        assert results.mean_diameter == 8.0
        assert results.spring_index == 4.0
        assert results.spring_rate == pytest.approx(1268800 / 32768)
        assert results.load_at_load_height == pytest.approx(10 * 1268800 / 32768)
        assert results.price_per_unit == pytest.approx(results.raw_material_cost / 0.4)

    def test_validate_delegates(self, engine):
        """Test validate returns the validator's errors."""
        errors = engine.validate(SpringInputs(active_coils=12, total_coils=10))
        assert [error.field for error in errors] == ["active_coils"]

    def test_compute_rejects_invalid_inputs(self, engine):
        """Test compute never runs on invalid inputs."""
        with pytest.raises(ValidationFailed):
            engine.compute(SpringInputs(wire_diameter=3.0, diameter=8.0))

    def test_compute_rejects_degenerate_inputs(self, engine):
        """Test compute rejects singular inputs by default."""
        with pytest.raises(DegenerateInputError):
            engine.compute(SpringInputs(total_coils=1, active_coils=1))

    def test_degenerate_inputs_allowed_when_configured(self):
        """Test opting out of rejection gives inf/nan results."""
        engine = SpringEngine(EngineConfig(reject_degenerate=False))
        results = engine.compute(SpringInputs(margin_ratio=0.0))
        assert math.isinf(results.price_per_unit)

    def test_buckling_limit_from_config(self):
        """Test the configured critical slenderness is used."""
        engine = SpringEngine(EngineConfig(critical_slenderness=6.25))
        results = engine.compute(SpringInputs())
        assert results.buckling_risk_ratio == pytest.approx(1.0)
        assert results.buckling_risk is False

    def test_resonance_ratio_from_config(self):
        """Test the configured resonance ratio is used."""
        engine = SpringEngine(EngineConfig(resonance_ratio=0.5))
        results = engine.compute(SpringInputs())
        assert results.resonant_frequency == pytest.approx(0.5 * results.natural_frequency)


class TestSpringEngineRecompute:
    """Test SpringEngine.recompute() method."""

    @pytest.fixture
    def engine(self):
        """Engine with default configuration."""
        return SpringEngine()

    def test_valid_outcome(self, engine):
        """Test valid inputs produce results and both curves."""
        outcome = engine.recompute(SpringInputs())

        assert isinstance(outcome, CalculationOutcome)
        assert outcome.ok
        assert outcome.errors == {}
        assert len(outcome.load_curve) == 11
        assert len(outcome.price_curve) == 10

    def test_invalid_outcome(self, engine):
        """Test invalid inputs produce errors and nothing else."""
        outcome = engine.recompute(SpringInputs(active_coils=12, total_coils=10, load_height=60))

        assert not outcome.ok
        assert outcome.results is None
        assert set(outcome.errors) == {"active_coils", "load_height"}
        assert outcome.load_curve == []
        assert outcome.price_curve == []

    def test_outer_diameter_rejection(self, engine):
        """Test outer diameter must exceed three wire diameters."""
        outcome = engine.recompute(SpringInputs(wire_diameter=3.0, diameter=8.0))
        assert "diameter" in outcome.errors

    def test_degenerate_outcome(self, engine):
        """Test degenerate inputs are reported as field errors."""
        outcome = engine.recompute(SpringInputs(quantity=0))
        assert not outcome.ok
        assert "quantity" in outcome.errors

    def test_recompute_is_idempotent(self, engine):
        """Test identical inputs give identical outcomes."""
        inputs = SpringInputs().with_material(
            create_material_config(MaterialType.STAINLESS_STEEL_302)
        )
        assert engine.recompute(inputs) == engine.recompute(inputs)

    def test_recompute_replaces_everything(self, engine):
        """Test a new snapshot does not depend on the previous one."""
        first = engine.recompute(SpringInputs(active_coils=4))
        second = engine.recompute(SpringInputs())
        fresh = SpringEngine().recompute(SpringInputs())
        assert first.results.spring_rate != second.results.spring_rate
        assert second == fresh

    def test_curves_follow_results(self, engine):
        """Test curves use the computed rate and price."""
        outcome = engine.recompute(SpringInputs(rate_override=20.0, price_override=4.0))

        deflection, load = outcome.load_curve[-1]
        assert deflection == pytest.approx(50.0)
        assert load == pytest.approx(1000.0)

        quantity, price = outcome.price_curve[0]
        assert quantity == 10
        assert price == pytest.approx((5000 + 4.0 * 10) / 10)

    def test_quantity_increase_lowers_overall_price(self, engine):
        """Test overall unit price strictly decreases with quantity."""
        prices = [
            engine.recompute(SpringInputs(quantity=quantity)).results.overall_unit_price
            for quantity in (100, 1000, 10000, 100000)
        ]
        assert all(a > b for a, b in zip(prices, prices[1:]))
        unit = engine.recompute(SpringInputs()).results.price_per_unit
        assert prices[-1] == pytest.approx(unit, rel=0.02)

    def test_custom_curve_configuration(self):
        """Test curve resolution and quantities come from the config."""
        engine = SpringEngine(EngineConfig(curve_steps=4, quantity_points=(100, 10)))
        outcome = engine.recompute(SpringInputs())
        assert len(outcome.load_curve) == 5
        assert [quantity for quantity, _ in outcome.price_curve] == [10, 100]

    def test_feature_set_does_not_change_results(self):
        """Test feature flags only affect what is exposed, not computed."""
        basic = SpringEngine(EngineConfig(features=FeatureSet.BASIC))
        full = SpringEngine()
        assert basic.recompute(SpringInputs()).results == full.recompute(SpringInputs()).results

    def test_rejection_is_logged(self, engine, caplog):
        """Test rejected inputs are logged."""
        with caplog.at_level(logging.INFO, logger="spring_calculator.engine"):
            engine.recompute(SpringInputs(wire_diameter=0.0))
        assert "wire_diameter" in caplog.text


class TestSpringEngineFeatures:
    """Test that the configured feature set reaches the exporters."""

    def test_outcome_carries_features(self):
        """Test the outcome reports the configured feature set."""
        engine = SpringEngine(EngineConfig(features=FeatureSet.BASIC))
        assert engine.recompute(SpringInputs()).features == FeatureSet.BASIC

    def test_rejected_outcome_carries_features(self):
        """Test rejected outcomes report the feature set too."""
        config = EngineConfig(features=FeatureSet.BASIC | FeatureSet.PRODUCTION)
        outcome = SpringEngine(config).recompute(SpringInputs(wire_diameter=0.0))
        assert outcome.features == config.features

    def test_default_outcome_has_all_features(self):
        """Test the default engine exposes every feature group."""
        assert SpringEngine().recompute(SpringInputs()).features == FeatureSet.full()

    def test_basic_engine_limits_results_export(self):
        """Test a BASIC engine exports only the basic results rows."""
        engine = SpringEngine(EngineConfig(features=FeatureSet.BASIC))
        inputs = SpringInputs()
        lines = engine.export_results(inputs, engine.compute(inputs)).splitlines()

        assert len(lines) == 18
        assert lines[-1] == "Selling Price,5.42,₹"
        assert not any(line.startswith("Overall Selling Price") for line in lines)
        assert not any(line.startswith("Shear Stress") for line in lines)

    def test_full_engine_exports_every_group(self):
        """Test the default engine exports production and mechanical rows."""
        engine = SpringEngine()
        inputs = SpringInputs()
        lines = engine.export_results(inputs, engine.compute(inputs)).splitlines()

        assert "Overall Selling Price,10.42,₹" in lines
        assert any(line.startswith("Shear Stress") for line in lines)

    def test_basic_engine_limits_specification_export(self):
        """Test a BASIC engine drops tolerances and the price table."""
        engine = SpringEngine(EngineConfig(features=FeatureSet.BASIC))
        inputs = SpringInputs()
        lines = engine.export_specification(inputs, engine.compute(inputs)).splitlines()

        assert "Wire Diameter (mm),2" in lines
        assert not any("±" in line for line in lines)
        assert lines[-1] == "Price per Spring (₹),5.42"

    def test_quotation_export(self):
        """Test the engine produces a quotation for computed results."""
        engine = SpringEngine()
        inputs = SpringInputs()
        details = QuotationDetails(quotation_number="Q-17", quotation_date=date(2024, 5, 1))
        lines = engine.export_quotation(inputs, engine.compute(inputs), details).splitlines()

        assert "Quotation Number,Q-17" in lines
        assert "Date,2024-05-01" in lines
