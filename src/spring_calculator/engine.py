"""End-to-end spring calculation pipeline.

This module provides the SpringEngine class that ties the components together:
- Geometric validation of the inputs
- Rejection of singular inputs
- Property and price calculation
- Chart series for the display collaborators
- CSV export limited to the configured feature groups

Example:
    >>> from spring_calculator.engine import SpringEngine
    >>> from spring_calculator.models import SpringInputs
    >>>
    >>> engine = SpringEngine()
    >>> outcome = engine.recompute(SpringInputs())
    >>> round(outcome.results.spring_rate, 2)
    38.72
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from spring_calculator.calculator import calculate_spring
from spring_calculator.config import EngineConfig, FeatureSet
from spring_calculator.curves import load_deflection_curve, price_curve
from spring_calculator.errors import (
    DegenerateInputError,
    ValidationError,
    ValidationFailed,
    errors_by_field,
)
from spring_calculator.export import (
    QuotationDetails,
    quotation_csv,
    results_csv,
    specification_csv,
)
from spring_calculator.models.inputs import SpringInputs
from spring_calculator.models.results import SpringResults
from spring_calculator.validation import check_degenerate, ensure_valid, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationOutcome:
    """Result of one recompute: either results and curves, or errors.

    Attributes:
        results: Computed spring properties, None when inputs were rejected
        errors: Field name → message for every rejected input
        load_curve: (deflection, load) pairs for the load-deflection chart
        price_curve: (quantity, unit price) pairs for the price chart
        features: Result groups the engine was configured to expose
    """

    results: Optional[SpringResults] = None
    errors: Dict[str, str] = field(default_factory=dict)
    load_curve: List[Tuple[float, float]] = field(default_factory=list)
    price_curve: List[Tuple[int, float]] = field(default_factory=list)
    features: FeatureSet = FeatureSet.full()

    @property
    def ok(self) -> bool:
        """True if the inputs were accepted and results computed."""
        return self.results is not None


class SpringEngine:
    """Spring calculation engine.

    Validates inputs, computes the full result set and the chart series. It
    holds no state between calls, so the hosting UI can call ``recompute``
    on every edit.

    Args:
        config: Engine configuration. Default: EngineConfig() with every
                feature enabled, fixed-fixed buckling limit and rejection
                of singular inputs.

    Example:
        >>> engine = SpringEngine()
        >>> outcome = engine.recompute(inputs)
        >>> if not outcome.ok:
        ...     show_errors(outcome.errors)
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config if config is not None else EngineConfig()

    def validate(self, inputs: SpringInputs) -> List[ValidationError]:
        """Collect every geometric problem with ``inputs``."""
        return validate(inputs)

    def compute(self, inputs: SpringInputs) -> SpringResults:
        """Compute spring properties for inputs that must be valid.

        Raises:
            ValidationFailed: If inputs fail validation
            DegenerateInputError: If inputs are singular and the config
                rejects them
        """
        ensure_valid(inputs)
        if self.config.reject_degenerate:
            check_degenerate(inputs)

        return calculate_spring(
            inputs,
            critical_slenderness=self.config.critical_slenderness,
            resonance_ratio=self.config.resonance_ratio,
        )

    def recompute(self, inputs: SpringInputs) -> CalculationOutcome:
        """Validate and compute from scratch, never raising for bad inputs.

        Computation is all-or-nothing: when any input is rejected, no result
        or curve is produced and the errors are returned instead.

        Args:
            inputs: Current snapshot of the form inputs

        Returns:
            CalculationOutcome with results and curves, or with errors
        """
        try:
            results = self.compute(inputs)
        except ValidationFailed as exc:
            logger.info("Rejected spring inputs: %s", ", ".join(e.field for e in exc.errors))
            return CalculationOutcome(
                errors=errors_by_field(exc.errors), features=self.config.features
            )
        except DegenerateInputError as exc:
            logger.info("Rejected degenerate spring input: %s", exc)
            return CalculationOutcome(
                errors={exc.field: exc.message}, features=self.config.features
            )

        return CalculationOutcome(
            results=results,
            load_curve=load_deflection_curve(
                results.spring_rate, inputs.free_length, steps=self.config.curve_steps
            ),
            price_curve=price_curve(
                results.price_per_unit, inputs.setup_cost, self.config.quantity_points
            ),
            features=self.config.features,
        )

    def export_results(self, inputs: SpringInputs, results: SpringResults) -> str:
        """Results table as CSV, limited to the configured feature groups."""
        return results_csv(inputs, results, self.config.features)

    def export_specification(self, inputs: SpringInputs, results: SpringResults) -> str:
        """Specification sheet as CSV, limited to the configured feature groups."""
        return specification_csv(inputs, results, self.config.features)

    def export_quotation(
        self, inputs: SpringInputs, results: SpringResults, details: QuotationDetails
    ) -> str:
        """Customer quotation as CSV."""
        return quotation_csv(inputs, results, details)

    def __repr__(self) -> str:
        """Return string representation of the engine."""
        return (
            f"SpringEngine(features={self.config.features}, "
            f"critical_slenderness={self.config.critical_slenderness}, "
            f"reject_degenerate={self.config.reject_degenerate})"
        )
