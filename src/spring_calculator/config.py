"""Engine configuration and feature flags."""

from dataclasses import dataclass
from enum import Flag, auto
from typing import Tuple

# Critical free length to mean diameter ratio for fixed-fixed ends
DEFAULT_CRITICAL_SLENDERNESS = 2.6

# Resonant frequency as a fraction of natural frequency
DEFAULT_RESONANCE_RATIO = 0.65

# Production quantities plotted on the price curve
DEFAULT_QUANTITY_POINTS = (10, 50, 500, 1000, 5000, 10000, 20000, 50000, 100000, 200000)

# Fixed quantity quoted alongside the production run
SAMPLE_QUANTITY = 10


class FeatureSet(Flag):
    """Optional result groups exposed to display and export collaborators."""

    BASIC = auto()  # Geometry, rate, load, material cost and price
    TOLERANCES = auto()  # Manufacturing tolerances on specification sheets
    PRODUCTION = auto()  # Setup cost amortization and run quantities
    MECHANICAL = auto()  # Stress, frequency, energy and buckling

    @classmethod
    def full(cls) -> "FeatureSet":
        """All feature groups enabled."""
        return cls.BASIC | cls.TOLERANCES | cls.PRODUCTION | cls.MECHANICAL


@dataclass(frozen=True)
class EngineConfig:
    """Spring engine configuration.

    Attributes:
        features: Result groups exposed to collaborators
        critical_slenderness: Free length / mean diameter at which buckling
            becomes likely. 2.6 models fixed-fixed ends.
        resonance_ratio: Resonant frequency as a fraction of natural frequency
        reject_degenerate: Raise on singular inputs instead of returning
            inf/nan results
        quantity_points: Quantities for the price sensitivity curve
        curve_steps: Number of intervals on the load-deflection curve
    """

    features: FeatureSet = FeatureSet.full()
    critical_slenderness: float = DEFAULT_CRITICAL_SLENDERNESS
    resonance_ratio: float = DEFAULT_RESONANCE_RATIO
    reject_degenerate: bool = True
    quantity_points: Tuple[int, ...] = DEFAULT_QUANTITY_POINTS
    curve_steps: int = 10

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if FeatureSet.BASIC not in self.features:
            raise ValueError(f"features must include BASIC, got {self.features}")
        if self.critical_slenderness <= 0:
            raise ValueError(
                f"critical_slenderness must be positive, got {self.critical_slenderness}"
            )
        if not 0 < self.resonance_ratio <= 1:
            raise ValueError(
                f"resonance_ratio must be in (0, 1], got {self.resonance_ratio}"
            )
        if any(quantity <= 0 for quantity in self.quantity_points):
            raise ValueError(f"quantity_points must be positive, got {self.quantity_points}")
        if self.curve_steps < 1:
            raise ValueError(f"curve_steps must be >= 1, got {self.curve_steps}")
