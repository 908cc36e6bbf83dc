"""Core data models for spring calculation.

This package contains all model classes and utility functions.
"""

from spring_calculator.models.inputs import DiameterType, SpringInputs
from spring_calculator.models.material import (
    RELAXATION_PERCENT,
    MaterialCategory,
    MaterialConfig,
    estimate_relaxation,
)
from spring_calculator.models.results import (
    SpringIndexRating,
    SpringResults,
    classify_spring_index,
)

__all__ = [
    "DiameterType",
    "SpringInputs",
    "MaterialCategory",
    "MaterialConfig",
    "RELAXATION_PERCENT",
    "estimate_relaxation",
    "SpringIndexRating",
    "SpringResults",
    "classify_spring_index",
]
