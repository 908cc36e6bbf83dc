"""Helical compression spring property and price calculator."""

from .config import EngineConfig, FeatureSet
from .engine import CalculationOutcome, SpringEngine
from .errors import DegenerateInputError, ValidationError, ValidationFailed
from .export import CompanyDetails, QuotationDetails
from .models import DiameterType, MaterialCategory, MaterialConfig, SpringInputs, SpringResults

__all__ = [
    "SpringEngine",
    "CalculationOutcome",
    "EngineConfig",
    "FeatureSet",
    "SpringInputs",
    "SpringResults",
    "DiameterType",
    "MaterialConfig",
    "MaterialCategory",
    "ValidationError",
    "ValidationFailed",
    "DegenerateInputError",
    "CompanyDetails",
    "QuotationDetails",
]
