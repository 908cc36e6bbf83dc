"""Exceptions raised by the spring calculator."""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class ValidationError:
    """A single per-field input problem.

    Attributes:
        field: Name of the offending SpringInputs field
        message: Human-readable explanation for the form
        kind: Error class, "InvalidGeometry" for geometric checks
    """

    field: str
    message: str
    kind: str = "InvalidGeometry"


def errors_by_field(errors: List[ValidationError]) -> Dict[str, str]:
    """Collapse a list of validation errors into a field → message mapping."""
    return {error.field: error.message for error in errors}


class SpringCalculatorError(Exception):
    """Base class for spring calculator errors."""


class ValidationFailed(SpringCalculatorError, ValueError):
    """Raised when computation is requested for inputs that fail validation."""

    def __init__(self, errors: List[ValidationError]):
        self.errors = list(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(f"Invalid spring inputs: {fields}")


class DegenerateInputError(SpringCalculatorError, ValueError):
    """Raised for inputs that pass validation but make a formula singular."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
