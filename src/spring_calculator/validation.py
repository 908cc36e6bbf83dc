"""Input validation for spring calculation.

Two levels of checking are applied before any formula runs:

- ``validate`` collects per-field geometric errors. Every check runs, so the
  form can show all problems at once.
- ``check_degenerate`` rejects inputs that are geometrically valid but make a
  formula singular (pitch with a single coil, price with a zero margin ratio).
"""

from typing import List

from spring_calculator.errors import DegenerateInputError, ValidationError, ValidationFailed
from spring_calculator.models.inputs import DiameterType, SpringInputs

# Minimum raw diameter, in wire diameters, for each way of measuring it
MIN_DIAMETER_RATIO = {
    DiameterType.INNER: 2.0,
    DiameterType.OUTER: 3.0,
    DiameterType.MEAN: 2.0,
}

_DIAMETER_NAMES = {
    DiameterType.INNER: "Inner diameter",
    DiameterType.OUTER: "Outer diameter",
    DiameterType.MEAN: "Mean diameter",
}


def _check_diameter(inputs: SpringInputs) -> List[ValidationError]:
    if inputs.diameter <= 0:
        return [ValidationError("diameter", "Diameter must be positive")]

    ratio = MIN_DIAMETER_RATIO[inputs.diameter_type]
    if inputs.diameter <= ratio * inputs.wire_diameter:
        name = _DIAMETER_NAMES[inputs.diameter_type]
        return [
            ValidationError(
                "diameter",
                f"{name} must be greater than {ratio:g} times the wire diameter "
                f"({ratio * inputs.wire_diameter:g} mm)",
            )
        ]
    return []


def validate(inputs: SpringInputs) -> List[ValidationError]:
    """Check spring geometry and collect every problem found.

    Args:
        inputs: Spring parameters to check

    Returns:
        List of validation errors, at most one per field. Empty if the inputs
        can be computed.

    Examples:
        >>> validate(SpringInputs())
        []

        >>> [e.field for e in validate(SpringInputs(active_coils=12, total_coils=10))]
        ['active_coils']
    """
    errors: List[ValidationError] = []

    if inputs.wire_diameter <= 0:
        errors.append(ValidationError("wire_diameter", "Wire diameter must be positive"))

    errors.extend(_check_diameter(inputs))

    if inputs.total_coils <= 0:
        errors.append(ValidationError("total_coils", "Number of coils must be positive"))

    if inputs.active_coils <= 0 or inputs.active_coils > inputs.total_coils:
        errors.append(
            ValidationError(
                "active_coils",
                "Active coils must be positive and less than or equal to total coils",
            )
        )

    if inputs.free_length <= 0:
        errors.append(ValidationError("free_length", "Free length must be positive"))

    if inputs.load_height <= 0 or inputs.load_height >= inputs.free_length:
        errors.append(
            ValidationError(
                "load_height", "Load height must be positive and less than free length"
            )
        )

    return errors


def ensure_valid(inputs: SpringInputs) -> None:
    """Raise ValidationFailed if ``inputs`` has any validation error."""
    errors = validate(inputs)
    if errors:
        raise ValidationFailed(errors)


def check_degenerate(inputs: SpringInputs) -> None:
    """Reject inputs that would produce infinite or undefined results.

    Raises:
        DegenerateInputError: On the first singular parameter found
    """
    if inputs.total_coils <= 1:
        raise DegenerateInputError(
            "total_coils", "Pitch is undefined for a spring with one coil or less"
        )
    if inputs.price_override is None and inputs.margin_ratio <= 0:
        raise DegenerateInputError(
            "margin_ratio", "Margin ratio must be positive to derive a price"
        )
    if inputs.quantity <= 0:
        raise DegenerateInputError("quantity", "Quantity must be positive")
    if inputs.rate_override is not None and inputs.rate_override <= 0:
        raise DegenerateInputError("rate_override", "Spring rate override must be positive")
    if inputs.ultimate_tensile_strength is not None and inputs.ultimate_tensile_strength <= 0:
        raise DegenerateInputError(
            "ultimate_tensile_strength", "Ultimate tensile strength must be positive"
        )
    if inputs.density <= 0:
        raise DegenerateInputError("density", "Density must be positive")
    if inputs.shear_modulus <= 0:
        raise DegenerateInputError("shear_modulus", "Shear modulus must be positive")
