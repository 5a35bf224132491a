"""Text rendering of calculation results and validation errors.

Rounding and unit conversion happen here only; the calculator returns
full-precision meters.
"""
from typing import Any, Dict, List, Optional, Union

from calculator import (Action, AdjusterResult, CalculatorResult, ErrorKind, Field,
                        ValidationError)
from settings import Settings

CM_PER_M = 100

FIELD_LABELS = {
    Field.MEASURED_FREQUENCY: "measured frequency",
    Field.TARGET_FREQUENCY: "target frequency",
    Field.VELOCITY_FACTOR: "velocity factor",
}

ERROR_MESSAGES = {
    ErrorKind.MISSING_OR_NON_NUMERIC: "Please enter valid numeric values",
    ErrorKind.NON_POSITIVE_VALUE: "Values must be positive",
    ErrorKind.VELOCITY_FACTOR_OUT_OF_RANGE: "Velocity factor must be <= 1.0",
}

ACTION_ADVICE = {
    Action.SHORTEN: "Shorten each branch by this length",
    Action.LENGTHEN: "Lengthen each branch by this length",
}


def format_length(meters: float, decimals: int = 3, cm_decimals: Optional[int] = None,
                  signed: bool = False) -> str:
    """Render a length in meters, optionally followed by centimeters.

    >>> format_length(5.03185, 3, 1)
    '5.032 m (503.2 cm)'
    """
    sign = "+" if signed and meters > 0 else ""
    text = f"{sign}{meters:.{decimals}f} m"
    if cm_decimals is not None:
        text += f" ({sign}{meters * CM_PER_M:.{cm_decimals}f} cm)"
    return text


def _format_calculator(result: CalculatorResult, settings: Settings) -> List[str]:
    decimals = settings.length_decimals
    return [
        f"Frequency: {result.frequency_mhz:.3f} MHz",
        f"Wavelength: {format_length(result.wavelength_m, decimals)}",
        f"Full dipole length (λ/2): {format_length(result.full_dipole_length_m, decimals, 1)}",
        f"Branch length (λ/4): {format_length(result.branch_length_m, decimals, 1)}",
    ]


def _format_adjuster(result: AdjusterResult, settings: Settings) -> List[str]:
    decimals = settings.length_decimals
    diff_decimals = settings.difference_decimals
    return [
        f"Measured wavelength: {format_length(result.measured_wavelength_m, decimals)}",
        f"Target wavelength: {format_length(result.target_wavelength_m, decimals)}",
        f"Measured branch length (λ/4): {format_length(result.measured_branch_length_m, decimals, 1)}",
        f"Target branch length (λ/4): {format_length(result.target_branch_length_m, decimals, 1)}",
        f"Length difference: {format_length(result.difference_m, diff_decimals, max(diff_decimals - 2, 0), signed=True)}",
        ACTION_ADVICE[result.action],
    ]


def format_result(result: Union[CalculatorResult, AdjusterResult],
                  settings: Optional[Settings] = None) -> List[str]:
    """Render a result as display lines.

    Args:
        result: Calculator or adjuster result
        settings: Display precision, defaults to ``Settings()``

    Returns:
        list: One string per displayed value
    """
    settings = settings or Settings()
    if isinstance(result, AdjusterResult):
        return _format_adjuster(result, settings)
    if isinstance(result, CalculatorResult):
        return _format_calculator(result, settings)
    raise TypeError(f"Cannot format {type(result).__name__}")


def describe_error(error: ValidationError) -> str:
    """Human readable message naming the rejected fields."""
    fields = ", ".join(FIELD_LABELS[field] for field in error.fields)
    return f"{ERROR_MESSAGES[error.kind]} ({fields})"


def result_to_dict(result: Union[CalculatorResult, AdjusterResult]) -> Dict[str, Any]:
    """Full-precision dictionary for JSON output."""
    if isinstance(result, AdjusterResult):
        return {
            'mode': result.mode.value,
            'measured_wavelength_m': result.measured_wavelength_m,
            'target_wavelength_m': result.target_wavelength_m,
            'measured_branch_length_m': result.measured_branch_length_m,
            'target_branch_length_m': result.target_branch_length_m,
            'difference_m': result.difference_m,
            'action': result.action.value,
        }
    return {
        'mode': result.mode.value,
        'frequency_mhz': result.frequency_mhz,
        'wavelength_m': result.wavelength_m,
        'full_dipole_length_m': result.full_dipole_length_m,
        'branch_length_m': result.branch_length_m,
    }


def error_to_dict(error: ValidationError) -> Dict[str, Any]:
    """Dictionary form of a validation error for JSON output."""
    return {
        'error': error.kind.value,
        'fields': [field.value for field in error.fields],
        'message': describe_error(error),
    }
