"""Half-wave dipole calculations: absolute cut lengths and resonance adjustment.

This module is the calculation core. It is pure: no logging, no I/O and no
exceptions for bad input. Validation failures come back as ``ValidationError``
values so callers decide how to present them.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

SPEED_OF_LIGHT = 299792458  # m/s
HZ_PER_MHZ = 1_000_000

Number = Union[int, float, str, None]


class Mode(Enum):
    """Operating modes of the calculator."""
    ADJUSTER = "adjuster"
    CALCULATOR = "calculator"


class Field(Enum):
    """Input fields that validation can blame."""
    MEASURED_FREQUENCY = "measured_frequency_mhz"
    TARGET_FREQUENCY = "target_frequency_mhz"
    VELOCITY_FACTOR = "velocity_factor"


class ErrorKind(Enum):
    """Validation failure categories, checked in this order."""
    MISSING_OR_NON_NUMERIC = "missing_or_non_numeric"
    NON_POSITIVE_VALUE = "non_positive_value"
    VELOCITY_FACTOR_OUT_OF_RANGE = "velocity_factor_out_of_range"


class Action(Enum):
    """What to do to the dipole branches after an adjuster calculation."""
    SHORTEN = "shorten"
    LENGTHEN = "lengthen"


@dataclass(frozen=True)
class CalculatorInput:
    """Absolute mode: cut lengths for a single frequency."""
    target_frequency_mhz: Number
    velocity_factor: Number

    @property
    def mode(self) -> Mode:
        return Mode.CALCULATOR


@dataclass(frozen=True)
class AdjusterInput:
    """Differential mode: move resonance from a measured to a target frequency."""
    measured_frequency_mhz: Number
    target_frequency_mhz: Number
    velocity_factor: Number

    @property
    def mode(self) -> Mode:
        return Mode.ADJUSTER


CalculationInput = Union[CalculatorInput, AdjusterInput]


@dataclass(frozen=True)
class CalculatorResult:
    """Dimensions of a half-wave dipole cut for ``frequency_mhz`` (meters)."""
    frequency_mhz: float
    wavelength_m: float
    full_dipole_length_m: float
    branch_length_m: float

    @property
    def mode(self) -> Mode:
        return Mode.CALCULATOR


@dataclass(frozen=True)
class AdjusterResult:
    """Branch length change needed to move resonance (meters).

    ``difference_m`` is measured minus target branch length. Positive means the
    antenna resonates too low and each branch must be shortened; negative
    means each branch must be lengthened.
    """
    measured_wavelength_m: float
    target_wavelength_m: float
    measured_branch_length_m: float
    target_branch_length_m: float
    difference_m: float

    @property
    def mode(self) -> Mode:
        return Mode.ADJUSTER

    @property
    def action(self) -> Action:
        return Action.SHORTEN if self.difference_m > 0 else Action.LENGTHEN

    @property
    def adjustment_m(self) -> float:
        """Length to cut off or add to each branch, always >= 0."""
        return abs(self.difference_m)


CalculationResult = Union[CalculatorResult, AdjusterResult]


@dataclass(frozen=True)
class ValidationError:
    """Rejected input: which rule failed and for which field(s)."""
    kind: ErrorKind
    fields: Tuple[Field, ...]


def parse_number(value: Number) -> Optional[float]:
    """Parse a numeric field, returning None when it is absent or not a finite number.

    Text input may use a comma as decimal separator ("14,150").
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        text = str(value).strip()
        if not text:
            return None
        if text.count(',') == 1 and '.' not in text:
            text = text.replace(',', '.')
        try:
            number = float(text)
        except ValueError:
            return None

    if not math.isfinite(number):
        return None
    return number


def wavelength_m(frequency_mhz: float, velocity_factor: float) -> float:
    """Wavelength in meters at ``frequency_mhz`` scaled by ``velocity_factor``."""
    return (SPEED_OF_LIGHT * velocity_factor) / (frequency_mhz * HZ_PER_MHZ)


def branch_length_m(frequency_mhz: float, velocity_factor: float) -> float:
    """Quarter-wave length of one dipole branch in meters."""
    return wavelength_m(frequency_mhz, velocity_factor) / 4


def full_dipole_length_m(frequency_mhz: float, velocity_factor: float) -> float:
    """Half-wave tip-to-tip dipole length in meters."""
    return wavelength_m(frequency_mhz, velocity_factor) / 2


def _representable(wavelength: float) -> bool:
    """True when the wavelength and its quarter are finite and non-zero."""
    return math.isfinite(wavelength) and wavelength / 4 > 0


def _validate(raw: Tuple[Tuple[Field, Number], ...]) -> Union[Tuple[float, ...], ValidationError]:
    """Parse and check fields in order; stop at the first failing rule."""
    parsed = [(field, parse_number(value)) for field, value in raw]

    missing = tuple(field for field, number in parsed if number is None)
    if missing:
        return ValidationError(ErrorKind.MISSING_OR_NON_NUMERIC, missing)

    non_positive = tuple(field for field, number in parsed if number <= 0)
    if non_positive:
        return ValidationError(ErrorKind.NON_POSITIVE_VALUE, non_positive)

    values = dict(parsed)
    if values[Field.VELOCITY_FACTOR] > 1:
        return ValidationError(ErrorKind.VELOCITY_FACTOR_OUT_OF_RANGE, (Field.VELOCITY_FACTOR,))

    return tuple(number for _, number in parsed)


def compute(calc_input: CalculationInput) -> Union[CalculationResult, ValidationError]:
    """Compute dipole dimensions for either operating mode.

    Args:
        calc_input: ``CalculatorInput`` or ``AdjusterInput``; numeric fields may
            be numbers or raw text.

    Returns:
        ``CalculatorResult`` or ``AdjusterResult`` with full-precision values,
        or a ``ValidationError`` when any field is rejected. Nothing is
        computed unless every field is valid.
    """
    if isinstance(calc_input, AdjusterInput):
        checked = _validate((
            (Field.MEASURED_FREQUENCY, calc_input.measured_frequency_mhz),
            (Field.TARGET_FREQUENCY, calc_input.target_frequency_mhz),
            (Field.VELOCITY_FACTOR, calc_input.velocity_factor),
        ))
        if isinstance(checked, ValidationError):
            return checked

        measured, target, vf = checked
        measured_wavelength = wavelength_m(measured, vf)
        target_wavelength = wavelength_m(target, vf)

        unrepresentable = tuple(field for field, wavelength in (
            (Field.MEASURED_FREQUENCY, measured_wavelength),
            (Field.TARGET_FREQUENCY, target_wavelength),
        ) if not _representable(wavelength))
        if unrepresentable:
            return ValidationError(ErrorKind.MISSING_OR_NON_NUMERIC, unrepresentable)

        measured_branch = measured_wavelength / 4
        target_branch = target_wavelength / 4

        return AdjusterResult(
            measured_wavelength_m=measured_wavelength,
            target_wavelength_m=target_wavelength,
            measured_branch_length_m=measured_branch,
            target_branch_length_m=target_branch,
            difference_m=measured_branch - target_branch,
        )

    if isinstance(calc_input, CalculatorInput):
        checked = _validate((
            (Field.TARGET_FREQUENCY, calc_input.target_frequency_mhz),
            (Field.VELOCITY_FACTOR, calc_input.velocity_factor),
        ))
        if isinstance(checked, ValidationError):
            return checked

        target, vf = checked
        wavelength = wavelength_m(target, vf)
        if not _representable(wavelength):
            return ValidationError(ErrorKind.MISSING_OR_NON_NUMERIC, (Field.TARGET_FREQUENCY,))

        return CalculatorResult(
            frequency_mhz=target,
            wavelength_m=wavelength,
            full_dipole_length_m=wavelength / 2,
            branch_length_m=wavelength / 4,
        )

    raise TypeError(f"Unsupported calculation input: {type(calc_input).__name__}")


def calculate(target_frequency_mhz: Number, velocity_factor: Number) -> Union[CalculatorResult, ValidationError]:
    """Calculator mode shortcut."""
    return compute(CalculatorInput(target_frequency_mhz, velocity_factor))


def adjust(measured_frequency_mhz: Number, target_frequency_mhz: Number,
           velocity_factor: Number) -> Union[AdjusterResult, ValidationError]:
    """Adjuster mode shortcut."""
    return compute(AdjusterInput(measured_frequency_mhz, target_frequency_mhz, velocity_factor))
