"""Test suite for report module."""
import json

import pytest

from calculator import adjust, calculate
from report import describe_error, error_to_dict, format_length, format_result, result_to_dict
from settings import Settings


class TestFormatLength:
    """Test length rendering."""

    def test_meters_only(self):
        assert format_length(20.127408, 3) == "20.127 m"

    def test_meters_and_centimeters(self):
        assert format_length(5.031852, 3, 1) == "5.032 m (503.2 cm)"

    def test_signed_positive(self):
        assert format_length(0.017843, 4, 2, signed=True) == "+0.0178 m (+1.78 cm)"

    def test_signed_negative_has_no_plus(self):
        assert format_length(-0.017718, 4, 2, signed=True) == "-0.0177 m (-1.77 cm)"


class TestFormatResult:
    """Test result display lines."""

    def test_calculator_lines(self):
        lines = format_result(calculate("14.150", "0.95"))

        assert lines == [
            "Frequency: 14.150 MHz",
            "Wavelength: 20.127 m",
            "Full dipole length (λ/2): 10.064 m (1006.4 cm)",
            "Branch length (λ/4): 5.032 m (503.2 cm)",
        ]

    def test_adjuster_lengthen_lines(self):
        lines = format_result(adjust("14.200", "14.150", "0.95"))

        assert lines[0] == "Measured wavelength: 20.057 m"
        assert lines[1] == "Target wavelength: 20.127 m"
        assert lines[2] == "Measured branch length (λ/4): 5.014 m (501.4 cm)"
        assert lines[3] == "Target branch length (λ/4): 5.032 m (503.2 cm)"
        assert lines[4] == "Length difference: -0.0177 m (-1.77 cm)"
        assert lines[5] == "Lengthen each branch by this length"

    def test_adjuster_shorten_lines(self):
        lines = format_result(adjust("14.100", "14.150", "0.95"))

        assert lines[4] == "Length difference: +0.0178 m (+1.78 cm)"
        assert lines[5] == "Shorten each branch by this length"

    def test_decimals_from_settings(self):
        settings = Settings(length_decimals=2)
        lines = format_result(calculate(14.15, 0.95), settings)
        assert lines[1] == "Wavelength: 20.13 m"

    def test_unsupported_result(self):
        with pytest.raises(TypeError):
            format_result("not a result")


class TestErrors:
    """Test error descriptions."""

    def test_missing_message(self):
        assert describe_error(calculate("", 0.95)) == \
            "Please enter valid numeric values (target frequency)"

    def test_non_positive_message_names_fields(self):
        message = describe_error(adjust("0", "-1", "0.95"))
        assert message == "Values must be positive (measured frequency, target frequency)"

    def test_velocity_factor_message(self):
        assert describe_error(calculate(14.15, 1.2)) == \
            "Velocity factor must be <= 1.0 (velocity factor)"

    def test_error_to_dict(self):
        data = error_to_dict(calculate(14.15, "x"))
        assert data['error'] == 'missing_or_non_numeric'
        assert data['fields'] == ['velocity_factor']


class TestResultToDict:
    """Test JSON-ready result dictionaries."""

    def test_calculator_dict_keeps_full_precision(self):
        result = calculate(14.15, 0.95)
        data = result_to_dict(result)

        assert data['mode'] == 'calculator'
        assert data['branch_length_m'] == result.branch_length_m
        assert json.loads(json.dumps(data)) == data

    def test_adjuster_dict_has_action(self):
        data = result_to_dict(adjust(14.2, 14.15, 0.95))

        assert data['mode'] == 'adjuster'
        assert data['action'] == 'lengthen'
        assert data['difference_m'] < 0
