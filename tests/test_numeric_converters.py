"""Linear, offset and formula converters."""

import logging
import math

import pytest

from convertit.converters import formula_convert, linear_convert, offset_convert
from convertit.units import ScaleFactor, TransformPair, Unit


class TestLinear:
    @pytest.mark.parametrize(
        "source, target, raw, expected",
        [
            ("kilometer", "meter", "1", "1000"),
            ("meter", "foot", "1", "3.28084"),
            ("mile", "kilometer", "1", "1.609344"),
            ("inch", "centimeter", "1", "2.54"),
            ("pound", "kilogram", "1", "0.45359237"),
            ("byte", "bit", "1", "8"),
            ("gibibyte", "mebibyte", "1", "1024"),
            ("kilometer", "meter", "12abc", "12000"),
            ("meter", "meter", "-3.5", "-3.5"),
            ("terabyte", "bit", "1", "8.000000e+12"),
            ("bit", "byte", "8001", "1000.13"),
        ],
    )
    def test_reference_values(self, unit, source, target, raw, expected):
        assert linear_convert(unit(source), unit(target), raw) == expected

    @pytest.mark.parametrize("raw", ["", "  ", "abc", "-", "."])
    def test_non_numeric_input_is_silent(self, unit, raw):
        assert linear_convert(unit("meter"), unit("foot"), raw) == ""

    def test_missing_factor(self, unit, caplog):
        caplog.set_level(logging.WARNING)
        bare = Unit("cubit", "length", "Cubit")
        assert linear_convert(bare, unit("meter"), "1") == "Error: Missing conversion factor"
        assert linear_convert(unit("meter"), bare, "1") == "Error: Missing conversion factor"
        assert any("cubit" in rec.message for rec in caplog.records)

    def test_zero_target_factor_is_invalid(self, unit):
        degenerate = Unit("nothing", "length", "Nothing", payload=ScaleFactor(0.0))
        assert linear_convert(unit("meter"), degenerate, "1") == "Invalid"

    def test_infinite_input_is_invalid(self, unit):
        assert linear_convert(unit("meter"), unit("foot"), "Infinity") == "Invalid"


class TestOffset:
    @pytest.mark.parametrize(
        "source, target, raw, expected",
        [
            ("celsius", "fahrenheit", "0", "32"),
            ("celsius", "fahrenheit", "100", "212"),
            ("fahrenheit", "celsius", "-40", "-40"),
            ("celsius", "kelvin", "0", "273.15"),
            ("kelvin", "celsius", "0", "-273.15"),
            ("kelvin", "rankine", "0", "0"),
            ("celsius", "reaumur", "100", "80"),
            ("celsius", "delisle", "100", "0"),
            ("celsius", "newton-temp", "100", "33"),
            ("celsius", "romer", "100", "60"),
        ],
    )
    def test_reference_values(self, unit, source, target, raw, expected):
        assert offset_convert(unit(source), unit(target), raw) == expected

    def test_non_numeric_input_is_silent(self, unit):
        assert offset_convert(unit("celsius"), unit("kelvin"), "warm") == ""

    def test_missing_formula(self, unit):
        bare = Unit("gas-mark", "temperature", "Gas Mark")
        assert (
            offset_convert(bare, unit("celsius"), "4")
            == "Error: Missing temperature formula"
        )


class TestFormula:
    def test_mpg_to_liters_per_100km(self, unit):
        result = formula_convert(
            unit("miles-per-gallon-us"), unit("liters-per-100km"), "30"
        )
        assert math.isclose(float(result), 100 / (30 * 0.425144), rel_tol=1e-6)

    def test_reciprocal_unit(self, unit):
        assert formula_convert(unit("liters-per-100km"), unit("kilometers-per-liter"), "5") == "20"
        assert formula_convert(unit("kilometers-per-liter"), unit("liters-per-100km"), "20") == "5"

    def test_division_by_zero_is_invalid(self, unit):
        assert formula_convert(unit("liters-per-100km"), unit("kilometers-per-liter"), "0") == "Invalid"

    def test_overflow_is_invalid(self):
        square = TransformPair(lambda v: v**2, lambda v: v**0.5)
        huge = Unit("squared", "test", "Squared", payload=square)
        assert formula_convert(huge, huge, "1e200") == "Invalid"

    def test_missing_formula(self, unit):
        bare = Unit("furlongs", "fuel-economy", "Furlongs")
        assert formula_convert(unit("miles-per-liter"), bare, "1") == "Error: Missing formula"

    def test_non_numeric_input_is_silent(self, unit):
        assert formula_convert(unit("miles-per-liter"), unit("kilometers-per-liter"), "x") == ""
