import math

import pytest

from convertit.formatting import (
    decimals_for_magnitude,
    format_number,
    parse_leading_number,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0"),
        (-0.0, "0"),
        (42.0, "42"),
        (-2.5, "-2.5"),
        (1.5, "1.5"),
        (1234.5678, "1234.57"),
        (123456789012.0, "123456789012"),
        (0.00123456789, "0.00123457"),
        (0.000123456789, "0.0001234568"),
        (1e12, "1.000000e+12"),
        (-3.5e13, "-3.500000e+13"),
        (1e-7, "1.000000e-7"),
    ],
)
def test_format_number_bands(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_values_are_invalid(value):
    assert format_number(value) == "Invalid"


def test_band_is_chosen_before_rounding():
    # stays in the 6-decimal band, rounds up to an integer
    assert format_number(999.9999999) == "1000"
    assert format_number(999.999) == "999.999"


def test_exact_ties_round_away_from_zero():
    assert format_number(1000.125) == "1000.13"
    assert format_number(-1000.125) == "-1000.13"
    assert format_number(1000.124) == "1000.12"


def test_trailing_zeros_and_point_stripped():
    assert format_number(2.50) == "2.5"
    assert format_number(1000.001) == "1000"
    assert "." not in format_number(7.0)


def test_decimals_for_magnitude():
    assert decimals_for_magnitude(5000) == 2
    assert decimals_for_magnitude(1) == 6
    assert decimals_for_magnitude(0.5) == 8
    assert decimals_for_magnitude(0.0005) == 10


class TestParseLeadingNumber:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("12", 12.0),
            ("  3.5 ", 3.5),
            ("12abc", 12.0),
            ("12.", 12.0),
            (".5", 0.5),
            ("-4", -4.0),
            ("+4", 4.0),
            ("1e3", 1000.0),
            ("3e", 3.0),
        ],
    )
    def test_numeric_prefix(self, raw, expected):
        assert math.isclose(parse_leading_number(raw), expected)

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "-", ".", "e5"])
    def test_no_numeric_prefix(self, raw):
        assert parse_leading_number(raw) is None

    def test_infinity_literal(self):
        assert parse_leading_number("Infinity") == math.inf
        assert parse_leading_number("-Infinity") == -math.inf
