import pytest

from convertit.converters.base import (
    MAX_FRACTION_DIGITS,
    base_convert,
    parse_positional,
    radix_suffix,
)
from convertit.units import Radix, Unit


def _radix_unit(radix):
    return Unit(f"base-{radix}-custom", "number-base", f"Base {radix}", payload=Radix(radix))


@pytest.mark.parametrize(
    "target, expected",
    [
        ("base-binary", "0b11111111"),
        ("base-octal", "0o377"),
        ("base-decimal", "255₁₀"),
        ("base-hexadecimal", "0xFF"),
        ("base-32", "7V₃₂"),
        ("base-36", "73₃₆"),
    ],
)
def test_decimal_255_in_every_base(unit, target, expected):
    assert base_convert(unit("base-decimal"), unit(target), "255") == expected


class TestInputNotation:
    def test_lowercase_digits_accepted(self, unit):
        assert base_convert(unit("base-hexadecimal"), unit("base-decimal"), "ff") == "255₁₀"

    def test_own_prefix_accepted(self, unit):
        assert base_convert(unit("base-hexadecimal"), unit("base-decimal"), "0xFF") == "255₁₀"
        assert base_convert(unit("base-binary"), unit("base-octal"), "0b1000") == "0o10"

    def test_own_subscript_accepted(self, unit):
        assert base_convert(unit("base-decimal"), unit("base-hexadecimal"), "255₁₀") == "0xFF"

    def test_output_feeds_back(self, unit):
        hexa, b36 = unit("base-hexadecimal"), unit("base-36")
        there = base_convert(hexa, b36, "BEEF")
        assert base_convert(b36, hexa, there) == "0xBEEF"

    def test_surrounding_whitespace(self, unit):
        assert base_convert(unit("base-decimal"), unit("base-binary"), "  5 ") == "0b101"


class TestSignAndFraction:
    def test_negative(self, unit):
        assert base_convert(unit("base-binary"), unit("base-decimal"), "-1010") == "-10₁₀"
        assert base_convert(unit("base-decimal"), unit("base-hexadecimal"), "-255") == "-0xFF"

    def test_negative_zero_drops_sign(self, unit):
        assert base_convert(unit("base-decimal"), unit("base-decimal"), "-0") == "0₁₀"

    def test_terminating_fraction(self, unit):
        assert base_convert(unit("base-binary"), unit("base-decimal"), "0.1") == "0.5₁₀"
        assert base_convert(unit("base-decimal"), unit("base-binary"), "2.75") == "0b10.11"

    def test_non_terminating_fraction_is_capped(self, unit):
        result = base_convert(unit("base-decimal"), unit("base-binary"), "0.1")
        assert result == "0b0.0001100110"
        assert len(result.split(".")[1]) == MAX_FRACTION_DIGITS

    def test_leading_point(self, unit):
        assert base_convert(unit("base-decimal"), unit("base-binary"), ".5") == "0b0.1"


class TestErrors:
    @pytest.mark.parametrize("raw", ["102", "12.2", "0x1", "1-0", "."])
    def test_invalid_digits_for_binary(self, unit, raw):
        assert (
            base_convert(unit("base-binary"), unit("base-decimal"), raw)
            == "Error: Invalid number for base"
        )

    def test_empty_input_is_silent(self, unit):
        assert base_convert(unit("base-binary"), unit("base-decimal"), "   ") == ""

    def test_missing_radix(self, unit):
        bare = Unit("base-roman", "number-base", "Roman")
        assert base_convert(bare, unit("base-decimal"), "12") == "Error: Missing base information"

    @pytest.mark.parametrize("radix", [1, 37, 0])
    def test_radix_out_of_range(self, unit, radix):
        assert (
            base_convert(_radix_unit(radix), unit("base-decimal"), "1")
            == "Error: Base must be between 2 and 36"
        )
        assert (
            base_convert(unit("base-decimal"), _radix_unit(radix), "1")
            == "Error: Base must be between 2 and 36"
        )


def test_parse_positional_parts():
    negative, integer, fraction = parse_positional("-z.I", 36)
    assert negative is True
    assert integer == 35
    assert fraction == pytest.approx(18 / 36)


def test_radix_suffix():
    assert radix_suffix(7) == "₇"
    assert radix_suffix(36) == "₃₆"
