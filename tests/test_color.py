import pytest

from convertit.converters.color import color_convert, format_hex, parse_hex, to_rgba
from convertit.converters.color_spaces import (
    RGBA,
    rgb_to_hsl,
    rgb_to_lab,
    round_half_up,
)
from convertit.converters.named_colors import NAMED_COLORS, nearest_named_color
from convertit.units import Unit

RED = "#ff0000"


def _convert(unit, source, target, raw):
    return color_convert(unit(f"color-{source}"), unit(f"color-{target}"), raw)


class TestFromHex:
    @pytest.mark.parametrize(
        "target, expected",
        [
            ("hex", "#ff0000"),
            ("rgb", "rgb(255, 0, 0)"),
            ("rgba", "rgba(255, 0, 0, 1.00)"),
            ("hsl", "hsl(0, 100%, 50%)"),
            ("hsla", "hsla(0, 100%, 50%, 1.00)"),
            ("hsv", "hsv(0, 100%, 100%)"),
            ("cmyk", "cmyk(0%, 100%, 100%, 0%)"),
            ("named", "red"),
        ],
    )
    def test_red(self, unit, target, expected):
        assert _convert(unit, "hex", target, RED) == expected

    def test_short_and_uppercase_hex(self, unit):
        assert _convert(unit, "hex", "rgb", "#F00") == "rgb(255, 0, 0)"
        assert _convert(unit, "hex", "rgb", "00FF00") == "rgb(0, 255, 0)"

    def test_hex_output_is_lowercase(self, unit):
        assert _convert(unit, "rgb", "hex", "rgb(171, 205, 239)") == "#abcdef"

    def test_eight_digit_hex_carries_alpha(self, unit):
        assert _convert(unit, "hex", "rgba", "#ff000080") == "rgba(255, 0, 0, 0.50)"
        assert _convert(unit, "rgba", "hex", "rgba(255, 0, 0, 0.5)") == "#ff000080"

    def test_black_has_no_hue_or_ink(self, unit):
        assert _convert(unit, "hex", "hsl", "#000000") == "hsl(0, 0%, 0%)"
        assert _convert(unit, "hex", "cmyk", "#000000") == "cmyk(0%, 0%, 0%, 100%)"


class TestParsers:
    @pytest.mark.parametrize(
        "source, raw",
        [
            ("rgb", "rgb(255, 0, 0)"),
            ("rgb", "255, 0, 0"),
            ("rgb", "rgb(255 0 0)"),
            ("rgb", "rgb(100%, 0%, 0%)"),
            ("rgba", "rgba(255, 0, 0, 1)"),
            ("hsl", "hsl(0, 100%, 50%)"),
            ("hsl", "0, 100, 50"),
            ("hsla", "hsla(0, 100%, 50%, 1)"),
            ("hsv", "hsv(0, 100%, 100%)"),
            ("hsv", "hsb(0, 100%, 100%)"),
            ("cmyk", "cmyk(0%, 100%, 100%, 0%)"),
            ("named", "red"),
            ("named", "  RED "),
        ],
    )
    def test_formats_resolve_to_red(self, unit, source, raw):
        assert _convert(unit, source, "hex", raw) == RED

    def test_named_colours(self, unit):
        assert _convert(unit, "named", "hex", "green") == "#008000"
        assert _convert(unit, "hex", "named", "#663399") == "rebeccapurple"

    def test_hsl_green(self, unit):
        assert _convert(unit, "hsl", "hex", "hsl(120, 100%, 50%)") == "#00ff00"


class TestPerceptualSpaces:
    def test_white_and_black_in_lab(self, unit):
        assert _convert(unit, "hex", "lab", "#ffffff") == "lab(100.0% 0.0 0.0)"
        assert _convert(unit, "hex", "lab", "#000000") == "lab(0.0% 0.0 0.0)"
        assert _convert(unit, "hex", "lch", "#ffffff") == "lch(100.0% 0.0 0.0)"

    def test_white_in_oklab(self, unit):
        assert _convert(unit, "hex", "oklab", "#ffffff") == "oklab(1.000 0.000 0.000)"
        assert _convert(unit, "hex", "oklch", "#ffffff") == "oklch(1.000 0.000 0.00)"

    def test_mid_grey(self, unit):
        assert _convert(unit, "lab", "rgb", "lab(50% 0 0)") == "rgb(119, 119, 119)"
        assert _convert(unit, "oklab", "rgb", "oklab(0.5 0 0)") == "rgb(99, 99, 99)"
        assert _convert(unit, "oklab", "rgb", "oklab(50% 0 0)") == "rgb(99, 99, 99)"

    @pytest.mark.parametrize(
        "source, raw",
        [
            ("lch", "lch(50% 50 0)"),
            ("lab", "lab(50, 20, -30)"),
            ("oklch", "oklch(0.5 0.15 0)"),
            ("oklch", "oklch(0.7 0.1 200 / 0.5)"),
        ],
    )
    def test_css_syntax_parses(self, unit, source, raw):
        assert _convert(unit, source, "rgb", raw).startswith("rgb(")

    def test_out_of_gamut_is_clipped(self, unit):
        assert _convert(unit, "oklch", "hex", "oklch(0.7 0.4 150)").startswith("#")

    def test_alpha_rendered_after_slash(self, unit):
        result = _convert(unit, "rgba", "lab", "rgba(255, 255, 255, 0.5)")
        assert result == "lab(100.0% 0.0 0.0 / 0.50)"

    def test_white_survives_lab_round_trip(self, unit):
        lab = _convert(unit, "hex", "lab", "#ffffff")
        assert _convert(unit, "lab", "hex", lab) == "#ffffff"


class TestErrors:
    @pytest.mark.parametrize(
        "source, raw",
        [
            ("hex", "#12345"),
            ("hex", "#gggggg"),
            ("rgb", "rgb(a, b, c)"),
            ("rgb", "rgb(1, 2)"),
            ("rgb", "hsl(0, 0%, 0%)"),
            ("rgba", "rgba(0, 0, 0, 2)"),
            ("named", "notacolor"),
            ("cmyk", "cmyk(1, 2, 3)"),
        ],
    )
    def test_invalid_format(self, unit, source, raw):
        assert _convert(unit, source, "hex", raw) == "Error: Invalid color format"

    @pytest.mark.parametrize("raw", ["rgb(256, 0, 0)", "rgb(-1, 0, 0)", "300, 0, 0"])
    def test_rgb_out_of_range(self, unit, raw):
        assert _convert(unit, "rgb", "hex", raw) == "Error: RGB values must be 0-255"

    def test_unsupported_format(self, unit):
        xyz = Unit("color-xyz", "color", "XYZ")
        assert color_convert(xyz, unit("color-hex"), RED) == 'Error: Unsupported format "xyz"'
        assert color_convert(unit("color-hex"), xyz, RED) == 'Error: Unsupported format "xyz"'

    def test_blank_input_is_silent(self, unit):
        assert _convert(unit, "hex", "rgb", "  ") == ""


class TestHelpers:
    def test_round_half_up(self):
        assert round_half_up(127.5) == 128
        assert round_half_up(0.5) == 1
        assert round_half_up(2.4999) == 2

    def test_parse_hex_alpha(self):
        r, g, b, alpha = parse_hex("#0000ff80")
        assert (r, g, b) == (0, 0, 255)
        assert alpha == pytest.approx(128 / 255)

    def test_to_rgba_range_check_and_clip(self):
        assert to_rgba((256.0, 0.0, 0.0, 1.0)) is None
        assert to_rgba((256.0, 0.0, 0.0, 1.0), clip=True) == RGBA(255, 0, 0)
        assert to_rgba((float("nan"), 0.0, 0.0, 1.0), clip=True) is None

    def test_format_hex_opaque(self):
        assert format_hex(RGBA(1, 2, 3)) == "#010203"

    def test_hsl_of_grey_has_no_saturation(self):
        h, s, l = rgb_to_hsl(128, 128, 128)
        assert (h, s) == (0.0, 0.0)
        assert l == pytest.approx(50.196, abs=1e-3)

    def test_lab_of_white(self):
        l, a, b = rgb_to_lab(255, 255, 255)
        assert l == pytest.approx(100.0, abs=1e-3)
        assert a == pytest.approx(0.0, abs=1e-2)
        assert b == pytest.approx(0.0, abs=1e-2)

    def test_nearest_named_colour_prefers_first_alias(self):
        assert NAMED_COLORS["cyan"] == NAMED_COLORS["aqua"]
        assert nearest_named_color(0, 255, 255) == "aqua"
        assert nearest_named_color(250, 5, 5) == "red"
