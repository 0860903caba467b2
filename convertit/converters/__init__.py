"""
Strategy converters, one per conversion type.

Every converter shares the signature ``(from_unit, to_unit, raw) -> str`` and
never raises for user input or degraded unit data: the result is either the
formatted value, ``""`` while no conversion is possible yet, ``"Invalid"``
for an undefined numeric outcome, or an ``"Error: "`` sentence.

Modules:
    linear:
        Ratio conversion through a base unit.

    offset:
        Affine temperature conversion through Kelvin.

    formula:
        Arbitrary forward/inverse function pairs (e.g. reciprocal fuel
        economy units).

    base:
        Positional numeral bases 2-36 with fractional parts.

    color:
        Twelve colour formats through an RGBA hub; the maths lives in
        ``color_spaces`` and the CSS name table in ``named_colors``.

    timezone:
        Date/time rendering across IANA time zones.

Design Principle:
    Converters do not import each other or the engine. Numeric strategies
    share only the formatter in ``convertit.formatting``.
"""

from .base import base_convert
from .color import color_convert
from .formula import formula_convert
from .linear import linear_convert
from .offset import offset_convert
from .timezone import timezone_convert

__all__ = [
    "base_convert",
    "color_convert",
    "formula_convert",
    "linear_convert",
    "offset_convert",
    "timezone_convert",
]
