"""Numeric display formatting shared by every numeric converter.

This module is the single source of output-formatting truth: converters hand
over raw floating values and receive a stable display string. Round-trip
tolerances in the tests derive from the precision bands defined here.

Policy:
    - NaN and +/-Inf render as ``"Invalid"``.
    - Exact zero (including negative zero) renders as ``"0"``.
    - ``|x| >= 1e12`` or ``0 < |x| < 1e-6`` renders in exponential notation
      with 6 fractional digits and an unpadded exponent (``1.000000e-7``).
    - Otherwise the number of decimals follows the magnitude of the input:
      ``>= 1000`` -> 2, ``>= 1`` -> 6, ``>= 0.001`` -> 8, else 10. Trailing
      zeros and a bare trailing decimal point are stripped. Exact ties round
      away from zero (``1000.125`` -> ``1000.13``).
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Tuple

from .schema import INVALID

SCIENTIFIC_UPPER: float = 1e12
SCIENTIFIC_LOWER: float = 1e-6
EXPONENT_DIGITS: int = 6

# (lower magnitude bound, decimals), checked in order
DECIMAL_BANDS: Tuple[Tuple[float, int], ...] = (
    (1000.0, 2),
    (1.0, 6),
    (0.001, 8),
)
SMALLEST_BAND_DECIMALS: int = 10

_LEADING_NUMBER = re.compile(
    r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def decimals_for_magnitude(magnitude: float) -> int:
    """Return the fixed-point precision used for a value of this magnitude.

    Args:
        magnitude (float): Absolute value of the number before rounding.

    Returns:
        int: Number of decimals for fixed-point rendering.

    Note:
        The band is chosen on the unrounded input, so ``999.9999999`` stays in
        the 6-decimal band and renders as ``"1000"`` after rounding.
    """
    for lower, decimals in DECIMAL_BANDS:
        if magnitude >= lower:
            return decimals
    return SMALLEST_BAND_DECIMALS


def _strip_trailing_zeros(text: str) -> str:
    if "." not in text:
        return text
    text = text.rstrip("0")
    if text.endswith("."):
        text = text[:-1]
    return text


def _fixed_half_up(value: float, decimals: int) -> str:
    # exact binary value, ties rounded away from zero
    quantum = Decimal(1).scaleb(-decimals)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def _exponential(value: float) -> str:
    mantissa, exponent = f"{value:.{EXPONENT_DIGITS}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def format_number(value: float) -> str:
    """Format a raw floating value for display.

    Args:
        value (float): Raw converter output.

    Returns:
        str: Display string following the module policy.

    Examples:
        >>> format_number(42.0)
        '42'
        >>> format_number(1234.5678)
        '1234.57'
        >>> format_number(1e12)
        '1.000000e+12'
        >>> format_number(float("nan"))
        'Invalid'
    """
    v = float(value)
    if not math.isfinite(v):
        return INVALID
    if v == 0:
        return "0"

    magnitude = abs(v)
    if magnitude >= SCIENTIFIC_UPPER or magnitude < SCIENTIFIC_LOWER:
        return _exponential(v)

    decimals = decimals_for_magnitude(magnitude)
    return _strip_trailing_zeros(_fixed_half_up(v, decimals))


def parse_leading_number(raw: str) -> Optional[float]:
    """Parse the longest numeric prefix of ``raw``.

    Partial input such as ``"12."`` or ``"3e"`` is normal while a user types,
    so anything after a valid numeric prefix is ignored.

    Args:
        raw (str): Raw user input.

    Returns:
        float | None: Parsed value, or None when no numeric prefix exists.
    """
    match = _LEADING_NUMBER.match(raw.strip())
    if match is None:
        return None
    text = match.group(0)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)
