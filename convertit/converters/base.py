"""Positional numeral-base conversion (radix 2-36).

Input is ``[-]{integer}[.{fraction}]`` in the source radix, case-insensitive.
A prefix or subscript suffix matching the source radix (as produced by this
converter) is accepted, so outputs can be fed straight back in.

The integer part is accumulated by positional weighting and re-emitted by
repeated division. The fractional part is accumulated exactly as
``sum(d_i / radix**i)`` and re-emitted by repeated multiplication, capped at
``MAX_FRACTION_DIGITS`` digits so non-terminating expansions stop.

Output shape by target radix:
    - 2 -> ``0b`` prefix, 8 -> ``0o`` prefix, 16 -> ``0x`` prefix
    - any other radix -> Unicode subscript suffix naming the radix (``255₁₀``)
Digits are emitted in uppercase.
"""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Tuple

from ..schema import ErrorMessages
from ..units import Radix, Unit

logger = logging.getLogger(__name__)

MIN_RADIX: int = 2
MAX_RADIX: int = 36
MAX_FRACTION_DIGITS: int = 10

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
PREFIXES = {2: "0b", 8: "0o", 16: "0x"}
_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


def radix_suffix(radix: int) -> str:
    """Return the subscript notation for ``radix`` (``10`` -> ``₁₀``)."""
    return str(radix).translate(_SUBSCRIPTS)


def _digit_value(char: str, radix: int) -> int:
    value = DIGITS.find(char.upper())
    if value < 0 or value >= radix:
        raise ValueError(f"Digit {char!r} is not valid in base {radix}")
    return value


def _strip_notation(text: str, radix: int) -> str:
    prefix = PREFIXES.get(radix)
    if prefix is not None:
        if text.lower().startswith(prefix):
            return text[len(prefix):]
        return text
    suffix = radix_suffix(radix)
    if text.endswith(suffix):
        return text[: -len(suffix)]
    return text


def parse_positional(text: str, radix: int) -> Tuple[bool, int, Fraction]:
    """Parse a number written in ``radix``.

    Args:
        text (str): Trimmed input such as ``"-1010.1"`` or ``"0xFF"``.
        radix (int): Source radix, 2-36.

    Returns:
        tuple[bool, int, Fraction]: ``(negative, integer_part, fraction)``
        with ``0 <= fraction < 1``.

    Raises:
        ValueError: If any character is invalid for ``radix`` or the input
            has no digits.

    Note:
        A bare ``"."`` has no digits and is rejected rather than read as 0.
    """
    negative = text.startswith("-")
    if negative or text.startswith("+"):
        text = text[1:]
    text = _strip_notation(text.strip(), radix)

    integer_text, _, fraction_text = text.partition(".")
    if not integer_text and not fraction_text:
        raise ValueError("No digits to convert")

    integer = 0
    for char in integer_text:
        integer = integer * radix + _digit_value(char, radix)

    fraction = Fraction(0)
    for position, char in enumerate(fraction_text, start=1):
        fraction += Fraction(_digit_value(char, radix), radix**position)

    return negative, integer, fraction


def render_positional(integer: int, fraction: Fraction, radix: int) -> str:
    """Render non-negative integer and fractional parts in ``radix``."""
    digits = []
    while True:
        integer, remainder = divmod(integer, radix)
        digits.append(DIGITS[remainder])
        if integer == 0:
            break
    text = "".join(reversed(digits))

    fraction_digits = []
    while fraction > 0 and len(fraction_digits) < MAX_FRACTION_DIGITS:
        fraction *= radix
        digit = int(fraction)
        fraction_digits.append(DIGITS[digit])
        fraction -= digit
    if fraction_digits:
        text += "." + "".join(fraction_digits)
    return text


def format_with_notation(digits: str, radix: int, negative: bool = False) -> str:
    sign = "-" if negative else ""
    prefix = PREFIXES.get(radix)
    if prefix is not None:
        return f"{sign}{prefix}{digits}"
    return f"{sign}{digits}{radix_suffix(radix)}"


def base_convert(from_unit: Unit, to_unit: Unit, raw: str) -> str:
    """Convert a number between positional bases.

    Args:
        from_unit (Unit): Source unit carrying a ``Radix``.
        to_unit (Unit): Target unit carrying a ``Radix``.
        raw (str): Raw user input.

    Returns:
        str: Prefixed/suffixed result, ``""`` for blank input, or one of
        ``"Error: Missing base information"``,
        ``"Error: Base must be between 2 and 36"``,
        ``"Error: Invalid number for base"``.
    """
    text = raw.strip()
    if not text:
        return ""

    messages = ErrorMessages()
    for unit in (from_unit, to_unit):
        if not isinstance(unit.payload, Radix):
            logger.warning("Unit %r has no radix", unit.id)
            return messages.missing_base

    source = from_unit.payload.radix
    target = to_unit.payload.radix
    if not (MIN_RADIX <= source <= MAX_RADIX and MIN_RADIX <= target <= MAX_RADIX):
        return messages.base_out_of_range

    try:
        negative, integer, fraction = parse_positional(text, source)
    except ValueError:
        return messages.invalid_base_number

    digits = render_positional(integer, fraction, target)
    is_zero = integer == 0 and fraction == 0
    return format_with_notation(digits, target, negative and not is_zero)
