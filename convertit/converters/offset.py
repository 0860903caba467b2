"""Affine (temperature-style) conversion through Kelvin."""

from __future__ import annotations

import logging

from ..formatting import format_number, parse_leading_number
from ..schema import ErrorMessages
from ..units import TransformPair, Unit

logger = logging.getLogger(__name__)


def offset_convert(from_unit: Unit, to_unit: Unit, raw: str) -> str:
    """Convert ``value -> Kelvin -> target`` with each unit's transform pair.

    Args:
        from_unit (Unit): Source unit; its ``to_base`` maps into Kelvin.
        to_unit (Unit): Target unit; its ``from_base`` maps out of Kelvin.
        raw (str): Raw user input.

    Returns:
        str: Formatted temperature, ``""`` for non-numeric input, or
        ``"Error: Missing temperature formula"``.
    """
    value = parse_leading_number(raw)
    if value is None:
        return ""

    for unit in (from_unit, to_unit):
        if not isinstance(unit.payload, TransformPair):
            logger.warning("Unit %r has no temperature formula", unit.id)
            return ErrorMessages().missing_temperature_formula

    kelvin = from_unit.payload.to_base(value)
    return format_number(to_unit.payload.from_base(kelvin))
