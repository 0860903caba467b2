"""Ratio conversion for units related by a constant scale factor."""

from __future__ import annotations

import logging
import math

from ..formatting import format_number, parse_leading_number
from ..schema import ErrorMessages
from ..units import ScaleFactor, Unit

logger = logging.getLogger(__name__)


def linear_convert(from_unit: Unit, to_unit: Unit, raw: str) -> str:
    """Convert through the category's base unit: ``value * from / to``.

    Args:
        from_unit (Unit): Source unit carrying a ``ScaleFactor``.
        to_unit (Unit): Target unit carrying a ``ScaleFactor``.
        raw (str): Raw user input.

    Returns:
        str: Formatted result, ``""`` for non-numeric input, or an error
        sentence when either unit lacks its scale factor.
    """
    value = parse_leading_number(raw)
    if value is None:
        return ""

    for unit in (from_unit, to_unit):
        if not isinstance(unit.payload, ScaleFactor):
            logger.warning("Unit %r has no scale factor", unit.id)
            return ErrorMessages().missing_factor

    base_value = value * from_unit.payload.scale_to_base
    try:
        result = base_value / to_unit.payload.scale_to_base
    except ZeroDivisionError:
        result = math.nan
    return format_number(result)
