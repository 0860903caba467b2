"""Conversion through arbitrary forward/inverse function pairs.

Used where units are not related by a ratio, e.g. fuel economy where
L/100km is the reciprocal of km/L. The base quantity is category specific.
Undefined numeric outcomes (division by zero, overflow) render as
``"Invalid"`` through the formatter instead of raising.
"""

from __future__ import annotations

import logging
import math

from ..formatting import format_number, parse_leading_number
from ..schema import ErrorMessages
from ..units import TransformPair, Unit

logger = logging.getLogger(__name__)


def formula_convert(from_unit: Unit, to_unit: Unit, raw: str) -> str:
    value = parse_leading_number(raw)
    if value is None:
        return ""

    for unit in (from_unit, to_unit):
        if not isinstance(unit.payload, TransformPair):
            logger.warning("Unit %r has no conversion formula", unit.id)
            return ErrorMessages().missing_formula

    try:
        base_value = from_unit.payload.to_base(value)
        result = to_unit.payload.from_base(base_value)
    except (ZeroDivisionError, OverflowError):
        result = math.nan
    return format_number(result)
