"""Route a conversion request to the converter bound to its category."""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from .converters import (
    base_convert,
    color_convert,
    formula_convert,
    linear_convert,
    offset_convert,
    timezone_convert,
)
from .reference_data import default_registry
from .registry import UnitRegistry
from .schema import ConversionType, ErrorMessages
from .units import Unit

logger = logging.getLogger(__name__)

ConverterFn = Callable[[Unit, Unit, str], str]

CONVERTERS: Mapping[ConversionType, ConverterFn] = {
    ConversionType.LINEAR: linear_convert,
    ConversionType.OFFSET: offset_convert,
    ConversionType.FORMULA: formula_convert,
    ConversionType.BASE: base_convert,
    ConversionType.COLOR: color_convert,
    ConversionType.TIMEZONE: timezone_convert,
}

_unbound = [t.value for t in ConversionType if t not in CONVERTERS]
if _unbound:
    raise RuntimeError(f"No converter bound for conversion types: {_unbound}")


def convert(
    from_unit: Unit,
    to_unit: Unit,
    raw: str,
    registry: Optional[UnitRegistry] = None,
    converters: Optional[Mapping[ConversionType, ConverterFn]] = None,
) -> str:
    """Convert ``raw`` from one unit to another.

    Args:
        from_unit (Unit): Source unit; its category selects the strategy.
        to_unit (Unit): Target unit; must share the source unit's category.
        raw (str): Raw user input, possibly partial.
        registry (UnitRegistry | None): Category lookup. Defaults to the
            process-wide reference registry.
        converters (Mapping | None): Strategy table. Defaults to
            ``CONVERTERS``.

    Returns:
        str: The strategy converter's result, passed through unchanged, or
        ``""`` for blank input, or one of the routing errors
        (unknown category, category mismatch, no converter).

    Note:
        Pure function of its inputs: no state is read or written besides the
        immutable registry.
    """
    if not raw.strip():
        return ""

    if registry is None:
        registry = default_registry()
    if converters is None:
        converters = CONVERTERS

    messages = ErrorMessages()
    category = registry.get_category(from_unit.category_id)
    if category is None:
        return messages.unknown_category
    if from_unit.category_id != to_unit.category_id:
        return messages.category_mismatch

    converter = converters.get(category.conversion_type)
    if converter is None:
        return messages.no_converter

    logger.debug(
        "Routing %s -> %s through %s converter",
        from_unit.id,
        to_unit.id,
        category.conversion_type.value,
    )
    return converter(from_unit, to_unit, raw)
