"""
A Python package for converting values between units of measure.

Routes each request to the strategy its category declares: linear scale
factors, offset and formula transforms, positional number bases, colour
formats, and IANA time zones. Every outcome, including failures, is a
display string.

Modules:
    - engine: Dispatches a conversion to its category's converter.
    - formatting: Renders numeric results with magnitude-dependent precision.
    - registry: Indexes categories and units for lookup by id or alias.
    - reference_data: The bundled categories and units.
    - tables: Tabulates one input against a whole category and exports CSV.
    - converters: One module per conversion strategy.
"""

__version__ = "1.0.0"

from .engine import CONVERTERS, convert
from .formatting import format_number
from .reference_data import default_registry
from .registry import UnitRegistry
from .schema import ConversionType, ErrorMessages, TableColumns, is_error
from .tables import conversion_table, save_conversion_table
from .units import (
    Category,
    Radix,
    ScaleFactor,
    TimeZoneName,
    TransformPair,
    Unit,
)

__all__ = [
    # Data model
    "Category",
    "ConversionType",
    "Radix",
    "ScaleFactor",
    "TimeZoneName",
    "TransformPair",
    "Unit",
    # Registry
    "UnitRegistry",
    "default_registry",
    # Conversion
    "CONVERTERS",
    "convert",
    "format_number",
    "ErrorMessages",
    "is_error",
    # Tables
    "TableColumns",
    "conversion_table",
    "save_conversion_table",
]
