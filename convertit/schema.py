"""Define the conversion-type tags, stable error sentences and table labels."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ConversionType(enum.Enum):
    """Algorithm family a category is bound to."""

    LINEAR = "linear"
    OFFSET = "offset"
    FORMULA = "formula"
    BASE = "base"
    COLOR = "color"
    TIMEZONE = "timezone"


@dataclass(frozen=True)
class ErrorMessages:
    """Container for the user-facing error sentences.

    The display layer renders converter output verbatim, so these strings are
    part of the public contract and must stay stable. Every reported error
    starts with ``"Error: "``; the silent tier (no input yet) is the empty
    string and the undefined numeric outcome is ``"Invalid"``.

    Attributes:
        unknown_category: The source unit's category id resolves to nothing.
        category_mismatch: Source and target units belong to different
            categories.
        no_converter: No converter is registered for the category's
            conversion type.
        missing_factor: A linear unit lacks its scale factor.
        missing_temperature_formula: An offset unit lacks its transform pair.
        missing_formula: A formula unit lacks its transform pair.
        missing_base: A base unit lacks its radix.
        base_out_of_range: A radix lies outside 2-36.
        invalid_base_number: The input holds a digit invalid for the source
            radix.
        invalid_color: The input cannot be parsed in the source colour format.
        rgb_out_of_range: A parsed RGB channel lies outside 0-255.
        invalid_timezone: A time-zone unit lacks a recognised IANA name.
        invalid_datetime: No date/time parser accepted the input.
    """

    unknown_category: str = "Error: Unknown category"
    category_mismatch: str = "Error: Units must be in the same category"
    no_converter: str = "Error: No converter for this type"
    missing_factor: str = "Error: Missing conversion factor"
    missing_temperature_formula: str = "Error: Missing temperature formula"
    missing_formula: str = "Error: Missing formula"
    missing_base: str = "Error: Missing base information"
    base_out_of_range: str = "Error: Base must be between 2 and 36"
    invalid_base_number: str = "Error: Invalid number for base"
    invalid_color: str = "Error: Invalid color format"
    rgb_out_of_range: str = "Error: RGB values must be 0-255"
    invalid_timezone: str = "Error: Invalid timezone"
    invalid_datetime: str = "Error: Invalid date/time"

    @staticmethod
    def unsupported_color_format(fmt: str) -> str:
        return f'Error: Unsupported format "{fmt}"'


ERROR_PREFIX = "Error: "
INVALID = "Invalid"


def is_error(result: str) -> bool:
    """Return True when a converter result is a reported error."""
    return result.startswith(ERROR_PREFIX)


@dataclass(frozen=True)
class TableColumns:
    """Column labels used by conversion-table DataFrames."""

    unit_id: str = "Unit ID"
    unit_name: str = "Unit"
    abbreviation: str = "Abbreviation"
    result: str = "Result"
