"""Static reference dataset: categories and units the engine consumes.

One representative category per conversion strategy (two linear ones plus
data storage). Factors are exact where a legal definition exists (inch,
pound, mile); transform pairs are written in their textbook form so that
fixed points such as 0 °C = 32 °F survive floating-point evaluation.

The registry built from these tables is process-wide and read-only; build
it through ``default_registry()``, which constructs it once.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from .registry import UnitRegistry
from .schema import ConversionType
from .units import (
    Category,
    Radix,
    ScaleFactor,
    TimeZoneName,
    TransformPair,
    Unit,
)

CATEGORIES: List[Category] = [
    Category("length", "Length", ConversionType.LINEAR),
    Category("mass", "Mass", ConversionType.LINEAR),
    Category("data-storage", "Data Storage", ConversionType.LINEAR),
    Category("temperature", "Temperature", ConversionType.OFFSET),
    Category("fuel-economy", "Fuel Economy", ConversionType.FORMULA),
    Category("number-base", "Number Base", ConversionType.BASE),
    Category("color", "Color", ConversionType.COLOR),
    Category("timezone", "Time Zone", ConversionType.TIMEZONE),
]


def _linear(unit_id, category_id, name, scale, abbreviations=(), aliases=()):
    return Unit(
        unit_id,
        category_id,
        name,
        tuple(abbreviations),
        tuple(aliases),
        ScaleFactor(scale),
    )


# Base unit: meter
LENGTH_UNITS = [
    _linear("meter", "length", "Meter", 1.0, ["m"], ["meters", "metre", "metres"]),
    _linear("kilometer", "length", "Kilometer", 1000.0, ["km"], ["kilometers", "kilometre"]),
    _linear("centimeter", "length", "Centimeter", 0.01, ["cm"], ["centimeters", "centimetre"]),
    _linear("millimeter", "length", "Millimeter", 0.001, ["mm"], ["millimeters", "millimetre"]),
    _linear("micrometer", "length", "Micrometer", 1e-6, ["µm", "um"], ["micron", "microns"]),
    _linear("mile", "length", "Mile", 1609.344, ["mi"], ["miles"]),
    _linear("yard", "length", "Yard", 0.9144, ["yd"], ["yards"]),
    _linear("foot", "length", "Foot", 0.3048, ["ft", "'"], ["feet"]),
    _linear("inch", "length", "Inch", 0.0254, ["in", '"'], ["inches"]),
    _linear("nautical-mile", "length", "Nautical Mile", 1852.0, ["nmi"], ["nautical miles"]),
]

# Base unit: kilogram
MASS_UNITS = [
    _linear("kilogram", "mass", "Kilogram", 1.0, ["kg"], ["kilograms", "kilo"]),
    _linear("gram", "mass", "Gram", 0.001, ["g"], ["grams"]),
    _linear("milligram", "mass", "Milligram", 1e-6, ["mg"], ["milligrams"]),
    _linear("tonne", "mass", "Tonne", 1000.0, ["t"], ["metric ton", "tonnes"]),
    _linear("pound", "mass", "Pound", 0.45359237, ["lb", "lbs"], ["pounds"]),
    _linear("ounce", "mass", "Ounce", 0.028349523125, ["oz"], ["ounces"]),
    _linear("stone", "mass", "Stone", 6.35029318, ["st"], ["stones"]),
]

# Base unit: byte
DATA_STORAGE_UNITS = [
    _linear("byte", "data-storage", "Byte", 1.0, ["B"], ["bytes"]),
    _linear("bit", "data-storage", "Bit", 0.125, ["b"], ["bits"]),
    _linear("kilobyte", "data-storage", "Kilobyte", 1e3, ["kB", "KB"], ["kilobytes"]),
    _linear("megabyte", "data-storage", "Megabyte", 1e6, ["MB"], ["megabytes"]),
    _linear("gigabyte", "data-storage", "Gigabyte", 1e9, ["GB"], ["gigabytes"]),
    _linear("terabyte", "data-storage", "Terabyte", 1e12, ["TB"], ["terabytes"]),
    _linear("kibibyte", "data-storage", "Kibibyte", 1024.0, ["KiB"], ["kibibytes"]),
    _linear("mebibyte", "data-storage", "Mebibyte", 1024.0**2, ["MiB"], ["mebibytes"]),
    _linear("gibibyte", "data-storage", "Gibibyte", 1024.0**3, ["GiB"], ["gibibytes"]),
]

# Base unit: Kelvin
TEMPERATURE_UNITS = [
    Unit("kelvin", "temperature", "Kelvin", ("K",), ("kelvins",),
         TransformPair(lambda k: k, lambda k: k)),
    Unit("celsius", "temperature", "Celsius", ("°C", "C"), ("centigrade", "degrees celsius"),
         TransformPair(lambda c: c + 273.15, lambda k: k - 273.15)),
    Unit("fahrenheit", "temperature", "Fahrenheit", ("°F", "F"), ("degrees fahrenheit",),
         TransformPair(lambda f: (f - 32) * (5 / 9) + 273.15,
                       lambda k: (k - 273.15) * (9 / 5) + 32)),
    Unit("rankine", "temperature", "Rankine", ("°R", "R"), ("degrees rankine",),
         TransformPair(lambda r: r * (5 / 9), lambda k: k * (9 / 5))),
    Unit("reaumur", "temperature", "Réaumur", ("°Ré", "°Re"), ("reaumur", "degrees reaumur"),
         TransformPair(lambda re: re * (5 / 4) + 273.15, lambda k: (k - 273.15) * (4 / 5))),
    Unit("delisle", "temperature", "Delisle", ("°De",), ("degrees delisle",),
         TransformPair(lambda de: 373.15 - de * (2 / 3), lambda k: (373.15 - k) * (3 / 2))),
    Unit("newton-temp", "temperature", "Newton", ("°N",), ("degrees newton",),
         TransformPair(lambda n: n * (100 / 33) + 273.15, lambda k: (k - 273.15) * (33 / 100))),
    Unit("romer", "temperature", "Rømer", ("°Rø",), ("romer", "degrees romer"),
         TransformPair(lambda ro: (ro - 7.5) * (40 / 21) + 273.15,
                       lambda k: (k - 273.15) * (21 / 40) + 7.5)),
]


def _per_km_per_liter(km_per_liter: float) -> TransformPair:
    return TransformPair(
        lambda value: value * km_per_liter,
        lambda value: value / km_per_liter,
    )


# Base unit: kilometers per liter. L/100km is the reciprocal of km/L.
FUEL_ECONOMY_UNITS = [
    Unit("kilometers-per-liter", "fuel-economy", "Kilometers per liter", ("km/L",),
         ("kilometers per litre",), _per_km_per_liter(1.0)),
    Unit("miles-per-gallon-us", "fuel-economy", "Miles per gallon (US)", ("mpg", "mpg (US)"),
         ("miles per gallon", "mpg us"), _per_km_per_liter(0.425144)),
    Unit("miles-per-gallon-imperial", "fuel-economy", "Miles per gallon (Imperial)",
         ("mpg (imp)", "mpg (UK)"), ("imperial mpg", "uk mpg"), _per_km_per_liter(0.354006)),
    Unit("miles-per-liter", "fuel-economy", "Miles per liter", ("mi/L",),
         ("miles per litre",), _per_km_per_liter(1.609344)),
    Unit("liters-per-100km", "fuel-economy", "Liters per 100 kilometers", ("L/100km",),
         ("liters per 100 km", "litres per 100km"),
         TransformPair(lambda value: 100 / value, lambda value: 100 / value)),
]

NUMBER_BASE_UNITS = [
    Unit("base-binary", "number-base", "Binary", ("bin", "base2"),
         ("binary", "base 2", "base-2", "0b"), Radix(2)),
    Unit("base-octal", "number-base", "Octal", ("oct", "base8"),
         ("octal", "base 8", "base-8", "0o"), Radix(8)),
    Unit("base-decimal", "number-base", "Decimal", ("dec", "base10"),
         ("decimal", "base 10", "base-10"), Radix(10)),
    Unit("base-hexadecimal", "number-base", "Hexadecimal", ("hex", "base16"),
         ("hexadecimal", "base 16", "base-16", "0x"), Radix(16)),
    Unit("base-32", "number-base", "Base32", ("base32",), ("base 32", "base-32"), Radix(32)),
    Unit("base-36", "number-base", "Base36", ("base36",),
         ("base 36", "base-36", "alphanumeric"), Radix(36)),
]

COLOR_UNITS = [
    Unit("color-hex", "color", "Hex", ("#",), ("hex color", "hex code")),
    Unit("color-rgb", "color", "RGB", ("rgb",), ("rgb color", "red green blue")),
    Unit("color-rgba", "color", "RGBA", ("rgba",), ("rgba color", "rgb alpha")),
    Unit("color-hsl", "color", "HSL", ("hsl",), ("hsl color", "hue saturation lightness")),
    Unit("color-hsla", "color", "HSLA", ("hsla",), ("hsla color", "hsl alpha")),
    Unit("color-hsv", "color", "HSV", ("hsv", "hsb"), ("hsv color", "hue saturation value")),
    Unit("color-cmyk", "color", "CMYK", ("cmyk",), ("cmyk color", "print color")),
    Unit("color-lab", "color", "LAB", ("lab", "cielab"), ("lab color", "cie lab")),
    Unit("color-lch", "color", "LCH", ("lch", "cielch"), ("lch color", "cie lch")),
    Unit("color-oklch", "color", "OKLCH", ("oklch",), ("oklch color", "ok lch")),
    Unit("color-oklab", "color", "OKLAB", ("oklab",), ("oklab color", "ok lab")),
    Unit("color-named", "color", "Named Color", ("named", "css"), ("css color", "color name")),
]


def _zone(unit_id, name, iana, abbreviations=(), aliases=()):
    return Unit(unit_id, "timezone", name, tuple(abbreviations), tuple(aliases), TimeZoneName(iana))


TIMEZONE_UNITS = [
    _zone("utc", "UTC", "UTC", ["UTC", "Z"], ["coordinated universal time", "zulu"]),
    _zone("new-york", "New York", "America/New_York", ["EST", "EDT"], ["eastern time"]),
    _zone("chicago", "Chicago", "America/Chicago", ["CST", "CDT"], ["central time"]),
    _zone("los-angeles", "Los Angeles", "America/Los_Angeles", ["PST", "PDT"], ["pacific time"]),
    _zone("sao-paulo", "São Paulo", "America/Sao_Paulo", ["BRT"], ["brasilia time"]),
    _zone("london", "London", "Europe/London", ["GMT", "BST"], ["uk time"]),
    _zone("paris", "Paris", "Europe/Paris", ["CET", "CEST"], ["central european time"]),
    _zone("berlin", "Berlin", "Europe/Berlin", [], ["germany time"]),
    _zone("dubai", "Dubai", "Asia/Dubai", ["GST"], ["gulf time"]),
    _zone("kolkata", "Kolkata", "Asia/Kolkata", ["IST"], ["india time", "mumbai"]),
    _zone("shanghai", "Shanghai", "Asia/Shanghai", [], ["china time", "beijing"]),
    _zone("tokyo", "Tokyo", "Asia/Tokyo", ["JST"], ["japan time"]),
    _zone("sydney", "Sydney", "Australia/Sydney", ["AEST", "AEDT"], ["australian eastern time"]),
    _zone("auckland", "Auckland", "Pacific/Auckland", ["NZST", "NZDT"], ["new zealand time"]),
]

UNITS: List[Unit] = [
    *LENGTH_UNITS,
    *MASS_UNITS,
    *DATA_STORAGE_UNITS,
    *TEMPERATURE_UNITS,
    *FUEL_ECONOMY_UNITS,
    *NUMBER_BASE_UNITS,
    *COLOR_UNITS,
    *TIMEZONE_UNITS,
]


@lru_cache(maxsize=1)
def default_registry() -> UnitRegistry:
    """Return the process-wide registry, building it on first use."""
    return UnitRegistry(CATEGORIES, UNITS)
