"""Unit and category records consumed by the conversion engine.

All records are immutable and built once when the reference data loads. A
unit carries exactly one strategy payload, selected by its category's
conversion type:

    - ``ScaleFactor``: linear units (value * scale = base value).
    - ``TransformPair``: offset and formula units (forward/inverse functions).
    - ``Radix``: positional number bases.
    - ``TimeZoneName``: IANA time zones.

Colour units carry no payload; the suffix of the unit id names the format.
``payload=None`` on a non-colour unit models degraded data and is reported by
the converters as a distinct error, never as bad user input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from .schema import ConversionType

COLOR_ID_PREFIX = "color-"


@dataclass(frozen=True)
class ScaleFactor:
    scale_to_base: float


@dataclass(frozen=True)
class TransformPair:
    """Forward/inverse functions to and from a category's canonical value.

    Both callables must be pure; they are shared by every concurrent caller.
    """

    to_base: Callable[[float], float]
    from_base: Callable[[float], float]


@dataclass(frozen=True)
class Radix:
    radix: int

    def __post_init__(self):
        if isinstance(self.radix, bool) or not isinstance(self.radix, int):
            raise TypeError(f"radix must be an integer, got {type(self.radix)}")


@dataclass(frozen=True)
class TimeZoneName:
    iana: str


Payload = Union[ScaleFactor, TransformPair, Radix, TimeZoneName]

PAYLOAD_TYPES = {
    ConversionType.LINEAR: ScaleFactor,
    ConversionType.OFFSET: TransformPair,
    ConversionType.FORMULA: TransformPair,
    ConversionType.BASE: Radix,
    ConversionType.TIMEZONE: TimeZoneName,
    ConversionType.COLOR: type(None),
}


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    conversion_type: ConversionType


@dataclass(frozen=True)
class Unit:
    id: str
    category_id: str
    name: str
    abbreviations: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = ()
    payload: Optional[Payload] = None

    @property
    def color_format(self) -> str:
        """Colour format named by the unit id (``color-hex`` -> ``hex``)."""
        if self.id.startswith(COLOR_ID_PREFIX):
            return self.id[len(COLOR_ID_PREFIX):]
        return self.id

    def search_terms(self) -> Tuple[str, ...]:
        return tuple(
            term.lower() for term in (self.name, *self.abbreviations, *self.aliases)
        )


def payload_matches(unit: Unit, conversion_type: ConversionType) -> bool:
    """Return True when ``unit`` carries the payload its strategy requires."""
    return isinstance(unit.payload, PAYLOAD_TYPES[conversion_type])
