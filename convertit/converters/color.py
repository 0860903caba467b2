"""Convert colours between 12 textual formats through an RGBA hub.

Supported formats (named by the unit id suffix, e.g. ``color-hsl``):
    hex, rgb, rgba, hsl, hsla, hsv, cmyk, named, lab, lch, oklab, oklch

Parsing:
    Every parser accepts the CSS function syntax (``rgb(255, 0, 0)``,
    ``lab(50% 20 -30 / 0.5)``) and a bare comma-separated fallback
    (``255, 0, 0``). Input is trimmed and case-insensitive. Hex accepts
    3/4/6/8 digits with or without ``#``; named colours are an exact name
    lookup.

Formatting:
    - hex: ``#rrggbb``, plus an alpha byte only when alpha is not 1
    - rgb/hsl/hsv/cmyk: integers; rgba/hsla: alpha to 2 decimals
    - lab/lch: 1 decimal, L as a percentage
    - oklab/oklch: L on [0, 1] and a/b/C to 3 decimals, hue to 2 decimals
    - named: nearest CSS name by Euclidean RGB distance

Errors:
    ``"Error: Invalid color format"`` for any parse failure and
    ``"Error: RGB values must be 0-255"`` when a parsed colour falls outside
    the 8-bit range. Perceptual spaces (LAB family) are gamut clipped instead.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..schema import ErrorMessages
from ..units import Unit
from . import color_spaces as cs
from .named_colors import NAMED_COLORS, nearest_named_color

logger = logging.getLogger(__name__)

RawColor = Tuple[float, float, float, float]

_FUNCTION = re.compile(r"^([a-z]+)\s*\((.*?)\)?$", re.DOTALL)
_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?(%|deg)?$")
_HEX = re.compile(r"^[0-9a-f]+$")


def _split_arguments(text: str, names: Sequence[str]) -> List[str]:
    """Split a colour string into argument tokens.

    Args:
        text (str): Raw colour text.
        names (Sequence[str]): Function names accepted for this format.

    Returns:
        list[str]: Argument tokens; an alpha given after ``/`` is appended.

    Raises:
        ValueError: If the text uses a function name not in ``names``.
    """
    body = text.strip().lower()
    match = _FUNCTION.match(body)
    if match:
        if match.group(1) not in names:
            raise ValueError(f"Unexpected function {match.group(1)!r}")
        body = match.group(2)

    main, slash, alpha = body.partition("/")
    if "," in main:
        tokens = [token.strip() for token in main.split(",")]
    else:
        tokens = main.split()
    if slash:
        tokens.append(alpha.strip())
    return tokens


def _number(token: str, percent_scale: float = 1.0) -> float:
    """Parse a numeric token; a ``%`` suffix multiplies by ``percent_scale``."""
    match = _NUMBER.match(token)
    if match is None:
        raise ValueError(f"Not a number: {token!r}")
    unit = match.group(1)
    value = float(token[: len(token) - len(unit)] if unit else token)
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {token!r}")
    if unit == "%":
        value *= percent_scale
    return value


def _alpha(tokens: Sequence[str], count: int) -> float:
    if len(tokens) == count:
        return 1.0
    if len(tokens) != count + 1:
        raise ValueError(f"Expected {count} or {count + 1} components")
    alpha = _number(tokens[count], percent_scale=0.01)
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"Alpha out of range: {alpha}")
    return alpha


def parse_hex(text: str) -> RawColor:
    digits = text.strip().lower().lstrip("#")
    if len(digits) not in (3, 4, 6, 8) or not _HEX.match(digits):
        raise ValueError(f"Invalid hex colour: {text!r}")
    if len(digits) in (3, 4):
        digits = "".join(char * 2 for char in digits)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return r, g, b, alpha


def parse_rgb(text: str) -> RawColor:
    tokens = _split_arguments(text, ("rgb", "rgba"))
    alpha = _alpha(tokens, 3)
    r, g, b = (_number(token, percent_scale=2.55) for token in tokens[:3])
    return r, g, b, alpha


def parse_hsl(text: str) -> RawColor:
    tokens = _split_arguments(text, ("hsl", "hsla"))
    alpha = _alpha(tokens, 3)
    h, s, l = (_number(token) for token in tokens[:3])
    return (*cs.hsl_to_rgb(h, s, l), alpha)


def parse_hsv(text: str) -> RawColor:
    tokens = _split_arguments(text, ("hsv", "hsb"))
    alpha = _alpha(tokens, 3)
    h, s, v = (_number(token) for token in tokens[:3])
    return (*cs.hsv_to_rgb(h, s, v), alpha)


def parse_cmyk(text: str) -> RawColor:
    tokens = _split_arguments(text, ("cmyk",))
    alpha = _alpha(tokens, 4)
    c, m, y, k = (_number(token) for token in tokens[:4])
    return (*cs.cmyk_to_rgb(c, m, y, k), alpha)


def parse_named(text: str) -> RawColor:
    code = NAMED_COLORS.get(text.strip().lower())
    if code is None:
        raise ValueError(f"Unknown colour name: {text!r}")
    return parse_hex(code)


def parse_lab(text: str) -> RawColor:
    tokens = _split_arguments(text, ("lab",))
    alpha = _alpha(tokens, 3)
    l, a, b = (_number(token) for token in tokens[:3])
    return (*cs.lab_to_rgb(l, a, b), alpha)


def parse_lch(text: str) -> RawColor:
    tokens = _split_arguments(text, ("lch",))
    alpha = _alpha(tokens, 3)
    l, c, h = (_number(token) for token in tokens[:3])
    return (*cs.lab_to_rgb(*cs.from_polar(l, c, h)), alpha)


def _oklab_lightness(token: str) -> float:
    # CSS writes OKLab L on [0, 1] or as a percentage; stored on [0, 100]
    if token.endswith("%"):
        return _number(token)
    return _number(token) * 100


def parse_oklab(text: str) -> RawColor:
    tokens = _split_arguments(text, ("oklab",))
    alpha = _alpha(tokens, 3)
    l = _oklab_lightness(tokens[0])
    a, b = (_number(token) for token in tokens[1:3])
    return (*cs.oklab_to_rgb(l, a, b), alpha)


def parse_oklch(text: str) -> RawColor:
    tokens = _split_arguments(text, ("oklch",))
    alpha = _alpha(tokens, 3)
    l = _oklab_lightness(tokens[0])
    c, h = (_number(token) for token in tokens[1:3])
    return (*cs.oklab_to_rgb(*cs.from_polar(l, c, h)), alpha)


def _fixed(value: float, decimals: int) -> str:
    text = f"{value:.{decimals}f}"
    if float(text) == 0:
        return text.lstrip("-")
    return text


def _hue(value: float, decimals: int) -> str:
    return _fixed(round(value, decimals) % 360, decimals)


def _alpha_suffix(color: cs.RGBA) -> str:
    if color.alpha >= 1:
        return ""
    return f" / {color.alpha:.2f}"


def format_hex(color: cs.RGBA) -> str:
    text = "#{:02x}{:02x}{:02x}".format(*color.channels)
    if color.alpha != 1:
        text += f"{cs.round_half_up(color.alpha * 255):02x}"
    return text


def format_rgb(color: cs.RGBA) -> str:
    return "rgb({}, {}, {})".format(*color.channels)


def format_rgba(color: cs.RGBA) -> str:
    return "rgba({}, {}, {}, {:.2f})".format(*color.channels, color.alpha)


def _hsl_integers(color: cs.RGBA) -> Tuple[int, int, int]:
    h, s, l = cs.rgb_to_hsl(*color.channels)
    return cs.round_half_up(h) % 360, cs.round_half_up(s), cs.round_half_up(l)


def format_hsl(color: cs.RGBA) -> str:
    return "hsl({}, {}%, {}%)".format(*_hsl_integers(color))


def format_hsla(color: cs.RGBA) -> str:
    return "hsla({}, {}%, {}%, {:.2f})".format(*_hsl_integers(color), color.alpha)


def format_hsv(color: cs.RGBA) -> str:
    h, s, v = cs.rgb_to_hsv(*color.channels)
    return "hsv({}, {}%, {}%)".format(
        cs.round_half_up(h) % 360, cs.round_half_up(s), cs.round_half_up(v)
    )


def format_cmyk(color: cs.RGBA) -> str:
    inks = (cs.round_half_up(x) for x in cs.rgb_to_cmyk(*color.channels))
    return "cmyk({}%, {}%, {}%, {}%)".format(*inks)


def format_named(color: cs.RGBA) -> str:
    return nearest_named_color(*color.channels)


def format_lab(color: cs.RGBA) -> str:
    l, a, b = cs.rgb_to_lab(*color.channels)
    return f"lab({_fixed(l, 1)}% {_fixed(a, 1)} {_fixed(b, 1)}{_alpha_suffix(color)})"


def format_lch(color: cs.RGBA) -> str:
    l, c, h = cs.to_polar(*cs.rgb_to_lab(*color.channels))
    hue = _hue(h, 1) if round(c, 1) else "0.0"
    return f"lch({_fixed(l, 1)}% {_fixed(c, 1)} {hue}{_alpha_suffix(color)})"


def format_oklab(color: cs.RGBA) -> str:
    l, a, b = cs.rgb_to_oklab(*color.channels)
    return (
        f"oklab({_fixed(l / 100, 3)} {_fixed(a, 3)} {_fixed(b, 3)}"
        f"{_alpha_suffix(color)})"
    )


def format_oklch(color: cs.RGBA) -> str:
    l, c, h = cs.to_polar(*cs.rgb_to_oklab(*color.channels))
    hue = _hue(h, 2) if round(c, 3) else "0.00"
    return f"oklch({_fixed(l / 100, 3)} {_fixed(c, 3)} {hue}{_alpha_suffix(color)})"


PARSERS: Dict[str, Callable[[str], RawColor]] = {
    "hex": parse_hex,
    "rgb": parse_rgb,
    "rgba": parse_rgb,
    "hsl": parse_hsl,
    "hsla": parse_hsl,
    "hsv": parse_hsv,
    "cmyk": parse_cmyk,
    "named": parse_named,
    "lab": parse_lab,
    "lch": parse_lch,
    "oklab": parse_oklab,
    "oklch": parse_oklch,
}

FORMATTERS: Dict[str, Callable[[cs.RGBA], str]] = {
    "hex": format_hex,
    "rgb": format_rgb,
    "rgba": format_rgba,
    "hsl": format_hsl,
    "hsla": format_hsla,
    "hsv": format_hsv,
    "cmyk": format_cmyk,
    "named": format_named,
    "lab": format_lab,
    "lch": format_lch,
    "oklab": format_oklab,
    "oklch": format_oklch,
}

# Formats whose parsed channels are clipped to the sRGB gamut, not range checked
_GAMUT_MAPPED = frozenset({"lab", "lch", "oklab", "oklch"})


def to_rgba(raw: RawColor, clip: bool = False) -> Optional[cs.RGBA]:
    """Round parsed channels to the 8-bit hub; None when out of range."""
    *channels, alpha = raw
    if not all(math.isfinite(c) for c in channels):
        return None
    if clip:
        channels = [min(255.0, max(0.0, c)) for c in channels]
    rounded = [cs.round_half_up(c) for c in channels]
    if any(c < 0 or c > 255 for c in rounded):
        return None
    return cs.RGBA(*rounded, alpha=alpha)


def color_convert(from_unit: Unit, to_unit: Unit, raw: str) -> str:
    """Convert a colour string between the formats named by the unit ids.

    Args:
        from_unit (Unit): Source colour unit (``color-<format>``).
        to_unit (Unit): Target colour unit (``color-<format>``).
        raw (str): Raw colour text.

    Returns:
        str: Colour rendered in the target format, ``""`` for blank input,
        or an error sentence.
    """
    if not raw.strip():
        return ""

    messages = ErrorMessages()
    source, target = from_unit.color_format, to_unit.color_format
    for fmt in (source, target):
        if fmt not in PARSERS:
            logger.warning("Unsupported colour format %r", fmt)
            return messages.unsupported_color_format(fmt)

    try:
        parsed = PARSERS[source](raw)
    except (ValueError, OverflowError):
        return messages.invalid_color

    color = to_rgba(parsed, clip=source in _GAMUT_MAPPED)
    if color is None:
        return messages.rgb_out_of_range
    return FORMATTERS[target](color)
