"""Colour-space transforms around an 8-bit sRGB hub.

Every colour format converts to and from ``RGBA``. The perceptual spaces go
through an intermediate:

    sRGB <-> linear sRGB <-> XYZ (D65) <-> CIELAB <-> CIELCH
    sRGB <-> linear sRGB <-> LMS       <-> OKLab  <-> OKLCH

Conventions:
    - Hue in degrees [0, 360); saturation, lightness, value and CMYK inks in
      percent [0, 100].
    - CIELAB L and OKLab L are both stored on [0, 100] so the LAB family
      shares one scale; OKLab is rescaled to [0, 1] only when rendered.
    - Functions returning RGB give unrounded floats on [0, 255]; callers
      decide between range checking and gamut clipping.

References:
    IEC 61966-2-1 (sRGB transfer function), CIE 15 (CIELAB), Bjorn Ottosson,
    "A perceptual color space for image processing" (OKLab, 2020).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

Triple = Tuple[float, float, float]

# sRGB transfer function
SRGB_ENCODE_THRESHOLD: float = 0.0031308
SRGB_DECODE_THRESHOLD: float = 0.04045
SRGB_GAMMA: float = 2.4

# CIE piecewise cube-root constants
CIE_EPSILON: float = 0.008856
CIE_KAPPA: float = 903.3

D65_WHITE = np.array([0.95047, 1.00000, 1.08883])

SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
XYZ_TO_SRGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ]
)

LINEAR_SRGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
LMS_TO_LINEAR_SRGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)


@dataclass(frozen=True)
class RGBA:
    """Canonical colour: 8-bit channels and alpha on [0, 1]."""

    r: int
    g: int
    b: int
    alpha: float = 1.0

    @property
    def channels(self) -> Triple:
        return (self.r, self.g, self.b)


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(x + 0.5))


def _hue_of(r: float, g: float, b: float, cmax: float, delta: float) -> float:
    if delta == 0:
        return 0.0
    if cmax == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif cmax == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h * 60.0


def rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    r, g, b = r / 255, g / 255, b / 255
    cmax, cmin = max(r, g, b), min(r, g, b)
    delta = cmax - cmin
    lightness = (cmax + cmin) / 2
    saturation = 0.0
    if delta != 0:
        if lightness > 0.5:
            saturation = delta / (2 - cmax - cmin)
        else:
            saturation = delta / (cmax + cmin)
    return _hue_of(r, g, b, cmax, delta), saturation * 100, lightness * 100


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    h, s, l = (h % 360) / 360, s / 100, l / 100
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return r * 255, g * 255, b * 255


def rgb_to_hsv(r: float, g: float, b: float) -> Triple:
    r, g, b = r / 255, g / 255, b / 255
    cmax, cmin = max(r, g, b), min(r, g, b)
    delta = cmax - cmin
    saturation = 0.0 if cmax == 0 else delta / cmax
    return _hue_of(r, g, b, cmax, delta), saturation * 100, cmax * 100


def hsv_to_rgb(h: float, s: float, v: float) -> Triple:
    h, s, v = (h % 360) / 360, s / 100, v / 100
    sector = math.floor(h * 6)
    f = h * 6 - sector
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[sector % 6]
    return r * 255, g * 255, b * 255


def rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    r, g, b = r / 255, g / 255, b / 255
    k = 1 - max(r, g, b)
    if k == 1:
        return 0.0, 0.0, 0.0, 100.0
    return (
        (1 - r - k) / (1 - k) * 100,
        (1 - g - k) / (1 - k) * 100,
        (1 - b - k) / (1 - k) * 100,
        k * 100,
    )


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> Triple:
    c, m, y, k = c / 100, m / 100, y / 100, k / 100
    return (
        255 * (1 - c) * (1 - k),
        255 * (1 - m) * (1 - k),
        255 * (1 - y) * (1 - k),
    )


def srgb_to_linear(channels: np.ndarray) -> np.ndarray:
    """Decode gamma-encoded channels on [0, 1] to linear light."""
    c = np.asarray(channels, dtype=float)
    return np.where(
        c <= SRGB_DECODE_THRESHOLD,
        c / 12.92,
        ((c + 0.055) / 1.055) ** SRGB_GAMMA,
    )


def linear_to_srgb(channels: np.ndarray) -> np.ndarray:
    """Encode linear channels to gamma space, clipping to the sRGB gamut."""
    c = np.clip(np.asarray(channels, dtype=float), 0.0, 1.0)
    return np.where(
        c <= SRGB_ENCODE_THRESHOLD,
        12.92 * c,
        1.055 * c ** (1 / SRGB_GAMMA) - 0.055,
    )


def _linear_from_rgb(r: float, g: float, b: float) -> np.ndarray:
    return srgb_to_linear(np.array([r, g, b], dtype=float) / 255.0)


def _rgb_from_linear(linear: np.ndarray) -> Triple:
    r, g, b = linear_to_srgb(linear) * 255.0
    return float(r), float(g), float(b)


def _lab_f(t: np.ndarray) -> np.ndarray:
    return np.where(t > CIE_EPSILON, np.cbrt(t), (CIE_KAPPA * t + 16) / 116)


def rgb_to_lab(r: float, g: float, b: float) -> Triple:
    """Convert sRGB (0-255) to CIELAB with L on [0, 100], D65 white."""
    xyz = SRGB_TO_XYZ @ _linear_from_rgb(r, g, b)
    fx, fy, fz = _lab_f(xyz / D65_WHITE)
    return float(116 * fy - 16), float(500 * (fx - fy)), float(200 * (fy - fz))


def lab_to_rgb(l: float, a: float, b: float) -> Triple:
    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    xr = fx**3 if fx**3 > CIE_EPSILON else (116 * fx - 16) / CIE_KAPPA
    yr = fy**3 if l > CIE_KAPPA * CIE_EPSILON else l / CIE_KAPPA
    zr = fz**3 if fz**3 > CIE_EPSILON else (116 * fz - 16) / CIE_KAPPA

    xyz = np.array([xr, yr, zr]) * D65_WHITE
    return _rgb_from_linear(XYZ_TO_SRGB @ xyz)


def rgb_to_oklab(r: float, g: float, b: float) -> Triple:
    """Convert sRGB (0-255) to OKLab with L stored on [0, 100]."""
    lms = np.cbrt(LINEAR_SRGB_TO_LMS @ _linear_from_rgb(r, g, b))
    l, a, b_ = LMS_TO_OKLAB @ lms
    return float(l * 100), float(a), float(b_)


def oklab_to_rgb(l: float, a: float, b: float) -> Triple:
    lms = (OKLAB_TO_LMS @ np.array([l / 100, a, b])) ** 3
    return _rgb_from_linear(LMS_TO_LINEAR_SRGB @ lms)


def to_polar(l: float, a: float, b: float) -> Triple:
    """Rectangular (L, a, b) to cylindrical (L, C, H)."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % 360
    return l, chroma, hue


def from_polar(l: float, c: float, h: float) -> Triple:
    """Cylindrical (L, C, H) to rectangular (L, a, b)."""
    radians = math.radians(h)
    return l, c * math.cos(radians), c * math.sin(radians)
