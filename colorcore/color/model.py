# File: colorcore/color/model.py
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

_HEX6_RE = re.compile(r"#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})", re.IGNORECASE)
_HEX3_RE = re.compile(r"#?([a-f\d])([a-f\d])([a-f\d])", re.IGNORECASE)
_STRICT_HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")


# -----------------------------
# Value types
# -----------------------------

@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int

    def to_dict(self) -> Dict[str, Any]:
        return {"r": int(self.r), "g": int(self.g), "b": int(self.b)}


@dataclass(frozen=True)
class HSL:
    h: int  # 0..360
    s: int  # 0..100
    l: int  # 0..100

    def to_dict(self) -> Dict[str, Any]:
        return {"h": int(self.h), "s": int(self.s), "l": int(self.l)}


@dataclass(frozen=True)
class HSV:
    """Display form: h in degrees, s/v in percent (all integers)."""
    h: int
    s: int
    v: int

    def to_dict(self) -> Dict[str, Any]:
        return {"h": int(self.h), "s": int(self.s), "v": int(self.v)}


@dataclass(frozen=True)
class UnitHSV:
    """Picker form: every channel is a fraction 0..1 (h = fraction of a turn)."""
    h: float
    s: float
    v: float


@dataclass(frozen=True)
class CMYK:
    c: int
    m: int
    y: int
    k: int

    def to_dict(self) -> Dict[str, Any]:
        return {"c": int(self.c), "m": int(self.m), "y": int(self.y), "k": int(self.k)}


@dataclass(frozen=True)
class ParsedColor:
    hex: str
    rgb: RGB
    hsl: HSL
    hsv: HSV
    cmyk: CMYK

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "hsv": self.hsv.to_dict(),
            "cmyk": self.cmyk.to_dict(),
        }


# -----------------------------
# Helpers
# -----------------------------

def _round(x: float) -> int:
    # half-up, so 127.5 -> 128 and 2.5 -> 3 (builtin round() is half-even)
    return int(math.floor(x + 0.5))


def _clamp01(x: float) -> float:
    if x < 0.0:
        return 0.0
    if x > 1.0:
        return 1.0
    return x


def _hue_degrees(r: float, g: float, b: float, mx: float, d: float) -> float:
    if mx == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h * 60


# -----------------------------
# Hex <-> RGB
# -----------------------------

def hex_to_rgb(value: Any) -> Optional[RGB]:
    """
    Parse "#rrggbb" / "#rgb" (leading '#' optional, case-insensitive).

    Returns None for anything else; never raises.
    """
    if not isinstance(value, str):
        return None

    m = _HEX6_RE.fullmatch(value) or _HEX3_RE.fullmatch(value)
    if m is None:
        return None

    parts = []
    for part in m.groups():
        if len(part) == 1:
            part = part + part
        parts.append(int(part, 16))
    return RGB(parts[0], parts[1], parts[2])


def rgb_to_hex(r: int, g: int, b: int) -> str:
    packed = ((int(r) & 0xFF) << 16) | ((int(g) & 0xFF) << 8) | (int(b) & 0xFF)
    return f"#{packed:06x}"


def normalize_hex(value: Any) -> Optional[str]:
    rgb = hex_to_rgb(value)
    if rgb is None:
        return None
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def is_strict_hex(value: Any) -> bool:
    return isinstance(value, str) and _STRICT_HEX_RE.fullmatch(value) is not None


# -----------------------------
# HSL
# -----------------------------

def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    rf, gf, bf = r / 255, g / 255, b / 255
    mx = max(rf, gf, bf)
    mn = min(rf, gf, bf)
    l = (mx + mn) / 2

    if mx == mn:
        # achromatic
        return HSL(0, 0, _round(l * 100))

    d = mx - mn
    s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
    h = _hue_degrees(rf, gf, bf, mx, d)
    return HSL(_round(h) % 360, _round(s * 100), _round(l * 100))


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    h = h % 360
    s = _clamp01(s / 100)
    l = _clamp01(l / 100)

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RGB(_round((r + m) * 255), _round((g + m) * 255), _round((b + m) * 255))


# -----------------------------
# HSV
# -----------------------------

def rgb_to_unit_hsv(r: int, g: int, b: int) -> UnitHSV:
    rf, gf, bf = r / 255, g / 255, b / 255
    mx = max(rf, gf, bf)
    mn = min(rf, gf, bf)
    d = mx - mn

    s = 0.0 if mx == 0 else d / mx
    h = 0.0
    if mx != mn:
        h = _hue_degrees(rf, gf, bf, mx, d) / 360
    return UnitHSV(h, s, mx)


def rgb_to_hsv(r: int, g: int, b: int) -> HSV:
    u = rgb_to_unit_hsv(r, g, b)
    return HSV(_round(u.h * 360) % 360, _round(u.s * 100), _round(u.v * 100))


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """
    h/s/v are fractions 0..1 (h is a fraction of a full turn).
    """
    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return RGB(_round(r * 255), _round(g * 255), _round(b * 255))


# -----------------------------
# CMYK
# -----------------------------

def rgb_to_cmyk(r: int, g: int, b: int) -> CMYK:
    rf, gf, bf = r / 255, g / 255, b / 255
    k = 1 - max(rf, gf, bf)
    if k >= 1:
        # pure black: 0/0 is treated as 0
        return CMYK(0, 0, 0, 100)

    c = (1 - rf - k) / (1 - k)
    m = (1 - gf - k) / (1 - k)
    y = (1 - bf - k) / (1 - k)
    return CMYK(_round(c * 100), _round(m * 100), _round(y * 100), _round(k * 100))


# -----------------------------
# Composite
# -----------------------------

def parse_color(value: Any) -> Optional[ParsedColor]:
    """
    Parse a hex colour string into every supported representation.

    Returns None iff hex_to_rgb() rejects the input. All views are derived
    from the same RGB so they agree with each other.
    """
    rgb = hex_to_rgb(value)
    if rgb is None:
        return None

    return ParsedColor(
        hex=rgb_to_hex(rgb.r, rgb.g, rgb.b),
        rgb=rgb,
        hsl=rgb_to_hsl(rgb.r, rgb.g, rgb.b),
        hsv=rgb_to_hsv(rgb.r, rgb.g, rgb.b),
        cmyk=rgb_to_cmyk(rgb.r, rgb.g, rgb.b),
    )
