from __future__ import annotations

from .model import (
    RGB,
    HSL,
    HSV,
    UnitHSV,
    CMYK,
    ParsedColor,
    hex_to_rgb,
    rgb_to_hex,
    normalize_hex,
    is_strict_hex,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    rgb_to_unit_hsv,
    hsv_to_rgb,
    rgb_to_cmyk,
    parse_color,
)

__all__ = [
    "RGB",
    "HSL",
    "HSV",
    "UnitHSV",
    "CMYK",
    "ParsedColor",
    "hex_to_rgb",
    "rgb_to_hex",
    "normalize_hex",
    "is_strict_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "rgb_to_unit_hsv",
    "hsv_to_rgb",
    "rgb_to_cmyk",
    "parse_color",
]
