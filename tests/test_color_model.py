# tests/test_color_model.py
from __future__ import annotations

import itertools

import pytest

from colorcore.color import (
    CMYK,
    HSL,
    HSV,
    RGB,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    is_strict_hex,
    normalize_hex,
    parse_color,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_unit_hsv,
)


# ---------- hex ----------

def test_shorthand_hex_expands_each_nibble():
    assert hex_to_rgb("#f00") == hex_to_rgb("#ff0000") == RGB(255, 0, 0)
    assert hex_to_rgb("abc") == RGB(0xAA, 0xBB, 0xCC)


def test_hex_is_case_insensitive_and_hash_optional():
    assert hex_to_rgb("#FFaa00") == RGB(255, 170, 0)
    assert hex_to_rgb("ffaa00") == RGB(255, 170, 0)


@pytest.mark.parametrize(
    "bad",
    ["not-a-color", "", "#", "#ff00", "#ff00000", "#ggg", "##fff", "#fff\n", " #fff", None, 123],
)
def test_invalid_hex_returns_none(bad):
    assert hex_to_rgb(bad) is None
    assert parse_color(bad) is None


def test_rgb_to_hex_is_lowercase_and_zero_padded():
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(1, 2, 3) == "#010203"
    assert rgb_to_hex(255, 170, 15) == "#ffaa0f"


def test_rgb_to_hex_truncates_to_low_byte():
    assert rgb_to_hex(256, 0, 0) == "#000000"
    assert rgb_to_hex(511, 0, 0) == "#ff0000"
    assert len(rgb_to_hex(-1, 300, 1000)) == 7


def test_hex_round_trip_all_channels():
    # each channel value in every position; full 16M cube is too slow for a unit test
    for v in range(256):
        for rgb in ((v, 0, 0), (0, v, 0), (0, 0, v), (v, 255 - v, (v * 7) % 256)):
            assert hex_to_rgb(rgb_to_hex(*rgb)) == RGB(*rgb)


def test_normalize_and_strict_hex():
    assert normalize_hex("#F0A") == "#ff00aa"
    assert normalize_hex("nope") is None
    assert is_strict_hex("#A1b2C3")
    assert not is_strict_hex("#abc")
    assert not is_strict_hex("a1b2c3")


# ---------- HSL ----------

def test_rgb_to_hsl_known_values():
    assert rgb_to_hsl(255, 0, 0) == HSL(0, 100, 50)
    assert rgb_to_hsl(0, 255, 0) == HSL(120, 100, 50)
    assert rgb_to_hsl(0, 0, 255) == HSL(240, 100, 50)
    assert rgb_to_hsl(59, 130, 246) == HSL(217, 91, 60)


def test_rgb_to_hsl_achromatic():
    assert rgb_to_hsl(0, 0, 0) == HSL(0, 0, 0)
    assert rgb_to_hsl(128, 128, 128) == HSL(0, 0, 50)
    assert rgb_to_hsl(255, 255, 255) == HSL(0, 0, 100)


def test_rgb_to_hsl_hue_stays_below_360():
    # 359.76° rounds to 360 and is reported as 0
    assert rgb_to_hsl(255, 0, 1).h == 0


def test_hsl_to_rgb_known_values():
    assert hsl_to_rgb(0, 100, 50) == RGB(255, 0, 0)
    assert hsl_to_rgb(120, 100, 50) == RGB(0, 255, 0)
    assert hsl_to_rgb(240, 100, 50) == RGB(0, 0, 255)
    assert hsl_to_rgb(0, 0, 100) == RGB(255, 255, 255)
    assert hsl_to_rgb(360, 100, 50) == RGB(255, 0, 0)


def test_hsl_round_trip_within_rounding():
    for r, g, b in [(59, 130, 246), (239, 68, 68), (20, 184, 166), (100, 116, 139)]:
        hsl = rgb_to_hsl(r, g, b)
        back = hsl_to_rgb(hsl.h, hsl.s, hsl.l)
        # integer-rounded HSL loses a little precision
        assert abs(back.r - r) <= 3
        assert abs(back.g - g) <= 3
        assert abs(back.b - b) <= 3


# ---------- HSV ----------

def test_rgb_to_hsv_display_form():
    assert rgb_to_hsv(255, 0, 0) == HSV(0, 100, 100)
    assert rgb_to_hsv(0, 255, 255) == HSV(180, 100, 100)
    assert rgb_to_hsv(0, 0, 0) == HSV(0, 0, 0)
    assert rgb_to_hsv(255, 255, 255) == HSV(0, 0, 100)


def test_hsv_to_rgb_primaries():
    assert hsv_to_rgb(0, 1, 1) == RGB(255, 0, 0)
    assert hsv_to_rgb(1 / 3, 1, 1) == RGB(0, 255, 0)
    assert hsv_to_rgb(0.5, 1, 1) == RGB(0, 255, 255)
    assert hsv_to_rgb(2 / 3, 1, 1) == RGB(0, 0, 255)
    assert hsv_to_rgb(0.25, 0, 1) == RGB(255, 255, 255)
    assert hsv_to_rgb(0.75, 1, 0) == RGB(0, 0, 0)


def test_hsv_rgb_consistency():
    steps = [i / 12 for i in range(12)]
    levels = [0.0, 0.25, 0.5, 0.75, 1.0]
    for h, s, v in itertools.product(steps, levels, levels):
        rgb = hsv_to_rgb(h, s, v)
        u = rgb_to_unit_hsv(rgb.r, rgb.g, rgb.b)
        again = hsv_to_rgb(u.h, u.s, u.v)
        assert abs(again.r - rgb.r) <= 1
        assert abs(again.g - rgb.g) <= 1
        assert abs(again.b - rgb.b) <= 1


def test_display_hsv_matches_unit_hsv():
    u = rgb_to_unit_hsv(59, 130, 246)
    d = rgb_to_hsv(59, 130, 246)
    assert d.h == int(u.h * 360 + 0.5)
    assert d.s == int(u.s * 100 + 0.5)
    assert d.v == int(u.v * 100 + 0.5)


# ---------- CMYK ----------

def test_cmyk_black_special_case():
    assert rgb_to_cmyk(0, 0, 0) == CMYK(0, 0, 0, 100)


def test_cmyk_known_values():
    assert rgb_to_cmyk(255, 255, 255) == CMYK(0, 0, 0, 0)
    assert rgb_to_cmyk(255, 0, 0) == CMYK(0, 100, 100, 0)
    assert rgb_to_cmyk(0, 255, 255) == CMYK(100, 0, 0, 0)
    assert rgb_to_cmyk(128, 128, 128) == CMYK(0, 0, 0, 50)


# ---------- parse_color ----------

def test_parse_color_is_consistent():
    data = parse_color("#3B82F6")
    assert data is not None
    assert data.hex == "#3b82f6"
    assert data.rgb == RGB(59, 130, 246)
    assert data.hsl == rgb_to_hsl(59, 130, 246)
    assert data.hsv == rgb_to_hsv(59, 130, 246)
    assert data.cmyk == rgb_to_cmyk(59, 130, 246)


def test_parse_color_expands_shorthand():
    data = parse_color("f00")
    assert data is not None
    assert data.hex == "#ff0000"


def test_parsed_color_to_dict():
    d = parse_color("#000000").to_dict()
    assert d == {
        "hex": "#000000",
        "rgb": {"r": 0, "g": 0, "b": 0},
        "hsl": {"h": 0, "s": 0, "l": 0},
        "hsv": {"h": 0, "s": 0, "v": 0},
        "cmyk": {"c": 0, "m": 0, "y": 0, "k": 100},
    }
