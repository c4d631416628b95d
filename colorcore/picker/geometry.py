# File: colorcore/picker/geometry.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from colorcore.color import UnitHSV, hex_to_rgb, hsv_to_rgb, rgb_to_hex, rgb_to_unit_hsv

log = logging.getLogger(__name__)

DEFAULT_SIZE = 200
# inset reserved for the border stroke
WHEEL_MARGIN = 10

TWO_PI = math.pi * 2


@dataclass(frozen=True)
class PointerSample:
    """Pixel position relative to the surface's top-left corner."""
    x: float
    y: float


@dataclass(frozen=True)
class PickerGeometry:
    """
    轮盘几何（全部由 size 推导）：
    - center = (size/2, size/2)
    - radius = size/2 - margin：色相扇形与边框的绘制半径
    - outer_radius = size/2：交互命中与饱和度映射使用的外边界

    radius 与 outer_radius 的差值是有意保留的：最外圈约 10px 可以点中，
    但饱和度只在 outer_radius 处达到 1.0。
    """
    size: int = DEFAULT_SIZE
    margin: int = WHEEL_MARGIN

    @staticmethod
    def for_size(size: object) -> "PickerGeometry":
        try:
            n = int(size)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            n = 0
        if n <= 0:
            log.warning("invalid picker size %r, falling back to %d", size, DEFAULT_SIZE)
            n = DEFAULT_SIZE
        return PickerGeometry(size=n)

    @property
    def center(self) -> Tuple[float, float]:
        half = self.size / 2
        return half, half

    @property
    def radius(self) -> float:
        return self.size / 2 - self.margin

    @property
    def outer_radius(self) -> float:
        return self.size / 2

    def polar(self, sample: PointerSample) -> Tuple[float, float]:
        """
        Returns (angle, distance) of the sample relative to the centre.
        angle follows atan2(dy, dx): 0 = 3 o'clock, clockwise on screen.
        """
        cx, cy = self.center
        dx = sample.x - cx
        dy = sample.y - cy
        return math.atan2(dy, dx), math.hypot(dx, dy)

    def contains(self, distance: float) -> bool:
        return distance <= self.outer_radius


def hue_saturation_at(angle: float, distance: float, *, size: int = DEFAULT_SIZE) -> UnitHSV:
    normalized = angle
    if normalized < 0:
        normalized += TWO_PI

    hue = normalized / TWO_PI
    saturation = min(1.0, max(0.0, distance / (size / 2)))
    # brightness is not adjustable through the wheel
    return UnitHSV(hue, saturation, 1.0)


def color_from_position(angle: float, distance: float, *, size: int = DEFAULT_SIZE) -> str:
    hsv = hue_saturation_at(angle, distance, size=size)
    rgb = hsv_to_rgb(hsv.h, hsv.s, hsv.v)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def position_for_color(color: str, geometry: PickerGeometry) -> Optional[Tuple[float, float]]:
    """
    Inverse of color_from_position for placing the selection marker.
    Brightness is ignored; None for an unparseable colour.
    """
    rgb = hex_to_rgb(color)
    if rgb is None:
        return None

    hsv = rgb_to_unit_hsv(rgb.r, rgb.g, rgb.b)
    angle = hsv.h * TWO_PI
    distance = hsv.s * geometry.outer_radius
    cx, cy = geometry.center
    return cx + math.cos(angle) * distance, cy + math.sin(angle) * distance
