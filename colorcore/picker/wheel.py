# File: colorcore/picker/wheel.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from colorcore.color import RGB, hsv_to_rgb
from colorcore.picker.geometry import PickerGeometry

BORDER_COLOR = "#e5e7eb"
BORDER_WIDTH = 2

# each 1° hue step is painted as a 4° pie so anti-aliased edges overlap
WEDGE_HALF_SPAN_DEG = 2
HUE_STEPS = 360


@dataclass(frozen=True)
class Wedge:
    start_deg: float
    end_deg: float
    rgb: RGB


@dataclass(frozen=True)
class RadialFill:
    """White at the centre fading to fully transparent at `radius`."""
    center: Tuple[float, float]
    radius: float
    inner_rgba: Tuple[int, int, int, int] = (255, 255, 255, 255)
    outer_rgba: Tuple[int, int, int, int] = (255, 255, 255, 0)


@dataclass(frozen=True)
class BorderStroke:
    center: Tuple[float, float]
    radius: float
    color: str = BORDER_COLOR
    width: int = BORDER_WIDTH


@dataclass(frozen=True)
class WheelPlan:
    """
    轮盘绘制计划（与具体绘图框架无关），按顺序执行：
    1. 清空画布
    2. wedges：360 个重叠的色相扇形
    3. fill：白色→透明的径向渐变（饱和度衰减）
    4. border：边框描边
    """
    size: int
    center: Tuple[float, float]
    radius: float
    wedges: List[Wedge]
    fill: RadialFill
    border: BorderStroke


def build_wheel_plan(geometry: PickerGeometry) -> WheelPlan:
    wedges: List[Wedge] = []
    for angle in range(HUE_STEPS):
        wedges.append(
            Wedge(
                start_deg=float(angle - WEDGE_HALF_SPAN_DEG),
                end_deg=float(angle + WEDGE_HALF_SPAN_DEG),
                rgb=hsv_to_rgb(angle / HUE_STEPS, 1, 1),
            )
        )

    center = geometry.center
    radius = geometry.radius
    return WheelPlan(
        size=geometry.size,
        center=center,
        radius=radius,
        wedges=wedges,
        fill=RadialFill(center=center, radius=radius),
        border=BorderStroke(center=center, radius=radius),
    )
