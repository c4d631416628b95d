from __future__ import annotations

from .geometry import (
    DEFAULT_SIZE,
    WHEEL_MARGIN,
    PickerGeometry,
    PointerSample,
    hue_saturation_at,
    color_from_position,
    position_for_color,
)
from .interaction import InteractionState, PickerSurface, PolarPickerController
from .wheel import (
    BORDER_COLOR,
    BORDER_WIDTH,
    Wedge,
    RadialFill,
    BorderStroke,
    WheelPlan,
    build_wheel_plan,
)

__all__ = [
    "DEFAULT_SIZE",
    "WHEEL_MARGIN",
    "PickerGeometry",
    "PointerSample",
    "hue_saturation_at",
    "color_from_position",
    "position_for_color",
    "InteractionState",
    "PickerSurface",
    "PolarPickerController",
    "BORDER_COLOR",
    "BORDER_WIDTH",
    "Wedge",
    "RadialFill",
    "BorderStroke",
    "WheelPlan",
    "build_wheel_plan",
]
