# File: colorcore/picker/interaction.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Protocol, Tuple

from colorcore.picker.geometry import (
    DEFAULT_SIZE,
    PickerGeometry,
    PointerSample,
    color_from_position,
)

log = logging.getLogger(__name__)


class InteractionState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"

    def __str__(self) -> str:
        return self.value


class PickerSurface(Protocol):
    def bounding_origin(self) -> Tuple[float, float]: ...


class PolarPickerController:
    """
    Pointer state machine for the polar picker:
    - IDLE --press inside outer radius--> DRAGGING (emits)
    - DRAGGING --move inside--> DRAGGING (emits); moves outside are dropped
    - DRAGGING --release/leave--> IDLE (no emission)

    Raw client coordinates are turned into surface-relative samples by
    subtracting the surface's bounding origin. Without an attached surface
    every operation is a no-op.

    on_select is the single sink for accepted colours; the owner performs
    all of its side effects inside it.
    """

    def __init__(
        self,
        *,
        on_select: Callable[[str], None],
        size: int = DEFAULT_SIZE,
        surface: Optional[PickerSurface] = None,
    ) -> None:
        self._on_select = on_select
        self._geometry = PickerGeometry.for_size(size)
        self._surface = surface
        self._state = InteractionState.IDLE
        self._last_color: Optional[str] = None

    # ---------- properties ----------
    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def geometry(self) -> PickerGeometry:
        return self._geometry

    @property
    def last_color(self) -> Optional[str]:
        return self._last_color

    @property
    def attached(self) -> bool:
        return self._surface is not None

    # ---------- surface lifecycle ----------
    def attach(self, surface: PickerSurface) -> None:
        self._surface = surface

    def detach(self) -> None:
        self._surface = None
        self._state = InteractionState.IDLE

    def resize(self, size: int) -> None:
        self._geometry = PickerGeometry.for_size(size)
        self._state = InteractionState.IDLE

    # ---------- pointer events ----------
    def sample_from_client(self, client_x: float, client_y: float) -> Optional[PointerSample]:
        if self._surface is None:
            return None
        left, top = self._surface.bounding_origin()
        return PointerSample(x=float(client_x) - left, y=float(client_y) - top)

    def press(self, client_x: float, client_y: float) -> Optional[str]:
        sample = self.sample_from_client(client_x, client_y)
        if sample is None:
            return None

        color = self._map(sample)
        if color is None:
            log.debug("press ignored outside wheel at (%.1f, %.1f)", sample.x, sample.y)
            return None

        self._state = InteractionState.DRAGGING
        return self._emit(color)

    def move(self, client_x: float, client_y: float) -> Optional[str]:
        if self._state is not InteractionState.DRAGGING:
            return None

        sample = self.sample_from_client(client_x, client_y)
        if sample is None:
            return None

        color = self._map(sample)
        if color is None:
            # keep the last valid colour until the pointer re-enters
            return None
        return self._emit(color)

    def release(self) -> None:
        self._state = InteractionState.IDLE

    def leave(self) -> None:
        self._state = InteractionState.IDLE

    # ---------- mapping ----------
    def _map(self, sample: PointerSample) -> Optional[str]:
        angle, distance = self._geometry.polar(sample)
        if not self._geometry.contains(distance):
            return None

        return color_from_position(angle, distance, size=self._geometry.size)

    def _emit(self, color: str) -> str:
        self._last_color = color
        self._on_select(color)
        return color
