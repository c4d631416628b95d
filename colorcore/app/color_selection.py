# File: colorcore/app/color_selection.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from colorcore.color import ParsedColor, is_strict_hex, parse_color
from colorcore.logging_context import log_context
from colorcore.models.settings import CIRCULAR_SIZE_MAP, ColorPickerWidgetConfig

log = logging.getLogger(__name__)

COLOR_CHANGE_ACTION = "colorChange"


@dataclass(frozen=True)
class ColorChangeAction:
    action_id: str
    color: str
    color_data: ParsedColor

    def parameters(self) -> Dict[str, Any]:
        return {"color": self.color, "colorData": self.color_data.to_dict()}


class ColorSelection:
    """
    颜色选择控件的绑定层（与 Qt 无关）：
    - 保存当前值（未设置时用 config.default_color）
    - disabled / read_only 时忽略所有修改
    - 每次接受的修改：先 on_value_change(color)，
      颜色可解析时再通过 on_action 发出 colorChange 动作
    """

    def __init__(
        self,
        config: ColorPickerWidgetConfig,
        *,
        on_value_change: Optional[Callable[[str], None]] = None,
        on_action: Optional[Callable[[ColorChangeAction], None]] = None,
        value: Optional[str] = None,
    ) -> None:
        self._cfg = config
        self._on_value_change = on_value_change
        self._on_action = on_action
        self._value: Optional[str] = value or None

    @property
    def config(self) -> ColorPickerWidgetConfig:
        return self._cfg

    @property
    def current_color(self) -> str:
        return self._value or self._cfg.default_color

    @property
    def accepts_changes(self) -> bool:
        return not (self._cfg.disabled or self._cfg.read_only)

    @property
    def interactive(self) -> bool:
        # read_only hides the picker entirely; disabled keeps it visible but inert
        return not self._cfg.read_only

    def circular_size(self) -> int:
        return CIRCULAR_SIZE_MAP.get(self._cfg.picker_size, CIRCULAR_SIZE_MAP["md"])

    def parsed(self) -> Optional[ParsedColor]:
        return parse_color(self.current_color)

    def handle_color_change(self, color: str) -> bool:
        if not self.accepts_changes:
            log.debug("color change ignored (disabled/read_only): %s", color)
            return False

        self._value = color
        if self._on_value_change is not None:
            self._on_value_change(color)

        data = parse_color(color)
        if data is not None and self._on_action is not None:
            with log_context(action=COLOR_CHANGE_ACTION):
                log.debug("execute action color=%s", data.hex)
                self._on_action(ColorChangeAction(action_id=COLOR_CHANGE_ACTION, color=data.hex, color_data=data))
        return True

    def submit_hex_input(self, text: str) -> bool:
        s = (text or "").strip()
        if self._cfg.validate_hex and not is_strict_hex(s):
            return False
        return self.handle_color_change(s)

    def select_preset(self, color: str) -> bool:
        return self.handle_color_change(color)
