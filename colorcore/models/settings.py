# File: colorcore/models/settings.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from colorcore.color import normalize_hex
from colorcore.models.common import (
    as_bool,
    as_choice,
    as_color,
    as_dict,
    as_int,
    as_list,
    as_str,
    clamp_int,
)

PICKER_TYPES = ("default", "circular")
PICKER_SIZES = ("xs", "sm", "md", "lg", "xl")

# wheel diameter (px) per size key
CIRCULAR_SIZE_MAP: Dict[str, int] = {
    "xs": 120,
    "sm": 160,
    "md": 200,
    "lg": 240,
    "xl": 280,
}

DEFAULT_COLOR = "#3b82f6"

DEFAULT_PRESET_COLORS: List[str] = [
    "#ef4444", "#f97316", "#f59e0b", "#eab308", "#84cc16",
    "#22c55e", "#10b981", "#14b8a6", "#06b6d4", "#0ea5e9",
    "#3b82f6", "#6366f1", "#8b5cf6", "#a855f7", "#d946ef",
    "#ec4899", "#f43f5e", "#000000", "#ffffff", "#64748b",
]


@dataclass
class ColorPickerWidgetConfig:
    picker_type: str = "circular"  # "circular" | "default"
    picker_size: str = "md"        # xs | sm | md | lg | xl
    default_color: str = DEFAULT_COLOR

    label: str = ""
    disabled: bool = False
    read_only: bool = False

    show_color_value: bool = True
    show_hex_input: bool = True
    validate_hex: bool = True

    show_preset_colors: bool = True
    preset_colors: List[str] = field(default_factory=lambda: list(DEFAULT_PRESET_COLORS))
    preset_grid_columns: int = 5
    preset_color_size: int = 32

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ColorPickerWidgetConfig":
        d = as_dict(d)

        raw_presets = d.get("preset_colors", None)
        if raw_presets is None:
            presets = list(DEFAULT_PRESET_COLORS)
        else:
            presets = []
            for item in as_list(raw_presets):
                hx = normalize_hex(item)
                if hx is not None:
                    presets.append(hx)

        return ColorPickerWidgetConfig(
            picker_type=as_choice(d.get("picker_type"), PICKER_TYPES, "circular"),
            picker_size=as_choice(d.get("picker_size"), PICKER_SIZES, "md"),
            default_color=as_color(d.get("default_color"), DEFAULT_COLOR),
            label=as_str(d.get("label", ""), ""),
            disabled=as_bool(d.get("disabled", False), False),
            read_only=as_bool(d.get("read_only", False), False),
            show_color_value=as_bool(d.get("show_color_value", True), True),
            show_hex_input=as_bool(d.get("show_hex_input", True), True),
            validate_hex=as_bool(d.get("validate_hex", True), True),
            show_preset_colors=as_bool(d.get("show_preset_colors", True), True),
            preset_colors=presets,
            preset_grid_columns=clamp_int(as_int(d.get("preset_grid_columns", 5), 5), 1, 12),
            preset_color_size=clamp_int(as_int(d.get("preset_color_size", 32), 32), 12, 64),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "picker_type": self.picker_type,
            "picker_size": self.picker_size,
            "default_color": self.default_color,
            "label": self.label,
            "disabled": bool(self.disabled),
            "read_only": bool(self.read_only),
            "show_color_value": bool(self.show_color_value),
            "show_hex_input": bool(self.show_hex_input),
            "validate_hex": bool(self.validate_hex),
            "show_preset_colors": bool(self.show_preset_colors),
            "preset_colors": list(self.preset_colors),
            "preset_grid_columns": int(self.preset_grid_columns),
            "preset_color_size": int(self.preset_color_size),
        }


@dataclass
class UIConfig:
    theme: str = "darkly"

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "UIConfig":
        d = as_dict(d)
        return UIConfig(theme=as_str(d.get("theme", "darkly"), "darkly"))

    def to_dict(self) -> Dict[str, Any]:
        return {"theme": self.theme}


@dataclass
class LoggingConfig:
    level: str = "INFO"
    console: bool = False

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "LoggingConfig":
        d = as_dict(d)
        level = as_str(d.get("level", "INFO"), "INFO").strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            level = "INFO"
        return LoggingConfig(level=level, console=as_bool(d.get("console", False), False))

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level, "console": bool(self.console)}


@dataclass
class AppSettings:
    schema_version: int = 1
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    picker: ColorPickerWidgetConfig = field(default_factory=ColorPickerWidgetConfig)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "AppSettings":
        d = as_dict(d)
        return AppSettings(
            schema_version=as_int(d.get("schema_version", 1), 1),
            ui=UIConfig.from_dict(d.get("ui", {}) or {}),
            logging=LoggingConfig.from_dict(d.get("logging", {}) or {}),
            picker=ColorPickerWidgetConfig.from_dict(d.get("picker", {}) or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": int(self.schema_version),
            "ui": self.ui.to_dict(),
            "logging": self.logging.to_dict(),
            "picker": self.picker.to_dict(),
        }
