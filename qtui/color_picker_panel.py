# qtui/color_picker_panel.py
from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QColorDialog,
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from colorcore.app.color_selection import ColorChangeAction, ColorSelection
from colorcore.color import ParsedColor
from colorcore.models.settings import ColorPickerWidgetConfig
from qtui.widgets.color_swatch import ColorSwatch
from qtui.widgets.polar_color_picker import PolarColorPicker


def format_color_data(data: ParsedColor) -> str:
    rgb, hsl, hsv, cmyk = data.rgb, data.hsl, data.hsv, data.cmyk
    return "\n".join(
        [
            f"rgb({rgb.r}, {rgb.g}, {rgb.b})",
            f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)",
            f"hsv({hsv.h}, {hsv.s}%, {hsv.v}%)",
            f"cmyk({cmyk.c}%, {cmyk.m}%, {cmyk.y}%, {cmyk.k}%)",
        ]
    )


class ColorPickerPanel(QWidget):
    """
    颜色选择面板（仪表盘取色控件）：
    - 标签 / 预览色块 / 取色器（circular=轮盘，default=系统颜色对话框）
    - 十六进制输入框（validate_hex 时只接受 #rrggbb）
    - 预设色网格
    - rgb/hsl/hsv/cmyk 读数
    read_only 时隐藏取色部分；disabled 时全部控件不可用。
    """

    valueChanged = Signal(str)
    actionExecuted = Signal(object)  # ColorChangeAction

    def __init__(
        self,
        config: ColorPickerWidgetConfig,
        *,
        value: Optional[str] = None,
        on_action: Optional[Callable[[ColorChangeAction], None]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._cfg = config
        self._external_action = on_action
        self._sel = ColorSelection(
            config,
            on_value_change=self._on_value_changed,
            on_action=self._on_action,
            value=value,
        )

        self._picker: Optional[PolarColorPicker] = None
        self._btn_dialog: Optional[QPushButton] = None
        self._hex_edit: Optional[QLineEdit] = None
        self._preset_buttons: List[QToolButton] = []

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(12)

        if config.label:
            lbl = QLabel(config.label, self)
            root.addWidget(lbl)

        self._preview = ColorSwatch(self, width=96, height=32, show_value=config.show_color_value)
        root.addWidget(self._preview)

        if self._sel.interactive:
            self._build_interactive(root)
        else:
            hint = QLabel("Read Only", self)
            hint.setAlignment(Qt.AlignCenter)
            root.addWidget(hint)

        self._lbl_formats = QLabel("", self)
        self._lbl_formats.setTextInteractionFlags(Qt.TextSelectableByMouse)
        root.addWidget(self._lbl_formats)
        root.addStretch(1)

        if config.disabled:
            self.setEnabled(False)

        self._refresh(self._sel.current_color)

    # ---------- 构建 ----------
    def _build_interactive(self, root: QVBoxLayout) -> None:
        cfg = self._cfg

        if cfg.picker_type == "circular":
            self._picker = PolarColorPicker(
                self._sel.current_color,
                self._sel.handle_color_change,
                size=self._sel.circular_size(),
                parent=self,
            )
            root.addWidget(self._picker, 0, Qt.AlignHCenter)
        else:
            self._btn_dialog = QPushButton("选择颜色…", self)
            self._btn_dialog.clicked.connect(self._open_dialog)
            root.addWidget(self._btn_dialog)

        if cfg.show_hex_input:
            self._hex_edit = QLineEdit(self)
            self._hex_edit.setPlaceholderText("#000000")
            self._hex_edit.textEdited.connect(self._on_hex_edited)
            root.addWidget(self._hex_edit)

        if cfg.show_preset_colors and cfg.preset_colors:
            grid_host = QWidget(self)
            grid = QGridLayout(grid_host)
            grid.setContentsMargins(0, 0, 0, 0)
            grid.setSpacing(6)
            cols = max(1, int(cfg.preset_grid_columns))
            for i, hx in enumerate(cfg.preset_colors):
                btn = QToolButton(grid_host)
                btn.setFixedSize(cfg.preset_color_size, cfg.preset_color_size)
                btn.setToolTip(hx)
                btn.setStyleSheet(f"background-color: {hx}; border: 1px solid #e2e8f0;")
                btn.clicked.connect(lambda _=False, c=hx: self._sel.select_preset(c))
                grid.addWidget(btn, i // cols, i % cols)
                self._preset_buttons.append(btn)
            root.addWidget(grid_host)

    # ---------- 公共 API ----------
    @property
    def selection(self) -> ColorSelection:
        return self._sel

    @property
    def picker(self) -> Optional[PolarColorPicker]:
        return self._picker

    @property
    def hex_edit(self) -> Optional[QLineEdit]:
        return self._hex_edit

    @property
    def preset_buttons(self) -> List[QToolButton]:
        return list(self._preset_buttons)

    def current_color(self) -> str:
        return self._sel.current_color

    def formats_text(self) -> str:
        return self._lbl_formats.text()

    # ---------- 回调 ----------
    def _on_hex_edited(self, text: str) -> None:
        self._sel.submit_hex_input(text)

    def _open_dialog(self) -> None:
        color = QColorDialog.getColor(QColor(self._sel.current_color), self, "选择颜色")
        if color.isValid():
            self._sel.handle_color_change(color.name())

    def _on_value_changed(self, color: str) -> None:
        self._refresh(color)
        self.valueChanged.emit(color)

    def _on_action(self, action: ColorChangeAction) -> None:
        if self._external_action is not None:
            self._external_action(action)
        self.actionExecuted.emit(action)

    def _refresh(self, color: str) -> None:
        self._preview.set_hex(color)

        if self._picker is not None:
            self._picker.set_value(color)

        if self._hex_edit is not None and self._hex_edit.text() != color:
            self._hex_edit.setText(color)

        data = self._sel.parsed()
        if data is not None:
            self._lbl_formats.setText(format_color_data(data))
