# qtui/widgets/color_swatch.py
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget

from colorcore.color import normalize_hex


class ColorSwatch(QWidget):
    """
    颜色预览：
    - 左侧色块
    - 右侧 #rrggbb 文本（可隐藏）
    非法颜色不会改变当前显示。
    """

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        width: int = 64,
        height: int = 24,
        show_value: bool = True,
    ) -> None:
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._frame = QFrame(self)
        self._frame.setFixedSize(width, height)
        self._frame.setFrameShape(QFrame.Box)
        self._frame.setFrameShadow(QFrame.Sunken)
        self._frame.setAutoFillBackground(True)
        layout.addWidget(self._frame)

        self._label = QLabel("", self)
        self._label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self._label.setVisible(show_value)
        layout.addWidget(self._label)

        self._hex = ""
        self.set_hex("#000000")

    def set_hex(self, hx: str) -> bool:
        canon = normalize_hex(hx)
        if canon is None:
            return False

        pal = self._frame.palette()
        pal.setColor(QPalette.Window, QColor(canon))
        self._frame.setPalette(pal)

        self._hex = canon
        self._label.setText(canon)
        return True

    def get_hex(self) -> str:
        return self._hex
