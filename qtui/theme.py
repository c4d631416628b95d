# qtui/theme.py
from __future__ import annotations

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

DARK_THEMES = ("dark", "darkly", "superhero", "cyborg", "solar")

_DARK_ROLES = (
    (QPalette.Window, QColor(45, 45, 48)),
    (QPalette.WindowText, QColor(225, 225, 225)),
    (QPalette.Base, QColor(36, 36, 38)),
    (QPalette.AlternateBase, QColor(58, 58, 62)),
    (QPalette.Text, QColor(225, 225, 225)),
    (QPalette.Button, QColor(45, 45, 48)),
    (QPalette.ButtonText, QColor(225, 225, 225)),
    (QPalette.Highlight, QColor(59, 130, 246)),
    (QPalette.HighlightedText, QColor(255, 255, 255)),
)


def is_dark_theme(theme_name: str) -> bool:
    return (theme_name or "").strip().lower() in DARK_THEMES


def apply_theme(app: QApplication, theme_name: str) -> None:
    """
    Fusion 风格 + 调色板：
    - DARK_THEMES 内的名字用暗色调色板
    - 其他一律用 Fusion 默认亮色
    轮盘本身不受主题影响（边框色固定）。
    """
    app.setStyle("Fusion")

    if not is_dark_theme(theme_name):
        app.setPalette(app.style().standardPalette())
        return

    palette = QPalette()
    for role, color in _DARK_ROLES:
        palette.setColor(role, color)
    app.setPalette(palette)
