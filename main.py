# main.py
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication, QMainWindow

from colorcore.logging_setup import setup_logging
from colorcore.repos.settings_repo import SettingsRepo
from qtui.color_picker_panel import ColorPickerPanel
from qtui.theme import apply_theme


def main():
    app_data_dir = Path("app_data")

    # 配置（损坏时回退默认值）
    repo = SettingsRepo(app_data_dir)
    settings = repo.load_or_default()

    # 日志
    log_rt = setup_logging(
        app_data_dir=app_data_dir,
        level=settings.logging.level,
        console=settings.logging.console,
    )

    app = QApplication(sys.argv)
    apply_theme(app, settings.ui.theme)

    win = QMainWindow()
    win.setWindowTitle("Polar Color Picker")
    panel = ColorPickerPanel(settings.picker, parent=win)
    win.setCentralWidget(panel)
    win.show()

    try:
        app.exec()
    finally:
        log_rt.stop()


if __name__ == "__main__":
    main()
