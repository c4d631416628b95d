# tests/conftest.py
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# 项目根目录 = tests 上一层目录
ROOT = Path(__file__).resolve().parents[1]

root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

# Qt 测试不需要真实显示器
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """
    Session-wide QApplication for the Qt adapter tests.
    """
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance()
    if app is None:
        app = widgets.QApplication([])
    yield app
