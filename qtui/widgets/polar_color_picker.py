# qtui/widgets/polar_color_picker.py
from __future__ import annotations

import itertools
import logging
from typing import Callable, Optional, Tuple

from PySide6.QtCore import QEvent, QPoint, QPointF, QRectF, Qt, Signal
from PySide6.QtGui import (
    QBrush,
    QColor,
    QFont,
    QImage,
    QMouseEvent,
    QPainter,
    QPen,
    QRadialGradient,
)
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from colorcore.color import normalize_hex
from colorcore.logging_context import log_context
from colorcore.picker import (
    DEFAULT_SIZE,
    InteractionState,
    PickerGeometry,
    PolarPickerController,
    WheelPlan,
    build_wheel_plan,
    position_for_color,
)

log = logging.getLogger(__name__)

_INDICATOR_DIAMETER = 16
_MARKER_RADIUS = 6
_ids = itertools.count(1)


def render_wheel_image(plan: WheelPlan) -> QImage:
    """
    按 WheelPlan 绘制到一张透明 QImage 上。

    Qt 的角度是逆时针、单位 1/16°；屏幕坐标下顺时针的 [a, b] 区间
    对应 startAngle = -b、spanAngle = b - a。
    """
    img = QImage(plan.size, plan.size, QImage.Format.Format_ARGB32_Premultiplied)
    img.fill(Qt.transparent)
    if plan.radius <= 0:
        return img

    cx, cy = plan.center
    r = plan.radius
    rect = QRectF(cx - r, cy - r, 2 * r, 2 * r)

    p = QPainter(img)
    try:
        p.setRenderHint(QPainter.Antialiasing, True)

        # hue wedges
        p.setPen(Qt.NoPen)
        for w in plan.wedges:
            p.setBrush(QColor(w.rgb.r, w.rgb.g, w.rgb.b))
            start = int(round(-w.end_deg * 16))
            span = int(round((w.end_deg - w.start_deg) * 16))
            p.drawPie(rect, start, span)

        # saturation falloff
        fill = plan.fill
        grad = QRadialGradient(QPointF(*fill.center), fill.radius)
        grad.setColorAt(0.0, QColor(*fill.inner_rgba))
        grad.setColorAt(1.0, QColor(*fill.outer_rgba))
        p.setBrush(QBrush(grad))
        p.drawEllipse(QPointF(*fill.center), fill.radius, fill.radius)

        # border
        border = plan.border
        pen = QPen(QColor(border.color))
        pen.setWidthF(float(border.width))
        p.setPen(pen)
        p.setBrush(Qt.NoBrush)
        p.drawEllipse(QPointF(*border.center), border.radius, border.radius)
    finally:
        p.end()
    return img


class WheelSurface(QWidget):
    """
    轮盘画布（picker 独占）：
    - 缓存的 QImage 只在挂载（首次 show）和尺寸变化时重绘
    - 选中指示（中心色块 + 轮盘上的标记环）单独绘制，不触发整盘重绘
    - 鼠标/触摸事件转给 PolarPickerController
    """

    def __init__(self, controller: PolarPickerController, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._ctl = controller
        self._image: Optional[QImage] = None
        self._selected: Optional[str] = None
        self._marker: Optional[Tuple[float, float]] = None
        self.render_count = 0

        size = controller.geometry.size
        self.setFixedSize(size, size)
        self.setAttribute(Qt.WA_AcceptTouchEvents, True)
        self.setCursor(Qt.PointingHandCursor)

    # ---------- PickerSurface ----------
    def bounding_origin(self) -> Tuple[float, float]:
        origin = self.mapToGlobal(QPoint(0, 0))
        return float(origin.x()), float(origin.y())

    # ---------- 公共 API ----------
    @property
    def mounted(self) -> bool:
        return self._image is not None

    def image(self) -> Optional[QImage]:
        return self._image

    def selected_color(self) -> Optional[str]:
        return self._selected

    def render_wheel(self) -> None:
        geo = self._ctl.geometry
        self.setFixedSize(geo.size, geo.size)
        self._image = render_wheel_image(build_wheel_plan(geo))
        self.render_count += 1
        log.info("wheel rendered size=%d", geo.size, extra={"action": "render_wheel"})
        self.update()

    def invalidate_wheel(self) -> None:
        """Drop the cached raster; it is rebuilt now if shown, else on next show."""
        self._image = None
        if self.isVisible():
            self.render_wheel()
        else:
            self.setFixedSize(self._ctl.geometry.size, self._ctl.geometry.size)

    def set_selection(self, color: str) -> None:
        self._selected = color
        self._marker = position_for_color(color, self._ctl.geometry)
        self.update()

    # ---------- Qt 事件 ----------
    def showEvent(self, event) -> None:
        if self._image is None:
            self.render_wheel()
        self._ctl.attach(self)
        super().showEvent(event)

    def hideEvent(self, event) -> None:
        self._ctl.detach()
        super().hideEvent(event)

    def paintEvent(self, event) -> None:
        if self._image is None:
            return

        p = QPainter(self)
        try:
            p.setRenderHint(QPainter.Antialiasing, True)
            p.drawImage(0, 0, self._image)

            if self._selected is None:
                return
            color = QColor(self._selected)

            if self._marker is not None:
                mx, my = self._marker
                p.setBrush(Qt.NoBrush)
                p.setPen(QPen(QColor(0, 0, 0, 160), 3))
                p.drawEllipse(QPointF(mx, my), _MARKER_RADIUS, _MARKER_RADIUS)
                p.setPen(QPen(QColor(255, 255, 255), 1.5))
                p.drawEllipse(QPointF(mx, my), _MARKER_RADIUS, _MARKER_RADIUS)

            cx, cy = self._ctl.geometry.center
            half = _INDICATOR_DIAMETER / 2
            p.setPen(QPen(QColor(255, 255, 255), 2))
            p.setBrush(color)
            p.drawEllipse(QPointF(cx, cy), half, half)
        finally:
            p.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton:
            pos = event.globalPosition()
            self._ctl.press(pos.x(), pos.y())
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        # 按住按键时鼠标被隐式抓取，leaveEvent 要到松开才来；移出画布即结束拖动
        if not self.rect().contains(event.position().toPoint()):
            self._ctl.leave()
        else:
            pos = event.globalPosition()
            self._ctl.move(pos.x(), pos.y())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self._ctl.release()
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event) -> None:
        self._ctl.leave()
        super().leaveEvent(event)

    def event(self, event: QEvent) -> bool:
        et = event.type()
        if et in (QEvent.TouchBegin, QEvent.TouchUpdate):
            points = event.points()
            if points:
                # 只跟踪第一个触点
                pos = points[0].globalPosition()
                if et == QEvent.TouchBegin:
                    self._ctl.press(pos.x(), pos.y())
                else:
                    self._ctl.move(pos.x(), pos.y())
            # accept：阻止平台把触摸当作滚动/缩放手势
            event.accept()
            return True
        if et in (QEvent.TouchEnd, QEvent.TouchCancel):
            self._ctl.release()
            event.accept()
            return True
        return super().event(event)


class PolarColorPicker(QWidget):
    """
    圆形（极坐标）取色控件：
    - value：当前颜色（#rrggbb），外部修改时只同步指示，不重绘轮盘
    - on_change：每次按下/拖动命中轮盘时回调，参数为小写 #rrggbb
    - size：轮盘直径（默认 200）

    指示更新与 on_change/colorChanged 总是在同一处同步触发。
    """

    colorChanged = Signal(str)

    def __init__(
        self,
        value: str,
        on_change: Callable[[str], None],
        size: int = DEFAULT_SIZE,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._name = f"polar_picker#{next(_ids)}"
        self._on_change = on_change
        self._value = value

        self._ctl = PolarPickerController(on_select=self._apply_selection, size=size)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._surface = WheelSurface(self._ctl, self)
        layout.addWidget(self._surface, 0, Qt.AlignHCenter)

        self._lbl_hex = QLabel("", self)
        self._lbl_hex.setAlignment(Qt.AlignCenter)
        mono = QFont("monospace")
        mono.setStyleHint(QFont.Monospace)
        self._lbl_hex.setFont(mono)
        layout.addWidget(self._lbl_hex, 0, Qt.AlignHCenter)

        self._sync_indicator()

    # ---------- 公共 API ----------
    @property
    def surface(self) -> WheelSurface:
        return self._surface

    @property
    def controller(self) -> PolarPickerController:
        return self._ctl

    @property
    def state(self) -> InteractionState:
        return self._ctl.state

    def value(self) -> str:
        return self._value

    def selected_color(self) -> Optional[str]:
        return self._surface.selected_color()

    def wheel_size(self) -> int:
        return self._ctl.geometry.size

    def set_value(self, value: str) -> None:
        if value == self._value:
            return
        self._value = value
        self._sync_indicator()

    def set_size(self, size: int) -> None:
        geo = PickerGeometry.for_size(size)
        if geo.size == self._ctl.geometry.size:
            return
        self._ctl.resize(geo.size)
        self._surface.invalidate_wheel()
        self._sync_indicator()

    # ---------- 内部 ----------
    def _sync_indicator(self) -> None:
        hx = normalize_hex(self._value)
        if hx is None:
            # 非法外部值：保持原指示不变，直到下一次有效交互
            log.debug("ignored invalid value %r", self._value, extra={"widget": self._name})
            return
        self._surface.set_selection(hx)
        self._lbl_hex.setText(hx)

    def _apply_selection(self, color: str) -> None:
        with log_context(widget=self._name, action="pick"):
            log.debug("selected %s", color)
            self._surface.set_selection(color)
            self._lbl_hex.setText(color)
            self._on_change(color)
            self.colorChanged.emit(color)
