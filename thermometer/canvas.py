"""
Thermometer canvas widget — QTimer-driven easing and QPainter rendering.

The timer only runs while the mercury is moving: ``seek`` starts it and
the controller stops it once the value has settled.  Layout is cached on
the widget size and invalidated on resize.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt5.QtCore import QRectF, QSize, QTimer, Qt, pyqtSignal
from PyQt5.QtGui import QColor, QFont, QFontMetrics, QPainter
from PyQt5.QtWidgets import QWidget

from .engine import TICK_INTERVAL_MS, EasingController
from .layout import LayoutCache, Rect
from .palettes import DEFAULT_SCHEME, RGB, ColorScheme
from .renderer import render
from .scales import DualScale

logger = logging.getLogger(__name__)

FONT_FAMILY = "Sans Serif"


class QPainterSurface:
    """Adapts a ``QPainter`` to the renderer's drawing surface."""

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self._metrics = painter.fontMetrics()

    def fill_rounded_rect(self, rect: Rect, radius: int, color: RGB) -> None:
        # radius is the corner arc's diameter, Qt wants the radius
        self.painter.setPen(Qt.NoPen)
        self.painter.setBrush(QColor(*color))
        self.painter.drawRoundedRect(
            QRectF(rect.x, rect.y, rect.width, rect.height),
            radius / 2.0, radius / 2.0,
        )

    def fill_rect(self, rect: Rect, color: RGB) -> None:
        self.painter.fillRect(rect.x, rect.y, rect.width, rect.height, QColor(*color))

    def fill_ellipse(self, rect: Rect, color: RGB) -> None:
        self.painter.setPen(Qt.NoPen)
        self.painter.setBrush(QColor(*color))
        self.painter.drawEllipse(rect.x, rect.y, rect.width, rect.height)

    def set_font_size(self, size: int) -> None:
        font = QFont(FONT_FAMILY)
        font.setPointSize(size)
        self.painter.setFont(font)
        self._metrics = QFontMetrics(font)

    def text_width(self, text: str) -> int:
        return self._metrics.horizontalAdvance(text)

    def line_height(self) -> int:
        return self._metrics.height()

    def draw_text(self, x: int, y: int, text: str, color: RGB) -> None:
        self.painter.setPen(QColor(*color))
        self.painter.drawText(x, y, text)


class ThermometerCanvas(QWidget):
    """Animated thermometer display.

    Signals:
        value_changed(float):  displayed temperature after each moving tick
        settled(float):        temperature at which the animation stopped
    """

    value_changed = pyqtSignal(float)
    settled = pyqtSignal(float)

    PREFERRED_W = 100
    PREFERRED_H = 400

    def __init__(
        self,
        scale: DualScale,
        initial: Optional[float] = None,
        scheme: ColorScheme = DEFAULT_SCHEME,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.scale = scale
        self.scheme = scheme
        self._layout = LayoutCache(scale)

        # Animation timer (~30 fps), started on demand
        self._timer = QTimer(self)
        self._timer.setInterval(TICK_INTERVAL_MS)
        self._timer.timeout.connect(self._tick)

        start = scale.minimum if initial is None else initial
        self.controller = EasingController(start, self._timer, on_repaint=self.update)

    # ── properties ────────────────────────────────────────────────────────

    @property
    def value(self) -> float:
        return self.controller.value

    @property
    def animating(self) -> bool:
        return self.controller.running

    def sizeHint(self) -> QSize:
        return QSize(self.PREFERRED_W, self.PREFERRED_H)

    # ── animation ─────────────────────────────────────────────────────────

    def seek(self, target: int) -> None:
        """Slot for the slider: ease toward *target* degrees Celsius."""
        self.controller.seek(target)

    def _tick(self) -> None:
        if self.controller.tick():
            self.value_changed.emit(self.controller.value)
        if not self.controller.running:
            self.settled.emit(self.controller.value)

    # ── painting ──────────────────────────────────────────────────────────

    def resizeEvent(self, event):
        self._layout.invalidate()
        super().resizeEvent(event)

    def paintEvent(self, event):
        geometry = self._layout.get(self.width(), self.height())
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        render(QPainterSurface(painter), geometry, self.controller.value, self.scheme)
        painter.end()
