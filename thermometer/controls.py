"""
Control panel — the temperature slider that drives the thermometer.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QHBoxLayout, QLabel, QSlider, QWidget

from .scales import DECADE, DualScale, to_fahrenheit

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Labelled slider helper
# ---------------------------------------------------------------------------

class LSlider(QWidget):
    """Horizontal slider with label, decade ticks and readout."""

    valueChanged = pyqtSignal(int)

    def __init__(self, label, lo, hi, val, suffix="", parent=None):
        super().__init__(parent)
        lay = QHBoxLayout(self)
        lay.setContentsMargins(0, 1, 0, 1)

        self._lbl = QLabel(label)
        lay.addWidget(self._lbl)

        self._slider = QSlider(Qt.Horizontal)
        self._slider.setRange(lo, hi)
        self._slider.setValue(val)
        self._slider.setTickInterval(DECADE)
        self._slider.setTickPosition(QSlider.TicksBelow)
        lay.addWidget(self._slider, stretch=1)

        self._suffix = suffix
        self._ro = QLabel(f"{val}{suffix}")
        self._ro.setFixedWidth(56)
        self._ro.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        lay.addWidget(self._ro)

        self._slider.valueChanged.connect(self._changed)

    def _changed(self, v):
        self._ro.setText(f"{v}{self._suffix}")
        self.valueChanged.emit(v)

    def value(self):
        return self._slider.value()

    def setValue(self, v):
        self._slider.setValue(v)


# ---------------------------------------------------------------------------
# Control panel
# ---------------------------------------------------------------------------

class ControlPanel(QWidget):
    """Strip above the thermometer holding the target slider."""

    target_changed = pyqtSignal(int)

    def __init__(
        self,
        scale: DualScale,
        initial: int,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.scale = scale

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)

        self._slider = LSlider("Degrees Celsius", scale.minimum, scale.maximum,
                               initial, " °C")
        self._slider.valueChanged.connect(self._on_target)
        layout.addWidget(self._slider, stretch=1)

        self._secondary = QLabel()
        self._secondary.setFixedWidth(64)
        self._secondary.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        layout.addWidget(self._secondary)
        self._show_secondary(initial)

    def target(self) -> int:
        return self._slider.value()

    def _show_secondary(self, celsius: int) -> None:
        self._secondary.setText(f"{to_fahrenheit(celsius):.0f} °F")

    def _on_target(self, value: int) -> None:
        logger.debug("Slider target %d", value)
        self._show_secondary(value)
        self.target_changed.emit(value)
