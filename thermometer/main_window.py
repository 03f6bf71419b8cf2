"""
Main window — slider strip on top, thermometer filling the rest.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import QAction, QMainWindow, QMessageBox, QVBoxLayout, QWidget

from . import __version__
from .canvas import ThermometerCanvas
from .controls import ControlPanel
from .scales import DualScale, to_fahrenheit

logger = logging.getLogger(__name__)

MIN_WIDTH = 400
MIN_HEIGHT = 400


class MainWindow(QMainWindow):
    """Top-level window for the thermometer."""

    def __init__(self, scale: DualScale, initial: Optional[int] = None) -> None:
        super().__init__()
        self.setWindowTitle("Thermometer")
        self.setMinimumSize(MIN_WIDTH, MIN_HEIGHT)

        start = scale.minimum if initial is None else initial
        self.canvas = ThermometerCanvas(scale, start)
        self.controls = ControlPanel(scale, start)

        # Layout
        central = QWidget()
        self.setCentralWidget(central)
        v_layout = QVBoxLayout(central)
        v_layout.setContentsMargins(0, 0, 0, 0)
        v_layout.setSpacing(0)
        v_layout.addWidget(self.controls)
        v_layout.addWidget(self.canvas, stretch=1)

        self._build_menu()
        self._show_reading(start)

        # Signals
        self.controls.target_changed.connect(self.canvas.seek)
        self.canvas.value_changed.connect(self._show_reading)
        self.canvas.settled.connect(self._on_settled)

    def _build_menu(self) -> None:
        menu = self.menuBar()

        file_menu = menu.addMenu("&File")
        quit_act = QAction("&Quit", self)
        quit_act.setShortcut(QKeySequence.Quit)
        quit_act.triggered.connect(self.close)
        file_menu.addAction(quit_act)

        help_menu = menu.addMenu("&Help")
        about_act = QAction("&About", self)
        about_act.triggered.connect(self._about)
        help_menu.addAction(about_act)

    def _show_reading(self, celsius: float) -> None:
        self.statusBar().showMessage(
            f"{celsius:.1f} °C  /  {to_fahrenheit(celsius):.1f} °F"
        )

    def _on_settled(self, celsius: float) -> None:
        logger.debug("Thermometer settled at %.2f °C", celsius)
        self.statusBar().showMessage(
            f"Steady at {celsius:.1f} °C  /  {to_fahrenheit(celsius):.1f} °F"
        )

    def _about(self) -> None:
        QMessageBox.about(
            self,
            "About Thermometer",
            f"<h3>Thermometer v{__version__}</h3>"
            "<p>Animated analog thermometer with Celsius and Fahrenheit scales.</p>"
            "<p>The mercury seeks the slider's temperature with bounded speed "
            "and steering force, so it eases in and may bounce slightly "
            "before settling.</p>"
            "<p>Everything is laid out in proportion to the window size.</p>",
        )
