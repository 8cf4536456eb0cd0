"""Status line and FPS history plot shown above the grid."""
from __future__ import annotations

from collections import deque

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from gridbench.config import FPS_HISTORY_LENGTH, INFO_REFRESH_MS
from gridbench.controller.driver import GridDriver


def format_info(grid_description: str, seconds: int, fps: float) -> str:
    return f"Grid: {grid_description}, {seconds} s, {fps:.0f} FPS"


class InfoBar(QWidget):
    """
    Refreshes every INFO_REFRESH_MS. Seconds and FPS keep their last values
    after the driver stops; the plot restarts on every start.
    """
    def __init__(self, driver: GridDriver, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.driver = driver
        self._seconds = 0
        self._fps = 0.0
        self._history: deque[int] = deque(maxlen=FPS_HISTORY_LENGTH)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.label = QLabel()
        layout.addWidget(self.label)

        self.plot_widget = pg.PlotWidget(background="w")
        self.plot_widget.setFixedHeight(120)
        self.plot_widget.setLabel("left", "FPS")
        self.plot_widget.showGrid(x=False, y=True, alpha=0.3)
        self.plot_widget.setMouseEnabled(x=False, y=False)
        self.plot_widget.hideButtons()
        self.curve = self.plot_widget.plot([], [], pen=pg.mkPen(color=(0, 120, 215), width=2))
        layout.addWidget(self.plot_widget)

        self._timer = QTimer(self)
        self._timer.setInterval(INFO_REFRESH_MS)
        self._timer.timeout.connect(self.refresh)
        self._timer.start()

        driver.running_changed.connect(self._on_running_changed)
        self.refresh()

    def _on_running_changed(self, running: bool) -> None:
        if running:
            self._seconds = 0
            self._fps = 0.0
            self._history.clear()
            self.curve.setData([], [])
        self.refresh()

    def refresh(self) -> None:
        if self.driver.is_running:
            self._seconds = self.driver.elapsed_seconds()
            self._fps = self.driver.fps.average
            self._history.append(self.driver.fps.rolling)
            y = np.fromiter(self._history, dtype=float, count=len(self._history))
            x = np.arange(len(y)) * (INFO_REFRESH_MS / 1000.0)
            self.curve.setData(x, y)

        self.label.setText(format_info(self.driver.grid.describe(), self._seconds, self._fps))
