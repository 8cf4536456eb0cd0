"""
Driver Loop
===========
Mutates the grid one cell at a time for as long as it is running.

Why is this file needed?
------------------------
1. Responsiveness: The loop never blocks. Each iteration is a single-shot
   QTimer callback on the GUI thread, so button presses and repaints are
   handled between steps.
2. Cancellation: `stop()` stops the pending timer, so an outstanding 100 ms
   pause ends immediately and no further cell is touched.

Classes:
    GridDriver: The repeating, cancellable update task.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from gridbench.app.state import Configuration, RecompositionTriggers, Setting
from gridbench.config import PAUSE_INTERVAL_MS, YIELD_INTERVAL_MS
from gridbench.controller.fps import FpsCounter
from gridbench.model.grid import GridModel

logger = logging.getLogger(__name__)


class GridDriver(QObject):
    running_changed = Signal(bool)
    stepped = Signal()

    def __init__(
        self,
        grid: GridModel,
        configuration: Configuration,
        triggers: RecompositionTriggers,
        fps: Optional[FpsCounter] = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.grid = grid
        self.configuration = configuration
        self.triggers = triggers
        self.fps = fps if fps is not None else FpsCounter()

        self._running = False
        self._started_at: Optional[float] = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)

    # --- PROPERTIES ---

    @property
    def is_running(self) -> bool:
        return self._running

    def elapsed_seconds(self) -> int:
        """Whole seconds since the last start, 0 while stopped."""
        if self._started_at is None:
            return 0
        return int(time.monotonic() - self._started_at)

    # --- CONTROL ---

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._started_at = time.monotonic()
        self.fps.reset()
        logger.info(f"Driver started on grid {self.grid.describe()}")
        self.running_changed.emit(True)
        self._timer.start(YIELD_INTERVAL_MS)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._started_at = None
        self._timer.stop()
        logger.info(
            f"Driver stopped after {self.fps.count} updates ({self.fps.average:.0f} FPS average)"
        )
        self.running_changed.emit(False)

    def toggle(self) -> None:
        if self._running:
            self.stop()
        else:
            self.start()

    # --- LOOP ---

    def step(self) -> None:
        """Run one iteration: mutate a cell, count it, bump forced triggers."""
        self.grid.update_single_cell(self.configuration.update_top_row_only)
        self.fps.tick()

        if self.configuration.value(Setting.FORCE_TOP_LEVEL_RECOMPOSITION):
            self.triggers.bump_top_level()
        if self.configuration.value(Setting.FORCE_ROW_LEVEL_RECOMPOSITION):
            self.triggers.bump_row_level()
        if self.configuration.value(Setting.FORCE_CELL_LEVEL_RECOMPOSITION):
            self.triggers.bump_cell_level()

        self.stepped.emit()

    def _on_timeout(self) -> None:
        if not self._running:
            return
        self.step()
        # A slot connected to `stepped` may have stopped us
        if not self._running:
            return
        interval = PAUSE_INTERVAL_MS if self.configuration.pause_on_each_step else YIELD_INTERVAL_MS
        self._timer.start(interval)
