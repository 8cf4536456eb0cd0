"""
Grid Scene
==========
The running benchmark: control buttons, info line, optional settings and the grid.

Why is this file needed?
------------------------
1. Wiring: It creates the per-session driver and recomposition triggers and
   connects them to the grid view.
2. Lifecycle: Going back stops the driver before the grid is discarded.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QTimer, Signal
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QScrollArea, QVBoxLayout, QWidget

from gridbench.app.state import Configuration, RecompositionTriggers, Session, Setting
from gridbench.app.ui.grid_view import GridView
from gridbench.app.ui.info import InfoBar
from gridbench.app.ui.panels.base import BasePanel
from gridbench.app.ui.panels.configuration import ConfigurationPanel
from gridbench.config import ANIMATION_SETTLE_MS
from gridbench.controller.driver import GridDriver
from gridbench.model.grid import GridModel

logger = logging.getLogger(__name__)


class GridScenePanel(BasePanel):
    back_requested = Signal()

    def __init__(
        self,
        configuration: Configuration,
        session: Session,
        grid: GridModel,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(configuration, session, parent)
        self.grid = grid
        self.triggers = RecompositionTriggers()
        self.driver = GridDriver(grid, configuration, self.triggers, parent=self)

        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        # --- Buttons ---
        buttons = QHBoxLayout()
        buttons.setSpacing(12)
        self.btn_back = QPushButton("Back")
        self.btn_back.clicked.connect(self.on_back_clicked)
        self.btn_start_stop = QPushButton("Start")
        self.btn_start_stop.clicked.connect(self.driver.toggle)
        self.btn_clear = QPushButton("Clear")
        self.btn_clear.clicked.connect(self.grid.clear)
        self.btn_configuration = QPushButton("Show Configuration")
        self.btn_configuration.clicked.connect(self.on_configuration_clicked)
        for btn in (self.btn_back, self.btn_start_stop, self.btn_clear, self.btn_configuration):
            buttons.addWidget(btn)
        buttons.addStretch()
        layout.addLayout(buttons)

        # --- Settings (hidden until requested) ---
        self.config_panel = ConfigurationPanel(configuration, horizontal=True)
        self.config_panel.setVisible(False)
        layout.addWidget(self.config_panel)

        # --- Info ---
        self.info = InfoBar(self.driver)
        layout.addWidget(self.info)

        # --- Grid ---
        self.grid_view = GridView(grid, configuration, self.triggers)
        self.scroll = QScrollArea()
        self.scroll.setWidget(self.grid_view)
        layout.addWidget(self.scroll, 1)

        # Repainting every cell in a new mode is slow for big grids;
        # hide the grid briefly whenever the animation mode flips.
        self._settle_timer = QTimer(self)
        self._settle_timer.setSingleShot(True)
        self._settle_timer.timeout.connect(self._show_grid)

        self.driver.running_changed.connect(self._on_running_changed)
        configuration.setting_changed.connect(self._on_setting_changed)

    # --- PROPERTIES ---

    @property
    def configuration_visible(self) -> bool:
        return not self.config_panel.isHidden()

    @property
    def grid_visible(self) -> bool:
        return not self.scroll.isHidden()

    # --- SLOTS ---

    def on_back_clicked(self) -> None:
        self.driver.stop()
        self.back_requested.emit()

    def on_configuration_clicked(self) -> None:
        visible = not self.configuration_visible
        self.config_panel.setVisible(visible)
        self.btn_configuration.setText("Hide Configuration" if visible else "Show Configuration")

    def _on_running_changed(self, running: bool) -> None:
        self.btn_start_stop.setText("Stop" if running else "Start")

    def _on_setting_changed(self, key: str, _enabled: bool) -> None:
        if key == Setting.ANIMATIONS_ENABLED:
            self.scroll.setVisible(False)
            self._settle_timer.start(ANIMATION_SETTLE_MS)

    def _show_grid(self) -> None:
        self.scroll.setVisible(True)

    def shutdown(self) -> None:
        """Stop everything that could still touch the grid before the scene is deleted."""
        self.driver.stop()
        self._settle_timer.stop()
