"""
Main Application Window
=======================
Switches between the size-selection scene and the running grid scene.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QStackedWidget

from gridbench.app.application import VISIBLE_APP_NAME
from gridbench.app.state import Configuration, Session
from gridbench.app.ui.panels.grid_choice import GridChoicePanel
from gridbench.app.ui.panels.grid_scene import GridScenePanel
from gridbench.model.grid import GridModel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, configuration: Optional[Configuration] = None, session: Optional[Session] = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 900)

        self.configuration = configuration if configuration is not None else Configuration()
        self.session = session if session is not None else Session()

        self.stack = QStackedWidget(self)
        self.setCentralWidget(self.stack)

        self.choice_panel = GridChoicePanel(self.configuration, self.session, parent=self)
        self.stack.addWidget(self.choice_panel)
        self.grid_scene: Optional[GridScenePanel] = None

        # React to grid selection / discard
        self.session.grid_changed.connect(self._on_grid_changed)

    def _on_grid_changed(self, grid: Optional[GridModel]) -> None:
        self._close_grid_scene()

        if grid is None:
            self.stack.setCurrentWidget(self.choice_panel)
            self.setWindowTitle(VISIBLE_APP_NAME)
            return

        self.grid_scene = GridScenePanel(self.configuration, self.session, grid, parent=self)
        self.grid_scene.back_requested.connect(self.session.discard_grid)
        self.stack.addWidget(self.grid_scene)
        self.stack.setCurrentWidget(self.grid_scene)
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - {grid.describe()}")

    def _close_grid_scene(self) -> None:
        if self.grid_scene is None:
            return
        self.grid_scene.shutdown()
        self.stack.removeWidget(self.grid_scene)
        self.grid_scene.deleteLater()
        self.grid_scene = None

    def closeEvent(self, event) -> None:
        self._close_grid_scene()
        super().closeEvent(event)
