from __future__ import annotations

from PySide6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from gridbench.app.state import Configuration, Session
from gridbench.app.ui.panels.base import BasePanel
from gridbench.app.ui.panels.configuration import ConfigurationPanel
from gridbench.config import GRID_SIZES
from gridbench.model.grid import GridModel


class GridChoicePanel(BasePanel):
    """Size selection: one button per grid size next to the settings."""
    def __init__(self, configuration: Configuration, session: Session, parent: QWidget | None = None) -> None:
        super().__init__(configuration, session, parent)

        layout = QHBoxLayout(self)

        buttons = QVBoxLayout()
        self.size_buttons: dict[int, QPushButton] = {}
        for size in GRID_SIZES:
            btn = QPushButton(GridModel.describe_dimensions(size, size))
            btn.setMinimumHeight(32)
            btn.clicked.connect(lambda _=False, n=size: self.session.select_grid(n))
            buttons.addWidget(btn)
            self.size_buttons[size] = btn
        buttons.addStretch()
        layout.addLayout(buttons)

        layout.addSpacing(24)

        self.config_panel = ConfigurationPanel(configuration, horizontal=False)
        layout.addWidget(self.config_panel)
        layout.addStretch()
