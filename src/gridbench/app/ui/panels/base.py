from __future__ import annotations

from PySide6.QtWidgets import QWidget

from gridbench.app.state import Configuration, Session


class BasePanel(QWidget):
    """Base class for the scenes. Holds references to the shared configuration and session."""
    def __init__(self, configuration: Configuration, session: Session, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.configuration = configuration
        self.session = session
