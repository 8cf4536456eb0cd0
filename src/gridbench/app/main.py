"""
Application Initialization
==========================
Constructs the shared state and the main window, then starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Configuration and Session (the shared state).
2. Instantiates the Main Window, passing the state in.

Run with: python -m gridbench
"""
from __future__ import annotations

import logging
import sys

import pyqtgraph as pg

from gridbench.app.application import create_app
from gridbench.app.state import Configuration, Session
from gridbench.app.ui.main_window import MainWindow
from gridbench.logging_config import setup_logging

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=logging.INFO)

    app = create_app()

    configuration = Configuration()
    session = Session()

    win = MainWindow(configuration, session)
    win.show()
    logger.info("Main window shown.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
