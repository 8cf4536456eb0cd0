"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: Timing and layout numbers are shared by the driver loop,
   the grid view and the info bar; they live here instead of being repeated.
2. Tuning: Everything worth tweaking while benchmarking is in one place.

Exports:
    GRID_SIZES: Square grid sizes offered on the selection screen.
    PAUSE_INTERVAL_MS: Delay between steps when "pause on each step" is on.
"""
from typing import Final

# Square grids offered on the choice screen (rows == columns)
GRID_SIZES: Final[tuple[int, ...]] = (25, 50, 100, 200, 400)

# Driver loop
PAUSE_INTERVAL_MS: Final[int] = 100
YIELD_INTERVAL_MS: Final[int] = 0

# Info bar refresh
INFO_REFRESH_MS: Final[int] = 100

# Grid view
CELL_SIZE_PX: Final[int] = 22
CELL_BORDER_COLOR: Final[str] = "#D3D3D3"
ANIMATION_DURATION_MS: Final[int] = 300
ANIMATION_FRAME_MS: Final[int] = 16
ANIMATION_SETTLE_MS: Final[int] = 200

# Recomposition highlighting
HIGHLIGHT_TIMEOUT_S: Final[float] = 3.0
HIGHLIGHT_SATURATION_COUNT: Final[int] = 100

# FPS
FPS_WINDOW_S: Final[float] = 1.0
FPS_HISTORY_LENGTH: Final[int] = 300

# Configuration checkboxes per row in the horizontal layout
SETTINGS_PER_ROW: Final[int] = 4
