from __future__ import annotations

import logging
from enum import StrEnum
from typing import Iterator, Optional

from PySide6.QtCore import QObject, Signal

from gridbench.model.grid import GridModel

logger = logging.getLogger(__name__)


class Setting(StrEnum):
    """The benchmark toggles, in display order."""
    PAUSE_ON_EACH_STEP = "pause_on_each_step"
    UPDATE_TOP_ROW_ONLY = "update_top_row_only"
    ANIMATIONS_ENABLED = "animations_enabled"
    RECOMPOSE_HIGHLIGHTING = "recompose_highlighting"
    FORCE_TOP_LEVEL_RECOMPOSITION = "force_top_level_recomposition"
    FORCE_ROW_LEVEL_RECOMPOSITION = "force_row_level_recomposition"
    FORCE_CELL_LEVEL_RECOMPOSITION = "force_cell_level_recomposition"


SETTING_LABELS: dict[Setting, str] = {
    Setting.PAUSE_ON_EACH_STEP: "Pause on each step (100ms)",
    Setting.UPDATE_TOP_ROW_ONLY: "Update top row only",
    Setting.ANIMATIONS_ENABLED: "Enable animations",
    Setting.RECOMPOSE_HIGHLIGHTING: "Highlight recompositions",
    Setting.FORCE_TOP_LEVEL_RECOMPOSITION: "Force top-level recomposition",
    Setting.FORCE_ROW_LEVEL_RECOMPOSITION: "Force row-level recomposition",
    Setting.FORCE_CELL_LEVEL_RECOMPOSITION: "Force cell-level recomposition",
}


class Configuration(QObject):
    """
    Independent boolean switches read by the driver loop and the views.

    Created once at startup and handed to every component that needs it.
    `setting_changed` fires only when a value actually changes.
    """
    setting_changed = Signal(str, bool)

    def __init__(self) -> None:
        super().__init__()
        self._values: dict[Setting, bool] = {setting: False for setting in Setting}

    def value(self, setting: Setting | str) -> bool:
        return self._values[self._resolve(setting)]

    def set_value(self, setting: Setting | str, enabled: bool) -> None:
        key = self._resolve(setting)
        enabled = bool(enabled)
        if self._values[key] == enabled:
            return
        self._values[key] = enabled
        logger.debug(f"Setting '{key}' -> {enabled}")
        self.setting_changed.emit(str(key), enabled)

    def items(self) -> Iterator[tuple[Setting, str, bool]]:
        """(setting, label, value) in display order."""
        for setting in Setting:
            yield setting, SETTING_LABELS[setting], self._values[setting]

    @staticmethod
    def _resolve(setting: Setting | str) -> Setting:
        try:
            return Setting(setting)
        except ValueError:
            raise ValueError(f"Unknown setting '{setting}'.") from None

    # Shorthands used on every driver step

    @property
    def pause_on_each_step(self) -> bool:
        return self._values[Setting.PAUSE_ON_EACH_STEP]

    @property
    def update_top_row_only(self) -> bool:
        return self._values[Setting.UPDATE_TOP_ROW_ONLY]

    @property
    def animations_enabled(self) -> bool:
        return self._values[Setting.ANIMATIONS_ENABLED]

    @property
    def recompose_highlighting(self) -> bool:
        return self._values[Setting.RECOMPOSE_HIGHLIGHTING]


class RecompositionTriggers(QObject):
    """
    Counters bumped by the driver to force repaints at a given level.
    Only the notification matters, the values are never displayed.
    """
    top_level_changed = Signal(int)
    row_level_changed = Signal(int)
    cell_level_changed = Signal(int)

    def __init__(self) -> None:
        super().__init__()
        self.top_level = 0
        self.row_level = 0
        self.cell_level = 0

    def bump_top_level(self) -> None:
        self.top_level += 1
        self.top_level_changed.emit(self.top_level)

    def bump_row_level(self) -> None:
        self.row_level += 1
        self.row_level_changed.emit(self.row_level)

    def bump_cell_level(self) -> None:
        self.cell_level += 1
        self.cell_level_changed.emit(self.cell_level)


class Session(QObject):
    """Holds the grid currently on screen (None while choosing a size)."""
    grid_changed = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self._grid: Optional[GridModel] = None

    @property
    def grid(self) -> Optional[GridModel]:
        return self._grid

    def select_grid(self, row_count: int, column_count: Optional[int] = None) -> GridModel:
        grid = GridModel(row_count, column_count)
        self._grid = grid
        logger.info(f"Selected grid {grid.describe()}")
        self.grid_changed.emit(grid)
        return grid

    def discard_grid(self) -> None:
        if self._grid is None:
            return
        logger.info(f"Discarded grid {self._grid.describe()}")
        self._grid = None
        self.grid_changed.emit(None)
