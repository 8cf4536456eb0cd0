"""
Recomposition bookkeeping for the grid view.

The view marks the grid, rows or cells dirty when an observed value changes and
folds those marks into per-entity counters on the next paint. The counters drive
the highlight borders; entities idle for longer than the timeout fall back to 0.
"""
from __future__ import annotations

import math
from typing import Optional, TYPE_CHECKING

import numpy as np

from gridbench.config import HIGHLIGHT_SATURATION_COUNT, HIGHLIGHT_TIMEOUT_S

if TYPE_CHECKING:
    import numpy.typing as npt

RGBA = tuple[int, int, int, int]

BLUE: RGBA = (0, 0, 255, 255)
GREEN: RGBA = (0, 255, 0, 255)
YELLOW: RGBA = (255, 255, 0, 204)
RED: RGBA = (255, 0, 0, 128)


def _lerp(start: RGBA, stop: RGBA, fraction: float) -> RGBA:
    return tuple(round(a + (b - a) * fraction) for a, b in zip(start, stop))  # type: ignore[return-value]


def highlight_style(count: int, max_width: float) -> Optional[tuple[RGBA, float]]:
    """
    Border colour and width for an entity recomposed `count` times since its
    last timeout, or None when there is nothing to highlight.

    1 -> thin blue, 2 -> green, more -> yellow fading to red, width growing
    with the count up to `max_width`.
    """
    if count <= 0:
        return None
    if count == 1:
        return BLUE, min(0.5, max_width)
    if count == 2:
        return GREEN, min(1.0, max_width)
    fraction = min(1.0, (count - 1) / HIGHLIGHT_SATURATION_COUNT)
    return _lerp(YELLOW, RED, fraction), min(float(count), max_width)


class RecompositionTracker:
    def __init__(self, row_count: int, column_count: int, timeout: float = HIGHLIGHT_TIMEOUT_S) -> None:
        self.timeout = timeout

        self.grid_count = 0
        self.grid_last = -math.inf
        self.row_counts: npt.NDArray[np.int32] = np.zeros(row_count, dtype=np.int32)
        self.row_last: npt.NDArray[np.float64] = np.full(row_count, -np.inf)
        self.cell_counts: npt.NDArray[np.int32] = np.zeros((row_count, column_count), dtype=np.int32)
        self.cell_last: npt.NDArray[np.float64] = np.full((row_count, column_count), -np.inf)

        self._dirty_grid = False
        self._dirty_rows = np.zeros(row_count, dtype=bool)
        self._dirty_cells = np.zeros((row_count, column_count), dtype=bool)

    # --- MARKING ---

    def mark_cell(self, row_index: int, column_index: int) -> None:
        self._dirty_cells[row_index, column_index] = True

    def mark_all_cells(self) -> None:
        self._dirty_cells[:] = True

    def mark_all_rows(self) -> None:
        self._dirty_rows[:] = True

    def mark_grid(self) -> None:
        self._dirty_grid = True

    @property
    def has_pending(self) -> bool:
        return self._dirty_grid or bool(self._dirty_rows.any()) or bool(self._dirty_cells.any())

    # --- FOLDING ---

    def flush(self, now: float) -> bool:
        """Turn pending marks into counts. Returns True if anything was recomposed."""
        if not self.has_pending:
            return False

        if self._dirty_grid:
            self.grid_count += 1
            self.grid_last = now
            self._dirty_grid = False

        self.row_counts[self._dirty_rows] += 1
        self.row_last[self._dirty_rows] = now
        self._dirty_rows[:] = False

        self.cell_counts[self._dirty_cells] += 1
        self.cell_last[self._dirty_cells] = now
        self._dirty_cells[:] = False
        return True

    def expire(self, now: float) -> bool:
        """Reset counters idle for longer than the timeout. Returns True if any changed."""
        horizon = now - self.timeout
        changed = False

        if self.grid_count and self.grid_last <= horizon:
            self.grid_count = 0
            changed = True

        stale_rows = (self.row_counts > 0) & (self.row_last <= horizon)
        if stale_rows.any():
            self.row_counts[stale_rows] = 0
            changed = True

        stale_cells = (self.cell_counts > 0) & (self.cell_last <= horizon)
        if stale_cells.any():
            self.cell_counts[stale_cells] = 0
            changed = True

        return changed

    def reset(self) -> None:
        self.grid_count = 0
        self.row_counts[:] = 0
        self.cell_counts[:] = 0
        self._dirty_grid = False
        self._dirty_rows[:] = False
        self._dirty_cells[:] = False
