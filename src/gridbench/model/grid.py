"""
Grid Model
==========
The mutable grid of numeric cells driven by the benchmark loop.

Why is this file needed?
------------------------
1. State: It owns every cell value shown in the grid view.
2. Notification: Views subscribe to `cell_changed` / `cleared` instead of
   polling, so only what actually changed gets repainted.

Classes:
    CellModel: A single value in [0, 9].
    RowModel: A fixed-length sequence of cells.
    GridModel: Rows x columns of cells plus the mutation operations.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol, TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QObject, Signal

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

CELL_MODULUS = 10


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [low, high)."""
    def integers(self, low: int, high: int) -> int: ...


class CellModel:
    __slots__ = ("content",)

    def __init__(self) -> None:
        self.content: int = 0

    def __repr__(self) -> str:
        return f"CellModel({self.content})"


class RowModel:
    __slots__ = ("cells",)

    def __init__(self, column_count: int) -> None:
        self.cells: list[CellModel] = [CellModel() for _ in range(column_count)]

    def __len__(self) -> int:
        return len(self.cells)

    def values(self) -> list[int]:
        return [cell.content for cell in self.cells]


class GridModel(QObject):
    """
    Rows x columns of cells. Dimensions are fixed at construction.

    Signals:
        cell_changed(row, column, value): emitted after a single cell update.
        cleared(): emitted after every cell has been reset to 0.
    """
    cell_changed = Signal(int, int, int)
    cleared = Signal()

    def __init__(
        self,
        row_count: int,
        column_count: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__()
        if column_count is None:
            column_count = row_count
        if row_count <= 0 or column_count <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {row_count}x{column_count}."
            )

        self._row_count = row_count
        self._column_count = column_count
        self._rng: RandomSource = rng if rng is not None else np.random.default_rng(seed)
        self.rows: list[RowModel] = [RowModel(column_count) for _ in range(row_count)]

    # --- PROPERTIES ---

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def cell_count(self) -> int:
        return self._row_count * self._column_count

    # --- ACCESS ---

    def cell(self, row_index: int, column_index: int) -> CellModel:
        return self.rows[row_index].cells[column_index]

    def values(self) -> npt.NDArray[np.int8]:
        """Snapshot of all cell values as a (rows, columns) array."""
        return np.array([row.values() for row in self.rows], dtype=np.int8)

    # --- MUTATION ---

    def update_single_cell(self, restrict_to_first_row: bool) -> None:
        """
        Increment one cell modulo 10.

        The row is fixed at 0 when `restrict_to_first_row` is set, the column is
        always drawn at random.
        """
        if restrict_to_first_row:
            row_index = 0
        else:
            row_index = int(self._rng.integers(0, self._row_count))
        column_index = int(self._rng.integers(0, self._column_count))

        target = self.cell(row_index, column_index)
        target.content = (target.content + 1) % CELL_MODULUS
        self.cell_changed.emit(row_index, column_index, target.content)

    def clear(self) -> None:
        for row in self.rows:
            for cell in row.cells:
                cell.content = 0
        logger.info(f"Grid {self.describe()} cleared.")
        self.cleared.emit()

    # --- DESCRIPTION ---

    @staticmethod
    def describe_dimensions(row_count: int, column_count: int) -> str:
        return f"{row_count}x{column_count} ({row_count * column_count} cells)"

    def describe(self) -> str:
        return self.describe_dimensions(self._row_count, self._column_count)

    def __str__(self) -> str:
        return self.describe()
