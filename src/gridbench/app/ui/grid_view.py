"""
Grid View
Custom-painted grid of cells. Repaints only what the observed state invalidated.
"""
from __future__ import annotations

import logging
import time

from PySide6.QtCore import QRect, QRectF, Qt, QTimer
from PySide6.QtGui import QColor, QFont, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QWidget

from gridbench.app.state import Configuration, RecompositionTriggers, Setting
from gridbench.app.ui.recomposition import RecompositionTracker, highlight_style
from gridbench.config import (
    ANIMATION_DURATION_MS,
    ANIMATION_FRAME_MS,
    CELL_BORDER_COLOR,
    CELL_SIZE_PX,
)
from gridbench.model.grid import CELL_MODULUS, GridModel

logger = logging.getLogger(__name__)

EXPIRY_CHECK_MS = 500


class GridView(QWidget):
    """
    Draws every cell of a grid as a bordered square with its digit (blank for 0).

    Dirty marks:
      - a changed cell repaints that cell,
      - the top-level trigger repaints the whole grid,
      - the row-level trigger repaints every row,
      - the cell-level trigger and `clear()` repaint every cell.
    """
    def __init__(
        self,
        grid: GridModel,
        configuration: Configuration,
        triggers: RecompositionTriggers,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.grid = grid
        self.configuration = configuration
        self.tracker = RecompositionTracker(grid.row_count, grid.column_count)

        self.setFixedSize(grid.column_count * CELL_SIZE_PX + 1, grid.row_count * CELL_SIZE_PX + 1)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)

        self._font = QFont()
        self._font.setPointSize(11)
        self._font.setBold(True)
        self._border_pen = QPen(QColor(CELL_BORDER_COLOR), 1)

        # (row, column) -> (old value, new value, start time)
        self._animations: dict[tuple[int, int], tuple[int, int, float]] = {}
        self._animation_timer = QTimer(self)
        self._animation_timer.setInterval(ANIMATION_FRAME_MS)
        self._animation_timer.timeout.connect(self._advance_animations)

        self._expiry_timer = QTimer(self)
        self._expiry_timer.setInterval(EXPIRY_CHECK_MS)
        self._expiry_timer.timeout.connect(self._expire_highlights)
        if configuration.recompose_highlighting:
            self._expiry_timer.start()

        grid.cell_changed.connect(self._on_cell_changed)
        grid.cleared.connect(self._on_cleared)
        triggers.top_level_changed.connect(self._on_top_level_trigger)
        triggers.row_level_changed.connect(self._on_row_level_trigger)
        triggers.cell_level_changed.connect(self._on_cell_level_trigger)
        configuration.setting_changed.connect(self._on_setting_changed)

    # --- GEOMETRY ---

    @staticmethod
    def cell_rect(row_index: int, column_index: int) -> QRect:
        return QRect(column_index * CELL_SIZE_PX, row_index * CELL_SIZE_PX, CELL_SIZE_PX, CELL_SIZE_PX)

    def row_rect(self, row_index: int) -> QRect:
        return QRect(0, row_index * CELL_SIZE_PX, self.grid.column_count * CELL_SIZE_PX, CELL_SIZE_PX)

    def grid_rect(self) -> QRect:
        return QRect(0, 0, self.grid.column_count * CELL_SIZE_PX, self.grid.row_count * CELL_SIZE_PX)

    # --- SLOTS ---

    def _on_cell_changed(self, row_index: int, column_index: int, value: int) -> None:
        self.tracker.mark_cell(row_index, column_index)
        if self.configuration.animations_enabled:
            previous = (value - 1) % CELL_MODULUS
            self._animations[(row_index, column_index)] = (previous, value, time.monotonic())
            if not self._animation_timer.isActive():
                self._animation_timer.start()
        self.update(self.cell_rect(row_index, column_index))

    def _on_cleared(self) -> None:
        self._animations.clear()
        self._animation_timer.stop()
        self.tracker.mark_all_cells()
        self.update()

    def _on_top_level_trigger(self, _value: int) -> None:
        self.tracker.mark_grid()
        self.update()

    def _on_row_level_trigger(self, _value: int) -> None:
        self.tracker.mark_all_rows()
        self.update()

    def _on_cell_level_trigger(self, _value: int) -> None:
        self.tracker.mark_all_cells()
        self.update()

    def _on_setting_changed(self, key: str, enabled: bool) -> None:
        if key == Setting.RECOMPOSE_HIGHLIGHTING:
            if enabled:
                self._expiry_timer.start()
            else:
                self._expiry_timer.stop()
                self.tracker.reset()
            self.update()
        elif key == Setting.ANIMATIONS_ENABLED and not enabled:
            self._animations.clear()
            self._animation_timer.stop()
            self.update()

    def _advance_animations(self) -> None:
        now = time.monotonic()
        duration = ANIMATION_DURATION_MS / 1000.0
        finished = []
        for (row_index, column_index), (_, _, started) in self._animations.items():
            self.update(self.cell_rect(row_index, column_index))
            if now - started >= duration:
                finished.append((row_index, column_index))
        for key in finished:
            del self._animations[key]
        if not self._animations:
            self._animation_timer.stop()

    def _expire_highlights(self) -> None:
        if self.tracker.expire(time.monotonic()):
            self.update()

    # --- PAINTING ---

    def paintEvent(self, event: QPaintEvent) -> None:
        now = time.monotonic()
        self.tracker.flush(now)
        highlighting = self.configuration.recompose_highlighting

        area = event.rect()
        first_row = max(0, area.top() // CELL_SIZE_PX)
        last_row = min(self.grid.row_count - 1, area.bottom() // CELL_SIZE_PX)
        first_column = max(0, area.left() // CELL_SIZE_PX)
        last_column = min(self.grid.column_count - 1, area.right() // CELL_SIZE_PX)

        painter = QPainter(self)
        painter.fillRect(area, Qt.GlobalColor.white)
        painter.setFont(self._font)

        for row_index in range(first_row, last_row + 1):
            cells = self.grid.rows[row_index].cells
            for column_index in range(first_column, last_column + 1):
                self._paint_cell(painter, row_index, column_index, cells[column_index].content, now)
                if highlighting:
                    self._paint_highlight(
                        painter,
                        self.cell_rect(row_index, column_index),
                        int(self.tracker.cell_counts[row_index, column_index]),
                    )
            if highlighting:
                self._paint_highlight(painter, self.row_rect(row_index), int(self.tracker.row_counts[row_index]))

        if highlighting:
            self._paint_highlight(painter, self.grid_rect(), self.tracker.grid_count)

        painter.end()

    def _paint_cell(self, painter: QPainter, row_index: int, column_index: int, content: int, now: float) -> None:
        rect = self.cell_rect(row_index, column_index)
        painter.setPen(self._border_pen)
        painter.drawRect(rect)
        painter.setPen(Qt.GlobalColor.black)

        animation = self._animations.get((row_index, column_index))
        if animation is None:
            self._draw_digit(painter, QRectF(rect), content)
            return

        previous, current, started = animation
        progress = min(1.0, (now - started) * 1000.0 / ANIMATION_DURATION_MS)
        offset = progress * CELL_SIZE_PX

        painter.save()
        painter.setClipRect(rect)
        # New value slides in from below, the old one leaves upwards
        self._draw_digit(painter, QRectF(rect).translated(0, CELL_SIZE_PX - offset), current)
        self._draw_digit(painter, QRectF(rect).translated(0, -offset), previous)
        painter.restore()

    @staticmethod
    def _draw_digit(painter: QPainter, rect: QRectF, content: int) -> None:
        if content != 0:
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, str(content))

    @staticmethod
    def _paint_highlight(painter: QPainter, rect: QRect, count: int) -> None:
        style = highlight_style(count, max_width=CELL_SIZE_PX / 2)
        if style is None:
            return
        (r, g, b, a), width = style
        pen = QPen(QColor(r, g, b, a), width)
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        half = width / 2
        painter.drawRect(QRectF(rect).adjusted(half, half, -half, -half))
