"""
Volcano Canvas
Immediate-mode plot widget: every frame is redrawn from the current state.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QPointF, QTimer, Qt
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget

from volcanoviz.config import FRAME_INTERVAL_MS
from volcanoviz.model.mapping import VolcanoMarker, hit_test
from volcanoviz.model.state import VisualizationState
from volcanoviz.view.renderer import render


class VolcanoCanvas(QWidget):
    """
    Hosts the frame loop for the volcano scatter plot.

    - a QTimer repaints at a fixed rate,
    - mouse tracking keeps the latest pointer position,
    - each resize swaps in a state rebuilt for the new size before the next paint.
    """
    def __init__(self, state: VisualizationState, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self._state: VisualizationState = state
        self._pointer: Optional[QPointF] = None

        self.setMouseTracking(True)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)
        self.setMinimumSize(320, 240)

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self.update)
        self._frame_timer.start()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def state(self) -> VisualizationState:
        return self._state

    def set_state(self, state: VisualizationState) -> None:
        """Replace the whole state, fitted to the current widget size."""
        if (state.width, state.height) != (self.width(), self.height()):
            state = state.resized(self.width(), self.height())
        self._state = state
        self.update()

    def hovered_marker(self) -> Optional[VolcanoMarker]:
        """The marker under the last sampled pointer position, if any."""
        if self._pointer is None:
            return None
        return hit_test(self._state.markers, self._pointer.x(), self._pointer.y())

    def stop(self) -> None:
        self._frame_timer.stop()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        state = self._state
        hovered = self.hovered_marker()

        if hovered is not None:
            self.setCursor(Qt.CursorShape.PointingHandCursor)
        else:
            self.setCursor(Qt.CursorShape.ArrowCursor)

        painter = QPainter(self)
        try:
            render(painter, state, hovered)
        finally:
            painter.end()

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self._state = self._state.resized(size.width(), size.height())
        super().resizeEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self._pointer = QPointF(event.position())
        super().mouseMoveEvent(event)

    def leaveEvent(self, event) -> None:
        self._pointer = None
        super().leaveEvent(event)
