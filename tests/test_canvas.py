"""Tests for the canvas widget wiring (resize, hover, cursor)."""
import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent

from volcanoviz.model.state import VisualizationState
from volcanoviz.view.canvas import VolcanoCanvas
from volcanoviz.view.main_window import MainWindow


def _move(canvas: VolcanoCanvas, x: float, y: float) -> None:
    pos = QPointF(x, y)
    event = QMouseEvent(
        QEvent.Type.MouseMove, pos, pos,
        Qt.MouseButton.NoButton, Qt.MouseButton.NoButton, Qt.KeyboardModifier.NoModifier,
    )
    canvas.mouseMoveEvent(event)


@pytest.fixture
def canvas(qapp, world_records):
    state = VisualizationState.from_records(world_records, 800, 600)
    widget = VolcanoCanvas(state)
    widget.resize(800, 600)
    widget.show()
    qapp.processEvents()
    yield widget
    widget.stop()
    widget.close()


class TestVolcanoCanvas:

    def test_resize_rebuilds_markers_from_cached_extrema(self, qapp, canvas):
        extrema = canvas.state.extrema

        canvas.resize(1000, 700)
        qapp.processEvents()

        state = canvas.state
        assert (state.width, state.height) == (1000, 700)
        assert state.extrema is extrema
        center = state.markers[2]
        assert (center.x, center.y) == pytest.approx((500, 350))

    def test_hover_follows_pointer(self, canvas):
        center = canvas.state.markers[2]

        _move(canvas, center.x, center.y)
        assert canvas.hovered_marker() is center

        _move(canvas, 5, 5)
        assert canvas.hovered_marker() is None

    def test_leave_clears_hover(self, canvas):
        center = canvas.state.markers[2]
        _move(canvas, center.x, center.y)

        canvas.leaveEvent(QEvent(QEvent.Type.Leave))
        assert canvas.hovered_marker() is None

    def test_cursor_changes_on_paint(self, qapp, canvas):
        center = canvas.state.markers[2]

        _move(canvas, center.x, center.y)
        canvas.repaint()
        assert canvas.cursor().shape() == Qt.CursorShape.PointingHandCursor

        _move(canvas, 5, 5)
        canvas.repaint()
        assert canvas.cursor().shape() == Qt.CursorShape.ArrowCursor

    def test_set_state_fits_widget(self, canvas, world_records):
        state = VisualizationState.from_records(world_records[:2], 320, 240)
        canvas.set_state(state)
        assert (canvas.state.width, canvas.state.height) == (canvas.width(), canvas.height())
        assert len(canvas.state.markers) == 2


class TestMainWindow:

    def test_hosts_canvas(self, qapp, world_records):
        state = VisualizationState.from_records(world_records, 800, 600)
        window = MainWindow(state)
        try:
            assert window.centralWidget() is window.canvas
            assert "3 volcanoes" in window.statusBar().currentMessage()
        finally:
            window.close()
