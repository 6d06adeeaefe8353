"""
Main Application Window
=======================
The top-level window: a single volcano canvas filling the client area.
"""
from __future__ import annotations

from PySide6.QtWidgets import QMainWindow

from volcanoviz.config import WINDOW_TITLE, WINDOW_SIZE
from volcanoviz.model.state import VisualizationState
from volcanoviz.view.canvas import VolcanoCanvas


class MainWindow(QMainWindow):
    def __init__(self, state: VisualizationState) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)

        self.canvas = VolcanoCanvas(state, self)
        self.setCentralWidget(self.canvas)

        self.statusBar().showMessage(f"{len(state.records)} volcanoes loaded")

    def closeEvent(self, event) -> None:
        self.canvas.stop()
        super().closeEvent(event)
