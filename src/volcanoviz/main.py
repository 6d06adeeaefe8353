"""
Application Initialization
==========================
This module loads the dataset, builds the main window and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Loads the volcano dataset into a VisualizationState.
3. Passes the state into the Main Window.
4. Reports a dataset that cannot be loaded instead of opening an empty window.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from PySide6.QtWidgets import QMessageBox

from volcanoviz.application import create_app
from volcanoviz.config import DEFAULT_DATA_PATH, WINDOW_SIZE
from volcanoviz.logging_config import setup_logging
from volcanoviz.model.records import DatasetError
from volcanoviz.model.state import VisualizationState
from volcanoviz.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main(data_path: Optional[str | os.PathLike[str]] = None) -> int:
    # Use logging.DEBUG to see skipped rows and resize rebuilds
    setup_logging(level=logging.INFO)

    app = create_app()

    path = data_path or DEFAULT_DATA_PATH
    try:
        state = VisualizationState.load(path, *WINDOW_SIZE)
    except DatasetError as e:
        logger.error(f"Cannot start without a dataset: {e}")
        QMessageBox.critical(None, "Volcano Viewer", str(e))
        return 1

    window = MainWindow(state)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
