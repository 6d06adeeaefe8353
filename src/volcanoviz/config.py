"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and the fixed
drawing constants of the viewer.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers scattered
   throughout the model and view layers.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find the bundled dataset when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_DATA_PATH (str): Absolute path to the bundled volcano CSV.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/volcanoviz/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_DATA_PATH: str = os.path.join(ASSETS_PATH, "data.csv")

# Window / frame loop
WINDOW_TITLE: str = "Volcano Viewer"
WINDOW_SIZE: tuple[int, int] = (1400, 900)
FRAME_INTERVAL_MS: int = 16  # ~60 fps

# Plot area
OUTER_MARGIN: float = 100.0
MIN_MARKER_SIZE: float = 3.0
MAX_MARKER_SIZE: float = 15.0
HOVER_GROWTH: float = 4.0

# Colors
BACKGROUND_COLOR: str = "#04091D"
MARKER_ALPHA: int = 150
GRID_LINE_GRAY: int = 80
GRID_LABEL_GRAY: int = 200
GRID_DASH_PATTERN: tuple[float, float] = (4.0, 4.0)

# Grid
GRID_STEP_DEGREES: int = 30
GRID_LABEL_PAD: float = 5.0

# Text
TITLE_TEXT: str = "\U0001F30B Interactive Volcano Visualization"
TITLE_FONT_SIZE: int = 40
TITLE_TOP: float = 20.0
LABEL_FONT_SIZE: int = 12
TOOLTIP_FONT_SIZE: int = 14
TOOLTIP_OFFSET: tuple[float, float] = (10.0, -30.0)
READOUT_INSET: tuple[float, float] = (20.0, 10.0)

# Legend (horizontal, along the bottom edge)
LEGEND_BOTTOM_OFFSET: float = 30.0
LEGEND_START_X: float = 50.0
LEGEND_SPACING: float = 120.0
LEGEND_DOT_SIZE: float = 12.0
LEGEND_LABEL_GAP: float = 15.0
