"""
Qt Application Factory
Creates the single QApplication the viewer runs in.
"""
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import logging
import sys
import os

from volcanoviz import __version__

logger = logging.getLogger(__name__)

ORG_ID = "volcanoviz"
APP_ID = "volcano-viewer"

VISIBLE_APP_NAME = "Volcano Viewer"


def create_app() -> QApplication:
    """Create and configure the QApplication instance, reusing a running one."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QCoreApplication.setApplicationVersion(__version__)

    # Tests and embedding hosts may already own an instance
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    logger.info(f"Starting {VISIBLE_APP_NAME} {__version__} (Qt platform: {app.platformName()})")
    return app
