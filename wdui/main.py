"""
WDUI - Main entry point.

Launches the Qt application.
"""

import sys
import logging

from PySide6.QtWidgets import QApplication

from . import __version__
from .config import Settings
from .ui import MainWindow
from .utils import setup_logging


def main():
    """Main entry point for WDUI."""
    setup_logging(log_level="INFO", log_file=True)
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info(f"WDUI v{__version__} starting...")
    logger.info("=" * 60)

    app = QApplication(sys.argv)
    app.setApplicationName("WinDurango")
    app.setOrganizationName("WinDurango")

    settings = Settings()

    # Applies theme, language and debug logging from settings
    window = MainWindow(settings)
    window.show()

    exit_code = app.exec()

    logger.info("WDUI exiting")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
