"""
Main application window for WDUI.

Shows the active settings and hosts the preferences dialog. The window
reloads itself whenever the settings are saved.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QFormLayout,
    QLabel, QStatusBar, QMessageBox, QApplication,
)
from PySide6.QtCore import Qt, QLocale
from PySide6.QtGui import QAction

from .. import __version__
from ..config import Settings, SUPPORTED_LANGUAGES
from ..utils import set_debug_logging
from .dialogs.settings_dialog import SettingsDialog, THEME_LABELS
from .theme import apply_theme

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__()

        self.settings = settings if settings is not None else Settings()

        self._init_ui()
        self.settings.saved.connect(self.load_settings)
        self.load_settings()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _init_ui(self):
        """Initialize user interface."""
        self.setWindowTitle("WinDurango")
        self.resize(640, 420)

        self._create_menu_bar()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        info_form = QFormLayout()

        self._theme_label = QLabel()
        info_form.addRow("Theme:", self._theme_label)

        self._language_label = QLabel()
        info_form.addRow("Language:", self._language_label)

        self._wd_version_label = QLabel()
        self._wd_version_label.setTextFormat(Qt.TextFormat.PlainText)
        info_form.addRow("WinDurango:", self._wd_version_label)

        self._debug_label = QLabel()
        info_form.addRow("Debug logging:", self._debug_label)

        main_layout.addLayout(info_form)
        main_layout.addStretch()

        # --- Status bar ---
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready")

    def _create_menu_bar(self):
        """Create application menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")

        reset_action = QAction("&Reset Settings...", self)
        reset_action.triggered.connect(self._on_reset_settings)
        file_menu.addAction(reset_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")
        prefs_action = QAction("&Preferences...", self)
        prefs_action.setShortcut("Ctrl+,")
        prefs_action.triggered.connect(self._on_preferences)
        edit_menu.addAction(prefs_action)

        # Help menu
        help_menu = menubar.addMenu("&Help")
        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def load_settings(self):
        """Apply the current settings to the application and refresh labels."""
        data = self.settings.data

        app = QApplication.instance()
        if app is not None:
            apply_theme(app, data.theme)

        set_debug_logging(data.debug_logging_enabled)
        QLocale.setDefault(QLocale(data.language.replace("-", "_")))

        self._theme_label.setText(THEME_LABELS[data.theme])
        self._language_label.setText(SUPPORTED_LANGUAGES.get(data.language, data.language))
        self._wd_version_label.setText(data.downloaded_wd_version or "Not downloaded")
        self._debug_label.setText("On" if data.debug_logging_enabled else "Off")

        logger.debug("Settings reloaded")

    def _on_preferences(self):
        """Open the settings dialog."""
        dialog = SettingsDialog(self.settings, parent=self)
        if dialog.exec() == SettingsDialog.DialogCode.Accepted:
            self.status_bar.showMessage("Preferences saved", 3000)

    def _on_reset_settings(self):
        """Reset settings to defaults after confirmation."""
        reply = QMessageBox.question(
            self,
            "Reset Settings",
            "Reset all settings to their defaults?\n\n"
            "The current settings file will be kept as a backup.",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.settings.reset()
        self.status_bar.showMessage("Settings reset to defaults", 3000)

    def _show_about(self):
        """Show about dialog."""
        QMessageBox.about(
            self,
            "About WinDurango",
            f"<h3>WinDurango UI v{__version__}</h3>"
            f"<p>Settings are stored in:<br>{self.settings.settings_file}</p>",
        )
