"""
Settings dialog for WDUI.

Allows users to pick the theme and language and toggle debug logging.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QComboBox, QCheckBox, QPushButton, QGroupBox,
    QWidget,
)

from ...config import Settings, ThemeSetting, SUPPORTED_LANGUAGES

THEME_LABELS = {
    ThemeSetting.FLUENT: "Fluent",
    ThemeSetting.FLUENT_THIN: "Fluent (thin)",
    ThemeSetting.MICA: "Mica",
    ThemeSetting.MICA_ALT: "Mica Alt",
    ThemeSetting.SYSTEM: "System",
}


class SettingsDialog(QDialog):
    """Settings preferences dialog."""

    def __init__(self, settings: Settings, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.settings = settings
        self._init_ui()
        self._load_values()

    def _init_ui(self):
        """Build the dialog UI."""
        self.setWindowTitle("Preferences")
        self.setMinimumWidth(400)

        layout = QVBoxLayout(self)

        # Appearance
        appearance_group = QGroupBox("Appearance")
        appearance_form = QFormLayout()

        self.theme_combo = QComboBox()
        for theme in ThemeSetting:
            self.theme_combo.addItem(THEME_LABELS[theme], int(theme))
        appearance_form.addRow("Theme:", self.theme_combo)

        self.language_combo = QComboBox()
        for code, label in SUPPORTED_LANGUAGES.items():
            self.language_combo.addItem(f"{label} ({code})", code)
        appearance_form.addRow("Language:", self.language_combo)

        appearance_group.setLayout(appearance_form)
        layout.addWidget(appearance_group)

        # Diagnostics
        debug_group = QGroupBox("Diagnostics")
        debug_layout = QVBoxLayout()

        self.debug_checkbox = QCheckBox("Enable debug logging")
        debug_layout.addWidget(self.debug_checkbox)

        debug_group.setLayout(debug_layout)
        layout.addWidget(debug_group)

        # Buttons
        button_layout = QHBoxLayout()
        button_layout.addStretch()

        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(self._on_save)
        button_layout.addWidget(self.save_button)

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)
        button_layout.addWidget(self.cancel_button)

        layout.addLayout(button_layout)

    def _load_values(self):
        """Load current settings into form fields."""
        data = self.settings.data

        self.theme_combo.setCurrentIndex(self.theme_combo.findData(int(data.theme)))

        index = self.language_combo.findData(data.language)
        if index < 0:
            # Hand-edited or retired language code, keep it selectable
            self.language_combo.addItem(data.language, data.language)
            index = self.language_combo.count() - 1
        self.language_combo.setCurrentIndex(index)

        self.debug_checkbox.setChecked(data.debug_logging_enabled)

    def _on_save(self):
        """Write changed form values to settings."""
        data = self.settings.data
        changes = {
            "theme": ThemeSetting(self.theme_combo.currentData()),
            "language": self.language_combo.currentData(),
            "debug_logging_enabled": self.debug_checkbox.isChecked(),
        }

        for name, value in changes.items():
            if getattr(data, name) != value:
                self.settings.set_setting(name, value)
        self.accept()
