"""Dialog windows for WDUI."""

from .settings_dialog import SettingsDialog

__all__ = ["SettingsDialog"]
