"""
Configuration management for WDUI.

This module handles application settings, defaults, and persistence.
"""

from .settings import Settings, SettingsData, ThemeSetting, convert_value, get_data_dir
from .defaults import SETTINGS_FILENAME, SUPPORTED_LANGUAGES, DEFAULT_LANGUAGE

__all__ = [
    "Settings",
    "SettingsData",
    "ThemeSetting",
    "convert_value",
    "get_data_dir",
    "SETTINGS_FILENAME",
    "SUPPORTED_LANGUAGES",
    "DEFAULT_LANGUAGE",
]
