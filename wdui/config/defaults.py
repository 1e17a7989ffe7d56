"""
Default settings for WDUI.

These are the default values used when no user configuration exists.
"""

SETTINGS_FILENAME = "settings.json"

# Backups are named settings.json.old_<unix_ms>
BACKUP_INFIX = ".old_"

# Environment variable overriding the per-user data directory
DATA_DIR_ENV = "WDUI_DATA_DIR"

DEFAULT_LANGUAGE = "en-US"

# Language codes offered in the preferences dialog
SUPPORTED_LANGUAGES = {
    "en-US": "English (United States)",
    "en-GB": "English (United Kingdom)",
    "de-DE": "Deutsch",
    "es-ES": "Español",
    "fr-FR": "Français",
    "it-IT": "Italiano",
    "ja-JP": "日本語",
    "pl-PL": "Polski",
    "pt-BR": "Português (Brasil)",
    "ru-RU": "Русский",
    "zh-CN": "简体中文",
}
