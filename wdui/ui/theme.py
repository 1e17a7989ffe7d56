"""
Theme application for WDUI.

Maps ThemeSetting values onto Qt widget styles. Fluent and Mica are Windows
looks; on other platforms they fall back to Fusion.
"""

import logging
from typing import Iterable, Optional

from PySide6.QtWidgets import QApplication, QStyleFactory

from ..config import ThemeSetting

logger = logging.getLogger(__name__)

# Preferred Qt styles per theme, best first. SYSTEM uses the platform default.
STYLE_PREFERENCES = {
    ThemeSetting.FLUENT: ("windows11", "Fusion"),
    ThemeSetting.FLUENT_THIN: ("windows11", "Fusion"),
    ThemeSetting.MICA: ("windows11", "windowsvista", "Fusion"),
    ThemeSetting.MICA_ALT: ("windowsvista", "windows11", "Fusion"),
    ThemeSetting.SYSTEM: (),
}

FLUENT_THIN_STYLESHEET = """
QPushButton, QComboBox, QLineEdit {
    border: 1px solid palette(mid);
    border-radius: 3px;
    padding: 2px 6px;
}
QScrollBar:vertical { width: 6px; }
QScrollBar:horizontal { height: 6px; }
"""

_default_style: Optional[str] = None


def resolve_style(theme: ThemeSetting, available: Iterable[str]) -> Optional[str]:
    """
    Pick the Qt style for a theme.

    Args:
        theme: Requested theme
        available: Style keys known to Qt (QStyleFactory.keys())

    Returns:
        Matching style key as spelled in ``available``, or None for the
        platform default
    """
    by_lower = {key.lower(): key for key in available}
    for preferred in STYLE_PREFERENCES.get(theme, ()):
        if preferred.lower() in by_lower:
            return by_lower[preferred.lower()]
    return None


def apply_theme(app: QApplication, theme: ThemeSetting) -> str:
    """
    Apply a theme to the running application.

    Args:
        app: Application instance
        theme: Theme to apply

    Returns:
        Name of the style now in use
    """
    global _default_style
    if _default_style is None:
        _default_style = app.style().name()

    style_name = resolve_style(theme, QStyleFactory.keys()) or _default_style
    app.setStyle(style_name)
    app.setPalette(app.style().standardPalette())
    app.setStyleSheet(FLUENT_THIN_STYLESHEET if theme == ThemeSetting.FLUENT_THIN else "")

    logger.debug(f"Applied theme {theme.name} using style {style_name}")
    return style_name
