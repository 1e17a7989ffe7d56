"""Qt user interface for WDUI."""

from .main_window import MainWindow

__all__ = ["MainWindow"]
