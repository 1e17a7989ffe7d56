"""
WDUI - Qt-based launcher UI for WinDurango.
"""

__version__ = "1.0.0"
