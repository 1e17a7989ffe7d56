"""
Utility functions for WDUI.
"""

from .logger import setup_logging, set_debug_logging, get_log_dir
from .version import VER_PACKED, pack_version, unpack_version, format_version

__all__ = [
    "setup_logging",
    "set_debug_logging",
    "get_log_dir",
    "VER_PACKED",
    "pack_version",
    "unpack_version",
    "format_version",
]
