"""
Logging configuration for WDUI.
"""

import logging
import os
import sys
from pathlib import Path
from datetime import datetime

_CONSOLE_HANDLER_NAME = "wdui-console"


def setup_logging(log_level: str = "INFO", log_file: bool = True) -> logging.Logger:
    """
    Configure application logging.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: If True, also log to file
        
    Returns:
        Root logger instance
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    
    # Clear any existing handlers
    logger.handlers.clear()
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setLevel(logger.level if logger.level < logging.INFO else logging.INFO)
    console_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)
    
    if log_file:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file_path = log_dir / f"wdui_{timestamp}.log"
        
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
        
        logger.info(f"Logging to file: {log_file_path}")
    
    return logger


def set_debug_logging(enabled: bool):
    """
    Switch verbose logging on or off at runtime.

    Adjusts the root logger and the console handler installed by
    setup_logging(). File handlers always record DEBUG.

    Args:
        enabled: True for DEBUG, False for INFO
    """
    level = logging.DEBUG if enabled else logging.INFO
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _CONSOLE_HANDLER_NAME:
            handler.setLevel(level)

    root.debug("Debug logging enabled")


def get_log_dir() -> Path:
    """
    Get platform-specific log directory.
    
    Returns:
        Path to log directory
    """
    if os.name == 'nt':  # Windows
        base = os.environ.get('LOCALAPPDATA', os.path.expanduser('~'))
        log_dir = Path(base) / 'wdui' / 'logs'
    else:  # Linux/macOS
        base = os.environ.get('XDG_CACHE_HOME', os.path.expanduser('~/.cache'))
        log_dir = Path(base) / 'wdui' / 'logs'
    
    return log_dir
