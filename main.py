#!/usr/bin/env python3
"""
WDUI - Main entry point.

Launches the Qt application.
"""

import sys

from wdui.main import main


if __name__ == "__main__":
    sys.exit(main())
