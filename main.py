#!/usr/bin/env python3
"""Pound - a terminal text viewer.

Usage:
    python main.py [filename]

Controls:
    Arrow keys: Move the cursor
    Home/End: Start/end of line
    PageUp/PageDown: Move a screenful
    Ctrl-Q: Quit
"""

import sys
from pound.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
