"""
Breakout
========
Launcher so the game runs straight from a checkout:

    python main.py [--width W] [--height H] [--rows R] [--cols C] [-v]
"""

from breakout.app import main

if __name__ == "__main__":
    raise SystemExit(main())
