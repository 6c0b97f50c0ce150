#!/usr/bin/env python3
"""
Main script to launch Classic Pong with PyGame graphical interface
"""

import logging
import sys

from classic_pong.gui.game_app import main

if __name__ == "__main__":
    print("=== PONG ===")
    print()
    print("CONTROLS:")
    print("  Up / Down arrows: Move the left paddle")
    print("  SPACE: Start, then pause / resume")
    print("  ESC: Quit")
    print()

    try:
        sys.exit(main())
    except Exception:
        logging.getLogger("classic_pong").exception("Pong stopped on an unexpected error")
        sys.exit(1)
