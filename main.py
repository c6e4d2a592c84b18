#!/usr/bin/env python3
"""
grater - Main Entry Point

Moves the mouse cursor around the primary monitor at random intervals so
the machine never looks idle. Close the window to stop.
"""

import sys
from pathlib import Path

# Allow running from a source checkout without installing
sys.path.insert(0, str(Path(__file__).parent))

from grater.cli import cli

if __name__ == '__main__':
    try:
        cli()
    except KeyboardInterrupt:
        print("\nProgram interrupted by user")
        sys.exit(0)
