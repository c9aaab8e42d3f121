#!/usr/bin/env python3
"""Play the most recently generated rooms.

Usage:
    uv run python scripts/play_adventure.py [--dir .]
"""

from __future__ import annotations

import sys

from adventure.cli import play_main

if __name__ == "__main__":
    sys.exit(play_main())
