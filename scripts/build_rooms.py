#!/usr/bin/env python3
"""Generate a random room graph into ./rooms.<pid>/.

Usage:
    uv run python scripts/build_rooms.py [--seed 42] [--dir .]
"""

from __future__ import annotations

import sys

from adventure.cli import build_rooms_main

if __name__ == "__main__":
    sys.exit(build_rooms_main())
