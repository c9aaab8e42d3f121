"""Command-line entry points for the generation and play runs.

Both take no required arguments::

    build-rooms          # writes ./rooms.<pid>/ with one file per room
    adventure            # plays the newest ./rooms.*/ directory

Each returns a process exit code: 0 on success, 1 on a fatal error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from adventure.config import AdventureConfig
from adventure.core.rng import GameRNG
from adventure.dungeon.graph_builder import GraphBuilder
from adventure.dungeon.loader import DungeonLoader
from adventure.dungeon.serializer import DungeonSerializer
from adventure.errors import AdventureError
from adventure.play.clock import ClockService
from adventure.play.engine import TraversalEngine
from adventure.play.session import run_session

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _base_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--dir", type=Path, default=Path("."),
        help="Directory holding room directories (default: current directory)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=False,
        help="Log debug output to stderr",
    )
    return parser


# ---------------------------------------------------------------------------
# Generation run
# ---------------------------------------------------------------------------

def build_rooms_main(
    argv: Sequence[str] | None = None,
    config: AdventureConfig | None = None,
) -> int:
    """Generate a room graph and write it to ``<dir>/<prefix><pid>``."""
    parser = _base_parser("Generate a random room graph and write it to disk.")
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for reproducible generation (default: wall clock)",
    )
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    config = config or AdventureConfig()
    rng = GameRNG(args.seed) if args.seed is not None else GameRNG.from_time()

    try:
        graph = GraphBuilder(config).build(rng)
    except AdventureError as exc:
        print(f"Room generation failed: {exc}", file=sys.stderr)
        return 1

    try:
        DungeonSerializer(config).write(graph, args.dir)
    except OSError as exc:
        print(f"Directory creation failed: {exc}", file=sys.stderr)
        return 1

    return 0


# ---------------------------------------------------------------------------
# Play run
# ---------------------------------------------------------------------------

def play_main(
    argv: Sequence[str] | None = None,
    config: AdventureConfig | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Load the newest room graph and play it on stdin/stdout."""
    parser = _base_parser("Explore the most recently generated rooms.")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    config = config or AdventureConfig()
    clock = ClockService(
        clock_file=args.dir / config.clock_file,
        interval=config.clock_interval,
        handoff_delay=config.handoff_delay,
        grace=config.exit_grace,
    )

    try:
        graph = DungeonLoader(config).load_latest(args.dir)
        engine = TraversalEngine(graph, clock=clock)
    except AdventureError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for problem in graph.check_invariants(config.min_connections, config.max_connections):
        logger.warning("Room graph: %s", problem)

    with clock:
        summary = run_session(engine, stdin=stdin, stdout=stdout)
    return 0 if summary is not None else 1
