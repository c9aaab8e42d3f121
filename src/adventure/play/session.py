"""Terminal read-eval loop around a :class:`TraversalEngine`."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from adventure.play.engine import RunSummary, TraversalEngine

logger = logging.getLogger(__name__)


def run_session(
    engine: TraversalEngine,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> RunSummary | None:
    """Prompt, read a line, execute it, until the end room is reached.

    Returns the run summary on a win, or ``None`` if input ends first.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while not engine.is_won:
        print(engine.prompt().render(), end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            print(file=stdout)
            logger.warning("Input closed before the end room was reached")
            return None

        result = engine.execute(line)
        if result.message:
            print(f"\n{result.message}\n", file=stdout)
        else:
            print(file=stdout)

    summary = engine.summary()
    print(summary.render(), end="", file=stdout, flush=True)
    return summary
