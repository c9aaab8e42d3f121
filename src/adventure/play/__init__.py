"""Play module -- traversal engine, clock service, and terminal session."""

from adventure.play.clock import ClockService, format_clock
from adventure.play.engine import (
    CommandResult,
    CommandStatus,
    Player,
    Prompt,
    RunSummary,
    TraversalEngine,
)
from adventure.play.session import run_session

__all__ = [
    "ClockService",
    "CommandResult",
    "CommandStatus",
    "Player",
    "Prompt",
    "RunSummary",
    "TraversalEngine",
    "format_clock",
    "run_session",
]
