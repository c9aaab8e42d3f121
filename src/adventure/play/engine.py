"""Traversal engine -- player state, command handling, and win detection.

The engine is a two-state machine over the type of the player's current
room: start/mid rooms are *playing*, the end room is *won* and terminal.
It knows nothing about terminals; :mod:`adventure.play.session` feeds it
lines and prints what it returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from adventure.core.rooms import DungeonGraph, Room, RoomType

if TYPE_CHECKING:
    from adventure.play.clock import ClockService

logger = logging.getLogger(__name__)

TIME_COMMAND = "time"

INVALID_ROOM_MESSAGE = "HUH? I DON'T UNDERSTAND THAT ROOM. TRY AGAIN"
CLOCK_UNSET_MESSAGE = "THE CLOCK HAS NOT BEEN SET YET. TRY AGAIN"
GAME_OVER_MESSAGE = "YOU HAVE ALREADY FOUND THE END ROOM."


class CommandStatus(str, Enum):
    MOVED = "moved"
    TIME = "time"
    INVALID = "invalid"


# ---------------------------------------------------------------------------
# Player / results
# ---------------------------------------------------------------------------

class Player(BaseModel):
    """Where the player is and where they have been."""

    current_room: str
    history: list[str] = Field(default_factory=list)
    """Rooms entered, in order, repeats included.  The start room is not
    recorded."""

    @property
    def visited_count(self) -> int:
        return len(self.history)


class Prompt(BaseModel):
    """What the player sees before each command."""

    model_config = ConfigDict(frozen=True)

    room: str
    connections: tuple[str, ...]

    def render(self) -> str:
        return (
            f"CURRENT LOCATION: {self.room}\n"
            f"POSSIBLE CONNECTIONS: {', '.join(self.connections)}.\n"
            f"WHERE TO? >"
        )


class CommandResult(BaseModel):
    """Outcome of one :meth:`TraversalEngine.execute` call."""

    status: CommandStatus
    message: str = ""
    """Text to show the player, empty after a plain move."""

    room: str | None = None
    """Room entered, for ``MOVED``."""

    time_text: str | None = None
    """Published clock value, for ``TIME``."""

    @property
    def ok(self) -> bool:
        return self.status is not CommandStatus.INVALID


@dataclass
class RunSummary:
    """Final tally shown once the end room is reached."""

    steps: int
    path: list[str] = field(default_factory=list)

    def render(self) -> str:
        lines = [
            "YOU HAVE FOUND THE END ROOM. CONGRATULATIONS!",
            f"YOU TOOK {self.steps} STEPS. YOUR PATH TO VICTORY WAS:",
            *self.path,
        ]
        return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class TraversalEngine:
    """Drives a single player through a loaded :class:`DungeonGraph`.

    Parameters
    ----------
    graph:
        The room graph.  Must contain exactly one start and one end room,
        otherwise :class:`~adventure.errors.DungeonLoadError` is raised.
    clock:
        Started :class:`ClockService` answering the ``time`` command.
        Without one, ``time`` is treated as an unknown room.
    """

    def __init__(
        self,
        graph: DungeonGraph,
        clock: ClockService | None = None,
    ) -> None:
        self.graph = graph
        self.clock = clock
        start = graph.start_room
        graph.end_room  # raises if the graph has no single end room
        self.player = Player(current_room=start.name)

    # -- queries -------------------------------------------------------------

    @property
    def current_room(self) -> Room:
        return self.graph.get(self.player.current_room)

    @property
    def is_won(self) -> bool:
        return self.current_room.room_type is RoomType.END

    def prompt(self) -> Prompt:
        room = self.current_room
        return Prompt(room=room.name, connections=room.connections)

    def summary(self) -> RunSummary:
        return RunSummary(
            steps=self.player.visited_count, path=list(self.player.history),
        )

    # -- commands ------------------------------------------------------------

    def execute(self, command: str) -> CommandResult:
        """Handle one line of player input.

        ``time`` asks the clock for a fresh value and leaves the player
        where they are.  Anything else is matched, case-sensitively, against
        the current room's connections; the first match wins.
        """
        command = command.strip()

        if self.is_won:
            return CommandResult(
                status=CommandStatus.INVALID, message=GAME_OVER_MESSAGE,
            )

        if command == TIME_COMMAND and self.clock is not None:
            return self._tell_time(self.clock)

        for name in self.current_room.connections:
            if name == command:
                return self._move_to(name)

        logger.debug("Rejected command %r in %s", command, self.player.current_room)
        return CommandResult(
            status=CommandStatus.INVALID, message=INVALID_ROOM_MESSAGE,
        )

    def _move_to(self, name: str) -> CommandResult:
        self.player.current_room = name
        self.player.history.append(name)
        logger.debug("Moved to %s (step %d)", name, self.player.visited_count)
        return CommandResult(status=CommandStatus.MOVED, room=name)

    def _tell_time(self, clock: ClockService) -> CommandResult:
        text = clock.refresh_and_read()
        if text is None:
            return CommandResult(status=CommandStatus.TIME, message=CLOCK_UNSET_MESSAGE)
        return CommandResult(status=CommandStatus.TIME, message=text, time_text=text)
