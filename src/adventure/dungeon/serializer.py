"""Room descriptor text format.

One file per room, line oriented and order significant::

    ROOM NAME: FOYER
    CONNECTION 1: KITCHEN
    CONNECTION 2: DUNGEON
    CONNECTION 3: BASEMENT
    ROOM TYPE: START_ROOM

``NULL`` stands in for a missing name, ``NULL CONNECTION`` for a missing
connection and ``UNASSIGNED_ROOM`` for a room without a type.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from pydantic import BaseModel, Field

from adventure.config import AdventureConfig
from adventure.core.rooms import DungeonGraph, Room, RoomType
from adventure.errors import DungeonLoadError

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).parent / "templates"

_jinja = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    keep_trailing_newline=True,
    trim_blocks=True,
)

_NAME_RE = re.compile(r"ROOM NAME:\s*(\S.*)")
_CONNECTION_RE = re.compile(r"CONNECTION\s+(\d+):\s*(\S.*)")
_TYPE_RE = re.compile(r"ROOM TYPE:\s*(\S+)")


class RoomDescriptor(BaseModel):
    """A room as read from disk, connections not yet resolved."""

    name: str
    connections: list[str] = Field(default_factory=list)
    room_type: RoomType | None = None


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_room(room: Room) -> str:
    """Render *room* in the descriptor format, trailing newline included."""
    return _jinja.get_template("room.txt.j2").render(room=room)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_room(text: str, source: str = "<string>") -> RoomDescriptor:
    """Parse one room descriptor.

    An unknown type tag is logged and leaves ``room_type`` as ``None``;
    ``NULL CONNECTION`` lines are logged and skipped.  Anything else that
    does not fit the format raises :class:`DungeonLoadError`.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise DungeonLoadError(f"{source}: empty room file")

    if lines[0] == "NULL":
        raise DungeonLoadError(f"{source}: room has no name")
    match = _NAME_RE.fullmatch(lines[0])
    if match is None:
        raise DungeonLoadError(f"{source}: expected 'ROOM NAME:', got {lines[0]!r}")
    descriptor = RoomDescriptor(name=match[1].strip())

    type_seen = False
    position = 0
    for lineno, line in enumerate(lines[1:], start=2):
        if type_seen:
            raise DungeonLoadError(
                f"{source}:{lineno}: unexpected line after ROOM TYPE: {line!r}"
            )

        if line == "NULL CONNECTION":
            position += 1
            logger.warning(
                "%s:%d: null connection in room %s, skipping",
                source, lineno, descriptor.name,
            )
            continue

        match = _CONNECTION_RE.fullmatch(line)
        if match is not None:
            position += 1
            if int(match[1]) != position:
                logger.warning(
                    "%s:%d: connection numbered %s, expected %d",
                    source, lineno, match[1], position,
                )
            descriptor.connections.append(match[2].strip())
            continue

        match = _TYPE_RE.fullmatch(line)
        if match is not None:
            type_seen = True
            descriptor.room_type = _parse_room_type(match[1], descriptor.name, source)
            continue

        raise DungeonLoadError(f"{source}:{lineno}: unrecognised line {line!r}")

    if not type_seen:
        raise DungeonLoadError(f"{source}: missing 'ROOM TYPE:' line")
    return descriptor


def _parse_room_type(tag: str, room_name: str, source: str) -> RoomType | None:
    try:
        return RoomType(tag)
    except ValueError:
        logger.warning(
            "%s: unknown room type %r for %s, leaving it unassigned",
            source, tag, room_name,
        )
        return None


# ---------------------------------------------------------------------------
# Writing a whole graph
# ---------------------------------------------------------------------------

class DungeonSerializer:
    """Writes a :class:`DungeonGraph` into a fresh, uniquely named directory."""

    def __init__(self, config: AdventureConfig | None = None) -> None:
        self.config = config or AdventureConfig()

    def directory_for(self, base_dir: Path, run_id: int | str | None = None) -> Path:
        if run_id is None:
            run_id = os.getpid()
        return base_dir / f"{self.config.dir_prefix}{run_id}"

    def write(
        self,
        graph: DungeonGraph,
        base_dir: Path,
        run_id: int | str | None = None,
    ) -> Path:
        """Create ``<base_dir>/<prefix><run_id>`` and write one file per room.

        *run_id* defaults to the current process id.  The directory must
        not exist yet; ``OSError`` from directory or file creation is left
        to the caller.  A directory whose room files could not all be
        written is removed again, so it is never picked up by a later load.
        """
        directory = self.directory_for(base_dir, run_id)
        directory.mkdir(mode=0o755)

        try:
            for room in graph.rooms:
                (directory / room.name).write_text(format_room(room))
        except OSError:
            shutil.rmtree(directory, ignore_errors=True)
            raise

        logger.info("Wrote %d room files to %s", len(graph), directory)
        return directory
