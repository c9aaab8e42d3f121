"""Room records and the room graph.

A :class:`DungeonGraph` is an arena of frozen :class:`Room` records
addressed by name.  Edges are stored as ordered name lists on each room,
so rooms never hold references to one another and the graph can be
rebuilt from text without resolving object cycles.
"""

from __future__ import annotations

from collections import deque
from enum import Enum

from pydantic import BaseModel, ConfigDict, PrivateAttr

from adventure.errors import DungeonLoadError


class RoomType(str, Enum):
    """Role of a room in the adventure.  Values double as file tags."""

    START = "START_ROOM"
    MID = "MID_ROOM"
    END = "END_ROOM"


UNASSIGNED_TAG = "UNASSIGNED_ROOM"
"""File tag written for a room whose type is unknown."""


# ---------------------------------------------------------------------------
# Room
# ---------------------------------------------------------------------------

class Room(BaseModel):
    """A single room and its ordered neighbour names."""

    model_config = ConfigDict(frozen=True)

    name: str
    room_type: RoomType | None = None
    """``None`` when the type tag could not be parsed."""

    connections: tuple[str, ...] = ()
    """Names of connected rooms, in the order they were linked."""

    @property
    def degree(self) -> int:
        return len(self.connections)

    @property
    def type_tag(self) -> str:
        return self.room_type.value if self.room_type is not None else UNASSIGNED_TAG


# ---------------------------------------------------------------------------
# DungeonGraph
# ---------------------------------------------------------------------------

class DungeonGraph(BaseModel):
    """The full set of rooms of one generation run."""

    model_config = ConfigDict(frozen=True)

    rooms: tuple[Room, ...]

    _by_name: dict[str, Room] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: object) -> None:
        self._by_name = {room.name: room for room in self.rooms}

    # -- lookups -------------------------------------------------------------

    @property
    def names(self) -> list[str]:
        return [room.name for room in self.rooms]

    def __len__(self) -> int:
        return len(self.rooms)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Room:
        """Return the room called *name*; ``KeyError`` if absent."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"Unknown room: {name!r}") from None

    def degree(self, name: str) -> int:
        return self.get(name).degree

    def is_connected(self, a: str, b: str) -> bool:
        """True if *a* lists *b* or *b* lists *a*."""
        return b in self.get(a).connections or a in self.get(b).connections

    def rooms_of_type(self, room_type: RoomType) -> list[Room]:
        return [room for room in self.rooms if room.room_type is room_type]

    @property
    def start_room(self) -> Room:
        return self._single_room(RoomType.START)

    @property
    def end_room(self) -> Room:
        return self._single_room(RoomType.END)

    def _single_room(self, room_type: RoomType) -> Room:
        matches = self.rooms_of_type(room_type)
        if len(matches) != 1:
            raise DungeonLoadError(
                f"Expected exactly one {room_type.value}, found {len(matches)}"
            )
        return matches[0]

    # -- traversal -----------------------------------------------------------

    def is_reachable(self, source: str, target: str) -> bool:
        """Breadth-first search from *source* along listed connections."""
        seen = {source}
        frontier = deque([source])
        while frontier:
            current = frontier.popleft()
            if current == target:
                return True
            for neighbour in self.get(current).connections:
                if neighbour not in seen and neighbour in self._by_name:
                    seen.add(neighbour)
                    frontier.append(neighbour)
        return False

    # -- invariants ----------------------------------------------------------

    def check_invariants(
        self, min_connections: int, max_connections: int,
    ) -> list[str]:
        """Return a human-readable description of every broken invariant.

        An empty list means the graph has exactly one start and one end
        room, all other rooms are mid rooms, every degree is within
        ``[min_connections, max_connections]``, and the connection relation
        is symmetric, irreflexive and free of duplicates.
        """
        problems: list[str] = []

        if len(self._by_name) != len(self.rooms):
            problems.append("Duplicate room names")

        for room_type in (RoomType.START, RoomType.END):
            count = len(self.rooms_of_type(room_type))
            if count != 1:
                problems.append(f"{count} rooms of type {room_type.value}")
        untyped = [room.name for room in self.rooms if room.room_type is None]
        if untyped:
            problems.append(f"Rooms without a type: {', '.join(untyped)}")

        for room in self.rooms:
            if not min_connections <= room.degree <= max_connections:
                problems.append(
                    f"{room.name} has degree {room.degree}, outside "
                    f"[{min_connections}, {max_connections}]"
                )
            if room.name in room.connections:
                problems.append(f"{room.name} connects to itself")
            if len(set(room.connections)) != room.degree:
                problems.append(f"{room.name} lists a connection twice")
            for neighbour in room.connections:
                if neighbour not in self._by_name:
                    problems.append(f"{room.name} connects to unknown {neighbour}")
                elif room.name not in self._by_name[neighbour].connections:
                    problems.append(
                        f"{room.name} -> {neighbour} has no matching reverse edge"
                    )

        return problems
