"""Random room-graph generator.

Builds ``num_rooms`` rooms with unique names, exactly one start and one end
room, and random symmetric connections until every room has at least
``min_connections`` and at most ``max_connections`` neighbours.

Edge fill is rejection sampling:

1. pick a random room X that can still take a connection;
2. pick a random room Y != X that can still take a connection;
3. link X <-> Y unless they are already linked, in which case the attempt
   is simply wasted.

Termination is probabilistic.  Every sampling loop is bounded and running
out of attempts raises :class:`~adventure.errors.GenerationError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from adventure.config import AdventureConfig
from adventure.core.rng import GameRNG
from adventure.core.rooms import DungeonGraph, Room, RoomType
from adventure.dungeon.names import NameAssigner
from adventure.errors import GenerationError

logger = logging.getLogger(__name__)


@dataclass
class _RoomDraft:
    """Mutable room used while the graph is being filled."""

    name: str
    room_type: RoomType = RoomType.MID
    connections: list[int] = field(default_factory=list)

    @property
    def degree(self) -> int:
        return len(self.connections)


class GraphBuilder:
    """Generates a :class:`DungeonGraph` satisfying the configured bounds."""

    def __init__(self, config: AdventureConfig | None = None) -> None:
        self.config = config or AdventureConfig()

    def build(self, rng: GameRNG) -> DungeonGraph:
        """Generate a complete room graph.

        Names, types and edges each draw from their own fork of *rng*, so
        the same seed always produces the same graph.
        """
        drafts = self._assign_names(rng.fork("names"))
        self._assign_types(drafts, rng.fork("types"))
        rounds = self._fill_edges(drafts, rng.fork("edges"))

        logger.debug(
            "Filled %d rooms in %d round(s) (seed=%d)", len(drafts), rounds, rng.seed,
        )

        return DungeonGraph(
            rooms=tuple(
                Room(
                    name=draft.name,
                    room_type=draft.room_type,
                    connections=tuple(drafts[i].name for i in draft.connections),
                )
                for draft in drafts
            )
        )

    # ------------------------------------------------------------------
    # Names and types
    # ------------------------------------------------------------------

    def _assign_names(self, rng: GameRNG) -> list[_RoomDraft]:
        assigner = NameAssigner(
            self.config.room_names, rng, max_attempts=self.config.max_attempts,
        )
        return [_RoomDraft(name=assigner.assign()) for _ in range(self.config.num_rooms)]

    def _assign_types(self, drafts: list[_RoomDraft], rng: GameRNG) -> None:
        """All mid rooms, then one random start and a different random end."""
        for draft in drafts:
            draft.room_type = RoomType.MID

        start = rng.random_index(len(drafts))
        for _ in range(self.config.max_attempts):
            end = rng.random_index(len(drafts))
            if end != start:
                break
        else:
            raise GenerationError(
                f"Could not pick an end room distinct from the start room "
                f"after {self.config.max_attempts} draws"
            )

        drafts[start].room_type = RoomType.START
        drafts[end].room_type = RoomType.END

    # ------------------------------------------------------------------
    # Edge fill
    # ------------------------------------------------------------------

    def _fill_edges(self, drafts: list[_RoomDraft], rng: GameRNG) -> int:
        """Add random connections until the graph is full.

        Returns the number of rounds used, wasted attempts included.
        """
        rounds = 0
        while not self._graph_is_full(drafts):
            if rounds >= self.config.max_fill_rounds:
                raise GenerationError(
                    f"Graph still not full after {rounds} fill rounds"
                )
            self._add_random_connection(drafts, rng)
            rounds += 1
        return rounds

    def _graph_is_full(self, drafts: list[_RoomDraft]) -> bool:
        """True once every room has at least ``min_connections``.

        A room above ``max_connections`` means the fill logic is broken and
        is reported as a fatal error rather than a ``False``.
        """
        full = True
        for draft in drafts:
            if draft.degree > self.config.max_connections:
                raise GenerationError(
                    f"Room {draft.name} has {draft.degree} connections, "
                    f"above the maximum of {self.config.max_connections}"
                )
            if draft.degree < self.config.min_connections:
                full = False
        return full

    def _add_random_connection(
        self, drafts: list[_RoomDraft], rng: GameRNG,
    ) -> bool:
        """Try to link two random open rooms.  Returns True if an edge was added."""
        x = self._pick_open_room(drafts, rng)
        y = self._pick_open_room(drafts, rng, exclude=x)

        if y in drafts[x].connections or x in drafts[y].connections:
            return False

        drafts[x].connections.append(y)
        drafts[y].connections.append(x)
        return True

    def _pick_open_room(
        self,
        drafts: list[_RoomDraft],
        rng: GameRNG,
        exclude: int | None = None,
    ) -> int:
        """Resample random room indices until one can take another connection."""
        for _ in range(self.config.max_attempts):
            index = rng.random_index(len(drafts))
            if index == exclude:
                continue
            if drafts[index].degree < self.config.max_connections:
                return index
        raise GenerationError(
            f"No room able to take another connection found after "
            f"{self.config.max_attempts} draws"
        )
