"""Shared fixtures and helpers for adventure tests."""

from __future__ import annotations

import pytest

from adventure.config import AdventureConfig
from adventure.core.rng import GameRNG
from adventure.core.rooms import DungeonGraph, Room, RoomType
from adventure.dungeon.graph_builder import GraphBuilder


def make_graph(
    layout: dict[str, tuple[RoomType | None, list[str]]],
) -> DungeonGraph:
    """Build a graph from ``{name: (room_type, [connections])}``."""
    return DungeonGraph(
        rooms=tuple(
            Room(name=name, room_type=room_type, connections=tuple(connections))
            for name, (room_type, connections) in layout.items()
        )
    )


# Five rooms; shortest win is FOYER -> KITCHEN -> DUNGEON.
SMALL_LAYOUT: dict[str, tuple[RoomType | None, list[str]]] = {
    "FOYER": (RoomType.START, ["KITCHEN", "BASEMENT", "DARK_ROOM"]),
    "KITCHEN": (RoomType.MID, ["FOYER", "DUNGEON", "BASEMENT"]),
    "BASEMENT": (RoomType.MID, ["FOYER", "KITCHEN", "DUNGEON", "DARK_ROOM"]),
    "DARK_ROOM": (RoomType.MID, ["FOYER", "BASEMENT"]),
    "DUNGEON": (RoomType.END, ["KITCHEN", "BASEMENT"]),
}


@pytest.fixture()
def config() -> AdventureConfig:
    return AdventureConfig()


@pytest.fixture()
def small_graph() -> DungeonGraph:
    return make_graph(SMALL_LAYOUT)


@pytest.fixture()
def generated_graph(config: AdventureConfig) -> DungeonGraph:
    return GraphBuilder(config).build(GameRNG(seed=42))
