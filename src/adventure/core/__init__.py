"""Core primitives: seeded randomness and the room graph records."""

from adventure.core.rng import GameRNG
from adventure.core.rooms import DungeonGraph, Room, RoomType

__all__ = [
    # rng
    "GameRNG",
    # rooms
    "DungeonGraph",
    "Room",
    "RoomType",
]
