"""Dungeon module -- room-graph generation, serialization, and loading."""

from adventure.dungeon.graph_builder import GraphBuilder
from adventure.dungeon.loader import DungeonLoader, find_latest_dungeon_dir
from adventure.dungeon.names import NameAssigner
from adventure.dungeon.serializer import (
    DungeonSerializer,
    RoomDescriptor,
    format_room,
    parse_room,
)

__all__ = [
    "DungeonLoader",
    "DungeonSerializer",
    "GraphBuilder",
    "NameAssigner",
    "RoomDescriptor",
    "find_latest_dungeon_dir",
    "format_room",
    "parse_room",
]
