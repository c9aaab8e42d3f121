"""Locate the newest room directory and rehydrate it into a DungeonGraph."""

from __future__ import annotations

import logging
from pathlib import Path

from adventure.config import AdventureConfig
from adventure.core.rooms import DungeonGraph, Room
from adventure.dungeon.serializer import RoomDescriptor, parse_room
from adventure.errors import DungeonLoadError

logger = logging.getLogger(__name__)


def find_latest_dungeon_dir(base_dir: Path, prefix: str) -> Path:
    """Return the most recently modified directory in *base_dir* whose name
    starts with *prefix*.  Ties on modification time go to the larger name.
    """
    try:
        candidates = [
            entry for entry in base_dir.iterdir()
            if entry.is_dir() and entry.name.startswith(prefix)
        ]
    except OSError as exc:
        raise DungeonLoadError(f"Cannot list {base_dir}: {exc}") from exc

    if not candidates:
        raise DungeonLoadError(f"No '{prefix}*' room directory found in {base_dir}")
    return max(candidates, key=lambda entry: (entry.stat().st_mtime, entry.name))


class DungeonLoader:
    """Reads a room directory written by :class:`DungeonSerializer`.

    Parameters
    ----------
    config:
        Supplies the expected room count and the directory prefix.
    """

    def __init__(self, config: AdventureConfig | None = None) -> None:
        self.config = config or AdventureConfig()

    def load_latest(self, base_dir: Path) -> DungeonGraph:
        """Find the newest room directory under *base_dir* and load it."""
        directory = find_latest_dungeon_dir(base_dir, self.config.dir_prefix)
        return self.load(directory)

    def load(self, directory: Path) -> DungeonGraph:
        """Parse every room file in *directory* and resolve connections."""
        descriptors = self._read_descriptors(directory)
        graph = self._resolve(descriptors)
        logger.info("Loaded %d rooms from %s", len(graph), directory)
        return graph

    def _read_descriptors(self, directory: Path) -> list[RoomDescriptor]:
        try:
            files = sorted(entry for entry in directory.iterdir() if entry.is_file())
        except OSError as exc:
            raise DungeonLoadError(f"Cannot open room directory {directory}: {exc}") from exc

        if len(files) != self.config.num_rooms:
            raise DungeonLoadError(
                f"Expected {self.config.num_rooms} room files in {directory}, "
                f"found {len(files)}"
            )

        descriptors: list[RoomDescriptor] = []
        for path in files:
            try:
                text = path.read_text()
            except OSError as exc:
                raise DungeonLoadError(f"Cannot read room file {path}: {exc}") from exc
            descriptors.append(parse_room(text, source=str(path)))
        return descriptors

    def _resolve(self, descriptors: list[RoomDescriptor]) -> DungeonGraph:
        """Turn textual connection lists into references to sibling rooms.

        Every connection name must match exactly one loaded room.
        """
        names = [d.name for d in descriptors]
        known = set(names)
        if len(known) != len(names):
            raise DungeonLoadError(f"Duplicate room names in {sorted(names)}")

        rooms: list[Room] = []
        for descriptor in descriptors:
            unknown = [c for c in descriptor.connections if c not in known]
            if unknown:
                raise DungeonLoadError(
                    f"Room {descriptor.name} connects to unknown room(s): "
                    f"{', '.join(unknown)}"
                )
            rooms.append(
                Room(
                    name=descriptor.name,
                    room_type=descriptor.room_type,
                    connections=tuple(descriptor.connections),
                )
            )
        return DungeonGraph(rooms=tuple(rooms))
