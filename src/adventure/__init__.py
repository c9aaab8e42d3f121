"""Room adventure -- random room-graph generation and interactive traversal.

Two runs share this package:

- **Generation** (``build-rooms``): :class:`~adventure.dungeon.GraphBuilder`
  builds a constrained random room graph and
  :class:`~adventure.dungeon.DungeonSerializer` writes it to disk.
- **Play** (``adventure``): :class:`~adventure.dungeon.DungeonLoader`
  rehydrates the newest graph and :class:`~adventure.play.TraversalEngine`
  drives the game while :class:`~adventure.play.ClockService` publishes the
  time in the background.
"""

from adventure.config import AdventureConfig
from adventure.errors import AdventureError, DungeonLoadError, GenerationError

__all__ = [
    "AdventureConfig",
    "AdventureError",
    "DungeonLoadError",
    "GenerationError",
]
