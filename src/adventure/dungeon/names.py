"""Unique room-name assignment from a fixed candidate pool."""

from __future__ import annotations

import logging
from typing import Sequence

from adventure.core.rng import GameRNG
from adventure.errors import GenerationError

logger = logging.getLogger(__name__)


class NameAssigner:
    """Hands out names from *names* without replacement.

    Each call to :meth:`assign` draws uniformly random pool indices until
    it finds an unused one (rejection sampling).  The pool is small and
    close in size to the number of rooms, so the expected number of draws
    stays low; *max_attempts* bounds the worst case.
    """

    def __init__(
        self,
        names: Sequence[str],
        rng: GameRNG,
        max_attempts: int = 10_000,
    ) -> None:
        if not names:
            raise ValueError("Name pool must not be empty")
        self.names: tuple[str, ...] = tuple(names)
        self.used: list[bool] = [False] * len(self.names)
        self.rng = rng
        self.max_attempts = max_attempts

    @property
    def available(self) -> list[str]:
        """Names not yet handed out, in pool order."""
        return [n for n, used in zip(self.names, self.used) if not used]

    def assign(self) -> str:
        """Return a random unused name and mark it used."""
        if all(self.used):
            raise GenerationError(
                f"Name pool exhausted: all {len(self.names)} names are in use"
            )
        for attempt in range(1, self.max_attempts + 1):
            index = self.rng.random_index(len(self.names))
            if not self.used[index]:
                self.used[index] = True
                logger.debug(
                    "Assigned name %s after %d draw(s)", self.names[index], attempt,
                )
                return self.names[index]
        raise GenerationError(
            f"No unused name found after {self.max_attempts} draws"
        )
