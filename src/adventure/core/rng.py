"""Seeded random number generator for reproducible room generation.

Wraps Python's random.Random.  Each generation phase (names, room types,
edges) draws from a *forked* stream so that changing how many values one
phase consumes does not perturb the others.
"""

from __future__ import annotations

import hashlib
import random
import time


class GameRNG:
    """Deterministic RNG that can be forked into independent sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @classmethod
    def from_time(cls) -> GameRNG:
        """Seed from the wall clock, for runs that need no reproducibility."""
        return cls(time.time_ns())

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    # -- core random methods -------------------------------------------------

    def random_index(self, size: int) -> int:
        """Return a uniformly random index into a sequence of *size* items."""
        if size <= 0:
            raise ValueError(f"random_index size must be > 0, got {size}")
        return self._rng.randrange(size)

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> GameRNG:
        """Create a child RNG whose seed is derived from this RNG's seed and
        *name*.

        Forking with the same *name* always yields the same child seed, so
        ``rng.fork("edges")`` replays identically for a given master seed.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        child_seed = int.from_bytes(digest[:8], "big")
        return GameRNG(child_seed)

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
