"""Exception types raised by the generation and play runs."""

from __future__ import annotations


class AdventureError(RuntimeError):
    """Base class for fatal adventure errors."""


class GenerationError(AdventureError):
    """The room graph could not be generated.

    Raised when a room exceeds the maximum degree, when the name pool runs
    dry, or when a bounded resampling loop gives up.
    """


class DungeonLoadError(AdventureError):
    """A serialized room graph could not be located, read, or validated."""
