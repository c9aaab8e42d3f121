"""Run configuration for generation and play.

A single :class:`AdventureConfig` carries every tunable constant.  The
defaults reproduce the classic seven-room layout; feasibility of the degree
bounds is checked when the model is built, before any generation work
starts.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

NUM_ROOMS = 7
MIN_CONNECTIONS = 3
MAX_CONNECTIONS = 6

ROOM_NAMES: tuple[str, ...] = (
    "FOYER",
    "LONG_STAIRCASE",
    "BASEMENT",
    "DUNGEON",
    "LIVING_ROOM",
    "KITCHEN",
    "DARK_ROOM",
    "OPERATING_ROOM",
    "DINING_ROOM",
    "PRISON_CELL",
)

ROOM_DIR_PREFIX = "rooms."
CLOCK_FILE_NAME = "currentTime.txt"


class AdventureConfig(BaseModel):
    """Tunable constants shared by the generation and play runs."""

    model_config = ConfigDict(frozen=True)

    num_rooms: int = NUM_ROOMS
    min_connections: int = MIN_CONNECTIONS
    max_connections: int = MAX_CONNECTIONS
    room_names: tuple[str, ...] = ROOM_NAMES
    """Candidate pool; each name is handed to at most one room."""

    dir_prefix: str = ROOM_DIR_PREFIX
    """Room directories are named ``<dir_prefix><run id>``."""

    max_attempts: int = Field(default=10_000, gt=0)
    """Upper bound for every single rejection-sampling loop."""

    max_fill_rounds: int = Field(default=100_000, gt=0)
    """Upper bound for edge-fill iterations, wasted attempts included."""

    clock_file: str = CLOCK_FILE_NAME
    clock_interval: float = Field(default=2.0, ge=0)
    """Seconds the background publisher sleeps between publishes."""

    handoff_delay: float = Field(default=2.0, ge=0)
    """Seconds the foreground sleeps with the lock released on ``time``."""

    exit_grace: float = Field(default=1.0, ge=0)
    """Seconds allowed for an in-flight publish before the play run exits."""

    @model_validator(mode="after")
    def _check_feasible(self) -> AdventureConfig:
        if self.num_rooms < 2:
            raise ValueError(f"num_rooms must be at least 2, got {self.num_rooms}")
        if self.min_connections < 1:
            raise ValueError(
                f"min_connections must be at least 1, got {self.min_connections}"
            )
        if not (
            self.min_connections <= self.max_connections <= self.num_rooms - 1
        ):
            raise ValueError(
                "Degree bounds must satisfy min_connections <= max_connections "
                f"<= num_rooms - 1, got {self.min_connections} <= "
                f"{self.max_connections} <= {self.num_rooms - 1}"
            )
        if len(set(self.room_names)) != len(self.room_names):
            raise ValueError("room_names must not contain duplicates")
        if len(self.room_names) < self.num_rooms:
            raise ValueError(
                f"Name pool has {len(self.room_names)} names but "
                f"{self.num_rooms} rooms are required"
            )
        return self
