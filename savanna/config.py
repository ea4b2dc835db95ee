"""Simulation run configuration."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BOARD: tuple[str, ...] = (
    ".S...",
    "...L.",
    ".Al..",
)


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable settings for one simulation run.

    Attributes:
        turns: Number of turns ``Engine.play`` runs.
        seed: RNG seed; None draws one from the OS.
        wander: Use seeded random movement instead of the species policies.
        max_events: Event log capacity; 0 keeps every event.
    """

    turns: int = 10
    seed: int | None = None
    wander: bool = False
    max_events: int = 0

    def __post_init__(self) -> None:
        if self.turns < 0:
            raise ValueError(f"turns must be >= 0, got {self.turns}")
        if self.max_events < 0:
            raise ValueError(f"max_events must be >= 0, got {self.max_events}")
