"""Typed, turn-stamped records of what happened during a simulation."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TypeVar, Union

from savanna.types import Coord, Species


@dataclass(frozen=True)
class Moved:
    turn: int
    eid: int
    origin: Coord
    target: Coord


@dataclass(frozen=True)
class Eaten:
    turn: int
    predator: int
    prey: int
    species: Species
    at: Coord


@dataclass(frozen=True)
class Born:
    turn: int
    eid: int
    parent: int
    species: Species
    at: Coord


@dataclass(frozen=True)
class TurnEnded:
    turn: int
    population: int


Event = Union[Moved, Eaten, Born, TurnEnded]
E = TypeVar("E", Moved, Eaten, Born, TurnEnded)


class EventLog:
    """Append-only event history; keeps the newest ``max_entries`` if bounded."""

    def __init__(self, max_entries: int = 0) -> None:
        self._events: deque[Event] = deque(maxlen=max_entries if max_entries > 0 else None)

    def record(self, event: Event) -> None:
        self._events.append(event)

    def for_turn(self, turn: int, *kinds: type) -> list[Event]:
        """Events of one turn, optionally restricted to the given record types."""
        return [
            e for e in self._events
            if e.turn == turn and (not kinds or isinstance(e, kinds))
        ]

    def of_type(self, kind: type[E]) -> list[E]:
        return [e for e in self._events if isinstance(e, kind)]

    def __len__(self) -> int:
        return len(self._events)
