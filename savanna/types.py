"""Shared value types, context and errors for the savanna simulation."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from savanna.board import Board
    from savanna.events import EventLog

Offset = tuple[int, int]

# Neighbour order is always up, down, left, right.
UP: Offset = (0, 1)
DOWN: Offset = (0, -1)
LEFT: Offset = (1, 0)
RIGHT: Offset = (-1, 0)
ORTHOGONAL: tuple[Offset, ...] = (UP, DOWN, LEFT, RIGHT)


@dataclass(frozen=True, slots=True)
class Coord:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Coord:
        return Coord(self.x + dx, self.y + dy)

    def adjacent(self, order: tuple[Offset, ...] = ORTHOGONAL) -> list[Coord]:
        return [Coord(self.x + dx, self.y + dy) for dx, dy in order]


class Species(Enum):
    LION = "Lion"
    CROCODILE = "Crocodile"
    ELEPHANT = "Elephant"
    ANTELOPE = "Antelope"

    @property
    def is_predator(self) -> bool:
        return self in _PREDATORS


_PREDATORS = frozenset({Species.LION, Species.CROCODILE})


class Sex(Enum):
    MALE = "male"
    FEMALE = "female"

    @property
    def opposite(self) -> Sex:
        return Sex.FEMALE if self is Sex.MALE else Sex.MALE


@dataclass(frozen=True, slots=True)
class TurnContext:
    turn_number: int
    random: _random.Random
    events: EventLog


class OccupiedCellError(ValueError):
    """Raised when a second animal would be placed on an occupied cell."""

    def __init__(self, coord: Coord, message: str) -> None:
        self.coord = coord
        super().__init__(message)


class UnknownSpeciesGlyphError(ValueError):
    """Raised when board input contains a character with no species."""

    def __init__(self, glyph: str, coord: Coord) -> None:
        self.glyph = glyph
        self.coord = coord
        super().__init__(
            f"Unrecognized glyph {glyph!r} at row {coord.x}, column {coord.y}"
        )


System = Callable[["Board", TurnContext], None]
