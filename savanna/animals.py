"""Animal - a single creature on the board and what it can do each turn."""
from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from savanna.behaviors import DEFAULT_BEHAVIORS, MovePolicy
from savanna.types import Coord, Sex, Species

if TYPE_CHECKING:
    from savanna.board import Board
    from savanna.types import TurnContext

GLYPHS: dict[str, tuple[Species, Sex]] = {
    "L": (Species.LION, Sex.MALE),
    "l": (Species.LION, Sex.FEMALE),
    "K": (Species.CROCODILE, Sex.MALE),
    "k": (Species.CROCODILE, Sex.FEMALE),
    "S": (Species.ELEPHANT, Sex.MALE),
    "s": (Species.ELEPHANT, Sex.FEMALE),
    "A": (Species.ANTELOPE, Sex.MALE),
    "a": (Species.ANTELOPE, Sex.FEMALE),
}

_GLYPH_OF: dict[tuple[Species, Sex], str] = {v: k for k, v in GLYPHS.items()}

_eids = itertools.count()


@dataclass(eq=False)
class Animal:
    """A live (or eaten) animal. Equality is identity.

    Movement is delegated to ``behavior``; eating and mating rules are
    shared by every species and keyed off ``species`` and ``sex``.
    """

    species: Species
    sex: Sex
    coord: Coord
    behavior: MovePolicy | None = None
    alive: bool = True
    eid: int = field(default_factory=lambda: next(_eids))

    def __post_init__(self) -> None:
        if self.behavior is None:
            self.behavior = DEFAULT_BEHAVIORS.get(self.species, self.sex)

    @property
    def is_predator(self) -> bool:
        return self.species.is_predator

    @property
    def glyph(self) -> str:
        return _GLYPH_OF[(self.species, self.sex)]

    def can_eat(self, other: Animal) -> bool:
        return self.is_predator and other.alive and not other.is_predator

    def can_mate(self, other: Animal) -> bool:
        return (
            other is not self
            and other.alive
            and other.species is self.species
            and other.sex is self.sex.opposite
        )

    def move(self, board: Board, ctx: TurnContext) -> Coord | None:
        """Step to the cell chosen by the behaviour. Returns the old cell if moved."""
        target = self.behavior.choose(self, board, ctx)
        if target is None or target == self.coord:
            return None
        origin = self.coord
        board.move_animal(self, target)
        return origin

    def eat(self, board: Board) -> Animal | None:
        """Consume the first adjacent prey. Does not change position."""
        if not self.is_predator:
            return None
        for other in board.neighbors(self.coord):
            if self.can_eat(other):
                board.remove_animal(other)
                other.alive = False
                return other
        return None

    def attempt_reproduction(self, board: Board, busy: set[int]) -> Animal | None:
        """Mate with the first eligible neighbour not in ``busy``.

        Both parents are added to ``busy`` once a partner is found, even if
        there is no free cell for the offspring. The offspring, when placed,
        is added too.
        """
        if not self.alive or self.eid in busy:
            return None
        partner = next(
            (n for n in board.neighbors(self.coord)
             if n.eid not in busy and self.can_mate(n)),
            None,
        )
        if partner is None:
            return None
        busy.add(self.eid)
        busy.add(partner.eid)
        cells = board.free_cells(self.coord)
        if not cells:
            return None
        child = Animal(self.species, self.sex, cells[0], behavior=self.behavior)
        board.add_animal(child)
        busy.add(child.eid)
        return child

    def __repr__(self) -> str:
        state = "" if self.alive else ", dead"
        return f"Animal({self.glyph}#{self.eid} at ({self.coord.x}, {self.coord.y}){state})"
