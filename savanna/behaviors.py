"""Movement policies and the per-species/sex policy registry.

A policy answers one question: given an animal on a board, which cell
should it step to this turn? ``None`` means stay put. Policies compose
(``Courting`` wraps another policy) instead of forming a class hierarchy.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from savanna.types import DOWN, LEFT, ORTHOGONAL, RIGHT, UP, Coord, Offset, Sex, Species

if TYPE_CHECKING:
    from savanna.animals import Animal
    from savanna.board import Board
    from savanna.types import TurnContext


class MovePolicy(Protocol):
    def choose(self, animal: Animal, board: Board, ctx: TurnContext) -> Coord | None: ...


class Roam:
    """Step to the first free cell in a fixed direction order."""

    __slots__ = ("order",)

    def __init__(self, order: tuple[Offset, ...] = ORTHOGONAL) -> None:
        self.order = order

    def choose(self, animal: Animal, board: Board, ctx: TurnContext) -> Coord | None:
        cells = board.free_cells(animal.coord, self.order)
        return cells[0] if cells else None


class Hunt:
    """Hold position next to prey, else close in on prey, else roam."""

    __slots__ = ("order",)

    def __init__(self, order: tuple[Offset, ...] = ORTHOGONAL) -> None:
        self.order = order

    def choose(self, animal: Animal, board: Board, ctx: TurnContext) -> Coord | None:
        if any(animal.can_eat(n) for n in board.neighbors(animal.coord)):
            return None
        cells = board.free_cells(animal.coord, self.order)
        for cell in cells:
            if any(animal.can_eat(n) for n in board.neighbors(cell)):
                return cell
        return cells[0] if cells else None


class Flee:
    """Prefer a free cell with no predator next to it."""

    __slots__ = ("order",)

    def __init__(self, order: tuple[Offset, ...] = ORTHOGONAL) -> None:
        self.order = order

    def choose(self, animal: Animal, board: Board, ctx: TurnContext) -> Coord | None:
        cells = board.free_cells(animal.coord, self.order)
        for cell in cells:
            if not any(n.is_predator for n in board.neighbors(cell) if n is not animal):
                return cell
        return cells[0] if cells else None


class Wander:
    """Random direction order drawn from the engine's seeded RNG."""

    __slots__ = ()

    def choose(self, animal: Animal, board: Board, ctx: TurnContext) -> Coord | None:
        order = tuple(ctx.random.sample(ORTHOGONAL, len(ORTHOGONAL)))
        cells = board.free_cells(animal.coord, order)
        return cells[0] if cells else None


class Courting:
    """Stay beside an eligible mate; otherwise defer to ``inner``."""

    __slots__ = ("inner",)

    def __init__(self, inner: MovePolicy) -> None:
        self.inner = inner

    def choose(self, animal: Animal, board: Board, ctx: TurnContext) -> Coord | None:
        if any(animal.can_mate(n) for n in board.neighbors(animal.coord)):
            return None
        return self.inner.choose(animal, board, ctx)


class BehaviorTable:
    """Maps (species, sex) to the movement policy animals are created with."""

    def __init__(self) -> None:
        self._policies: dict[tuple[Species, Sex], MovePolicy] = {}

    def register(self, species: Species, sex: Sex, policy: MovePolicy) -> None:
        """Register a policy. Overwrites if already registered."""
        self._policies[(species, sex)] = policy

    def register_species(self, species: Species, policy: MovePolicy) -> None:
        """Register the same policy for both sexes."""
        for sex in Sex:
            self.register(species, sex, policy)

    def get(self, species: Species, sex: Sex) -> MovePolicy:
        """Look up a policy. Raises KeyError if not registered."""
        try:
            return self._policies[(species, sex)]
        except KeyError:
            raise KeyError(
                f"No movement policy for {sex.value} {species.value}"
            ) from None

    def has(self, species: Species, sex: Sex) -> bool:
        return (species, sex) in self._policies

    def keys(self) -> list[tuple[Species, Sex]]:
        return list(self._policies)


def default_behaviors() -> BehaviorTable:
    table = BehaviorTable()
    table.register_species(Species.LION, Courting(Hunt((UP, DOWN, LEFT, RIGHT))))
    # Crocodiles patrol along x first.
    table.register_species(Species.CROCODILE, Courting(Hunt((LEFT, RIGHT, UP, DOWN))))
    table.register_species(Species.ELEPHANT, Courting(Roam((UP, DOWN, LEFT, RIGHT))))
    table.register_species(Species.ANTELOPE, Courting(Flee((UP, DOWN, LEFT, RIGHT))))
    return table


def wandering_behaviors() -> BehaviorTable:
    table = BehaviorTable()
    for species in Species:
        table.register_species(species, Courting(Wander()))
    return table


DEFAULT_BEHAVIORS = default_behaviors()
