"""System factories for the three phases of a turn.

Each phase iterates a snapshot of the animals alive when it starts, so an
animal that moved or was born during the phase never acts twice.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from savanna.events import Born, Eaten, Moved

if TYPE_CHECKING:
    from savanna.board import Board
    from savanna.types import System, TurnContext


def make_movement_system() -> System:
    def movement_system(board: Board, ctx: TurnContext) -> None:
        for animal in board.animals():
            if not animal.alive:
                continue
            origin = animal.move(board, ctx)
            if origin is not None:
                ctx.events.record(Moved(
                    turn=ctx.turn_number, eid=animal.eid,
                    origin=origin, target=animal.coord,
                ))
    return movement_system


def make_predation_system() -> System:
    def predation_system(board: Board, ctx: TurnContext) -> None:
        predators = [a for a in board.animals() if a.is_predator]
        for predator in predators:
            if not predator.alive:
                continue
            prey = predator.eat(board)
            if prey is not None:
                ctx.events.record(Eaten(
                    turn=ctx.turn_number, predator=predator.eid, prey=prey.eid,
                    species=prey.species, at=prey.coord,
                ))
    return predation_system


def make_reproduction_system() -> System:
    def reproduction_system(board: Board, ctx: TurnContext) -> None:
        busy: set[int] = set()
        for animal in board.animals():
            child = animal.attempt_reproduction(board, busy)
            if child is not None:
                ctx.events.record(Born(
                    turn=ctx.turn_number, eid=child.eid, parent=animal.eid,
                    species=child.species, at=child.coord,
                ))
    return reproduction_system
