"""Engine - turn loop, phase ordering, and lifecycle hooks."""

import os
import random
from typing import Callable, Sequence

from savanna.behaviors import BehaviorTable
from savanna.board import Board
from savanna.events import EventLog, TurnEnded
from savanna.factory import parse_board
from savanna.systems import (
    make_movement_system,
    make_predation_system,
    make_reproduction_system,
)
from savanna.types import System, TurnContext

Hook = Callable[[Board, TurnContext], None]


class Engine:
    def __init__(
        self,
        board: Board,
        seed: int | None = None,
        event_log: EventLog | None = None,
    ) -> None:
        self._board = board
        self._events = event_log if event_log is not None else EventLog()
        self._turn = 0
        # Phase order is fixed: move, eat, reproduce.
        self._systems: list[System] = [
            make_movement_system(),
            make_predation_system(),
            make_reproduction_system(),
        ]
        self._start_hooks: list[Hook] = []
        self._turn_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        seed: int | None = None,
        behaviors: BehaviorTable | None = None,
        event_log: EventLog | None = None,
    ) -> "Engine":
        return cls(parse_board(rows, behaviors), seed=seed, event_log=event_log)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def events(self) -> EventLog:
        return self._events

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def turn_number(self) -> int:
        return self._turn

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_turn(self, hook: Hook) -> None:
        self._turn_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _context(self) -> TurnContext:
        return TurnContext(turn_number=self._turn, random=self._rng, events=self._events)

    def step(self) -> str:
        """Run one full turn and return the rendered board."""
        self._turn += 1
        ctx = self._context()
        for system in self._systems:
            system(self._board, ctx)
        self._events.record(TurnEnded(turn=self._turn, population=len(self._board)))
        rendered = self._board.render()
        for hook in self._turn_hooks:
            hook(self._board, ctx)
        return rendered

    def play(self, turns: int) -> list[str]:
        if isinstance(turns, bool) or not isinstance(turns, int):
            raise TypeError(f"turns must be an int, got {type(turns).__name__}")
        if turns < 0:
            raise ValueError("turns must be non-negative")

        ctx = self._context()
        for hook in self._start_hooks:
            hook(self._board, ctx)

        renders: list[str] = []
        for _ in range(turns):
            renders.append(self.step())

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(self._board, ctx)
        return renders
