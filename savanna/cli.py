"""Command-line entry point: run a board for a number of turns and print it.

Run: python -m savanna --turns 10 --seed 42
"""
from __future__ import annotations

import argparse
from typing import Sequence

from savanna.behaviors import default_behaviors, wandering_behaviors
from savanna.board import Board
from savanna.config import DEFAULT_BOARD, SimulationConfig
from savanna.engine import Engine
from savanna.events import Born, Eaten, EventLog
from savanna.factory import load_rows
from savanna.types import TurnContext, UnknownSpeciesGlyphError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="savanna",
        description="Predator/prey grid simulation rendered as text")
    parser.add_argument("--turns", type=int, default=10,
                        help="Number of turns to play (default: 10)")
    parser.add_argument("--seed", type=int, default=None,
                        help="RNG seed for --wander (default: random)")
    parser.add_argument("--board", default=None,
                        help="Board file, one row per line (default: built-in board)")
    parser.add_argument("--wander", action="store_true",
                        help="Move in seeded random directions instead of species policies")
    parser.add_argument("--quiet", action="store_true",
                        help="Print only the final board")
    parser.add_argument("--events", action="store_true",
                        help="Print kills and births after each turn")
    parser.add_argument("--max-events", type=int, default=0,
                        help="Keep only the newest N events (default: 0, keep all)")
    return parser


def _format_census(board: Board) -> str:
    counts = board.census()
    if not counts:
        return "Population: none"
    parts = [f"{name}={counts[name]}" for name in sorted(counts)]
    return "Population: " + " ".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SimulationConfig(
            turns=args.turns, seed=args.seed, wander=args.wander,
            max_events=args.max_events,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        rows = load_rows(args.board) if args.board else list(DEFAULT_BOARD)
        behaviors = wandering_behaviors() if config.wander else default_behaviors()
        engine = Engine.from_rows(
            rows, seed=config.seed, behaviors=behaviors,
            event_log=EventLog(max_entries=config.max_events),
        )
    except (OSError, UnicodeDecodeError, UnknownSpeciesGlyphError) as exc:
        parser.exit(2, f"savanna: error: {exc}\n")

    def print_turn(board: Board, ctx: TurnContext) -> None:
        if args.quiet and ctx.turn_number != config.turns:
            return
        print(f"Step {ctx.turn_number}:")
        print(board.render(), end="")
        if args.events:
            for event in ctx.events.for_turn(ctx.turn_number, Eaten, Born):
                if isinstance(event, Eaten):
                    print(f"  predator #{event.predator} ate "
                          f"{event.species.value} #{event.prey}")
                else:
                    print(f"  {event.species.value} #{event.eid} born "
                          f"at ({event.at.x}, {event.at.y})")

    engine.on_start(print_turn)
    engine.on_turn(print_turn)
    engine.play(config.turns)
    print(_format_census(engine.board))
    if args.events:
        kills = len(engine.events.of_type(Eaten))
        births = len(engine.events.of_type(Born))
        print(f"Logged: kills={kills} births={births}")
    return 0
