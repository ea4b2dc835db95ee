"""Board text input: glyph decoding and parsing into a Board."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence

from savanna.animals import GLYPHS, Animal
from savanna.behaviors import DEFAULT_BEHAVIORS, BehaviorTable
from savanna.board import EMPTY_GLYPH, Board
from savanna.types import Coord, UnknownSpeciesGlyphError


def create(
    glyph: str, coord: Coord, behaviors: BehaviorTable | None = None
) -> Animal | None:
    """Decode one board character. Returns None for an empty cell."""
    if glyph == EMPTY_GLYPH:
        return None
    entry = GLYPHS.get(glyph)
    if entry is None:
        raise UnknownSpeciesGlyphError(glyph, coord)
    species, sex = entry
    table = behaviors if behaviors is not None else DEFAULT_BEHAVIORS
    return Animal(species, sex, coord, behavior=table.get(species, sex))


def parse_board(
    rows: Sequence[str], behaviors: BehaviorTable | None = None
) -> Board:
    """Build a Board from text rows. Row index is x, column index is y.

    Every glyph is decoded before anything is placed, so a bad character
    anywhere rejects the whole input.
    """
    animals: list[Animal] = []
    for x, row in enumerate(rows):
        for y, glyph in enumerate(row):
            animal = create(glyph, Coord(x, y), behaviors)
            if animal is not None:
                animals.append(animal)

    board = Board(rows=len(rows), cols=max((len(r) for r in rows), default=0))
    for animal in animals:
        board.add_animal(animal)
    return board


def load_rows(path: str | Path) -> list[str]:
    """Read a board file, one row per line, dropping trailing blank lines."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines
