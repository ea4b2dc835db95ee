"""Board - sparse coordinate to animal storage with orthogonal queries."""
from __future__ import annotations

from typing import TYPE_CHECKING

from savanna.types import ORTHOGONAL, Coord, OccupiedCellError, Offset

if TYPE_CHECKING:
    from savanna.animals import Animal

EMPTY_GLYPH = "."


class Board:
    """Owns the live animals, keyed by the cell each one occupies.

    Empty cells are never stored. ``rows`` and ``cols`` record the extent
    of the parsed input and only affect rendering; animals may step
    outside it.
    """

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"extent must be non-negative, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells: dict[Coord, Animal] = {}

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _claim(self, animal: Animal, coord: Coord) -> None:
        occupant = self._cells.get(coord)
        if occupant is not None:
            raise OccupiedCellError(
                coord,
                f"Cannot place {animal.glyph}#{animal.eid} at ({coord.x}, {coord.y}): "
                f"occupied by {occupant.glyph}#{occupant.eid}",
            )
        self._cells[coord] = animal

    def add_animal(self, animal: Animal) -> None:
        self._claim(animal, animal.coord)

    def remove_animal(self, animal: Animal) -> None:
        if self._cells.get(animal.coord) is animal:
            del self._cells[animal.coord]

    def move_animal(self, animal: Animal, coord: Coord) -> None:
        if self._cells.get(animal.coord) is not animal:
            raise KeyError(f"Animal {animal.eid} is not on the board")
        if coord == animal.coord:
            return
        self._claim(animal, coord)
        del self._cells[animal.coord]
        animal.coord = coord

    def at(self, coord: Coord) -> Animal | None:
        return self._cells.get(coord)

    def is_free(self, coord: Coord) -> bool:
        return coord not in self._cells

    def neighbors(self, coord: Coord) -> list[Animal]:
        """Animals on the four orthogonal cells, in up, down, left, right order."""
        result: list[Animal] = []
        for cell in coord.adjacent(ORTHOGONAL):
            animal = self._cells.get(cell)
            if animal is not None:
                result.append(animal)
        return result

    def free_cells(
        self, coord: Coord, order: tuple[Offset, ...] = ORTHOGONAL
    ) -> list[Coord]:
        return [cell for cell in coord.adjacent(order) if cell not in self._cells]

    def animals(self) -> list[Animal]:
        """Live animals in row-major order; safe to iterate while mutating."""
        return [self._cells[c] for c in sorted(self._cells, key=lambda c: (c.x, c.y))]

    def census(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for animal in self._cells.values():
            name = animal.species.value
            counts[name] = counts.get(name, 0) + 1
        return counts

    def render(self) -> str:
        if not self._cells and (self._rows == 0 or self._cols == 0):
            return ""
        xs = [c.x for c in self._cells]
        ys = [c.y for c in self._cells]
        min_x = min([0, *xs])
        max_x = max([self._rows - 1, *xs])
        min_y = min([0, *ys])
        max_y = max([self._cols - 1, *ys])
        lines: list[str] = []
        for x in range(min_x, max_x + 1):
            row = []
            for y in range(min_y, max_y + 1):
                animal = self._cells.get(Coord(x, y))
                row.append(animal.glyph if animal is not None else EMPTY_GLYPH)
            lines.append("".join(row) + "\n")
        return "".join(lines)

    def __contains__(self, animal: object) -> bool:
        coord = getattr(animal, "coord", None)
        return coord is not None and self._cells.get(coord) is animal

    def __len__(self) -> int:
        return len(self._cells)
