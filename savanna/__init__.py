"""savanna - A turn-based predator/prey grid simulation."""

from savanna.animals import GLYPHS, Animal
from savanna.behaviors import (
    BehaviorTable,
    Courting,
    Flee,
    Hunt,
    MovePolicy,
    Roam,
    Wander,
    default_behaviors,
    wandering_behaviors,
)
from savanna.board import Board
from savanna.config import DEFAULT_BOARD, SimulationConfig
from savanna.engine import Engine
from savanna.events import Born, Eaten, EventLog, Moved, TurnEnded
from savanna.factory import create, load_rows, parse_board
from savanna.types import (
    Coord,
    OccupiedCellError,
    Sex,
    Species,
    TurnContext,
    UnknownSpeciesGlyphError,
)

__all__ = [
    "Engine",
    "Board",
    "Animal",
    "Coord",
    "Species",
    "Sex",
    "TurnContext",
    "GLYPHS",
    "MovePolicy",
    "BehaviorTable",
    "Roam",
    "Hunt",
    "Flee",
    "Wander",
    "Courting",
    "default_behaviors",
    "wandering_behaviors",
    "create",
    "parse_board",
    "load_rows",
    "EventLog",
    "Moved",
    "Eaten",
    "Born",
    "TurnEnded",
    "SimulationConfig",
    "DEFAULT_BOARD",
    "OccupiedCellError",
    "UnknownSpeciesGlyphError",
]
