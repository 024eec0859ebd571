from astrobots.models.board import (
    DEFAULT_LAYOUT,
    Invariants,
    PosChange,
    Selection,
    State,
    Tile,
)
from astrobots.models.errors import (
    AstrobotsError,
    BoardError,
    GenerationError,
    InvariantMismatchError,
    SelectionError,
    UnsolvableError,
)
from astrobots.models.position import Direction, Position

__all__ = [
    "AstrobotsError",
    "BoardError",
    "DEFAULT_LAYOUT",
    "Direction",
    "GenerationError",
    "InvariantMismatchError",
    "Invariants",
    "PosChange",
    "Position",
    "Selection",
    "SelectionError",
    "State",
    "Tile",
    "UnsolvableError",
]
