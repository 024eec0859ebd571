"""Grid coordinates and movement directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, order=True)
class Position:
    """A board cell. ``x`` is the column, ``y`` the row (0 is the top)."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
