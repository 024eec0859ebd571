"""Slide resolution — where an actor ends up when pushed in a direction."""

from __future__ import annotations

from typing import Iterator

from astrobots.models.board import State
from astrobots.models.position import Direction, Position


def positions_in_path(
    state: State, start: Position, direction: Direction
) -> Iterator[Position]:
    """Yield the cells from the one next to *start* up to the board edge."""
    rows, cols = state.dims()
    x, y = start.x, start.y

    if direction == Direction.UP:
        return (Position(x, ny) for ny in range(y - 1, -1, -1))
    if direction == Direction.DOWN:
        return (Position(x, ny) for ny in range(y + 1, rows))
    if direction == Direction.LEFT:
        return (Position(nx, y) for nx in range(x - 1, -1, -1))
    if direction == Direction.RIGHT:
        return (Position(nx, y) for nx in range(x + 1, cols))
    raise ValueError(f"Unknown direction: {direction!r}")


def move_toward(
    state: State, start: Position, direction: Direction
) -> Position | None:
    """Slide the actor at *start* in *direction*.

    The actor travels in a straight line and stops on the last free cell
    before another actor or the board edge.  The goal cell does not stop it.
    Returns the landing cell, or ``None`` if the actor cannot move at all.
    """
    path = list(positions_in_path(state, start, direction))

    for i, pos in enumerate(path):
        if state.tile_at(pos).is_actor:
            # Only reachable for the first cell: later blockers are caught by
            # the lookahead below.
            return None

        if i + 1 == len(path) or state.tile_at(path[i + 1]).is_actor:
            return pos

    return None
