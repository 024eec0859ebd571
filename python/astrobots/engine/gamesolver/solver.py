"""Breadth-first solver for the astronaut-and-robots puzzle."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator

from astrobots.engine.movement import move_toward
from astrobots.models.board import Selection, State
from astrobots.models.position import Direction

logger = logging.getLogger(__name__)

# Expansion order.  Changing it changes which of several equally short
# solutions is returned, and therefore which puzzles a seeded generator yields.
DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def successors_of(state: State, selection: Selection) -> Iterator[State]:
        """Yield one state per direction the selected actor can slide in."""
        current = state.pos_of(selection)
        for direction in DIRECTIONS:
            landing = move_toward(state, current, direction)
            if landing is not None:
                yield state.with_position(selection, landing)

    @staticmethod
    def successors(state: State) -> list[State]:
        """All single-slide successors: astronaut first, then robots in order."""
        return [
            successor
            for selection in state.selections()
            for successor in Solver.successors_of(state, selection)
        ]

    @staticmethod
    def solve(state: State) -> list[State] | None:
        """Return the shortest path from *state* to the goal, or ``None``.

        The path includes both the starting state and the final state, so an
        already solved *state* yields ``[state]``.  Robot positions are
        irrelevant to the goal test; when several goal states lie at the same
        depth, the first one generated in expansion order wins.
        """
        if state.is_at_goal():
            return [state]

        parents: dict[State, State | None] = {state: None}
        frontier: deque[State] = deque([state])

        while frontier:
            current = frontier.popleft()
            for successor in Solver.successors(current):
                if successor in parents:
                    continue
                parents[successor] = current
                if successor.is_at_goal():
                    path = Solver._reconstruct(parents, successor)
                    logger.debug(
                        "solved in %d moves after visiting %d states",
                        len(path) - 1,
                        len(parents),
                    )
                    return path
                frontier.append(successor)

        logger.debug("no solution after visiting %d states", len(parents))
        return None

    @staticmethod
    def is_solvable(state: State) -> bool:
        """Return True if *state* can reach the goal."""
        return Solver.solve(state) is not None

    @staticmethod
    def hint(state: State) -> State | None:
        """Return the next state on a shortest solution.

        ``None`` if *state* is already solved or cannot be solved.
        """
        path = Solver.solve(state)
        if path is None or len(path) < 2:
            return None
        return path[1]

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _reconstruct(parents: dict[State, State | None], end: State) -> list[State]:
        path: list[State] = []
        node: State | None = end
        while node is not None:
            path.append(node)
            node = parents[node]
        path.reverse()
        return path
