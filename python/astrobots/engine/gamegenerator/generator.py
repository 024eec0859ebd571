"""Generates solvable, non-trivial puzzles."""

from __future__ import annotations

import logging
import random

from astrobots.engine.gamesolver import Solver
from astrobots.models.board import State
from astrobots.models.errors import GenerationError
from astrobots.models.position import Position

logger = logging.getLogger(__name__)


class GameGenerator:
    """Samples random boards and keeps the first one the solver accepts."""

    ATTEMPTS = 5000
    # A solution path of 5 states is 4 moves.
    MIN_SOLUTION_LENGTH = 5

    @staticmethod
    def candidate(rows: int, cols: int, rng: random.Random) -> State:
        """Return one random, not necessarily solvable, state."""
        cells = [Position(x, y) for x in range(cols) for y in range(rows)]
        num_robots = rng.randrange(max(rows, cols))
        if num_robots + 2 > len(cells):
            raise ValueError(
                f"A {rows}×{cols} board cannot hold {num_robots} robots, "
                f"an astronaut and a goal."
            )

        rng.shuffle(cells)
        astro, goal = cells[0], cells[1]
        robots = cells[2 : 2 + num_robots]
        return State.create(astro, goal, rows, cols, robots)

    @staticmethod
    def generate(
        rows: int,
        cols: int,
        rng: random.Random | None = None,
        attempts: int | None = None,
        min_solution_length: int | None = None,
    ) -> State:
        """Return the initial state of a solvable, non-trivial puzzle.

        Raises ``GenerationError`` when no candidate passes validation within
        *attempts* tries.
        """
        if rng is None:
            rng = random.Random()
        if attempts is None:
            attempts = GameGenerator.ATTEMPTS
        if min_solution_length is None:
            min_solution_length = GameGenerator.MIN_SOLUTION_LENGTH

        for attempt in range(1, attempts + 1):
            state = GameGenerator.candidate(rows, cols, rng)
            solution = Solver.solve(state)
            if solution is None:
                logger.debug("attempt %d: unsolvable", attempt)
                continue
            if len(solution) < min_solution_length:
                logger.debug(
                    "attempt %d: too easy (%d moves)", attempt, len(solution) - 1
                )
                continue

            logger.info(
                "generated %d×%d puzzle with %d robots after %d attempts "
                "(%d-move solution)",
                rows,
                cols,
                state.num_robots,
                attempt,
                len(solution) - 1,
            )
            return solution[0]

        raise GenerationError(
            f"all {attempts} generated positions failed validation"
        )
