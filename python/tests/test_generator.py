"""Puzzle generation and validation."""

from __future__ import annotations

import random

import pytest

from astrobots.engine.gamegenerator import GameGenerator
from astrobots.engine.gamesolver import Solver
from astrobots.models.errors import GenerationError


@pytest.mark.parametrize("seed", [0, 1, 42])
def test_generated_puzzle_is_valid(seed: int) -> None:
    state = GameGenerator.generate(4, 4, rng=random.Random(seed))

    assert state.dims() == (4, 4)
    assert not state.is_at_goal()

    path = Solver.solve(state)
    assert path is not None
    assert len(path) >= GameGenerator.MIN_SOLUTION_LENGTH
    assert path[0] == state


def test_generation_is_seeded() -> None:
    a = GameGenerator.generate(4, 5, rng=random.Random(7))
    b = GameGenerator.generate(4, 5, rng=random.Random(7))
    assert a == b


def test_custom_difficulty() -> None:
    state = GameGenerator.generate(
        4, 4, rng=random.Random(3), min_solution_length=3
    )
    path = Solver.solve(state)
    assert path is not None
    assert len(path) >= 3


@pytest.mark.parametrize("rows, cols", [(4, 4), (4, 7), (6, 5), (10, 10)])
def test_candidate_cells_are_distinct(rows: int, cols: int) -> None:
    rng = random.Random(rows * cols)
    for _ in range(50):
        state = GameGenerator.candidate(rows, cols, rng)
        cells = [state.astro, state.goal, *state.robots]

        assert len(set(cells)) == len(cells)
        assert state.num_robots < max(rows, cols)
        assert all(state.in_bounds(pos) for pos in cells)


def test_exhausted_attempts() -> None:
    with pytest.raises(GenerationError, match="all 3 generated positions"):
        GameGenerator.generate(
            4, 4, rng=random.Random(0), attempts=3, min_solution_length=1000
        )


def test_zero_attempts() -> None:
    with pytest.raises(RuntimeError):
        GameGenerator.generate(4, 4, attempts=0)
