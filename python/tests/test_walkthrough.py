"""Solution walkthrough cursor."""

from __future__ import annotations

import pytest

from astrobots.engine.gamesolver import Solver
from astrobots.engine.walkthrough import SolutionWalkthrough
from astrobots.models.board import PosChange, State
from astrobots.models.errors import InvariantMismatchError
from astrobots.models.position import Position


def _walkthrough() -> SolutionWalkthrough:
    # Down, then Right.
    path = Solver.solve(State.create(Position(0, 0), Position(3, 3), 4, 4))
    assert path is not None
    return SolutionWalkthrough(path)


def test_starts_at_first_state() -> None:
    walkthrough = _walkthrough()
    assert len(walkthrough) == 3
    assert walkthrough.current_step == 0
    assert walkthrough.state.astro == Position(0, 0)
    assert walkthrough.last_change() is None


def test_increment_saturates() -> None:
    walkthrough = _walkthrough()
    for _ in range(5):
        walkthrough.increment()
    assert walkthrough.current_step == 2
    assert walkthrough.state.is_at_goal()


def test_decrement_saturates() -> None:
    walkthrough = _walkthrough()
    walkthrough.increment()
    walkthrough.decrement()
    walkthrough.decrement()
    assert walkthrough.current_step == 0


def test_rewind() -> None:
    walkthrough = _walkthrough()
    walkthrough.increment()
    walkthrough.increment()
    walkthrough.rewind()
    assert walkthrough.current_step == 0


def test_single_state_solution() -> None:
    state = State.create(Position(1, 1), Position(1, 1), 4, 4)
    walkthrough = SolutionWalkthrough([state])
    walkthrough.increment()
    assert walkthrough.current_step == 0
    assert walkthrough.position_changes() == []


def test_position_changes() -> None:
    walkthrough = _walkthrough()
    assert walkthrough.position_changes() == [
        PosChange(Position(0, 0), Position(0, 3)),
        PosChange(Position(0, 3), Position(3, 3)),
    ]

    walkthrough.increment()
    assert walkthrough.last_change() == PosChange(Position(0, 0), Position(0, 3))


def test_empty_solution() -> None:
    with pytest.raises(ValueError):
        SolutionWalkthrough([])


def test_repeated_state_is_a_defect() -> None:
    state = State.create(Position(0, 0), Position(3, 3), 4, 4)
    walkthrough = SolutionWalkthrough([state, state])
    with pytest.raises(InvariantMismatchError):
        walkthrough.position_changes()
