"""Solver test suite.

Every returned path is replayed: each step must be one of the single-slide
successors of the step before it, and the last step must be at the goal.
"""

from __future__ import annotations

import pytest

from astrobots.engine.gamesolver import Solver
from astrobots.models.board import DEFAULT_LAYOUT, Selection, State
from astrobots.models.position import Position


# -- helpers ------------------------------------------------------------------


def _assert_valid_path(path: list[State]) -> None:
    """Check that *path* is a chain of legal slides ending at the goal."""
    assert path, "solve() must return at least the starting state"
    assert path[-1].is_at_goal()
    assert not any(s.is_at_goal() for s in path[:-1])
    for i, (prev, nxt) in enumerate(zip(path, path[1:])):
        assert nxt in Solver.successors(prev), f"step {i + 1} is not a legal slide"


# -- tests --------------------------------------------------------------------


def test_already_at_goal() -> None:
    state = State.create(Position(2, 1), Position(2, 1), 4, 4)
    assert Solver.solve(state) == [state]
    assert Solver.hint(state) is None


def test_single_straight_slide() -> None:
    state = State.create(Position(0, 0), Position(3, 0), 4, 4)
    path = Solver.solve(state)

    assert path is not None
    assert len(path) == 2
    assert path[0] == state
    assert path[1].astro == Position(3, 0)


def test_two_moves_uses_expansion_order() -> None:
    # Down-then-Right and Right-then-Down are both shortest; Down is tried first.
    state = State.create(Position(0, 0), Position(3, 3), 4, 4)
    path = Solver.solve(state)

    assert path is not None
    assert [s.astro for s in path] == [Position(0, 0), Position(0, 3), Position(3, 3)]


def test_moves_robot_when_shorter() -> None:
    state = State.from_text("AX..\n....\n....\n..R.")
    path = Solver.solve(state)

    assert path is not None
    _assert_valid_path(path)
    assert len(path) == 3
    assert path[1].robots == (Position(2, 0),)
    assert path[2].astro == Position(1, 0)


def test_unsolvable() -> None:
    # Without robots the astronaut can only ever rest in a corner.
    state = State.create(Position(0, 0), Position(1, 1), 4, 4)
    assert Solver.solve(state) is None
    assert not Solver.is_solvable(state)
    assert Solver.hint(state) is None


def test_default_layout_is_solvable() -> None:
    state = State.from_text(DEFAULT_LAYOUT)
    path = Solver.solve(state)

    assert path is not None
    assert path[0] == state
    _assert_valid_path(path)


def test_solve_is_deterministic() -> None:
    state = State.from_text(DEFAULT_LAYOUT)
    assert Solver.solve(state) == Solver.solve(state)


def test_hint_is_second_step() -> None:
    state = State.from_text("AX..\n....\n....\n..R.")
    path = Solver.solve(state)
    assert path is not None
    assert Solver.hint(state) == path[1]


def test_successors_order() -> None:
    state = State.from_text("....\n.A..\n....\nR..X")
    successors = Solver.successors(state)

    # Astronaut first (up, down, left, right), then the robot (up, right).
    # The goal does not stop the robot.
    assert [s.astro for s in successors[:4]] == [
        Position(1, 0),
        Position(1, 3),
        Position(0, 1),
        Position(3, 1),
    ]
    assert [s.robots for s in successors[4:]] == [
        (Position(0, 0),),
        (Position(3, 3),),
    ]


def test_successors_of_selection() -> None:
    state = State.from_text("....\n.A..\n....\nR..X")
    moves = list(Solver.successors_of(state, Selection.of_robot(0)))
    assert [s.robots[0] for s in moves] == [Position(0, 0), Position(3, 3)]


@pytest.mark.parametrize(
    "text",
    [
        "A...\n....\n.R..\n...X",
        "R..A\n....\nX...\n..R.",
        "A....\n.R...\n..X..\n...R.\n.....",
    ],
)
def test_returned_paths_are_legal(text: str) -> None:
    path = Solver.solve(State.from_text(text))
    if path is not None:
        _assert_valid_path(path)
