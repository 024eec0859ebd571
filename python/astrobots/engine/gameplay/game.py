"""Core gameplay logic — selection, moves, undo and the solution walkthrough."""

from __future__ import annotations

import random
from enum import StrEnum

from astrobots.engine.gamegenerator import GameGenerator
from astrobots.engine.gamesolver import Solver
from astrobots.engine.gamestate import GameState
from astrobots.engine.movement import move_toward
from astrobots.engine.walkthrough import SolutionWalkthrough
from astrobots.models.board import Selection, State
from astrobots.models.errors import UnsolvableError
from astrobots.models.position import Direction, Position


class Mode(StrEnum):
    PLAYABLE = "playable"
    WALKTHROUGH = "walkthrough"
    GAME_OVER = "game_over"


class GamePlay:
    """Orchestrates a single game session.

    The puzzle is solved once up front; a board the astronaut cannot win is
    rejected with ``UnsolvableError`` instead of being offered for play.
    """

    def __init__(self, initial: State) -> None:
        solution = Solver.solve(initial)
        if solution is None:
            raise UnsolvableError("game cannot be solved from this state")

        self.state = GameState(initial)
        self.walkthrough = SolutionWalkthrough(solution)
        self.selected = Selection.astro()
        self.mode = Mode.GAME_OVER if initial.is_at_goal() else Mode.PLAYABLE

    @classmethod
    def generate(
        cls, rows: int, cols: int, rng: random.Random | None = None
    ) -> GamePlay:
        """Start a session on a freshly generated puzzle."""
        return cls(GameGenerator.generate(rows, cols, rng=rng))

    # -- queries --------------------------------------------------------------

    @property
    def current(self) -> State:
        return self.state.current

    @property
    def selected_pos(self) -> Position:
        return self.current.pos_of(self.selected)

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- selection ------------------------------------------------------------

    def select_next(self) -> None:
        num_robots = self.current.num_robots
        n = self.selected.robot
        if num_robots == 0 or (n is not None and n + 1 == num_robots):
            self.selected = Selection.astro()
        elif n is None:
            self.selected = Selection.of_robot(0)
        else:
            self.selected = Selection.of_robot(n + 1)

    def select_prev(self) -> None:
        num_robots = self.current.num_robots
        n = self.selected.robot
        if num_robots == 0 or n == 0:
            self.selected = Selection.astro()
        elif n is None:
            self.selected = Selection.of_robot(num_robots - 1)
        else:
            self.selected = Selection.of_robot(n - 1)

    # -- movement -------------------------------------------------------------

    def attempt(self, direction: Direction) -> Position | None:
        """Where the selected actor would land, without committing the move."""
        return move_toward(self.current, self.selected_pos, direction)

    def move(self, direction: Direction) -> bool:
        """Slide the selected actor.  Returns True if the move was applied."""
        if self.mode != Mode.PLAYABLE:
            return False
        landing = self.attempt(direction)
        if landing is None:
            return False
        self.move_selection_to(landing)
        return True

    def move_selection_to(self, pos: Position) -> None:
        self.state.push(self.current.with_position(self.selected, pos))
        if self.current.is_at_goal():
            self.mode = Mode.GAME_OVER
            self.state.pause()

    def hint(self) -> State | None:
        """Apply the next move of a shortest solution from here."""
        if self.mode != Mode.PLAYABLE:
            return None
        nxt = Solver.hint(self.current)
        if nxt is None:
            return None
        self.state.push(nxt)
        if nxt.is_at_goal():
            self.mode = Mode.GAME_OVER
            self.state.pause()
        return nxt

    def undo(self) -> bool:
        if self.mode != Mode.PLAYABLE:
            return False
        return self.state.pop()

    def restart(self) -> None:
        self.state.reset()
        self.walkthrough.rewind()
        self.selected = Selection.astro()
        self.mode = Mode.GAME_OVER if self.is_won else Mode.PLAYABLE

    # -- walkthrough ----------------------------------------------------------

    def toggle_mode(self) -> None:
        if self.mode == Mode.PLAYABLE:
            self.mode = Mode.WALKTHROUGH
        elif self.mode == Mode.WALKTHROUGH:
            self.mode = Mode.PLAYABLE

    def walkthrough_next(self) -> None:
        self.walkthrough.increment()

    def walkthrough_prev(self) -> None:
        self.walkthrough.decrement()
