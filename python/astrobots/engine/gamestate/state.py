"""Tracks the move history and clock of a game in progress."""

from __future__ import annotations

import time

from astrobots.models.board import State


class GameState:
    """Holds every state reached so far and the elapsed time.

    The history always contains at least the initial state.
    """

    def __init__(self, initial: State) -> None:
        self.history: list[State] = [initial]
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- history --------------------------------------------------------------

    @property
    def current(self) -> State:
        return self.history[-1]

    @property
    def initial(self) -> State:
        return self.history[0]

    @property
    def moves(self) -> int:
        return len(self.history) - 1

    def push(self, state: State) -> None:
        self.history.append(state)

    def pop(self) -> bool:
        """Drop the latest state; the initial state is never removed."""
        if len(self.history) > 1:
            self.history.pop()
            return True
        return False

    def reset(self) -> None:
        del self.history[1:]
        self._start_time = time.time()
        self._elapsed_banked = 0.0
        self._running = True

    @property
    def is_solved(self) -> bool:
        return self.current.is_at_goal()
