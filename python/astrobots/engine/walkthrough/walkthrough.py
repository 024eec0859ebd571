"""Step-by-step cursor over a precomputed solution."""

from __future__ import annotations

from astrobots.models.board import PosChange, State


class SolutionWalkthrough:
    """Holds a solution path and the step currently on display."""

    def __init__(self, solution: list[State]) -> None:
        if not solution:
            raise ValueError("A walkthrough needs at least one state.")
        self.solution = solution
        self._step = 0

    def __len__(self) -> int:
        return len(self.solution)

    @property
    def current_step(self) -> int:
        return self._step

    @property
    def state(self) -> State:
        return self.solution[self._step]

    def increment(self) -> None:
        if self._step < len(self.solution) - 1:
            self._step += 1

    def decrement(self) -> None:
        if self._step > 0:
            self._step -= 1

    def rewind(self) -> None:
        self._step = 0

    def position_changes(self) -> list[PosChange]:
        """One change per move; raises ``InvariantMismatchError`` on a bad path."""
        return State.pos_changes(self.solution)

    def last_change(self) -> PosChange | None:
        """The move that led to the current step, or ``None`` at the start."""
        if self._step == 0:
            return None
        return PosChange.between(
            self.solution[self._step - 1], self.solution[self._step]
        )
