"""Board model for the astronaut-and-robots puzzle.

A :class:`State` is an immutable snapshot of one puzzle position: where the
astronaut is, where every robot is, and the :class:`Invariants` (goal cell and
board dimensions) shared by every state of the same puzzle.  States compare
and hash by value, which is what the solver's visited set relies on.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from itertools import pairwise
from typing import Iterable, Iterator, Sequence

from astrobots.models.errors import BoardError, InvariantMismatchError, SelectionError
from astrobots.models.position import Position


class Tile(StrEnum):
    EMPTY = "."
    ASTRO = "A"
    ROBOT = "R"
    GOAL = "X"

    @property
    def is_actor(self) -> bool:
        return self in (Tile.ASTRO, Tile.ROBOT)


# The built-in 5×5 puzzle, one string per row.
DEFAULT_LAYOUT = (
    "R.R.R\n"
    ".....\n"
    "..X..\n"
    "....R\n"
    ".A..."
)


@dataclass(frozen=True)
class Selection:
    """Either the astronaut (``robot is None``) or the robot at an index."""

    robot: int | None = None

    @classmethod
    def astro(cls) -> Selection:
        return cls()

    @classmethod
    def of_robot(cls, index: int) -> Selection:
        return cls(robot=index)

    @property
    def is_astro(self) -> bool:
        return self.robot is None

    def __str__(self) -> str:
        return "astro" if self.robot is None else f"robot {self.robot}"


@dataclass(frozen=True)
class Invariants:
    goal: Position
    rows: int
    cols: int


@dataclass(frozen=True)
class State:
    astro: Position
    robots: tuple[Position, ...]
    invariants: Invariants

    # -- construction helpers -------------------------------------------------

    @classmethod
    def create(
        cls,
        astro: Position,
        goal: Position,
        rows: int,
        cols: int,
        robots: Iterable[Position] = (),
    ) -> State:
        return cls(
            astro=astro,
            robots=tuple(robots),
            invariants=Invariants(goal=goal, rows=rows, cols=cols),
        )

    @classmethod
    def from_layout(cls, layout: Sequence[Sequence[Tile]]) -> State:
        """Create a state from a row-major grid of tiles.

        Exactly one ``Tile.ASTRO`` and one ``Tile.GOAL`` are required.  Robots
        are numbered column by column, top to bottom within each column.
        """
        if not layout or not layout[0]:
            raise BoardError("layout is empty")

        rows = len(layout)
        cols = len(layout[0])
        for y, row in enumerate(layout):
            if len(row) != cols:
                raise BoardError(
                    f"row {y} has {len(row)} cells, expected {cols}"
                )

        astro: Position | None = None
        goal: Position | None = None
        robots: list[Position] = []

        for x in range(cols):
            for y in range(rows):
                pos = Position(x, y)
                tile = layout[y][x]
                if tile == Tile.ASTRO:
                    if astro is not None:
                        raise BoardError("more than one player")
                    astro = pos
                elif tile == Tile.GOAL:
                    if goal is not None:
                        raise BoardError("more than one goal")
                    goal = pos
                elif tile == Tile.ROBOT:
                    robots.append(pos)

        if astro is None:
            raise BoardError("no player")
        if goal is None:
            raise BoardError("no goal")

        return cls.create(astro, goal, rows, cols, robots)

    @classmethod
    def from_text(cls, text: str) -> State:
        """Create a state from text such as::

            R.R.R
            .....
            ..X..
            ....R
            .A...
        """
        layout: list[list[Tile]] = []
        for line in text.splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                layout.append([Tile(ch) for ch in line])
            except ValueError:
                raise BoardError(f"unknown tile in row {line!r}") from None
        return cls.from_layout(layout)

    def to_text(self) -> str:
        rows, cols = self.dims()
        return "\n".join(
            "".join(self.tile_at(Position(x, y)) for x in range(cols))
            for y in range(rows)
        )

    def __str__(self) -> str:
        return self.to_text()

    # -- queries --------------------------------------------------------------

    def dims(self) -> tuple[int, int]:
        """Return ``(rows, cols)``."""
        return self.invariants.rows, self.invariants.cols

    @property
    def goal(self) -> Position:
        return self.invariants.goal

    @property
    def num_robots(self) -> int:
        return len(self.robots)

    def is_at_goal(self) -> bool:
        return self.astro == self.invariants.goal

    def in_bounds(self, pos: Position) -> bool:
        rows, cols = self.dims()
        return 0 <= pos.x < cols and 0 <= pos.y < rows

    def tile_at(self, pos: Position) -> Tile:
        # Actors draw over the goal.
        if pos == self.astro:
            return Tile.ASTRO
        if pos in self.robots:
            return Tile.ROBOT
        if pos == self.invariants.goal:
            return Tile.GOAL
        return Tile.EMPTY

    def selections(self) -> list[Selection]:
        """The astronaut first, then every robot in index order."""
        return [Selection.astro()] + [
            Selection.of_robot(n) for n in range(self.num_robots)
        ]

    def pos_of(self, selection: Selection) -> Position:
        if selection.robot is None:
            return self.astro
        if not 0 <= selection.robot < self.num_robots:
            raise SelectionError(
                f"robot index {selection.robot} out of range "
                f"(state has {self.num_robots} robots)"
            )
        return self.robots[selection.robot]

    # -- transitions ----------------------------------------------------------

    def with_position(self, selection: Selection, pos: Position) -> State:
        """Return a copy of this state with the selected actor at *pos*."""
        if selection.robot is None:
            return replace(self, astro=pos)
        self.pos_of(selection)
        robots = list(self.robots)
        robots[selection.robot] = pos
        return replace(self, robots=tuple(robots))

    @staticmethod
    def pos_changes(states: Sequence[State]) -> list[PosChange]:
        """Return the actor movement between each pair of consecutive states."""
        return [PosChange.between(s, t) for s, t in pairwise(states)]


@dataclass(frozen=True)
class PosChange:
    """The single actor move that turns one state into the next."""

    before: Position
    after: Position

    def __str__(self) -> str:
        return f"{self.before} => {self.after}"

    def __iter__(self) -> Iterator[Position]:
        return iter((self.before, self.after))

    @classmethod
    def between(cls, s: State, t: State) -> PosChange:
        if s.invariants != t.invariants:
            raise InvariantMismatchError("state invariants differ")
        if s.num_robots != t.num_robots:
            raise InvariantMismatchError("number of robots differs")

        # Reports the first difference only.
        if s.astro != t.astro:
            return cls(s.astro, t.astro)
        for s_pos, t_pos in zip(s.robots, t.robots):
            if s_pos != t_pos:
                return cls(s_pos, t_pos)
        raise InvariantMismatchError("start and end states are equal")
