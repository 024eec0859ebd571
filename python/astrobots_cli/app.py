"""Rich terminal frontend — board table, walkthrough list and key loop.

Everything here is presentation.  Moves, undo, selection and the solution
walkthrough all live in :class:`~astrobots.engine.gameplay.GamePlay`.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from astrobots.engine.gameplay import GamePlay, Mode
from astrobots.engine.walkthrough import SolutionWalkthrough
from astrobots.models.board import State, Tile
from astrobots.models.position import Direction, Position
from astrobots_cli.input_handler import get_key

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_TILE_STYLE = {
    Tile.EMPTY: "dim",
    Tile.ASTRO: "bold white",
    Tile.ROBOT: "bold cyan",
    Tile.GOAL: "bold yellow",
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- board rendering ----------------------------------------------------------


def _render_board(
    state: State,
    highlight: Position | None = None,
    highlight_style: str = "bold red",
    astro_style: str | None = None,
) -> Table:
    """Return a Rich Table of *state*, one cell per tile."""
    rows, cols = state.dims()
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(cols):
        table.add_column(width=1, justify="center")

    for y in range(rows):
        cells: list[Text] = []
        for x in range(cols):
            pos = Position(x, y)
            tile = state.tile_at(pos)
            if astro_style is not None and tile == Tile.ASTRO:
                style = astro_style
            elif pos == highlight:
                style = highlight_style
            else:
                style = _TILE_STYLE[tile]
            cells.append(Text(str(tile), style=style))
        table.add_row(*cells)

    return table


def _render_walkthrough(walkthrough: SolutionWalkthrough) -> Group:
    """Step list followed by the board at the current step."""
    labels = ["STARTING POSITION"] + [
        str(change) for change in walkthrough.position_changes()
    ]
    steps = Text()
    for i, label in enumerate(labels):
        style = "bold green" if i == walkthrough.current_step else "dim"
        steps.append(f"{label}\n", style=style)

    last = walkthrough.last_change()
    board = _render_board(
        walkthrough.state, highlight=last.after if last is not None else None
    )
    return Group(Align.center(steps), Align.center(board))


# -- screens ------------------------------------------------------------------


def _controls(mode: Mode) -> Text:
    controls = Text()
    if mode == Mode.WALKTHROUGH:
        bindings = [("Z/X", "step"), ("T", "play"), ("R", "restart"), ("Q", "quit")]
    else:
        bindings = [
            ("↑↓←→/WASD", "move"),
            ("Z/X", "select"),
            ("U", "undo"),
            ("N", "hint"),
            ("T", "walkthrough"),
            ("R", "restart"),
            ("Q", "quit"),
        ]
    for key, label in bindings:
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")
    return controls


def _draw(game: GamePlay, status: str = "") -> None:
    console.clear()
    rows, cols = game.current.dims()

    if game.mode == Mode.WALKTHROUGH:
        body = _render_walkthrough(game.walkthrough)
        title = f"[bold yellow]Walkthrough  {rows}×{cols}[/bold yellow]"
        border = "yellow"
    else:
        over = game.mode == Mode.GAME_OVER
        body = Align.center(
            _render_board(
                game.current,
                highlight=game.selected_pos,
                astro_style="bold green" if over else None,
            )
        )
        title = f"[bold cyan]Astro and Robots  {rows}×{cols}[/bold cyan]"
        border = "bold green" if over else "bright_blue"

    panel = Panel(body, title=title, border_style=border, padding=(1, 2))

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Best: ", style="dim")
    stats.append(str(len(game.walkthrough) - 1), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    stats.append("    Selected: ", style="dim")
    stats.append(str(game.selected), style="bold red")

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if game.mode == Mode.GAME_OVER:
        console.print(
            Align.center(Text("★ The astronaut made it! ★", style="bold green"))
        )
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls(game.mode)))


# -- game loop ----------------------------------------------------------------


def _handle(game: GamePlay, key: str) -> str:
    """Apply one action to *game* and return a status line."""
    if key in _DIRECTIONS:
        if game.mode == Mode.PLAYABLE and not game.move(_DIRECTIONS[key]):
            return f"[yellow]{game.selected} cannot move {key}.[/yellow]"
    elif key == "prev":
        if game.mode == Mode.WALKTHROUGH:
            game.walkthrough_prev()
        elif game.mode == Mode.PLAYABLE:
            game.select_prev()
    elif key == "next":
        if game.mode == Mode.WALKTHROUGH:
            game.walkthrough_next()
        elif game.mode == Mode.PLAYABLE:
            game.select_next()
    elif key == "undo":
        game.undo()
    elif key == "restart":
        game.restart()
    elif key == "toggle":
        game.toggle_mode()
    elif key == "hint":
        if game.hint() is not None:
            return "[cyan]Hint:[/cyan] played the next solution move"
    return ""


def run(initial: State) -> None:
    """Play *initial* interactively until the user quits."""
    game = GamePlay(initial)
    status = ""

    while True:
        _draw(game, status)
        key = get_key()
        if key == "quit":
            console.clear()
            return
        status = _handle(game, key)


def print_solution(initial: State) -> None:
    """Print the starting board and every move of a shortest solution."""
    game = GamePlay(initial)
    walkthrough = game.walkthrough

    table = Table(box=rich.box.ROUNDED, border_style="dim")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Move", style="bold")
    for i, change in enumerate(walkthrough.position_changes(), 1):
        table.add_row(str(i), str(change))

    console.print(Align.center(_render_board(initial)))
    console.print(Align.center(table))
    console.print(
        Align.center(
            Text(f"Solved in {len(walkthrough) - 1} moves.", style="bold green")
        )
    )
