#!/usr/bin/env python3
"""Astro and Robots.

Usage::

    python main.py                  # random 5×5 puzzle
    python main.py -r 6 -c 8        # random 6-row, 8-column puzzle
    python main.py --default        # the built-in puzzle
    python main.py --seed 7 --solve # print the solution and exit
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from astrobots.engine.gamegenerator import GameGenerator  # noqa: E402
from astrobots.models.board import DEFAULT_LAYOUT, State  # noqa: E402
from astrobots.models.errors import AstrobotsError  # noqa: E402

MIN_DIMENSION = 4
MAX_DIMENSION = 10
DEFAULT_DIMENSION = 5


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    rows: int = typer.Option(
        DEFAULT_DIMENSION, "-r", "--rows",
        min=MIN_DIMENSION, max=MAX_DIMENSION,
        help="Number of rows in grid.",
    ),
    cols: int = typer.Option(
        DEFAULT_DIMENSION, "-c", "--cols",
        min=MIN_DIMENSION, max=MAX_DIMENSION,
        help="Number of columns in grid.",
    ),
    default: bool = typer.Option(
        False, "--default",
        help="Use the predefined default instead of randomly-generating the grid.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for puzzle generation.",
    ),
    solve: bool = typer.Option(
        False, "--solve",
        help="Print a shortest solution and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log solver and generator progress.",
    ),
) -> None:
    """Astro and Robots — slide the astronaut onto the goal."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    from astrobots_cli import app as frontend

    try:
        if default:
            initial = State.from_text(DEFAULT_LAYOUT)
        else:
            initial = GameGenerator.generate(rows, cols, rng=random.Random(seed))

        if solve:
            frontend.print_solution(initial)
        else:
            frontend.run(initial)
    except AstrobotsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
