#!/usr/bin/env python3
"""N-Puzzle Solver.

Usage::

    python main.py solve puzzle.txt             # plain output
    python main.py solve puzzle.txt -f rich     # Rich terminal
    python main.py generate 3 --seed 7          # random solvable 3×3
    python main.py generate 4 --unsolvable -o hard.txt
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn, Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle.engine.generator import BoardGenerator  # noqa: E402
from npuzzle.engine.solver import Solver  # noqa: E402
from npuzzle.io import format_board, read_board, write_board  # noqa: E402
from npuzzle.models.board import MAX_SIZE, MIN_SIZE, InvalidBoard  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def solve(
    path: Path = typer.Argument(..., help="Puzzle file: one row of tiles per line."),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the outcome.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Find a shortest solution for the board in PATH."""
    _configure_logging(verbose)
    try:
        board = read_board(path)
    except InvalidBoard as exc:
        _fail(f"{path}: {exc}")
    except OSError as exc:
        _fail(f"cannot read {path}: {exc.strerror or exc}")

    solver = Solver(board)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(solver)


@app.command()
def generate(
    size: int = typer.Argument(
        ..., min=MIN_SIZE, max=MAX_SIZE, help="Board dimension."
    ),
    moves: Optional[int] = typer.Option(
        None, "-m", "--moves",
        min=0,
        help="Random slides away from the goal (default: size² × 100).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible board.",
    ),
    unsolvable: bool = typer.Option(
        False, "--unsolvable",
        help="Emit a board that has no solution.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output",
        help="Write to this file instead of stdout.",
    ),
) -> None:
    """Write a random puzzle file."""
    board = BoardGenerator.generate(size, moves=moves, seed=seed)
    if unsolvable:
        board = BoardGenerator.unsolvable(board)

    if output is None:
        typer.echo(format_board(board), nl=False)
    else:
        write_board(board, output)


if __name__ == "__main__":
    app()
