"""Vanilla terminal frontend — no third-party dependencies.

Prints a solver outcome with plain ``print`` calls, one board per block in
the same layout puzzle files use.
"""

from __future__ import annotations

from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board


# -- rendering ----------------------------------------------------------------


def render_board(board: Board) -> str:
    """Return the dimension line followed by the right-justified rows."""
    return str(board)


def render_outcome(solver: Solver) -> str:
    if not solver.is_solvable():
        return "No solution possible\n"

    lines = [f"Minimum number of moves = {solver.moves()}", ""]
    for board in solver.solution() or []:
        lines.append(render_board(board))
    return "\n".join(lines)


# -- public entry point -------------------------------------------------------


def run(solver: Solver) -> None:
    """Print the outcome of *solver* to stdout."""
    print(render_outcome(solver), end="")
