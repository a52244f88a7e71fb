"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output of a solver outcome while
sharing the same backend as the vanilla frontend.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board, Direction

_ARROWS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _step_panel(board: Board, index: int, total: int, move: Direction | None) -> Panel:
    title = Text()
    title.append(f"Step {index}/{total}", style="bold cyan")
    if move is not None:
        title.append(f"  {_ARROWS[move]} {move.value}", style="dim")
    return Panel(
        Align.center(_render_board(board)),
        title=title,
        border_style="bright_blue",
        padding=(0, 1),
    )


# -- outcome screens ----------------------------------------------------------


def _draw_unsolvable(console: Console, solver: Solver) -> None:
    size = solver.initial.size
    body = Group(
        Align.center(_render_board(solver.initial)),
        Text(""),
        Align.center(Text("No solution possible", style="bold red")),
    )
    console.print(
        Panel(
            body,
            title=f"[bold red]Unsolvable  {size}×{size}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    )


def _draw_solution(console: Console, solver: Solver) -> None:
    boards = solver.solution() or []
    moves = [None, *solver.directions()]
    total = solver.moves()

    summary = Text()
    summary.append("Minimum number of moves = ", style="dim")
    summary.append(str(total), style="bold yellow")
    summary.append(f"    expanded {solver.expanded} nodes", style="dim")
    console.print(summary)

    for i, (board, move) in enumerate(zip(boards, moves)):
        console.print(_step_panel(board, i, total, move))


# -- public entry point -------------------------------------------------------


def run(solver: Solver, console: Console | None = None) -> None:
    """Print the outcome of *solver* with Rich styling."""
    console = console or Console()
    if solver.is_solvable():
        _draw_solution(console, solver)
    else:
        _draw_unsolvable(console, solver)
