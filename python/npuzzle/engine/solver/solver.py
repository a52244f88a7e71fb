"""Sliding puzzle solver."""

from __future__ import annotations

import logging

from npuzzle.engine.search import Puzzle
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


class Solver:
    """Decide solvability and find a shortest solution for *initial*.

    Boards split into two classes: those that reach the goal, and those that
    reach it once any pair of tiles is swapped. The solver runs A* on the
    initial board and on its twin in lockstep, one expansion each in turn
    starting with the initial board. Exactly one of the two reaches the goal;
    if it is the twin, the initial board is unsolvable.

    The whole search runs inside the constructor.
    """

    def __init__(self, initial: Board) -> None:
        self.initial = initial
        self.puzzle = Puzzle(initial)
        self.twin_puzzle = Puzzle(initial.twin())
        self._solution: list[Board] = []

        while not (self.puzzle.exhausted and self.twin_puzzle.exhausted):
            if self.puzzle.step() is not None:
                self._solution = self.puzzle.reconstruct_path()
                break
            if self.twin_puzzle.step() is not None:
                break

        if self._solution:
            logger.info(
                "Solved %d×%d board in %d moves (%d expansions).",
                initial.size, initial.size, self.moves(), self.expanded,
            )
        else:
            logger.info(
                "Board is unsolvable: twin reached the goal (%d expansions).",
                self.expanded,
            )

    # -- queries --------------------------------------------------------------

    @property
    def expanded(self) -> int:
        """Nodes popped by both engines together."""
        return self.puzzle.expanded + self.twin_puzzle.expanded

    def is_solvable(self) -> bool:
        return bool(self._solution)

    def moves(self) -> int:
        """Minimum number of moves to solve the initial board; -1 if unsolvable."""
        if not self._solution:
            return -1
        return len(self._solution) - 1

    def solution(self) -> list[Board] | None:
        """Boards of a shortest solution, initial first; ``None`` if unsolvable."""
        if not self._solution:
            return None
        return list(self._solution)

    def directions(self) -> list[Direction]:
        """The solution as tile moves; ``[]`` if unsolvable or already solved."""
        return [
            prev.direction_to(nxt)
            for prev, nxt in zip(self._solution, self._solution[1:])
        ]
