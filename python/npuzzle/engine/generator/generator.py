"""Generates puzzle boards for the solver."""

from __future__ import annotations

import random

from npuzzle.models.board import Board


class BoardGenerator:
    """Creates solvable puzzles by scrambling from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random) -> Board:
        """Return *board* after *moves* random slides with no immediate backtrack.

        The walk runs on a flat row-major tile list; *rng* picks the cell the
        blank moves to at each slide.
        """
        size = board.size
        flat = [val for row in board.tiles for val in row]
        blank = flat.index(0)
        prev: int | None = None

        for _ in range(moves):
            neighbors = BoardGenerator._get_neighbors(blank, size)
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            target = rng.choice(neighbors)
            flat[blank], flat[target] = flat[target], 0
            prev, blank = blank, target

        return Board.from_flat(size, flat)

    @staticmethod
    def generate(
        size: int, moves: int | None = None, seed: int | None = None
    ) -> Board:
        """Return a random *solvable* board of the given size.

        The same *seed* always yields the same board.
        """
        if moves is None:
            moves = size * size * 100
        rng = random.Random(seed)
        goal = BoardGenerator.solved(size)
        board = BoardGenerator.scramble(goal, moves, rng)

        # Walks can loop back to the goal (every 2x2 walk of 12 slides does);
        # one more slide always leaves it.
        if moves > 0 and board == goal:
            board = rng.choice(board.neighbors())

        return board

    @staticmethod
    def unsolvable(board: Board) -> Board:
        """Return a board in the opposite solvability class from *board*."""
        return board.twin()

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _get_neighbors(index: int, size: int) -> list[int]:
        """Flat indices of the cells next to *index*: left, up, down, right."""
        r, c = divmod(index, size)
        neighbors: list[int] = []
        if c > 0:
            neighbors.append(index - 1)
        if r > 0:
            neighbors.append(index - size)
        if r < size - 1:
            neighbors.append(index + size)
        if c < size - 1:
            neighbors.append(index + 1)
        return neighbors
