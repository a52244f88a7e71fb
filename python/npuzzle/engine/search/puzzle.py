"""Single A* search engine over one starting board."""

from __future__ import annotations

import logging

from npuzzle.engine.arena import NodeArena
from npuzzle.engine.search.frontier import Frontier, FrontierEntry
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


class Puzzle:
    """Owns one node arena and one frontier; expands a node per :meth:`step`.

    The engine moves from searching to solved exactly once. After the goal
    has been popped, further steps return the goal handle without work.
    """

    def __init__(self, initial: Board) -> None:
        self.initial = initial
        self.arena = NodeArena()
        self.frontier = Frontier()
        self.goal_handle: int | None = None
        self.expanded = 0

        root = self.arena.push(initial, parent=None, moves=0)
        self.frontier.push(
            FrontierEntry(priority=initial.manhattan(), handle=root, moves=0)
        )

    # -- queries --------------------------------------------------------------

    @property
    def solved(self) -> bool:
        return self.goal_handle is not None

    @property
    def exhausted(self) -> bool:
        """True when the frontier ran dry without reaching the goal."""
        return not self.solved and not self.frontier

    # -- search ---------------------------------------------------------------

    def step(self) -> int | None:
        """Pop the cheapest node and expand it.

        Returns the node's handle if it holds the goal board, else ``None``
        (including when there is nothing left to pop).
        """
        if self.goal_handle is not None:
            return self.goal_handle
        if not self.frontier:
            return None

        entry = self.frontier.pop()
        self.expanded += 1
        node = self.arena[entry.handle]

        if node.board.is_goal():
            self.goal_handle = entry.handle
            logger.debug(
                "Goal reached in %d moves after %d expansions (%d nodes stored).",
                entry.moves, self.expanded, len(self.arena),
            )
            return entry.handle

        moves = entry.moves + 1
        for neighbor in node.board.neighbors():
            # Never slide the same tile straight back to where it came from.
            if self.arena.is_parent(entry.handle, neighbor):
                continue
            handle = self.arena.push(neighbor, parent=entry.handle, moves=moves)
            self.frontier.push(
                FrontierEntry(
                    priority=moves + neighbor.manhattan(),
                    handle=handle,
                    moves=moves,
                )
            )
        return None

    def reconstruct_path(self) -> list[Board]:
        """Boards from the initial board to the goal; empty if unsolved."""
        if self.goal_handle is None:
            return []
        return self.arena.reconstruct_path(self.goal_handle)
