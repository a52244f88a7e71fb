"""Append-only store of explored search nodes."""

from __future__ import annotations

from dataclasses import dataclass

from npuzzle.models.board import Board


@dataclass(frozen=True)
class SearchNode:
    board: Board
    parent: int | None  # handle of the parent node, None for the root
    moves: int


class NodeArena:
    """Search nodes addressed by integer handle.

    Handles are list indices: they are handed out in insertion order and
    stay valid for the lifetime of the arena, which never shrinks.
    """

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, handle: int) -> SearchNode:
        return self._nodes[handle]

    def push(self, board: Board, parent: int | None = None, moves: int = 0) -> int:
        """Store a node and return its handle."""
        self._nodes.append(SearchNode(board=board, parent=parent, moves=moves))
        return len(self._nodes) - 1

    def get(self, handle: int) -> SearchNode:
        return self._nodes[handle]

    def is_parent(self, handle: int, board: Board) -> bool:
        """Check whether the node at *handle* was reached from *board*."""
        parent = self._nodes[handle].parent
        if parent is None:
            return False
        return self._nodes[parent].board == board

    def reconstruct_path(self, goal_handle: int) -> list[Board]:
        """Walk parent handles back to the root; return boards root first."""
        path: list[Board] = []
        handle: int | None = goal_handle
        while handle is not None:
            node = self._nodes[handle]
            path.append(node.board)
            handle = node.parent
        path.reverse()
        return path
