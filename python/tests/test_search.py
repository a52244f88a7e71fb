"""Search engine tests — node arena, frontier ordering, and single steps."""

from __future__ import annotations

import pytest

from npuzzle.engine.arena import NodeArena
from npuzzle.engine.search import Frontier, FrontierEntry, Puzzle
from npuzzle.models.board import Board

CORNER = Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])


# -- arena --------------------------------------------------------------------


def test_arena_hands_out_sequential_handles() -> None:
    arena = NodeArena()
    root = arena.push(CORNER)
    child = arena.push(CORNER.neighbors()[0], parent=root, moves=1)

    assert (root, child) == (0, 1)
    assert len(arena) == 2
    assert arena.get(child).parent == root
    assert arena[child].moves == 1


def test_arena_reconstructs_root_first() -> None:
    arena = NodeArena()
    boards = [CORNER]
    for _ in range(3):
        boards.append(boards[-1].neighbors()[-1])

    handle = None
    for moves, board in enumerate(boards):
        handle = arena.push(board, parent=handle, moves=moves)

    assert arena.reconstruct_path(handle) == boards
    assert arena.reconstruct_path(0) == [CORNER]


def test_arena_is_parent() -> None:
    arena = NodeArena()
    root = arena.push(CORNER)
    child_board = CORNER.neighbors()[0]
    child = arena.push(child_board, parent=root, moves=1)

    assert not arena.is_parent(root, CORNER)
    assert arena.is_parent(child, CORNER)
    assert not arena.is_parent(child, child_board)


# -- frontier -----------------------------------------------------------------


def test_frontier_pops_lowest_priority_first() -> None:
    frontier = Frontier()
    for entry in (
        FrontierEntry(priority=7, handle=0, moves=0),
        FrontierEntry(priority=3, handle=1, moves=1),
        FrontierEntry(priority=5, handle=2, moves=1),
    ):
        frontier.push(entry)

    assert len(frontier) == 3
    assert frontier.peek().handle == 1
    assert [frontier.pop().priority for _ in range(3)] == [3, 5, 7]
    assert not frontier


def test_frontier_breaks_ties_by_insertion_handle() -> None:
    frontier = Frontier()
    frontier.push(FrontierEntry(priority=4, handle=9, moves=2))
    frontier.push(FrontierEntry(priority=4, handle=2, moves=3))
    frontier.push(FrontierEntry(priority=4, handle=5, moves=1))

    assert [frontier.pop().handle for _ in range(3)] == [2, 5, 9]


def test_empty_frontier_pop_raises() -> None:
    with pytest.raises(IndexError):
        Frontier().pop()


def test_entries_are_totally_ordered() -> None:
    a = FrontierEntry(priority=4, handle=1, moves=2)
    b = FrontierEntry(priority=4, handle=1, moves=3)

    assert a < b
    assert a != b
    assert a == FrontierEntry(priority=4, handle=1, moves=2)


# -- puzzle engine ------------------------------------------------------------


def test_new_engine_seeds_root() -> None:
    puzzle = Puzzle(CORNER)

    assert len(puzzle.arena) == 1
    assert puzzle.frontier.peek() == FrontierEntry(
        priority=CORNER.manhattan(), handle=0, moves=0
    )
    assert not puzzle.solved
    assert not puzzle.exhausted


def test_step_on_goal_returns_root() -> None:
    puzzle = Puzzle(Board.goal(3))

    assert puzzle.step() == 0
    assert puzzle.solved
    assert puzzle.step() == 0
    assert puzzle.expanded == 1
    assert puzzle.reconstruct_path() == [Board.goal(3)]


def test_step_expands_every_neighbor_of_root() -> None:
    puzzle = Puzzle(CORNER)

    assert puzzle.step() is None
    assert len(puzzle.arena) == 1 + len(CORNER.neighbors())
    assert all(puzzle.arena[h].moves == 1 for h in (1, 2))
    assert all(puzzle.arena[h].parent == 0 for h in (1, 2))


def test_step_never_undoes_the_previous_slide() -> None:
    puzzle = Puzzle(CORNER)
    puzzle.step()
    before = len(puzzle.arena)

    # The cheapest child is popped next; its parent board is not re-queued.
    child = puzzle.frontier.peek().handle
    child_board = puzzle.arena[child].board
    puzzle.step()

    added = [puzzle.arena[h].board for h in range(before, len(puzzle.arena))]
    assert CORNER not in added
    assert len(added) == len(child_board.neighbors()) - 1


def test_priorities_add_moves_and_manhattan() -> None:
    puzzle = Puzzle(CORNER)
    puzzle.step()

    while puzzle.frontier:
        entry = puzzle.frontier.pop()
        board = puzzle.arena[entry.handle].board
        assert entry.priority == entry.moves + board.manhattan()


def test_engine_reaches_goal_along_optimal_path() -> None:
    puzzle = Puzzle(CORNER)
    handle = None
    while handle is None:
        handle = puzzle.step()

    path = puzzle.reconstruct_path()
    assert puzzle.arena[handle].moves == 4
    assert path[0] == CORNER
    assert path[-1].is_goal()
    assert len(path) == 5


def test_unsolved_engine_has_no_path() -> None:
    assert Puzzle(CORNER).reconstruct_path() == []
