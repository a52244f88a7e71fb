"""Puzzle text files.

A puzzle file holds one board row per line, tiles separated by whitespace::

    3
     0  1  3
     4  2  5
     7  8  6

Lines with fewer than two tokens, such as the leading dimension line, are
skipped.
"""

from __future__ import annotations

from pathlib import Path

from npuzzle.models.board import Board, InvalidBoard


def parse_grid(text: str) -> list[list[int]]:
    """Return the rows of integers found in *text*."""
    grid: list[list[int]] = []
    for lineno, line in enumerate(text.splitlines(), 1):
        tokens = line.split()
        if len(tokens) < 2:
            continue
        row: list[int] = []
        for token in tokens:
            if not (token.isascii() and token.isdigit()):
                raise InvalidBoard(
                    f"Line {lineno}: expected a non-negative integer, got {token!r}."
                )
            row.append(int(token))
        grid.append(row)
    return grid


def parse_board(text: str) -> Board:
    return Board.from_rows(parse_grid(text))


def read_board(path: Path) -> Board:
    """Read and validate the board stored at *path*."""
    raw = Path(path).read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidBoard(
            f"Not a text puzzle file: byte {exc.start} is not valid UTF-8."
        ) from exc
    return parse_board(text)


def format_board(board: Board) -> str:
    return str(board)


def write_board(board: Board, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_board(board), encoding="utf-8")
