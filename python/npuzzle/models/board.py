"""Board model for the N-puzzle solver."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

MIN_SIZE = 2
MAX_SIZE = 127


class InvalidBoard(ValueError):
    """Raised when a grid cannot form a valid puzzle board."""


class Direction(StrEnum):
    """Direction a *tile* travels into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Blank offsets in neighbour order: left, up, down, right.
# A blank moving left means the tile on its left travels right, and so on.
_BLANK_MOVES: tuple[tuple[int, int, Direction], ...] = (
    (0, -1, Direction.RIGHT),
    (-1, 0, Direction.DOWN),
    (1, 0, Direction.UP),
    (0, 1, Direction.LEFT),
)


@dataclass(frozen=True, order=True)
class Board:
    """Immutable n×n sliding puzzle board.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    Equality, hashing and ordering compare the rows only (row-major).
    """

    tiles: tuple[tuple[int, ...], ...]
    size: int = field(init=False, compare=False, repr=False)
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        rows = _validate(self.tiles)
        object.__setattr__(self, "tiles", rows)
        object.__setattr__(self, "size", len(rows))
        for r, row in enumerate(rows):
            if 0 in row:
                object.__setattr__(self, "blank_pos", (r, row.index(0)))
                break

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Board:
        """Create a board from any iterable of rows."""
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidBoard(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls(
            tuple(tuple(flat[r * size : (r + 1) * size]) for r in range(size))
        )

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (all tiles in order, blank bottom-right)."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def hamming(self) -> int:
        """Number of tiles out of place (the blank is not counted)."""
        n = self.size
        return sum(
            1
            for r, row in enumerate(self.tiles)
            for c, val in enumerate(row)
            if val != 0 and val != r * n + c + 1
        )

    def manhattan(self) -> int:
        """Sum of row and column distances of every tile from its goal cell."""
        n = self.size
        dist = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                dist += abs(r - (val - 1) // n) + abs(c - (val - 1) % n)
        return dist

    def is_goal(self) -> bool:
        return self.hamming() == 0

    # -- derived boards -------------------------------------------------------

    def neighbors(self) -> list[Board]:
        """Boards reachable by one blank slide: left, up, down, right."""
        br, bc = self.blank_pos
        out: list[Board] = []
        for dr, dc, _ in _BLANK_MOVES:
            tr, tc = br + dr, bc + dc
            if 0 <= tr < self.size and 0 <= tc < self.size:
                out.append(self._swap((br, bc), (tr, tc)))
        return out

    def slide(self, direction: Direction) -> Board:
        """Move the tile that travels in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        br, bc = self.blank_pos
        for dr, dc, tile_dir in _BLANK_MOVES:
            if tile_dir != direction:
                continue
            tr, tc = br + dr, bc + dc
            if not (0 <= tr < self.size and 0 <= tc < self.size):
                raise ValueError(
                    f"No tile can move {direction.value} with the blank at {self.blank_pos}."
                )
            return self._swap((br, bc), (tr, tc))
        raise ValueError(f"Unknown direction: {direction!r}")

    def direction_to(self, other: Board) -> Direction:
        """Return the move that turns this board into the adjacent *other*."""
        if other.size == self.size:
            br, bc = self.blank_pos
            delta = (other.blank_pos[0] - br, other.blank_pos[1] - bc)
            for dr, dc, tile_dir in _BLANK_MOVES:
                if (dr, dc) == delta and self.slide(tile_dir) == other:
                    return tile_dir
        raise ValueError("Boards are not one slide apart.")

    def twin(self) -> Board:
        """Swap the first two non-blank tiles in row-major order."""
        cells = [
            (r, c)
            for r, row in enumerate(self.tiles)
            for c, val in enumerate(row)
            if val != 0
        ]
        return self._swap(cells[0], cells[1])

    def _swap(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        # Swapping two cells of a valid board keeps it valid: only the
        # touched rows are rebuilt and validation is skipped.
        (ar, ac), (br, bc) = a, b
        rows = list(self.tiles)
        row_a = list(rows[ar])
        if ar == br:
            row_a[ac], row_a[bc] = row_a[bc], row_a[ac]
            rows[ar] = tuple(row_a)
        else:
            row_b = list(rows[br])
            row_a[ac], row_b[bc] = row_b[bc], row_a[ac]
            rows[ar], rows[br] = tuple(row_a), tuple(row_b)

        blank_pos = self.blank_pos
        if blank_pos == a:
            blank_pos = b
        elif blank_pos == b:
            blank_pos = a
        return Board._unchecked(tuple(rows), self.size, blank_pos)

    @classmethod
    def _unchecked(
        cls,
        tiles: tuple[tuple[int, ...], ...],
        size: int,
        blank_pos: tuple[int, int],
    ) -> Board:
        """Build a board derived from a valid one without re-validating it."""
        board = object.__new__(cls)
        object.__setattr__(board, "tiles", tiles)
        object.__setattr__(board, "size", size)
        object.__setattr__(board, "blank_pos", blank_pos)
        return board

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        lines = [str(self.size)]
        lines.extend("".join(f"{val:3}" for val in row) for row in self.tiles)
        return "\n".join(lines) + "\n"


def _validate(tiles: Iterable[Iterable[int]]) -> tuple[tuple[int, ...], ...]:
    try:
        rows = tuple(tuple(row) for row in tiles)
    except TypeError as exc:
        raise InvalidBoard(f"Tiles must be a sequence of rows: {exc}") from exc

    n = len(rows)
    if not MIN_SIZE <= n <= MAX_SIZE:
        raise InvalidBoard(
            f"Board dimension must be between {MIN_SIZE} and {MAX_SIZE}, got {n}."
        )
    for r, row in enumerate(rows):
        if len(row) != n:
            raise InvalidBoard(
                f"Board is not square: row {r} has {len(row)} tiles, expected {n}."
            )

    labels = [val for row in rows for val in row]
    bad = [val for val in labels if type(val) is not int]
    if bad:
        raise InvalidBoard(f"Tile labels must be integers, got {bad[0]!r}.")

    expected = set(range(n * n))
    seen: set[int] = set()
    duplicates: set[int] = set()
    for val in labels:
        if val in seen:
            duplicates.add(val)
        seen.add(val)
    out_of_range = seen - expected
    missing = expected - seen
    if duplicates or out_of_range or missing:
        problems: list[str] = []
        if out_of_range:
            problems.append(f"out of range {sorted(out_of_range)}")
        if duplicates:
            problems.append(f"duplicated {sorted(duplicates)}")
        if missing:
            problems.append(f"missing {sorted(missing)}")
        raise InvalidBoard(
            f"Labels must be exactly 0..{n * n - 1}: " + ", ".join(problems) + "."
        )
    return rows
