"""
Reversi board representation.

Tile encoding: int
  - 0: empty
  - +1: X
  - -1: O

The board is a fixed 8x8 grid with no knowledge of turns or legality.
"""

from enum import IntEnum
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

BOARD_SIZE = 8
EMPTY = 0
TILE_VALUES = frozenset((EMPTY, 1, -1))


class Piece(IntEnum):
    """Disc owner. X moves first."""
    X = 1
    O = -1

    def opposite(self) -> "Piece":
        return Piece(-self.value)

    def __str__(self) -> str:
        return self.name


class Position(NamedTuple):
    """Zero-based (row, col) tile coordinate."""
    row: int
    col: int


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Board:
    """Mutable 8x8 grid of tiles, stored row by row."""

    def __init__(self, tiles: Optional[List[List[int]]] = None):
        if tiles is None:
            tiles = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        if len(tiles) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in tiles):
            raise ValueError(f"expected {BOARD_SIZE} rows of {BOARD_SIZE} tiles")
        if any(v not in TILE_VALUES for row in tiles for v in row):
            raise ValueError(f"tile values must be one of {sorted(TILE_VALUES)}")
        self._tiles = [list(row) for row in tiles]

    @classmethod
    def from_strings(cls, lines: List[str]) -> "Board":
        """
        Build a board from 8 strings of 8 characters each.

        'X'/'x' and 'O'/'o' are pieces, anything else is an empty tile.
        """
        if len(lines) != BOARD_SIZE or any(len(line) != BOARD_SIZE for line in lines):
            raise ValueError(f"expected {BOARD_SIZE} lines of {BOARD_SIZE} characters")
        codes = {'X': int(Piece.X), 'O': int(Piece.O)}
        return cls([[codes.get(ch.upper(), EMPTY) for ch in line] for line in lines])

    def _check(self, pos: Tuple[int, int]) -> None:
        row, col = pos
        if not in_bounds(row, col):
            raise IndexError(f"position {tuple(pos)} is outside the {BOARD_SIZE}x{BOARD_SIZE} board")

    def tile(self, pos: Tuple[int, int]) -> Optional[Piece]:
        """Return the piece on ``pos`` or None if the tile is empty."""
        self._check(pos)
        v = self._tiles[pos[0]][pos[1]]
        return Piece(v) if v != EMPTY else None

    def place(self, pos: Tuple[int, int], piece: Piece) -> None:
        """Overwrite the tile at ``pos`` with ``piece``."""
        self._check(pos)
        self._tiles[pos[0]][pos[1]] = int(piece)

    def raw(self, row: int, col: int) -> int:
        """Unchecked integer access for the hot loops in the rules code."""
        return self._tiles[row][col]

    def is_full(self) -> bool:
        return all(v != EMPTY for row in self._tiles for v in row)

    def row_count(self) -> int:
        return len(self._tiles)

    def col_count(self) -> int:
        return len(self._tiles[0])

    def rows(self) -> List[List[Optional[Piece]]]:
        """Snapshot of the grid as rows of Optional[Piece]."""
        return [[Piece(v) if v != EMPTY else None for v in row] for row in self._tiles]

    def count(self, piece: Piece) -> int:
        return sum(row.count(int(piece)) for row in self._tiles)

    def empty_positions(self) -> List[Position]:
        """Empty tiles in row-major order."""
        return [
            Position(r, c)
            for r, row in enumerate(self._tiles)
            for c, v in enumerate(row)
            if v == EMPTY
        ]

    def to_array(self) -> np.ndarray:
        """[8, 8] int8 array of +1/-1/0."""
        return np.array(self._tiles, dtype=np.int8)

    def copy(self) -> "Board":
        # Already validated: skip the constructor checks on the search path
        other = Board.__new__(Board)
        other._tiles = [row[:] for row in self._tiles]
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        symbols = {EMPTY: '.', 1: 'X', -1: 'O'}
        body = "/".join("".join(symbols[v] for v in row) for row in self._tiles)
        return f"Board({body})"
