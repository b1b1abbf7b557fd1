"""
Coordinate text form: a column letter A-H and a row digit 1-8, in either
order and any case ("E3", "3e").
"""

from typing import Tuple

from .board import BOARD_SIZE, Position

COLUMNS = "ABCDEFGH"[:BOARD_SIZE]
ROWS = "12345678"[:BOARD_SIZE]


class NotationError(ValueError):
    """Raised for text that is not a board coordinate."""


def parse_position(text: str) -> Position:
    """Parse ``text`` into a zero-based Position."""
    s = text.strip().upper()
    if len(s) == 2:
        a, b = s
        if a in COLUMNS and b in ROWS:
            return Position(ROWS.index(b), COLUMNS.index(a))
        if a in ROWS and b in COLUMNS:
            return Position(ROWS.index(a), COLUMNS.index(b))
    raise NotationError(f"invalid coordinate {text.strip()!r}, expected something like 'A1'")


def format_position(pos: Tuple[int, int]) -> str:
    row, col = pos
    return f"{COLUMNS[col]}{ROWS[row]}"
