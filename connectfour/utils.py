"""
utils.py - Shared constants and enumerations for the Connect Four engine

This module provides the player identities, the default game dimensions and
the direction vectors used when scanning the board for winning lines.
"""

from enum import Enum, auto
from typing import Dict, Tuple

# Default game parameters
DEFAULT_COLUMNS = 7
DEFAULT_ROWS = 6
DEFAULT_WIN_THRESHOLD = 4

# Grid value of an empty cell
EMPTY = 0


class Player(Enum):
    """The two players. The value is what the board stores for their tokens."""
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        return Player.ONE

    @classmethod
    def from_cell(cls, value: int):
        """Map a raw grid value back to a player, or None for an empty cell."""
        if value == EMPTY:
            return None
        return cls(int(value))

    @property
    def symbol(self) -> str:
        return "X" if self == Player.ONE else "O"

    def __str__(self):
        return "1" if self == Player.ONE else "2"


class Axis(Enum):
    """The four undirected lines along which a win is checked."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right


# One (column, row) step along each axis; the opposite direction is the negation.
# Row 0 is the bottom of the board.
AXIS_VECTORS: Dict[Axis, Tuple[int, int]] = {
    Axis.HORIZONTAL: (1, 0),
    Axis.VERTICAL: (0, 1),
    Axis.DIAGONAL_UP: (1, 1),
    Axis.DIAGONAL_DOWN: (1, -1),
}
