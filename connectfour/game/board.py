"""
board.py - Board representation for Connect Four

This module implements the BoardState class which owns the grid of cells.
Tokens obey gravity: row 0 is the bottom of the board and every column is
filled from the bottom up, so the occupied cells of a column always form a
contiguous run starting at row 0.
"""

import numpy as np
from typing import List, Optional

from connectfour.debug import debug
from connectfour.errors import ColumnFullError, OutOfRangeError
from connectfour.utils import EMPTY, Player


class BoardState:
    """
    A ``columns x rows`` Connect Four grid.

    Cells are addressed as ``(column, row)``. The only mutation is ``place``,
    which drops a token onto the top of a column, and ``clear``.
    """

    def __init__(self, columns: int, rows: int):
        if columns < 1 or rows < 1:
            raise OutOfRangeError(f"Board dimensions must be positive, got {columns}x{rows}")
        self._columns = columns
        self._rows = rows
        self.grid = np.zeros((rows, columns), dtype=np.int8)
        # Number of tokens in each column; the next free row of a column.
        self._heights = np.zeros(columns, dtype=np.int32)
        debug.trace(f"Initialized {columns}x{rows} board", "board")

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self._columns:
            raise OutOfRangeError(
                f"Column {column} out of range (0-{self._columns - 1})")

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise OutOfRangeError(f"Row {row} out of range (0-{self._rows - 1})")

    def in_bounds(self, column: int, row: int) -> bool:
        """Check if a position is within the board boundaries."""
        return 0 <= column < self._columns and 0 <= row < self._rows

    def top_empty_row(self, column: int) -> Optional[int]:
        """
        Get the row a token dropped into ``column`` would land in.

        Returns:
            The lowest empty row, or None if the column is full
        """
        self._check_column(column)
        height = int(self._heights[column])
        return height if height < self._rows else None

    def is_column_full(self, column: int) -> bool:
        return self.top_empty_row(column) is None

    def available_columns(self) -> List[int]:
        """Get the columns that still have an empty cell, in ascending order."""
        return [col for col in range(self._columns) if self._heights[col] < self._rows]

    def is_full(self) -> bool:
        return not self.available_columns()

    def get(self, column: int, row: int) -> Optional[Player]:
        """
        Get the occupant of a cell.

        Returns:
            The player whose token fills the cell, or None if it is empty

        Raises:
            OutOfRangeError: If the position is outside the board
        """
        self._check_column(column)
        self._check_row(row)
        return Player.from_cell(self.grid[row, column])

    def place(self, column: int, player: Player) -> int:
        """
        Drop a token for ``player`` into ``column``.

        Returns:
            The row the token landed in

        Raises:
            OutOfRangeError: If the column is outside the board
            ColumnFullError: If the column has no empty cell
        """
        row = self.top_empty_row(column)
        if row is None:
            raise ColumnFullError(f"Column {column} is full")

        self.grid[row, column] = player.value
        self._heights[column] += 1
        debug.trace(f"Placed {player.symbol} at ({column}, {row})", "board")
        return row

    def clear(self) -> None:
        """Reset every cell to empty."""
        self.grid.fill(EMPTY)
        self._heights.fill(0)
        debug.trace("Cleared board", "board")

    def copy(self) -> 'BoardState':
        """Create an independent snapshot of the board."""
        new_board = BoardState(self._columns, self._rows)
        new_board.grid = self.grid.copy()
        new_board._heights = self._heights.copy()
        return new_board

    def get_state(self) -> np.ndarray:
        """
        Get the grid as a numpy array indexed ``[row, column]``.

        Returns:
            A copy of the grid, row 0 first
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as ASCII art, top row first.

        Returns:
            String representation of the board
        """
        width = self._columns * 2 - 1
        lines = ["|" + "-" * width + "|"]

        for row in range(self._rows - 1, -1, -1):
            cells = []
            for col in range(self._columns):
                player = Player.from_cell(self.grid[row, col])
                cells.append(player.symbol if player else ".")
            lines.append("|" + " ".join(cells) + "|")

        lines.append("|" + "-" * width + "|")
        lines.append("|" + " ".join(str(col % 10) for col in range(self._columns)) + "|")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"BoardState(columns={self._columns}, rows={self._rows})"
