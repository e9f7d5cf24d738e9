"""
rules.py - Win and draw detection for Connect Four

All functions are stateless and operate on a BoardState. Win detection
starts from a single cell and scans outward along each axis, so it costs
O(win_threshold) per axis regardless of the board size and is cheap enough
to run after every placement.
"""

from typing import List, Tuple

from connectfour.game.board import BoardState
from connectfour.utils import AXIS_VECTORS, Player


def _count_run(board: BoardState, column: int, row: int,
               dc: int, dr: int, player: Player) -> int:
    """Count consecutive ``player`` tokens stepping from (column, row), excluding it."""
    count = 0
    c, r = column + dc, row + dr
    while board.in_bounds(c, r) and board.get(c, r) == player:
        count += 1
        c += dc
        r += dr
    return count


def would_win(board: BoardState, column: int, row: int,
              player: Player, win_threshold: int) -> bool:
    """
    Check if ``player`` owning cell (column, row) completes a winning line.

    The candidate cell itself is not inspected; it is assumed to be the token
    about to be (or just) placed. Scanning stops at the first cell that is
    off the board or not owned by ``player``.

    Args:
        board: The board to inspect
        column: Column of the candidate cell
        row: Row of the candidate cell
        player: The player who would own the cell
        win_threshold: Number of tokens in a line needed to win

    Returns:
        True if the placement results in a win, False otherwise
    """
    # Bounds-check the candidate before scanning around it
    board.get(column, row)

    needed = win_threshold - 1
    if needed <= 0:
        return True

    for dc, dr in AXIS_VECTORS.values():
        forward = _count_run(board, column, row, dc, dr, player)
        backward = _count_run(board, column, row, -dc, -dr, player)
        if forward + backward >= needed:
            return True

    return False


def is_draw(board: BoardState, row: int) -> bool:
    """
    Check if a non-winning placement at ``row`` filled the board.

    Only a placement into the final row can complete the board, so any other
    row returns False without scanning.
    """
    if row != board.rows - 1:
        return False
    return all(board.get(col, board.rows - 1) is not None for col in range(board.columns))


def winning_line(board: BoardState, column: int, row: int) -> List[Tuple[int, int]]:
    """
    Get the longest line of same-player tokens through an occupied cell.

    Returns:
        (column, row) positions of the line, or an empty list if the cell is empty
    """
    player = board.get(column, row)
    if player is None:
        return []

    best: List[Tuple[int, int]] = []
    for dc, dr in AXIS_VECTORS.values():
        positions = [(column, row)]
        for sign in (1, -1):
            c, r = column + sign * dc, row + sign * dr
            while board.in_bounds(c, r) and board.get(c, r) == player:
                positions.append((c, r))
                c += sign * dc
                r += sign * dr
        if len(positions) > len(best):
            best = positions

    return sorted(best)


def winning_columns(board: BoardState, player: Player, win_threshold: int) -> List[int]:
    """
    Find all columns where ``player``'s next token would win.

    Returns:
        Winning column indices in ascending order
    """
    columns = []
    for col in board.available_columns():
        row = board.top_empty_row(col)
        if would_win(board, col, row, player, win_threshold):
            columns.append(col)
    return columns
