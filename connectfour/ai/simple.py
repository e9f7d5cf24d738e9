"""
simple.py - Single-ply heuristic strategy for Connect Four

The strategy only looks at the next token:
1. If a column wins immediately, play the lowest such column.
2. Otherwise, if the opponent could win immediately, block the lowest such column.
3. Otherwise play a uniformly random column that is not full.

It holds no game state, so one instance can serve any number of seats and
engines at the same time.
"""

import random
from typing import Optional

from connectfour.debug import debug
from connectfour.errors import StrategyError
from connectfour.game.board import BoardState
from connectfour.game.rules import winning_columns
from connectfour.utils import Player


class SimpleStrategy:
    """
    A Connect Four player that wins when it can and blocks when it must.

    Args:
        rng: Optional random source for the fallback move. Defaults to the
            module-level ``random`` functions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng

    def decide_move(self, board: BoardState, player: Player, win_threshold: int) -> int:
        """
        Choose the column for ``player``'s next token.

        Args:
            board: Snapshot of the current board
            player: The player to move
            win_threshold: Number of tokens in a line needed to win

        Returns:
            A column that is not full

        Raises:
            StrategyError: If every column is full
        """
        open_columns = board.available_columns()
        if not open_columns:
            raise StrategyError("No open column to play")

        wins = winning_columns(board, player, win_threshold)
        if wins:
            debug.debug(f"{player.symbol} plays winning column {wins[0]}", "ai")
            return wins[0]

        threats = winning_columns(board, player.other(), win_threshold)
        if threats:
            debug.debug(f"{player.symbol} blocks column {threats[0]}", "ai")
            return threats[0]

        choice = (self._rng or random).choice(open_columns)
        debug.trace(f"{player.symbol} picks random column {choice} from {open_columns}", "ai")
        return choice

    def __repr__(self) -> str:
        return "SimpleStrategy()"


# Shared default instance; safe to share since the strategy is stateless.
DEFAULT_STRATEGY = SimpleStrategy()
