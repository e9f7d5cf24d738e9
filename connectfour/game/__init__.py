"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, win and draw detection,
game configuration and the turn-sequencing engine.
"""

from connectfour.game.board import BoardState
from connectfour.game.config import GameBuilder, GameConfig, Seat, SeatKind
from connectfour.game.engine import ConnectFourListener, EngineState, GameEngine
from connectfour.game.rules import is_draw, winning_columns, winning_line, would_win

__all__ = [
    'BoardState',
    'GameBuilder',
    'GameConfig',
    'Seat',
    'SeatKind',
    'ConnectFourListener',
    'EngineState',
    'GameEngine',
    'is_draw',
    'winning_columns',
    'winning_line',
    'would_win',
]
