"""Shared fixtures for the Connect Four tests."""

import pytest

from connectfour.game import BoardState, ConnectFourListener, GameEngine, SeatKind
from connectfour.utils import Player


class RecordingListener(ConnectFourListener):
    """Records every event together with the engine state seen at that moment."""

    def __init__(self, engine=None):
        self.engine = engine
        self.events = []
        self.states = []

    def _record(self, *event):
        self.events.append(event)
        if self.engine is not None:
            self.states.append((event[0], self.engine.state, self.engine.current_player))

    def board_update(self, column, row, player):
        self._record("board_update", column, row, player)

    def lock_input(self):
        self._record("lock_input")

    def unlock_input(self):
        self._record("unlock_input")

    def game_draw(self):
        self._record("game_draw")

    def game_won(self, player):
        self._record("game_won", player)

    def game_reset(self):
        self._record("game_reset")

    def names(self):
        return [event[0] for event in self.events]

    def clear(self):
        self.events.clear()
        self.states.clear()


def fill(board: BoardState, moves):
    """Place (column, player) pairs on a board in order."""
    for column, player in moves:
        board.place(column, player)
    return board


@pytest.fixture
def board():
    return BoardState(7, 6)


@pytest.fixture
def two_humans():
    engine = GameEngine.builder(SeatKind.HUMAN, SeatKind.HUMAN).build()
    yield engine
    engine.close()


@pytest.fixture
def recorder(two_humans):
    listener = RecordingListener(two_humans)
    two_humans.add_listener(listener)
    return listener


@pytest.fixture
def big_game():
    """18 columns x 10 rows, ten in a row to win, player two first."""
    engine = (GameEngine.builder(SeatKind.HUMAN, SeatKind.HUMAN)
              .set_rows(10).set_columns(18)
              .set_first_player(Player.TWO)
              .set_win_threshold(10)
              .build())
    yield engine
    engine.close()
