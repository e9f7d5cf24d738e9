"""
engine.py - Turn sequencing and event delivery for Connect Four

This module provides the GameEngine, which owns the board and the turn
pointer, checks every placement for a win or a draw, and reports what
happens to registered listeners. Presentation layers implement
ConnectFourListener and feed clicks or key presses into
``GameEngine.submit_placement``.

Automated seats think on their own worker thread so a slow strategy never
blocks the thread serving human input. Their chosen column comes back
through the same locked placement routine that human input uses, tagged
with the turn it was computed for; a decision that arrives after a reset
(or otherwise for a turn that is no longer current) is discarded.
"""

import threading
import time
from enum import Enum, auto
from typing import List, Optional

from connectfour.debug import debug
from connectfour.errors import InvalidArgumentError, StrategyError
from connectfour.game.board import BoardState
from connectfour.game.config import GameBuilder, GameConfig, Seat
from connectfour.game.rules import is_draw, would_win
from connectfour.utils import Player


class EngineState(Enum):
    """Lifecycle states of a GameEngine."""
    AWAITING_PLACEMENT = auto()
    EVALUATING = auto()
    WON = auto()
    DRAW = auto()
    RESET = auto()

    def is_terminal(self) -> bool:
        """Check if the game is over."""
        return self in (EngineState.WON, EngineState.DRAW)


class ConnectFourListener:
    """
    Receives lifecycle events from a GameEngine.

    Events are delivered synchronously, on the thread that caused them, in
    the order listeners were registered. Every method is a no-op here so
    subclasses only override what they display. A listener may call
    ``reset()`` from any event; it must not wait for automated seats.
    """

    def board_update(self, column: int, row: int, player: Player) -> None:
        """A token for ``player`` landed at (column, row)."""

    def lock_input(self) -> None:
        """Stop accepting input: a placement is being processed or the game ended."""

    def unlock_input(self) -> None:
        """Accept input again: a human seat is to move."""

    def game_draw(self) -> None:
        """The board filled up without a winner."""

    def game_won(self, player: Player) -> None:
        """``player`` completed a winning line."""

    def game_reset(self) -> None:
        """The board was cleared for a new game."""


class GameEngine:
    """
    The Connect Four game model.

    Build one with ``GameEngine.builder(SeatKind.HUMAN, SeatKind.AUTOMATED)``
    (see GameBuilder) or directly from a GameConfig, register listeners,
    then call ``start()``.
    """

    def __init__(self, config: GameConfig):
        self._config = config
        self._board = BoardState(config.columns, config.rows)
        self._current_player = config.first_player
        self._state = EngineState.AWAITING_PLACEMENT
        self._winner: Optional[Player] = None
        # Bumped on every placement and reset; automated decisions carry the
        # value they were computed for and are dropped on mismatch.
        self._turn_id = 0
        self._pending_turn: Optional[int] = None
        self._listeners: List[ConnectFourListener] = []
        self._think_threads: List[threading.Thread] = []
        self._lock = threading.RLock()
        self._closed = False
        debug.debug(f"Created engine {config.columns}x{config.rows}, "
                    f"connect {config.win_threshold}, {config.first_player.symbol} first", "engine")

    @staticmethod
    def builder(player1, player2) -> GameBuilder:
        """Start building an engine with the given seat kinds."""
        return GameBuilder(player1, player2)

    @classmethod
    def from_config(cls, config: GameConfig) -> 'GameEngine':
        return cls(config)

    # -- read-only views ---------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board(self) -> BoardState:
        """The live board. Treat it as read-only; use ``board.copy()`` to keep a snapshot."""
        return self._board

    @property
    def columns(self) -> int:
        return self._config.columns

    @property
    def rows(self) -> int:
        return self._config.rows

    @property
    def win_threshold(self) -> int:
        return self._config.win_threshold

    @property
    def first_player(self) -> Player:
        return self._config.first_player

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    def is_over(self) -> bool:
        return self._state.is_terminal()

    def seat(self, player: Player) -> Seat:
        return self._config.seat(player)

    # -- listeners ---------------------------------------------------------

    def add_listener(self, listener: ConnectFourListener) -> None:
        """
        Register a listener for all future events.

        Raises:
            InvalidArgumentError: If the listener is None
        """
        if listener is None:
            raise InvalidArgumentError("Listener cannot be None.")
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: ConnectFourListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def close(self) -> None:
        """Discard the game: drop all listeners and ignore pending automated moves."""
        with self._lock:
            self._closed = True
            self._turn_id += 1
            self._listeners.clear()
        debug.debug("Engine closed", "engine")

    def _fire(self, event: str, *args) -> None:
        debug.trace(f"Event {event}{args}", "engine")
        for listener in list(self._listeners):
            getattr(listener, event)(*args)

    # -- turn sequencing ---------------------------------------------------

    def start(self) -> None:
        """
        Begin the current turn.

        An automated seat starts thinking; for a human seat input is unlocked.
        Called once after construction and again by ``reset()``.
        """
        with self._lock:
            if self._closed or self._state != EngineState.AWAITING_PLACEMENT:
                debug.debug(f"Ignoring start in state {self._state.name}", "engine")
                return
            self._begin_turn()

    def reset(self) -> None:
        """Clear the board and start a new game with the first player to move."""
        with self._lock:
            if self._closed:
                return
            self._fire("lock_input")
            self._turn_id += 1
            self._state = EngineState.RESET
            self._board.clear()
            self._current_player = self._config.first_player
            self._winner = None
            debug.info("Game reset", "engine")
            self._fire("game_reset")
            self._state = EngineState.AWAITING_PLACEMENT
            self.start()

    def submit_placement(self, column: int) -> bool:
        """
        Drop the current human player's token into ``column``.

        Input is only accepted while a human seat is to move and the game is
        awaiting a placement. A full column is not an error: input is unlocked
        again and nothing is placed. Placements on a finished game are ignored
        until ``reset()``.

        Returns:
            True if a token was placed, False if the input was ignored

        Raises:
            OutOfRangeError: If the column is outside the board
        """
        with self._lock:
            if self._config.seat(self._current_player).is_automated:
                debug.debug(f"Ignoring input for column {column}: "
                            f"{self._current_player.symbol} is automated", "engine")
                return False
            return self._place(column, self._current_player, self._turn_id, automated=False)

    def _place(self, column: int, player: Player, turn_id: int, automated: bool) -> bool:
        """Apply one placement. The caller holds the lock."""
        if self._closed:
            return False
        if turn_id != self._turn_id or player != self._current_player:
            debug.debug(f"Discarding stale placement in column {column} for {player.symbol}", "engine")
            return False
        if self._state.is_terminal():
            debug.debug(f"Ignoring placement in column {column}: game is over", "engine")
            return False
        if self._state != EngineState.AWAITING_PLACEMENT:
            debug.debug(f"Ignoring placement in column {column} while {self._state.name}", "engine")
            return False

        row = self._board.top_empty_row(column)
        if row is None and automated:
            raise StrategyError(f"Strategy chose full column {column} for {player.symbol}")

        self._state = EngineState.EVALUATING
        outcome = None
        try:
            self._fire("lock_input")
            if turn_id != self._turn_id:
                return False

            if row is None:
                debug.debug(f"Column {column} is full", "engine")
                self._state = EngineState.AWAITING_PLACEMENT
                self._fire("unlock_input")
                return False

            debug.start_timer("placement")
            self._board.place(column, player)
            self._turn_id += 1
            turn_id = self._turn_id
            if would_win(self._board, column, row, player, self._config.win_threshold):
                outcome = EngineState.WON
            elif is_draw(self._board, row):
                outcome = EngineState.DRAW
            else:
                outcome = EngineState.AWAITING_PLACEMENT
            debug.end_timer("placement", "engine")
            debug.debug(f"{player.symbol} placed at ({column}, {row})", "engine")

            self._fire("board_update", column, row, player)
            if turn_id != self._turn_id:
                # A listener reset the game
                return True

            self._settle(player, outcome)
            if outcome == EngineState.WON:
                debug.info(f"Player {player} wins at ({column}, {row})", "engine")
                self._fire("game_won", player)
            elif outcome == EngineState.DRAW:
                debug.info("Game ends in a draw", "engine")
                self._fire("game_draw")
            else:
                self._begin_turn()
            return True
        except Exception:
            if turn_id == self._turn_id and self._state == EngineState.EVALUATING:
                debug.error(f"Listener failed while placing in column {column}", "engine")
                if outcome is None:
                    self._state = EngineState.AWAITING_PLACEMENT
                else:
                    self._settle(player, outcome)
                    seat = self._config.seat(self._current_player)
                    if (outcome == EngineState.AWAITING_PLACEMENT and seat.is_automated
                            and self._pending_turn != self._turn_id):
                        self._spawn_think(seat)
            raise

    def _settle(self, player: Player, outcome: EngineState) -> None:
        """Move to the state that follows ``player``'s placement, without firing events."""
        if outcome == EngineState.WON:
            self._winner = player
        elif outcome == EngineState.AWAITING_PLACEMENT:
            self._current_player = player.other()
        self._state = outcome

    def _begin_turn(self) -> None:
        seat = self._config.seat(self._current_player)
        if not seat.is_automated:
            self._fire("unlock_input")
        elif self._pending_turn != self._turn_id:
            self._spawn_think(seat)

    # -- automated seats ---------------------------------------------------

    def _spawn_think(self, seat: Seat) -> None:
        player = self._current_player
        turn_id = self._turn_id
        self._pending_turn = turn_id
        snapshot = self._board.copy()
        thread = threading.Thread(
            target=self._think,
            args=(seat.strategy, player, turn_id, snapshot),
            name=f"think-{player}-{turn_id}",
            daemon=True,
        )
        self._think_threads = [t for t in self._think_threads if t.is_alive()]
        self._think_threads.append(thread)
        debug.debug(f"{player.symbol} is thinking", "engine")
        thread.start()

    def _think(self, strategy, player: Player, turn_id: int, snapshot: BoardState) -> None:
        try:
            if self._config.think_delay:
                time.sleep(self._config.think_delay)
            column = strategy.decide_move(snapshot, player, self._config.win_threshold)
            with self._lock:
                self._place(column, player, turn_id, automated=True)
        except Exception:
            debug.exception(f"Automated move for {player.symbol} failed", "engine")
            raise
        finally:
            with self._lock:
                current = threading.current_thread()
                if current in self._think_threads:
                    self._think_threads.remove(current)

    def wait_for_automated(self, timeout: Optional[float] = None) -> bool:
        """
        Block until no automated seat is thinking.

        Games between two automated seats are waited on until they end. Must
        not be called from a listener.

        Returns:
            True if all think threads finished, False if the timeout expired
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            with self._lock:
                self._think_threads = [t for t in self._think_threads if t.is_alive()]
                pending = list(self._think_threads)
            if not pending:
                return True
            for thread in pending:
                remaining = None if deadline is None else deadline - time.monotonic()
                if remaining is not None and remaining <= 0:
                    return False
                thread.join(remaining)

    def __repr__(self) -> str:
        return (f"GameEngine(columns={self.columns}, rows={self.rows}, "
                f"win_threshold={self.win_threshold}, first_player={self.first_player.name}, "
                f"current_player={self._current_player.name}, state={self._state.name})")
