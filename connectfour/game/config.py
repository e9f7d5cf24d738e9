"""
config.py - Game configuration and builder for Connect Four

A game is described by an immutable GameConfig. Configs are put together with
a GameBuilder, which validates each setting as it is made so that a bad value
is reported at the call that supplied it:

    engine = (GameBuilder(SeatKind.HUMAN, SeatKind.AUTOMATED)
              .set_rows(8)
              .set_first_player(Player.TWO)
              .build())
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from connectfour.debug import debug
from connectfour.errors import ConfigurationError
from connectfour.utils import DEFAULT_COLUMNS, DEFAULT_ROWS, DEFAULT_WIN_THRESHOLD, Player


class SeatKind(Enum):
    """Who occupies a seat."""
    HUMAN = "human"
    AUTOMATED = "automated"


@dataclass(frozen=True)
class Seat:
    """
    One of the two turn-taking participants.

    A human seat waits for external input. An automated seat carries the
    strategy it consults when its turn comes.
    """
    kind: SeatKind
    strategy: Any = None

    @classmethod
    def human(cls) -> 'Seat':
        return cls(SeatKind.HUMAN)

    @classmethod
    def automated(cls, strategy: Any = None) -> 'Seat':
        from connectfour.ai.simple import DEFAULT_STRATEGY

        return cls(SeatKind.AUTOMATED, strategy if strategy is not None else DEFAULT_STRATEGY)

    @property
    def is_automated(self) -> bool:
        return self.kind == SeatKind.AUTOMATED


@dataclass(frozen=True)
class GameConfig:
    """Validated construction parameters for one game."""

    seat1: Seat
    seat2: Seat
    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    win_threshold: int = DEFAULT_WIN_THRESHOLD
    first_player: Player = Player.ONE
    # Seconds an automated seat waits before deciding; pacing only
    think_delay: float = 0.0

    def __post_init__(self):
        _require_seat(self.seat1, "seat1")
        _require_seat(self.seat2, "seat2")
        _require_positive(self.columns, "Number of columns")
        _require_positive(self.rows, "Number of rows")
        _require_positive(self.win_threshold, "Winning number")
        _require_player(self.first_player)
        _require_delay(self.think_delay)

    def seat(self, player: Player) -> Seat:
        """Get the seat playing as ``player``."""
        return self.seat1 if player == Player.ONE else self.seat2


def _require_positive(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"{name} must be positive integer, got {value!r}")


def _require_player(player: Optional[Player]) -> None:
    if not isinstance(player, Player):
        raise ConfigurationError(f"Invalid player id: {player!r}")


def _require_delay(delay: float) -> None:
    if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
        raise ConfigurationError(f"Think delay must be a non-negative number, got {delay!r}")


def _require_seat(seat: Optional[Seat], name: str) -> None:
    if not isinstance(seat, Seat):
        raise ConfigurationError(f"{name} must be a Seat, got {seat!r}")
    if seat.is_automated and not callable(getattr(seat.strategy, "decide_move", None)):
        raise ConfigurationError(f"{name} is automated but has no strategy")


def _to_seat(kind: Any, strategy: Any) -> Seat:
    if isinstance(kind, Seat):
        return kind
    if not isinstance(kind, SeatKind):
        raise ConfigurationError(f"Player type must be a SeatKind, got {kind!r}")
    if kind == SeatKind.AUTOMATED:
        return Seat.automated(strategy)
    return Seat.human()


class GameBuilder:
    """
    Builder for GameEngine.

    Takes the kinds of the two seats (``SeatKind.HUMAN`` or
    ``SeatKind.AUTOMATED``); everything else is optional. Defaults are a
    7-column, 6-row board, four in a row to win and ``Player.ONE`` first.

    Every setter validates its argument and raises ConfigurationError
    immediately. A builder produces exactly one engine.
    """

    def __init__(self, player1: Any, player2: Any):
        if player1 is None or player2 is None:
            raise ConfigurationError("player type cannot be None.")
        # Resolve the kinds now so invalid ones fail here
        _to_seat(player1, None)
        _to_seat(player2, None)
        self._player1 = player1
        self._player2 = player2
        self._columns = DEFAULT_COLUMNS
        self._rows = DEFAULT_ROWS
        self._win_threshold = DEFAULT_WIN_THRESHOLD
        self._first_player = Player.ONE
        self._strategy = None
        self._think_delay = 0.0
        self._built = False

    def set_columns(self, columns: int) -> 'GameBuilder':
        _require_positive(columns, "Number of columns")
        self._columns = columns
        return self

    def set_rows(self, rows: int) -> 'GameBuilder':
        _require_positive(rows, "Number of rows")
        self._rows = rows
        return self

    def set_win_threshold(self, win_threshold: int) -> 'GameBuilder':
        """Set the number of tokens in a line needed to win."""
        _require_positive(win_threshold, "Winning number")
        self._win_threshold = win_threshold
        return self

    def set_first_player(self, player: Player) -> 'GameBuilder':
        _require_player(player)
        self._first_player = player
        return self

    def set_strategy(self, strategy: Any) -> 'GameBuilder':
        """Set the strategy used by automated seats (default: SimpleStrategy)."""
        if not callable(getattr(strategy, "decide_move", None)):
            raise ConfigurationError(f"Strategy must provide decide_move(), got {strategy!r}")
        self._strategy = strategy
        return self

    def set_think_delay(self, seconds: float) -> 'GameBuilder':
        """Set how long an automated seat pauses before deciding."""
        _require_delay(seconds)
        self._think_delay = seconds
        return self

    def config(self) -> GameConfig:
        """Get the validated configuration described by this builder."""
        return GameConfig(
            seat1=_to_seat(self._player1, self._strategy),
            seat2=_to_seat(self._player2, self._strategy),
            columns=self._columns,
            rows=self._rows,
            win_threshold=self._win_threshold,
            first_player=self._first_player,
            think_delay=self._think_delay,
        )

    def build(self):
        """
        Build the engine described by this builder.

        Raises:
            ConfigurationError: If this builder has already built an engine
        """
        from connectfour.game.engine import GameEngine

        if self._built:
            raise ConfigurationError("This builder has already built a game")
        config = self.config()
        self._built = True
        debug.debug(f"Building game: {config}", "engine")
        return GameEngine(config)
