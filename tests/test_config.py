"""Tests for game configuration and the builder."""

import pytest

from connectfour.ai import DEFAULT_STRATEGY, SimpleStrategy
from connectfour.errors import ConfigurationError
from connectfour.game import GameBuilder, GameConfig, GameEngine, Seat, SeatKind
from connectfour.utils import Player


class TestDefaults:
    def test_default_settings(self):
        engine = GameEngine.builder(SeatKind.HUMAN, SeatKind.AUTOMATED).build()
        assert engine.columns == 7
        assert engine.rows == 6
        assert engine.win_threshold == 4
        assert engine.first_player == Player.ONE
        assert engine.current_player == Player.ONE
        assert not engine.seat(Player.ONE).is_automated
        assert engine.seat(Player.TWO).strategy is DEFAULT_STRATEGY

    def test_overrides(self):
        strategy = SimpleStrategy()
        config = (GameBuilder(SeatKind.AUTOMATED, SeatKind.HUMAN)
                  .set_columns(9).set_rows(8).set_win_threshold(5)
                  .set_first_player(Player.TWO)
                  .set_strategy(strategy)
                  .set_think_delay(0.5)
                  .config())
        assert (config.columns, config.rows, config.win_threshold) == (9, 8, 5)
        assert config.first_player == Player.TWO
        assert config.seat(Player.ONE) == Seat(SeatKind.AUTOMATED, strategy)
        assert config.seat(Player.TWO) == Seat.human()
        assert config.think_delay == 0.5

    def test_config_is_frozen(self):
        config = GameBuilder(SeatKind.HUMAN, SeatKind.HUMAN).config()
        with pytest.raises(AttributeError):
            config.rows = 10

    def test_falsy_strategy_is_kept(self):
        class EmptyLookingStrategy(SimpleStrategy):
            def __len__(self):
                return 0

        strategy = EmptyLookingStrategy()
        assert Seat.automated(strategy).strategy is strategy
        config = (GameBuilder(SeatKind.HUMAN, SeatKind.AUTOMATED)
                  .set_strategy(strategy).config())
        assert config.seat(Player.TWO).strategy is strategy


class TestValidation:
    def test_none_players(self):
        with pytest.raises(ConfigurationError):
            GameBuilder(None, None)
        with pytest.raises(ConfigurationError):
            GameBuilder(SeatKind.HUMAN, None)

    def test_unknown_player_type(self):
        with pytest.raises(ConfigurationError):
            GameBuilder("human", SeatKind.HUMAN)

    def test_negative_rows(self):
        builder = GameBuilder(SeatKind.HUMAN, SeatKind.AUTOMATED)
        with pytest.raises(ConfigurationError):
            builder.set_rows(-1)

    def test_zero_columns(self):
        with pytest.raises(ConfigurationError):
            GameBuilder(SeatKind.AUTOMATED, SeatKind.HUMAN).set_columns(0)

    def test_negative_win_threshold(self):
        with pytest.raises(ConfigurationError):
            GameBuilder(SeatKind.HUMAN, SeatKind.HUMAN).set_win_threshold(-99999)

    @pytest.mark.parametrize("value", [2.5, "7", True, None])
    def test_non_integer_dimensions(self, value):
        with pytest.raises(ConfigurationError):
            GameBuilder(SeatKind.HUMAN, SeatKind.HUMAN).set_columns(value)

    def test_none_first_player(self):
        with pytest.raises(ConfigurationError):
            GameBuilder(SeatKind.AUTOMATED, SeatKind.AUTOMATED).set_first_player(None)

    def test_negative_delay(self):
        with pytest.raises(ConfigurationError):
            GameBuilder(SeatKind.HUMAN, SeatKind.HUMAN).set_think_delay(-1)

    def test_strategy_without_decide_move(self):
        with pytest.raises(ConfigurationError):
            GameBuilder(SeatKind.HUMAN, SeatKind.AUTOMATED).set_strategy(object())

    def test_failed_setter_keeps_previous_value(self):
        builder = GameBuilder(SeatKind.HUMAN, SeatKind.HUMAN).set_rows(8)
        with pytest.raises(ConfigurationError):
            builder.set_rows(0)
        assert builder.config().rows == 8

    def test_config_rejects_bad_values(self):
        with pytest.raises(ConfigurationError):
            GameConfig(Seat.human(), Seat.human(), columns=0)
        with pytest.raises(ConfigurationError):
            GameConfig(Seat.human(), Seat(SeatKind.AUTOMATED, None))


class TestBuild:
    def test_builds_exactly_one_engine(self):
        builder = GameBuilder(SeatKind.HUMAN, SeatKind.HUMAN)
        engine = builder.build()
        assert isinstance(engine, GameEngine)
        with pytest.raises(ConfigurationError):
            builder.build()

    def test_from_config(self):
        config = GameBuilder(SeatKind.HUMAN, SeatKind.HUMAN).set_rows(3).config()
        engine = GameEngine.from_config(config)
        assert engine.board.rows == 3
        assert engine.config is config
