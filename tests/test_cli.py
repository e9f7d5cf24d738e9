"""Tests for the command-line interface."""

import io

from connectfour.game import GameEngine, SeatKind
from connectfour.interfaces.cli import ConsoleDisplay, SimpleCLI


def run_cli(argv, keys=""):
    out = io.StringIO()
    cli = SimpleCLI(argv, stdin=io.StringIO(keys), stdout=out)
    code = cli.run()
    return code, out.getvalue(), cli


class TestPlay:
    def test_two_humans_vertical_win(self):
        code, output, _ = run_cli(["play", "--player2", "human"], "0\n1\n0\n1\n0\n1\n0\nn\n")
        assert code == 0
        assert "Player 1 (X) wins!" in output

    def test_quit(self):
        code, output, _ = run_cli(["play", "--player2", "human"], "q\n")
        assert code == 0
        assert "Quitting game." in output

    def test_invalid_input_is_reported(self):
        code, output, _ = run_cli(["play", "--player2", "human"], "abc\n9\nq\n")
        assert "Invalid input" in output
        assert "Column must be between 0 and 6." in output

    def test_full_column_message(self):
        keys = "0\n" * 6 + "0\nq\n"
        code, output, _ = run_cli(["play", "--player2", "human", "--connect", "7"], keys)
        assert "Column 0 is full." in output

    def test_against_ai(self):
        keys = "3\n" * 20
        code, output, _ = run_cli(["play", "--delay", "0", "--seed", "5"], keys)
        assert code == 0
        assert "Player 2 (O) plays column" in output

    def test_bad_configuration(self):
        code, output, _ = run_cli(["play", "--rows", "0"])
        assert code == 2
        assert "Error:" in output

    def test_no_command(self):
        code, output, _ = run_cli([])
        assert code == 1


class TestSimulate:
    def test_reports_every_game(self):
        code, output, cli = run_cli(["simulate", "--games", "5", "--seed", "3",
                                     "--columns", "5", "--rows", "4", "--connect", "3"])
        assert code == 0
        assert "Results after 5 games:" in output


class TestConsoleDisplay:
    def test_prints_win_and_reset(self):
        engine = GameEngine.builder(SeatKind.HUMAN, SeatKind.HUMAN).set_win_threshold(2).build()
        out = io.StringIO()
        ConsoleDisplay(engine, out)

        engine.submit_placement(0)
        engine.submit_placement(6)
        engine.submit_placement(1)
        engine.reset()

        text = out.getvalue()
        assert "Player 1 (X) wins! Line: [(0, 0), (1, 0)]" in text
        assert "New game." in text
