"""
cli.py - Command-line interface for Connect Four

This module provides a terminal front end for the engine. ConsoleDisplay
listens to engine events and prints the board; SimpleCLI parses arguments,
builds the engine and feeds keyboard input to human seats.
"""

import argparse
import random
import sys
from collections import Counter
from typing import List, Optional, TextIO

from connectfour.ai.simple import SimpleStrategy
from connectfour.debug import debug, DebugLevel
from connectfour.errors import ConnectFourError, OutOfRangeError
from connectfour.game.config import GameBuilder, SeatKind
from connectfour.game.engine import ConnectFourListener, GameEngine
from connectfour.game.rules import winning_line
from connectfour.utils import DEFAULT_COLUMNS, DEFAULT_ROWS, DEFAULT_WIN_THRESHOLD, Player

# Special commands returned by SimpleCLI.get_human_move
QUIT = -1
RESTART = -2


class ConsoleDisplay(ConnectFourListener):
    """Prints the board and game events to a text stream."""

    def __init__(self, engine: GameEngine, out: TextIO = None, quiet: bool = False):
        self.engine = engine
        self.out = out or sys.stdout
        self.quiet = quiet
        self.last_move = None
        engine.add_listener(self)

    def _print(self, text: str = "") -> None:
        if not self.quiet:
            print(text, file=self.out, flush=True)

    def board_update(self, column: int, row: int, player: Player) -> None:
        self.last_move = (column, row)
        self._print(f"Player {player} ({player.symbol}) plays column {column}")
        self._print(self.engine.board.render())

    def unlock_input(self) -> None:
        player = self.engine.current_player
        self._print(f"Player {player} ({player.symbol}) to move.")

    def game_draw(self) -> None:
        self._print("It's a draw!")

    def game_won(self, player: Player) -> None:
        line = []
        if self.last_move is not None:
            line = winning_line(self.engine.board, *self.last_move)
        self._print(f"Player {player} ({player.symbol}) wins! Line: {line}")

    def game_reset(self) -> None:
        self.last_move = None
        self._print("New game.")
        self._print(self.engine.board.render())


class SimpleCLI:
    """Simple command-line interface for playing Connect Four."""

    def __init__(self, argv: Optional[List[str]] = None,
                 stdin: TextIO = None, stdout: TextIO = None):
        self.argv = argv
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', default=None, help='Also write the log to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        self._add_game_arguments(play_parser)
        play_parser.add_argument('--player1', choices=['human', 'ai'], default='human',
                                 help='Who plays as X')
        play_parser.add_argument('--player2', choices=['human', 'ai'], default='ai',
                                 help='Who plays as O')
        play_parser.add_argument('--delay', type=float, default=0.15,
                                 help='Seconds the AI pauses before moving')

        simulate_parser = subparsers.add_parser('simulate', help='Play AI against AI and report results')
        self._add_game_arguments(simulate_parser)
        simulate_parser.add_argument('--games', type=int, default=100,
                                     help='Number of games to play')

        return parser

    @staticmethod
    def _add_game_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument('--columns', type=int, default=DEFAULT_COLUMNS, help='Board width')
        parser.add_argument('--rows', type=int, default=DEFAULT_ROWS, help='Board height')
        parser.add_argument('--connect', type=int, default=DEFAULT_WIN_THRESHOLD,
                            help='Tokens in a line needed to win')
        parser.add_argument('--first', type=int, choices=[1, 2], default=1,
                            help='Player to move first')
        parser.add_argument('--seed', type=int, default=None, help='Random seed for the AI')

    def parse_args(self) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(self.argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def _builder(self, player1: SeatKind, player2: SeatKind) -> GameBuilder:
        rng = random.Random(self.args.seed) if self.args.seed is not None else None
        return (GameEngine.builder(player1, player2)
                .set_columns(self.args.columns)
                .set_rows(self.args.rows)
                .set_win_threshold(self.args.connect)
                .set_first_player(Player(self.args.first))
                .set_strategy(SimpleStrategy(rng)))

    def run(self) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args()

        try:
            if self.args.command == 'play':
                self.play_game()
            elif self.args.command == 'simulate':
                self.simulate()
            else:
                self._write("Please specify a command. Use --help for options.")
                return 1
        except ConnectFourError as e:
            debug.error(f"Game setup failed: {e}", "cli")
            self._write(f"Error: {e}")
            return 2
        return 0

    def _write(self, text: str) -> None:
        print(text, file=self.stdout, flush=True)

    def play_game(self) -> None:
        """Play Connect Four interactively."""
        kinds = {'human': SeatKind.HUMAN, 'ai': SeatKind.AUTOMATED}
        engine = (self._builder(kinds[self.args.player1], kinds[self.args.player2])
                  .set_think_delay(self.args.delay)
                  .build())
        ConsoleDisplay(engine, self.stdout)

        self._write("Starting a new Connect Four game!")
        self._write(f"Enter column number (0-{engine.columns - 1}) to make a move.")
        self._write("Other commands: 'q' to quit, 'r' to restart.")
        self._write(engine.board.render())
        engine.start()

        try:
            while True:
                if engine.seat(engine.current_player).is_automated and not engine.is_over():
                    engine.wait_for_automated()
                    if engine.seat(engine.current_player).is_automated and not engine.is_over():
                        self._write("The AI failed to move.")
                        break
                    continue

                if engine.is_over():
                    if not self.ask_rematch():
                        break
                    engine.reset()
                    continue

                move = self.get_human_move(engine)
                if move is None:
                    continue
                if move == QUIT:
                    self._write("Quitting game.")
                    break
                if move == RESTART:
                    engine.reset()
                    continue

                if not engine.submit_placement(move):
                    self._write(f"Column {move} is full.")
        finally:
            engine.close()

    def get_human_move(self, engine: GameEngine) -> Optional[int]:
        """
        Get a move from human player input.

        Returns:
            Column index, a special command code, or None if the input was invalid
        """
        self.stdout.write(f"Your move (columns 0-{engine.columns - 1}, q/r): ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return QUIT

        user_input = line.strip().lower()
        if user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART

        try:
            move = int(user_input)
        except ValueError:
            self._write("Invalid input. Please enter a column number or special command.")
            return None

        try:
            engine.board.top_empty_row(move)
        except OutOfRangeError:
            self._write(f"Column must be between 0 and {engine.columns - 1}.")
            return None
        return move

    def ask_rematch(self) -> bool:
        self.stdout.write("Play again? [y/N]: ")
        self.stdout.flush()
        return self.stdin.readline().strip().lower() in ('y', 'yes')

    def simulate(self) -> Counter:
        """Play automated games and print how they ended."""
        results: Counter = Counter()
        for _ in range(self.args.games):
            engine = self._builder(SeatKind.AUTOMATED, SeatKind.AUTOMATED).build()
            engine.start()
            engine.wait_for_automated()
            results[f"player {engine.winner}" if engine.winner else "draw"] += 1
            engine.close()

        self._write(f"Results after {self.args.games} games:")
        for outcome, count in sorted(results.items()):
            self._write(f"  {outcome}: {count}")
        return results


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI(argv).run()


if __name__ == "__main__":
    sys.exit(main())
