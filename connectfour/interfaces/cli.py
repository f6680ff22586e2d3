"""
cli.py - Command-line front end for the Connect Four engine

This module plays the presentation role around the engine: it collects the
players' names and colors, draws the board, turns typed column numbers into
``drop`` calls and announces the end of each game. It also replays scripted
move lists and benchmarks the engine.
"""

import argparse
import random
import sys
from typing import Callable, List, Optional, Tuple

from connectfour.debug import debug, DebugLevel
from connectfour.game.engine import GameEngine, PlacementResult
from connectfour.game.errors import ConnectFourError, InvalidConfiguration
from connectfour.game.player import Player
from connectfour.utils import (ANSI_COLORS, DEFAULT_COLORS, DEFAULT_COLS, DEFAULT_NAMES,
                               DEFAULT_ROWS, Outcome)


def parse_moves(moves: str) -> List[int]:
    """Parse a comma-separated list of column numbers such as "3,3,4"."""
    return [int(token) for token in moves.split(',') if token.strip()]


def end_message(engine: GameEngine, result: PlacementResult) -> Optional[str]:
    """Message announcing a finished game, or None while it goes on."""
    if result.outcome == Outcome.WIN:
        return f"{result.player.name} won game {engine.game_number}!"
    if result.outcome == Outcome.TIE:
        return "Tie!"
    return None


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--rows', type=int, default=DEFAULT_ROWS,
                        help=f'Number of rows (default {DEFAULT_ROWS})')
    common.add_argument('--cols', type=int, default=DEFAULT_COLS,
                        help=f'Number of columns (default {DEFAULT_COLS})')
    common.add_argument('--debug', action='store_true',
                        help='Enable debug mode with detailed logging')
    common.add_argument('--debug-level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level (ignored with --debug)')
    common.add_argument('--log-file', help='Also write log messages to this file')
    common.add_argument('--no-color', action='store_true', help='Draw pieces without ANSI colors')

    parser = argparse.ArgumentParser(description='Connect Four')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('play', parents=[common], help='Play a two-player game interactively')

    replay_parser = subparsers.add_parser('replay', parents=[common],
                                          help='Play a scripted list of columns')
    replay_parser.add_argument('--moves', required=True,
                               help='Comma-separated columns, first player first (e.g. 3,3,4,4)')

    benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                             help='Benchmark engine performance')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of iterations for benchmarking')

    return parser


def configure_debug(args) -> None:
    """Apply the logging flags shared by every command."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)

    if args.log_file:
        debug.configure(log_file=args.log_file)


class SimpleCLI:
    """Terminal front end for two human players."""

    def __init__(self, input_func: Callable[[str], str] = input, output=None):
        self.input_func = input_func
        self.output = output if output is not None else sys.stdout
        self.args = None
        self.engine: Optional[GameEngine] = None

    def say(self, text: str = "") -> None:
        print(text, file=self.output)

    def ask(self, prompt: str) -> Optional[str]:
        """Read one line of input; None once input is exhausted."""
        try:
            return self.input_func(prompt).strip()
        except EOFError:
            return None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        self.args = build_parser().parse_args(argv)
        if self.args.command:
            configure_debug(self.args)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command selected on the command line and return an exit status."""
        if argv is not None or not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()
        if self.args.command == 'replay':
            return self.replay(self.args.moves)
        if self.args.command == 'benchmark':
            return self.benchmark(self.args.iterations)

        self.say("Please specify a command. Use --help for options.")
        return 2

    @property
    def use_color(self) -> bool:
        return not (self.args and self.args.no_color)

    def new_engine(self, player1: Player = None, player2: Player = None) -> GameEngine:
        rows = self.args.rows if self.args else DEFAULT_ROWS
        cols = self.args.cols if self.args else DEFAULT_COLS
        self.engine = GameEngine(rows, cols, player1, player2)
        return self.engine

    def collect_player(self, number: int) -> Optional[Player]:
        default_name, default_color = DEFAULT_NAMES[number - 1], DEFAULT_COLORS[number - 1]
        name = self.ask(f"Player {number} name [{default_name}]: ")
        if name is None:
            return None

        while True:
            color = self.ask(f"Player {number} color [{default_color}]: ")
            if color is None:
                return None
            color = color.lower() or default_color
            if color in ANSI_COLORS:
                return Player(name or default_name, color)
            self.say(f"Unknown color '{color}'. Choose from: {', '.join(ANSI_COLORS)}")

    def collect_players(self) -> Optional[Tuple[Player, Player]]:
        player1 = self.collect_player(1)
        if player1 is None:
            return None

        while True:
            player2 = self.collect_player(2)
            if player2 is None:
                return None
            if player2 != player1:
                return player1, player2
            self.say("Both players have the same name and color; pick something else.")

    def get_column(self, player: Player) -> Optional[int]:
        """
        Ask ``player`` for a column.

        Returns:
            The typed column, or None if the player wants to quit
        """
        while True:
            text = self.ask(f"{player.name}'s move (columns 0-{self.engine.width - 1}, q to quit): ")
            if text is None or text.lower() == 'q':
                return None
            try:
                return int(text)
            except ValueError:
                self.say("Invalid input. Please enter a column number or 'q'.")

    def play_game(self) -> int:
        """Play games until the players quit or decline a rematch."""
        self.say("Starting a new Connect Four game!")
        while True:
            players = self.collect_players()
            if players is None:
                return 0

            try:
                engine = self.new_engine(*players)
            except InvalidConfiguration as e:
                self.say(f"Cannot start game: {e}")
                return 1

            if not self.play_one(engine):
                self.say("Quitting game.")
                return 0

            again = self.ask("Play again? (y/n): ")
            if again is None or again.lower() not in ('y', 'yes'):
                return 0

    def play_one(self, engine: GameEngine) -> bool:
        """Play one game to the end; False if the players quit early."""
        self.say(engine.render(color=self.use_color))

        while not engine.is_over():
            column = self.get_column(engine.current_player)
            if column is None:
                return False

            try:
                result = engine.drop(column)
            except ConnectFourError as e:
                debug.debug(f"Move rejected: {e}", "cli")
                self.say(str(e))
                continue

            self.say(engine.render(color=self.use_color))
            message = end_message(engine, result)
            if message:
                self.say(message)

        return True

    def replay(self, moves: str) -> int:
        """
        Play a scripted list of columns through a fresh engine.

        Returns:
            0 if every move was accepted, 1 otherwise
        """
        try:
            columns = parse_moves(moves)
        except ValueError as e:
            self.say(f"Error parsing moves: {e}")
            return 1

        try:
            engine = self.new_engine()
        except InvalidConfiguration as e:
            self.say(f"Cannot start game: {e}")
            return 1

        rejected = 0
        result = None
        for number, column in enumerate(columns, start=1):
            try:
                result = engine.drop(column)
            except ConnectFourError as e:
                rejected += 1
                self.say(f"Move {number} (column {column}) rejected: {e}")

        self.say(engine.render(color=self.use_color))
        message = end_message(engine, result) if result else None
        if message:
            self.say(message)
        else:
            self.say(f"Game in progress, {engine.current_player.name} to move.")

        return 1 if rejected else 0

    def benchmark(self, iterations: int) -> int:
        """Time engine creation, random games and the win scan."""
        rows = self.args.rows if self.args else DEFAULT_ROWS
        cols = self.args.cols if self.args else DEFAULT_COLS
        iterations = max(1, iterations)
        self.say(f"Running benchmark with {iterations} iterations on a {rows}x{cols} board...")

        debug.start_timer("engine_init")
        try:
            for _ in range(iterations):
                self.new_engine()
        except InvalidConfiguration as e:
            self.say(f"Cannot start game: {e}")
            return 1
        init_time = debug.end_timer("engine_init", "cli")
        self.say(f"Engine creation: {init_time:.6f} seconds total, "
                 f"{init_time / iterations * 1000:.6f} ms per engine")

        games = max(1, iterations // 10)
        total_moves = 0
        debug.start_timer("game_simulation")
        for _ in range(games):
            engine = self.new_engine()
            while not engine.is_over():
                engine.drop(random.choice(engine.valid_columns()))
                total_moves += 1
        simulation_time = debug.end_timer("game_simulation", "cli")
        self.say(f"Played {games} random games with {total_moves} moves: "
                 f"{simulation_time / games * 1000:.6f} ms per game, "
                 f"{simulation_time / total_moves * 1000:.6f} ms per move")

        board = self.engine.board
        debug.start_timer("win_scan")
        for _ in range(iterations):
            board.check_win(1)
            board.check_win(2)
        scan_time = debug.end_timer("win_scan", "cli")
        self.say(f"Full-board win scans: {scan_time / (2 * iterations) * 1000:.6f} ms per scan")

        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
