"""
cli.py - Command-line interface for playing Connect Four

Two players share one terminal. The CLI only translates typed input into
column numbers and prints what the session reports back.
"""

import argparse
import sys
from typing import List, Optional, Union

from connect4_rules.debug import debug, DebugLevel
from connect4_rules.errors import (ConfigurationError, Connect4Error,
                                   IllegalMoveError, OutOfRangeError)
from connect4_rules.game.session import GameSession
from connect4_rules.utils import HEIGHT, WIDTH

# Typed at the prompt to leave the game; never a valid column
QUIT = "q"


class SimpleCLI:
    """Simple command-line interface for a two-player game."""

    def __init__(self):
        self.session: Optional[GameSession] = None
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four')

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--height', type=int, default=HEIGHT, help='Number of rows')
        common.add_argument('--width', type=int, default=WIDTH, help='Number of columns')
        common.add_argument('--debug', action='store_true', help='Enable debug output')
        common.add_argument('--debug_level', type=str, default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        common.add_argument('--log_file', type=str, default=None, help='Also log to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')
        subparsers.add_parser('play', parents=[common], help='Play a game interactively')

        replay_parser = subparsers.add_parser('replay', parents=[common],
                                              help='Apply a list of moves and show the result')
        replay_parser.add_argument('--moves', type=str, required=True,
                                   help='Comma-separated column numbers, e.g. 3,3,4')

        self.args = parser.parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)
        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI based on the parsed arguments.

        Returns:
            Process exit code
        """
        if not self.args:
            self.parse_args(argv)

        if self.args.command is None:
            print("Please specify a command. Use --help for options.")
            return 1

        try:
            self.session = GameSession(self.args.height, self.args.width)
        except ConfigurationError as e:
            print(f"Error: {e}")
            return 2

        if self.args.command == 'play':
            return self.play_game()
        return self.replay_moves(self.args.moves)

    def play_game(self) -> int:
        """Play a game between two people at the same terminal."""
        width = self.session.width
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{width - 1}) to drop a piece, or 'q' to quit.")
        print(self.session.render())

        while not self.session.is_game_over():
            column = self.get_human_move()
            if column is None:
                continue
            if column == QUIT:
                print("Quitting game.")
                return 0

            try:
                self.session.attempt_move(column)
            except OutOfRangeError:
                print(f"Column must be between 0 and {width - 1}.")
                continue
            except IllegalMoveError:
                print(f"Column {column} is full. Pick another one.")
                continue
            print(self.session.render())

        print(self.session.end_message())
        return 0

    def get_human_move(self) -> Optional[Union[int, str]]:
        """
        Read a move from the current player.

        Returns:
            Column index, QUIT to quit, or None if the input was not understood
        """
        player = self.session.current_player
        try:
            user_input = input(f"Player {player.value} ({player}) move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input == QUIT:
            return QUIT

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or 'q'.")
            return None

    def replay_moves(self, moves: str) -> int:
        """Apply a comma-separated move list and print the final board."""
        try:
            columns = [int(c) for c in moves.split(',') if c.strip()]
        except ValueError:
            print(f"Error: could not parse moves '{moves}'")
            return 2

        for number, column in enumerate(columns, start=1):
            try:
                self.session.attempt_move(column)
            except Connect4Error as e:
                print(self.session.render())
                print(f"Move {number} rejected: {e}")
                return 1

        print(self.session.render())
        print(self.session.end_message() or
              f"Game in progress, Player {self.session.current_player.value} to move.")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
