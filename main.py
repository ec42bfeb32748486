"""
Main entry point for TicTacToe.

Two players share one screen, either in a Tkinter window (default)
or in the terminal with --console.
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional

# Logic imports
from logic.game_engine import GameEngine

# Display imports
from display.messages import turn_message

# Preference imports
from preferences.config import PreferenceConfig
from preferences.preference_store import PreferenceStore
from preferences.storage import JsonFileStorage
from preferences.theme import Theme


class ConsoleGame:
    """
    Terminal version of the game.

    Commands:
    - 1-9: place a marker in that cell (row-major, 1 is top-left)
    - r: restart
    - q: quit
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None
    ):
        self.engine = engine or GameEngine()
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def show(self):
        """Print the board and status line."""
        state = self.engine.state
        self.output_fn("\n" + state.render_text())
        self.output_fn("\n" + turn_message(state))

    def handle(self, command: str) -> bool:
        """
        Handle one line of input.

        Returns:
            False when the player asked to quit.
        """
        command = command.strip().lower()

        if command == "q":
            return False

        if command == "r":
            self.engine.reset()
            self.output_fn("Game reset!")
            return True

        if command.isdigit() and 1 <= int(command) <= 9:
            result = self.engine.apply_move(int(command) - 1)
            if not result.accepted:
                self.output_fn(f"Move ignored ({result.outcome.value})")
            return True

        self.output_fn("Enter a cell 1-9, 'r' to restart or 'q' to quit")
        return True

    def run(self):
        """Play until the user quits or input runs out."""
        self.show()
        while True:
            try:
                command = self.input_fn("> ")
            except EOFError:
                break

            if not self.handle(command):
                break
            self.show()


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Two-player TicTacToe")
    parser.add_argument(
        "--console",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--theme",
        choices=PreferenceConfig.THEMES,
        help="Select and remember a display theme"
    )
    parser.add_argument(
        "--prefs",
        type=Path,
        help=f"Preference file (default: ${PreferenceConfig.STORAGE_PATH_ENV} "
             f"or {PreferenceConfig.DEFAULT_STORAGE_PATH})"
    )

    args = parser.parse_args(argv)

    storage = JsonFileStorage(args.prefs or PreferenceConfig.storage_path())
    preferences = PreferenceStore(storage)

    if args.theme:
        if not preferences.save(Theme(args.theme)):
            print(f"Warning: could not save theme to {storage.path}")

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60)
    print(f"   Mode: {'Console' if args.console else 'Window'}")
    print(f"   Theme: {preferences.load().value}")
    print("="*60 + "\n")

    if args.console:
        ConsoleGame().run()
        return 0

    # Imported here so console mode works without a display
    from ui import TicTacToeUI

    ui = TicTacToeUI(preference_store=preferences)
    ui.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
