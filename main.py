"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (board, rules, players, AI, turn loop)
- Console UI (board drawing, prompts, input)

Run this script to play TicTacToe against a friend or the computer!
"""

import argparse
import logging
import sys
from typing import List, Optional

from logging_setup import LEVELS, setup_logging
from logic.config import GameConfig
from logic.game import Game, GameMode
from logic.game_state import GameOutcome
from ui import ConsoleUI

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicTacToe in the console")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        help="Skip the menu: 1 = Human vs Human, 2 = Human vs AI"
    )
    parser.add_argument(
        "--think-min",
        type=float,
        default=GameConfig.THINK_MIN_SECONDS,
        help="Shortest AI thinking time in seconds"
    )
    parser.add_argument(
        "--think-max",
        type=float,
        default=GameConfig.THINK_MAX_SECONDS,
        help="Longest AI thinking time in seconds"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between moves"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVELS,
        help="Logging level (default: LOG_LEVEL env var or WARNING)"
    )
    return parser


def play_one_game(ui: ConsoleUI, config: GameConfig, mode: Optional[str] = None) -> Optional[GameOutcome]:
    """
    Run the mode menu and a single game.

    Args:
        ui: Console display and input.
        config: Game settings.
        mode: Preselected mode, or None to ask.

    Returns:
        The game's outcome, or None if input ended at the menu.
    """
    game = Game(display=ui, read_input=ui.read_line, config=config)

    if mode is not None:
        game.select_mode(mode)

    while game.mode is None:
        choice = ui.ask_mode()
        if choice is None:
            return None
        if not game.select_mode(choice):
            ui.show_invalid_input("Invalid choice. Please enter 1 or 2.")

    return game.play()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = GameConfig(
            THINK_MIN_SECONDS=args.think_min,
            THINK_MAX_SECONDS=args.think_max
        )
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    ui = ConsoleUI(clear_screen=not args.no_clear)

    try:
        while True:
            outcome = play_one_game(ui, config, args.mode)
            logger.info("Game finished: %s", outcome)

            # Quitting a game (or closing input) ends the program
            if outcome in (None, GameOutcome.QUIT):
                break

            if not ui.ask_play_again():
                break
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 130
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
