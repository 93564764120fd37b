"""
Human player for console TicTacToe.
Reads moves from an input source until a legal one (or quit) arrives.
"""

import logging
from typing import Callable, Optional

from .config import GameConfig
from .display import NullDisplay
from .game_state import Board, Mark
from .move_validator import MoveValidator
from .player import BasePlayer, MoveResult, PlayerKind, QUIT

logger = logging.getLogger(__name__)


# Returns the next line typed by the player, or None at end of input
InputSource = Callable[[], Optional[str]]


class HumanPlayer(BasePlayer):
    """
    A person typing moves like "2 3", or "q" to quit.

    Bad input never reaches the game: produce_move() keeps asking until
    it gets an empty, on-board position or a quit request.
    """

    kind = PlayerKind.HUMAN

    def __init__(
        self,
        mark: Mark,
        read_input: InputSource,
        display: Optional[NullDisplay] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the human player.

        Args:
            mark: Which mark this player places.
            read_input: Callable returning the next input line (None at EOF).
            display: Where prompts and errors are shown.
            config: Game settings (quit token, board size).
        """
        super().__init__(mark, display)
        self.read_input = read_input
        self.validator = MoveValidator(config)

    def produce_move(self, board: Board) -> MoveResult:
        while True:
            text = self.read_input()

            # End of input counts as leaving the game
            if text is None:
                logger.info("Input closed, %s quits", self)
                return QUIT

            result = self.validator.validate_move(text, board)

            if result.is_quit:
                logger.info("%s quits", self)
                return QUIT

            if result.is_valid:
                return result.position

            logger.debug("Rejected input %r: %s", text, result.error_message)
            self.display.show_invalid_input(result.error_message)
            self.display.show_turn(self)
