"""
Turn orchestration for console TicTacToe.

The Game owns the board for one game. It sets up the two players for
the chosen mode, then runs the turn loop:

1. Ask the current player for a move
2. Place it on the board (same player again if that fails)
3. Stop on a win or a full board, otherwise switch players
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .ai_player import AIPlayer
from .config import GameConfig
from .display import NullDisplay
from .game_state import Board, GameOutcome, Mark, Move
from .human_player import HumanPlayer, InputSource
from .player import BasePlayer, QUIT

logger = logging.getLogger(__name__)


class InvalidOperationError(RuntimeError):
    """The game was used out of order (e.g. played before picking a mode)."""


class GameMode(Enum):
    """The two ways to play."""
    HUMAN_VS_HUMAN = "1"
    HUMAN_VS_AI = "2"

    @classmethod
    def parse(cls, choice: Optional[str]) -> Optional["GameMode"]:
        """Menu text to mode, or None if the choice is not a mode."""
        if choice is None:
            return None
        try:
            return cls(choice.strip())
        except ValueError:
            return None


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    AWAITING_MODE = "awaiting_mode"
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WON, GameStatus.DRAW, GameStatus.QUIT)


_OUTCOME_STATUS = {
    GameOutcome.PLAYER_ONE_WINS: GameStatus.WON,
    GameOutcome.PLAYER_TWO_WINS: GameStatus.WON,
    GameOutcome.DRAW: GameStatus.DRAW,
    GameOutcome.QUIT: GameStatus.QUIT,
}


class Game:
    """
    One game of TicTacToe, from mode selection to outcome.

    Players can be chosen with select_mode(), or passed in directly
    (handy for tests and scripted games).
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        display: Optional[NullDisplay] = None,
        read_input: Optional[InputSource] = None,
        config: Optional[GameConfig] = None,
        players: Optional[Tuple[BasePlayer, BasePlayer]] = None,
        ai_factory: Optional[Callable[[Mark], BasePlayer]] = None
    ):
        """
        Initialize a game.

        Args:
            board: Board to play on (default: a new empty board).
            display: Display hooks (default: show nothing).
            read_input: Input source for human players.
            config: Game settings.
            players: Pre-configured (player one, player two). Skips mode
                selection.
            ai_factory: Builds the AI opponent for Human vs AI mode
                (default: AIPlayer with this game's display and config).
        """
        self.board = board if board is not None else Board()
        self.display = display or NullDisplay()
        self.read_input = read_input or (lambda: None)
        self.config = config or GameConfig()
        self.ai_factory = ai_factory or self._default_ai

        self.mode: Optional[GameMode] = None
        self.player_one: Optional[BasePlayer] = None
        self.player_two: Optional[BasePlayer] = None
        self.current_player: Optional[BasePlayer] = None

        self.status = GameStatus.AWAITING_MODE
        self.outcome: Optional[GameOutcome] = None
        self.winner: Optional[BasePlayer] = None

        # Moves applied to the board this game
        self.moves: List[Move] = []

        if players is not None:
            self._set_players(*players)

    def _default_ai(self, mark: Mark) -> BasePlayer:
        return AIPlayer(mark, display=self.display, config=self.config)

    def _human(self, mark: Mark) -> HumanPlayer:
        return HumanPlayer(mark, self.read_input, display=self.display, config=self.config)

    def _set_players(self, player_one: BasePlayer, player_two: BasePlayer):
        if player_one.mark == player_two.mark:
            raise ValueError("Both players cannot use the same mark")

        self.player_one = player_one
        self.player_two = player_two
        self.current_player = player_one
        self.status = GameStatus.IN_PROGRESS
        logger.debug("Players: %s vs %s", player_one, player_two)

    def select_mode(self, choice: Optional[str]) -> bool:
        """
        Set up the players for the chosen mode.

        Args:
            choice: "1" for Human vs Human, "2" for Human vs AI.

        Returns:
            True if the mode was accepted. Anything else leaves the game
            waiting for a mode.
        """
        if self.status != GameStatus.AWAITING_MODE:
            raise InvalidOperationError("Game mode has already been selected")

        mode = GameMode.parse(choice)
        if mode is None:
            logger.debug("Rejected mode choice %r", choice)
            return False

        self.mode = mode

        if mode == GameMode.HUMAN_VS_HUMAN:
            self.display.show_message("Human vs Human mode selected!")
            self._set_players(self._human(Mark.PLAYER_ONE), self._human(Mark.PLAYER_TWO))
        else:
            self.display.show_message("Human vs AI mode selected!")
            self.display.show_message(f"You will play as {Mark.PLAYER_ONE.symbol} (Player One)")
            self._set_players(self._human(Mark.PLAYER_ONE), self.ai_factory(Mark.PLAYER_TWO))

        logger.info("Mode selected: %s", mode.name)
        return True

    def play(self) -> GameOutcome:
        """
        Run the game until someone wins, the board fills up, or a player
        quits.

        Returns:
            The game's outcome.

        Raises:
            InvalidOperationError: If no players have been set up yet.
        """
        if self.player_one is None or self.player_two is None:
            raise InvalidOperationError("Game mode must be selected before starting the game")

        if self.status.is_terminal:
            raise InvalidOperationError("This game is already over")

        self.current_player = self.player_one

        self.display.clear()
        self.display.show_board(self.board)

        # A board handed in already finished needs no turns
        already_over = self._check_finished_board()
        if already_over is not None:
            return self._finish(already_over)

        while True:
            mover = self.current_player
            self.display.show_turn(mover)

            result = mover.produce_move(self.board)

            # None only comes back when no move exists; treat it like a quit
            if result is QUIT or result is None:
                return self._finish(GameOutcome.QUIT)

            if not self.board.place(result, mover.mark):
                # Same player tries again
                logger.warning("%s produced unplayable move %s", mover, result)
                self.display.show_invalid_input("Invalid move. Try again.")
                continue

            self.moves.append(Move(position=result, mark=mover.mark))
            logger.debug("%s placed at %s: %s", mover, result, self.board)

            self.display.clear()
            self.display.show_board(self.board)

            if self.board.is_win():
                return self._finish(GameOutcome.win_for(mover.mark), mover)

            if self.board.is_full():
                return self._finish(GameOutcome.DRAW)

            self.current_player = self.player_two if mover is self.player_one else self.player_one

    def _check_finished_board(self) -> Optional[GameOutcome]:
        winner_mark = self.board.winner()
        if winner_mark is not None:
            return GameOutcome.win_for(winner_mark)
        if self.board.is_full():
            return GameOutcome.DRAW
        return None

    def _player_for(self, mark: Mark) -> Optional[BasePlayer]:
        for player in (self.player_one, self.player_two):
            if player is not None and player.mark == mark:
                return player
        return None

    def _finish(self, outcome: GameOutcome, winner: Optional[BasePlayer] = None) -> GameOutcome:
        if winner is None and outcome.winner is not None:
            winner = self._player_for(outcome.winner)

        self.outcome = outcome
        self.winner = winner
        self.status = _OUTCOME_STATUS[outcome]

        logger.info("Game over: %s after %d moves", outcome.name, len(self.moves))
        self.display.show_outcome(outcome, winner)
        return outcome
