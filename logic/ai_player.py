"""
AI player for console TicTacToe.
Pretends to think for a while, then plays the heuristic strategy's move.
"""

import logging
import random
import threading
from typing import Callable, Optional

from .config import GameConfig
from .display import NullDisplay
from .game_state import Board, Mark
from .player import BasePlayer, MoveResult, PlayerKind
from .strategy import HeuristicStrategy

logger = logging.getLogger(__name__)


class ThinkingDelay:
    """
    A timed wait with a progress indicator.

    Two threads run side by side: a timer that fires after `duration`
    seconds and an indicator that calls `on_tick` every `interval`
    seconds until the timer has fired. wait() joins both.

    cancel() ends the wait early. The game itself never cancels; the
    delay always runs to completion during play.
    """

    def __init__(
        self,
        duration: float,
        interval: float,
        on_tick: Optional[Callable[[], None]] = None
    ):
        self.duration = max(0.0, duration)
        self.interval = interval
        self.on_tick = on_tick

        self.done = threading.Event()
        self._timer: Optional[threading.Timer] = None
        self._indicator: Optional[threading.Thread] = None

    def start(self):
        """Start the timer and the indicator threads."""
        self._timer = threading.Timer(self.duration, self.done.set)
        self._timer.daemon = True
        self._indicator = threading.Thread(target=self._animate, daemon=True)

        self._timer.start()
        self._indicator.start()

    def _animate(self):
        # Event.wait returns True once the timer fires
        while not self.done.wait(self.interval):
            if self.on_tick is not None:
                self.on_tick()

    def wait(self):
        """Block until both threads have finished."""
        if self._timer is None:
            self.start()

        self._timer.join()
        self._indicator.join()

    def cancel(self):
        """Stop waiting now."""
        if self._timer is not None:
            self._timer.cancel()
        self.done.set()

    def __enter__(self) -> "ThinkingDelay":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.cancel()
        self.wait()


class AIPlayer(BasePlayer):
    """
    An AI that plays TicTacToe with a simple heuristic.

    It is not unbeatable - it will win if possible, block the opponent
    if needed, and otherwise go for the center and corners.
    """

    kind = PlayerKind.AI

    def __init__(
        self,
        mark: Mark = Mark.PLAYER_TWO,
        display: Optional[NullDisplay] = None,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI places (default: PLAYER_TWO)
            display: Where the thinking indicator is shown.
            config: Game settings (thinking delay range).
            rng: Random source for the thinking time.
        """
        super().__init__(mark, display)
        self.config = config or GameConfig()
        self.strategy = HeuristicStrategy(self.config)
        self.rng = rng or random.Random()

    def think_time(self) -> float:
        """Pick how long to pretend to think, in seconds."""
        return self.rng.uniform(self.config.THINK_MIN_SECONDS, self.config.THINK_MAX_SECONDS)

    def produce_move(self, board: Board) -> MoveResult:
        """
        Get the AI's move for the current position.

        The strategy runs while the thinking delay is still going; the
        move is only handed back once the delay is over.

        Args:
            board: Current board.

        Returns:
            Position of the chosen move, or None if the board is full.
        """
        delay = ThinkingDelay(
            self.think_time(),
            self.config.ANIMATION_INTERVAL_SECONDS,
            on_tick=self.display.thinking_tick
        )

        self.display.thinking_started(self)
        with delay:
            move = self.strategy.choose_move(board, self.mark)
        self.display.thinking_finished(self)

        logger.info(
            "%s plays %s after %.2fs (%s)",
            self, move, delay.duration, self.strategy.last_reason
        )
        return move
