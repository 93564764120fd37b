"""
Heuristic move selection for the AI player.

Not an optimal player: it wins when it can, blocks when it must, and
otherwise prefers the center, then the corners, then anything left.
"""

import logging
from typing import Optional

from .config import GameConfig
from .game_state import Board, Mark, Position

logger = logging.getLogger(__name__)


class HeuristicStrategy:
    """
    Picks a move by trying these rules in order:

    1. Win now (first winning cell in row-major order)
    2. Block the opponent's winning cell
    3. Take the center
    4. Take the first free corner: (1,1), (1,3), (3,1), (3,3)
    5. Take the first free cell
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

        # Which rule produced the last move (for debugging)
        self.last_reason: Optional[str] = None

    def choose_move(self, board: Board, mark: Mark) -> Optional[Position]:
        """
        Choose a move for the given mark.

        Every speculative placement is undone before this returns, so the
        board comes back exactly as it was passed in.

        Args:
            board: Current board.
            mark: The mark the AI is playing.

        Returns:
            The chosen position, or None if the board is full.
        """
        self.last_reason = None

        move = self.find_winning_move(board, mark)
        if move is not None:
            return self._decide(move, "win")

        move = self.find_winning_move(board, mark.opposite())
        if move is not None:
            return self._decide(move, "block")

        center = Position(*self.config.CENTER)
        if board.cell_at(center) == Mark.EMPTY:
            return self._decide(center, "center")

        for corner in self.config.CORNERS:
            corner = Position(*corner)
            if board.cell_at(corner) == Mark.EMPTY:
                return self._decide(corner, "corner")

        empty = board.empty_positions()
        if empty:
            return self._decide(empty[0], "any")

        logger.debug("No move available, board is full")
        return None

    def find_winning_move(self, board: Board, mark: Mark) -> Optional[Position]:
        """First empty position (row-major) where `mark` would complete a line."""
        for pos in board.empty_positions():
            with board.simulate(pos, mark) as placed:
                if placed and board.is_win():
                    return pos
        return None

    def _decide(self, pos: Position, reason: str) -> Position:
        self.last_reason = reason
        logger.debug("Strategy picked %s (%s)", pos, reason)
        return pos
