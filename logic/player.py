"""
Player abstraction shared by human and AI players.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

from .display import NullDisplay
from .game_state import Board, Mark, Position


class PlayerKind(Enum):
    """Who is behind a player."""
    HUMAN = "human"
    AI = "ai"


class _Quit:
    """Sentinel returned by produce_move() when the player wants to stop."""

    def __repr__(self) -> str:
        return "QUIT"


QUIT = _Quit()

MoveResult = Union[Position, _Quit, None]


class BasePlayer(ABC):
    """
    A player that can produce a move for the current board.

    The game only talks to players through produce_move() and the
    kind / is_automated fields, never by checking the concrete class.
    """

    kind: PlayerKind

    def __init__(self, mark: Mark, display: Optional[NullDisplay] = None):
        if mark == Mark.EMPTY:
            raise ValueError("A player needs PLAYER_ONE or PLAYER_TWO as mark")
        self.mark = mark
        self.display = display or NullDisplay()

    @property
    def is_automated(self) -> bool:
        return self.kind == PlayerKind.AI

    @property
    def symbol(self) -> str:
        return self.mark.symbol

    @abstractmethod
    def produce_move(self, board: Board) -> MoveResult:
        """
        Produce the next move. May block (on input or on a timer).

        Args:
            board: Current board. Players only look at it; speculative
                placements must be undone before returning.

        Returns:
            A position, QUIT if the player wants to stop, or None if no
            move is possible.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.mark.name})"
