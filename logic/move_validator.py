"""
Move validator for console TicTacToe.
Parses typed moves and checks that they follow the rules.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .config import GameConfig
from .game_state import Board, Mark, Position


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    position: Optional[Position] = None
    error_message: Optional[str] = None
    is_quit: bool = False


class MoveValidator:
    """
    Validates TicTacToe moves typed at the console.

    Rules:
    1. Input must be two whole numbers separated by a single space ("2 3")
    2. Both numbers must be between 1 and 3
    3. Can only place on empty cells

    Nothing here raises for bad input; callers branch on the results.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def parse_move(self, text: Optional[str]) -> Tuple[Optional[Position], bool]:
        """
        Parse "row col" into a position. No range checking here.

        Args:
            text: Raw input line.

        Returns:
            (position, True) on success, (None, False) for any other shape.
        """
        if text is None:
            return None, False

        parts = text.split(" ")
        if len(parts) != 2:
            return None, False

        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            return None, False

        return Position(row, col), True

    def is_valid_position(self, pos: Position) -> bool:
        """Both coordinates are on the board."""
        return Board.in_bounds(pos)

    def is_quit(self, text: Optional[str]) -> bool:
        if text is None:
            return False
        return text.strip().lower() == self.config.QUIT_TOKEN.lower()

    def validate_move(self, text: Optional[str], board: Board) -> ValidationResult:
        """
        Validate a typed move against the board.

        Args:
            text: Raw input line.
            board: Current board (only queried).

        Returns:
            ValidationResult with is_valid, position and error_message.
            A quit request comes back invalid with is_quit set.
        """
        if self.is_quit(text):
            return ValidationResult(is_valid=False, is_quit=True)

        pos, ok = self.parse_move(text)
        if not ok:
            return ValidationResult(
                is_valid=False,
                error_message="Invalid input format. Please enter row and column (1-3) separated by space"
            )

        if not self.is_valid_position(pos):
            return ValidationResult(
                is_valid=False,
                error_message="Position must be between 1 and 3"
            )

        if board.cell_at(pos) != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid move - position {pos} is already taken"
            )

        # All checks passed!
        return ValidationResult(is_valid=True, position=pos)
