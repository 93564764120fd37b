"""
Game state management for console TicTacToe.
Defines the marks, positions, outcomes, and the 3x3 board itself.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, List, NamedTuple, Optional, Sequence

import numpy as np

from .win_checker import EMPTY_VALUE, WinChecker


BOARD_SIZE = 3


class Mark(IntEnum):
    """What a cell can hold."""
    EMPTY = EMPTY_VALUE
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    @property
    def symbol(self) -> str:
        """Display symbol: O for player one, X for player two, blank if empty."""
        return _SYMBOLS[self]

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.PLAYER_TWO if self == Mark.PLAYER_ONE else Mark.PLAYER_ONE

    @classmethod
    def from_symbol(cls, symbol: str) -> "Mark":
        """Parse a board symbol ("O", "X", or blank / "_" / ".")."""
        symbol = symbol.strip().upper()
        if symbol in ("", "_", "."):
            return cls.EMPTY
        for mark, sym in _SYMBOLS.items():
            if sym == symbol:
                return mark
        raise ValueError(f"Unknown board symbol: {symbol!r}")


_SYMBOLS = {
    Mark.EMPTY: " ",
    Mark.PLAYER_ONE: "O",
    Mark.PLAYER_TWO: "X",
}


class Position(NamedTuple):
    """A (row, col) board position, both 1-indexed."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass
class Move:
    """
    A move in the game.
    """
    position: Position      # Where the mark went
    mark: Mark              # Who made the move


class GameOutcome(Enum):
    """How a game ended. Produced exactly once per game."""
    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"
    DRAW = "draw"
    QUIT = "quit"

    @classmethod
    def win_for(cls, mark: Mark) -> "GameOutcome":
        """The winning outcome for the given player mark."""
        if mark == Mark.PLAYER_ONE:
            return cls.PLAYER_ONE_WINS
        if mark == Mark.PLAYER_TWO:
            return cls.PLAYER_TWO_WINS
        raise ValueError("EMPTY cannot win")

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None for a draw or quit."""
        if self == GameOutcome.PLAYER_ONE_WINS:
            return Mark.PLAYER_ONE
        if self == GameOutcome.PLAYER_TWO_WINS:
            return Mark.PLAYER_TWO
        return None


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are stored in a numpy grid (0-indexed internally) while every
    public method takes 1-indexed positions. A cell only ever goes from
    EMPTY to a player mark through place(), or back to EMPTY through
    undo() when the AI is trying out a move.
    """

    def __init__(self):
        self.grid = np.full((BOARD_SIZE, BOARD_SIZE), Mark.EMPTY.value, dtype=np.int8)
        self.win_checker = WinChecker()

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from row strings like "O X _" or "OX.".

        Args:
            rows: Three rows, each with three symbols, either separated
                by spaces or written back to back; "_" or "." mean empty.

        Returns:
            A new Board with those marks.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")

        board = cls()
        for row_index, row in enumerate(rows, start=1):
            row = row.replace("/", " ")
            tokens = row.split() if len(row.split()) == BOARD_SIZE else list(row)
            if len(tokens) != BOARD_SIZE:
                raise ValueError(f"Row {row_index} must have {BOARD_SIZE} cells: {row!r}")
            for col_index, token in enumerate(tokens, start=1):
                board.grid[row_index - 1, col_index - 1] = Mark.from_symbol(token).value
        return board

    @staticmethod
    def in_bounds(pos: Position) -> bool:
        """Check that both coordinates are in [1, 3]."""
        row, col = pos
        return 1 <= row <= BOARD_SIZE and 1 <= col <= BOARD_SIZE

    def place(self, pos: Position, mark: Mark) -> bool:
        """
        Place a mark at the given position.

        Args:
            pos: Position (1-indexed).
            mark: The player mark to place.

        Returns:
            True if the mark was placed, False if the position is out
            of range or already taken (the board is left unchanged).
        """
        if mark == Mark.EMPTY:
            return False

        if not self.in_bounds(pos):
            return False

        row, col = pos
        if self.grid[row - 1, col - 1] != Mark.EMPTY:
            return False

        self.grid[row - 1, col - 1] = mark.value
        return True

    def undo(self, pos: Position):
        """Reset a position to EMPTY. Out-of-range positions are ignored."""
        if not self.in_bounds(pos):
            return

        row, col = pos
        self.grid[row - 1, col - 1] = Mark.EMPTY.value

    @contextmanager
    def simulate(self, pos: Position, mark: Mark) -> Iterator[bool]:
        """
        Try a mark at a position and take it back on exit.

        Yields True if the speculative placement happened. The position
        is only undone if this call placed it, so an occupied cell is
        never cleared by mistake.

        Example:
            with board.simulate(pos, mark) as placed:
                if placed and board.is_win():
                    ...
        """
        placed = self.place(pos, mark)
        try:
            yield placed
        finally:
            if placed:
                self.undo(pos)

    def cell_at(self, pos: Position) -> Mark:
        """Get the mark at a position; EMPTY for positions off the board."""
        if not self.in_bounds(pos):
            return Mark.EMPTY

        row, col = pos
        return Mark(int(self.grid[row - 1, col - 1]))

    def symbol_at(self, pos: Position) -> str:
        return self.cell_at(pos).symbol

    def is_win(self) -> bool:
        """True if any row, column, or diagonal holds three of one mark."""
        return self.win_checker.check_winner(self.grid) is not None

    def is_full(self) -> bool:
        """True if all 9 cells are taken (a full board may still be a win)."""
        return self.win_checker.check_full(self.grid)

    def winner(self) -> Optional[Mark]:
        """The mark holding a completed line, or None."""
        value = self.win_checker.check_winner(self.grid)
        return None if value is None else Mark(value)

    def winning_line(self) -> Optional[List[Position]]:
        """The first completed line as 1-indexed positions, or None."""
        line = self.win_checker.get_winning_line(self.grid)
        if line is None:
            return None
        return [Position(row + 1, col + 1) for row, col in line]

    def positions(self) -> List[Position]:
        """All 9 positions in row-major order."""
        return [
            Position(row, col)
            for row in range(1, BOARD_SIZE + 1)
            for col in range(1, BOARD_SIZE + 1)
        ]

    def empty_positions(self) -> List[Position]:
        """
        Get all empty cells on the board.

        Returns:
            List of positions in row-major order.
        """
        return [pos for pos in self.positions() if self.cell_at(pos) == Mark.EMPTY]

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        rows = []
        for row in range(1, BOARD_SIZE + 1):
            rows.append(" ".join(
                self.symbol_at(Position(row, col)).replace(" ", "_")
                for col in range(1, BOARD_SIZE + 1)
            ))
        return " / ".join(rows)
