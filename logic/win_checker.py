"""
Win checker for console TicTacToe.
Checks a 3x3 grid for a completed line or a full board.
"""

from typing import Optional, List, Tuple

import numpy as np


# Value stored in the grid for an empty cell
EMPTY_VALUE = 0


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Works directly on the board's numpy grid (0-indexed, 0 = empty) so
    that it has no dependency on the Board class itself.

    Win condition: 3 identical non-empty marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) grid indices)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, grid: np.ndarray) -> Optional[int]:
        """
        Check if there's a winner.

        Stops at the first completed line.

        Args:
            grid: The 3x3 board grid.

        Returns:
            The winning mark value, or None if no line is complete.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(grid, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        grid: np.ndarray,
        line: List[Tuple[int, int]]
    ) -> Optional[int]:
        """
        Check if a single line has a winner.

        Args:
            grid: The 3x3 board grid.
            line: List of (row, col) grid indices to check.

        Returns:
            The mark value if all 3 cells hold it, None otherwise.
        """
        rows, cols = zip(*line)
        cells = grid[list(rows), list(cols)]

        if cells[0] == EMPTY_VALUE:
            return None

        if np.all(cells == cells[0]):
            return int(cells[0])

        return None

    def check_full(self, grid: np.ndarray) -> bool:
        """True if no cell of the grid is empty, whether or not someone won."""
        return bool(np.all(grid != EMPTY_VALUE))

    def get_winning_line(self, grid: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            grid: The 3x3 board grid.

        Returns:
            The winning line as list of (row, col) grid indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(grid, line) is not None:
                return line
        return None
