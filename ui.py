"""
TicTacToe console UI.
A text interface for the game: draws the board, prompts for moves,
and reports the result.

Shows:
- The 3x3 board (O for player one, X for player two)
- Whose turn it is and how to enter a move
- An animated indicator while the AI is thinking
- The outcome of the game
"""

import sys
from typing import Optional, TextIO

from logic.display import NullDisplay
from logic.game_state import Board, GameOutcome, Position


# ANSI: clear screen and move the cursor home
CLEAR_SCREEN = "\033[2J\033[H"


class ConsoleUI(NullDisplay):
    """
    Console display and input for the game.
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        clear_screen: bool = True,
        spinner: str = "|/-\\"
    ):
        """
        Initialize the UI.

        Args:
            out: Where to write (default: stdout).
            clear_screen: Clear the terminal before redrawing the board.
            spinner: Frames of the thinking animation.
        """
        self.out = out or sys.stdout
        self.clear_screen = clear_screen
        self.spinner = spinner
        self._frame = 0

    def _print(self, text: str = "", end: str = "\n"):
        print(text, end=end, file=self.out, flush=True)

    # ==================== INPUT ====================

    def read_line(self) -> Optional[str]:
        """Read one line from the console; None at end of input."""
        try:
            return input()
        except EOFError:
            return None

    def ask(self, prompt: str) -> Optional[str]:
        self._print(prompt, end="")
        return self.read_line()

    def ask_mode(self) -> Optional[str]:
        self._print("\n" + "=" * 60)
        self._print("   Choose a game mode")
        self._print("=" * 60)
        self._print("   1) Human vs Human")
        self._print("   2) Human vs AI")
        return self.ask("Your choice: ")

    def ask_play_again(self) -> bool:
        answer = self.ask("\nPlay again? (y/n): ")
        return answer is not None and answer.strip().lower() in ("y", "yes")

    # ==================== DISPLAY HOOKS ====================

    def show_message(self, message: str):
        self._print(message)

    def clear(self):
        if self.clear_screen:
            self._print(CLEAR_SCREEN, end="")

    def show_board(self, board: Board):
        """Draw the board with row/column numbers."""
        self._print("=" * 25)
        self._print("       Tic Tac Toe")
        self._print("=" * 25)
        self._print("\n    1   2   3")
        self._print("  ┌───┬───┬───┐")

        for row in range(1, 4):
            cells = " │ ".join(board.symbol_at(Position(row, col)) for col in range(1, 4))
            self._print(f"{row} │ {cells} │")

            if row < 3:
                self._print("  ├───┼───┼───┤")

        self._print("  └───┴───┴───┘")

    def show_turn(self, player):
        if player.is_automated:
            return
        self._print(
            f"\nPlayer {player.symbol} - Enter row (1-3) and column (1-3), "
            "separated by a space, or 'q' to quit: ",
            end=""
        )

    def show_invalid_input(self, message: str):
        self._print(f"⚠ {message}")

    def thinking_started(self, player):
        self._frame = 0
        self._print(f"\nAI Player ({player.symbol}) is thinking... ", end="")

    def thinking_tick(self):
        frame = self.spinner[self._frame % len(self.spinner)]
        self._frame += 1
        self._print(f"\b{frame}", end="")

    def thinking_finished(self, player):
        self._print("\bdone")

    def show_outcome(self, outcome: GameOutcome, winner=None):
        """Show the final game result."""
        self._print("\n" + "=" * 60)
        self._print("   GAME OVER!")
        self._print("=" * 60)

        if outcome == GameOutcome.DRAW:
            self._print("\n🤝 It's a draw! Good game!")
        elif outcome == GameOutcome.QUIT:
            self._print("\nGame quit by user.")
        elif winner is not None and winner.is_automated:
            self._print("\n🤖 AI wins! Better luck next time!")
        else:
            self._print(f"\n🏆 Player {outcome.winner.symbol} has won the game!")

        self._print("\n" + "=" * 60)
