"""
Display hooks used by the game and its players.

The core never prints. Anything that wants to show the game (the
console UI, a test recorder) subclasses NullDisplay and overrides the
hooks it cares about.
"""

from typing import Optional


class NullDisplay:
    """A display that shows nothing. Every hook is a no-op."""

    def show_message(self, message: str):
        pass

    def clear(self):
        pass

    def show_board(self, board):
        pass

    def show_turn(self, player):
        pass

    def show_invalid_input(self, message: str):
        pass

    def show_outcome(self, outcome, winner: Optional[object] = None):
        pass

    def thinking_started(self, player):
        pass

    def thinking_tick(self):
        pass

    def thinking_finished(self, player):
        pass
