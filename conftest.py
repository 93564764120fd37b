import pytest

from logic.config import GameConfig
from logic.display import NullDisplay


@pytest.fixture
def fast_config():
    """Config with the AI thinking delay switched off."""
    return GameConfig(
        THINK_MIN_SECONDS=0.0,
        THINK_MAX_SECONDS=0.0,
        ANIMATION_INTERVAL_SECONDS=0.01,
    )


def scripted(*lines):
    """Input source that returns the given lines, then None (end of input)."""
    remaining = iter(lines)
    return lambda: next(remaining, None)


class RecordingDisplay(NullDisplay):
    """Display that remembers every hook call."""

    def __init__(self):
        self.calls = []

    def show_message(self, message):
        self.calls.append(("message", message))

    def show_board(self, board):
        self.calls.append(("board", str(board)))

    def show_turn(self, player):
        self.calls.append(("turn", player.mark))

    def show_invalid_input(self, message):
        self.calls.append(("invalid", message))

    def show_outcome(self, outcome, winner=None):
        self.calls.append(("outcome", outcome, winner))

    def thinking_started(self, player):
        self.calls.append(("thinking_started", player.mark))

    def thinking_tick(self):
        self.calls.append(("tick",))

    def thinking_finished(self, player):
        self.calls.append(("thinking_finished", player.mark))

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def recording_display():
    return RecordingDisplay()
