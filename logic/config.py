"""
Game configuration for console TicTacToe.
All the tunable settings for the board, input tokens, and AI pacing.
"""


class GameConfig:
    """
    Configuration class for game settings.

    Values are class-level defaults; pass keyword overrides to the
    constructor to change them for a single game (tests use this to
    switch the AI thinking delay off).
    """

    # ==================== BOARD SETTINGS ====================
    # Positions are 1-indexed on the fixed 3x3 board
    CENTER = (2, 2)

    # Corners are tried in this order by the AI
    CORNERS = [(1, 1), (1, 3), (3, 1), (3, 3)]

    # ==================== INPUT SETTINGS ====================
    # Typed (case-insensitive) to leave the game
    QUIT_TOKEN = "q"

    # ==================== AI PACING ====================
    # The AI "thinks" for a random time in this range (seconds)
    THINK_MIN_SECONDS = 0.5
    THINK_MAX_SECONDS = 5.0

    # How often the thinking indicator ticks (seconds)
    ANIMATION_INTERVAL_SECONDS = 0.25

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(type(self), name):
                raise AttributeError(f"Unknown config setting: {name}")
            setattr(self, name, value)

        if self.THINK_MIN_SECONDS < 0 or self.THINK_MAX_SECONDS < self.THINK_MIN_SECONDS:
            raise ValueError(
                f"Invalid think range: {self.THINK_MIN_SECONDS}-{self.THINK_MAX_SECONDS}"
            )

        if self.ANIMATION_INTERVAL_SECONDS <= 0:
            raise ValueError("ANIMATION_INTERVAL_SECONDS must be positive")
