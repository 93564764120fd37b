"""
Logic module for console TicTacToe.
Handles the board, rules, players, AI opponent, and the turn loop.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import Board, GameOutcome, Mark, Move, Position
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .strategy import HeuristicStrategy
from .display import NullDisplay
from .player import BasePlayer, PlayerKind, QUIT
from .human_player import HumanPlayer
from .ai_player import AIPlayer, ThinkingDelay
from .game import Game, GameMode, GameStatus, InvalidOperationError
