"""
Logic module for t4 - tiny tic tac toe.
Handles game state, rules, and the AI players.
"""

__version__ = "1.0.0"

from .board import Cell, Player, GameStatus, WINNING_LINES
from .game_state import GameState
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import (
    GameMode, MoveSelector, RandomSelector, SimpleSelector, PerfectSelector,
    create_selector
)
from .config import GameConfig
