"""
Logic module for TicTacToe.
Handles the board, line evaluation, move authorities, the game engine
and its observer notifications.
"""

__version__ = "1.0.0"

from .game_state import Player, Move, GameStatus
from .board import Board, Line, LineOrientation
from .line_evaluator import LineEvaluator
from .move_validator import MoveAuthority, HumanMoveAuthority, ValidationResult
from .ai_player import AutonomousMoveAuthority
from .notifications import NotificationKind
from .observer_registry import Observer, ObserverRegistry
from .game_engine import GameEngine
from .config import GameConfig
