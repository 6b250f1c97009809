"""
CPU player for TicTacToe.
Takes a winning move when one exists, otherwise plays a random empty cell.
"""

import random
from typing import Optional, Tuple

from .board import Board
from .errors import NoMovesAvailableError
from .game_state import Player
from .line_evaluator import LineEvaluator
from .logging_config import get_logger
from .move_validator import MoveAuthority


logger = get_logger(__name__)


class AutonomousMoveAuthority(MoveAuthority):
    """
    A CPU that picks its own moves.

    Strategy:
    1. If one of its lines has two of its markers and one empty cell,
       play the empty cell and win.
    2. Otherwise pick uniformly at random among the empty cells.

    It does not block the opponent and never waits: any "thinking"
    pause is up to whoever calls choose_move.
    """

    is_autonomous = True

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """
        Initialize the CPU player.

        Args:
            rng: Random source for fallback moves. Built from seed if not given.
            seed: Seed for a new random source (ignored when rng is given).
        """
        self.rng = rng or random.Random(seed)
        self.evaluator = LineEvaluator()

    def describe(self) -> str:
        return "autonomous"

    def choose_move(self, board: Board, own_marker: Player) -> Tuple[int, int]:
        """
        Choose where to play.

        Args:
            board: Current board (a copy; never mutated here).
            own_marker: The marker this CPU plays.

        Returns:
            (row, col) of the chosen cell.

        Raises:
            NoMovesAvailableError: If the board is full.
        """
        line = self.evaluator.find_immediate_win_for(board, own_marker)
        if line is not None:
            move = line.empty_positions()[0]
            logger.debug(
                "%s completes %s %d at %s", own_marker, line.orientation.value, line.index, move
            )
            return move

        empty = board.empty_cells()
        if not empty:
            raise NoMovesAvailableError(f"No empty cells left for {own_marker}")

        move = self.rng.choice(empty)
        logger.debug("%s has no winning line, random move %s", own_marker, move)
        return move
