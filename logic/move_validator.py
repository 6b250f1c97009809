"""
Move validation for TicTacToe.
Defines the move authority interface and the human (validate-only) variant.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple
from dataclasses import dataclass

from .board import Board
from .errors import InvalidMoveError, InvalidIdError, CellOccupiedError


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    row: Optional[int] = None
    col: Optional[int] = None
    error: Optional[InvalidMoveError] = None

    @property
    def position(self) -> Optional[Tuple[int, int]]:
        if not self.is_valid:
            return None
        return self.row, self.col

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveAuthority(ABC):
    """
    Decides or validates one placement per turn for a player.

    Authorities only ever see a copy of the board; they return
    coordinates and leave placing the marker to the game engine.
    """

    is_autonomous = False

    def validate(self, board: Board, row, col) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board (a copy).
            row: Row to place on (0-2).
            col: Column to place on (0-2).

        Returns:
            ValidationResult with the position, or the error.
        """
        try:
            row, col = board.check_position(row, col)
        except InvalidMoveError as e:
            return ValidationResult(is_valid=False, error=e)

        occupant = board.cell_at(row, col)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=CellOccupiedError(row, col, occupant)
            )

        return ValidationResult(is_valid=True, row=row, col=col)

    def validate_id(self, board: Board, cell_id) -> ValidationResult:
        """
        Validate a move given as a linear cell id.

        Args:
            board: Current board (a copy).
            cell_id: Cell number 1-9, as an int or numeric string.

        Returns:
            ValidationResult with the translated position, or the error.
        """
        try:
            row, col = board.position_of(self._parse_id(cell_id))
        except InvalidIdError as e:
            return ValidationResult(is_valid=False, error=e)
        return self.validate(board, row, col)

    @staticmethod
    def _parse_id(cell_id):
        if isinstance(cell_id, str):
            try:
                return int(cell_id.strip())
            except ValueError:
                raise InvalidIdError(cell_id) from None
        return cell_id

    @abstractmethod
    def describe(self) -> str:
        """Short name used in logs and listings."""


class HumanMoveAuthority(MoveAuthority):
    """
    Validates moves chosen by a person.

    Rules:
    1. Position must be on the board (0-2, or id 1-9)
    2. Can only place on empty cells
    """

    def describe(self) -> str:
        return "human"
