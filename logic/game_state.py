"""
Game state types for TicTacToe.
Players, recorded moves and the engine's status.
"""

from enum import Enum
from dataclasses import dataclass


class Player(Enum):
    """The two players (markers) in the game."""
    X = "x"
    O = "o"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @classmethod
    def parse(cls, value: str) -> "Player":
        """
        Look up a player by its marker letter.

        Args:
            value: "x" or "o" (any case). "0" is accepted for O.

        Returns:
            The matching Player.
        """
        text = str(value).strip().lower()
        if text == "0":
            text = "o"
        return cls(text)

    def __str__(self) -> str:
        return self.value.upper()


class GameStatus(Enum):
    """States of the game engine."""
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    TIED = "tied"


@dataclass(frozen=True)
class Move:
    """
    A move that was applied to the board.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # 1-based position in the game history

    @property
    def cell_id(self) -> int:
        """Linear 1-9 id of the cell."""
        return 3 * self.row + self.col + 1
