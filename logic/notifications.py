"""
Notifications published by the game engine.

The set is closed: seven kinds, each a frozen dataclass carrying raw
data (players, coordinates, counts, board snapshots). Nothing here is
pre-formatted for display.
"""

from enum import Enum
from typing import ClassVar, Optional, Tuple
from dataclasses import dataclass

import numpy as np

from .board import Line
from .game_state import GameStatus, Move, Player


class NotificationKind(Enum):
    """The kinds of notification an observer must handle."""
    INVALID_MOVE = "invalid_move"
    GAME_INACTIVE = "game_inactive"
    MOVE_MADE = "move_made"
    TURN_CHANGED = "turn_changed"
    GAME_WON = "game_won"
    GAME_TIED = "game_tied"
    GAME_RESET = "game_reset"

    @property
    def handler_name(self) -> str:
        """Name of the Observer method that receives this kind."""
        return f"on_{self.value}"


@dataclass(frozen=True)
class Notification:
    """Base class for all notifications."""
    kind: ClassVar[NotificationKind]


@dataclass(frozen=True)
class InvalidMove(Notification):
    """A move was rejected; the engine did not change."""
    kind: ClassVar[NotificationKind] = NotificationKind.INVALID_MOVE

    player: Player
    row: Optional[int]
    col: Optional[int]
    reason: str                        # InvalidMoveError.reason
    message: str
    cell_id: Optional[object] = None   # Set when the move came in as a linear id


@dataclass(frozen=True)
class GameInactive(Notification):
    """A move was submitted after the game ended."""
    kind: ClassVar[NotificationKind] = NotificationKind.GAME_INACTIVE

    status: GameStatus
    row: Optional[int] = None
    col: Optional[int] = None
    cell_id: Optional[object] = None   # Set when the move came in as a linear id


@dataclass(frozen=True, eq=False)
class MoveMade(Notification):
    """A marker was placed."""
    kind: ClassVar[NotificationKind] = NotificationKind.MOVE_MADE

    player: Player
    row: int
    col: int
    move_number: int
    board: np.ndarray                  # Read-only snapshot after the move

    @property
    def cell_id(self) -> int:
        return 3 * self.row + self.col + 1


@dataclass(frozen=True)
class TurnChanged(Notification):
    """The other player is now to move."""
    kind: ClassVar[NotificationKind] = NotificationKind.TURN_CHANGED

    player: Player


@dataclass(frozen=True, eq=False)
class GameWon(Notification):
    """The last move completed a line."""
    kind: ClassVar[NotificationKind] = NotificationKind.GAME_WON

    winner: Player
    moves: int
    board: np.ndarray
    line: Line
    history: Tuple[Move, ...] = ()


@dataclass(frozen=True, eq=False)
class GameTied(Notification):
    """The board filled up with no line completed."""
    kind: ClassVar[NotificationKind] = NotificationKind.GAME_TIED

    moves: int
    board: np.ndarray
    history: Tuple[Move, ...] = ()


@dataclass(frozen=True)
class GameReset(Notification):
    """A fresh game started."""
    kind: ClassVar[NotificationKind] = NotificationKind.GAME_RESET

    first_player: Player
