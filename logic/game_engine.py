"""
Game engine for TicTacToe.

Owns the board, whose turn it is and the move history. Every change is
published to the observer registry; the engine itself does no I/O.
"""

from typing import Dict, Optional, Tuple

import numpy as np

from .ai_player import AutonomousMoveAuthority
from .board import Board, Line
from .config import GameConfig
from .errors import ConfigurationError, EngineBusyError, InvalidMoveError
from .game_state import GameStatus, Move, Player
from .line_evaluator import LineEvaluator
from .logging_config import get_logger
from .move_validator import HumanMoveAuthority, MoveAuthority, ValidationResult
from .notifications import (
    Notification, InvalidMove, GameInactive, MoveMade, TurnChanged,
    GameWon, GameTied, GameReset,
)
from .observer_registry import ObserverRegistry


logger = get_logger(__name__)


class GameEngine:
    """
    The TicTacToe state machine.

    States:
    - AWAITING_MOVE: initial state after construction or reset
    - WON: a line was completed (terminal)
    - TIED: the board filled up with no line (terminal)

    Each accepted move notifies move_made, then exactly one of
    game_won, game_tied or turn_changed. Win is checked before tie.
    Rejected moves notify invalid_move or game_inactive and change nothing.
    Observers cannot submit moves or reset from inside a handler.
    """

    def __init__(
        self,
        authorities: Optional[Dict[Player, MoveAuthority]] = None,
        config: Optional[GameConfig] = None,
        registry: Optional[ObserverRegistry] = None,
    ):
        """
        Initialize the engine.

        Args:
            authorities: Move authority per player. Players not listed get
                the default from config (CPU for AUTONOMOUS_PLAYER, human otherwise).
            config: Game configuration.
            registry: Observer registry to publish to (a new one if omitted).
        """
        self.config = config or GameConfig()
        self.config.validate()

        self.registry = registry or ObserverRegistry()
        self.evaluator = LineEvaluator()

        self._authorities: Dict[Player, MoveAuthority] = {}
        for player in Player:
            if authorities and player in authorities:
                self._authorities[player] = authorities[player]
            elif player == self.config.AUTONOMOUS_PLAYER:
                self._authorities[player] = AutonomousMoveAuthority(seed=self.config.RANDOM_SEED)
            else:
                self._authorities[player] = HumanMoveAuthority()

        # True while observers are handling a notification
        self._dispatching = False
        self._start_new_game()

    def _start_new_game(self) -> None:
        self._board = Board()
        self._active_player = self.config.FIRST_PLAYER
        self._history = []
        self._status = GameStatus.AWAITING_MOVE
        self._winner: Optional[Player] = None
        self._winning_line: Optional[Line] = None

    # ==================== STATE ====================

    @property
    def board(self) -> Board:
        """A copy of the board. Changing it does not affect the game."""
        return self._board.copy()

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the grid."""
        return self._board.snapshot()

    @property
    def active_player(self) -> Player:
        return self._active_player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        """True until the game is won or tied."""
        return self._status == GameStatus.AWAITING_MOVE

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(self._history)

    @property
    def move_count(self) -> int:
        return len(self._history)

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def winning_line(self) -> Optional[Line]:
        return self._winning_line

    def authority_for(self, player: Player) -> MoveAuthority:
        return self._authorities[player]

    # ==================== CONFIGURATION ====================

    def set_authority(self, player: Player, authority: MoveAuthority) -> None:
        """
        Change who decides a player's moves.

        Only allowed between games: before the first move, or after the
        game has ended.

        Raises:
            ConfigurationError: If a game is in progress.
        """
        self._check_between_games()
        self._authorities[player] = authority
        logger.info("%s is now played by %s", player, authority.describe())

    def swap_authorities(self) -> None:
        """Swap the authorities of X and O (e.g. CPU takes the other marker)."""
        self._check_between_games()
        self._authorities[Player.X], self._authorities[Player.O] = (
            self._authorities[Player.O], self._authorities[Player.X]
        )
        logger.info(
            "Swapped authorities: X=%s, O=%s",
            self._authorities[Player.X].describe(),
            self._authorities[Player.O].describe(),
        )

    def _check_between_games(self) -> None:
        if self.is_active and self._history:
            raise ConfigurationError("Cannot change move authorities during a game")

    # ==================== MOVES ====================

    def submit_move(self, row, col) -> bool:
        """
        Try to play the active player's marker at (row, col).

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if the move was applied, False if it was rejected.

        Raises:
            EngineBusyError: If called from an observer handler.
        """
        self._check_not_dispatching("submit a move")
        if not self.is_active:
            self._notify(GameInactive(status=self._status, row=row, col=col))
            return False

        authority = self._authorities[self._active_player]
        result = authority.validate(self.board, row, col)
        return self._apply(result, row=row, col=col)

    def submit_cell_id(self, cell_id) -> bool:
        """
        Try to play the active player's marker at a linear cell id (1-9).

        Returns:
            True if the move was applied, False if it was rejected.

        Raises:
            EngineBusyError: If called from an observer handler.
        """
        self._check_not_dispatching("submit a move")
        if not self.is_active:
            self._notify(GameInactive(status=self._status, cell_id=cell_id))
            return False

        authority = self._authorities[self._active_player]
        result = authority.validate_id(self.board, cell_id)
        return self._apply(result, row=result.row, col=result.col, cell_id=cell_id)

    def request_autonomous_move(self) -> Optional[Tuple[int, int]]:
        """
        Let the active player's CPU authority choose and play a move.

        Returns:
            The (row, col) played, or None if the game is over.

        Raises:
            ConfigurationError: If the active player is not autonomous.
            EngineBusyError: If called from an observer handler.
        """
        self._check_not_dispatching("submit a move")
        if not self.is_active:
            self._notify(GameInactive(status=self._status))
            return None

        authority = self._authorities[self._active_player]
        if not isinstance(authority, AutonomousMoveAuthority):
            raise ConfigurationError(f"{self._active_player} is not played by the CPU")

        row, col = authority.choose_move(self.board, self._active_player)
        self.submit_move(row, col)
        return row, col

    def _apply(self, result: ValidationResult, row, col, cell_id=None) -> bool:
        player = self._active_player

        if not result.is_valid:
            self._reject(player, row, col, result.error, cell_id)
            return False

        row, col = result.position
        try:
            # The board re-checks even if an authority approved the move
            self._board.place(row, col, player)
        except InvalidMoveError as e:
            self._reject(player, row, col, e, cell_id)
            return False

        move = Move(player=player, row=row, col=col, move_number=len(self._history) + 1)
        self._history.append(move)
        logger.debug("Move %d: %s at (%d, %d)", move.move_number, player, row, col)

        self._notify(MoveMade(
            player=player,
            row=row,
            col=col,
            move_number=move.move_number,
            board=self._board.snapshot(),
        ))

        self._update_status()
        return True

    def _reject(self, player: Player, row, col, error: InvalidMoveError, cell_id) -> None:
        logger.debug("Rejected move by %s: %s", player, error)
        self._notify(InvalidMove(
            player=player,
            row=row,
            col=col,
            reason=error.reason,
            message=str(error),
            cell_id=cell_id,
        ))

    def _update_status(self) -> None:
        """Check for a win, then a tie, otherwise pass the turn."""
        line = self.evaluator.find_winning_line(self._board)
        if line is not None:
            self._status = GameStatus.WON
            self._winner = line.markers[0]
            self._winning_line = line
            logger.debug("%s wins on %s %d", self._winner, line.orientation.value, line.index)
            self._notify(GameWon(
                winner=self._winner,
                moves=len(self._history),
                board=self._board.snapshot(),
                line=line,
                history=self.history,
            ))
            return

        if self._board.is_full():
            self._status = GameStatus.TIED
            logger.debug("Tied after %d moves", len(self._history))
            self._notify(GameTied(
                moves=len(self._history),
                board=self._board.snapshot(),
                history=self.history,
            ))
            return

        self._active_player = self._active_player.opposite()
        self._notify(TurnChanged(player=self._active_player))

    # ==================== RESET ====================

    def reset(self) -> None:
        """
        Start a new game. Allowed at any point except from inside an
        observer handler; observers stay subscribed.

        Raises:
            EngineBusyError: If called from an observer handler.
        """
        self._check_not_dispatching("reset the game")
        self._start_new_game()
        logger.debug("Game reset, %s to move", self._active_player)
        self._notify(GameReset(first_player=self._active_player))

    def _check_not_dispatching(self, action: str) -> None:
        if self._dispatching:
            raise EngineBusyError(action)

    def _notify(self, notification: Notification) -> None:
        self._dispatching = True
        try:
            self.registry.notify(notification)
        finally:
            self._dispatching = False
