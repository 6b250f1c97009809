"""
Console observers for TicTacToe.

Four renderings of the same notification stream: minimalist, decorated,
debug and silent. Each one writes through an output callable (print by
default) in the language it was given.
"""

import json
from typing import Callable, List, Optional

import numpy as np

from logic.errors import ConfigurationError
from logic.notifications import (
    InvalidMove, GameInactive, MoveMade, TurnChanged, GameWon, GameTied, GameReset,
)
from logic.observer_registry import Observer
from .localization import Language, ENGLISH


Output = Callable[[str], None]


def cell_symbol(cell, empty: str = " ") -> str:
    """Display character for a cell: 'X', 'O' or the empty placeholder."""
    return empty if cell is None else str(cell)


def board_rows(board: np.ndarray, empty: str = " ") -> List[List[str]]:
    """The snapshot as nested lists of display characters."""
    return [[cell_symbol(cell, empty) for cell in row] for row in board]


class ConsoleObserver(Observer):
    """
    Shared plumbing for the console observers.

    Subclasses implement the seven handlers and display_board.
    """

    KIND = "console"

    def __init__(self, language: Language = ENGLISH, out: Optional[Output] = None):
        """
        Args:
            language: Translation table for messages.
            out: Where lines go (default: print).
        """
        self.language = language
        self.out = out or print

    @property
    def kind(self) -> str:
        return f"{self.KIND} ({self.language.code})"

    def say(self, key: str, **values) -> None:
        self.out(self.language.text(key, **values))

    def orientation_name(self, event: GameWon) -> str:
        return self.language.text(f"orientation_{event.line.orientation.value}")

    def display_board(self, board: np.ndarray) -> None:
        """Render a board snapshot."""
        self.out(self.language.text("board_header"))
        self.out(self.language.text("cell_separator"))
        for index, row in enumerate(board_rows(board)):
            self.out(f"{index}| {' | '.join(row)} |")
            self.out(self.language.text("cell_separator"))


class MinimalistObserver(ConsoleObserver):
    """Just the essentials: one line per event and the plain board."""

    KIND = "minimalist"

    def on_invalid_move(self, event: InvalidMove) -> None:
        self.say("invalid_move")

    def on_game_inactive(self, event: GameInactive) -> None:
        self.say("game_inactive")

    def on_move_made(self, event: MoveMade) -> None:
        self.say("move_made", player=event.player, row=event.row, col=event.col)
        self.display_board(event.board)

    def on_turn_changed(self, event: TurnChanged) -> None:
        self.say("turn", player=event.player)

    def on_game_won(self, event: GameWon) -> None:
        self.say("winner", player=event.winner)

    def on_game_tied(self, event: GameTied) -> None:
        self.say("tied")

    def on_game_reset(self, event: GameReset) -> None:
        self.say("reset")


class DecoratedObserver(ConsoleObserver):
    """Emoji and box drawing."""

    KIND = "decorated"

    MARKERS = {"X": "❌", "O": "⭕", " ": "🔲"}

    def on_invalid_move(self, event: InvalidMove) -> None:
        self.out(f"🚫 {self.language.text('invalid_move')} 🚫")

    def on_game_inactive(self, event: GameInactive) -> None:
        self.out(f"🚫 {self.language.text('game_inactive')} 🚫")

    def on_move_made(self, event: MoveMade) -> None:
        text = self.language.text("move_made", player=event.player, row=event.row, col=event.col)
        self.out(f"🎯 {text}")
        self.display_board(event.board)

    def on_turn_changed(self, event: TurnChanged) -> None:
        self.out(f"✨ {self.language.text('turn', player=event.player)} ✨")

    def on_game_won(self, event: GameWon) -> None:
        self.out("🎊" * 20)
        self.out(f"🎉 {self.language.text('winner', player=event.winner)} 🎉")
        self.say("moves", count=event.moves)
        self.say("winning_line", orientation=self.orientation_name(event), index=event.line.index)
        self.out("🎊" * 20)

    def on_game_tied(self, event: GameTied) -> None:
        self.out("🌟" * 15)
        self.out(f"💫 {self.language.text('tied')} 💫")
        self.say("moves", count=event.moves)
        self.out("🌟" * 15)

    def on_game_reset(self, event: GameReset) -> None:
        self.out(f"🔄 {self.language.text('reset')} 🔄")

    def display_board(self, board: np.ndarray) -> None:
        self.out("\n" + "═" * 20)
        self.out("    0     1     2")
        self.out("  ┌─────┬─────┬─────┐")
        for i, row in enumerate(board_rows(board)):
            decorated = [self.MARKERS[cell] for cell in row]
            self.out(f"{i} │ {'  │  '.join(decorated)} │")
            if i < 2:
                self.out("  ├─────┼─────┼─────┤")
        self.out("  └─────┴─────┴─────┘")
        self.out("═" * 20 + "\n")


class DebugObserver(ConsoleObserver):
    """Technical output: raw coordinates, board arrays and move history."""

    KIND = "debug"

    def __init__(self, language: Language = ENGLISH, out: Optional[Output] = None):
        super().__init__(language, out)
        self.last_board: Optional[np.ndarray] = None

    @staticmethod
    def board_json(board: np.ndarray) -> str:
        return json.dumps(board_rows(board, empty=""))

    def on_invalid_move(self, event: InvalidMove) -> None:
        self.out(
            f"[DEBUG] INVALID MOVE - Player: {event.player}, "
            f"Position: [{event.row},{event.col}], Id: {event.cell_id}, Reason: {event.reason}"
        )
        if self.last_board is not None:
            self.out(f"[DEBUG] Current board: {self.board_json(self.last_board)}")

    def on_game_inactive(self, event: GameInactive) -> None:
        self.out(f"[DEBUG] GAME INACTIVE - Status: {event.status.value}, "
                 f"Attempted: [{event.row},{event.col}], Id: {event.cell_id}")

    def on_move_made(self, event: MoveMade) -> None:
        self.last_board = event.board
        self.out(
            f"[DEBUG] MOVE EXECUTED - Player: {event.player}, "
            f"Position: [{event.row},{event.col}], Move #{event.move_number}"
        )
        self.display_board(event.board)

    def on_turn_changed(self, event: TurnChanged) -> None:
        self.out(f"[DEBUG] {self.language.text('turn', player=event.player)}")
        if self.last_board is not None:
            self.out(f"[DEBUG] Board state: {self.board_json(self.last_board)}")

    def on_game_won(self, event: GameWon) -> None:
        self.out(f"[DEBUG] GAME WON - Winner: {event.winner}, Total moves: {event.moves}")
        self.out(f"[DEBUG] Winning line: {event.line.orientation.value} {event.line.index} "
                 f"{list(event.line.positions)}")
        self.out(f"[DEBUG] Final board: {self.board_json(event.board)}")
        self.out_history(event.history)

    def on_game_tied(self, event: GameTied) -> None:
        self.out(f"[DEBUG] GAME TIED - Total moves: {event.moves}")
        self.out(f"[DEBUG] Final board: {self.board_json(event.board)}")
        self.out_history(event.history)

    def on_game_reset(self, event: GameReset) -> None:
        self.last_board = None
        self.out(f"[DEBUG] GAME RESET - First player: {event.first_player}")

    def out_history(self, history) -> None:
        moves = [f"{move.player}@({move.row},{move.col})" for move in history]
        self.out(f"[DEBUG] Move history: {', '.join(moves)}")

    def display_board(self, board: np.ndarray) -> None:
        self.out("[DEBUG] Board visualization:")
        super().display_board(board)
        self.out(f"[DEBUG] Board array: {self.board_json(board)}")


class SilentObserver(ConsoleObserver):
    """Keeps a game log and only prints it when the game ends."""

    KIND = "silent"

    def __init__(self, language: Language = ENGLISH, out: Optional[Output] = None):
        super().__init__(language, out)
        self.log: List[str] = []

    def on_invalid_move(self, event: InvalidMove) -> None:
        pass

    def on_game_inactive(self, event: GameInactive) -> None:
        pass

    def on_move_made(self, event: MoveMade) -> None:
        self.log.append(f"MOVE: {event.player} -> [{event.row},{event.col}]")

    def on_turn_changed(self, event: TurnChanged) -> None:
        pass

    def on_game_won(self, event: GameWon) -> None:
        self.log.append(f"WIN: {event.winner} in {event.moves} moves")
        self.print_log()

    def on_game_tied(self, event: GameTied) -> None:
        self.log.append(f"TIE: after {event.moves} moves")
        self.print_log()

    def on_game_reset(self, event: GameReset) -> None:
        self.log = []

    def display_board(self, board: np.ndarray) -> None:
        pass

    def print_log(self) -> None:
        self.out("📋 GAME LOG:")
        self.out("─" * 30)
        for entry in self.log:
            self.out(entry)
        self.out("─" * 30)
        self.log = []

    def detach(self) -> None:
        self.log = []


OBSERVER_TYPES = {
    "minimalist": MinimalistObserver,
    "decorated": DecoratedObserver,
    "debug": DebugObserver,
    "silent": SilentObserver,
}


def create_observer(kind: str, language: Language = ENGLISH, out: Optional[Output] = None) -> ConsoleObserver:
    """
    Build a console observer by name.

    Args:
        kind: One of "minimalist", "decorated", "debug", "silent".
        language: Translation table.
        out: Output callable (default: print).

    Raises:
        ConfigurationError: If the kind is unknown.
    """
    observer_class = OBSERVER_TYPES.get(kind)
    if observer_class is None:
        raise ConfigurationError(
            f"UI type '{kind}' not supported (choose from {', '.join(OBSERVER_TYPES)})"
        )
    return observer_class(language, out)
