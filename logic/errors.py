"""
Exceptions for the TicTacToe engine.

Board and move authorities raise these; the game engine turns the
move-related ones into invalid_move notifications instead of letting
them reach the caller.
"""


class TicTacToeError(Exception):
    """Base class for every error raised by the engine."""


class InvalidMoveError(TicTacToeError):
    """A placement that cannot be applied to the board."""

    reason = "invalid_move"


class OutOfRangeError(InvalidMoveError):
    """Row or column outside 0-2."""

    reason = "out_of_range"

    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"Invalid position ({row!r}, {col!r}). Must be 0-2.")


class InvalidIdError(InvalidMoveError):
    """Linear cell id outside 1-9, or not a number at all."""

    reason = "invalid_id"

    def __init__(self, cell_id):
        self.cell_id = cell_id
        super().__init__(f"Invalid cell id {cell_id!r}. Must be 1-9.")


class CellOccupiedError(InvalidMoveError):
    """Cell already holds a marker."""

    reason = "cell_occupied"

    def __init__(self, row: int, col: int, occupant):
        self.row = row
        self.col = col
        self.occupant = occupant
        super().__init__(f"Cell ({row}, {col}) is already occupied by {occupant}")


class NoMovesAvailableError(TicTacToeError):
    """Autonomous authority asked to move on a full board."""


class DuplicateObserverNameError(TicTacToeError):
    """An observer is already subscribed under this name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Observer '{name}' is already subscribed")


class ConfigurationError(TicTacToeError):
    """Invalid setup: bad config values, or reconfiguring mid-game."""


class UnknownLanguageError(ConfigurationError):
    """Language code with no translation table and no fallback."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"No translations for language {code!r}")


class EngineBusyError(TicTacToeError):
    """A move or reset was requested from inside an observer handler."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Cannot {action} while observers are being notified")
