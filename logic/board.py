"""
Board for TicTacToe.
Owns the 3x3 grid of cells and derives the 8 winning lines from it.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass

import numpy as np

from .errors import OutOfRangeError, InvalidIdError, CellOccupiedError
from .game_state import Player


BOARD_SIZE = 3

# A cell is either empty (None) or holds a Player marker
CellState = Optional[Player]
Position = Tuple[int, int]


class LineOrientation(Enum):
    """Which way a line runs across the board."""
    ROW = "row"
    COLUMN = "column"
    DIAGONAL_MAIN = "diagonal_main"    # (0,0) -> (2,2)
    DIAGONAL_ANTI = "diagonal_anti"    # (0,2) -> (2,0)


@dataclass(frozen=True)
class Line:
    """
    A read-only view of three cells in a row, column or diagonal.

    The markers are captured when the line is built, so a Line always
    describes the board as it was at that moment.
    """
    orientation: LineOrientation
    index: int                               # Row/column number, 0 for diagonals
    positions: Tuple[Position, Position, Position]
    markers: Tuple[CellState, CellState, CellState]

    def empty_positions(self) -> List[Position]:
        """Positions on this line that are still empty."""
        return [pos for pos, marker in zip(self.positions, self.markers) if marker is None]

    def occupied_markers(self) -> List[Player]:
        """Markers placed on this line, in line order."""
        return [marker for marker in self.markers if marker is not None]


def _is_index(value) -> bool:
    """True for real integers (numpy ints included), never bools."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are addressed by (row, col) with 0 <= row, col <= 2, or by a
    1-based linear id (1-9) in row-major order: id = 3*row + col + 1.
    A cell goes from empty to occupied exactly once.
    """

    SIZE = BOARD_SIZE

    def __init__(self):
        self._cells = np.full((BOARD_SIZE, BOARD_SIZE), None, dtype=object)

    # ==================== ADDRESSING ====================

    @staticmethod
    def check_position(row, col) -> Position:
        """
        Make sure (row, col) is on the board.

        Returns:
            The position as plain ints.

        Raises:
            OutOfRangeError: If row or col is not an integer in 0-2.
        """
        if not (_is_index(row) and _is_index(col)):
            raise OutOfRangeError(row, col)
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise OutOfRangeError(row, col)
        return int(row), int(col)

    @staticmethod
    def position_of(cell_id) -> Position:
        """
        Convert a linear cell id (1-9) to (row, col).

        Raises:
            InvalidIdError: If the id is not an integer in 1-9.
        """
        if not _is_index(cell_id) or not 1 <= cell_id <= BOARD_SIZE * BOARD_SIZE:
            raise InvalidIdError(cell_id)
        return divmod(int(cell_id) - 1, BOARD_SIZE)

    @staticmethod
    def cell_id_of(row, col) -> int:
        """Convert (row, col) to the linear cell id (1-9)."""
        row, col = Board.check_position(row, col)
        return BOARD_SIZE * row + col + 1

    # ==================== ACCESSORS ====================

    def cell_at(self, row, col) -> CellState:
        """Get the marker at (row, col), or None if the cell is empty."""
        row, col = self.check_position(row, col)
        return self._cells[row, col]

    def cell_by_id(self, cell_id) -> CellState:
        """Get the marker at a linear cell id (1-9)."""
        row, col = self.position_of(cell_id)
        return self._cells[row, col]

    def is_available(self, row, col) -> bool:
        """True iff the cell is empty."""
        return self.cell_at(row, col) is None

    def is_full(self) -> bool:
        """True iff no cell is empty."""
        return not self.empty_cells()

    def empty_cells(self) -> List[Position]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self._cells[row, col] is None:
                    empty.append((row, col))
        return empty

    # ==================== MUTATION ====================

    def place(self, row, col, marker: Player) -> None:
        """
        Place a marker on an empty cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            marker: The player occupying the cell.

        Raises:
            OutOfRangeError: If the position is off the board.
            CellOccupiedError: If the cell already holds a marker.
        """
        row, col = self.check_position(row, col)
        occupant = self._cells[row, col]
        if occupant is not None:
            raise CellOccupiedError(row, col, occupant)
        self._cells[row, col] = marker

    # ==================== LINES ====================

    def all_lines(self) -> List[Line]:
        """
        Build the 8 lines from the current cells.

        Order is fixed: row 0, column 0, row 1, column 1, row 2, column 2,
        main diagonal, anti diagonal. Win detection reports the first
        matching line in this order.
        """
        lines = []
        for i in range(BOARD_SIZE):
            lines.append(self._line(LineOrientation.ROW, i, [(i, j) for j in range(BOARD_SIZE)]))
            lines.append(self._line(LineOrientation.COLUMN, i, [(j, i) for j in range(BOARD_SIZE)]))

        lines.append(self._line(
            LineOrientation.DIAGONAL_MAIN, 0, [(i, i) for i in range(BOARD_SIZE)]
        ))
        lines.append(self._line(
            LineOrientation.DIAGONAL_ANTI, 0, [(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)]
        ))
        return lines

    def _line(self, orientation: LineOrientation, index: int, positions: List[Position]) -> Line:
        return Line(
            orientation=orientation,
            index=index,
            positions=tuple(positions),
            markers=tuple(self._cells[row, col] for row, col in positions),
        )

    # ==================== COPIES ====================

    def snapshot(self) -> np.ndarray:
        """
        Copy of the grid that cannot be written to.

        Markers are immutable enum members, so a shallow array copy is a
        deep copy. Assigning into the result raises ValueError, and so
        does setting its writeable flag back to True: the result is a
        view of a private read-only copy.
        """
        grid = self._cells.copy()
        grid.flags.writeable = False
        return grid.view()

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._cells = self._cells.copy()
        return new_board

    @classmethod
    def from_rows(cls, rows) -> "Board":
        """
        Build a board from a 3x3 nested sequence of markers / None.

        Used to set up positions directly (tests, puzzles). Placement
        rules are not checked.
        """
        grid = np.empty((BOARD_SIZE, BOARD_SIZE), dtype=object)
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                grid[row, col] = rows[row][col]
        board = cls()
        board._cells = grid
        return board

    def to_rows(self) -> List[List[CellState]]:
        """The grid as nested lists."""
        return [[self._cells[row, col] for col in range(BOARD_SIZE)] for row in range(BOARD_SIZE)]

    def __repr__(self) -> str:
        rows = [
            "".join("-" if cell is None else str(cell) for cell in row)
            for row in self.to_rows()
        ]
        return f"Board({'/'.join(rows)})"


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    board.place(1, 1, Player.X)
    board.place(*Board.position_of(1), Player.O)
    print(board)

    try:
        board.place(1, 1, Player.O)
    except CellOccupiedError as e:
        print(f"Rejected: {e}")

    for line in board.all_lines():
        print(f"  {line.orientation.value} {line.index}: {line.markers}")

    print("\nBoard test done!")
