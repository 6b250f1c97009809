"""
Line evaluation for TicTacToe.
Checks lines for a winner and for "one move from winning" positions.
"""

from typing import Optional

from .board import Board, Line
from .game_state import Player


class LineEvaluator:
    """
    Evaluates ownership of the 8 lines of a board.

    Win condition: 3 markers of the same player in a row
    (horizontally, vertically, or diagonally).

    Global queries walk Board.all_lines() in its fixed order and return
    the first match. The evaluator assumes nothing about whose turn it
    is or how many winners a board could have.
    """

    @staticmethod
    def is_won_by(line: Line, marker: Player) -> bool:
        """True iff all 3 cells hold exactly this marker."""
        return all(cell == marker for cell in line.markers)

    @staticmethod
    def has_exactly_one_empty_and_owner_holds_rest(line: Line, marker: Player) -> bool:
        """
        True iff the marker can complete this line with one placement.

        Exactly one cell must be empty and the other two must both hold
        the marker. A line with two empties is never a completion.
        """
        if len(line.empty_positions()) != 1:
            return False
        return all(cell == marker for cell in line.occupied_markers())

    def find_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the first line won by any marker.

        Args:
            board: The board to check.

        Returns:
            The winning Line, or None if no line is complete.
        """
        for line in board.all_lines():
            first = line.markers[0]
            if first is not None and self.is_won_by(line, first):
                return line
        return None

    def find_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The marker owning the first won line, or None.
        """
        line = self.find_winning_line(board)
        if line is None:
            return None
        return line.markers[0]

    def find_immediate_win_for(self, board: Board, marker: Player) -> Optional[Line]:
        """
        Get the first line the marker can complete on its next move.

        Args:
            board: The board to check.
            marker: The player looking for a win.

        Returns:
            The Line with one empty cell and two of the marker's, or None.
        """
        for line in board.all_lines():
            if self.has_exactly_one_empty_and_owner_holds_rest(line, marker):
                return line
        return None

    def is_tie(self, board: Board) -> bool:
        """
        Check if the board is a tie.

        A tie is a full board with no won line. No winner is looked up
        beyond find_winner returning None.
        """
        return self.find_winner(board) is None and board.is_full()
