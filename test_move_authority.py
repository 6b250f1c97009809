"""Tests for the human and CPU move authorities."""

import random

import pytest

from logic.ai_player import AutonomousMoveAuthority
from logic.board import Board
from logic.errors import OutOfRangeError, InvalidIdError, CellOccupiedError, NoMovesAvailableError
from logic.game_state import Player
from logic.move_validator import HumanMoveAuthority


X, O = Player.X, Player.O
_ = None


class TestHumanMoveAuthority:

    def setup_method(self):
        self.authority = HumanMoveAuthority()
        self.board = Board.from_rows([[X, _, _], [_, O, _], [_, _, _]])

    def test_valid_move(self):
        result = self.authority.validate(self.board, 2, 2)
        assert result.is_valid
        assert result.position == (2, 2)
        assert result.error is None

    def test_occupied_cell(self):
        result = self.authority.validate(self.board, 1, 1)
        assert not result.is_valid
        assert isinstance(result.error, CellOccupiedError)
        assert result.position is None
        assert "occupied" in result.error_message

    def test_out_of_range(self):
        result = self.authority.validate(self.board, 5, 5)
        assert not result.is_valid
        assert isinstance(result.error, OutOfRangeError)

    @pytest.mark.parametrize("cell_id,expected", [(3, (0, 2)), ("9", (2, 2)), (" 4 ", (1, 0))])
    def test_valid_ids(self, cell_id, expected):
        result = self.authority.validate_id(self.board, cell_id)
        assert result.is_valid
        assert result.position == expected

    @pytest.mark.parametrize("cell_id", [0, 10, "abc", "", None, 4.5])
    def test_invalid_ids(self, cell_id):
        result = self.authority.validate_id(self.board, cell_id)
        assert not result.is_valid
        assert isinstance(result.error, InvalidIdError)

    def test_id_of_occupied_cell(self):
        result = self.authority.validate_id(self.board, 5)
        assert isinstance(result.error, CellOccupiedError)

    def test_validation_does_not_touch_board(self):
        self.authority.validate(self.board, 2, 2)
        assert self.board.cell_at(2, 2) is None

    def test_is_not_autonomous(self):
        assert not self.authority.is_autonomous
        assert self.authority.describe() == "human"


class TestAutonomousMoveAuthority:

    def test_takes_winning_move(self):
        cpu = AutonomousMoveAuthority(seed=1)
        board = Board.from_rows([[O, O, _], [_, X, _], [X, _, _]])
        assert cpu.choose_move(board, O) == (0, 2)

    def test_always_completes_when_possible(self):
        board = Board.from_rows([[X, _, _], [O, X, _], [O, _, _]])
        for seed in range(50):
            cpu = AutonomousMoveAuthority(seed=seed)
            assert cpu.choose_move(board, X) == (2, 2)

    def test_every_completion_shape(self):
        """For any line with two own markers and one gap, the gap is chosen."""
        template = Board()
        for line in template.all_lines():
            for gap in line.positions:
                board = Board()
                for pos in line.positions:
                    if pos != gap:
                        board.place(*pos, O)
                cpu = AutonomousMoveAuthority(seed=3)
                assert cpu.choose_move(board, O) == gap

    def test_random_move_is_an_empty_cell(self):
        board = Board.from_rows([[X, O, X], [_, O, _], [_, X, _]])
        empty = set(board.empty_cells())
        for seed in range(30):
            assert AutonomousMoveAuthority(seed=seed).choose_move(board, O) in empty

    def test_random_choice_uses_injected_rng(self):
        board = Board.from_rows([[X, _, _], [_, _, _], [_, _, _]])
        expected = random.Random(42).choice(board.empty_cells())
        cpu = AutonomousMoveAuthority(rng=random.Random(42))
        assert cpu.choose_move(board, O) == expected

    def test_does_not_block_opponent(self):
        """No own completion: falls back to random, even if X threatens."""
        board = Board.from_rows([[X, X, _], [_, O, _], [_, _, _]])
        moves = {AutonomousMoveAuthority(seed=s).choose_move(board, O) for s in range(60)}
        assert len(moves) > 1

    def test_does_not_mutate_board(self):
        board = Board.from_rows([[O, O, _], [_, _, _], [_, _, _]])
        AutonomousMoveAuthority(seed=0).choose_move(board, O)
        assert board.cell_at(0, 2) is None

    def test_full_board_raises(self):
        board = Board.from_rows([[X, X, O], [O, O, X], [X, X, O]])
        with pytest.raises(NoMovesAvailableError):
            AutonomousMoveAuthority(seed=0).choose_move(board, X)

    def test_validates_like_a_human(self):
        cpu = AutonomousMoveAuthority(seed=0)
        assert cpu.is_autonomous
        board = Board.from_rows([[X, _, _], [_, _, _], [_, _, _]])
        assert not cpu.validate(board, 0, 0).is_valid
