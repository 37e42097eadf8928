"""
Tests for the locked-cell board.
"""
import numpy as np
import pytest

from tsr_tetris.game import BASE_SHAPES, Board, EMPTY, Piece, TetrominoType


def o_piece(x, y):
    return Piece(TetrominoType.O, BASE_SHAPES[TetrominoType.O].copy(), x, y)


class TestBoardBasics:
    """Test board creation and reset."""

    def test_board_creation(self):
        board = Board()
        assert board.width == 10
        assert board.height == 20
        assert board.grid.shape == (20, 10)
        assert np.all(board.grid == EMPTY)

    def test_invalid_dimensions(self):
        with pytest.raises(ValueError):
            Board(0, 20)

    def test_reset(self):
        board = Board()
        board.lock(o_piece(0, 18))
        board.reset()
        assert np.all(board.grid == EMPTY)
        assert board.grid.shape == (20, 10)

    def test_snapshot_is_a_copy(self):
        board = Board()
        snap = board.snapshot()
        snap[0, 0] = 5
        assert board.grid[0, 0] == EMPTY


class TestOccupancy:
    """Test the collision view of the board."""

    def test_walls_and_floor_are_occupied(self):
        board = Board()
        assert board.is_occupied(-1, 5)
        assert board.is_occupied(10, 5)
        assert board.is_occupied(3, 20)

    def test_above_top_is_open(self):
        board = Board()
        assert not board.is_occupied(0, -1)
        assert not board.is_occupied(9, -3)

    def test_walls_still_block_above_top(self):
        board = Board()
        assert board.is_occupied(-1, -1)
        assert board.is_occupied(10, -2)

    def test_locked_cell_is_occupied(self):
        board = Board()
        assert not board.is_occupied(4, 19)
        board.grid[19, 4] = 3
        assert board.is_occupied(4, 19)


class TestLock:
    """Test transferring piece cells into the grid."""

    def test_lock_writes_identifier(self):
        board = Board()
        board.lock(o_piece(4, 18))
        for x, y in [(4, 18), (5, 18), (4, 19), (5, 19)]:
            assert board.grid[y, x] == int(TetrominoType.O)
        assert int(np.count_nonzero(board.grid)) == 4

    def test_lock_drops_cells_above_top(self):
        board = Board()
        board.lock(o_piece(0, -1))
        assert board.grid[0, 0] == int(TetrominoType.O)
        assert board.grid[0, 1] == int(TetrominoType.O)
        assert int(np.count_nonzero(board.grid)) == 2


class TestLineClear:
    """Test full-row detection and gravity-by-deletion."""

    def test_detect_rows_two_and_five(self):
        board = Board()
        board.grid[2, :] = 1
        board.grid[5, :] = 2
        board.grid[7, :9] = 1  # one gap
        assert board.detect_full_rows() == [5, 2]

    def test_detect_nothing_on_empty_board(self):
        assert Board().detect_full_rows() == []

    def test_clear_rows_preserves_order(self):
        board = Board()
        board.grid[2, :] = 1
        board.grid[5, :] = 1
        board.grid[0, 0] = 3
        board.grid[3, 0] = 4
        board.grid[4, 9] = 6
        board.grid[19, 0] = 5

        cleared = board.clear_rows(board.detect_full_rows())

        assert cleared == 2
        assert board.grid.shape == (20, 10)
        assert np.all(board.grid[0:2] == EMPTY)
        assert board.grid[2, 0] == 3
        assert board.grid[4, 0] == 4
        assert board.grid[5, 9] == 6
        assert board.grid[19, 0] == 5
        assert board.detect_full_rows() == []

    def test_clear_adjacent_bottom_rows(self):
        board = Board()
        board.grid[18, :] = 1
        board.grid[19, :] = 1
        board.grid[17, 3] = 2
        board.clear_rows([19, 18])
        assert board.grid[19, 3] == 2
        assert int(np.count_nonzero(board.grid)) == 1

    def test_clear_nothing(self):
        board = Board()
        board.grid[10, 0] = 1
        before = board.snapshot()
        assert board.clear_rows([]) == 0
        assert np.array_equal(board.grid, before)

    def test_duplicate_indices_count_once(self):
        board = Board()
        board.grid[19, :] = 1
        assert board.clear_rows([19, 19]) == 1
        assert board.grid.shape == (20, 10)
