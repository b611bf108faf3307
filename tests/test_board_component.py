import pytest

from match3.components.board import Board
from match3.errors import OutOfBoundsError


def test_board_from_rows_is_row_major():
    board = Board.from_rows([[1, 2, 3], [4, 5, 6]])
    assert board.width == 3 and board.height == 2
    assert board.grid == [1, 2, 3, 4, 5, 6]
    assert board.index(1, 0) == 3
    assert board.position(5) == (1, 2)
    assert board.size == 6


def test_board_rejects_inconsistent_grid():
    with pytest.raises(ValueError):
        Board(width=3, height=3, grid=[0] * 8)
    with pytest.raises(ValueError):
        Board(width=0, height=3, grid=[])
    with pytest.raises(ValueError):
        Board.from_rows([[1, 2], [3]])


def test_board_bounds_checks():
    board = Board.from_rows([[0, 1], [2, 3]])
    assert board.in_bounds(3)
    assert not board.in_bounds(4)
    assert not board.in_bounds(-1)
    with pytest.raises(OutOfBoundsError):
        board.check_index(4)
    with pytest.raises(IndexError):
        board.position(-1)
    with pytest.raises(OutOfBoundsError):
        board.index(0, 2)


def test_board_equality_ignores_lock():
    assert Board.from_rows([[1, 2]]) == Board(width=2, height=1, grid=[1, 2])
    board = Board.from_rows([[1, 2]])
    clone = board.copy()
    assert clone == board
    assert clone.grid is not board.grid


def test_board_pretty_marks_unfilled_cells():
    board = Board.empty(2, 2)
    board.grid[0] = 7
    assert board.pretty() == "7 .\n. ."
    assert list(board.rows()) == [[7, None], [None, None]]


def test_board_index_reports_row_and_column():
    board = Board.from_rows([[0, 1], [2, 3]])
    with pytest.raises(OutOfBoundsError) as excinfo:
        board.index(0, 2)
    assert excinfo.value.index == (0, 2)
    assert "(0, 2)" in str(excinfo.value)
    assert "index 2" not in str(excinfo.value)
