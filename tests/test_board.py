from conftest import fill_row
from tetris_board import Board
from tetris_piece import Piece


def test_reset_gives_empty_grid(board):
    fill_row(board, 19)
    board.reset()
    assert len(board.grid) == 20
    assert all(len(r) == 10 for r in board.grid)
    assert all(cell is None for r in board.grid for cell in r)


def test_is_valid_rejects_out_of_bounds(board):
    shape = [[1, 1]]
    assert board.is_valid(shape, 0, 0)
    assert board.is_valid(shape, 8, 19)
    assert not board.is_valid(shape, -1, 0)
    assert not board.is_valid(shape, 9, 0)
    assert not board.is_valid(shape, 0, 20)


def test_is_valid_allows_cells_above_the_top(board):
    assert board.is_valid([[1], [1], [1]], 4, -2)


def test_is_valid_ignores_empty_matrix_cells(board):
    # column 10 only has a zero in it
    assert board.is_valid([[1, 0]], 9, 0)


def test_is_valid_detects_fixed_cells(board):
    board.grid[5][3] = "Z"
    assert not board.is_valid([[1]], 3, 5)
    assert board.is_valid([[0, 1]], 2, 5) is False
    assert board.is_valid([[1]], 4, 5)


def test_fix_writes_type_and_skips_hidden_rows(board):
    p = Piece("T", [[0, 1, 0], [1, 1, 1]], 3, -1)
    board.fix(p)
    assert board.grid[0][3:6] == ["T", "T", "T"]
    assert sum(cell is not None for r in board.grid for cell in r) == 3


def test_is_row_full(board):
    fill_row(board, 19)
    fill_row(board, 18, gap=4)
    assert board.is_row_full(19)
    assert not board.is_row_full(18)
    assert not board.is_row_full(20)
    assert not board.is_row_full(-1)


def test_clear_lines_without_full_rows_is_a_no_op(board):
    fill_row(board, 19, gap=0)
    board.grid[10][2] = "S"
    before = [r[:] for r in board.grid]
    info = board.clear_lines()
    assert info.count == 0
    assert info.indices == []
    assert board.grid == before


def test_clear_three_bottom_rows_shifts_partial_row_down(board):
    fill_row(board, 17, "I")
    fill_row(board, 18, "J")
    fill_row(board, 19, "L")
    board.grid[16][0] = "T"
    board.grid[16][7] = "O"
    partial = board.grid[16][:]

    info = board.clear_lines()

    assert info.count == 3
    assert info.indices == [19, 18, 17]
    assert board.grid[19] == partial
    for r in range(0, 3):
        assert all(cell is None for cell in board.grid[r])


def test_clear_lines_reports_pre_shift_indices_for_split_rows(board):
    fill_row(board, 19)
    fill_row(board, 18, gap=2)
    fill_row(board, 17)
    board.grid[16][5] = "S"
    info = board.clear_lines()
    assert info.count == 2
    assert info.indices == [19, 17]
    assert board.grid[19][2] is None and board.grid[19][0] == "X"
    assert board.grid[18][5] == "S"


def test_ghost_drop_row_on_empty_and_stacked_board(board):
    p = Piece.spawn("I")
    assert board.ghost_drop_row(p) == 19
    fill_row(board, 19, gap=9)
    assert board.ghost_drop_row(p) == 18
    assert p.y == 0


def test_custom_dimensions():
    b = Board(cols=4, rows=6)
    assert len(b.grid) == 6 and len(b.grid[0]) == 4
    assert not b.is_valid([[1]], 4, 0)
