from utils import is_consistent, is_solved, render_grid

# ---------- Legality ----------


def empty_board():
    return [[0] * 9 for _ in range(9)]


def test_empty_board_is_consistent():
    assert is_consistent(empty_board())
    assert not is_solved(empty_board())


def test_detects_row_violation():
    board = empty_board()
    board[0][0] = board[0][8] = 4
    assert not is_consistent(board)


def test_detects_column_violation():
    board = empty_board()
    board[0][5] = board[7][5] = 2
    assert not is_consistent(board)


def test_detects_block_violation():
    board = empty_board()
    board[3][3] = board[5][5] = 9
    assert not is_consistent(board)


def test_full_shifted_board_is_solved():
    board = [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]
    assert is_solved(board)


# ---------- Rendering ----------


def test_render_separators():
    text = render_grid([1] * 81)
    lines = text.split("\n")
    assert len(lines) == 11
    assert lines[0] == "1 1 1 | 1 1 1 | 1 1 1 "
    assert lines[3] == "----------------------"
    assert lines[7] == "----------------------"


def test_render_blank_cells():
    values = [0] * 81
    values[4] = 6
    first_row = render_grid(values).split("\n")[0]
    assert first_row == "      |   6   |       "
